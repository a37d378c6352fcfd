"""
Review Scheduler

Maps a review count to the next due time and finds words that are due.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Mapping, Optional

from core.review.constants import MAX_INTERVAL_INDEX, REVIEW_INTERVALS_DAYS
from core.schemas import LearnedWordData


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def get_review_interval(review_count: int) -> timedelta:
    """
    Get the review offset for a review count.

    Args:
        review_count: Number of completed reviews (>= 0)

    Returns:
        Offset from the fixed interval table, clamped at the last bucket
    """
    index = min(max(review_count, 0), MAX_INTERVAL_INDEX)
    return timedelta(days=REVIEW_INTERVALS_DAYS[index])


def get_next_review_date(
    review_count: int,
    now: Optional[datetime] = None
) -> datetime:
    """Compute when a word with `review_count` reviews is next due."""
    now = now or utc_now()
    return now + get_review_interval(review_count)


def is_due(record: LearnedWordData, now: datetime) -> bool:
    """True when a learned word has reached its review time."""
    return (
        record.learned
        and record.next_review is not None
        and now >= record.next_review
    )


def find_due_words(
    learned_words: Mapping[str, LearnedWordData],
    now: Optional[datetime] = None
) -> frozenset[str]:
    """
    Recompute the full set of words that need review.

    Args:
        learned_words: Word -> review state
        now: Scan time (defaults to current UTC time)

    Returns:
        Words whose next review has elapsed
    """
    now = now or utc_now()
    return frozenset(
        word for word, record in learned_words.items()
        if is_due(record, now)
    )
