"""
Word status transitions.

Both transitions are total: an unseen word starts from an empty record.
Records are immutable; each transition returns a replacement.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from core.review.scheduler import get_next_review_date, utc_now
from core.schemas import LearnedWordData


def mark_learned(
    record: Optional[LearnedWordData],
    now: Optional[datetime] = None
) -> LearnedWordData:
    """
    Record a successful "learned" decision.

    The due date uses the interval for the count before this review, so
    the first learn is due after one day and the second after three.
    """
    now = now or utc_now()
    record = record or LearnedWordData()
    return LearnedWordData(
        learned=True,
        last_seen=now,
        review_count=record.review_count + 1,
        next_review=get_next_review_date(record.review_count, now),
    )


def mark_known(now: Optional[datetime] = None) -> LearnedWordData:
    """Record an "already known" decision; the word leaves the review queue."""
    return LearnedWordData(
        learned=False,
        last_seen=now or utc_now(),
        review_count=0,
        next_review=None,
    )
