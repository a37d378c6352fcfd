"""
Progress metrics for the status bar and word progress table.
"""

from __future__ import annotations

from datetime import datetime
from typing import Mapping, Optional

import pandas as pd

from core.review.scheduler import is_due, utc_now
from core.schemas import LearnedWordData


MONTHLY_GOAL = 50

WORD_STATUS_NEW = "new"
WORD_STATUS_LEARNED = "learned"
WORD_STATUS_REVIEW = "review"
WORD_STATUS_KNOWN = "known"

PROGRESS_COLUMNS = ["word", "status", "review_count", "last_seen", "next_review"]


def goal_progress_percent(monthly_words: int, goal: int = MONTHLY_GOAL) -> float:
    """Share of the monthly goal reached, capped at 100."""
    return min(monthly_words / goal * 100, 100.0)


def word_status(
    record: Optional[LearnedWordData],
    review_words: frozenset[str] | set[str],
    word: str
) -> str:
    """
    Classify a word chip.

    Review takes precedence over learned; a word that was marked known
    shows as new on the card.
    """
    if word in review_words:
        return WORD_STATUS_REVIEW
    if record is not None and record.learned:
        return WORD_STATUS_LEARNED
    return WORD_STATUS_NEW


def build_word_progress_df(
    learned_words: Mapping[str, LearnedWordData],
    now: Optional[datetime] = None
) -> pd.DataFrame:
    """
    Tabulate every word record, most recently seen first.
    """
    if not learned_words:
        return pd.DataFrame(columns=PROGRESS_COLUMNS)

    now = now or utc_now()
    rows = []
    for word, record in learned_words.items():
        if not record.learned:
            status = WORD_STATUS_KNOWN
        elif is_due(record, now):
            status = WORD_STATUS_REVIEW
        else:
            status = WORD_STATUS_LEARNED
        rows.append({
            "word": word,
            "status": status,
            "review_count": record.review_count,
            "last_seen": record.last_seen,
            "next_review": record.next_review,
        })

    df = pd.DataFrame(rows, columns=PROGRESS_COLUMNS)
    return df.sort_values("last_seen", ascending=False, na_position="last").reset_index(drop=True)
