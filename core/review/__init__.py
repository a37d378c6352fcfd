"""
Review - fixed-interval spaced repetition for learned words.

Quick start:
    from core import review

    record = review.mark_learned(None)
    due = review.find_due_words({"magic": record})
"""

from core.review.constants import REVIEW_INTERVALS_DAYS, MAX_INTERVAL_INDEX
from core.review.scheduler import (
    utc_now,
    get_review_interval,
    get_next_review_date,
    is_due,
    find_due_words,
)
from core.review.transitions import mark_learned, mark_known


__all__ = [
    "REVIEW_INTERVALS_DAYS",
    "MAX_INTERVAL_INDEX",
    "utc_now",
    "get_review_interval",
    "get_next_review_date",
    "is_due",
    "find_due_words",
    "mark_learned",
    "mark_known",
]
