"""
Review Constants

Fixed spaced-repetition parameters for learned words.
"""

from typing import Final


# ---- Review Intervals ----
# Days until the next review, indexed by review count (clamped at the end)

REVIEW_INTERVALS_DAYS: Final[tuple[int, ...]] = (1, 3, 7, 14, 30)

MAX_INTERVAL_INDEX: Final[int] = len(REVIEW_INTERVALS_DAYS) - 1

