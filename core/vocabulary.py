"""
Vocabulary extraction for sentence cards.

Picks the first few "interesting" words of a sentence with a naive
stop-word filter. No stemming and no deduplication across sentences.
"""

from __future__ import annotations

import re
from typing import Final


MAX_NEW_WORDS: Final[int] = 3
MIN_WORD_LENGTH: Final[int] = 4  # words of 3 letters or fewer are skipped

STOP_WORDS: Final[frozenset[str]] = frozenset({
    "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for",
    "of", "with", "by", "is", "are", "was", "were", "be", "been", "have",
    "has", "had", "do", "does", "did", "will", "would", "could", "should",
    "may", "might", "can", "must", "shall",
})

_PUNCTUATION_RE = re.compile(r"[^\w\s]")


def tokenize(text: str) -> list[str]:
    """Lowercase, strip punctuation and split on whitespace."""
    return _PUNCTUATION_RE.sub("", text.lower()).split()


def is_new_word_candidate(token: str) -> bool:
    return len(token) >= MIN_WORD_LENGTH and token not in STOP_WORDS


def extract_new_words(text: str, limit: int = MAX_NEW_WORDS) -> tuple[str, ...]:
    """
    Extract up to `limit` vocabulary words from a sentence.

    Args:
        text: Sentence text
        limit: Maximum number of words to return

    Returns:
        Surviving tokens in their original order
    """
    candidates = [token for token in tokenize(text) if is_new_word_candidate(token)]
    return tuple(candidates[:limit])
