"""
Data models for sentences, quotes and learned-word records.

QuotePayload validates items coming back from the quotes API.
Sentence and LearnedWordData are the in-memory learning state.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


DEFAULT_TOPIC = "Genel"


# ---- API Payloads ----

class QuotePayload(BaseModel):
    """A single quote as returned by the quotes API."""
    content: str = Field(..., description="Quote text (English)")
    author: str = Field(..., description="Quote author")
    tags: list[str] = Field(default_factory=list, description="Topic tags")


# ---- Learning State ----

@dataclass(frozen=True)
class Sentence:
    """
    One learning unit shown on the card.

    `turkish` holds whatever translation the source could provide; for
    API quotes this is a placeholder, not a real translation.
    """
    english: str
    turkish: str
    new_words: tuple[str, ...]
    topic: str = DEFAULT_TOPIC
    author: Optional[str] = None


@dataclass(frozen=True)
class LearnedWordData:
    """
    Review state for a single word.

    next_review is None when the word is not scheduled.
    """
    learned: bool = False
    last_seen: Optional[datetime] = None
    review_count: int = 0
    next_review: Optional[datetime] = None
