"""
Quote source adapter.

Fetches quotes from a public quotes API and turns them into learning
sentences. Any failure falls back to a fixed pair of sentences so the
card always has something to show.
"""

from __future__ import annotations

from typing import Optional, Protocol

import requests
from pydantic import TypeAdapter

from core import config
from core.schemas import DEFAULT_TOPIC, QuotePayload, Sentence
from core.vocabulary import extract_new_words


HTTP_HEADERS = {
    "User-Agent": "EnglishAcademy/1.0 (Streamlit; educational app)",
    "Accept": "application/json",
}

FALLBACK_SENTENCES: tuple[Sentence, ...] = (
    Sentence(
        english="Any sufficiently advanced technology is equivalent to magic.",
        turkish="Yeterince gelişmiş herhangi bir teknoloji sihire eşdeğerdir.",
        new_words=("sufficient", "advanced", "technology", "equivalent", "magic"),
        topic="Technology",
    ),
    Sentence(
        english="A house divided against itself cannot stand.",
        turkish="Kendisine karşı bölünmüş bir ev ayakta duramaz.",
        new_words=("house", "divided", "against", "itself", "cannot", "stand"),
        topic="Politics",
    ),
)

_QUOTE_LIST = TypeAdapter(list[QuotePayload])


class QuoteSource(Protocol):
    """Anything that can produce a batch of quotes."""

    def fetch_quotes(self) -> list[QuotePayload]:
        ...


class QuotableClient:
    """
    Client for the quotable.io random quotes endpoint.

    Connection settings default to the environment configuration.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        limit: Optional[int] = None,
        min_length: Optional[int] = None,
        max_length: Optional[int] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = base_url or config.get_quotes_api_url()
        self.limit = limit or config.get_quotes_batch_size()
        if min_length is None or max_length is None:
            default_min, default_max = config.get_quotes_length_range()
            min_length = default_min if min_length is None else min_length
            max_length = default_max if max_length is None else max_length
        self.min_length = min_length
        self.max_length = max_length
        self.timeout = timeout or config.get_quotes_timeout()
        self.session = session or requests.Session()

    def fetch_quotes(self) -> list[QuotePayload]:
        """
        Fetch one batch of random quotes.

        Raises:
            requests.RequestException: On network errors or non-2xx responses
            ValueError: If the body is not JSON or fails validation
        """
        resp = self.session.get(
            self.base_url,
            params={
                "limit": self.limit,
                "minLength": self.min_length,
                "maxLength": self.max_length,
            },
            headers=HTTP_HEADERS,
            timeout=self.timeout,
        )
        resp.raise_for_status()
        return _QUOTE_LIST.validate_python(resp.json())


class OfflineSource:
    """Source used when the API is disabled; always yields nothing."""

    def fetch_quotes(self) -> list[QuotePayload]:
        return []


def get_default_source() -> QuoteSource:
    if config.is_offline_mode():
        print("[QUOTES] Offline mode - using fallback sentences")
        return OfflineSource()
    return QuotableClient()


def quote_to_sentence(quote: QuotePayload) -> Sentence:
    """
    Map an API quote to a learning sentence.

    The translation slot gets the quote followed by its author; there is
    no translation service behind it.
    """
    return Sentence(
        english=quote.content,
        turkish=f"{quote.content} - {quote.author}",
        new_words=extract_new_words(quote.content),
        topic=quote.tags[0] if quote.tags else DEFAULT_TOPIC,
        author=quote.author,
    )


def load_sentences(source: QuoteSource) -> list[Sentence]:
    """
    Load the next batch of sentences.

    Returns the fallback sentences if the source fails or yields nothing.
    """
    try:
        quotes = source.fetch_quotes()
    except (requests.RequestException, ValueError) as exc:
        print(f"[QUOTES] API error: {exc}")
        return list(FALLBACK_SENTENCES)

    if not quotes:
        print("[QUOTES] Empty batch - using fallback sentences")
        return list(FALLBACK_SENTENCES)

    print(f"[QUOTES] Loaded {len(quotes)} quotes")
    return [quote_to_sentence(quote) for quote in quotes]
