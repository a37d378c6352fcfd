"""
Environment configuration.

Values come from the process environment, with a local .env file loaded
first. Each helper reads the variable on call so tests can override it.
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

# Load environment
load_dotenv()


DEFAULT_QUOTES_API_URL = "https://api.quotable.io/quotes/random"
DEFAULT_QUOTES_BATCH_SIZE = 10
DEFAULT_QUOTES_MIN_LENGTH = 30
DEFAULT_QUOTES_MAX_LENGTH = 120
DEFAULT_QUOTES_TIMEOUT = 10.0
DEFAULT_REVIEW_SCAN_SECONDS = 10


def _get_bool(name: str, default: bool = False) -> bool:
    return os.getenv(name, str(default)).lower() == "true"


def _get_number(name: str, default, cast=int):
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = cast(raw)
    except ValueError:
        raise ValueError(
            f"{name} must be a number, got {raw!r}"
        ) from None
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {raw!r}")
    return value


def get_quotes_api_url() -> str:
    """Get the quotes endpoint URL."""
    return os.getenv("QUOTES_API_URL") or DEFAULT_QUOTES_API_URL


def get_quotes_batch_size() -> int:
    """Number of quotes requested per fetch."""
    return _get_number("QUOTES_BATCH_SIZE", DEFAULT_QUOTES_BATCH_SIZE)


def get_quotes_length_range() -> tuple[int, int]:
    """
    Get the (min, max) quote length sent to the API.

    Raises:
        ValueError: If min is greater than max
    """
    min_length = _get_number("QUOTES_MIN_LENGTH", DEFAULT_QUOTES_MIN_LENGTH)
    max_length = _get_number("QUOTES_MAX_LENGTH", DEFAULT_QUOTES_MAX_LENGTH)
    if min_length > max_length:
        raise ValueError(
            f"QUOTES_MIN_LENGTH ({min_length}) is greater than "
            f"QUOTES_MAX_LENGTH ({max_length})"
        )
    return min_length, max_length


def get_quotes_timeout() -> float:
    """Request timeout in seconds."""
    return _get_number("QUOTES_TIMEOUT", DEFAULT_QUOTES_TIMEOUT, cast=float)


def is_offline_mode() -> bool:
    """Check if the quotes API should be skipped."""
    return _get_bool("QUOTES_OFFLINE")


def get_review_scan_seconds() -> int:
    """Period of the background review scan."""
    return _get_number("REVIEW_SCAN_SECONDS", DEFAULT_REVIEW_SCAN_SECONDS)
