"""Live statistics for the text buffer."""

from __future__ import annotations
import math

from models.text_models import StatsSnapshot

__all__ = [
    "WORDS_PER_MINUTE",
    "count_characters",
    "count_words",
    "reading_time",
    "compute_stats",
    "format_count",
    "format_reading_time",
]

WORDS_PER_MINUTE = 200


def count_characters(text: str) -> int:
    """Return the raw length of *text*, whitespace included."""
    return len(text)


def count_words(text: str) -> int:
    """Return the number of whitespace-separated words in *text*."""
    stripped = text.strip()
    if not stripped:
        return 0
    return len(stripped.split())


def reading_time(word_count: int, words_per_minute: int = WORDS_PER_MINUTE) -> int:
    """Estimate reading time in whole minutes.

    Args:
        word_count: Number of words in the text.
        words_per_minute: Assumed reading speed.

    Returns:
        ``0`` for empty text, otherwise at least one minute.
    """
    if word_count <= 0:
        return 0
    return max(1, math.ceil(word_count / words_per_minute))


def compute_stats(text: str, words_per_minute: int = WORDS_PER_MINUTE) -> StatsSnapshot:
    """Build a fresh ``StatsSnapshot`` for *text*."""
    words = count_words(text)
    return StatsSnapshot(
        word_count=words,
        char_count=count_characters(text),
        reading_minutes=reading_time(words, words_per_minute),
    )


def format_count(value: int) -> str:
    """Format an integer with thousands separators, e.g. ``12,345``."""
    return f"{value:,}"


def format_reading_time(minutes: int) -> str:
    return f"{minutes} min"
