"""Splitting tiers, tried by the orchestrator in priority order."""

from .phrases import MIN_PHRASE_CHARS, split_phrases  # noqa: F401
from .sentences import (  # noqa: F401
    english_boundaries,
    split_cjk_sentences,
    split_english_sentences,
    split_sentences,
)
from .words import MAX_LINE_CHARS, hard_split, wrap_words  # noqa: F401

__all__ = [
    "MAX_LINE_CHARS",
    "MIN_PHRASE_CHARS",
    "english_boundaries",
    "hard_split",
    "split_cjk_sentences",
    "split_english_sentences",
    "split_phrases",
    "split_sentences",
    "wrap_words",
]
