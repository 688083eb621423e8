"""Clause-punctuation splitting used when sentence splitting fails."""

from __future__ import annotations

import re
from typing import List

from subtitle_segmenter.config import DEFAULT_SETTINGS

_PHRASE_BOUNDARY = re.compile(r"(?<=[,，;；:：])\s*")

MIN_PHRASE_CHARS = DEFAULT_SETTINGS.min_phrase_chars


def split_phrases(text: str, min_phrase_chars: int = MIN_PHRASE_CHARS) -> List[str]:
    """Split after commas, semicolons and colons (ASCII and full-width).

    Comma-heavy text is left whole: more than two pieces with any piece
    shorter than ``min_phrase_chars`` returns ``[text]``.
    """
    pieces = [p for p in _PHRASE_BOUNDARY.split(text) if p and p.strip()]
    if len(pieces) > 2 and any(len(p.strip()) < min_phrase_chars for p in pieces):
        return [text]
    return pieces if len(pieces) > 1 else [text]
