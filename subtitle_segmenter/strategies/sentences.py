"""Sentence-boundary splitting for CJK and English subtitle text."""

from __future__ import annotations

import re
from typing import Iterator, List

_CJK_BOUNDARY = re.compile(r"(?<=[。！？])\s*")
_TERMINAL_MARKS = frozenset(".!?")


def _is_ascii_upper(ch: str) -> bool:
    return "A" <= ch <= "Z"


def _non_blank(pieces: List[str]) -> List[str]:
    return [p for p in pieces if p and p.strip()]


def split_cjk_sentences(text: str) -> List[str]:
    """Split after every ``。！？``, dropping the whitespace that follows."""
    return _non_blank(_CJK_BOUNDARY.split(text))


def english_boundaries(text: str) -> Iterator[tuple[int, int]]:
    """Yield ``(end, resume)`` spans for English sentence boundaries.

    A boundary sits after a ``.``, ``!`` or ``?`` that is not preceded by an
    uppercase ASCII letter and is followed by whitespace and then an
    uppercase ASCII letter. ``end`` is the index just past the mark and
    ``resume`` the index of that uppercase letter.
    """
    n = len(text)
    i = 1
    while i < n:
        if text[i] in _TERMINAL_MARKS and not _is_ascii_upper(text[i - 1]):
            j = i + 1
            while j < n and text[j].isspace():
                j += 1
            if j > i + 1 and j < n and _is_ascii_upper(text[j]):
                yield i + 1, j
                i = j
                continue
        i += 1


def split_english_sentences(text: str) -> List[str]:
    """Split ``text`` at every English sentence boundary."""
    pieces: List[str] = []
    start = 0
    for end, resume in english_boundaries(text):
        pieces.append(text[start:end])
        start = resume
    pieces.append(text[start:])
    return _non_blank(pieces)


def split_sentences(text: str) -> List[str]:
    """Return sentence pieces of ``text``, or ``[text]`` when there are none.

    CJK terminal punctuation wins; the English heuristic is only consulted
    when the CJK pass yields fewer than two pieces.
    """
    for splitter in (split_cjk_sentences, split_english_sentences):
        pieces = splitter(text)
        if len(pieces) > 1:
            return pieces
    return [text]
