"""Greedy word wrapping, the last-resort splitting tier."""

from __future__ import annotations

from typing import Iterator, List

from subtitle_segmenter.config import DEFAULT_SETTINGS
from subtitle_segmenter.patterns import PLACEHOLDER_RE

MAX_LINE_CHARS = DEFAULT_SETTINGS.max_line_chars


def _atoms(token: str) -> Iterator[str]:
    """Yield single characters of ``token``, keeping placeholders whole."""
    pos = 0
    for match in PLACEHOLDER_RE.finditer(token):
        yield from token[pos : match.start()]
        yield match.group(0)
        pos = match.end()
    yield from token[pos:]


def hard_split(token: str, max_chars: int = MAX_LINE_CHARS) -> List[str]:
    """Cut ``token`` into consecutive chunks of at most ``max_chars``.

    Placeholders are never cut; one longer than ``max_chars`` becomes a chunk
    of its own.
    """
    chunks: List[str] = []
    current = ""
    for atom in _atoms(token):
        if current and len(current) + len(atom) > max_chars:
            chunks.append(current)
            current = ""
        current += atom
    if current:
        chunks.append(current)
    return chunks


def wrap_words(text: str, max_line_chars: int = MAX_LINE_CHARS) -> List[str]:
    """Pack whitespace-delimited tokens into lines of ``max_line_chars``.

    Returns ``[text]`` when everything fits on one line.
    """
    lines: List[str] = []
    current = ""
    for word in text.split():
        candidate = f"{current} {word}" if current else word
        if len(candidate) <= max_line_chars:
            current = candidate
            continue
        if current:
            lines.append(current)
            current = ""
        if len(word) <= max_line_chars:
            current = word
        else:
            lines.extend(hard_split(word, max_line_chars))
    if current:
        lines.append(current)
    return lines if len(lines) > 1 else [text]
