"""Placeholder protection for substrings that must survive splitting intact."""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import reduce
from typing import Iterable, NamedTuple

from subtitle_segmenter.patterns import (
    DEFAULT_PATTERNS,
    DELIMITER_ESCAPE,
    PLACEHOLDER_RE,
    PatternKind,
    ProtectedPattern,
)


class Capture(NamedTuple):
    """One protected substring and the placeholder index it was stored under."""

    index: int
    kind: PatternKind
    original: str


@dataclass(frozen=True)
class ProtectionTable:
    """Rewritten text plus the captures needed to undo the rewrite."""

    text: str
    captures: tuple[Capture, ...] = ()

    def __len__(self) -> int:
        return len(self.captures)

    def lookup(self, kind_value: str, index: int) -> Capture | None:
        """Return the capture for ``(kind, index)`` or ``None`` when unknown."""
        if not 0 <= index < len(self.captures):
            return None
        capture = self.captures[index]
        return capture if capture.kind.value == kind_value else None


def _apply_pattern(table: ProtectionTable, pattern: ProtectedPattern) -> ProtectionTable:
    """Replace every match of ``pattern`` in ``table.text`` with a placeholder."""
    captured: list[Capture] = []
    start = len(table.captures)

    def _sub(match: re.Match[str]) -> str:
        index = start + len(captured)
        captured.append(Capture(index, pattern.kind, match.group(0)))
        return pattern.kind.placeholder(index)

    text = pattern.matcher.sub(_sub, table.text)
    return ProtectionTable(text=text, captures=table.captures + tuple(captured))


def protect(
    text: str, patterns: Iterable[ProtectedPattern] = DEFAULT_PATTERNS
) -> ProtectionTable:
    """Return ``text`` with protected substrings swapped for placeholders.

    Patterns run in the given order over the progressively rewritten text and
    share one increasing index. Raw runs of underscores are escaped first, so
    text shaped like a placeholder can never be mistaken for one.
    """
    return reduce(_apply_pattern, (DELIMITER_ESCAPE, *patterns), ProtectionTable(text=text))


def restore(segment: str, table: ProtectionTable) -> str:
    """Replace every known placeholder in ``segment`` with its original text.

    Unknown or mismatched tokens are left untouched. Captures may contain
    placeholders of earlier captures; those are resolved recursively.
    """
    if not table.captures:
        return segment

    def _sub(match: re.Match[str]) -> str:
        capture = table.lookup(match.group(1), int(match.group(2)))
        if capture is None:
            return match.group(0)
        return restore(capture.original, table)

    return PLACEHOLDER_RE.sub(_sub, segment)
