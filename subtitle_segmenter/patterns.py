"""Registry of substrings that must never be split across subtitle lines.

Each :class:`ProtectedPattern` pairs a :class:`PatternKind` with a compiled
matcher. Patterns are applied in the order of :data:`DEFAULT_PATTERNS`; a
later matcher sees the text already rewritten by earlier ones, so ellipses
are claimed before abbreviations, decimals before time stamps, and so on.

Matchers use ASCII semantics for ``\\b``, ``\\w`` and ``\\d`` so that CJK
characters count as word boundaries next to Latin text.

:data:`DELIMITER_ESCAPE` is not part of the registry; the protector always
applies it first, whatever patterns are active.

Usage:
    patterns = patterns_for(settings)  # drops link kinds when disabled
    for pattern in patterns:
        pattern.matcher.finditer(text)
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from subtitle_segmenter.config import SegmenterSettings


class PatternKind(Enum):
    """Protected substring classes, in application order."""

    UNDERSCORE = "UNDERSCORE"
    ELLIPSIS = "ELLIPSIS"
    HELLIP = "HELLIP"
    ABBREV = "ABBREV"
    DECIMAL = "DECIMAL"
    TIME = "TIME"
    URL = "URL"
    EMAIL = "EMAIL"
    FILE = "FILE"
    MULTIMARK = "MULTIMARK"
    QUOTED = "QUOTED"
    SQUOTED = "SQUOTED"
    CNQUOTED = "CNQUOTED"
    CNQUOTED2 = "CNQUOTED2"

    @property
    def tag(self) -> str:
        """Return the placeholder prefix used for this kind."""
        return f"___{self.value}_"

    def placeholder(self, index: int) -> str:
        """Return the opaque token standing in for capture ``index``."""
        return f"{self.tag}{index}___"


LINK_KINDS = frozenset({PatternKind.URL, PatternKind.EMAIL, PatternKind.FILE})

_ABBREVIATIONS = (
    "Mr",
    "Mrs",
    "Ms",
    "Dr",
    "Prof",
    "Sr",
    "Jr",
    "vs",
    "etc",
    "Inc",
    "Ltd",
    "Corp",
    "Co",
    "LLC",
)


@dataclass(frozen=True)
class ProtectedPattern:
    """A substring class that is replaced by placeholders before splitting.

    Attributes:
        kind: Kind tag written into every placeholder
        matcher: Compiled regex; every non-overlapping match is protected
        description: Human-readable explanation (shown by the CLI)
    """

    kind: PatternKind
    matcher: re.Pattern[str]
    description: str


# Runs of underscores are escaped before any other pattern so that no raw
# text can complete or extend a placeholder delimiter.
DELIMITER_ESCAPE = ProtectedPattern(
    kind=PatternKind.UNDERSCORE,
    matcher=re.compile(r"_{3,}"),
    description="Run of three or more underscores (___)",
)


DEFAULT_PATTERNS: tuple[ProtectedPattern, ...] = (
    # Ellipses first so the dots never look like sentence ends
    ProtectedPattern(
        kind=PatternKind.ELLIPSIS,
        matcher=re.compile(r"\.{2,}"),
        description="ASCII ellipsis (.., ..., ....)",
    ),
    ProtectedPattern(
        kind=PatternKind.HELLIP,
        matcher=re.compile(r"…+"),
        description="Unicode ellipsis (…, ……)",
    ),
    ProtectedPattern(
        kind=PatternKind.ABBREV,
        matcher=re.compile(
            rf"\b(?:{'|'.join(_ABBREVIATIONS)})\.", re.IGNORECASE | re.ASCII
        ),
        description="English abbreviation with trailing period (Dr., vs., Inc.)",
    ),
    ProtectedPattern(
        kind=PatternKind.DECIMAL,
        matcher=re.compile(r"\b\d+\.\d+\b", re.ASCII),
        description="Decimal number (3.14)",
    ),
    ProtectedPattern(
        kind=PatternKind.TIME,
        matcher=re.compile(r"\b\d{1,2}[:：.]\d{2}\b", re.ASCII),
        description="Clock time (9:30, 12：05)",
    ),
    ProtectedPattern(
        kind=PatternKind.URL,
        matcher=re.compile(
            r"\b(?:https?://|www\.|ftp://)\S+", re.IGNORECASE | re.ASCII
        ),
        description="Web address (https://…, www.…)",
    ),
    ProtectedPattern(
        kind=PatternKind.EMAIL,
        matcher=re.compile(
            r"(?<![A-Za-z0-9._%+-])[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z|]{2,}\b",
            re.ASCII,
        ),
        description="E-mail address (name@example.com)",
    ),
    ProtectedPattern(
        kind=PatternKind.FILE,
        matcher=re.compile(r"(?<![\w.-])[\w.-]+\.[a-zA-Z]{2,4}\b", re.ASCII),
        description="File name or dotted token with extension (notes.txt)",
    ),
    ProtectedPattern(
        kind=PatternKind.MULTIMARK,
        matcher=re.compile(r"[!?]{2,}"),
        description="Repeated exclamation/question marks (?!, !!!)",
    ),
    ProtectedPattern(
        kind=PatternKind.QUOTED,
        matcher=re.compile(r'"[^"]*"'),
        description='Double-quoted span ("...")',
    ),
    ProtectedPattern(
        kind=PatternKind.SQUOTED,
        matcher=re.compile(r"'[^']*'"),
        description="Single-quoted span ('...')",
    ),
    ProtectedPattern(
        kind=PatternKind.CNQUOTED,
        matcher=re.compile(r"「[^」]*」"),
        description="CJK corner-bracket quote (「...」)",
    ),
    ProtectedPattern(
        kind=PatternKind.CNQUOTED2,
        matcher=re.compile(r"『[^』]*』"),
        description="CJK white corner-bracket quote (『...』)",
    ),
)

# Recognizes any placeholder token; the index is terminated by ``___``.
PLACEHOLDER_RE = re.compile(
    r"___(" + "|".join(k.value for k in PatternKind) + r")_(\d+)___", re.ASCII
)


def patterns_for(settings: SegmenterSettings | None = None) -> tuple[ProtectedPattern, ...]:
    """Return the active patterns for ``settings`` in application order."""
    if settings is None or settings.protect_links:
        return DEFAULT_PATTERNS
    return tuple(p for p in DEFAULT_PATTERNS if p.kind not in LINK_KINDS)
