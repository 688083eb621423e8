"""Subtitle segmentation state machine.

The orchestrator decides how one subtitle line is shown in at most two
stacked lines. Tiers are tried in order and the first candidate accepted by
the quality gate wins:

1. short text (``<= short_circuit_chars``) is returned verbatim
2. sentence boundaries (CJK, then English)
3. clause punctuation (commas, semicolons, colons)
4. greedy word wrap, only for text longer than ``word_wrap_min_chars``
5. otherwise the whole text, unsplit

Protected substrings (ellipses, abbreviations, decimals, quotes, links) are
replaced by placeholders before any tier runs and restored afterwards, so no
tier can cut through them.

- The engine is pure: same text and settings, same result.
- It never raises; internal failures degrade to ``[text]``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, List, Sequence

from subtitle_segmenter.config import DEFAULT_SETTINGS, SegmenterSettings
from subtitle_segmenter.patterns import patterns_for
from subtitle_segmenter.protection import ProtectionTable, protect, restore
from subtitle_segmenter.quality import QualityVerdict, evaluate
from subtitle_segmenter.strategies import split_phrases, split_sentences, wrap_words

logger = logging.getLogger(__name__)


class Tier(Enum):
    """Orchestrator state that produced a result."""

    SHORT = "short"
    SENTENCE = "sentence"
    PHRASE = "phrase"
    WORD_WRAP = "word_wrap"
    FALLBACK = "fallback"
    ERROR = "error"


NO_SPLIT = QualityVerdict(False, "no_split")


@dataclass(frozen=True)
class TierAttempt:
    """One tried tier: its restored candidate lines and the gate's verdict."""

    tier: Tier
    candidate: tuple[str, ...]
    verdict: QualityVerdict

    def to_dict(self) -> Dict[str, Any]:
        return {
            "tier": self.tier.value,
            "candidate": list(self.candidate),
            "accepted": self.verdict.accepted,
            "reason": self.verdict.reason,
        }


@dataclass(frozen=True)
class SegmentationTrace:
    """Result of :func:`explain`: the lines plus how they were chosen."""

    text: str
    lines: tuple[str, ...]
    tier: Tier
    attempts: tuple[TierAttempt, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "text": self.text,
            "lines": list(self.lines),
            "tier": self.tier.value,
            "attempts": [a.to_dict() for a in self.attempts],
        }


Splitter = Callable[[str], List[str]]


def _preview(text: str, limit: int = 60) -> str:
    return text if len(text) <= limit else f"{text[:limit]}…"


def _tiers(settings: SegmenterSettings) -> tuple[tuple[Tier, Splitter, bool], ...]:
    """Return ``(tier, splitter, wants_long_text)`` in priority order."""
    return (
        (Tier.SENTENCE, split_sentences, False),
        (Tier.PHRASE, lambda t: split_phrases(t, settings.min_phrase_chars), False),
        (Tier.WORD_WRAP, lambda t: wrap_words(t, settings.max_line_chars), True),
    )


def _restore_lines(candidate: Sequence[str], table: ProtectionTable) -> tuple[str, ...]:
    restored = (restore(piece, table).strip() for piece in candidate)
    return tuple(line for line in restored if line)


def _attempt(
    tier: Tier, splitter: Splitter, table: ProtectionTable, settings: SegmenterSettings
) -> TierAttempt:
    candidate = splitter(table.text)
    if len(candidate) <= 1:
        return TierAttempt(tier, (), NO_SPLIT)
    verdict = evaluate(candidate, settings)
    logger.debug(
        "%s tier: %d pieces, %s (%s)",
        tier.value,
        len(candidate),
        "accepted" if verdict.accepted else "rejected",
        verdict.reason,
    )
    return TierAttempt(tier, _restore_lines(candidate, table), verdict)


def _run_tiers(text: str, settings: SegmenterSettings) -> SegmentationTrace:
    table = protect(text, patterns_for(settings))
    logger.debug("protected %d substrings in %r", len(table), _preview(text))
    attempts: List[TierAttempt] = []
    for tier, splitter, wants_long_text in _tiers(settings):
        if wants_long_text and len(table.text) <= settings.word_wrap_min_chars:
            continue
        attempt = _attempt(tier, splitter, table, settings)
        attempts.append(attempt)
        if attempt.verdict.accepted and attempt.candidate:
            return SegmentationTrace(text, attempt.candidate, tier, tuple(attempts))
    return SegmentationTrace(
        text, (restore(table.text, table),), Tier.FALLBACK, tuple(attempts)
    )


def explain(text: str, settings: SegmenterSettings | None = None) -> SegmentationTrace:
    """Segment ``text`` and report which tier produced the lines.

    Any exception raised while protecting, splitting, evaluating or
    restoring is logged and answered with the unmodified text.
    """
    settings = settings or DEFAULT_SETTINGS
    if len(text) <= settings.short_circuit_chars:
        return SegmentationTrace(text, (text,), Tier.SHORT)
    try:
        return _run_tiers(text, settings)
    except Exception:
        logger.warning(
            "segmentation failed for %r; returning text unsplit",
            _preview(text),
            exc_info=True,
        )
        return SegmentationTrace(text, (text,), Tier.ERROR)


def segment(text: str, settings: SegmenterSettings | None = None) -> List[str]:
    """Return ``text`` as one or two display lines."""
    return list(explain(text, settings).lines)
