from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence

from subtitle_segmenter.config import DEFAULT_SETTINGS, SegmenterSettings

MAX_LINES = 2


@dataclass(frozen=True)
class QualityVerdict:
    """Outcome of the quality gate for one candidate split.

    ``reason`` names the first rule that rejected the candidate, or
    ``"single"``/``"ok"`` when it was accepted.
    """

    accepted: bool
    reason: str

    def __bool__(self) -> bool:
        return self.accepted


def _too_many_short(segments: Sequence[str], settings: SegmenterSettings) -> bool:
    short = sum(1 for s in segments if len(s.strip()) < settings.short_segment_chars)
    return short > len(segments) * settings.short_segment_ratio


def _has_blank(segments: Sequence[str], settings: SegmenterSettings) -> bool:
    return any(not s.strip() for s in segments)


def _has_hyphen_break(segments: Sequence[str], settings: SegmenterSettings) -> bool:
    return any(s.strip().startswith("-") or s.strip().endswith("-") for s in segments)


def _is_unbalanced(segments: Sequence[str], settings: SegmenterSettings) -> bool:
    avg = sum(len(s) for s in segments) / len(segments)
    low, high = avg * settings.balance_min_ratio, avg * settings.balance_max_ratio
    return any(len(s) < low or len(s) > high for s in segments)


_REJECTIONS: tuple[tuple[str, Callable[[Sequence[str], SegmenterSettings], bool]], ...] = (
    ("too_many_lines", lambda segs, _: len(segs) > MAX_LINES),
    ("empty_segment", _has_blank),
    ("too_many_short", _too_many_short),
    ("hyphen_break", _has_hyphen_break),
    ("unbalanced", _is_unbalanced),
)


def evaluate(
    segments: Sequence[str], settings: SegmenterSettings = DEFAULT_SETTINGS
) -> QualityVerdict:
    """Apply the quality rules to ``segments`` in order; first rejection wins."""
    if len(segments) <= 1:
        return QualityVerdict(True, "single")
    reason = next((name for name, rule in _REJECTIONS if rule(segments, settings)), None)
    return QualityVerdict(reason is None, reason or "ok")


def accept(
    segments: Sequence[str], settings: SegmenterSettings = DEFAULT_SETTINGS
) -> bool:
    """Return ``True`` when ``segments`` pass the quality gate."""
    return evaluate(segments, settings).accepted
