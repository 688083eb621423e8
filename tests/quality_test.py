import pytest

from subtitle_segmenter.config import SegmenterSettings
from subtitle_segmenter.quality import QualityVerdict, accept, evaluate

LONG = "a considerably longer opening line of subtitle text here"


@pytest.mark.parametrize(
    "segments,reason",
    [
        ([], "single"),
        (["only one line"], "single"),
        (["first line is fine", "second line is fine", "third line"], "too_many_lines"),
        (["hello world, this is fine", "   "], "empty_segment"),
        (["tiny", "a much longer line of text here"], "too_many_short"),
        (["this line ends with a dash -", "and this one continues here"], "hyphen_break"),
        (["this line is fine enough", "-starts with a hyphen here"], "hyphen_break"),
        ([LONG, "tail end"], "unbalanced"),
        (["the first half of it", "the second half of it"], "ok"),
    ],
)
def test_evaluate_reasons(segments: list[str], reason: str) -> None:
    verdict = evaluate(segments)
    assert verdict.reason == reason
    assert verdict.accepted is (reason in {"single", "ok"})


def test_accept_matches_verdict() -> None:
    assert accept(["the first half of it", "the second half of it"]) is True
    assert accept([LONG, "tail end"]) is False


def test_verdict_truthiness() -> None:
    assert QualityVerdict(True, "ok")
    assert not QualityVerdict(False, "unbalanced")


def test_balance_window_from_settings() -> None:
    relaxed = SegmenterSettings(balance_min_ratio=0.1)
    assert evaluate([LONG, "tail end"], relaxed) == QualityVerdict(True, "ok")


def test_two_line_cap_is_fixed() -> None:
    lenient = SegmenterSettings(short_segment_ratio=1.0, balance_min_ratio=0.0)
    assert not accept(["line one here", "line two here", "line three"], lenient)
