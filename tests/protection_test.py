import pytest

from subtitle_segmenter.config import SegmenterSettings
from subtitle_segmenter.patterns import PatternKind, patterns_for
from subtitle_segmenter.protection import Capture, ProtectionTable, protect, restore


def test_protect_replaces_in_pattern_order() -> None:
    table = protect("Wait... Dr. Smith paid 3.50 dollars")
    assert table.text == "Wait___ELLIPSIS_0___ ___ABBREV_1___ Smith paid ___DECIMAL_2___ dollars"
    assert table.captures == (
        Capture(0, PatternKind.ELLIPSIS, "..."),
        Capture(1, PatternKind.ABBREV, "Dr."),
        Capture(2, PatternKind.DECIMAL, "3.50"),
    )


def test_restore_roundtrip() -> None:
    text = 'She said "see you at 9:30" and left… or did she?!'
    table = protect(text)
    assert len(table) > 0
    assert restore(table.text, table) == text


def test_restore_resolves_nested_captures() -> None:
    text = "Visit http://1.2.3.4/x today"
    table = protect(text)
    assert table.text == "Visit ___URL_2___ today"
    assert table.captures[2].original == "http://___DECIMAL_0___.___DECIMAL_1___/x"
    assert restore(table.text, table) == text


def test_restore_leaves_unknown_tokens() -> None:
    table = protect("Dr. Who arrived")
    assert restore("___ABBREV_9___", table) == "___ABBREV_9___"
    assert restore("___QUOTED_0___", table) == "___QUOTED_0___"


def test_restore_is_idempotent() -> None:
    table = protect("Mr. Brown owes 2.5 dollars...")
    once = restore(table.text, table)
    assert restore(once, table) == once


def test_restore_without_captures_is_identity() -> None:
    assert restore("___ABBREV_0___ stays", ProtectionTable(text="")) == "___ABBREV_0___ stays"


def test_placeholder_lookalike_input_is_escaped() -> None:
    text = "literal ___ABBREV_0___ next to Dr. Who..."
    table = protect(text)
    assert table.text == (
        "literal ___UNDERSCORE_0___ABBREV_0___UNDERSCORE_1___"
        " next to ___ABBREV_3___ Who___ELLIPSIS_2___"
    )
    assert table.captures[3] == Capture(3, PatternKind.ABBREV, "Dr.")
    assert restore(table.text, table) == text


@pytest.mark.parametrize(
    "text",
    [
        "ask Dr. Smith about FILE_2 today",
        "tag ___FILE_1... then notes.txt",
        "odd ____DECIMAL_0 and 3.5 more",
        "___ELLIPSIS_0___",
    ],
)
def test_kind_names_in_input_keep_protection(text: str) -> None:
    table = protect(text)
    assert len(table) > 0
    assert restore(table.text, table) == text


def test_digit_after_protected_span_is_not_read_as_index() -> None:
    text = "count...5 and more...0"
    table = protect(text)
    assert restore(table.text, table) == text


def test_link_protection_can_be_disabled() -> None:
    text = "open notes.txt now"
    assert protect(text).text == "open ___FILE_0___ now"
    disabled = patterns_for(SegmenterSettings(protect_links=False))
    assert protect(text, disabled).text == text


def test_restore_on_split_pieces() -> None:
    table = protect("He met Mr. Lee. They talked...")
    pieces = table.text.split(" ")
    assert " ".join(restore(p, table) for p in pieces) == "He met Mr. Lee. They talked..."
