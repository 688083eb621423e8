from subtitle_segmenter.strategies.words import hard_split, wrap_words

LINE_ONE = "silence between passing streets overhead"
LINE_TWO = "shadows lengthen quietly without warning"


def test_packs_words_greedily() -> None:
    assert len(LINE_ONE) == 40 and len(LINE_TWO) == 40
    assert wrap_words(f"{LINE_ONE} {LINE_TWO}") == [LINE_ONE, LINE_TWO]


def test_single_line_returns_text() -> None:
    assert wrap_words("short text  here") == ["short text  here"]


def test_lines_respect_width() -> None:
    text = " ".join(["subtitle"] * 30)
    lines = wrap_words(text, max_line_chars=25)
    assert all(len(line) <= 25 for line in lines)
    assert " ".join(lines) == text


def test_hard_splits_long_token() -> None:
    assert wrap_words("x" * 90) == ["x" * 40, "x" * 40, "x" * 10]


def test_hard_split_after_open_line() -> None:
    assert wrap_words("ab " + "y" * 50) == ["ab", "y" * 40, "y" * 10]


def test_hard_split_keeps_placeholders_whole() -> None:
    token = "a" * 35 + "___QUOTED_0___"
    assert hard_split(token) == ["a" * 35, "___QUOTED_0___"]


def test_oversized_placeholder_is_its_own_chunk() -> None:
    assert hard_split("___QUOTED_0___b", max_chars=5) == ["___QUOTED_0___", "b"]


def test_whitespace_only() -> None:
    assert wrap_words("   ") == ["   "]
