import pytest

from lineedit.segments import grapheme_indices, is_whitespace_str, word_bound_indices

TEXTS = [
    "",
    "abc def ghi",
    "abc def-ghi",
    "abc.def ghi",
    "abc def   i",
    "word😇 with emoji",
    "weirdö characters",
    "line 1\r\nline 2",
    "This \r\n is a test",
    "ｎｕｓｈｅｌｌ",
    "a  b\t\tc",
    "e\u0301t\u00e9",
    "line 1\n😇line 2",
]

ASCII_TEXTS = [t for t in TEXTS if t.isascii()]


def _pieces(text):
    return [piece for _, piece in word_bound_indices(text)]


@pytest.mark.parametrize("text", TEXTS)
@pytest.mark.parametrize("segmenter", [grapheme_indices, word_bound_indices])
def test_pieces_rebuild_text(segmenter, text):
    assert "".join(piece for _, piece in segmenter(text)) == text


@pytest.mark.parametrize("text", TEXTS)
@pytest.mark.parametrize("segmenter", [grapheme_indices, word_bound_indices])
def test_offsets_are_running_byte_lengths(segmenter, text):
    running = 0
    for offset, piece in segmenter(text):
        assert offset == running
        running += len(piece.encode("utf-8"))
    assert running == len(text.encode("utf-8"))


@pytest.mark.parametrize("text", TEXTS)
@pytest.mark.parametrize("segmenter", [grapheme_indices, word_bound_indices])
def test_no_empty_pieces(segmenter, text):
    assert all(piece for _, piece in segmenter(text))


@pytest.mark.parametrize("text", TEXTS)
def test_word_bounds_fall_on_grapheme_bounds(text):
    grapheme_offsets = {offset for offset, _ in grapheme_indices(text)}
    word_offsets = {offset for offset, _ in word_bound_indices(text)}
    assert word_offsets <= grapheme_offsets


@pytest.mark.parametrize("text", ASCII_TEXTS)
def test_ascii_pieces_are_all_or_no_whitespace(text):
    for piece in _pieces(text):
        assert is_whitespace_str(piece) or not any(c.isspace() for c in piece)


def test_empty_text_has_no_pieces():
    assert list(grapheme_indices("")) == []
    assert list(word_bound_indices("")) == []


def test_grapheme_offsets_for_multibyte_text():
    assert [offset for offset, _ in grapheme_indices("a😇c")] == [0, 1, 5]


def test_crlf_is_one_grapheme():
    assert list(grapheme_indices("\r\n")) == [(0, "\r\n")]


def test_combining_mark_stays_with_base():
    clusters = [cluster for _, cluster in grapheme_indices("e\u0301x")]
    assert clusters[0] == "e\u0301"
    assert len(clusters) == 2


def test_period_between_letters_joins_word():
    assert _pieces("abc.def ghi") == ["abc.def", " ", "ghi"]


def test_hyphen_separates_words():
    pieces = _pieces("abc-def ghi")
    assert "-" in pieces
    assert "abc" in pieces
    assert "def" in pieces


def test_emoji_is_separate_from_word():
    pieces = _pieces("word😇 with emoji")
    assert "word" in pieces
    assert "😇" in pieces


def test_space_run_is_one_piece():
    assert "   " in _pieces("abc def   i")


def test_newline_is_its_own_piece():
    pieces = _pieces("a\nb")
    assert "\n" in pieces
    assert "a" in pieces


def test_non_ascii_letters_join_word():
    assert "weirdö" in _pieces("weirdö characters")


@pytest.mark.parametrize(
    "text, expected",
    [
        ("", True),
        ("   ", True),
        ("\t\n", True),
        ("\r\n", True),
        (" a ", False),
        ("x", False),
        ("\x1c", False),
    ],
)
def test_is_whitespace_str(text, expected):
    assert is_whitespace_str(text) is expected