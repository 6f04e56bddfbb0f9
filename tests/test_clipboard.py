import pytest

from lineedit.clipboard import (
    Clipboard,
    ClipboardMode,
    LocalClipboard,
    get_local_clipboard,
)


def test_reads_back_local():
    cb = get_local_clipboard()
    previous_state = cb.get()[0]

    cb.set("test", ClipboardMode.NORMAL)
    assert len(cb) == 4
    assert cb.get()[0] == "test"
    cb.clear()
    assert cb.get()[0] == ""

    cb.set(previous_state, ClipboardMode.NORMAL)
    assert cb.get()[0] == previous_state


def test_new_clipboard_is_empty_and_normal():
    cb = LocalClipboard()
    assert cb.get() == ("", ClipboardMode.NORMAL)
    assert len(cb) == 0


def test_mode_is_kept():
    cb = LocalClipboard()
    cb.set("line\n", ClipboardMode.LINES)
    assert cb.get() == ("line\n", ClipboardMode.LINES)


def test_clear_resets_mode():
    cb = LocalClipboard()
    cb.set("line\n", ClipboardMode.LINES)
    cb.clear()
    assert cb.get() == ("", ClipboardMode.NORMAL)


def test_len_counts_utf8_bytes():
    cb = LocalClipboard()
    text = "ö😇"
    cb.set(text)
    assert len(cb) == len(text.encode("utf-8"))


def test_later_set_overwrites():
    cb = LocalClipboard()
    cb.set("first")
    cb.set("second", ClipboardMode.LINES)
    assert cb.get() == ("second", ClipboardMode.LINES)


def test_clipboards_are_independent():
    a = get_local_clipboard()
    b = get_local_clipboard()
    a.set("only in a")
    assert b.get()[0] == ""
    assert a.get()[0] == "only in a"


def test_abstract_clipboard_cannot_be_built():
    with pytest.raises(TypeError):
        Clipboard()