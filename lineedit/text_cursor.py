"""Read-only queries on a text buffer with a cursor.

Every position is a UTF-8 byte offset into the text, and the cursor is
expected to sit on a grapheme boundary.
"""

from __future__ import annotations

from itertools import islice, pairwise

from .segments import grapheme_indices, is_whitespace_str, word_bound_indices

__all__ = ["TextCursor"]


def _byte_len(text: str) -> int:
    return len(text.encode("utf-8"))


def _last_grapheme_start(text: str) -> int | None:
    last = None
    for index, _ in grapheme_indices(text):
        last = index
    return last


class TextCursor:
    """Text together with an insertion point, and the positions derived from them.

    A new cursor is placed behind the last character of ``text``. The
    ``insertion_point`` attribute may be set freely; it is not checked.
    """

    def __init__(self, text: str = "") -> None:
        self._lines = text
        self.insertion_point = _byte_len(text)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TextCursor):
            return NotImplemented
        return (
            self._lines == other._lines
            and self.insertion_point == other.insertion_point
        )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(text={self._lines!r}, "
            f"insertion_point={self.insertion_point})"
        )

    def __len__(self) -> int:
        return _byte_len(self._lines)

    def _raw(self) -> bytes:
        return self._lines.encode("utf-8")

    def _sub(self, start: int = 0, end: int | None = None) -> str:
        """Text between two byte offsets; raises ValueError off a char boundary."""
        return self._raw()[start:end].decode("utf-8")

    def _after(self) -> str:
        return self._sub(self.insertion_point)

    def _before(self) -> str:
        return self._sub(0, self.insertion_point)

    def _last_grapheme_of_buffer(self) -> int:
        last = _last_grapheme_start(self._lines)
        return 0 if last is None else last

    def is_empty(self) -> bool:
        """True if the buffer holds no text."""
        return not self._lines

    def is_valid(self) -> bool:
        """True if the cursor sits on a character and grapheme boundary."""
        raw = self._raw()
        ip = self.insertion_point
        if not 0 <= ip <= len(raw):
            return False
        if ip == len(raw):
            return True
        if raw[ip] & 0xC0 == 0x80:
            return False
        return any(index == ip for index, _ in grapheme_indices(self._lines))

    def get_buffer(self) -> str:
        """The whole text."""
        return self._lines

    def line(self) -> int:
        """Zero-based number of the line the cursor is on."""
        return self._raw()[: self.insertion_point].count(b"\n")

    def num_lines(self) -> int:
        """Number of lines in the buffer."""
        return self._lines.count("\n") + 1

    def ends_with(self, c: str) -> bool:
        """True if the text ends with ``c``."""
        return self._lines.endswith(c)

    def find_current_line_end(self) -> int:
        """End of the current line: the buffer end or the first byte of its newline."""
        raw = self._raw()
        index = raw.find(b"\n", self.insertion_point)
        if index < 0:
            return len(raw)
        if index > 0 and raw[index - 1] == ord("\r"):
            return index - 1
        return index

    def grapheme_right_index(self) -> int:
        """Position behind the next grapheme to the right."""
        second = next(islice(grapheme_indices(self._after()), 1, None), None)
        if second is None:
            return len(self)
        return self.insertion_point + second[0]

    def grapheme_left_index(self) -> int:
        """Position in front of the next grapheme to the left."""
        last = _last_grapheme_start(self._before())
        return 0 if last is None else last

    def word_right_index(self) -> int:
        """Position behind the next word to the right."""
        for index, word in word_bound_indices(self._after()):
            if not is_whitespace_str(word):
                return self.insertion_point + index + _byte_len(word)
        return len(self)

    def big_word_right_index(self) -> int:
        """Position behind the next WORD to the right."""
        found_ws = False
        for index, word in word_bound_indices(self._after()):
            found_ws = found_ws or is_whitespace_str(word)
            if found_ws and not is_whitespace_str(word):
                return self.insertion_point + index + _byte_len(word)
        return len(self)

    def word_right_end_index(self) -> int:
        """Position on the last grapheme of the next word to the right."""
        ip = self.insertion_point
        for index, word in word_bound_indices(self._after()):
            last = _last_grapheme_start(word)
            if last is None:
                continue
            position = ip + last + index
            if not is_whitespace_str(word) and position != ip:
                return position
        return self._last_grapheme_of_buffer()

    def big_word_right_end_index(self) -> int:
        """Position on the last grapheme of the next WORD to the right."""
        ip = self.insertion_point
        pieces = word_bound_indices(self._after())
        for (prev_index, prev_word), (_, word) in pairwise(pieces):
            if not is_whitespace_str(word):
                continue
            last = _last_grapheme_start(prev_word)
            if last is None:
                continue
            position = ip + last + prev_index
            if position != ip:
                return position
        return self._last_grapheme_of_buffer()

    def word_right_start_index(self) -> int:
        """Position in front of the next word to the right."""
        for index, word in word_bound_indices(self._after()):
            if index != 0 and not is_whitespace_str(word):
                return self.insertion_point + index
        return len(self)

    def big_word_right_start_index(self) -> int:
        """Position in front of the next WORD to the right."""
        found_ws = False
        for index, word in word_bound_indices(self._after()):
            found_ws = found_ws or (index != 0 and is_whitespace_str(word))
            if found_ws and index != 0 and not is_whitespace_str(word):
                return self.insertion_point + index
        return len(self)

    def word_left_index(self) -> int:
        """Position in front of the next word to the left."""
        result = 0
        for index, word in word_bound_indices(self._before()):
            if not is_whitespace_str(word):
                result = index
        return result

    def big_word_left_index(self) -> int:
        """Position in front of the next WORD to the left."""
        ip = self.insertion_point
        last_word_index: int | None = None
        for index, word in word_bound_indices(self._before()):
            if not is_whitespace_str(word):
                if last_word_index is None:
                    last_word_index = index
            elif last_word_index is not None and not is_whitespace_str(
                self._sub(index, ip)
            ):
                last_word_index = None
        return 0 if last_word_index is None else last_word_index

    def next_whitespace(self) -> int:
        """Position of the next whitespace to the right."""
        for index, word in word_bound_indices(self._after()):
            if index != 0 and is_whitespace_str(word):
                return self.insertion_point + index
        return len(self)

    def on_whitespace(self) -> bool:
        """True if the character at the cursor is whitespace."""
        rest = self._after()
        return bool(rest) and is_whitespace_str(rest[0])

    def grapheme_right(self) -> str:
        """The grapheme right of the cursor, or an empty string."""
        return self._sub(self.insertion_point, self.grapheme_right_index())

    def grapheme_left(self) -> str:
        """The grapheme left of the cursor, or an empty string."""
        return self._sub(self.grapheme_left_index(), self.insertion_point)

    def current_word_range(self) -> range:
        """Byte range of the word the cursor is in or in front of."""
        right = self.word_right_index()
        left = 0
        for index, word in word_bound_indices(self._sub(0, right)):
            if not is_whitespace_str(word):
                left = index
        return range(left, right)

    def current_line_range(self) -> range:
        """Byte range of the current line, including its terminating newline."""
        raw = self._raw()
        ip = self.insertion_point
        left = raw.rfind(b"\n", 0, ip) + 1
        newline = raw.find(b"\n", ip)
        right = len(raw) if newline < 0 else newline + 1
        return range(left, right)

    def is_cursor_at_first_line(self) -> bool:
        """True if no newline lies before the cursor."""
        return b"\n" not in self._raw()[: self.insertion_point]

    def is_cursor_at_last_line(self) -> bool:
        """True if no newline lies after the cursor."""
        return b"\n" not in self._raw()[self.insertion_point :]

    def find_char_right(self, c: str, current_line: bool) -> int | None:
        """Position of the first ``c`` right of the grapheme at the cursor."""
        start = self.grapheme_right_index()
        end = self.current_line_range().stop if current_line else len(self)
        index = self._raw().find(c.encode("utf-8"), start, end)
        return None if index < 0 else index

    def find_char_left(self, c: str, current_line: bool) -> int | None:
        """Position of the last ``c`` left of the cursor."""
        start = self.current_line_range().start if current_line else 0
        index = self._raw().rfind(c.encode("utf-8"), start, self.insertion_point)
        return None if index < 0 else index