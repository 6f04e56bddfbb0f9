"""An editable text buffer with a cursor.

Every position is a UTF-8 byte offset into the text.
"""

from __future__ import annotations

import sys

from .segments import grapheme_indices
from .text_cursor import TextCursor

__all__ = ["LineBuffer"]


def _byte_len(text: str) -> int:
    return len(text.encode("utf-8"))


class LineBuffer(TextCursor):
    """The entered line(s) with a cursor, and the edits that can be made to them.

    A new buffer holds ``text`` with the cursor behind its last character.
    """

    def set_buffer(self, buffer: str) -> None:
        """Replace the text and put the cursor at its end."""
        self._lines = buffer
        self.insertion_point = _byte_len(buffer)

    # Cursor movement

    def move_to_start(self) -> None:
        """Put the cursor at the start of the buffer."""
        self.insertion_point = 0

    def move_to_line_start(self) -> None:
        """Put the cursor before the first character of the current line."""
        self.insertion_point = self._raw().rfind(b"\n", 0, self.insertion_point) + 1

    def move_to_line_end(self) -> None:
        """Put the cursor on the end of the current line."""
        self.insertion_point = self.find_current_line_end()

    def move_to_end(self) -> None:
        """Put the cursor behind the last character."""
        self.insertion_point = len(self)

    def move_right(self) -> None:
        """Move behind the next grapheme to the right."""
        self.insertion_point = self.grapheme_right_index()

    def move_left(self) -> None:
        """Move in front of the next grapheme to the left."""
        self.insertion_point = self.grapheme_left_index()

    def move_word_left(self) -> None:
        """Move in front of the next word to the left."""
        self.insertion_point = self.word_left_index()

    def move_big_word_left(self) -> None:
        """Move in front of the next WORD to the left."""
        self.insertion_point = self.big_word_left_index()

    def move_word_right(self) -> None:
        """Move behind the next word to the right."""
        self.insertion_point = self.word_right_index()

    def move_word_right_start(self) -> None:
        """Move to the start of the next word."""
        self.insertion_point = self.word_right_start_index()

    def move_big_word_right_start(self) -> None:
        """Move to the start of the next WORD."""
        self.insertion_point = self.big_word_right_start_index()

    def move_word_right_end(self) -> None:
        """Move to the end of the next word."""
        self.insertion_point = self.word_right_end_index()

    def move_big_word_right_end(self) -> None:
        """Move to the end of the next WORD."""
        self.insertion_point = self.big_word_right_end_index()

    # Insertion and removal

    def insert_char(self, c: str) -> None:
        """Insert one character at the cursor and move right over it."""
        self.replace_range(self.insertion_point, self.insertion_point, c)
        self.move_right()

    def insert_str(self, text: str) -> None:
        """Insert ``text`` at the cursor and put the cursor behind it."""
        self.replace_range(self.insertion_point, self.insertion_point, text)
        self.insertion_point += _byte_len(text)

    def insert_newline(self) -> None:
        """Insert the platform's line ending: CRLF on Windows, LF elsewhere."""
        if sys.platform == "win32":
            self.insert_str("\r\n")
        else:
            self.insert_char("\n")

    def clear(self) -> None:
        """Empty the buffer and reset the cursor."""
        self._lines = ""
        self.insertion_point = 0

    def clear_to_end(self) -> None:
        """Remove everything from the cursor to the end of the buffer."""
        self._lines = self._before()

    def clear_to_line_end(self) -> None:
        """Remove from the cursor to the end of the line, keeping the newline."""
        self.clear_range(self.insertion_point, self.find_current_line_end())

    def clear_to_insertion_point(self) -> None:
        """Remove from the start of the buffer to the cursor."""
        self.clear_range(0, self.insertion_point)
        self.insertion_point = 0

    def clear_range_safe(self, start: int, end: int) -> None:
        """Remove ``start..end`` (in either order) and keep the cursor on its text."""
        start, end = min(start, end), max(start, end)
        if self.insertion_point <= start:
            pass
        elif self.insertion_point < end:
            self.insertion_point = start
        else:
            self.insertion_point -= end - start
        self.clear_range(start, end)

    def clear_range(self, start: int, end: int) -> None:
        """Remove ``start..end`` without touching the cursor."""
        self.replace_range(start, end, "")

    def replace_range(self, start: int, end: int, replace_with: str) -> None:
        """Replace ``start..end`` with ``replace_with`` without touching the cursor.

        Raises IndexError for a range outside the text and ValueError for
        offsets that do not fall on character boundaries.
        """
        size = len(self)
        if not 0 <= start <= end <= size:
            raise IndexError(f"range {start}..{end} out of bounds for length {size}")
        self._lines = self._sub(0, start) + replace_with + self._sub(end)

    # Case changes and swaps

    def uppercase_word(self) -> None:
        """Uppercase the current word and move behind it."""
        word = self.current_word_range()
        self.replace_range(
            word.start, word.stop, self._sub(word.start, word.stop).upper()
        )
        self.move_word_right()

    def lowercase_word(self) -> None:
        """Lowercase the current word and move behind it."""
        word = self.current_word_range()
        self.replace_range(
            word.start, word.stop, self._sub(word.start, word.stop).lower()
        )
        self.move_word_right()

    def switchcase_char(self) -> None:
        """Switch the ASCII case of the grapheme at the cursor and move right."""
        start = self.insertion_point
        end = self.grapheme_right_index()
        if end > start:
            swapped = "".join(
                c.lower() if c.isascii() and c.isupper() else
                (c.upper() if c.isascii() else c)
                for c in self._sub(start, end)
            )
            self.replace_range(start, end, swapped)
            self.move_right()

    def capitalize_char(self) -> None:
        """Uppercase the grapheme at the cursor, or of the next word, and move right."""
        if self.on_whitespace():
            self.move_word_right()
            self.move_word_left()
        start = self.insertion_point
        end = self.grapheme_right_index()
        if end > start:
            self.replace_range(start, end, self._sub(start, end).upper())
            self.move_right()

    def delete_left_grapheme(self) -> None:
        """Delete one grapheme to the left."""
        left = self.grapheme_left_index()
        if left < self.insertion_point:
            self.clear_range(left, self.insertion_point)
            self.insertion_point = left

    def delete_right_grapheme(self) -> None:
        """Delete one grapheme to the right."""
        right = self.grapheme_right_index()
        if right > self.insertion_point:
            self.clear_range(self.insertion_point, right)

    def delete_word_left(self) -> None:
        """Delete one word to the left."""
        left = self.word_left_index()
        self.clear_range(left, self.insertion_point)
        self.insertion_point = left

    def delete_word_right(self) -> None:
        """Delete one word to the right."""
        self.clear_range(self.insertion_point, self.word_right_index())

    def swap_words(self) -> None:
        """Swap the current word with the word to its right."""
        first = self.current_word_range()
        self.move_word_right()
        second = self.current_word_range()
        if (first.start, first.stop) != (second.start, second.stop):
            self.move_word_left()
            first_text = self._sub(first.start, first.stop)
            second_text = self._sub(second.start, second.stop)
            self.replace_range(second.start, second.stop, first_text)
            self.replace_range(first.start, first.stop, second_text)

    def swap_graphemes(self) -> None:
        """Swap the graphemes on either side of the cursor."""
        if self.insertion_point == 0:
            self.move_right()
        elif self.insertion_point == len(self):
            self.move_left()

        middle = self.insertion_point
        left = self.grapheme_left_index()
        right = self.grapheme_right_index()
        if left < middle < right:
            first = self._sub(left, middle)
            second = self._sub(middle, right)
            self.replace_range(middle, right, first)
            self.replace_range(left, middle, second)
            self.insertion_point = right
        else:
            self.insertion_point = middle

    # Vertical movement

    def _grapheme_column(self, line_start: int) -> int:
        return sum(1 for _ in grapheme_indices(self._sub(line_start, self.insertion_point)))

    def move_line_up(self) -> None:
        """Move to the same grapheme column on the previous line."""
        if self.is_cursor_at_first_line():
            return
        old = self.current_line_range()
        column = self._grapheme_column(old.start)
        self.insertion_point = old.start
        self.move_left()

        new = self.current_line_range()
        target = new.start
        for count, (index, _) in enumerate(grapheme_indices(self._sub(new.start, new.stop))):
            if count > column:
                break
            target = new.start + index
        self.insertion_point = target

    def move_line_down(self) -> None:
        """Move to the same grapheme column on the next line."""
        if self.is_cursor_at_last_line():
            return
        old = self.current_line_range()
        column = self._grapheme_column(old.start)
        self.insertion_point = old.stop

        new = self.current_line_range()
        for count, (index, _) in enumerate(grapheme_indices(self._sub(new.start, new.stop))):
            if count == column:
                self.insertion_point = new.start + index
                return
        self.insertion_point = self.find_current_line_end()

    # Character search

    def move_right_until(self, c: str, current_line: bool) -> int:
        """Move onto the next ``c`` to the right; return the cursor."""
        index = self.find_char_right(c, current_line)
        if index is not None:
            self.insertion_point = index
        return self.insertion_point

    def move_right_before(self, c: str, current_line: bool) -> int:
        """Move in front of the next ``c`` to the right; return the cursor."""
        index = self.find_char_right(c, current_line)
        if index is not None:
            self.insertion_point = index
            self.insertion_point = self.grapheme_left_index()
        return self.insertion_point

    def move_left_until(self, c: str, current_line: bool) -> int:
        """Move onto the previous ``c`` to the left; return the cursor."""
        index = self.find_char_left(c, current_line)
        if index is not None:
            self.insertion_point = index
        return self.insertion_point

    def move_left_before(self, c: str, current_line: bool) -> int:
        """Move behind the previous ``c`` to the left; return the cursor."""
        index = self.find_char_left(c, current_line)
        if index is not None:
            self.insertion_point = index + _byte_len(c)
        return self.insertion_point

    def delete_right_until_char(self, c: str, current_line: bool) -> None:
        """Delete up to and including the next ``c`` to the right."""
        index = self.find_char_right(c, current_line)
        if index is not None:
            self.clear_range(self.insertion_point, index + _byte_len(c))

    def delete_right_before_char(self, c: str, current_line: bool) -> None:
        """Delete up to the next ``c`` to the right, keeping it."""
        index = self.find_char_right(c, current_line)
        if index is not None:
            self.clear_range(self.insertion_point, index)

    def delete_left_until_char(self, c: str, current_line: bool) -> None:
        """Delete back to and including the previous ``c`` to the left."""
        index = self.find_char_left(c, current_line)
        if index is not None:
            self.clear_range(index, self.insertion_point)
            self.insertion_point = index

    def delete_left_before_char(self, c: str, current_line: bool) -> None:
        """Delete back to the previous ``c`` to the left, keeping it."""
        index = self.find_char_left(c, current_line)
        if index is not None:
            after = index + _byte_len(c)
            self.clear_range(after, self.insertion_point)
            self.insertion_point = after