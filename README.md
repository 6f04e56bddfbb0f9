# lineedit

Building blocks for the editing core of an interactive line editor. The package works on strings in memory and does no terminal input or output.

Every position the package takes or returns is a **byte offset into the UTF-8 encoding** of the text. For example, `"café"` is 5 bytes long.

## Modules

- **`lineedit.line_buffer.LineBuffer`**: text plus an insertion point, and the edits you can make to them:
  - cursor motions by grapheme, word, WORD, end of word, line start/end and buffer start/end;
  - up/down line movement that keeps the grapheme column;
  - insertion, including `insert_newline`, which inserts CRLF on Windows and LF elsewhere;
  - range clearing and replacement;
  - case changes (`uppercase_word`, `lowercase_word`, `switchcase_char`, `capitalize_char`);
  - swaps (`swap_words`, `swap_graphemes`);
  - find-char motions and deletions (`move_right_until`, `move_left_before`, `delete_right_until_char`, ...).
- **`lineedit.text_cursor.TextCursor`**: the read-only part of `LineBuffer`, which is its base class. It answers queries such as:
  - `grapheme_right_index`, `word_left_index` and `big_word_right_end_index`;
  - `current_word_range` and `current_line_range`, which return `range` objects;
  - `find_char_right` and `find_char_left`;
  - `is_cursor_at_first_line` and `is_cursor_at_last_line`;
  - `line`, `num_lines` and `is_valid`.

  The cursor is the plain attribute `insertion_point`, and it is not checked when set. `len()` gives the byte length of the text.
- **`lineedit.segments`**: the segmentation the buffer is built on.
  - `grapheme_indices(text)` yields `(byte_offset, cluster)` for each extended grapheme cluster.
  - `word_bound_indices(text)` yields `(byte_offset, piece)` for each piece between word boundaries.
  - `is_whitespace_str(text)` tells whether every character is Unicode white space.
- **`lineedit.edit_stack.EditStack`**: a linear undo/redo stack. It has `undo`, `redo`, `insert` (which discards any states after the current one), `reset` and `current`.
- **`lineedit.clipboard`**: the `Clipboard` base class and `LocalClipboard`, an in-process clipboard. Each stores its text with a `ClipboardMode` (`NORMAL` or `LINES`). `get_local_clipboard()` creates a fresh `LocalClipboard`.

## Installation

```
pip install .
```

## Usage

### Editing a buffer

```python
from lineedit.line_buffer import LineBuffer

buf = LineBuffer("This is a test")
buf.move_word_left()
buf.uppercase_word()
print(buf.get_buffer())        # "This is a TEST"
print(buf.insertion_point)     # 14

buf.insertion_point = 0
buf.delete_right_until_char("s", True)
print(buf.get_buffer())        # " is a TEST"
```

### Segmenting text

```python
from lineedit.segments import word_bound_indices

print(list(word_bound_indices("hello world")))
# [(0, 'hello'), (5, ' '), (6, 'world')]
```

### Undo history

```python
from lineedit.edit_stack import EditStack

stack = EditStack(str)      # starts with one state: ""
stack.insert("a")
stack.insert("ab")
print(stack.undo())         # "a"
print(stack.redo())         # "ab"
```

`EditStack` stores the values you give it as they are. If your states are mutable, store copies.

### Clipboard

```python
from lineedit.clipboard import ClipboardMode, get_local_clipboard

clipboard = get_local_clipboard()
clipboard.set("line\n", ClipboardMode.LINES)
print(clipboard.get())      # ('line\n', <ClipboardMode.LINES: 'lines'>)
print(len(clipboard))       # 5
clipboard.clear()
```

## What the package does not do

- It has no editor object that joins these parts together. Selection handling, word-grouped undo points and cut/copy/paste between a buffer and a clipboard are left to the caller, who can build them from `LineBuffer`, `EditStack` and `Clipboard`.
- It has no completion.
- It reads no keys and draws no prompt. There is no command to run.
- Its only clipboard is the in-process `LocalClipboard`. It does not reach the system clipboard.

## Running the tests

```
pip install ".[test]"
pytest
```