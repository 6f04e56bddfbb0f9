"""A linear undo/redo stack."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Generic, TypeVar

__all__ = ["EditStack"]

T = TypeVar("T")


class EditStack(Generic[T]):
    """Undo history as a list of states with a pointer to the current one.

    ``factory`` builds the initial state, used on creation and on reset.
    The stack never holds fewer than one state. Stored values are kept as
    given, so callers store copies of mutable states.
    """

    def __init__(
        self,
        factory: Callable[[], T],
        items: Iterable[T] | None = None,
        index: int = 0,
    ) -> None:
        self._factory = factory
        self._items: list[T] = [factory()] if items is None else list(items)
        if not self._items:
            raise ValueError("an edit stack needs at least one state")
        if not 0 <= index < len(self._items):
            raise IndexError(f"index {index} out of range for {len(self._items)} states")
        self._index = index

    @property
    def index(self) -> int:
        """Position of the current state."""
        return self._index

    @property
    def items(self) -> list[T]:
        """A copy of the stored states, oldest first."""
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EditStack):
            return NotImplemented
        return self._items == other._items and self._index == other._index

    def __repr__(self) -> str:
        return f"EditStack(items={self._items!r}, index={self._index})"

    def undo(self) -> T:
        """Step back one state, staying put at the first one, and return it."""
        self._index = max(self._index - 1, 0)
        return self._items[self._index]

    def redo(self) -> T:
        """Step forward one state, staying put at the last one, and return it."""
        self._index = min(self._index + 1, len(self._items) - 1)
        return self._items[self._index]

    def insert(self, value: T) -> None:
        """Push a new state, discarding every state after the current one."""
        del self._items[self._index + 1 :]
        self._items.append(value)
        self._index += 1

    def reset(self) -> None:
        """Return to a single fresh initial state."""
        self._items = [self._factory()]
        self._index = 0

    def current(self) -> T:
        """The state currently pointed to."""
        return self._items[self._index]