"""Clipboards for cut, copy and paste inside the line editor."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum

__all__ = ["ClipboardMode", "Clipboard", "LocalClipboard", "get_local_clipboard"]


class ClipboardMode(Enum):
    """How clipboard content is to be inserted."""

    NORMAL = "normal"
    """As direct content at the cursor position."""
    LINES = "lines"
    """As whole lines below or above the current one."""


class Clipboard(ABC):
    """Holds one piece of text together with the mode it was stored in."""

    @abstractmethod
    def set(self, content: str, mode: ClipboardMode = ClipboardMode.NORMAL) -> None:
        """Store ``content`` with its insertion ``mode``."""

    @abstractmethod
    def get(self) -> tuple[str, ClipboardMode]:
        """Return the stored content and its mode."""

    def clear(self) -> None:
        """Empty the clipboard."""
        self.set("", ClipboardMode.NORMAL)

    def __len__(self) -> int:
        """Length of the stored content in UTF-8 bytes."""
        return len(self.get()[0].encode("utf-8"))


class LocalClipboard(Clipboard):
    """A clipboard that lives only inside the application."""

    def __init__(self) -> None:
        self._content = ""
        self._mode = ClipboardMode.NORMAL

    def set(self, content: str, mode: ClipboardMode = ClipboardMode.NORMAL) -> None:
        self._content = content
        self._mode = mode

    def get(self) -> tuple[str, ClipboardMode]:
        return self._content, self._mode


def get_local_clipboard() -> Clipboard:
    """Create a fresh application-local clipboard."""
    return LocalClipboard()