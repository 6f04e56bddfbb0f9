"""In-memory line editing: a cursor-aware text buffer, Unicode segmentation, an undo stack and a clipboard."""

__version__ = "0.1.0"