"""Helpers for picking pieces out of text."""

from __future__ import annotations

__all__ = ["get_in_bracket", "get_to_char", "split_all", "split_no_empty"]


def get_in_bracket(text: str, off: int = 0, lb: str = "(", rb: str = ")") -> str:
    """Return the text inside the first balanced bracket pair at or after ``off``.

    Raises ValueError when the opening bracket is never closed.
    """
    start = 0
    depth = 0
    for i in range(off, len(text)):
        c = text[i]
        if c == lb:
            if depth == 0:
                start = i + 1
            depth += 1
        elif c == rb:
            depth -= 1
            if depth == 0:
                return text[start:i]
    raise ValueError("missing closing bracket")


def get_to_char(text: str, c: str, off: int = 0) -> str:
    """Return the text from ``off`` up to (not including) the next ``c``."""
    if off > len(text):
        raise IndexError("offset past end of text")
    found = text.find(c, off)
    return text[off:] if found == -1 else text[off:found]


def split_all(text: str, c: str) -> list[str]:
    """Split on ``c``, keeping empty pieces."""
    return text.split(c)


def split_no_empty(text: str, c: str) -> list[str]:
    """Split on ``c``, dropping empty pieces."""
    return [piece for piece in text.split(c) if piece]