"""String splitting."""

from __future__ import annotations

__all__ = ["split"]


def split(text: str, delim: str) -> list[str]:
    """Split ``text`` on ``delim``.

    The search for each delimiter starts one character past the start of the
    current piece, so a piece never begins by being empty because of a
    delimiter at its very first position. An empty ``text`` gives no pieces.
    """
    if not text:
        return []
    parts: list[str] = []
    index = 0
    while True:
        found = text.find(delim, index + 1)
        if found == -1:
            parts.append(text[index:])
            return parts
        parts.append(text[index:found])
        index = found + len(delim)