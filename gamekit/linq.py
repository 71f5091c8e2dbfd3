"""A list with query helpers taking an optional projection."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import islice
from typing import Any, Callable, Iterator, overload

__all__ = ["ExtendedList", "NPOS"]

NPOS = -1
"""Returned by :meth:`ExtendedList.index_of` when nothing matches."""


def _projected(values: Iterable[Any], project: Callable[[Any], Any] | None) -> Iterable[Any]:
    return values if project is None else map(project, values)


class _ReversedView(Sequence):
    """A read-only view of a list in reverse order."""

    def __init__(self, base: list[Any]) -> None:
        self._base = base

    def __len__(self) -> int:
        return len(self._base)

    @overload
    def __getitem__(self, index: int) -> Any: ...

    @overload
    def __getitem__(self, index: slice) -> list[Any]: ...

    def __getitem__(self, index: int | slice) -> Any:
        if isinstance(index, slice):
            return list(reversed(self._base))[index]
        size = len(self._base)
        if not -size <= index < size:
            raise IndexError("view index out of range")
        return self._base[size - 1 - index if index >= 0 else -size - 1 - index]

    def __iter__(self) -> Iterator[Any]:
        return reversed(self._base)

    def __repr__(self) -> str:
        return f"_ReversedView({list(self)!r})"


class ExtendedList(list):
    """A list whose searches compare ``project(item)`` with the value sought."""

    def all(self, predicate: Callable[[Any], bool], project: Callable[[Any], Any] | None = None) -> bool:
        return all(predicate(value) for value in _projected(self, project))

    def any(self, predicate: Callable[[Any], bool], project: Callable[[Any], Any] | None = None) -> bool:
        return any(predicate(value) for value in _projected(self, project))

    def contains(self, value: Any, project: Callable[[Any], Any] | None = None) -> bool:
        return self.index_of(value, 0, project) != NPOS

    def find(
        self, value: Any, front_offset: int = 0, project: Callable[[Any], Any] | None = None
    ) -> Any:
        """The first matching item at or after ``front_offset``, or None."""
        idx = self.index_of(value, front_offset, project)
        return None if idx == NPOS else self[idx]

    def index_of(
        self, value: Any, front_offset: int = 0, project: Callable[[Any], Any] | None = None
    ) -> int:
        """Index of the first matching item at or after ``front_offset``, or NPOS."""
        if front_offset < 0:
            raise ValueError("front_offset must not be negative")
        values = _projected(islice(self, front_offset, None), project)
        for idx, item in enumerate(values, front_offset):
            if item == value:
                return idx
        return NPOS

    def reverse_view(self) -> _ReversedView:
        """A live read-only view of the items in reverse order."""
        return _ReversedView(self)