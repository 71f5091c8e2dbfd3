"""A fixed-capacity ring buffer that keeps the most recent writes."""

from __future__ import annotations

from typing import Any, Generic, Iterable, Iterator, TypeVar

__all__ = ["RingBuffer"]

T = TypeVar("T")


class RingBuffer(Generic[T]):
    """Circular storage of ``capacity`` slots.

    Writes go to the back. One slot is always kept free, so the buffer holds
    at most ``capacity - 1`` items; once full, each write drops the oldest.
    Freed slots are reset to ``default``.
    """

    def __init__(self, capacity: int, default: Any = None) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._default = default
        self._slots: list[Any] = [default] * capacity
        self._index = 0
        self._count = 0

    @property
    def capacity(self) -> int:
        """Number of slots in the underlying storage."""
        return len(self._slots)

    @property
    def index(self) -> int:
        """Storage position of the front item."""
        return self._index

    def _pos(self, offset: int) -> int:
        return (self._index + offset) % len(self._slots)

    def _check(self, pos: int) -> None:
        if not 0 <= pos < self._count:
            raise IndexError("ring buffer index out of range")

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[T]:
        return (self._slots[self._pos(i)] for i in range(self._count))

    def __reversed__(self) -> Iterator[T]:
        return (self._slots[self._pos(i)] for i in reversed(range(self._count)))

    def __getitem__(self, pos: int) -> T:
        return self.at(pos)

    def __setitem__(self, pos: int, value: T) -> None:
        self._check(pos)
        self._slots[self._pos(pos)] = value

    def __repr__(self) -> str:
        return f"RingBuffer({list(self)!r}, capacity={self.capacity})"

    def write_back(self, value: T) -> None:
        """Append ``value``, dropping the front item when the buffer is full."""
        self._slots[self._pos(self._count)] = value
        self._count += 1
        if self._count < len(self._slots):
            return
        self._count = len(self._slots) - 1
        self._index = self._pos(1)

    def pop_front(self) -> None:
        """Drop the front item; the slot is reset and the front moves on even when empty."""
        self._slots[self._index] = self._default
        self._index = self._pos(1)
        self._count = max(self._count - 1, 0)

    def front(self) -> T:
        """The slot at the front position."""
        return self._slots[self._index]

    def back(self) -> T:
        """The slot just before the back position."""
        return self._slots[self._pos(self._count - 1)]

    def at(self, pos: int) -> T:
        """Item ``pos`` counted from the front; raises IndexError when out of range."""
        self._check(pos)
        return self._slots[self._pos(pos)]

    def assign(self, values: Iterable[T]) -> None:
        """Overwrite the stored items in order until either side runs out."""
        for offset, value in zip(range(self._count), values):
            self._slots[self._pos(offset)] = value

    def fill(self, n: int, value: T) -> None:
        """Overwrite the first ``n`` stored items with ``value``."""
        for offset in range(min(n, self._count)):
            self._slots[self._pos(offset)] = value

    def resize(self, newsize: int, value: Any = None) -> None:
        """Change the storage to ``newsize`` slots, padding with ``value``.

        When shrinking, the front position and item count are pulled back so
        they stay inside the new storage.
        """
        if newsize < 1:
            raise ValueError("capacity must be at least 1")
        fill_value = self._default if value is None else value
        if newsize > len(self._slots):
            self._slots.extend([fill_value] * (newsize - len(self._slots)))
        else:
            del self._slots[newsize:]
        self._index %= newsize
        self._count = min(self._count, newsize - 1)