"""Axis-aligned rectangles and boxes stored as an offset plus a size."""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Real
from typing import Any, Callable

from gamekit.vectors import Val2D, Val3D

__all__ = ["Rect2D", "Rect3D"]


def _half(value: Any) -> Any:
    """Halve ``value``; integers truncate toward zero."""
    if isinstance(value, int) and not isinstance(value, bool):
        q = abs(value) // 2
        return q if value >= 0 else -q
    return value / 2


def _half2(v: Val2D) -> Val2D:
    return Val2D(_half(v.x), _half(v.y))


def _half3(v: Val3D) -> Val3D:
    return Val3D(_half(v.x), _half(v.y), _half(v.z))


@dataclass(frozen=True, slots=True)
class Rect2D:
    """A rectangle with top-left offset ``(x, y)`` and size ``(w, h)``."""

    x: Any = 0
    y: Any = 0
    w: Any = 0
    h: Any = 0

    @staticmethod
    def _of(off: Val2D, size: Val2D) -> Rect2D:
        return Rect2D(off.x, off.y, size.x, size.y)

    @property
    def off(self) -> Val2D:
        return Val2D(self.x, self.y)

    @property
    def size(self) -> Val2D:
        return Val2D(self.w, self.h)

    def _fields(self) -> tuple[Any, ...]:
        return (self.x, self.y, self.w, self.h)

    def _apply(self, other: Any, op: Callable[[Any, Any], Any]) -> Rect2D:
        if isinstance(other, Rect2D):
            return Rect2D(*(op(a, b) for a, b in zip(self._fields(), other._fields())))
        if isinstance(other, Real):
            return Rect2D(*(op(a, other) for a in self._fields()))
        return NotImplemented

    def _rapply(self, other: Any, op: Callable[[Any, Any], Any]) -> Rect2D:
        if isinstance(other, Real):
            return Rect2D(*(op(other, a) for a in self._fields()))
        return NotImplemented

    def __add__(self, other: Any) -> Rect2D:
        return self._apply(other, lambda a, b: a + b)

    def __radd__(self, other: Any) -> Rect2D:
        return self._rapply(other, lambda a, b: a + b)

    def __sub__(self, other: Any) -> Rect2D:
        return self._apply(other, lambda a, b: a - b)

    def __rsub__(self, other: Any) -> Rect2D:
        return self._rapply(other, lambda a, b: a - b)

    def __mul__(self, other: Any) -> Rect2D:
        return self._apply(other, lambda a, b: a * b)

    def __rmul__(self, other: Any) -> Rect2D:
        return self._rapply(other, lambda a, b: a * b)

    def __truediv__(self, other: Any) -> Rect2D:
        return self._apply(other, lambda a, b: a / b)

    def __rtruediv__(self, other: Any) -> Rect2D:
        return self._rapply(other, lambda a, b: a / b)

    def in_rect(self, pos: Val2D) -> bool:
        """True when ``pos`` lies inside the rectangle, edges included."""
        target = self.absolute()
        return target.x <= pos.x and target.y <= pos.y and pos.x <= target.w and pos.y <= target.h

    def absolute(self) -> Rect2D:
        """The same rectangle with ``w``/``h`` holding the far corner."""
        return Rect2D._of(self.off, self.off + self.size)

    def left_top(self) -> Val2D:
        return self.off

    def center_top(self) -> Val2D:
        return Val2D(self.x + _half(self.w), self.y)

    def right_top(self) -> Val2D:
        return Val2D(self.x + self.w, self.y)

    def mid_left(self) -> Val2D:
        return Val2D(self.x, self.y + _half(self.h))

    def mid_center(self) -> Val2D:
        return self.off + _half2(self.size)

    def mid_right(self) -> Val2D:
        return Val2D(self.x + self.w, self.y + _half(self.h))

    def left_bottom(self) -> Val2D:
        return Val2D(self.x, self.y + self.h)

    def center_bottom(self) -> Val2D:
        return Val2D(self.x + _half(self.w), self.y + self.h)

    def right_bottom(self) -> Val2D:
        return self.off + self.size

    def offset_center(self) -> Rect2D:
        """The rectangle moved so that its offset becomes its centre."""
        return Rect2D._of(self.off - _half2(self.size), self.size)

    def to_string(self) -> str:
        return "{" + self.off.to_string() + ", " + (self.off + self.size).to_string() + "}"

    def __str__(self) -> str:
        return self.to_string()

    def to_json(self) -> list[list[Any]]:
        return [[self.x, self.y], [self.w, self.h]]

    @staticmethod
    def from_json(data: Any) -> Rect2D:
        try:
            (x, y), (w, h) = data
        except (TypeError, ValueError) as exc:
            raise ValueError("expected [[x, y], [w, h]]") from exc
        return Rect2D(x, y, w, h)


@dataclass(frozen=True, slots=True)
class Rect3D:
    """A box with offset ``(x, y, z)`` and size ``(w, h, d)``."""

    x: Any = 0
    y: Any = 0
    z: Any = 0
    w: Any = 0
    h: Any = 0
    d: Any = 0

    @staticmethod
    def _of(off: Val3D, size: Val3D) -> Rect3D:
        return Rect3D(off.x, off.y, off.z, size.x, size.y, size.z)

    @property
    def off(self) -> Val3D:
        return Val3D(self.x, self.y, self.z)

    @property
    def size(self) -> Val3D:
        return Val3D(self.w, self.h, self.d)

    def _fields(self) -> tuple[Any, ...]:
        return (self.x, self.y, self.z, self.w, self.h, self.d)

    def _apply(self, other: Any, op: Callable[[Any, Any], Any]) -> Rect3D:
        if isinstance(other, Rect3D):
            return Rect3D(*(op(a, b) for a, b in zip(self._fields(), other._fields())))
        if isinstance(other, Real):
            return Rect3D(*(op(a, other) for a in self._fields()))
        return NotImplemented

    def _rapply(self, other: Any, op: Callable[[Any, Any], Any]) -> Rect3D:
        if isinstance(other, Real):
            return Rect3D(*(op(other, a) for a in self._fields()))
        return NotImplemented

    def __add__(self, other: Any) -> Rect3D:
        return self._apply(other, lambda a, b: a + b)

    def __radd__(self, other: Any) -> Rect3D:
        return self._rapply(other, lambda a, b: a + b)

    def __sub__(self, other: Any) -> Rect3D:
        return self._apply(other, lambda a, b: a - b)

    def __rsub__(self, other: Any) -> Rect3D:
        return self._rapply(other, lambda a, b: a - b)

    def __mul__(self, other: Any) -> Rect3D:
        return self._apply(other, lambda a, b: a * b)

    def __rmul__(self, other: Any) -> Rect3D:
        return self._rapply(other, lambda a, b: a * b)

    def __truediv__(self, other: Any) -> Rect3D:
        return self._apply(other, lambda a, b: a / b)

    def __rtruediv__(self, other: Any) -> Rect3D:
        return self._rapply(other, lambda a, b: a / b)

    def in_rect(self, pos: Val3D) -> bool:
        """Compare ``pos`` against both corners with the vector ordering."""
        return self.off <= pos and pos <= self.off + self.size

    def absolute(self) -> Rect3D:
        return Rect3D._of(self.off, self.off + self.size)

    def left_bottom_back(self) -> Val3D:
        return self.off

    def right_top_front(self) -> Val3D:
        return self.off + self.size

    def center(self) -> Val3D:
        return self.off + _half3(self.size)

    def offset_center(self) -> Rect3D:
        return Rect3D._of(self.off - _half3(self.size), self.size)

    def to_string(self) -> str:
        return "{" + self.off.to_string() + ", " + (self.off + self.size).to_string() + "}"

    def __str__(self) -> str:
        return self.to_string()

    def to_json(self) -> list[list[Any]]:
        return [[self.x, self.y, self.z], [self.w, self.h, self.d]]

    @staticmethod
    def from_json(data: Any) -> Rect3D:
        try:
            (x, y, z), (w, h, d) = data
        except (TypeError, ValueError) as exc:
            raise ValueError("expected [[x, y, z], [w, h, d]]") from exc
        return Rect3D(x, y, z, w, h, d)