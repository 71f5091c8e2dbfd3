"""Two- and three-component vectors and 2D polar coordinates."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Any, Callable, Iterator

__all__ = ["Val2D", "Val3D", "Polar2D"]


def _is_scalar(value: Any) -> bool:
    return isinstance(value, Real)


def _format_components(values: tuple[Any, ...], spacewidth: int, digit: int) -> str:
    width = spacewidth + digit + 1
    body = ", ".join(f"{float(v):>{width}.{digit}f}" for v in values)
    return "{" + body + "}"


@dataclass(frozen=True, slots=True)
class Val2D:
    """A 2D vector with elementwise arithmetic against vectors and scalars."""

    x: Any = 0
    y: Any = 0

    # -- elementwise arithmetic ---------------------------------------------

    def _apply(self, other: Any, op: Callable[[Any, Any], Any]) -> Val2D:
        if isinstance(other, Val2D):
            return Val2D(op(self.x, other.x), op(self.y, other.y))
        if _is_scalar(other):
            return Val2D(op(self.x, other), op(self.y, other))
        return NotImplemented

    def _rapply(self, other: Any, op: Callable[[Any, Any], Any]) -> Val2D:
        if _is_scalar(other):
            return Val2D(op(other, self.x), op(other, self.y))
        return NotImplemented

    def __add__(self, other: Any) -> Val2D:
        return self._apply(other, lambda a, b: a + b)

    def __radd__(self, other: Any) -> Val2D:
        return self._rapply(other, lambda a, b: a + b)

    def __sub__(self, other: Any) -> Val2D:
        return self._apply(other, lambda a, b: a - b)

    def __rsub__(self, other: Any) -> Val2D:
        return self._rapply(other, lambda a, b: a - b)

    def __mul__(self, other: Any) -> Val2D:
        return self._apply(other, lambda a, b: a * b)

    def __rmul__(self, other: Any) -> Val2D:
        return self._rapply(other, lambda a, b: a * b)

    def __truediv__(self, other: Any) -> Val2D:
        return self._apply(other, lambda a, b: a / b)

    def __rtruediv__(self, other: Any) -> Val2D:
        return self._rapply(other, lambda a, b: a / b)

    def __neg__(self) -> Val2D:
        return Val2D(-self.x, -self.y)

    def __pos__(self) -> Val2D:
        return self

    # -- ordering: strict on every component ---------------------------------

    def __lt__(self, other: Val2D) -> bool:
        if not isinstance(other, Val2D):
            return NotImplemented
        return self.x < other.x and self.y < other.y

    def __gt__(self, other: Val2D) -> bool:
        if not isinstance(other, Val2D):
            return NotImplemented
        return other < self

    def __le__(self, other: Val2D) -> bool:
        if not isinstance(other, Val2D):
            return NotImplemented
        return not self > other

    def __ge__(self, other: Val2D) -> bool:
        if not isinstance(other, Val2D):
            return NotImplemented
        return not self < other

    # -- sequence access -----------------------------------------------------

    def __iter__(self) -> Iterator[Any]:
        yield self.x
        yield self.y

    def __len__(self) -> int:
        return 2

    def __getitem__(self, index: int) -> Any:
        return (self.x, self.y)[index]

    # -- vector utilities ----------------------------------------------------

    def dot(self, other: Val2D) -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: Val2D) -> float:
        """The z component of the 3D cross product."""
        return self.x * other.y - self.y * other.x

    def length(self) -> float:
        return math.sqrt(self.dot(self))

    def normalized(self) -> Val2D:
        return self / self.length()

    def angle(self) -> float:
        """Angle from the positive x axis, in radians."""
        return math.atan2(self.y, self.x)

    def angle_to(self, other: Val2D) -> float:
        """Signed angle from this vector to ``other``, in radians."""
        return math.atan2(self.cross(other), self.dot(other))

    def rotate(self, angle: float) -> Val2D:
        """Rotate counter-clockwise by ``angle`` radians."""
        turn = Val2D(math.sin(angle), math.cos(angle))
        return Val2D(self.cross(turn), self.dot(turn))

    @staticmethod
    def intersection(l1: tuple[Val2D, Val2D], l2: tuple[Val2D, Val2D]) -> Val2D:
        """Crossing point of two segments, or (inf, inf) when they do not meet."""
        miss = Val2D(math.inf, math.inf)
        d1 = l1[1] - l1[0]
        d2 = l2[1] - l2[0]
        deno = d1.cross(d2)
        if deno == 0:
            return miss
        s = (l2[0] - l1[0]).cross(d2) / deno
        t = d1.cross(l1[0] - l2[0]) / deno
        if s < 0 or s > 1 or t < 0 or t > 1:
            return miss
        return l1[0] + s * d1

    @staticmethod
    def distance(a: Val2D, b: Val2D) -> float:
        diff = a - b
        return math.sqrt(diff.x * diff.x + diff.y * diff.y)

    @staticmethod
    def lerp(a: Val2D, b: Val2D, t: float) -> Val2D:
        return a + (b - a) * t

    def to_string(self, spacewidth: int = 4, digit: int = 6) -> str:
        return _format_components((self.x, self.y), spacewidth, digit)

    def __str__(self) -> str:
        return self.to_string()


@dataclass(frozen=True, slots=True)
class Val3D:
    """A 3D vector with elementwise arithmetic against vectors and scalars."""

    x: Any = 0
    y: Any = 0
    z: Any = 0

    def _apply(self, other: Any, op: Callable[[Any, Any], Any]) -> Val3D:
        if isinstance(other, Val3D):
            return Val3D(op(self.x, other.x), op(self.y, other.y), op(self.z, other.z))
        if _is_scalar(other):
            return Val3D(op(self.x, other), op(self.y, other), op(self.z, other))
        return NotImplemented

    def _rapply(self, other: Any, op: Callable[[Any, Any], Any]) -> Val3D:
        if _is_scalar(other):
            return Val3D(op(other, self.x), op(other, self.y), op(other, self.z))
        return NotImplemented

    def __add__(self, other: Any) -> Val3D:
        return self._apply(other, lambda a, b: a + b)

    def __radd__(self, other: Any) -> Val3D:
        return self._rapply(other, lambda a, b: a + b)

    def __sub__(self, other: Any) -> Val3D:
        return self._apply(other, lambda a, b: a - b)

    def __rsub__(self, other: Any) -> Val3D:
        return self._rapply(other, lambda a, b: a - b)

    def __mul__(self, other: Any) -> Val3D:
        return self._apply(other, lambda a, b: a * b)

    def __rmul__(self, other: Any) -> Val3D:
        return self._rapply(other, lambda a, b: a * b)

    def __truediv__(self, other: Any) -> Val3D:
        return self._apply(other, lambda a, b: a / b)

    def __rtruediv__(self, other: Any) -> Val3D:
        return self._rapply(other, lambda a, b: a / b)

    def __neg__(self) -> Val3D:
        return Val3D(-self.x, -self.y, -self.z)

    def __pos__(self) -> Val3D:
        return self

    def __lt__(self, other: Val3D) -> bool:
        if not isinstance(other, Val3D):
            return NotImplemented
        return self.x < other.x and self.y < other.y and self.z < other.z

    def __gt__(self, other: Val3D) -> bool:
        if not isinstance(other, Val3D):
            return NotImplemented
        return other < self

    def __le__(self, other: Val3D) -> bool:
        if not isinstance(other, Val3D):
            return NotImplemented
        return not self > other

    def __ge__(self, other: Val3D) -> bool:
        if not isinstance(other, Val3D):
            return NotImplemented
        return not self < other

    def __iter__(self) -> Iterator[Any]:
        yield self.x
        yield self.y
        yield self.z

    def __len__(self) -> int:
        return 3

    def __getitem__(self, index: int) -> Any:
        return (self.x, self.y, self.z)[index]

    def dot(self, other: Val3D) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Val3D) -> Val3D:
        return Val3D(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length(self) -> float:
        return math.sqrt(self.dot(self))

    def normalized(self) -> Val3D:
        return self / self.length()

    def angle_x(self) -> float:
        """Angle of the (y, z) projection."""
        return Val2D(self.y, self.z).angle()

    def angle_y(self) -> float:
        """Angle of the (z, x) projection."""
        return Val2D(self.z, self.x).angle()

    def angle_z(self) -> float:
        """Angle of the (x, y) projection."""
        return Val2D(self.x, self.y).angle()

    def angles(self) -> Val3D:
        return Val3D(self.angle_x(), self.angle_y(), self.angle_z())

    def rotate_x(self, angle: float) -> Val3D:
        return Val3D.rotate_base(self, angle)

    def rotate_y(self, angle: float) -> Val3D:
        r = Val3D.rotate_base(Val3D(self.y, self.x, self.z), angle)
        return Val3D(r.y, r.x, r.z)

    def rotate_z(self, angle: float) -> Val3D:
        r = Val3D.rotate_base(Val3D(self.z, self.y, self.x), angle)
        return Val3D(r.z, r.y, r.x)

    def rotate(self, angles: Val3D) -> Val3D:
        """Rotate about x, then y, then z by the components of ``angles``."""
        return self.rotate_x(angles.x).rotate_y(angles.y).rotate_z(angles.z)

    @staticmethod
    def rotate_base(v: Val3D, angle: float) -> Val3D:
        """Rotate ``v`` about the x axis by ``angle`` radians."""
        c = math.cos(angle)
        s = math.sin(angle)
        return Val3D(
            v.dot(Val3D(1, 0, 0)),
            v.dot(Val3D(0, c, -s)),
            v.dot(Val3D(0, s, c)),
        )

    @staticmethod
    def distance(a: Val3D, b: Val3D) -> float:
        """Distance between ``a`` and ``b`` measured in the xy plane only."""
        diff = a - b
        return math.sqrt(diff.x * diff.x + diff.y * diff.y)

    @staticmethod
    def lerp(a: Val3D, b: Val3D, t: float) -> Val3D:
        return a + (b - a) * t

    def to_string(self, spacewidth: int = 4, digit: int = 6) -> str:
        return _format_components((self.x, self.y, self.z), spacewidth, digit)

    def __str__(self) -> str:
        return self.to_string()


@dataclass(frozen=True, slots=True)
class Polar2D:
    """A 2D point given by its distance from the origin and its angle."""

    radius: float = 0.0
    theta: float = 0.0

    def pos(self) -> Val2D:
        """Cartesian position of this point."""
        return Val2D(self.radius, 0).rotate(self.theta)

    @staticmethod
    def parse(source: Val2D) -> Polar2D:
        """Polar form of a cartesian vector."""
        return Polar2D(source.length(), source.angle())