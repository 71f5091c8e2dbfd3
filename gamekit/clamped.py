"""A number that always stays within a closed range."""

from __future__ import annotations

import operator
from typing import Any

__all__ = ["ValClamp"]


def _raw(value: Any) -> Any:
    return value._value if isinstance(value, ValClamp) else value


def _check_range(minimum: Any, maximum: Any) -> None:
    if minimum > maximum:
        raise ValueError("min is bigger than max")


def _fmt(number: Any) -> str:
    if isinstance(number, float) and number.is_integer():
        return str(int(number))
    return str(number)


class ValClamp:
    """A value kept between ``minimum`` and ``maximum`` (inclusive).

    In-place arithmetic clamps the result; plain arithmetic returns an
    unclamped number.
    """

    __slots__ = ("_value", "_min", "_max")

    def __init__(self, value: Any = 0, minimum: Any = 0, maximum: Any = 0) -> None:
        _check_range(minimum, maximum)
        self._min = minimum
        self._max = maximum
        self._value = value
        self._clamp()

    def _clamp(self) -> None:
        self._value = min(max(self._value, self._min), self._max)

    @property
    def value(self) -> Any:
        return self._value

    @value.setter
    def value(self, new_value: Any) -> None:
        self._value = _raw(new_value)
        self._clamp()

    @property
    def minimum(self) -> Any:
        return self._min

    @property
    def maximum(self) -> Any:
        return self._max

    def set_min(self, minimum: Any) -> None:
        _check_range(minimum, self._max)
        self._min = minimum
        self._clamp()

    def set_max(self, maximum: Any) -> None:
        _check_range(self._min, maximum)
        self._max = maximum
        self._clamp()

    def set_range(self, minimum: Any, maximum: Any) -> None:
        _check_range(minimum, maximum)
        self._min = minimum
        self._max = maximum
        self._clamp()

    def rate(self) -> float:
        """Position of the value within the range, from 0.0 to 1.0."""
        if self._min == self._max:
            return 0.0
        return (self._value - self._min) / (self._max - self._min)

    def to_string(self) -> str:
        return f"({_fmt(self._min)} <= {_fmt(self._value)} <= {_fmt(self._max)})"

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"ValClamp({self._value!r}, {self._min!r}, {self._max!r})"

    # in-place arithmetic clamps
    def __iadd__(self, other: Any) -> ValClamp:
        self.value = self._value + _raw(other)
        return self

    def __isub__(self, other: Any) -> ValClamp:
        self.value = self._value - _raw(other)
        return self

    def __imul__(self, other: Any) -> ValClamp:
        self.value = self._value * _raw(other)
        return self

    def __itruediv__(self, other: Any) -> ValClamp:
        self.value = self._value / _raw(other)
        return self

    def __ifloordiv__(self, other: Any) -> ValClamp:
        self.value = self._value // _raw(other)
        return self

    # plain arithmetic yields bare numbers
    def __add__(self, other: Any) -> Any:
        return self._value + _raw(other)

    def __radd__(self, other: Any) -> Any:
        return other + self._value

    def __sub__(self, other: Any) -> Any:
        return self._value - _raw(other)

    def __rsub__(self, other: Any) -> Any:
        return other - self._value

    def __mul__(self, other: Any) -> Any:
        return self._value * _raw(other)

    def __rmul__(self, other: Any) -> Any:
        return other * self._value

    def __truediv__(self, other: Any) -> Any:
        return self._value / _raw(other)

    def __rtruediv__(self, other: Any) -> Any:
        return other / self._value

    def __floordiv__(self, other: Any) -> Any:
        return self._value // _raw(other)

    def __rfloordiv__(self, other: Any) -> Any:
        return other // self._value

    def __eq__(self, other: object) -> bool:
        return self._value == _raw(other)

    def __lt__(self, other: Any) -> bool:
        return self._value < _raw(other)

    def __le__(self, other: Any) -> bool:
        return self._value <= _raw(other)

    def __gt__(self, other: Any) -> bool:
        return self._value > _raw(other)

    def __ge__(self, other: Any) -> bool:
        return self._value >= _raw(other)

    __hash__ = None  # type: ignore[assignment]

    def __int__(self) -> int:
        return int(self._value)

    def __float__(self) -> float:
        return float(self._value)

    def __index__(self) -> int:
        return operator.index(self._value)

    def __bool__(self) -> bool:
        return bool(self._value)