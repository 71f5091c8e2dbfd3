"""Easing curves mapping progress in [0, 1] to a rate in [0, 1]."""

from __future__ import annotations

import math
from enum import Enum
from typing import Callable

__all__ = ["Base", "Line", "get_rate", "get_sigmoid_rate", "get_bounce_rate"]


class Base(Enum):
    """Which end of the curve the easing applies to."""

    IN = 0
    OUT = 1
    IN_OUT = 2
    OUT_IN = 3


class Line(Enum):
    """Shape of the easing curve."""

    LINEAR = 0
    SINE = 1
    QUAD = 2
    CUBIC = 3
    QUART = 4
    QUINT = 5
    EXPO = 6
    CIRC = 7
    BACK = 8
    ELASTIC = 9
    BOUNCE = 10


_BACK_C1 = 1.70158
_BACK_C3 = _BACK_C1 + 1
_ELASTIC_C4 = math.tau / 3
_BOUNCE_N1 = 7.5625
_BOUNCE_D1 = 2.75


def _edge(x: float) -> float | None:
    """Return the clamped value when ``x`` is outside (0, 1), else None."""
    if x <= 0:
        return 0.0
    if x >= 1:
        return 1.0
    return None


def _bounce_out(x: float) -> float:
    if x < 1 / _BOUNCE_D1:
        return _BOUNCE_N1 * x * x
    if x < 2 / _BOUNCE_D1:
        x -= 1.5 / _BOUNCE_D1
        return _BOUNCE_N1 * x * x + 0.75
    if x < 2.5 / _BOUNCE_D1:
        x -= 2.25 / _BOUNCE_D1
        return _BOUNCE_N1 * x * x + 0.9375
    x -= 2.625 / _BOUNCE_D1
    return _BOUNCE_N1 * x * x + 0.984375


def _elastic_in(x: float) -> float:
    if x == 0:
        return 0.0
    if x == 1:
        return 1.0
    return -math.pow(2, 10 * x - 10) * math.sin((x * 10 - 10.75) * _ELASTIC_C4)


def _elastic_out(x: float) -> float:
    if x == 0:
        return 0.0
    if x == 1:
        return 1.0
    return math.pow(2, -10 * x) * math.sin((x * 10 - 0.75) * _ELASTIC_C4) + 1


_IN: dict[Line, Callable[[float], float]] = {
    Line.LINEAR: lambda x: x,
    Line.SINE: lambda x: 1 - math.cos(x * math.pi / 2),
    Line.QUAD: lambda x: x**2,
    Line.CUBIC: lambda x: x**3,
    Line.QUART: lambda x: x**4,
    Line.QUINT: lambda x: x**5,
    Line.EXPO: lambda x: 0.0 if x == 0 else math.pow(2, 10 * x - 10),
    Line.CIRC: lambda x: 1 - math.sqrt(1 - x**2),
    Line.BACK: lambda x: _BACK_C3 * x**3 - _BACK_C1 * x**2,
    Line.ELASTIC: _elastic_in,
    Line.BOUNCE: lambda x: 1 - _bounce_out(1 - x),
}

_OUT: dict[Line, Callable[[float], float]] = {
    Line.LINEAR: lambda x: x,
    Line.SINE: lambda x: math.sin(x * math.pi / 2),
    Line.QUAD: lambda x: 1 - (1 - x) ** 2,
    Line.CUBIC: lambda x: 1 - (1 - x) ** 3,
    Line.QUART: lambda x: 1 - (1 - x) ** 4,
    Line.QUINT: lambda x: 1 - (1 - x) ** 5,
    Line.EXPO: lambda x: 1.0 if x == 1 else 1 - math.pow(2, -10 * x),
    Line.CIRC: lambda x: math.sqrt(1 - (x - 1) ** 2),
    Line.BACK: lambda x: 1 + _BACK_C3 * (x - 1) ** 3 + _BACK_C1 * (x - 1) ** 2,
    Line.ELASTIC: _elastic_out,
    Line.BOUNCE: _bounce_out,
}


def get_rate(x: float, base: Base, line: Line) -> float:
    """Eased rate for progress ``x``; values outside (0, 1) clamp to 0 or 1."""
    edge = _edge(x)
    if edge is not None:
        return edge
    if base is Base.IN_OUT:
        x *= 2
        if x < 1:
            return get_rate(x, Base.IN, line) / 2
        return (1 + get_rate(x - 1, Base.OUT, line)) / 2
    if base is Base.OUT_IN:
        x *= 2
        if x < 1:
            return get_rate(x, Base.OUT, line) / 2
        return (1 + get_rate(x - 1, Base.IN, line)) / 2
    table = _IN if base is Base.IN else _OUT
    return table[line](x)


def _sigmoid(x: float, a: float) -> float:
    tail = math.exp(-a)
    s = math.exp(-a * (2 * x - 1))
    return (1 + ((1 - s) / (1 + s)) * ((1 + tail) / (1 - tail))) * 0.5


def get_sigmoid_rate(x: float, base: Base, a: float = 1.0) -> float:
    """Sigmoid-shaped rate with steepness ``a``, normalised to [0, 1]."""
    edge = _edge(x)
    if edge is not None:
        return edge
    if base is Base.IN:
        return _sigmoid(x / 2, a) * 2
    if base is Base.OUT:
        return (_sigmoid(x / 2 + 0.5, a) - 0.5) * 2
    if base is Base.IN_OUT:
        return _sigmoid(x, a)
    x *= 2
    if x < 1:
        return get_sigmoid_rate(x, Base.OUT, a) / 2
    return 0.5 + get_sigmoid_rate(x - 1, Base.IN, a) / 2


def get_bounce_rate(x: float, a: float) -> float:
    """Rise to 1 at the middle and fall back, shaped by exponent ``a``."""
    edge = _edge(x)
    if edge is not None:
        return edge
    x *= 2
    if x < 1:
        return 1 - math.pow(1 - x, a)
    return 1 - math.pow(x - 1, a)