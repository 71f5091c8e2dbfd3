"""Small numeric helpers."""

from __future__ import annotations

import math
from typing import Any

__all__ = ["abs_value", "combination", "lerp"]


def abs_value(x: float) -> float:
    """Return ``x`` with its sign bit cleared (so ``-0.0`` becomes ``0.0``)."""
    return math.copysign(float(x), 1.0)


def combination(n: int, k: int) -> int:
    """Number of ways to choose ``k`` items out of ``n``; 0 when ``k`` is out of range."""
    if k < 0 or k > n:
        return 0
    k = min(k, n - k)
    result = 1
    for i in range(k):
        result = result * (n - i) // (i + 1)
    return result


def lerp(a: Any, b: Any, t: float) -> Any:
    """Linear interpolation from ``a`` (t=0) to ``b`` (t=1)."""
    return a + (b - a) * t