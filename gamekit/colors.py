"""8-bit and floating point colours."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

__all__ = ["Color3", "Color4", "Color4F"]


def _check_bytes(*values: Any) -> None:
    for v in values:
        if not isinstance(v, int) or isinstance(v, bool) or not 0 <= v <= 255:
            raise ValueError(f"colour component must be an integer in 0..255, got {v!r}")


def _unpack(data: Any, count: int) -> list[Any]:
    try:
        values = list(data)
    except TypeError as exc:
        raise ValueError(f"expected a list of {count} components") from exc
    if len(values) != count:
        raise ValueError(f"expected a list of {count} components")
    return values


def _byte_list(values: tuple[int, ...]) -> str:
    return "{" + ", ".join(f"{v:>3}" for v in values) + "}"


@dataclass(frozen=True, slots=True)
class Color3:
    """An opaque RGB colour with 8-bit components."""

    r: int = 0
    g: int = 0
    b: int = 0

    def __post_init__(self) -> None:
        _check_bytes(self.r, self.g, self.b)

    @staticmethod
    def from_hex(value: int) -> Color3:
        """Build from ``0xRRGGBB``; higher bits are ignored."""
        return Color3((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)

    def hex(self) -> int:
        """The colour packed as ``0xRRGGBB``."""
        return (self.r << 16) | (self.g << 8) | self.b

    def __int__(self) -> int:
        return self.hex()

    def to_string(self, hex_format: bool = True) -> str:
        if hex_format:
            return f"#{self.hex():06X}"
        return _byte_list((self.r, self.g, self.b))

    def __str__(self) -> str:
        return self.to_string()

    def to_json(self) -> list[int]:
        return [self.r, self.g, self.b]

    @staticmethod
    def from_json(data: Any) -> Color3:
        return Color3(*_unpack(data, 3))


@dataclass(frozen=True, slots=True)
class Color4:
    """An RGBA colour with 8-bit components."""

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 0

    def __post_init__(self) -> None:
        _check_bytes(self.r, self.g, self.b, self.a)

    @staticmethod
    def from_hex(value: int) -> Color4:
        """Build from ``0xAARRGGBB``."""
        return Color4(
            (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF, (value >> 24) & 0xFF
        )

    def hex(self) -> int:
        """The colour packed as ``0xAARRGGBB``."""
        return (self.a << 24) | (self.r << 16) | (self.g << 8) | self.b

    def __int__(self) -> int:
        return self.hex()

    def to_string(self, hex_format: bool = True) -> str:
        """Hex form ``#AARRGGBB`` or a list in the order alpha, red, green, blue."""
        if hex_format:
            return f"#{self.hex():08X}"
        return _byte_list((self.a, self.r, self.g, self.b))

    def __str__(self) -> str:
        return self.to_string()

    def to_json(self) -> list[int]:
        return [self.r, self.g, self.b, self.a]

    @staticmethod
    def from_json(data: Any) -> Color4:
        return Color4(*_unpack(data, 4))


@dataclass(frozen=True, slots=True)
class Color4F:
    """An RGBA colour with floating point components, normally in [0, 1]."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 0.0

    @staticmethod
    def from_color4(color: Color4) -> Color4F:
        return Color4F(color.r / 255, color.g / 255, color.b / 255, color.a / 255)

    def to_string(self, digit: int = 6) -> str:
        """Components in the order alpha, red, green, blue with ``digit + 1`` decimals."""
        precision = digit + 1
        body = ", ".join(f"{v:>1.{precision}f}" for v in (self.a, self.r, self.g, self.b))
        return "{" + body + "}"

    def __str__(self) -> str:
        return self.to_string()

    def to_json(self) -> list[float]:
        """Red, green and blue; alpha is not stored."""
        return [self.r, self.g, self.b]

    @staticmethod
    def from_json(data: Any) -> Color4F:
        """Accept ``[r, g, b]`` (alpha 0) or ``[r, g, b, a]``."""
        try:
            values = list(data)
        except TypeError as exc:
            raise ValueError("expected a list of 3 or 4 components") from exc
        if len(values) not in (3, 4):
            raise ValueError("expected a list of 3 or 4 components")
        return Color4F(*(float(v) for v in values))