"""A calendar date and time of day with one-second resolution."""

from __future__ import annotations

from dataclasses import astuple, dataclass
from datetime import datetime
from typing import Any

__all__ = ["DateData"]


@dataclass
class DateData:
    """Year, month, day, hour, minute and second as plain integers."""

    year: int = 0
    mon: int = 0
    day: int = 0
    hour: int = 0
    min: int = 0
    sec: int = 0

    @staticmethod
    def now() -> DateData:
        """The current local date and time."""
        return DateData().update()

    def update(self) -> DateData:
        """Set the fields to the current local time and return ``self``."""
        t = datetime.now()
        self.year, self.mon, self.day = t.year, t.month, t.day
        self.hour, self.min, self.sec = t.hour, t.minute, t.second
        return self

    def to_string(self) -> str:
        return (
            f"{self.year}/{self.mon}/{self.day} "
            f"{self.hour:>2d}:{self.min:>2d}:{self.sec:>2d}"
        )

    def __str__(self) -> str:
        return self.to_string()

    def to_json(self) -> list[int]:
        return list(astuple(self))

    @staticmethod
    def from_json(data: Any) -> DateData:
        try:
            values = [int(v) for v in data]
        except TypeError as exc:
            raise ValueError("expected a list of six integers") from exc
        if len(values) != 6:
            raise ValueError("expected a list of six integers")
        return DateData(*values)