"""A pausable stopwatch with nanosecond resolution."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable, ClassVar

__all__ = ["ElapsedTime", "Timer"]


@dataclass(frozen=True)
class ElapsedTime:
    """A span of time measured in nanoseconds."""

    nanoseconds: int = 0

    frame_refresh_rate: ClassVar[float] = 60.0

    def second(self) -> float:
        return self.nanoseconds / 1_000_000_000

    def millisecond(self) -> float:
        return self.nanoseconds / 1_000_000

    def microsecond(self) -> float:
        return self.nanoseconds / 1_000

    def nanosecond(self) -> int:
        return self.nanoseconds

    def frame_count(self) -> int:
        """Whole frames elapsed at the current frame refresh rate."""
        return int(self.second() * ElapsedTime.frame_refresh_rate)

    def frame_time(self) -> float:
        """Seconds covered by the whole frames elapsed."""
        return self.frame_count() / ElapsedTime.frame_refresh_rate

    def __float__(self) -> float:
        return self.second()


class Timer:
    """A stopwatch that can be stopped and resumed without losing time."""

    def __init__(self, start: bool = False, clock: Callable[[], int] | None = None) -> None:
        self._clock = clock or time.perf_counter_ns
        self._timepoint: int | None = None
        self._stoptime = 0
        self._stopping = False
        if start:
            self.start()

    def start(self) -> None:
        """Start, or resume after :meth:`stop`; a running timer keeps going."""
        now = self._clock()
        if self._stopping and self._timepoint is not None:
            self._timepoint = now - (self._stoptime - self._timepoint)
        elif not self.running():
            self._timepoint = now
        self._stopping = False

    def stop(self) -> None:
        """Freeze the elapsed time; does nothing unless running."""
        if not self.running() or self._stopping:
            return
        self._stoptime = self._clock()
        self._stopping = True

    def reset(self) -> None:
        """Return to the never-started state."""
        self._timepoint = None
        self._stoptime = 0
        self._stopping = False

    def restart(self) -> None:
        self.reset()
        self.start()

    def running(self) -> bool:
        """True once started, including while stopped."""
        return self._timepoint is not None

    def elapsed(self) -> ElapsedTime:
        if self._timepoint is None:
            return ElapsedTime(0)
        end = self._stoptime if self._stopping else self._clock()
        return ElapsedTime(end - self._timepoint)

    @staticmethod
    def set_frame_refresh_rate(rate: float) -> None:
        """Set the frames per second used by frame counts."""
        if rate <= 0:
            raise ValueError("frame refresh rate must be positive")
        ElapsedTime.frame_refresh_rate = rate