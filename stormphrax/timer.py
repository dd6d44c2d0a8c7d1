"""Monotonic time points measured in seconds."""

from __future__ import annotations

import time
from dataclasses import dataclass

_EPOCH = time.monotonic()


def _now() -> float:
    return time.monotonic() - _EPOCH


@dataclass(frozen=True, order=True)
class Instant:
    """A point in time on a monotonic clock, in seconds since process start."""

    _time: float

    @classmethod
    def now(cls) -> Instant:
        """Return the current instant."""
        return cls(_now())

    def elapsed(self) -> float:
        """Seconds passed since this instant."""
        return _now() - self._time

    def __add__(self, seconds: float) -> Instant:
        return Instant(self._time + seconds)

    def __sub__(self, seconds: float) -> Instant:
        return Instant(self._time - seconds)