"""Closed intervals used for option and parameter limits."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T", int, float)


@dataclass(frozen=True)
class Range(Generic[T]):
    """An inclusive range ``[min, max]``."""

    min: T
    max: T

    def contains(self, v: T) -> bool:
        """Whether ``v`` lies within the range, bounds included."""
        return self.min <= v <= self.max

    def clamp(self, v: T) -> T:
        """Return ``v`` limited to the range."""
        return max(self.min, min(v, self.max))