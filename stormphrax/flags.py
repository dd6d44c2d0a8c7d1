"""Helpers for testing, setting and toggling bit flags."""

from __future__ import annotations

from typing import TypeVar

F = TypeVar("F")


def test_flags(field: F, flags: F) -> bool:
    """Whether any of ``flags`` is set in ``field``."""
    return bool(field & flags)


def set_flags(field: F, flags: F, value: bool) -> F:
    """Return ``field`` with ``flags`` set if ``value`` is true, else cleared."""
    if value:
        return field | flags
    return field & ~flags


def flip_flags(field: F, flags: F) -> F:
    """Return ``field`` with ``flags`` toggled."""
    return field ^ flags