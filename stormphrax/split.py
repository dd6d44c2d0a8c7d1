"""Splitting command lines into tokens."""

from __future__ import annotations


def split(text: str, delim: str = " ") -> list[str]:
    """Split ``text`` on a single-character delimiter, dropping empty tokens."""
    if len(delim) != 1:
        raise ValueError(f"delimiter must be a single character, got {delim!r}")
    return [token for token in text.split(delim) if token]