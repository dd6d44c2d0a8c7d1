"""Parsing of the UCI ``setoption`` command."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .parse import try_parse_bool, try_parse_int

NAME = "name"
VALUE = "value"


@dataclass(frozen=True)
class SetOption:
    """A requested option change.

    ``name`` is lower-cased and its words are joined by single spaces.
    ``value`` is empty when the command has no ``value`` part, as for
    button options such as ``Clear Hash``.
    """

    name: str
    value: str = ""

    def as_int(self, signed: bool = False, bits: int = 32) -> int | None:
        """The value as an integer of the given width, or None."""
        if not self.value:
            return None
        return try_parse_int(self.value, 10, signed, bits)

    def as_bool(self) -> bool | None:
        """The value as ``true`` or ``false``, or None."""
        if not self.value:
            return None
        return try_parse_bool(self.value)


def parse_setoption(args: Iterable[str]) -> SetOption | None:
    """Parse the arguments of ``setoption``.

    Returns None when there is no option name, or when a ``value``
    keyword is given with nothing after it.
    """
    args = list(args)

    try:
        start = args.index(NAME) + 1
    except ValueError:
        return None
    if start >= len(args):
        return None

    rest = args[start:]
    if VALUE in rest:
        split_at = rest.index(VALUE)
        name_tokens = rest[:split_at]
        value_tokens = rest[split_at + 1 :]
        if not value_tokens:
            return None
    else:
        name_tokens = rest
        value_tokens = []

    name = " ".join(name_tokens).lower()
    if not name:
        return None

    return SetOption(name=name, value=" ".join(value_tokens))