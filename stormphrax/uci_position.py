"""Parsing of the UCI ``position`` command."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from .parse import try_parse_int

MOVES = "moves"


class PositionCommandError(ValueError):
    """A ``position`` command that cannot be carried out."""


@dataclass
class PositionCommand:
    """A requested position: ``kind`` is startpos, fen, frc or dfrc.

    ``fen_parts`` holds the FEN fields for ``fen``; ``index`` the start
    position number for ``frc`` and ``dfrc``. ``moves`` lists the UCI moves
    to play from it, in order.
    """

    kind: str
    fen_parts: tuple[str, ...] = ()
    index: int | None = None
    moves: list[str] = field(default_factory=list)

    @property
    def fen(self) -> str | None:
        return " ".join(self.fen_parts) if self.kind == "fen" else None


def _count_before_moves(args: Sequence[str]) -> int:
    try:
        return args.index(MOVES)
    except ValueError:
        return len(args)


def parse_position(args: Sequence[str], chess960: bool) -> PositionCommand | None:
    """Parse the arguments of ``position``; None when there are none."""
    args = list(args)
    if not args:
        return None

    kind, rest = args[0], args[1:]
    next_index = 0

    if kind == "startpos":
        command = PositionCommand(kind)
    elif kind == "fen":
        count = _count_before_moves(rest)
        if count == 0:
            raise PositionCommandError("Missing fen")
        command = PositionCommand(kind, fen_parts=tuple(rest[:count]))
        next_index = count
    elif kind in ("frc", "dfrc"):
        if not chess960:
            raise PositionCommandError("Chess960 not enabled")
        label = kind.upper()
        count = _count_before_moves(rest)
        if count == 0:
            raise PositionCommandError(f"Missing {label} index")
        index = try_parse_int(rest[0], 10, False, 32)
        if index is None:
            raise PositionCommandError(f"Invalid {label} index {rest[0]}")
        command = PositionCommand(kind, index=index)
        next_index = count
    else:
        raise PositionCommandError(f"Invalid position type {kind}")

    if next_index < len(rest) and rest[next_index] == MOVES:
        command.moves = rest[next_index + 1 :]
    return command