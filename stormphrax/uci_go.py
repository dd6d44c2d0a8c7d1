"""Parsing of the UCI ``go`` command and checks on its time control."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Iterable

from .parse import try_parse_int

_I32_MAX = (1 << 31) - 1
_PROMOTION_CHARS = frozenset("nbrqNBRQ")


class TimeControlRejected(Exception):
    """The requested time control is not enabled; the engine answers with a null move."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


@dataclass
class GoCommand:
    """The limits and options requested by a ``go`` command.

    ``depth`` is None when no depth was given. Node and move-time limits
    accumulate, one entry per occurrence; all apply together. Times are in
    milliseconds and only the values for the side to move are kept.
    """

    depth: int | None = None
    infinite: bool = False
    node_limits: list[int] = field(default_factory=list)
    move_time_limits: list[int] = field(default_factory=list)
    tournament_time: bool = False
    time_remaining: int = 0
    increment: int = 0
    moves_to_go: int = 0
    search_moves: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)


def _looks_like_uci_move(token: str) -> bool:
    if not 4 <= len(token) <= 5:
        return False
    if not ("a" <= token[0] <= "h" and "1" <= token[1] <= "8"):
        return False
    if not ("a" <= token[2] <= "h" and "1" <= token[3] <= "8"):
        return False
    return len(token) < 5 or token[4] in _PROMOTION_CHARS


def _parse_time(token: str) -> int | None:
    return try_parse_int(token, 10, True, 64)


def parse_go(args: Iterable[str], black_to_move: bool) -> GoCommand:
    """Parse the arguments of ``go``; malformed values are reported in ``errors``."""
    go = GoCommand()
    own_time = "btime" if black_to_move else "wtime"
    own_inc = "binc" if black_to_move else "winc"

    queue = deque(args)
    while queue:
        token = queue.popleft()

        if token == "infinite":
            go.infinite = True
            continue

        if token == "searchmoves":
            while queue and _looks_like_uci_move(queue[0]):
                move = queue.popleft()
                if move not in go.search_moves:
                    go.search_moves.append(move)
            continue

        if token not in {"depth", "nodes", "movetime", "wtime", "btime", "winc", "binc", "movestogo"}:
            continue
        if not queue:
            break
        value = queue.popleft()

        if token == "depth":
            depth = try_parse_int(value, 10, False, 32)
            if depth is None:
                go.errors.append(f"invalid depth {value}")
            else:
                go.depth = depth
        elif token == "nodes":
            nodes = try_parse_int(value, 10, False, 64)
            if nodes is None:
                go.errors.append(f"invalid node count {value}")
            else:
                go.node_limits.append(nodes)
        elif token == "movetime":
            time = _parse_time(value)
            if time is None:
                go.errors.append(f"invalid time {value}")
            else:
                go.move_time_limits.append(max(time, 1))
        elif token == own_time:
            go.tournament_time = True
            time = _parse_time(value)
            if time is None:
                go.errors.append(f"invalid time {value}")
            else:
                go.time_remaining = max(time, 1)
        elif token == own_inc:
            go.tournament_time = True
            time = _parse_time(value)
            if time is None:
                go.errors.append(f"invalid time {value}")
            else:
                go.increment = max(time, 1)
        elif token == "movestogo":
            go.tournament_time = True
            moves = try_parse_int(value, 10, False, 32)
            if moves is None:
                go.errors.append(f"invalid movestogo {value}")
            else:
                go.moves_to_go = min(moves, _I32_MAX)

    return go


def check_time_control(go: GoCommand, enable_weird_tcs: bool) -> str | None:
    """Check cyclic and sudden-death time controls.

    Returns a warning when such a control is allowed, None when the time
    control is ordinary, and raises TimeControlRejected when it is not enabled.
    """
    if not go.tournament_time:
        return None

    if go.moves_to_go != 0:
        if enable_weird_tcs:
            return "Warning: Stormphrax does not officially support cyclic (movestogo) time controls"
        raise TimeControlRejected(
            "Cyclic (movestogo) time controls not enabled, see the EnableWeirdTCs option"
        )

    if go.increment == 0:
        if enable_weird_tcs:
            return "Warning: Stormphrax does not officially support sudden death (0 increment) time controls"
        raise TimeControlRejected(
            "Sudden death (0 increment) time controls not enabled, see the EnableWeirdTCs option"
        )

    return None