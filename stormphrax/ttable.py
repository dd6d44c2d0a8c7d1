"""Shared transposition table with clustered, age-aware replacement."""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace

from .ranges import Range

DEFAULT_TT_SIZE_MIB = 64
TT_SIZE_MIB_RANGE = Range(1, 67108864)

AGE_BITS = 5
AGE_CYCLE = 1 << AGE_BITS
AGE_MASK = AGE_CYCLE - 1

ENTRIES_PER_CLUSTER = 3
CLUSTER_SIZE = 32

_MASK64 = (1 << 64) - 1


class TtFlag(enum.IntEnum):
    NONE = 0
    UPPER_BOUND = 1
    LOWER_BOUND = 2
    EXACT = 3


@dataclass(frozen=True)
class ProbedEntry:
    score: int
    static_eval: int
    depth: int
    move: int
    was_pv: bool
    flag: TtFlag


@dataclass(frozen=True)
class _Entry:
    key: int = 0
    score: int = 0
    static_eval: int = 0
    move: int = 0
    depth: int = 0
    age_pv_flag: int = 0

    @property
    def age(self) -> int:
        return self.age_pv_flag >> 3

    @property
    def pv(self) -> bool:
        return bool((self.age_pv_flag >> 2) & 1)

    @property
    def flag(self) -> TtFlag:
        return TtFlag(self.age_pv_flag & 0x3)


_EMPTY = _Entry()


def _to_i16(v: int) -> int:
    v &= 0xFFFF
    return v - 0x10000 if v >= 0x8000 else v


def score_to_tt(score: int, ply: int, score_win: int) -> int:
    """Convert a mate score from root-relative to node-relative."""
    if score < -score_win:
        return score - ply
    if score > score_win:
        return score + ply
    return score


def score_from_tt(score: int, ply: int, score_win: int) -> int:
    """Convert a stored mate score back to root-relative."""
    if score < -score_win:
        return score + ply
    if score > score_win:
        return score - ply
    return score


class TTable:
    """Transposition table of three-entry clusters, sized in MiB.

    After construction or :meth:`resize` the table must be finalized
    before use.
    """

    def __init__(self, mib: int, score_win: int, max_depth: int) -> None:
        self._score_win = score_win
        self._max_depth = max_depth
        self._clusters: dict[int, list[_Entry]] | None = None
        self._cluster_count = 0
        self._pending_init = False
        self._age = 0
        self.resize(mib)

    @property
    def cluster_count(self) -> int:
        return self._cluster_count

    @property
    def age(self) -> int:
        return self._age

    def resize(self, mib: int) -> None:
        """Set the size; storage is rebuilt by the next :meth:`finalize`."""
        if not TT_SIZE_MIB_RANGE.contains(mib):
            raise ValueError(f"table size {mib} MiB outside {TT_SIZE_MIB_RANGE.min}..{TT_SIZE_MIB_RANGE.max}")
        capacity = mib * 1024 * 1024 // CLUSTER_SIZE
        if capacity != self._cluster_count:
            self._clusters = None
            self._cluster_count = capacity
        self._pending_init = True

    def finalize(self) -> bool:
        """Allocate and clear pending storage; return whether anything was done."""
        if not self._pending_init:
            return False
        self._pending_init = False
        self._clusters = {}
        self.clear()
        return True

    def _require_ready(self) -> dict[int, list[_Entry]]:
        if self._pending_init or self._clusters is None:
            raise RuntimeError("transposition table used before finalize()")
        return self._clusters

    def _index(self, key: int) -> int:
        return ((key & _MASK64) * self._cluster_count) >> 64

    def probe(self, key: int, ply: int) -> ProbedEntry | None:
        """Look up ``key``; return the stored entry or None."""
        clusters = self._require_ready()
        packed = key & 0xFFFF
        cluster = clusters.get(self._index(key))
        entries = cluster if cluster is not None else (_EMPTY,) * ENTRIES_PER_CLUSTER
        for entry in entries:
            if entry.key == packed:
                return ProbedEntry(
                    score=score_from_tt(entry.score, ply, self._score_win),
                    static_eval=entry.static_eval,
                    depth=entry.depth,
                    move=entry.move,
                    was_pv=entry.pv,
                    flag=entry.flag,
                )
        return None

    def put(
        self,
        key: int,
        score: int,
        static_eval: int,
        move: int,
        depth: int,
        ply: int,
        flag: TtFlag,
        pv: bool,
    ) -> None:
        """Store a search result, following the replacement scheme."""
        clusters = self._require_ready()
        if not 0 <= depth <= self._max_depth:
            raise ValueError(f"depth {depth} outside 0..{self._max_depth}")

        new_key = key & 0xFFFF
        index = self._index(key)
        cluster = clusters.get(index)
        if cluster is None:
            cluster = [_EMPTY] * ENTRIES_PER_CLUSTER
            clusters[index] = cluster

        def entry_value(entry: _Entry) -> int:
            relative_age = (AGE_CYCLE + self._age - entry.age) & AGE_MASK
            return entry.depth - relative_age * 2

        slot = 0
        min_value = None
        for i, candidate in enumerate(cluster):
            if candidate.key == new_key or candidate.flag == TtFlag.NONE:
                slot = i
                break
            value = entry_value(candidate)
            if min_value is None or value < min_value:
                slot = i
                min_value = value

        entry = cluster[slot]

        if not (
            flag == TtFlag.EXACT
            or new_key != entry.key
            or entry.age != self._age
            or depth + 4 + int(pv) * 2 > entry.depth
        ):
            return

        new_move = move if (move or entry.key != new_key) else entry.move

        cluster[slot] = replace(
            entry,
            key=new_key,
            score=_to_i16(score_to_tt(score, ply, self._score_win)),
            static_eval=_to_i16(static_eval),
            move=new_move,
            depth=depth & 0xFF,
            age_pv_flag=(self._age << 3) | (int(bool(pv)) << 2) | int(flag),
        )

    def advance_age(self) -> None:
        """Start a new search generation."""
        self._age = (self._age + 1) % AGE_CYCLE

    def clear(self) -> None:
        """Empty every cluster and reset the age."""
        self._require_ready().clear()
        self._age = 0

    def full(self) -> int:
        """Permille of current-age entries, sampled from the first 1000 clusters."""
        clusters = self._require_ready()
        filled = 0
        for i in range(1000):
            cluster = clusters.get(i)
            if cluster is None:
                continue
            filled += sum(
                1 for entry in cluster if entry.flag != TtFlag.NONE and entry.age == self._age
            )
        return filled // ENTRIES_PER_CLUSTER