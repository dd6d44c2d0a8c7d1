"""Search parameters that can be tuned externally, and the tables derived from them."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Callable, Iterator, NamedTuple

from .ranges import Range

LMR_TABLE_SIZE = 256
SEE_VALUE_COUNT = 13


@dataclass
class TunableParam:
    """One tunable integer parameter.

    Parameters that stand for real numbers are stored multiplied by
    ``quantization``; their public value is ``value / quantization``.
    """

    name: str
    default_value: int
    range: Range[int]
    step: float
    quantization: int = 1
    callback: Callable[[], None] | None = field(default=None, repr=False, compare=False)
    value: int = field(init=False)

    def __post_init__(self) -> None:
        if self.quantization <= 0:
            raise ValueError(f"{self.name}: quantization must be positive")
        if not self.range.min < self.range.max:
            raise ValueError(f"{self.name}: min must be below max")
        if not self.range.contains(self.default_value):
            raise ValueError(f"{self.name}: default {self.default_value} outside range")
        if self.range.min + self.step > self.range.max:
            raise ValueError(f"{self.name}: step too large for range")
        if self.step < 0.5:
            raise ValueError(f"{self.name}: step must be at least 0.5")
        self.value = self.default_value

    @property
    def lower_name(self) -> str:
        return self.name.lower()

    @property
    def is_float(self) -> bool:
        return self.quantization != 1

    @property
    def scaled_value(self) -> int | float:
        """The parameter as the search uses it."""
        if self.is_float:
            return self.value / self.quantization
        return self.value


class _Spec(NamedTuple):
    name: str
    default: float
    min: float
    max: float
    step: float
    quantization: int | None
    callback: str | None


def _i(name, default, lo, hi, step, callback=None) -> _Spec:
    return _Spec(name, default, lo, hi, step, None, callback)


def _f(name, default, lo, hi, step, q) -> _Spec:
    return _Spec(name, default, lo, hi, step, q, None)


_SEE = "update_see_value_table"
_QUIET = "update_quiet_lmr_table"
_NOISY = "update_noisy_lmr_table"

_SPECS: tuple[_Spec, ...] = (
    _i("defaultMovesToGo", 19, 12, 40, 1),
    _f("incrementScale", 0.83, 0.5, 1.0, 0.05, 100),
    _f("softTimeScale", 0.68, 0.5, 1.0, 0.05, 100),
    _f("hardTimeScale", 0.56, 0.2, 1.0, 0.05, 100),
    _f("nodeTmBase", 2.63, 1.5, 3.0, 0.1, 100),
    _f("nodeTmScale", 1.7, 1.0, 2.5, 0.1, 100),
    _f("nodeTmScaleMin", 0.102, 0.001, 1.0, 0.1, 1000),
    _f("bmStabilityTmMin", 0.75, 0.4, 1.0, 0.03, 100),
    _f("bmStabilityTmMax", 2.4, 1.2, 10.0, 0.4, 100),
    _f("bmStabilityTmScale", 9.11, 2.0, 15.0, 0.65, 100),
    _f("bmStabilityTmOffset", 0.8, 0.5, 2.0, 0.08, 100),
    _f("bmStabilityTmPower", -2.7, -4.0, -1.5, 0.13, 100),
    _f("scoreTrendTmMin", 0.6, 0.4, 1.0, 0.03, 100),
    _f("scoreTrendTmMax", 1.7, 1.2, 10.0, 0.4, 100),
    _f("scoreTrendTmScoreScale", 4.58, 0.1, 10.0, 0.5, 100),
    _f("scoreTrendTmStretch", 0.8, 0.1, 2.0, 0.1, 100),
    _f("scoreTrendTmScale", 0.41, 0.1, 0.9, 0.04, 100),
    _f("scoreTrendTmPositiveScale", 1.09, 0.5, 2.0, 0.075, 100),
    _f("scoreTrendTmNegativeScale", 1.04, 0.5, 2.0, 0.075, 100),
    _f("timeScaleMin", 0.07, 0.001, 1.0, 0.1, 1000),
    _i("seeValuePawn", 100, 50, 200, 7.5, _SEE),
    _i("seeValueKnight", 450, 300, 700, 25, _SEE),
    _i("seeValueBishop", 450, 300, 700, 25, _SEE),
    _i("seeValueRook", 650, 400, 1000, 30, _SEE),
    _i("seeValueQueen", 1250, 800, 1600, 40, _SEE),
    _i("scalingValueKnight", 450, 300, 700, 25),
    _i("scalingValueBishop", 450, 300, 700, 25),
    _i("scalingValueRook", 650, 400, 1000, 30),
    _i("scalingValueQueen", 1250, 800, 1600, 40),
    _i("materialScalingBase", 26500, 10000, 40000, 1500),
    _i("pawnCorrhistWeight", 133, 32, 384, 18),
    _i("stmNonPawnCorrhistWeight", 142, 32, 384, 18),
    _i("nstmNonPawnCorrhistWeight", 142, 32, 384, 18),
    _i("majorCorrhistWeight", 129, 32, 384, 18),
    _i("contCorrhistWeight", 134, 32, 384, 18),
    _i("initialAspWindow", 16, 4, 50, 4),
    _i("aspWideningFactor", 17, 1, 24, 1),
    _i("goodNoisySeeOffset", 15, -384, 384, 40),
    _i("rfpMargin", 71, 25, 150, 5),
    _i("rfpCorrplexityScale", 64, 16, 128, 5),
    _i("razoringMargin", 315, 100, 350, 40),
    _i("nmpEvalReductionScale", 206, 50, 300, 25),
    _i("probcutMargin", 303, 150, 400, 13),
    _i("probcutSeeScale", 17, 6, 24, 1),
    _i("fpMargin", 261, 120, 350, 45),
    _i("fpScale", 68, 40, 80, 8),
    _i("quietHistPruningMargin", -2314, -4000, -1000, 175),
    _i("quietHistPruningOffset", -1157, -4000, 4000, 400),
    _i("noisyHistPruningMargin", -1000, -4000, -1000, 175),
    _i("noisyHistPruningOffset", -1000, -4000, 4000, 400),
    _i("seePruningThresholdQuiet", -16, -80, -1, 12),
    _i("seePruningThresholdNoisy", -112, -120, -40, 20),
    _i("sBetaMargin", 14, 4, 64, 12),
    _i("doubleExtMargin", 11, 0, 32, 5),
    _i("tripleExtMargin", 105, 10, 150, 7),
    _i("ldseMargin", 26, 10, 60, 3),
    _i("quietLmrBase", 83, 50, 120, 15, _QUIET),
    _i("quietLmrDivisor", 218, 100, 300, 10, _QUIET),
    _i("noisyLmrBase", -12, -50, 75, 10, _NOISY),
    _i("noisyLmrDivisor", 248, 150, 350, 10, _NOISY),
    _i("lmrNonPvReductionScale", 131, 32, 384, 12),
    _i("lmrTtpvReductionScale", 130, 32, 384, 12),
    _i("lmrImprovingReductionScale", 148, 32, 384, 12),
    _i("lmrCheckReductionScale", 111, 32, 384, 12),
    _i("lmrCutnodeReductionScale", 257, 32, 384, 12),
    _i("lmrTtpvFailLowReductionScale", 128, 32, 384, 12),
    _i("lmrHighComplexityReductionScale", 128, 32, 384, 12),
    _i("lmrQuietHistoryDivisor", 10835, 4096, 16384, 650),
    _i("lmrNoisyHistoryDivisor", 10835, 4096, 16384, 650),
    _i("lmrHighComplexityThreshold", 70, 30, 120, 5),
    _i("lmrDeeperBase", 38, 20, 100, 6),
    _i("lmrDeeperScale", 4, 3, 12, 1),
    _i("maxHistory", 15769, 8192, 32768, 256),
    _i("maxHistoryBonus", 2576, 1024, 4096, 256),
    _i("historyBonusDepthScale", 280, 128, 512, 32),
    _i("historyBonusOffset", 432, 128, 768, 64),
    _i("maxHistoryPenalty", 1239, 1024, 4096, 256),
    _i("historyPenaltyDepthScale", 343, 128, 512, 32),
    _i("historyPenaltyOffset", 161, 128, 768, 64),
    _i("qsearchFpMargin", 135, 50, 400, 17),
    _i("qsearchSeeThreshold", -97, -2000, 200, 30),
)

_LOGS = [0.0] + [math.log(float(n)) for n in range(1, LMR_TABLE_SIZE)]


def _lmr_table(base: float, divisor: float) -> list[list[int]]:
    table = [[0] * LMR_TABLE_SIZE for _ in range(LMR_TABLE_SIZE)]
    for depth in range(1, LMR_TABLE_SIZE):
        ln_depth = _LOGS[depth]
        row = table[depth]
        for moves in range(1, LMR_TABLE_SIZE):
            row[moves] = int(128.0 * (base + ln_depth * _LOGS[moves] / divisor))
    return table


class Tunables:
    """The full set of tunable parameters with their derived tables.

    ``lmr_table`` is indexed ``[noisy][depth][legal moves]``;
    ``see_values`` by coloured piece, with a trailing entry for none.
    """

    def __init__(self) -> None:
        self._params: dict[str, TunableParam] = {}
        for spec in _SPECS:
            callback = getattr(self, spec.callback) if spec.callback else None
            if spec.quantization is None:
                param = TunableParam(
                    spec.name,
                    int(spec.default),
                    Range(int(spec.min), int(spec.max)),
                    float(spec.step),
                    callback=callback,
                )
            else:
                q = spec.quantization
                param = TunableParam(
                    spec.name,
                    round(spec.default * q),
                    Range(round(spec.min * q), round(spec.max * q)),
                    spec.step * q,
                    quantization=q,
                    callback=callback,
                )
            self._params[param.lower_name] = param

        self.lmr_table: list[list[list[int]]] = [[], []]
        self.see_values: list[int] = [0] * SEE_VALUE_COUNT

        self.update_quiet_lmr_table()
        self.update_noisy_lmr_table()
        self.update_see_value_table()

    def lookup(self, name: str) -> TunableParam | None:
        """Find a parameter by name, ignoring case."""
        return self._params.get(name.lower())

    def set(self, name: str, value: int) -> None:
        """Set a parameter's raw integer value and refresh any table that depends on it."""
        param = self.lookup(name)
        if param is None:
            raise KeyError(name)
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"tunable values are integers, got {value!r}")
        param.value = value
        if param.callback is not None:
            param.callback()

    def __getitem__(self, name: str) -> int | float:
        param = self.lookup(name)
        if param is None:
            raise KeyError(name)
        return param.scaled_value

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.lookup(name) is not None

    def __iter__(self) -> Iterator[TunableParam]:
        return iter(self._params.values())

    def __len__(self) -> int:
        return len(self._params)

    def update_quiet_lmr_table(self) -> None:
        base = self["quietLmrBase"] / 100.0
        divisor = self["quietLmrDivisor"] / 100.0
        self.lmr_table[0] = _lmr_table(base, divisor)

    def update_noisy_lmr_table(self) -> None:
        base = self["noisyLmrBase"] / 100.0
        divisor = self["noisyLmrDivisor"] / 100.0
        self.lmr_table[1] = _lmr_table(base, divisor)

    def update_see_value_table(self) -> None:
        values = [0] * SEE_VALUE_COUNT
        pieces = ("Pawn", "Knight", "Bishop", "Rook", "Queen")
        for i, piece in enumerate(pieces):
            score = self[f"seeValue{piece}"]
            values[i * 2] = score
            values[i * 2 + 1] = score
        self.see_values = values

    def lmr_reduction(self, noisy: bool, depth: int, moves: int) -> int:
        """Base reduction, in 1/128ths of a ply, for a move at ``depth`` after ``moves`` legal moves."""
        return self.lmr_table[1 if noisy else 0][depth][moves]