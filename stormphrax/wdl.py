"""Win/draw/loss model and score normalisation."""

from __future__ import annotations

import math

MATERIAL58_NORMALIZATION_K = 276

_AS = (-96.02243718, 269.74715145, -333.86830676, 436.37312689)
_BS = (-25.83309316, 94.79252729, -54.62661884, 80.45166722)


def _round(x: float) -> int:
    """Round half away from zero."""
    return int(math.floor(x + 0.5)) if x >= 0 else -int(math.floor(-x + 0.5))


def _div_trunc(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def _poly(coeffs: tuple[float, float, float, float], m: float) -> float:
    return ((coeffs[0] * m + coeffs[1]) * m + coeffs[2]) * m + coeffs[3]


def wdl_params(material: int) -> tuple[float, float]:
    """Return the model's ``(a, b)`` for a material count, clamped to 17..78."""
    m = max(17, min(material, 78)) / 58.0
    return _poly(_AS, m), _poly(_BS, m)


def wdl_model(pov_score: int, material: int) -> tuple[int, int]:
    """Return ``(win, loss)`` in permille for a score from the mover's view."""
    a, b = wdl_params(material)
    x = float(pov_score)
    win = _round(1000.0 / (1.0 + math.exp((a - x) / b)))
    loss = _round(1000.0 / (1.0 + math.exp((a + x) / b)))
    return win, loss


def normalize_score(score: int, material: int, score_win: int) -> int:
    """Scale a score so that 100 means a 50% win chance; wins and zero pass through."""
    if score == 0 or abs(score) > score_win:
        return score
    a, _ = wdl_params(material)
    return _round(100.0 * score / a)


def unnormalize_score_material58(score: int, score_win: int) -> int:
    """Approximate inverse of normalisation at 58 material."""
    if score == 0 or abs(score) > score_win:
        return score
    return _div_trunc(score * MATERIAL58_NORMALIZATION_K, 100)