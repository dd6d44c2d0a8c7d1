import pytest

from stormphrax import wdl

SCORE_WIN = 30000


def test_normalization_constant_matches_model():
    a, _ = wdl.wdl_params(58)
    assert int(a) == wdl.MATERIAL58_NORMALIZATION_K


def test_material_is_clamped():
    assert wdl.wdl_params(0) == wdl.wdl_params(17)
    assert wdl.wdl_params(200) == wdl.wdl_params(78)
    assert wdl.wdl_params(40) != wdl.wdl_params(17)


def test_zero_score_is_symmetric():
    win, loss = wdl.wdl_model(0, 58)
    assert win == loss
    assert win < 500


@pytest.mark.parametrize("score", [50, 150, 400])
def test_model_mirrors_under_negation(score):
    win, loss = wdl.wdl_model(score, 58)
    neg_win, neg_loss = wdl.wdl_model(-score, 58)
    assert win == neg_loss
    assert loss == neg_win
    assert win + loss <= 1000


def test_win_chance_increases_with_score():
    wins = [wdl.wdl_model(s, 58)[0] for s in (-300, -100, 0, 100, 300)]
    assert wins == sorted(wins)
    assert wins[0] < wins[-1]


def test_normalized_a_is_one_pawn():
    a, _ = wdl.wdl_params(58)
    assert wdl.normalize_score(round(a), 58, SCORE_WIN) == 100
    assert wdl.normalize_score(-round(a), 58, SCORE_WIN) == -100


def test_normalize_passes_through_zero_and_wins():
    assert wdl.normalize_score(0, 58, SCORE_WIN) == 0
    assert wdl.normalize_score(SCORE_WIN + 5, 58, SCORE_WIN) == SCORE_WIN + 5
    assert wdl.normalize_score(-SCORE_WIN - 5, 58, SCORE_WIN) == -SCORE_WIN - 5


def test_unnormalize():
    assert wdl.unnormalize_score_material58(100, SCORE_WIN) == 276
    assert wdl.unnormalize_score_material58(-100, SCORE_WIN) == -276
    assert wdl.unnormalize_score_material58(0, SCORE_WIN) == 0
    assert wdl.unnormalize_score_material58(SCORE_WIN + 1, SCORE_WIN) == SCORE_WIN + 1


def test_unnormalize_then_normalize_round_trips():
    for score in (-200, -37, 1, 64, 250):
        raw = wdl.unnormalize_score_material58(score, SCORE_WIN)
        assert abs(wdl.normalize_score(raw, 58, SCORE_WIN) - score) <= 1