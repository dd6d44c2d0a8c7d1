import pytest

from stormphrax.ranges import Range
from stormphrax.tunable import TunableParam, Tunables


@pytest.fixture(scope="module")
def defaults():
    return Tunables()


def test_integer_defaults(defaults):
    assert defaults["defaultMovesToGo"] == 19
    assert defaults["maxHistory"] == 15769
    assert defaults["qsearchSeeThreshold"] == -97


def test_float_defaults_are_exact(defaults):
    assert defaults["incrementScale"] == 0.83
    assert defaults["nodeTmBase"] == 2.63
    assert defaults["nodeTmScaleMin"] == 0.102
    assert defaults["bmStabilityTmPower"] == -2.7


def test_lookup_is_case_insensitive(defaults):
    param = defaults.lookup("RFPMARGIN")
    assert param is not None
    assert param.name == "rfpMargin"
    assert defaults["rfpmargin"] == defaults["rfpMargin"]


def test_unknown_name(defaults):
    assert defaults.lookup("nope") is None
    with pytest.raises(KeyError):
        defaults["nope"]
    with pytest.raises(KeyError):
        Tunables().set("nope", 3)


def test_iteration_order_and_unique_names(defaults):
    names = [p.name for p in defaults]
    assert names[0] == "defaultMovesToGo"
    assert names[-1] == "qsearchSeeThreshold"
    assert len(set(n.lower() for n in names)) == len(names) == len(defaults)


def test_float_param_ranges_are_quantized(defaults):
    param = defaults.lookup("incrementScale")
    assert param.quantization == 100
    assert param.range == Range(50, 100)
    assert param.value == param.default_value == 83


def test_every_default_within_range(defaults):
    for param in defaults:
        assert param.range.contains(param.default_value)


def test_see_value_table(defaults):
    see = defaults.see_values
    assert len(see) == 13
    assert see[0] == see[1] == 100
    assert see[2] == see[3] == 450
    assert see[8] == see[9] == 1250
    assert see[10:] == [0, 0, 0]


def test_setting_see_value_updates_table():
    tunables = Tunables()
    tunables.set("seeValuePawn", 180)
    assert tunables["seeValuePawn"] == 180
    assert tunables.see_values[0] == tunables.see_values[1] == 180


def test_lmr_table_shape_and_zero_edges(defaults):
    assert len(defaults.lmr_table) == 2
    for table in defaults.lmr_table:
        assert len(table) == 256
        assert all(len(row) == 256 for row in table)
        assert all(v == 0 for v in table[0])
        assert all(row[0] == 0 for row in table)


def test_lmr_depth_one_is_constant(defaults):
    row = defaults.lmr_table[0][1]
    assert all(v == row[1] for v in row[1:])


def test_quiet_lmr_monotone(defaults):
    table = defaults.lmr_table[0]
    for depth in range(1, 255):
        for moves in (1, 10, 100, 255):
            assert table[depth + 1][moves] >= table[depth][moves]
    for moves in range(1, 255):
        assert table[20][moves + 1] >= table[20][moves]


def test_lmr_reduction_accessor(defaults):
    assert defaults.lmr_reduction(False, 10, 20) == defaults.lmr_table[0][10][20]
    assert defaults.lmr_reduction(True, 10, 20) == defaults.lmr_table[1][10][20]
    assert defaults.lmr_reduction(True, 10, 20) < defaults.lmr_reduction(False, 10, 20)


def test_setting_lmr_base_refreshes_quiet_table_only():
    tunables = Tunables()
    noisy_before = tunables.lmr_table[1][30][30]
    quiet_before = tunables.lmr_table[0][30][30]
    tunables.set("quietLmrBase", 100)
    assert tunables.lmr_table[0][1][5] == 128
    assert tunables.lmr_table[0][30][30] > quiet_before
    assert tunables.lmr_table[1][30][30] == noisy_before


def test_set_rejects_non_integers():
    tunables = Tunables()
    with pytest.raises(TypeError):
        tunables.set("rfpMargin", 1.5)
    assert tunables["rfpMargin"] == 71


def test_set_float_param_raw_value():
    tunables = Tunables()
    tunables.set("softTimeScale", 75)
    assert tunables["softTimeScale"] == 0.75


@pytest.mark.parametrize(
    "default, lo, hi, step",
    [(5, 10, 20, 1), (10, 20, 10, 1), (15, 10, 20, 20), (15, 10, 20, 0.25)],
)
def test_invalid_param_definitions(default, lo, hi, step):
    with pytest.raises(ValueError):
        TunableParam("bad", default, Range(lo, hi), step)


def test_invalid_quantization():
    with pytest.raises(ValueError):
        TunableParam("bad", 15, Range(10, 20), 1, quantization=0)