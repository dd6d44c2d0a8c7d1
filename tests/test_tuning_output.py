import pytest

from stormphrax.tunable import Tunables
from stormphrax.tuning_output import (
    UnknownParameterError,
    format_ctt_tuning_params,
    format_ob_tuning_params,
    format_wf_tuning_params,
)


@pytest.fixture
def tunables():
    return Tunables()


def test_wf_single_param(tunables):
    out = format_wf_tuning_params(tunables, ["seeValuePawn"])
    assert out == (
        "{\n"
        '  "seeValuePawn": {\n'
        '    "value": 100,\n'
        '    "min_value": 50,\n'
        '    "max_value": 200,\n'
        '    "step": 7.5\n'
        "  }\n"
        "\n}\n"
    )


def test_wf_two_params_separated(tunables):
    out = format_wf_tuning_params(tunables, ["seeValuePawn", "rfpMargin"])
    assert "  }\n,\n" in out
    assert out.count('"value"') == 2


def test_ctt_single_param(tunables):
    out = format_ctt_tuning_params(tunables, ["seeValuePawn"])
    assert out == '"seeValuePawn": "Integer(50, 200)"\n\n'


def test_ob_single_param(tunables):
    out = format_ob_tuning_params(tunables, ["defaultMovesToGo"])
    assert out == "defaultMovesToGo, int, 19.0, 12.0, 40.0, 1, 0.002\n"


def test_ob_fractional_step(tunables):
    out = format_ob_tuning_params(tunables, ["seeValuePawn"])
    assert out == "seeValuePawn, int, 100.0, 50.0, 200.0, 7.5, 0.002\n"


def test_all_params(tunables):
    out = format_ob_tuning_params(tunables, ["<all>"])
    assert len(out.splitlines()) == len(tunables)


def test_value_reflects_changes(tunables):
    tunables.set("rfpMargin", 80)
    out = format_ob_tuning_params(tunables, ["rfpMargin"])
    assert out.startswith("rfpMargin, int, 80.0,")


def test_unknown_param_raises(tunables):
    with pytest.raises(UnknownParameterError) as info:
        format_wf_tuning_params(tunables, ["seeValuePawn", "noSuchParam"])
    assert info.value.name == "noSuchParam"


def test_empty_selection(tunables):
    assert format_ob_tuning_params(tunables, []) == ""