"""Formatting tunable parameters for external tuning tools."""

from __future__ import annotations

from typing import Callable, Iterable

from .tunable import TunableParam, Tunables

ALL_PARAMS = "<all>"


class UnknownParameterError(KeyError):
    """A requested parameter name matches no tunable."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"unknown parameter {self.name}"


def _format_number(v: float) -> str:
    """Shortest round-trip form, without a trailing ``.0`` on whole numbers."""
    text = repr(float(v))
    if text.endswith(".0"):
        text = text[:-2]
    return text


def _select(tunables: Tunables, names: Iterable[str]) -> list[TunableParam]:
    names = list(names)
    if ALL_PARAMS in names:
        return list(tunables)
    selected = []
    for name in names:
        param = tunables.lookup(name)
        if param is None:
            raise UnknownParameterError(name)
        selected.append(param)
    return selected


def _join(params: list[TunableParam], render: Callable[[TunableParam], str]) -> str:
    return ",\n".join(render(param) for param in params)


def format_wf_tuning_params(tunables: Tunables, names: Iterable[str]) -> str:
    """Render parameters as a JSON-like object for weather-factory style tuners."""

    def render(param: TunableParam) -> str:
        return (
            f'  "{param.name}": {{\n'
            f'    "value": {param.value},\n'
            f'    "min_value": {param.range.min},\n'
            f'    "max_value": {param.range.max},\n'
            f'    "step": {_format_number(param.step)}\n'
            "  }\n"
        )

    body = _join(_select(tunables, names), render)
    return "{\n" + body + "\n}\n"


def format_ctt_tuning_params(tunables: Tunables, names: Iterable[str]) -> str:
    """Render parameters as ``"name": "Integer(min, max)"`` lines."""

    def render(param: TunableParam) -> str:
        return f'"{param.name}": "Integer({param.range.min}, {param.range.max})"\n'

    return _join(_select(tunables, names), render) + "\n"


def format_ob_tuning_params(tunables: Tunables, names: Iterable[str]) -> str:
    """Render parameters as comma-separated lines for OpenBench-style tuning."""
    return "".join(
        f"{param.name}, int, {param.value}.0, {param.range.min}.0, "
        f"{param.range.max}.0, {_format_number(param.step)}, 0.002\n"
        for param in _select(tunables, names)
    )