"""Lenient parsing of integers, floats, digits and booleans from text.

Numbers are read from the start of the string, the way a prefix parser
does: leading digits are consumed and anything after them is ignored.
A missing number or a value out of range gives ``None``.
"""

from __future__ import annotations

import math
import re

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"

_FLOAT_RE = re.compile(
    r"-?(?:"
    r"(?P<num>(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)"
    r"|(?P<inf>[iI][nN][fF](?:[iI][nN][iI][tT][yY])?)"
    r"|(?P<nan>[nN][aA][nN](?:\([A-Za-z0-9_]*\))?)"
    r")"
)


def try_parse_digit(c: str) -> int | None:
    """Return the value of a decimal digit character, or None."""
    if len(c) == 1 and "0" <= c <= "9":
        return ord(c) - ord("0")
    return None


def try_parse_int(
    value: str, radix: int = 10, signed: bool = False, bits: int = 32
) -> int | None:
    """Parse a leading integer of the given radix and width.

    Unsigned parsing rejects a sign; signed parsing accepts a leading
    ``-`` only. Values that do not fit in ``bits`` bits give None.
    """
    if not 2 <= radix <= 36:
        raise ValueError(f"radix must be between 2 and 36, got {radix}")
    if bits <= 0:
        raise ValueError(f"bit width must be positive, got {bits}")

    negative = False
    pos = 0
    if signed and value.startswith("-"):
        negative = True
        pos = 1

    result = 0
    digits = 0
    for ch in value[pos:]:
        digit = _DIGITS.find(ch.lower())
        if digit < 0 or digit >= radix:
            break
        result = result * radix + digit
        digits += 1

    if digits == 0:
        return None

    if negative:
        result = -result

    if signed:
        low, high = -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    else:
        low, high = 0, (1 << bits) - 1

    if not low <= result <= high:
        return None
    return result


def try_parse_float(value: str) -> float | None:
    """Parse a leading floating-point number, or return None.

    Accepts fixed and scientific notation, ``inf``/``infinity`` and
    ``nan``. Finite literals that overflow or underflow give None.
    """
    match = _FLOAT_RE.match(value)
    if match is None:
        return None

    text = match.group(0)
    negative = text.startswith("-")

    if match.group("inf") is not None:
        return -math.inf if negative else math.inf
    if match.group("nan") is not None:
        return -math.nan if negative else math.nan

    result = float(text)
    if math.isinf(result):
        return None
    if result == 0.0:
        mantissa = re.split(r"[eE]", match.group("num"))[0]
        if any(ch in "123456789" for ch in mantissa):
            return None
    return result


def try_parse_bool(value: str) -> bool | None:
    """Parse exactly ``true`` or ``false``; anything else gives None."""
    if value == "true":
        return True
    if value == "false":
        return False
    return None