"""64-bit bit manipulation and small integer maths helpers."""

from __future__ import annotations

_MASK64 = (1 << 64) - 1


def isolate_lsb(v: int) -> int:
    """Keep only the lowest set bit of a 64-bit value."""
    v &= _MASK64
    return v & (-v & _MASK64)


def reset_lsb(v: int) -> int:
    """Clear the lowest set bit of a 64-bit value."""
    v &= _MASK64
    return v & ((v - 1) & _MASK64)


def ctz(v: int) -> int:
    """Count trailing zero bits of a 64-bit value; 64 for zero."""
    v &= _MASK64
    if v == 0:
        return 64
    return (v & -v).bit_length() - 1


def pext(v: int, mask: int) -> int:
    """Gather the bits of ``v`` selected by ``mask`` into the low bits."""
    v &= _MASK64
    mask &= _MASK64
    dst = 0
    bit = 1
    while mask:
        if v & mask & -mask:
            dst |= bit
        mask &= mask - 1
        bit <<= 1
    return dst


def pdep(v: int, mask: int) -> int:
    """Scatter the low bits of ``v`` into the positions set in ``mask``."""
    v &= _MASK64
    mask &= _MASK64
    dst = 0
    bit = 1
    while mask:
        if v & bit:
            dst |= mask & -mask
        mask &= mask - 1
        bit <<= 1
    return dst


def _div_trunc(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def ceil_div(a: int, b: int) -> int:
    """Integer division rounding up, ``(a + b - 1) / b``."""
    if b == 0:
        raise ZeroDivisionError("ceil_div by zero")
    return _div_trunc(a + b - 1, b)


def ilerp(a: int, b: int, t: int, one: int) -> int:
    """Integer linear interpolation where ``t == one`` means fully ``b``."""
    return _div_trunc(a * (one - t) + b * t, one)


def pad(v: int, block: int) -> int:
    """Round ``v`` up to a multiple of ``block``."""
    if v < 0 or block <= 0:
        raise ValueError("pad takes a non-negative value and a positive block")
    return ceil_div(v, block) * block