"""Small deterministic random number generators: JSF64 and SplitMix64."""

from __future__ import annotations

import secrets

_MASK64 = (1 << 64) - 1
_MASK32 = (1 << 32) - 1


def _rotl(v: int, r: int) -> int:
    return ((v << r) | (v >> (64 - r))) & _MASK64


def generate_single_seed() -> int:
    """Return a fresh 64-bit seed from the operating system."""
    return secrets.randbits(64)


class Jsf64Rng:
    """Bob Jenkins' small fast 64-bit generator."""

    def __init__(self, seed: int) -> None:
        seed &= _MASK64
        self._a = 0xF1EA5EED
        self._b = seed
        self._c = seed
        self._d = seed
        for _ in range(20):
            self.next_u64()

    def next_u64(self) -> int:
        """Return the next 64-bit output."""
        e = (self._a - _rotl(self._b, 7)) & _MASK64
        self._a = self._b ^ _rotl(self._c, 13)
        self._b = (self._c + _rotl(self._d, 37)) & _MASK64
        self._c = (self._d + e) & _MASK64
        self._d = (e + self._a) & _MASK64
        return self._d

    def next_u32(self, bound: int | None = None) -> int:
        """Return a 32-bit output, or an unbiased value below ``bound``.

        A bound of zero always gives zero.
        """
        if bound is None:
            return self.next_u64() >> 32

        bound &= _MASK32
        if bound == 0:
            return 0

        m = self.next_u32() * bound
        low = m & _MASK32

        if low < bound:
            t = (-bound) & _MASK32
            if t >= bound:
                t -= bound
                if t >= bound:
                    t %= bound
            while low < t:
                m = self.next_u32() * bound
                low = m & _MASK32

        return m >> 32

    def __call__(self) -> int:
        return self.next_u64()

    def __iter__(self):
        return self

    def __next__(self) -> int:
        return self.next_u64()


class SeedGenerator:
    """SplitMix64, used to derive seeds for other generators."""

    def __init__(self, seed: int | None = None) -> None:
        self._state = (generate_single_seed() if seed is None else seed) & _MASK64

    def next_seed(self) -> int:
        """Return the next 64-bit seed."""
        self._state = (self._state + 0x9E3779B97F4A7C15) & _MASK64
        z = self._state
        z = ((z ^ (z >> 30)) * 0xBF58476D1CE4E5B9) & _MASK64
        z = ((z ^ (z >> 27)) * 0x94D049BB133111EB) & _MASK64
        return z ^ (z >> 31)