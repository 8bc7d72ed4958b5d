"""Deterministic pseudo-random numbers derived from a string seed."""

from __future__ import annotations

import math

_MASK = 0xFFFFFFFF


def _imul32(a: int, b: int) -> int:
    """Multiply two 32-bit integers, keeping the low 32 bits."""
    return (a * b) & _MASK


def _round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _check_bounds(low: float, high: float) -> None:
    if low > high:
        raise ValueError("minimum value must be below maximum value")
    if low == high:
        raise ValueError("minimum value cannot equal maximum value")


class Seed:
    """An sfc32 generator whose state is initialised by hashing a string with xmur3."""

    __slots__ = ("_a", "_b", "_c", "_d")

    def __init__(self, seed: str) -> None:
        data = seed.encode("utf-8")
        h = (1779033703 ^ len(data)) & _MASK
        for byte in data:
            h = _imul32(h ^ byte, 3432918353)
            h = ((h << 13) | (h >> 19)) & _MASK

        def next_hash() -> int:
            nonlocal h
            h = _imul32(h ^ (h >> 16), 2246822507)
            h = _imul32(h ^ (h >> 13), 3266489909)
            h ^= h >> 16
            return h

        self._a = next_hash()
        self._b = next_hash()
        self._c = next_hash()
        self._d = next_hash()

    def _sfc32(self) -> float:
        """Advance the state and return a float in [0, 1)."""
        t = (self._a + self._b) & _MASK
        self._a = self._b ^ (self._b >> 9)
        self._b = (self._c + (self._c << 3)) & _MASK
        self._c = ((self._c << 21) | (self._c >> 11)) & _MASK
        self._d = (self._d + 1) & _MASK
        t = (t + self._d) & _MASK
        self._c = (self._c + t) & _MASK
        return t / 4294967296.0

    def random(self, low: float, high: float) -> float:
        """Return a float between ``low`` and ``high``."""
        _check_bounds(low, high)
        return self._sfc32() * (high - low) + low

    def random_int(self, low: int, high: int) -> int:
        """Return an integer between ``low`` and ``high``, both inclusive."""
        _check_bounds(low, high)
        return _round_half_away(self.random(float(low), float(high)))