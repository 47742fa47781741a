"""Deterministic pseudo-random generators matching the C library ones.

The modem seeds its scramblers from ``rand()`` and then draws from
``drand48``-family generators. Transmitter and receiver must produce
identical sequences, so both generators are reproduced bit for bit.
"""

from __future__ import annotations

from collections import deque

_MASK32 = 0xFFFFFFFF
_MASK48 = (1 << 48) - 1


def _to_int32(value: int) -> int:
    value &= _MASK32
    return value - (1 << 32) if value & 0x80000000 else value


def _c_divmod(numerator: int, denominator: int) -> tuple[int, int]:
    """Integer division truncating towards zero, as C does."""
    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        quotient = -quotient
    return quotient, numerator - quotient * denominator


class GlibcRandom:
    """The additive feedback generator behind the C library's ``rand()``."""

    _DEGREE = 31
    _SEPARATION = 3
    _DISCARD = 310

    def __init__(self, seed: int = 1) -> None:
        self._history: deque[int] = deque(maxlen=self._DEGREE + self._SEPARATION)
        self.seed(seed)

    def seed(self, seed: int) -> None:
        """Reset the generator as ``srand(seed)`` does."""
        seed &= _MASK32
        if seed == 0:
            seed = 1
        word = _to_int32(seed)
        initial = [word]
        for _ in range(self._DEGREE - 1):
            hi, lo = _c_divmod(word, 127773)
            word = 16807 * lo - 2836 * hi
            if word < 0:
                word += 2147483647
            initial.append(word)
        initial.extend(initial[: self._SEPARATION])
        self._history.clear()
        self._history.extend(value & _MASK32 for value in initial)
        for _ in range(self._DISCARD):
            self._step()

    def _step(self) -> int:
        value = (self._history[-self._DEGREE] + self._history[-self._SEPARATION]) & _MASK32
        self._history.append(value)
        return value >> 1

    def rand(self) -> int:
        """Return the next value in ``[0, 2**31)``."""
        return self._step()


class Drand48:
    """The 48-bit linear congruential generator of the ``drand48`` family."""

    _MULTIPLIER = 0x5DEECE66D
    _INCREMENT = 0xB

    def __init__(self, seed: int = 0) -> None:
        self._x = 0
        self.seed(seed)

    def seed(self, seed: int) -> None:
        """Reset the state as ``srand48(seed)`` does."""
        self._x = ((seed & _MASK32) << 16) | 0x330E

    def _advance(self) -> int:
        self._x = (self._MULTIPLIER * self._x + self._INCREMENT) & _MASK48
        return self._x

    def lrand48(self) -> int:
        """Return the next non-negative integer in ``[0, 2**31)``."""
        return self._advance() >> 17

    def drand48(self) -> float:
        """Return the next float in ``[0.0, 1.0)``."""
        return self._advance() / float(1 << 48)