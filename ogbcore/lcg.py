"""A 64-bit linear congruential random number generator."""

from __future__ import annotations

import struct

__all__ = ["Lcg", "MULTIPLIER", "INCREMENT", "RAND_MAX_64"]

RAND_MAX_64 = 0xFFFFFFFFFFFFFFFF
MULTIPLIER = 6364136223846793005
INCREMENT = 1442695040888963407

_UINT64_MAX_F32 = struct.unpack("f", struct.pack("f", float(RAND_MAX_64)))[0]
_UINT64_MAX_F64 = float(RAND_MAX_64)


def _f32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


class Lcg:
    """Generator with a modest distribution, good enough for general purposes."""

    def __init__(self, seed: int = 1) -> None:
        self.seed = seed & RAND_MAX_64

    def peek_random(self) -> int:
        """Return the next value without advancing the seed."""
        return (self.seed * MULTIPLIER + INCREMENT) & RAND_MAX_64

    def get_random(self) -> int:
        """Advance the seed and return it."""
        self.seed = self.peek_random()
        return self.seed

    def random_float32(self) -> float:
        """Return a single-precision value in [0, 1]."""
        return _f32(_f32(float(self.get_random())) / _UINT64_MAX_F32)

    def random_float64(self) -> float:
        """Return a double-precision value in [0, 1]."""
        return float(self.get_random()) / _UINT64_MAX_F64

    def float32_in_range(self, min_value: float, max_value: float) -> float:
        span = _f32(_f32(max_value) - _f32(min_value))
        return _f32(_f32(span * self.random_float32()) + _f32(min_value))

    def float64_in_range(self, min_value: float, max_value: float) -> float:
        return (max_value - min_value) * self.random_float64() + min_value

    def int_in_range(self, min_value: int, max_value: int) -> int:
        """Return an integer between the bounds, both inclusive.

        Equal bounds give 0; reversed bounds are swapped.
        """
        if min_value == max_value:
            return 0
        if min_value > max_value:
            min_value, max_value = max_value, min_value
        span = (max_value - min_value + 1) & RAND_MAX_64
        return min_value + self.get_random() % span