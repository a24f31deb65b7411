"""Element-wise single-precision vector arithmetic.

Every operation works on short float32 vectors and rounds each result to
float32. IEEE semantics apply throughout: dividing by zero gives an infinity
(or NaN for 0/0), and the square root of a negative number gives NaN.
"""

from __future__ import annotations

import math
import struct
from collections.abc import Sequence

__all__ = [
    "add_float32",
    "sub_float32",
    "mul_float32",
    "div_float32",
    "dot_product_float32",
    "sqrt_float32",
    "rsqrt_float32",
    "ELEMENTWISE_LENGTHS",
    "DOT_PRODUCT_LENGTHS",
    "ROOT_LENGTHS",
]

# Vector widths of 64, 128, 256 and 512 bits.
ELEMENTWISE_LENGTHS = frozenset({2, 4, 8, 16})
# Vector widths of 64, 96 and 128 bits.
DOT_PRODUCT_LENGTHS = frozenset({2, 3, 4})
# Vector widths of 64, 96, 128, 256 and 512 bits.
ROOT_LENGTHS = frozenset({2, 3, 4, 8, 16})

_PACK = struct.Struct("f")


def _f32(value: float) -> float:
    """Round ``value`` to the nearest float32, overflowing to infinity."""
    if math.isnan(value) or math.isinf(value):
        return value
    try:
        return _PACK.unpack(_PACK.pack(value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _vector(values: Sequence[float], allowed: frozenset[int], what: str) -> list[float]:
    vec = [_f32(float(v)) for v in values]
    if len(vec) not in allowed:
        sizes = ", ".join(str(n) for n in sorted(allowed))
        raise ValueError(f"{what} takes vectors of {sizes} elements, got {len(vec)}")
    return vec


def _pair(
    a: Sequence[float], b: Sequence[float], allowed: frozenset[int], what: str
) -> tuple[list[float], list[float]]:
    va = _vector(a, allowed, what)
    vb = _vector(b, allowed, what)
    if len(va) != len(vb):
        raise ValueError(f"{what} needs vectors of equal length, got {len(va)} and {len(vb)}")
    return va, vb


def _divide(x: float, y: float) -> float:
    if y == 0.0:
        if x == 0.0 or math.isnan(x):
            return math.nan
        negative = (math.copysign(1.0, x) < 0) != (math.copysign(1.0, y) < 0)
        return -math.inf if negative else math.inf
    return x / y


def _sqrt(x: float) -> float:
    if math.isnan(x) or x < 0.0:
        return math.nan
    return math.sqrt(x)


def _rsqrt(x: float) -> float:
    if math.isnan(x) or x < 0.0:
        return math.nan
    if x == 0.0:
        return math.copysign(math.inf, x)
    return 1.0 / math.sqrt(x)


def add_float32(a: Sequence[float], b: Sequence[float]) -> list[float]:
    """Return ``a + b`` element by element."""
    va, vb = _pair(a, b, ELEMENTWISE_LENGTHS, "add_float32")
    return [_f32(x + y) for x, y in zip(va, vb)]


def sub_float32(a: Sequence[float], b: Sequence[float]) -> list[float]:
    """Return ``a - b`` element by element."""
    va, vb = _pair(a, b, ELEMENTWISE_LENGTHS, "sub_float32")
    return [_f32(x - y) for x, y in zip(va, vb)]


def mul_float32(a: Sequence[float], b: Sequence[float]) -> list[float]:
    """Return ``a * b`` element by element."""
    va, vb = _pair(a, b, ELEMENTWISE_LENGTHS, "mul_float32")
    return [_f32(x * y) for x, y in zip(va, vb)]


def div_float32(a: Sequence[float], b: Sequence[float]) -> list[float]:
    """Return ``a / b`` element by element."""
    va, vb = _pair(a, b, ELEMENTWISE_LENGTHS, "div_float32")
    return [_f32(_divide(x, y)) for x, y in zip(va, vb)]


def dot_product_float32(a: Sequence[float], b: Sequence[float]) -> float:
    """Return the dot product of two vectors of 2, 3 or 4 elements."""
    va, vb = _pair(a, b, DOT_PRODUCT_LENGTHS, "dot_product_float32")
    total = 0.0
    for x, y in zip(va, vb):
        total = _f32(total + _f32(x * y))
    return total


def sqrt_float32(a: Sequence[float]) -> list[float]:
    """Return the square root of each element."""
    return [_f32(_sqrt(x)) for x in _vector(a, ROOT_LENGTHS, "sqrt_float32")]


def rsqrt_float32(a: Sequence[float]) -> list[float]:
    """Return the reciprocal square root of each element."""
    return [_f32(_rsqrt(x)) for x in _vector(a, ROOT_LENGTHS, "rsqrt_float32")]