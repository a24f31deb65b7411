"""Element-wise 32-bit signed integer vector arithmetic.

Each operation takes two vectors of 4, 8 or 16 elements (128, 256 or 512
bits) and returns a new list. Results wrap around on overflow like two's
complement 32-bit registers; multiplication keeps the low 32 bits.
"""

from __future__ import annotations

import operator
from collections.abc import Callable, Sequence

__all__ = [
    "add_int32",
    "sub_int32",
    "mul_int32",
    "INT32_LENGTHS",
    "INT32_MIN",
    "INT32_MAX",
]

# Vector widths of 128, 256 and 512 bits.
INT32_LENGTHS = frozenset({4, 8, 16})
INT32_MIN = -(1 << 31)
INT32_MAX = (1 << 31) - 1

_MASK = (1 << 32) - 1
_SIGN = 1 << 31


def _wrap(value: int) -> int:
    """Reduce ``value`` to a signed 32-bit integer."""
    value &= _MASK
    return value - (1 << 32) if value & _SIGN else value


def _vector(values: Sequence[int], what: str) -> list[int]:
    vec = []
    for v in values:
        if isinstance(v, bool) or not isinstance(v, int):
            raise TypeError(f"{what} takes integers, got {type(v).__name__}")
        vec.append(_wrap(v))
    if len(vec) not in INT32_LENGTHS:
        sizes = ", ".join(str(n) for n in sorted(INT32_LENGTHS))
        raise ValueError(f"{what} takes vectors of {sizes} elements, got {len(vec)}")
    return vec


def _apply(
    a: Sequence[int], b: Sequence[int], op: Callable[[int, int], int], what: str
) -> list[int]:
    va = _vector(a, what)
    vb = _vector(b, what)
    if len(va) != len(vb):
        raise ValueError(f"{what} needs vectors of equal length, got {len(va)} and {len(vb)}")
    return [_wrap(op(x, y)) for x, y in zip(va, vb)]


def add_int32(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Return ``a + b`` element by element, wrapping on overflow."""
    return _apply(a, b, operator.add, "add_int32")


def sub_int32(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Return ``a - b`` element by element, wrapping on overflow."""
    return _apply(a, b, operator.sub, "sub_int32")


def mul_int32(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Return the low 32 bits of ``a * b`` element by element."""
    return _apply(a, b, operator.mul, "mul_int32")