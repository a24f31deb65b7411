"""printf-style formatting with a few extra specifiers.

Besides the standard C conversions (``%d``, ``%u``, ``%x``, ``%f``, ``%e``,
``%g``, ``%a``, ``%c``, ``%p`` and friends, with flags, width, precision and
length modifiers), these are understood:

- ``%s``  any string (bytes are decoded as UTF-8)
- ``%cs`` a C-style string; behaves like ``%s``
- ``%b``  a truth value, printed as ``true`` or ``false``
- ``%v2``, ``%v3``, ``%v4`` a vector of 2, 3 or 4 float32 components
"""

from __future__ import annotations

import math
import re
import struct
import sys
from collections.abc import Sequence
from typing import Any

from ogbcore.strings import StringBuilder

__all__ = ["format_string", "sprint", "print_formatted", "builder_print"]

_CONVERSIONS = "diuoxXfFeEgGaAcCpn%"

_SPEC_RE = re.compile(
    r"(?P<flags>[-+ #0]*)"
    r"(?P<width>\*|\d+)?"
    r"(?:\.(?P<precision>\*|\d*))?"
    r"(?P<length>hh|h|ll|l|I64|I32|I|j|z|t|L|q|w)?"
)

_LENGTH_BITS = {
    "hh": 8,
    "h": 16,
    "ll": 64,
    "I64": 64,
    "I": 64,
    "j": 64,
    "z": 64,
    "t": 64,
    "q": 64,
}

_VECTOR_TEMPLATES = {
    2: "{ X: %f, Y: %f }",
    3: "{ X: %f, Y: %f, Z: %f }",
    4: "{ X: %f, Y: %f, Z: %f, W: %f }",
}

_F32 = struct.Struct("f")


class _Arguments:
    """Hands out format arguments in order."""

    def __init__(self, values: Sequence[Any]) -> None:
        self._values = values
        self._next = 0

    def take(self, specifier: str) -> Any:
        if self._next >= len(self._values):
            raise ValueError(f"not enough arguments for format specifier {specifier!r}")
        value = self._values[self._next]
        self._next += 1
        return value


def _text(value: Any) -> str:
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    return str(value)


def _f32(value: float) -> float:
    value = float(value)
    if math.isnan(value) or math.isinf(value):
        return value
    try:
        return _F32.unpack(_F32.pack(value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _vector_components(value: Any, size: int) -> list[float]:
    if hasattr(value, "x"):
        return [float(getattr(value, axis)) for axis in "xyzw"[:size]]
    components = list(value)
    if len(components) != size:
        raise ValueError(f"%v{size} needs {size} components, got {len(components)}")
    return [float(c) for c in components]


def _hex_float(value: float, precision: int | None, upper: bool) -> str:
    if math.isnan(value):
        text = "nan"
    elif math.isinf(value):
        text = "-inf" if value < 0 else "inf"
    else:
        sign = "-" if math.copysign(1.0, value) < 0 else ""
        mantissa, exponent = abs(value).hex()[2:].split("p")
        lead_text, _, frac_text = mantissa.partition(".")
        lead = int(lead_text, 16)
        frac_text = frac_text.ljust(13, "0")
        frac = int(frac_text, 16)
        digits_count = len(frac_text)
        if precision is None:
            digits = frac_text.rstrip("0")
        else:
            if precision < digits_count:
                shift = 4 * (digits_count - precision)
                frac = (frac + (1 << (shift - 1))) >> shift
                if frac >= 1 << (4 * precision):
                    lead += 1
                    frac = 0
                digits = format(frac, f"0{precision}x") if precision else ""
            else:
                digits = frac_text.ljust(precision, "0")
        exp = int(exponent)
        body = f"0x{lead:x}" + (f".{digits}" if digits else "") + f"p{exp:+d}"
        text = sign + body
    return text.upper() if upper else text


def _standard(body: str, conversion: str, arguments: _Arguments) -> str:
    specifier = "%" + body + conversion
    if conversion == "%":
        return "%"
    match = _SPEC_RE.fullmatch(body)
    if match is None:
        raise ValueError(f"invalid format specifier {specifier!r}")

    flags = match.group("flags")
    width = match.group("width") or ""
    precision = match.group("precision")
    length = match.group("length") or ""

    if width == "*":
        width_value = int(arguments.take(specifier))
        if width_value < 0:
            flags += "-"
        width = str(abs(width_value))
    if precision == "*":
        precision_value = int(arguments.take(specifier))
        precision = None if precision_value < 0 else str(precision_value)
    elif precision == "":
        precision = "0"

    value = arguments.take(specifier)
    dotted = f".{precision}" if precision is not None else ""
    spec = "%" + flags + width + dotted

    if conversion in "di":
        return (spec + "d") % int(value)
    if conversion in "uxXo":
        mask = (1 << _LENGTH_BITS.get(length, 32)) - 1
        return (spec + ("d" if conversion == "u" else conversion)) % (int(value) & mask)
    if conversion in "fFeEgG":
        return (spec + conversion) % float(value)

    padding = "%" + flags.replace("0", "") + width + "s"
    if conversion in "aA":
        exact = int(precision) if precision is not None else None
        return padding % _hex_float(float(value), exact, conversion == "A")
    if conversion in "cC":
        char = chr(value) if isinstance(value, int) else _text(value)[:1]
        return padding % char
    if conversion == "p":
        return padding % format(int(value) & ((1 << 64) - 1), "016X")
    raise ValueError(f"format specifier {specifier!r} is not supported")


def format_string(fmt: str, *args: Any) -> str:
    """Format ``args`` according to ``fmt`` and return the result."""
    arguments = _Arguments(args)
    out: list[str] = []
    i = 0
    n = len(fmt)
    while i < n:
        percent = fmt.find("%", i)
        if percent == -1:
            out.append(fmt[i:])
            break
        out.append(fmt[i:percent])
        i = percent + 1

        if fmt.startswith("s", i):
            out.append(_text(arguments.take("%s")))
            i += 1
        elif fmt.startswith("cs", i):
            out.append(_text(arguments.take("%cs")))
            i += 2
        elif fmt.startswith("b", i):
            out.append("true" if arguments.take("%b") else "false")
            i += 1
        elif fmt[i : i + 2] in ("v2", "v3", "v4"):
            size = int(fmt[i + 1])
            components = _vector_components(arguments.take(f"%v{size}"), size)
            out.append(_VECTOR_TEMPLATES[size] % tuple(_f32(c) for c in components))
            i += 2
        else:
            j = i
            while j < n and fmt[j] not in _CONVERSIONS:
                j += 1
            if j >= n:
                out.append("%" + fmt[i:])
                break
            out.append(_standard(fmt[i:j], fmt[j], arguments))
            i = j + 1
    return "".join(out)


def sprint(fmt: str, *args: Any) -> str:
    """Return a newly formatted string."""
    return format_string(fmt, *args)


def print_formatted(fmt: str, *args: Any) -> None:
    """Format and write the result to standard output."""
    sys.stdout.write(format_string(fmt, *args))


def builder_print(builder: StringBuilder, fmt: str, *args: Any) -> None:
    """Format and append the result to ``builder``."""
    builder.append(format_string(fmt, *args))