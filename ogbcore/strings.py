"""String helpers and a growable string builder."""

from __future__ import annotations

__all__ = [
    "StringBuilder",
    "string_concat",
    "strings_match",
    "string_view",
    "string_find_from_left",
    "string_find_from_right",
    "string_starts_with",
    "string_replace_all",
    "string_trim_left",
    "string_trim_right",
    "string_trim",
]

_MIN_BUILDER_CAPACITY = 128


def string_concat(left: str, right: str) -> str:
    """Return ``left`` followed by ``right``."""
    if not left:
        return right
    if not right:
        return left
    return left + right


def strings_match(a: str, b: str) -> bool:
    """Return True when both strings hold the same characters."""
    return len(a) == len(b) and a == b


def string_view(s: str, start_index: int, count: int) -> str:
    """Return ``count`` characters of ``s`` starting at ``start_index``.

    Raises IndexError when the requested range falls outside ``s``.
    """
    if count == 0:
        return ""
    if start_index < 0 or start_index >= len(s):
        raise IndexError(
            f"string_view start_index {start_index} out of range for string count {len(s)}"
        )
    if count < 0:
        raise ValueError("string_view count must be more than 0")
    if start_index + count > len(s):
        raise IndexError("string_view start_index + count is out of range")
    return s[start_index : start_index + count]


def string_find_from_left(s: str, sub: str) -> int:
    """Return the first index where ``sub`` occurs in ``s``, or -1."""
    return s.find(sub)


def string_find_from_right(s: str, sub: str) -> int:
    """Return the last index where ``sub`` occurs in ``s``, or -1."""
    return s.rfind(sub)


def string_starts_with(s: str, sub: str) -> bool:
    """Return True when ``s`` begins with ``sub``."""
    return s.startswith(sub)


def string_replace_all(s: str, old: str, new: str) -> str:
    """Replace every non-overlapping occurrence of ``old``, scanning left to right."""
    if not s:
        return ""
    if not old:
        raise ValueError("string_replace_all needs a non-empty pattern to replace")
    return s.replace(old, new)


def string_trim_left(s: str) -> str:
    """Strip leading spaces (only the space character)."""
    return s.lstrip(" ")


def string_trim_right(s: str) -> str:
    """Strip trailing spaces (only the space character)."""
    return s.rstrip(" ")


def string_trim(s: str) -> str:
    """Strip leading and trailing spaces."""
    return string_trim_right(string_trim_left(s))


class StringBuilder:
    """Accumulates text, tracking a capacity that grows like a doubling buffer."""

    def __init__(self, reserved_capacity: int = _MIN_BUILDER_CAPACITY) -> None:
        self._parts: list[str] = []
        self._count = 0
        self.capacity = 0
        self.reserve(max(reserved_capacity, _MIN_BUILDER_CAPACITY))

    def reserve(self, required_capacity: int) -> None:
        """Make sure the builder can hold at least ``required_capacity`` characters."""
        if self.capacity >= required_capacity:
            return
        self.capacity = max(self.capacity * 2, int(required_capacity * 1.5))

    def append(self, s: str) -> None:
        """Add ``s`` to the end of the built text."""
        self.reserve(self._count + len(s))
        if s:
            self._parts.append(s)
            self._count += len(s)

    def __len__(self) -> int:
        return self._count

    def __str__(self) -> str:
        if len(self._parts) > 1:
            self._parts = ["".join(self._parts)]
        return self._parts[0] if self._parts else ""