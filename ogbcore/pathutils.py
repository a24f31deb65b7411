"""Path helpers that treat '/', '\\' and ':' as separators."""

from __future__ import annotations

__all__ = [
    "get_file_extension",
    "get_file_name_including_extension",
    "get_file_name_excluding_extension",
    "get_directory_of",
]

_SEPARATORS = "/\\:"


def _last_separator(path: str) -> int:
    return max(path.rfind(sep) for sep in _SEPARATORS)


def get_file_extension(path: str) -> str:
    """Return the extension including its dot ("dir/file.ext" gives ".ext"), or ""."""
    for i in range(len(path) - 1, -1, -1):
        ch = path[i]
        if ch in _SEPARATORS:
            return ""
        if ch == ".":
            return path[i:]
    return ""


def get_file_name_including_extension(file_path: str) -> str:
    """Return the part after the last separator.

    When there is no separator, or the path ends with one, the whole path is returned.
    """
    if not file_path:
        return ""
    last = _last_separator(file_path)
    if last != -1 and last < len(file_path) - 1:
        return file_path[last + 1 :]
    return file_path


def get_file_name_excluding_extension(file_path: str) -> str:
    """Return the file name without its last extension; a leading dot is kept."""
    name = get_file_name_including_extension(file_path)
    dot = name.rfind(".")
    if dot >= 1:
        return name[:dot]
    return name


def get_directory_of(path: str) -> str:
    """Return everything before the last separator, or "" if there is none."""
    if not path:
        return ""
    last = _last_separator(path)
    if last <= 0:
        return ""
    return path[:last]