"""Levelled logging through a replaceable logger function."""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable
from enum import IntEnum
from typing import Any, Optional

from ogbcore.formatting import format_string

__all__ = [
    "LogLevel",
    "Logger",
    "default_logger",
    "set_logger",
    "log",
    "log_verbose",
    "log_info",
    "log_warning",
    "log_error",
    "version_string",
    "VERSION_MAJOR",
    "VERSION_MINOR",
    "VERSION_PATCH",
    "VERSION",
]

VERSION_MAJOR = 0
VERSION_MINOR = 1
VERSION_PATCH = 9
VERSION = VERSION_MAJOR * 1_000_000 + VERSION_MINOR * 1000 + VERSION_PATCH


class LogLevel(IntEnum):
    VERBOSE = 0
    INFO = 1
    WARNING = 2
    ERROR = 3


Logger = Callable[[LogLevel, str], None]

_PREFIXES = {
    LogLevel.VERBOSE: "[VERBOSE]: ",
    LogLevel.INFO: "[INFO]:    ",
    LogLevel.WARNING: "[WARNING]: ",
    LogLevel.ERROR: "[ERROR]:   ",
}

_output_lock = threading.Lock()


def default_logger(level: LogLevel, message: str) -> None:
    """Write ``message`` to standard output behind a level tag."""
    prefix = _PREFIXES[LogLevel(level)]
    with _output_lock:
        sys.stdout.write(f"{prefix}{message}\n")
        sys.stdout.flush()


_current_logger: Optional[Logger] = default_logger
_logger_lock = threading.Lock()


def set_logger(logger: Optional[Logger]) -> Optional[Logger]:
    """Install ``logger`` (None silences logging) and return the previous one."""
    global _current_logger
    with _logger_lock:
        previous = _current_logger
        _current_logger = logger
    return previous


def log(level: LogLevel, fmt: str, *args: Any) -> None:
    """Format the message and hand it to the current logger, if any."""
    logger = _current_logger
    if logger is None:
        return
    logger(LogLevel(level), format_string(fmt, *args))


def log_verbose(fmt: str, *args: Any) -> None:
    log(LogLevel.VERBOSE, fmt, *args)


def log_info(fmt: str, *args: Any) -> None:
    log(LogLevel.INFO, fmt, *args)


def log_warning(fmt: str, *args: Any) -> None:
    log(LogLevel.WARNING, fmt, *args)


def log_error(fmt: str, *args: Any) -> None:
    log(LogLevel.ERROR, fmt, *args)


def version_string() -> str:
    """Return the library version as ``major.MM.PPP``."""
    return format_string("%d.%02d.%03d", VERSION_MAJOR, VERSION_MINOR, VERSION_PATCH)