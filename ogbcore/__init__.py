"""Core utilities: strings, paths, formatting, logging, random numbers, vector arithmetic and threads."""

__version__ = "0.1.9"

__all__ = [
    "strings",
    "pathutils",
    "lcg",
    "floatops",
    "intops",
    "formatting",
    "logger",
    "osthreads",
]