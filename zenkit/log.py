"""Tagged, priority-masked printf-style logging to standard output."""

from __future__ import annotations

import sys
from enum import Enum

DEFAULT_PRIORITY = 0xFF

_priority = DEFAULT_PRIORITY


class LogLevel(Enum):
    """Log levels with their output tag and priority bit."""

    ERROR = ("E", 1)
    WARNING = ("W", 2)
    INFO = ("I", 4)
    DEBUG = ("D", 8)
    VERBOSE = ("V", 16)

    @property
    def tag(self) -> str:
        return self.value[0]

    @property
    def bit(self) -> int:
        return self.value[1]


def set_priority(mask) -> None:
    """Set the bit mask of levels that are printed."""
    global _priority
    _priority = int(mask)


def log(level, fmt, *args) -> None:
    """Print "<tag>:<message>" if the level is enabled."""
    if not _priority & level.bit:
        return
    message = fmt % args if args else fmt
    stream = sys.stdout
    stream.write(f"{level.tag}:{message}\n")
    stream.flush()


def log_error(fmt, *args) -> None:
    log(LogLevel.ERROR, fmt, *args)


def log_warning(fmt, *args) -> None:
    log(LogLevel.WARNING, fmt, *args)


def log_info(fmt, *args) -> None:
    log(LogLevel.INFO, fmt, *args)


def log_debug(fmt, *args) -> None:
    log(LogLevel.DEBUG, fmt, *args)


def log_verbose(fmt, *args) -> None:
    log(LogLevel.VERBOSE, fmt, *args)