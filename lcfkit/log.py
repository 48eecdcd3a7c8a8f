"""Levelled logging with a replaceable output handler."""

from __future__ import annotations

import sys
from enum import IntEnum
from typing import Any, Callable, Optional

_MAX_MESSAGE = 4095


class Level(IntEnum):
    """Severity of a log message; higher values are more severe."""

    DEBUG = 0
    WARNING = 1
    ERROR = 2


_PREFIXES = {
    Level.DEBUG: "Debug: ",
    Level.WARNING: "Warning: ",
    Level.ERROR: "Error: ",
}

Handler = Callable[[Level, str, Any], None]


def _default_handler(level: Level, message: str, userdata: Any) -> None:
    sys.stderr.write(f"{_PREFIXES[level]}{message}\n")


_level: Level = Level.DEBUG
_handler: Handler = _default_handler
_userdata: Any = None


def set_handler(fn: Optional[Handler], userdata: Any = None) -> None:
    """Install ``fn(level, message, userdata)`` as output; ``None`` restores stderr output."""
    global _handler, _userdata
    if fn is None:
        _handler = _default_handler
        _userdata = None
    else:
        _handler = fn
        _userdata = userdata


def set_level(level: Level) -> None:
    """Drop messages less severe than ``level``."""
    global _level
    _level = Level(level)


def _emit(level: Level, fmt: str, args: tuple) -> None:
    if level < _level:
        return
    message = fmt % args if args else fmt
    _handler(level, message[:_MAX_MESSAGE], _userdata)


def debug(fmt: str, *args: Any) -> None:
    """Log a debug message, formatted printf-style with ``args``."""
    _emit(Level.DEBUG, fmt, args)


def warning(fmt: str, *args: Any) -> None:
    """Log a warning, formatted printf-style with ``args``."""
    _emit(Level.WARNING, fmt, args)


def error(fmt: str, *args: Any) -> None:
    """Log an error, formatted printf-style with ``args``."""
    _emit(Level.ERROR, fmt, args)