"""Levelled console logging with optional ANSI colours."""

from __future__ import annotations

import sys
from enum import IntEnum
from typing import ClassVar, TextIO

_RED = "\033[1;31m"
_GREEN = "\033[1;32m"
_YELLOW = "\033[1;33m"
_BLUE = "\033[1;34m"
_MAGENTA = "\033[1;35m"
_CYAN = "\033[1;36m"
_WHITE = "\033[0m"

_PRINTF_LIMIT = 1023
_TRACE_LIMIT = 349


class Level(IntEnum):
    """Log levels, as bit values."""

    DEBUG = 0x01
    INFO = 0x02
    WARN = 0x04
    ERROR = 0x08
    FATAL = 0x10


_COLORS = {
    Level.FATAL: _RED,
    Level.ERROR: _RED,
    Level.DEBUG: _MAGENTA,
    Level.INFO: _CYAN,
    Level.WARN: _YELLOW,
}


class StdoutListener:
    """Writes one line per message, coloured by level when enabled."""

    _instance: ClassVar[StdoutListener | None] = None

    def __init__(self, colorful: bool, stream: TextIO | None = None) -> None:
        self.colorful = colorful
        self._stream = stream

    @classmethod
    def create(cls, colorful: bool) -> StdoutListener:
        """Return the shared listener, creating it on first call."""
        if cls._instance is None:
            cls._instance = cls(colorful)
        return cls._instance

    @classmethod
    def get_instance(cls) -> StdoutListener:
        """Return the shared listener; it must have been created."""
        if cls._instance is None:
            raise RuntimeError("StdoutListener has not been created")
        return cls._instance

    def println(self, level: int, msg: str) -> None:
        """Write `msg` as one line in the colour of `level`."""
        stream = self._stream if self._stream is not None else sys.stdout
        if self.colorful:
            color = _COLORS.get(level, _WHITE)
            stream.write(f"{color}{msg}{_WHITE}\n")
        else:
            stream.write(f"{msg}\n")
        stream.flush()


def infra_printf(level: int, fmt: str, *args: object) -> None:
    """Format printf-style and print through the shared listener."""
    text = (fmt % args)[:_PRINTF_LIMIT]
    StdoutListener.create(True)
    StdoutListener.get_instance().println(level, text)


def base_name(path: str | None) -> str:
    """The part of `path` after its last '/'; '' for None."""
    if path is None:
        return ""
    return path.rsplit("/", 1)[-1]


def _log_trace(level: Level, file: str | None, line: int, fmt: str | None, args: tuple) -> None:
    info = "" if fmt is None else (fmt % args)[:_TRACE_LIMIT]
    infra_printf(level, "%s:%d: %s ", base_name(file), line, info)


def log_fatal(file: str | None, line: int, fmt: str | None, *args: object) -> None:
    """Log at FATAL level, prefixed with the file's base name and line."""
    _log_trace(Level.FATAL, file, line, fmt, args)


def log_error(file: str | None, line: int, fmt: str | None, *args: object) -> None:
    """Log at ERROR level, prefixed with the file's base name and line."""
    _log_trace(Level.ERROR, file, line, fmt, args)


def log_warn(file: str | None, line: int, fmt: str | None, *args: object) -> None:
    """Log at WARN level, prefixed with the file's base name and line."""
    _log_trace(Level.WARN, file, line, fmt, args)


def log_info(file: str | None, line: int, fmt: str | None, *args: object) -> None:
    """Log at INFO level, prefixed with the file's base name and line."""
    _log_trace(Level.INFO, file, line, fmt, args)


def log_debug(file: str | None, line: int, fmt: str | None, *args: object) -> None:
    """Log at DEBUG level, prefixed with the file's base name and line."""
    _log_trace(Level.DEBUG, file, line, fmt, args)