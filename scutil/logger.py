"""Thread-safe logger writing to stdout, a rotating file and a callback."""

from __future__ import annotations

import contextlib
import os
import sys
import threading
import time
from collections.abc import Callable
from enum import IntEnum
from typing import IO, Any

FILE_SIZE = 2 * 1024 * 1024
"""Size in bytes past which the current log file is rotated."""

_THREAD_NAME_MAX = 31
_DEFAULT_THREAD_NAME = "Thread"


class LogLevel(IntEnum):
    DEBUG = 0
    INFO = 1
    WARN = 2
    ERROR = 3
    OFF = 4


LogCallback = Callable[[LogLevel, str], Any]

_thread_state = threading.local()


def set_thread_name(name: str) -> None:
    """Set the name printed in log lines emitted from the calling thread."""
    _thread_state.name = name[:_THREAD_NAME_MAX]


def thread_name() -> str:
    """Return the log name of the calling thread."""
    return getattr(_thread_state, "name", _DEFAULT_THREAD_NAME)


def _parse_level(level: str | LogLevel) -> LogLevel:
    if isinstance(level, LogLevel):
        return level
    if isinstance(level, str):
        try:
            return LogLevel[level.upper()]
        except KeyError:
            pass
    raise ValueError(f"unknown log level: {level!r}")


class Logger:
    """Logger with a level filter and up to three destinations.

    Lines go to stdout (errors to stderr) unless disabled, to a pair of
    rotating files when configured, and to a callback when one is set.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._level = LogLevel.INFO
        self._to_stdout = True
        self._fp: IO[str] | None = None
        self._prev_file: str | os.PathLike[str] | None = None
        self._current_file: str | os.PathLike[str] | None = None
        self._file_size = 0
        self._callback: LogCallback | None = None

    @property
    def level(self) -> LogLevel:
        return self._level

    def close(self) -> None:
        """Close the log file and drop the callback."""
        with self._lock:
            fp, self._fp = self._fp, None
            self._callback = None
            self._prev_file = None
            self._current_file = None
            self._file_size = 0
            if fp is not None:
                fp.close()

    def set_level(self, level: str | LogLevel) -> None:
        """Set the minimum level, by name (case-insensitive) or as a LogLevel."""
        parsed = _parse_level(level)
        with self._lock:
            self._level = parsed

    def set_stdout(self, enable: bool) -> None:
        """Enable or disable logging to stdout and stderr."""
        with self._lock:
            self._to_stdout = bool(enable)

    def set_file(
        self,
        prev: str | os.PathLike[str] | None,
        current: str | os.PathLike[str] | None,
    ) -> None:
        """Log into ``current``, rotating it to ``prev`` when it grows too big.

        Passing ``None`` for either path disables file logging.
        """
        with self._lock:
            if self._fp is not None:
                self._fp.close()
                self._fp = None

            self._prev_file = prev
            self._current_file = current
            self._file_size = 0

            if prev is None or current is None:
                return

            fp = open(current, "a+", encoding="utf-8", newline="")
            try:
                fp.write("\n")
                fp.flush()
                size = fp.tell()
            except BaseException:
                fp.close()
                raise

            self._file_size = size
            self._fp = fp

    def set_callback(self, callback: LogCallback | None) -> None:
        """Call ``callback(level, message)`` for every line; ``None`` disables."""
        with self._lock:
            self._callback = callback

    def _header(self, level: LogLevel) -> str:
        stamp = time.strftime("%Y-%m-%d %H:%M:%S", time.localtime())
        return f"[{stamp}][{level.name:<5}][{thread_name()}] "

    def _write_file(self, line: str) -> None:
        assert self._fp is not None
        self._fp.write(line)
        self._fp.flush()
        self._file_size += len(line.encode("utf-8"))

        if self._file_size > FILE_SIZE:
            self._fp.close()
            self._fp = None
            assert self._current_file is not None and self._prev_file is not None
            with contextlib.suppress(OSError):
                os.replace(self._current_file, self._prev_file)
            self._fp = open(self._current_file, "w+", encoding="utf-8", newline="")
            self._file_size = 0

    def log(self, level: LogLevel | int, fmt: str, *args: Any) -> None:
        """Emit ``fmt % args`` at ``level`` if it passes the level filter."""
        level = LogLevel(level)
        if level < self._level:
            return

        message = fmt % args if args else fmt

        with self._lock:
            if level < self._level:
                return

            if self._to_stdout:
                dest = sys.stderr if level == LogLevel.ERROR else sys.stdout
                dest.write(self._header(level) + message)

            if self._fp is not None:
                self._write_file(self._header(level) + message)

            if self._callback is not None:
                self._callback(level, message)

    def debug(self, fmt: str, *args: Any) -> None:
        self.log(LogLevel.DEBUG, fmt, *args)

    def info(self, fmt: str, *args: Any) -> None:
        self.log(LogLevel.INFO, fmt, *args)

    def warn(self, fmt: str, *args: Any) -> None:
        self.log(LogLevel.WARN, fmt, *args)

    def error(self, fmt: str, *args: Any) -> None:
        self.log(LogLevel.ERROR, fmt, *args)

    def __enter__(self) -> Logger:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()