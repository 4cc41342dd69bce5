"""Thread-safe logger writing to a file or the console."""

from __future__ import annotations

import enum
import os
import sys
import threading
import time
from typing import IO


class Level(enum.Enum):
    """Severity of a log message."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"


class Logger:
    """Writes ``[timestamp] [LEVEL] message`` lines.

    With a log file, lines are appended to it; if the file cannot be
    opened, a warning goes to stderr and logging falls back to the
    console stream (stdout unless another stream is given).
    """

    def __init__(
        self,
        log_file: str | os.PathLike[str] = "",
        stream: IO[str] | None = None,
    ) -> None:
        self._lock = threading.Lock()
        self._stream = stream
        self._file: IO[str] | None = None
        if log_file:
            try:
                self._file = open(log_file, "a", encoding="utf-8")
            except OSError:
                print(f"Logger: Failed to open log file: {log_file}", file=sys.stderr)

    @property
    def to_file(self) -> bool:
        """True while messages are written to the log file."""
        return self._file is not None and not self._file.closed

    def log(self, level: Level, message: str) -> None:
        """Write one message at the given level."""
        line = f"[{time.ctime()}] [{Level(level).value}] {message}\n"
        with self._lock:
            if self.to_file:
                out = self._file
            else:
                out = self._stream if self._stream is not None else sys.stdout
            out.write(line)
            out.flush()

    def debug(self, message: str) -> None:
        self.log(Level.DEBUG, message)

    def info(self, message: str) -> None:
        self.log(Level.INFO, message)

    def warn(self, message: str) -> None:
        self.log(Level.WARN, message)

    def error(self, message: str) -> None:
        self.log(Level.ERROR, message)

    def close(self) -> None:
        """Close the log file, if one is open."""
        with self._lock:
            if self._file is not None and not self._file.closed:
                self._file.close()

    def __enter__(self) -> Logger:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()