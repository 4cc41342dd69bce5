"""Key/value configuration files."""

from __future__ import annotations

import os

from .string_util import split, trim

DEFAULT_CONFIG_FILE = "config/default.cfg"
MAX_LOG_LINE_LENGTH = 1024


class ConfigManager:
    """Loads ``key = value`` lines from a file and answers lookups.

    Blank lines and lines starting with ``#`` are ignored, as are lines
    that do not split into exactly one key and one value.
    """

    def __init__(self, path: str | os.PathLike[str] = "") -> None:
        self.path = path
        self._data: dict[str, str] = {}

    def load(self, path: str | os.PathLike[str] | None = None) -> None:
        """Read entries from ``path`` (or the stored path); raise OSError on failure."""
        if path is not None:
            self.path = path
        with open(self.path, encoding="utf-8", newline="\n") as handle:
            for raw in handle:
                line = trim(raw)
                if not line or line.startswith("#"):
                    continue
                parts = split(line, "=")
                if len(parts) == 2:
                    key, value = parts
                    self._data[trim(key)] = trim(value)

    def get(self, key: str, default: str = "") -> str:
        """Return the value for ``key``, or ``default`` if it is absent."""
        return self._data.get(key, default)

    def has_key(self, key: str) -> bool:
        """Tell whether ``key`` was loaded."""
        return key in self._data

    def __contains__(self, key: object) -> bool:
        return key in self._data