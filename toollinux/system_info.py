"""Basic facts about the running system."""

from __future__ import annotations

import os
import sys

UNSUPPORTED = "Unsupported OS"
UNKNOWN = "Unknown"
CPUINFO_PATH = "/proc/cpuinfo"


def _uname_field(name: str) -> str:
    if not sys.platform.startswith("linux"):
        return UNSUPPORTED
    try:
        return getattr(os.uname(), name)
    except OSError:
        return UNKNOWN


def os_name() -> str:
    """Name of the operating system, such as ``Linux``."""
    return _uname_field("sysname")


def kernel_version() -> str:
    """Kernel release string."""
    return _uname_field("release")


def architecture() -> str:
    """Machine hardware name, such as ``x86_64``."""
    return _uname_field("machine")


def read_cpu_model(path: str | os.PathLike[str] = CPUINFO_PATH) -> str | None:
    """Return the first ``model name`` entry of a cpuinfo file, or None.

    Raises OSError if the file cannot be read.
    """
    with open(path, encoding="utf-8", errors="replace") as handle:
        for line in handle:
            if line.startswith("model name"):
                colon = line.find(":")
                if colon != -1:
                    return line[colon + 2:].rstrip("\n")
    return None