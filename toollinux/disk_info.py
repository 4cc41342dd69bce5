"""Disk space figures for a mounted filesystem."""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class DiskInfo:
    """Sizes in bytes of the filesystem holding a path."""

    total_space: int
    free_space: int
    available_space: int


def get_disk_info(path: str | os.PathLike[str]) -> DiskInfo:
    """Return total, free and unprivileged-available bytes for ``path``.

    Raises OSError if the filesystem cannot be queried.
    """
    statvfs = getattr(os, "statvfs", None)
    if statvfs is None:
        raise OSError("disk statistics are not supported on this platform")
    stat = statvfs(path)
    return DiskInfo(
        total_space=stat.f_blocks * stat.f_frsize,
        free_space=stat.f_bfree * stat.f_frsize,
        available_space=stat.f_bavail * stat.f_frsize,
    )