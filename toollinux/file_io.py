"""Whole-file reading and writing helpers."""

from __future__ import annotations

import os

from .string_util import split


def read_file(filepath: str | os.PathLike[str]) -> str:
    """Return the entire contents of a text file."""
    with open(filepath, encoding="utf-8", newline="") as handle:
        return handle.read()


def write_file(filepath: str | os.PathLike[str], data: str) -> None:
    """Write text to a file, replacing whatever it held."""
    with open(filepath, "w", encoding="utf-8", newline="") as handle:
        handle.write(data)


def read_lines(filepath: str | os.PathLike[str]) -> list[str]:
    """Return the file's lines without their newline characters."""
    return split(read_file(filepath), "\n")