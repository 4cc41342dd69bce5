"""Small string helpers shared by the toolkit."""

from __future__ import annotations

import string

_WHITESPACE = " \t\n\r"
_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def trim(text: str) -> str:
    """Strip spaces, tabs, carriage returns and newlines from both ends."""
    return text.strip(_WHITESPACE)


def split(text: str, delimiter: str) -> list[str]:
    """Split on a single-character delimiter.

    Empty fields are kept, except that a trailing empty field is dropped,
    so an empty string yields no fields at all.
    """
    if len(delimiter) != 1:
        raise ValueError("delimiter must be a single character")
    parts = text.split(delimiter)
    if parts[-1] == "":
        parts.pop()
    return parts


def to_lower(text: str) -> str:
    """Lower-case ASCII letters; other characters are left untouched."""
    return text.translate(_TO_LOWER)


def to_upper(text: str) -> str:
    """Upper-case ASCII letters; other characters are left untouched."""
    return text.translate(_TO_UPPER)