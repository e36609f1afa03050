"""Helpers for object hashes and the paths they map to."""

from __future__ import annotations

import string
from os import PathLike
from pathlib import Path

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def to_lower(s: str) -> str:
    """Return ``s`` with ASCII letters lower-cased, other characters untouched."""
    return s.translate(_ASCII_LOWER)


def first_two_of_hash(s: str) -> str:
    """Return the directory part of an object hash."""
    return s[:2]


def other_of_hash(s: str) -> str:
    """Return the file-name part of an object hash."""
    return s[2:]


def object_path(objects_dir: str | PathLike[str], object_hash: str) -> Path:
    """Return the location of ``object_hash`` inside ``objects_dir``."""
    return Path(objects_dir) / first_two_of_hash(object_hash) / other_of_hash(object_hash)