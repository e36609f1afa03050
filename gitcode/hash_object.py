"""The hash-object command: hash a file as a blob and optionally store it."""

from __future__ import annotations

import hashlib
import sys
from os import PathLike
from pathlib import Path
from typing import BinaryIO, Sequence

from .errors import CompressionError, GitCodeError, UsageError
from .hashing import first_two_of_hash, other_of_hash
from .repository import REPO_DIR
from .zlib_codec import compress

OBJECTS_DIR = Path(REPO_DIR, "objects")
USAGE = "Usage: hash-object ( -w |  ) <filename>"


def blob_object(content: bytes) -> bytes:
    """Return the full blob object for ``content``, header included."""
    return b"blob %d\x00" % len(content) + content


def object_hash(data: bytes) -> str:
    """Return the hex SHA-1 of a full object."""
    return hashlib.sha1(data).hexdigest()


def write_object(data: bytes, digest: str, root: str | PathLike[str] = ".") -> Path:
    """Store ``data`` compressed under its hash and return the file written."""
    try:
        compressed = compress(data)
    except CompressionError:
        raise CompressionError("zlib compression failed") from None
    directory = Path(root) / OBJECTS_DIR / first_two_of_hash(digest)
    path = directory / other_of_hash(digest)
    try:
        directory.mkdir(parents=True, exist_ok=True)
        path.write_bytes(compressed)
    except OSError as exc:
        raise GitCodeError("Couldn't open file.") from exc
    return path


def hash_object(
    args: Sequence[str],
    root: str | PathLike[str] = ".",
    out: BinaryIO | None = None,
) -> str:
    """Run hash-object with the arguments that follow the command name; return the hash."""
    if out is None:
        out = sys.stdout.buffer
    if not 1 <= len(args) <= 2:
        raise UsageError(USAGE)

    write = False
    filename = ""
    for arg in args:
        if arg == "-w":
            write = True
        elif not arg.startswith("-"):
            filename = arg
        else:
            raise UsageError(f"Invalid option: {arg}")
    if not filename:
        raise UsageError(USAGE)

    try:
        content = (Path(root) / filename).read_bytes()
    except OSError:
        raise GitCodeError("Couldn't open file.") from None

    data = blob_object(content)
    digest = object_hash(data)
    out.write(digest.encode("ascii") + b"\n")
    out.flush()

    if write:
        write_object(data, digest, root)
    return digest