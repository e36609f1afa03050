"""The cat-file command: show the type, size or content of an object."""

from __future__ import annotations

import sys
from os import PathLike
from pathlib import Path
from typing import BinaryIO, NamedTuple, Sequence

from .errors import CompressionError, GitCodeError, ObjectNotFoundError, UsageError
from .hashing import object_path
from .zlib_codec import decompress

OBJECTS_DIR = Path(".git", "objects")
USAGE = "Usage: cat-file (-t | -p | -s | -e) <hash>"
_FLAGS = {"-t", "-s", "-p", "-e"}


class ObjectParts(NamedTuple):
    type: bytes
    size: bytes
    body: bytes


def _path_of(object_hash: str, root: str | PathLike[str]) -> Path:
    return object_path(Path(root) / OBJECTS_DIR, object_hash)


def _inflate(compressed: bytes) -> bytes:
    try:
        return decompress(compressed)
    except CompressionError:
        raise CompressionError("zlib decompression failed") from None


def read_object(object_hash: str, root: str | PathLike[str] = ".") -> bytes:
    """Return the decompressed bytes of an object, header included."""
    try:
        compressed = _path_of(object_hash, root).read_bytes()
    except OSError:
        raise ObjectNotFoundError(f"Not a valid object name: {object_hash}") from None
    return _inflate(compressed)


def split_object(raw: bytes) -> ObjectParts:
    """Split ``<type> <size>\\0<body>`` into its three parts."""
    space = raw.find(b" ")
    null = raw.find(b"\0")
    if space < 0 or null < 0:
        raise GitCodeError("Malformed object header")
    return ObjectParts(raw[:space], raw[space + 1:null], raw[null + 1:])


def cat_file(
    args: Sequence[str],
    root: str | PathLike[str] = ".",
    out: BinaryIO | None = None,
) -> None:
    """Run cat-file with the arguments that follow the command name."""
    if out is None:
        out = sys.stdout.buffer
    if len(args) != 2:
        raise UsageError(USAGE)

    flags: set[str] = set()
    object_hash = ""
    for arg in args:
        if arg in _FLAGS:
            flags.add(arg)
        elif not arg.startswith("-"):
            object_hash = arg
        else:
            raise UsageError(f"Invalid option: {arg}")
    if not object_hash:
        raise UsageError(USAGE)

    try:
        compressed = _path_of(object_hash, root).read_bytes()
    except OSError:
        if "-e" in flags:
            raise ObjectNotFoundError(f"Not a valid object name: {object_hash}") from None
        raise ObjectNotFoundError("Couldn't open file.") from None
    if "-e" in flags:
        return

    parts = split_object(_inflate(compressed))
    if "-t" in flags:
        out.write(parts.type)
    if "-s" in flags:
        out.write(parts.size)
    if "-p" in flags:
        out.write(parts.body)
    if flags & {"-t", "-s", "-p"}:
        out.write(b"\n")
    out.flush()