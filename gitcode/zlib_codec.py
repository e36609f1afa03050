"""zlib compression of object data."""

from __future__ import annotations

import zlib

from .errors import CompressionError


def compress(data: bytes) -> bytes:
    """Compress ``data`` as one complete zlib stream at the default level."""
    try:
        return zlib.compress(data)
    except zlib.error as exc:
        raise CompressionError(f"Compression failed ({exc})") from exc


def decompress(data: bytes) -> bytes:
    """Inflate one complete zlib stream; bytes after its end are ignored."""
    inflater = zlib.decompressobj()
    try:
        result = inflater.decompress(data)
    except zlib.error as exc:
        raise CompressionError(f"Decompression failed ({exc})") from exc
    if not inflater.eof:
        raise CompressionError("Decompression failed (incomplete zlib stream)")
    return result