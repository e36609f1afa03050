import pytest

from gitcode.errors import CompressionError
from gitcode.zlib_codec import compress, decompress


@pytest.mark.parametrize("data", [b"", b"blob 0\x00", b"x" * 100_000, bytes(range(256))])
def test_round_trip(data):
    assert decompress(compress(data)) == data


def test_default_level_header():
    assert compress(b"hello")[:2] == b"\x78\x9c"


def test_truncated_stream_fails():
    packed = compress(b"some content that is long enough")
    with pytest.raises(CompressionError):
        decompress(packed[:-4])


def test_garbage_fails():
    with pytest.raises(CompressionError):
        decompress(b"not zlib at all")


def test_empty_input_fails():
    with pytest.raises(CompressionError):
        decompress(b"")


def test_trailing_bytes_ignored():
    assert decompress(compress(b"abc") + b"trailing") == b"abc"