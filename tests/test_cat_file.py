import io
import zlib

import pytest

from gitcode.cat_file import cat_file, read_object, split_object
from gitcode.errors import CompressionError, GitCodeError, ObjectNotFoundError, UsageError

HASH = "3b18e512dba79e4c8300dd08aeb37f8e728b8dad"
RAW = b"blob 12\x00hello world\n"


@pytest.fixture
def repo(tmp_path):
    directory = tmp_path / ".git" / "objects" / HASH[:2]
    directory.mkdir(parents=True)
    (directory / HASH[2:]).write_bytes(zlib.compress(RAW))
    return tmp_path


def run(args, root):
    out = io.BytesIO()
    cat_file(args, root, out)
    return out.getvalue()


def test_read_object(repo):
    assert read_object(HASH, repo) == RAW


def test_read_missing(tmp_path):
    with pytest.raises(ObjectNotFoundError, match="Not a valid object name"):
        read_object(HASH, tmp_path)


def test_split_object():
    parts = split_object(RAW)
    assert parts == (b"blob", b"12", b"hello world\n")


def test_split_malformed():
    with pytest.raises(GitCodeError):
        split_object(b"nospace")


def test_type(repo):
    assert run(["-t", HASH], repo) == b"blob\n"


def test_size(repo):
    assert run(["-s", HASH], repo) == b"12\n"


def test_print(repo):
    assert run(["-p", HASH], repo) == b"hello world\n\n"


def test_hash_before_flag(repo):
    assert run([HASH, "-t"], repo) == b"blob\n"


def test_exists(repo):
    assert run(["-e", HASH], repo) == b""


def test_exists_missing(tmp_path):
    with pytest.raises(ObjectNotFoundError, match="Not a valid object name"):
        run(["-e", HASH], tmp_path)


def test_print_missing(tmp_path):
    with pytest.raises(ObjectNotFoundError, match="Couldn't open file"):
        run(["-p", HASH], tmp_path)


@pytest.mark.parametrize("args", [[], [HASH], ["-p", "-t", HASH], ["-p", "-t"]])
def test_usage(args, tmp_path):
    with pytest.raises(UsageError):
        run(args, tmp_path)


def test_invalid_option(tmp_path):
    with pytest.raises(UsageError, match="Invalid option: -x"):
        run(["-x", HASH], tmp_path)


def test_corrupt_object(repo):
    (repo / ".git" / "objects" / HASH[:2] / HASH[2:]).write_bytes(b"junk")
    with pytest.raises(CompressionError, match="zlib decompression failed"):
        run(["-p", HASH], repo)