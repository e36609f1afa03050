import zlib

import pytest

from gitcode.cli import main
from gitcode.hash_object import blob_object, object_hash


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_no_arguments(workdir, capsys):
    assert main([]) == 1
    assert "Not enough arguments" in capsys.readouterr().err


def test_unknown_command(workdir, capsys):
    assert main(["frobnicate"]) == 1
    assert "Not a valid command" in capsys.readouterr().err


def test_init(workdir, capsys):
    assert main(["init"]) == 0
    assert capsys.readouterr().out == "Initialized gitCode directory."
    assert (workdir / ".gitCode" / "HEAD").read_text() == "ref: refs/heads/main\n"


def test_hash_object_write(workdir, capsys):
    (workdir / "f.txt").write_bytes(b"content")
    assert main(["hash-object", "-w", "f.txt"]) == 0
    digest = object_hash(blob_object(b"content"))
    assert capsys.readouterr().out == digest + "\n"
    stored = workdir / ".gitCode" / "objects" / digest[:2] / digest[2:]
    assert zlib.decompress(stored.read_bytes()) == blob_object(b"content")


def test_cat_file_print(workdir, capsys):
    raw = blob_object(b"body")
    digest = object_hash(raw)
    directory = workdir / ".git" / "objects" / digest[:2]
    directory.mkdir(parents=True)
    (directory / digest[2:]).write_bytes(zlib.compress(raw))
    assert main(["cat-file", "-p", digest]) == 0
    assert capsys.readouterr().out == "body\n"


def test_command_error_reported(workdir, capsys):
    assert main(["cat-file", "-p"]) == 1
    assert "Usage: cat-file" in capsys.readouterr().err


def test_ls_tree_missing(workdir, capsys):
    assert main(["ls-tree", "ab" * 20]) == 1
    assert "Not a valid object name" in capsys.readouterr().err