"""The ls-tree command: list the entries of a tree object."""

from __future__ import annotations

import sys
from os import PathLike
from typing import BinaryIO, Sequence

from .cat_file import read_object
from .errors import GitCodeError, UsageError
from .models import TreeEntry

_HASH_LENGTH = 20
_TREE_MODE = b"40000"


def parse_tree(content: bytes) -> list[TreeEntry]:
    """Parse the body of a tree object into its entries, stopping at a truncated one."""
    entries: list[TreeEntry] = []
    pos = 0
    while pos < len(content):
        space = content.find(b" ", pos)
        if space < 0:
            break
        mode_text = content[pos:space]
        null = content.find(b"\0", pos)
        if null < 0:
            break
        name = content[space + 1:null]
        if null + _HASH_LENGTH > len(content):
            break
        raw_hash = content[null + 1:null + 1 + _HASH_LENGTH]
        try:
            mode = int(mode_text, 8)
        except ValueError:
            raise GitCodeError(f"Malformed tree entry mode: {mode_text!r}") from None
        entries.append(
            TreeEntry(
                mode=mode,
                type="tree" if mode_text == _TREE_MODE else "blob",
                hash=raw_hash.hex(),
                name=name.decode("utf-8", "surrogateescape"),
            )
        )
        pos = null + 1 + _HASH_LENGTH
    return entries


def format_entry(entry: TreeEntry, name_only: bool) -> str:
    """Render one entry as ls-tree prints it, without the newline."""
    if name_only:
        return entry.name
    return f"{entry.mode:o} {entry.type} {entry.hash}\t{entry.name}"


def ls_tree(
    args: Sequence[str],
    root: str | PathLike[str] = ".",
    out: BinaryIO | None = None,
) -> None:
    """Run ls-tree with the arguments that follow the command name."""
    if out is None:
        out = sys.stdout.buffer
    if not 1 <= len(args) <= 2:
        raise UsageError("Usage: ls-tree (--name-only | ) <filename>")

    name_only = False
    object_hash = ""
    for arg in args:
        if arg == "--name-only":
            name_only = True
        elif not arg.startswith("-"):
            object_hash = arg
        else:
            raise UsageError(f"Invalid option: {arg}")
    if not object_hash:
        raise UsageError("Usage: ls-tree (--name-only | ) <hash>")

    _, _, content = read_object(object_hash, root).partition(b"\0")
    for entry in parse_tree(content):
        line = format_entry(entry, name_only) + "\n"
        out.write(line.encode("utf-8", "surrogateescape"))
    out.flush()