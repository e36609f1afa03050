"""Plain records for the pieces of a repository."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Author:
    """Who made a commit and when (seconds since the epoch)."""

    name: str
    email: str
    timestamp: int


@dataclass
class Commit:
    """A commit pointing at a tree, with its message."""

    tree_hash: str
    commit_message: str


@dataclass
class GitObject:
    """The content of a stored object."""

    content: str


@dataclass
class TreeEntry:
    """One line of a tree object."""

    mode: int
    type: str
    hash: str
    name: str