"""Creation of the repository directory layout."""

from __future__ import annotations

from os import PathLike
from pathlib import Path

from .errors import GitCodeError

REPO_DIR = ".gitCode"
HEAD_CONTENT = "ref: refs/heads/main\n"


def init_repository(root: str | PathLike[str] = ".") -> Path:
    """Create the repository directories and HEAD under ``root``; return the repository path."""
    repo = Path(root) / REPO_DIR
    try:
        for directory in (repo, repo / "objects", repo / "refs"):
            directory.mkdir(exist_ok=True)
    except OSError as exc:
        raise GitCodeError("Failed to initialize gitCode...") from exc
    try:
        (repo / "HEAD").write_text(HEAD_CONTENT)
    except OSError as exc:
        raise GitCodeError(f"Failed to create {REPO_DIR}/HEAD file.") from exc
    return repo