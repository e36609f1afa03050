"""Command-line entry point dispatching to the gitcode commands."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable, Sequence

from .cat_file import cat_file
from .errors import GitCodeError
from .hash_object import hash_object
from .ls_tree import ls_tree
from .repository import init_repository


def _init(args: Sequence[str]) -> None:
    init_repository(Path.cwd())
    sys.stdout.write("Initialized gitCode directory.")
    sys.stdout.flush()


def _binary_command(command: Callable[..., object]) -> Callable[[Sequence[str]], None]:
    def run(args: Sequence[str]) -> None:
        sys.stdout.flush()
        command(args, Path.cwd(), sys.stdout.buffer)

    return run


_COMMANDS: dict[str, Callable[[Sequence[str]], None]] = {
    "init": _init,
    "cat-file": _binary_command(cat_file),
    "hash-object": _binary_command(hash_object),
    "ls-tree": _binary_command(ls_tree),
}


def main(argv: Sequence[str] | None = None) -> int:
    """Run one command and return the process exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("Not enough arguments...", file=sys.stderr)
        return 1

    command = _COMMANDS.get(args[0])
    if command is None:
        print("Not a valid command...", file=sys.stderr)
        return 1

    try:
        command(args[1:])
    except GitCodeError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())