"""Exceptions raised by gitcode commands."""


class GitCodeError(Exception):
    """Base class for every failure a gitcode command reports."""


class UsageError(GitCodeError):
    """The command was given the wrong arguments."""


class ObjectNotFoundError(GitCodeError):
    """An object file could not be found or opened."""


class CompressionError(GitCodeError):
    """Compressing or decompressing object data failed."""