"""Initialise a repository, hash blobs and inspect loose git objects."""

__version__ = "0.1.0"