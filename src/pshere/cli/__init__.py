"""Command-line interface for pshere."""

from pshere.cli.app import entrypoint, main

__all__ = [
    "entrypoint",
    "main",
]
