"""Abort helpers.

Each helper raises ``AbortError`` when its condition triggers. Reporting the
message and terminating the interpreter are left to the caller's entry point
(see ``rya.app.main``).
"""

from __future__ import annotations

import os

from .errors import AbortError

__all__ = [
    "abort_if",
    "abort_unless",
    "abort_if_file_exists",
    "abort_unless_file_exists",
]


def abort_if(condition: object, message: str = "Fatal error") -> None:
    """Raise AbortError if ``condition`` is truthy."""
    if condition:
        raise AbortError(message)


def abort_unless(condition: object, message: str = "Fatal error") -> None:
    """Raise AbortError unless ``condition`` is truthy."""
    abort_if(not condition, message)


def abort_if_file_exists(path: str | os.PathLike[str], message: str | None = None) -> None:
    abort_if(os.path.exists(path), message or f"File '{os.fspath(path)}' already exists")


def abort_unless_file_exists(path: str | os.PathLike[str], message: str | None = None) -> None:
    abort_unless(os.path.exists(path), message or f"File '{os.fspath(path)}' does not exist")
