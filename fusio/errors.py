"""Exception hierarchy shared by every file-system backend."""

from __future__ import annotations


class FusioError(Exception):
    """Base class for errors raised by file and file-system operations."""


class UnsupportedError(FusioError):
    """An operation the backend cannot perform."""

    def __init__(self, message: str) -> None:
        super().__init__(f"unsupported operation: {message}")
        self.message = message


class PathError(FusioError, ValueError):
    """A path that cannot be parsed or represented by the backend."""