"""Abstract file and file-system interfaces shared by every backend."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from types import TracebackType
from typing import AsyncIterator, Optional, Type

from fusio.options import OpenOptions


@dataclass(frozen=True)
class FileMeta:
    """Path and size of an entry returned by :meth:`Fs.list`."""

    path: str
    size: int


class File(ABC):
    """A file that supports positional reads and appending writes.

    Used as an async context manager, the file is closed on exit.
    """

    @abstractmethod
    async def read_exact_at(self, buf, pos: int):
        """Fill ``buf`` completely with bytes starting at ``pos`` and return it."""

    @abstractmethod
    async def read_to_end_at(self, pos: int) -> bytes:
        """Return every byte from ``pos`` to the end of the file."""

    @abstractmethod
    async def size(self) -> int:
        """Return the size of the file in bytes."""

    @abstractmethod
    async def write_all(self, data) -> None:
        """Write all of ``data`` to the file."""

    @abstractmethod
    async def flush(self) -> None:
        """Push buffered writes towards the backing store."""

    @abstractmethod
    async def close(self) -> None:
        """Finish all pending writes and release the file."""

    async def __aenter__(self) -> File:
        return self

    async def __aexit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        await self.close()


class Fs(ABC):
    """A file system that opens, lists and removes files."""

    async def open(self, path: str) -> File:
        """Open ``path`` with the default options."""
        return await self.open_options(path, OpenOptions())

    @abstractmethod
    async def open_options(self, path: str, options: OpenOptions) -> File:
        """Open ``path`` with the given options."""

    @abstractmethod
    async def create_dir_all(self, path: str) -> None:
        """Create ``path`` and all of its missing parents."""

    @abstractmethod
    def list(self, path: str) -> AsyncIterator[FileMeta]:
        """Iterate over the entries below ``path``."""

    @abstractmethod
    async def remove(self, path: str) -> None:
        """Remove the file at ``path``."""