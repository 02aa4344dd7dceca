"""Parquet footer reader and writer adaptors over :class:`~fusio.fs.File`."""

from __future__ import annotations

from typing import Optional

from fusio.errors import FusioError
from fusio.fs import File

FOOTER_SIZE = 8
PARQUET_MAGIC = b"PAR1"
PREFETCH_FOOTER_SIZE = 512 * 1024


def _prefetch_size(footer_size: int, content_length: int) -> int:
    return min(max(footer_size, FOOTER_SIZE), content_length)


def decode_footer(footer) -> int:
    """Return the metadata length encoded in the 8-byte Parquet ``footer``."""
    raw = bytes(footer)
    if len(raw) != FOOTER_SIZE:
        raise FusioError(f"footer must be {FOOTER_SIZE} bytes, got {len(raw)}")
    if raw[4:] != PARQUET_MAGIC:
        raise FusioError("Invalid Parquet file. Corrupt footer")
    length = int.from_bytes(raw[:4], "little", signed=True)
    if length < 0:
        raise FusioError(
            f"Invalid Parquet file. Metadata length is less than zero ({length})"
        )
    return length


class AsyncReader:
    """Reads byte ranges and the footer metadata of a Parquet file."""

    def __init__(self, file: File, content_length: int) -> None:
        self.file = file
        self.content_length = content_length
        self.prefetch_footer_size = _prefetch_size(PREFETCH_FOOTER_SIZE, content_length)

    def with_prefetch_footer_size(self, footer_size: int) -> AsyncReader:
        """Set how many trailing bytes are fetched at once when reading the footer."""
        self.prefetch_footer_size = _prefetch_size(footer_size, self.content_length)
        return self

    async def get_bytes(self, start: int, end: int) -> bytes:
        """Return the bytes of the file from ``start`` up to ``end``."""
        buf = bytearray(end - start)
        await self.file.read_exact_at(buf, start)
        return bytes(buf)

    async def get_metadata(self) -> bytes:
        """Return the raw encoded metadata stored before the Parquet footer."""
        if self.content_length == 0:
            raise EOFError("file empty")

        footer_size = self.prefetch_footer_size
        prefetched = bytearray(footer_size)
        await self.file.read_exact_at(prefetched, self.content_length - footer_size)
        prefetched_length = len(prefetched)

        metadata_length = decode_footer(prefetched[prefetched_length - FOOTER_SIZE :])

        if prefetched_length >= metadata_length + FOOTER_SIZE:
            start = prefetched_length - metadata_length - FOOTER_SIZE
            return bytes(prefetched[start : prefetched_length - FOOTER_SIZE])

        if metadata_length + FOOTER_SIZE > self.content_length:
            raise FusioError(
                f"metadata length {metadata_length} exceeds file of "
                f"{self.content_length} bytes"
            )
        buf = bytearray(metadata_length)
        await self.file.read_exact_at(
            buf, self.content_length - metadata_length - FOOTER_SIZE
        )
        return bytes(buf)


class AsyncWriter:
    """Writes chunks to a file and closes it on completion."""

    def __init__(self, file: File) -> None:
        self._file: Optional[File] = file

    async def write(self, data) -> None:
        """Append ``data``; does nothing once the writer is complete."""
        if self._file is not None:
            await self._file.write_all(data)

    async def complete(self) -> None:
        """Close the underlying file; later calls do nothing."""
        file, self._file = self._file, None
        if file is not None:
            await file.close()