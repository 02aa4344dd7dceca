"""Files and a file system on top of an object store."""

from __future__ import annotations

from typing import AsyncIterator, Optional

from fusio.buf import SliceMut, slice_mut_of
from fusio.errors import FusioError, PathError, UnsupportedError
from fusio.fs import File, FileMeta, Fs
from fusio.options import OpenOptions


def _split(path: str) -> list[str]:
    parts = [part for part in str(path).split("/") if part]
    for part in parts:
        if part in (".", ".."):
            raise PathError(f"path {path!r} contains an illegal segment {part!r}")
    return parts


def _key(path: str) -> str:
    parts = _split(path)
    if not parts:
        raise PathError(f"path {path!r} names no object")
    return "/".join(parts)


class ObjectStore:
    """An in-memory object store keyed by slash-separated paths."""

    def __init__(self) -> None:
        self._objects: dict[str, bytes] = {}

    def _get(self, key: str) -> bytes:
        try:
            return self._objects[key]
        except KeyError:
            raise FusioError(f"object not found: {key}") from None

    async def get_range(self, path: str, start: int = 0, end: Optional[int] = None) -> bytes:
        """Return the object's bytes from ``start`` up to ``end`` or its end."""
        data = self._get(_key(path))
        if start < 0 or start > len(data):
            raise FusioError(f"range start {start} beyond object of {len(data)} bytes")
        if end is not None and end < start:
            raise FusioError(f"range end {end} before start {start}")
        return data[start:end]

    async def head(self, path: str) -> FileMeta:
        """Return the object's metadata without its content."""
        key = _key(path)
        return FileMeta(key, len(self._get(key)))

    async def put(self, path: str, data) -> None:
        """Store ``data`` as the whole content of the object at ``path``."""
        self._objects[_key(path)] = bytes(data)

    async def list(self, prefix: Optional[str] = None) -> AsyncIterator[FileMeta]:
        """Iterate, in path order, over objects below ``prefix``."""
        base = "/".join(_split(prefix)) if prefix else ""
        for key in sorted(self._objects):
            if not base or key.startswith(base + "/"):
                yield FileMeta(key, len(self._objects[key]))

    async def delete(self, path: str) -> None:
        """Delete the object at ``path``; a missing object is not an error."""
        self._objects.pop(_key(path), None)


class S3File(File):
    """A file backed by one object; writes become visible when it is closed."""

    def __init__(self, store: ObjectStore, path: str) -> None:
        self.store = store
        self.path = _key(path)
        self._pending: Optional[bytearray] = None

    async def read_exact_at(self, buf, pos: int):
        target = buf if isinstance(buf, SliceMut) else slice_mut_of(buf)
        length = target.bytes_init()
        data = await self.store.get_range(self.path, pos, pos + length)
        if len(data) != length:
            raise FusioError(
                f"expected {length} bytes at offset {pos} of {self.path}, got {len(data)}"
            )
        target.view()[:length] = data
        return buf

    async def read_to_end_at(self, pos: int) -> bytes:
        return await self.store.get_range(self.path, pos)

    async def size(self) -> int:
        return (await self.store.head(self.path)).size

    async def write_all(self, data) -> None:
        if self._pending is None:
            self._pending = bytearray()
        self._pending += bytes(data)

    async def flush(self) -> int:
        """Leave buffered writes pending until close; return how many bytes wait."""
        return len(self._pending) if self._pending is not None else 0

    async def close(self) -> None:
        pending, self._pending = self._pending, None
        if pending is not None:
            await self.store.put(self.path, pending)


class S3Store(Fs):
    """A file system whose files are objects of an :class:`ObjectStore`."""

    def __init__(self, store: ObjectStore) -> None:
        self.store = store

    async def open_options(self, path: str, options: OpenOptions) -> S3File:
        if not options.truncate:
            raise UnsupportedError("append mode is not supported in Amazon S3")
        return S3File(self.store, path)

    async def create_dir_all(self, path: str) -> None:
        """Object stores have no directories, so only check that ``path`` is legal."""
        _split(path)

    async def list(self, path: str) -> AsyncIterator[FileMeta]:
        async for meta in self.store.list(path):
            yield meta

    async def remove(self, path: str) -> None:
        await self.store.delete(path)