"""Write-then-read helpers that work with any :class:`~fusio.fs.File`."""

from __future__ import annotations

from fusio.fs import File


async def _roundtrip(file: File, data, buf, *, close: bool):
    await file.write_all(data)
    if close:
        await file.close()
    return await file.read_exact_at(buf, 0)


async def write_close_read(file: File, data, buf):
    """Write ``data``, close the file, then fill ``buf`` from offset 0 and return it."""
    return await _roundtrip(file, data, buf, close=True)


async def write_read(file: File, data, buf):
    """Write ``data``, then fill ``buf`` from offset 0 without closing and return it."""
    return await _roundtrip(file, data, buf, close=False)