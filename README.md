# fusio

Asynchronous file I/O behind one small interface, with an in-memory object
store as the backend and adaptors for reading and writing Parquet files
through that interface.

## What it provides

- `fusio.fs` — the abstract `File` and `Fs` classes and the `FileMeta`
  dataclass (`path`, `size`) for entries returned by listings. A file offers
  `read_exact_at`, `read_to_end_at`, `size`, `write_all`, `flush` and `close`,
  and closes itself when used as an `async with` block. A file system offers
  `open` (default options), `open_options`, `create_dir_all`, `list` (an async
  iterator of `FileMeta`) and `remove`.
- `fusio.options` — `OpenOptions`, a frozen dataclass with `read`, `write`,
  `create` and `truncate` flags and `with_read`, `with_write`, `with_create`
  and `with_truncate`, each returning a copy. By default a file is opened for
  reading only; `with_create` also turns on `write`.
- `fusio.buf` — `Slice` and `SliceMut`, views over a range of a `bytes`,
  `bytearray` or `memoryview` that can be re-sliced, copied out with
  `as_bytes()` and turned back into the original buffer with `recover()`.
  `SliceMut` accepts only writable buffers and gives a writable `view()`.
  `slice_of`, `slice_mut_of` and `resolve_bounds` make and check the ranges;
  out-of-range bounds raise `IndexError`.
- `fusio.objectstore` — `ObjectStore`, an in-memory store keyed by
  slash-separated paths (`get_range`, `head`, `put`, `list`, `delete`), with
  `S3Store` and `S3File` on top of it. Writes to an `S3File` are buffered and
  stored as the whole object on `close()`; `flush()` only reports how many
  bytes are still pending. Opening without `truncate` raises
  `UnsupportedError`, since objects cannot be appended to. Paths with `.` or
  `..` segments, or naming no object, raise `PathError`; reading a missing
  object raises `FusioError`.
- `fusio.roundtrip` — `write_close_read` and `write_read`, which write bytes
  to any file (closing it or not) and then fill a buffer from offset 0,
  returning that buffer.
- `fusio.parquet` — `AsyncReader`, which reads byte ranges of a file and
  returns the raw encoded metadata in front of the Parquet footer, using a
  configurable prefetch size (`with_prefetch_footer_size`; default 512 KiB,
  at least 8 bytes and at most the file length); `AsyncWriter`, which appends
  chunks to a file and closes it on `complete()`; and `decode_footer`, which
  checks the `PAR1` magic and returns the metadata length.
- `fusio.errors` — `FusioError` and its subclasses `UnsupportedError` and
  `PathError`.

## Example

```python
import asyncio

from fusio.objectstore import ObjectStore, S3Store
from fusio.options import OpenOptions
from fusio.roundtrip import write_close_read


async def main():
    fs = S3Store(ObjectStore())
    file = await fs.open_options("dir/foo.txt", OpenOptions().with_truncate(True))
    buf = await write_close_read(file, b"hello, world", bytearray(12))
    assert bytes(buf) == b"hello, world"
    assert [meta.size async for meta in fs.list("dir")] == [12]


asyncio.run(main())
```

## What it does not do

- There is no local-disk file system; `ObjectStore` keeps its objects in
  memory and talks to no network service.
- `fusio.parquet` does not encode or decode Parquet data: `get_metadata`
  returns the metadata bytes undecoded, and `AsyncWriter` writes whatever
  chunks it is given.
- There is no command-line tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```