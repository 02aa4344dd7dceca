"""Views over byte buffers used to pass data through file operations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

Buffer = Union[bytes, bytearray, memoryview]


def resolve_bounds(
    length: int, start: Optional[int] = None, end: Optional[int] = None
) -> tuple[int, int]:
    """Resolve optional bounds against a buffer of ``length`` bytes.

    A missing start means 0 and a missing end means ``length``.
    """
    return _resolve(length, start, end, 0, length)


def _resolve(
    length: int,
    start: Optional[int],
    end: Optional[int],
    default_start: int,
    default_end: int,
) -> tuple[int, int]:
    lo = default_start if start is None else start
    hi = default_end if end is None else end
    if lo < 0 or hi < lo or hi > length:
        raise IndexError(f"range {lo}..{hi} out of bounds for length {length}")
    return lo, hi


def _length(buf: Buffer) -> int:
    return memoryview(buf).nbytes


def _is_writable(buf: Buffer) -> bool:
    return not memoryview(buf).readonly


def slice_of(buf: Buffer, start: Optional[int] = None, end: Optional[int] = None) -> Slice:
    """Return a read-only view of ``buf`` between ``start`` and ``end``."""
    lo, hi = resolve_bounds(_length(buf), start, end)
    return Slice(buf, lo, hi)


def slice_mut_of(
    buf: Buffer, start: Optional[int] = None, end: Optional[int] = None
) -> SliceMut:
    """Return a writable view of ``buf`` between ``start`` and ``end``."""
    if not _is_writable(buf):
        raise TypeError(f"{type(buf).__name__} is not a writable buffer")
    lo, hi = resolve_bounds(_length(buf), start, end)
    return SliceMut(buf, lo, hi)


@dataclass
class Slice:
    """A read-only range of an underlying buffer."""

    buf: Buffer
    start: int
    end: int

    def bytes_init(self) -> int:
        """Number of initialised bytes from ``start`` to the end of the buffer."""
        return _length(self.buf) - self.start

    def as_bytes(self) -> bytes:
        """Copy of the bytes between ``start`` and ``end``."""
        return bytes(memoryview(self.buf).cast("B")[self.start : self.end])

    def __bytes__(self) -> bytes:
        return self.as_bytes()

    def slice(self, start: Optional[int] = None, end: Optional[int] = None) -> Slice:
        """Re-slice the same buffer; missing bounds keep the current ones."""
        lo, hi = _resolve(_length(self.buf), start, end, self.start, self.end)
        return Slice(self.buf, lo, hi)

    def recover(self) -> Buffer:
        """Return the underlying buffer."""
        return self.buf


@dataclass
class SliceMut:
    """A writable range of an underlying buffer."""

    buf: Buffer
    start: int
    end: int

    def __post_init__(self) -> None:
        if not _is_writable(self.buf):
            raise TypeError(f"{type(self.buf).__name__} is not a writable buffer")

    def bytes_init(self) -> int:
        """Number of initialised bytes from ``start`` to the end of the buffer."""
        return _length(self.buf) - self.start

    def as_bytes(self) -> bytes:
        """Copy of the bytes between ``start`` and ``end``."""
        return bytes(memoryview(self.buf).cast("B")[self.start : self.end])

    def __bytes__(self) -> bytes:
        return self.as_bytes()

    def view(self) -> memoryview:
        """Writable view of the ``bytes_init()`` bytes beginning at ``start``."""
        return memoryview(self.buf).cast("B")[self.start :]

    def slice(self, start: Optional[int] = None, end: Optional[int] = None) -> Slice:
        """Read-only re-slice of the same buffer; missing bounds keep the current ones."""
        lo, hi = _resolve(_length(self.buf), start, end, self.start, self.end)
        return Slice(self.buf, lo, hi)

    def slice_mut(self, start: Optional[int] = None, end: Optional[int] = None) -> SliceMut:
        """Writable re-slice of the same buffer; missing bounds keep the current ones."""
        lo, hi = _resolve(_length(self.buf), start, end, self.start, self.end)
        return SliceMut(self.buf, lo, hi)

    def recover(self) -> Buffer:
        """Return the underlying buffer."""
        return self.buf