import pytest

from fusio.buf import Slice, SliceMut, resolve_bounds, slice_mut_of, slice_of

DATA = b"hello, world"


def test_resolve_bounds_defaults_cover_whole_buffer():
    assert resolve_bounds(len(DATA), None, None) == (0, len(DATA))


def test_resolve_bounds_keeps_explicit_values():
    assert resolve_bounds(len(DATA), 2, 7) == (2, 7)


@pytest.mark.parametrize("start,end", [(-1, 3), (5, 3), (0, len(DATA) + 1)])
def test_resolve_bounds_rejects_invalid(start, end):
    with pytest.raises(IndexError):
        resolve_bounds(len(DATA), start, end)


def test_full_slice_round_trip():
    s = slice_of(DATA)
    assert s.as_bytes() == DATA
    assert bytes(s) == DATA
    assert s.bytes_init() == len(DATA)
    assert s.recover() is DATA


def test_partial_slice_bytes():
    s = slice_of(DATA, 0, 5)
    assert s.as_bytes() == b"hello"


def test_bytes_init_counts_from_start_to_buffer_end():
    s = slice_of(DATA, 4, 6)
    assert s.bytes_init() + 4 == len(DATA)


def test_reslice_defaults_keep_current_bounds():
    s = slice_of(DATA, 3, 9)
    same = s.slice()
    assert (same.start, same.end) == (3, 9)
    assert same.as_bytes() == s.as_bytes()
    assert same.recover() is DATA


def test_reslice_out_of_range_raises():
    with pytest.raises(IndexError):
        slice_of(DATA).slice(0, len(DATA) + 1)


def test_slice_mut_requires_writable_buffer():
    with pytest.raises(TypeError):
        slice_mut_of(DATA)
    with pytest.raises(TypeError):
        SliceMut(DATA, 0, len(DATA))


def test_slice_mut_view_writes_through():
    buf = bytearray(len(DATA))
    s = slice_mut_of(buf)
    s.view()[:] = DATA
    assert s.recover() is buf
    assert bytes(buf) == DATA
    assert s.as_bytes() == DATA


def test_slice_mut_offset_view():
    buf = bytearray(DATA)
    s = slice_mut_of(buf, 7)
    view = s.view()
    assert len(view) == s.bytes_init()
    view[:] = b"W" * len(view)
    assert bytes(buf[:7]) == DATA[:7]
    assert bytes(buf[7:]) == b"W" * s.bytes_init()


def test_slice_mut_to_slice_shares_buffer():
    buf = bytearray(DATA)
    sm = slice_mut_of(buf)
    ro = sm.slice(0, 5)
    assert isinstance(ro, Slice)
    buf[0:5] = b"HELLO"
    assert ro.as_bytes() == b"HELLO"
    assert ro.recover() is buf


def test_slice_mut_reslice_mut_round_trip():
    buf = bytearray(len(DATA))
    inner = slice_mut_of(buf).slice_mut(2, 5)
    assert (inner.start, inner.end) == (2, 5)
    inner.view()[: len(DATA) - 2] = DATA[: len(DATA) - 2]
    assert inner.recover() is buf
    assert bytes(buf[2:]) == DATA[: len(DATA) - 2]


def test_memoryview_buffer_is_accepted():
    buf = bytearray(DATA)
    s = slice_mut_of(memoryview(buf))
    assert s.as_bytes() == DATA
    assert s.bytes_init() == len(DATA)