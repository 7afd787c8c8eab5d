from array import array

import pytest

from voxplay.buffer import Buffer, BufferTarget
from voxplay.types import VertexDraw


def make(data=b"", resize_factor=0):
    buffer = Buffer(BufferTarget.ARRAY_BUFFER, VertexDraw.DYNAMIC, resize_factor)
    if data:
        buffer.set(data)
    return buffer


def test_target_values_are_fixed():
    assert BufferTarget(0x8892) is BufferTarget.ARRAY_BUFFER
    assert BufferTarget(0x8893) is BufferTarget.ELEMENT_ARRAY_BUFFER


def test_set_records_single_partition():
    buffer = make(b"abcd")
    assert buffer.data() == b"abcd"
    assert buffer.partitions == [4]
    assert buffer.size == 4


def test_set_with_explicit_partitions():
    buffer = make()
    buffer.set(b"abcdef", [2, 4])
    assert buffer.data(1) == b"cdef"
    assert buffer.partition_offset(1) == 2


def test_update_uses_item_offsets():
    values = array("f", [1.0, 2.0, 3.0])
    buffer = make(values)
    buffer.update(1, array("f", [9.0]))
    assert array("f", buffer.data()).tolist() == [1.0, 9.0, 3.0]


def test_update_past_end_raises():
    buffer = make(b"ab")
    with pytest.raises(ValueError):
        buffer.update(1, b"xyz")


def test_update_missing_partition_raises():
    buffer = make(b"ab")
    with pytest.raises(IndexError):
        buffer.update(0, b"a", partition=3)


def test_resize_inserts_zeros_at_offset():
    buffer = make(b"abcd")
    buffer.resize(0, 2, 1)
    assert buffer.data() == b"a\x00\x00bcd"
    assert buffer.partition_size(0) == 6


def test_resize_rejects_offset_outside_buffer():
    buffer = make(b"ab")
    with pytest.raises(ValueError):
        buffer.resize(0, 1, 10)


def test_add_partition_grows_buffer():
    buffer = make(b"ab")
    index = buffer.add_partition(3)
    assert index == 1
    assert buffer.data() == b"ab\x00\x00\x00"
    assert buffer.partition_size(1) == 3
    assert buffer.partition_offset(1) == 2


def test_add_empty_partition():
    buffer = make()
    assert buffer.add_partition(0) == 0
    assert buffer.partition_exists(0)
    assert buffer.size == 0


def test_upsert_within_partition_overwrites():
    buffer = make(b"abcd")
    buffer.upsert(1, b"XY")
    assert buffer.data() == b"aXYd"
    assert buffer.partitions == [4]


def test_upsert_grows_and_keeps_later_partitions():
    buffer = make()
    buffer.set(b"abcd", [2, 2])
    buffer.upsert(1, b"XYZ", partition=0)
    assert buffer.data(0) == b"aXYZ"
    assert buffer.data(1) == b"cd"
    assert buffer.partition_size(0) == 4


def test_upsert_applies_resize_factor():
    buffer = make(b"ab", resize_factor=2)
    buffer.upsert(2, b"cd")
    assert buffer.data(0).startswith(b"abcd")
    assert buffer.partition_size(0) == 2 + 2 + 2 * 2
    assert buffer.size == buffer.partition_size(0)


def test_upsert_into_empty_buffer_needs_partition():
    buffer = make()
    with pytest.raises(IndexError):
        buffer.upsert(0, b"abc")
    buffer.add_partition(0)
    buffer.upsert(0, b"abc")
    assert buffer.data() == b"abc"


def test_partition_queries():
    buffer = make(b"ab")
    assert buffer.partition_exists(0)
    assert not buffer.partition_exists(1)
    assert buffer.is_next_partition(1)
    assert not buffer.is_next_partition(0)
    with pytest.raises(IndexError):
        buffer.partition_size(1)


def test_negative_resize_factor_rejected():
    with pytest.raises(ValueError):
        Buffer(BufferTarget.ARRAY_BUFFER, resize_factor=-1)