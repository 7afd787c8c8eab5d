"""A partitioned byte buffer that grows when data is upserted past a partition's end."""

from __future__ import annotations

from enum import IntEnum

from voxplay.types import VertexDraw


class BufferTarget(IntEnum):
    """What the buffer holds."""

    ARRAY_BUFFER = 0x8892
    ELEMENT_ARRAY_BUFFER = 0x8893
    DRAW_INDIRECT_BUFFER = 0x8F3F


def _raw(data) -> tuple[bytes, int]:
    """Return the bytes of a buffer-protocol object and the size of one item."""
    view = memoryview(data)
    return view.tobytes(), view.itemsize


class Buffer:
    """Contiguous bytes split into consecutive partitions.

    Offsets passed to :meth:`update` and :meth:`upsert` count items of the data
    being written, so writing an ``array('f')`` at offset 2 starts 8 bytes in.
    """

    def __init__(
        self,
        target: BufferTarget,
        draw: VertexDraw = VertexDraw.STATIC,
        resize_factor: int = 0,
    ) -> None:
        if resize_factor < 0:
            raise ValueError("resize_factor must not be negative")
        self.target = BufferTarget(target)
        self.draw = VertexDraw(draw)
        self.resize_factor = resize_factor
        self._bytes = bytearray()
        self._partitions: list[int] = []

    @property
    def partitions(self) -> list[int]:
        """Size in bytes of each partition."""
        return list(self._partitions)

    @property
    def size(self) -> int:
        """Total size of the buffer in bytes."""
        return len(self._bytes)

    def set(self, data, partitions=None) -> None:
        """Replace the contents; without explicit partitions the data's size is appended as one."""
        raw, _ = _raw(data)
        if partitions:
            self._partitions = [int(p) for p in partitions]
        else:
            self._partitions.append(len(raw))
        self._bytes = bytearray(raw)

    def _require(self, partition: int) -> None:
        if not self.partition_exists(partition):
            raise IndexError(
                f"partition {partition} does not exist; add it with add_partition first"
            )

    def _write(self, start: int, raw: bytes) -> None:
        end = start + len(raw)
        if start < 0 or end > len(self._bytes):
            raise ValueError(
                f"write of {len(raw)} bytes at {start} exceeds buffer size {len(self._bytes)}"
            )
        self._bytes[start:end] = raw

    def update(self, offset: int, data, partition: int = 0) -> None:
        """Overwrite bytes inside ``partition`` starting at item ``offset``."""
        self._require(partition)
        raw, itemsize = _raw(data)
        self._write(offset * itemsize + self.partition_offset(partition), raw)

    def upsert(self, offset: int, data, partition: int = 0) -> None:
        """Write into ``partition``, growing it first if the data runs past its end."""
        self._require(partition)
        raw, itemsize = _raw(data)
        data_size = len(raw)
        offset_size = offset * itemsize
        expansion = offset_size + data_size - self._partitions[partition]
        if expansion > 0:
            self.resize(partition, expansion + data_size * self.resize_factor, offset_size)
        self._write(offset_size + self.partition_offset(partition), raw)

    def data(self, partition: int | None = None) -> bytes:
        """The whole buffer, or the bytes of one partition."""
        if partition is None:
            return bytes(self._bytes)
        self._require(partition)
        start = self.partition_offset(partition)
        return bytes(self._bytes[start : start + self._partitions[partition]])

    def resize(self, partition: int, size: int, offset: int = 0) -> None:
        """Insert ``size`` zero bytes at byte ``offset`` within ``partition``.

        Asking for the partition just past the last one creates it empty first.
        """
        if size < 0:
            raise ValueError("size must not be negative")
        if self.is_next_partition(partition):
            self._partitions.append(0)
        self._require(partition)
        at = self.partition_offset(partition) + offset
        if offset < 0 or at > len(self._bytes):
            raise ValueError(f"offset {offset} lies outside the buffer")
        self._bytes[at:at] = bytes(size)
        self._partitions[partition] += size

    def add_partition(self, size: int) -> int:
        """Append a partition of ``size`` bytes, growing the buffer, and return its index."""
        self._partitions.append(0)
        index = len(self._partitions) - 1
        if size > 0:
            self.resize(index, size, 0)
        return index

    def is_next_partition(self, partition: int) -> bool:
        return len(self._partitions) == partition

    def partition_exists(self, partition: int) -> bool:
        return 0 <= partition < len(self._partitions)

    def partition_offset(self, partition: int) -> int:
        """Byte offset where ``partition`` begins."""
        self._require(partition)
        return sum(self._partitions[:partition])

    def partition_size(self, partition: int) -> int:
        self._require(partition)
        return self._partitions[partition]