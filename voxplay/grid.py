"""A fixed 32x32x32 bit grid stored three ways, plus a simple octree container."""

from __future__ import annotations

from typing import Callable, Generic, TypeVar

SIZE = 32
_WORD_MASK = (1 << SIZE) - 1

T = TypeVar("T")


def _check_coordinate(name: str, value: int) -> int:
    if not 0 <= value < SIZE:
        raise IndexError(f"{name}={value} is outside 0..{SIZE - 1}")
    return value


def _check_word(value: int) -> int:
    if not 0 <= value <= _WORD_MASK:
        raise ValueError(f"word {value} does not fit in {SIZE} bits")
    return value


class UniformGrid3D:
    """Binary voxel grid kept as bit columns along y, rows along x and depths along z.

    Every line is a 32-bit integer whose bit ``i`` is the voxel at position ``i``
    along that axis, so runs of solid voxels can be found with bit operations.
    """

    def __init__(self) -> None:
        self._columns = [0] * (SIZE * SIZE)  # index x + SIZE*z, bit y
        self._rows = [0] * (SIZE * SIZE)  # index y + SIZE*z, bit x
        self._depths = [0] * (SIZE * SIZE)  # index y + SIZE*x, bit z

    def get_value(self, x: int, y: int, z: int) -> int:
        _check_coordinate("x", x)
        _check_coordinate("y", y)
        _check_coordinate("z", z)
        return (self._columns[x + SIZE * z] >> y) & 1

    def set_value(self, x: int, y: int, z: int, value: int) -> None:
        """Set one voxel to 0 or 1 in all three layouts."""
        if value not in (0, 1):
            raise ValueError(f"voxel value must be 0 or 1, got {value!r}")
        _check_coordinate("x", x)
        _check_coordinate("y", y)
        _check_coordinate("z", z)
        targets = (
            (self._columns, x + SIZE * z, y),
            (self._rows, y + SIZE * z, x),
            (self._depths, y + SIZE * x, z),
        )
        for words, index, bit in targets:
            if value:
                words[index] |= 1 << bit
            else:
                words[index] &= ~(1 << bit) & _WORD_MASK

    def size(self) -> tuple[int, int, int]:
        return (SIZE, SIZE, SIZE)

    def get_column(self, x: int, z: int) -> int:
        """Bits along y at (x, z)."""
        return self._columns[_check_coordinate("x", x) + SIZE * _check_coordinate("z", z)]

    def set_column(self, x: int, z: int, value: int) -> None:
        """Overwrite the y-column at (x, z); the row and depth layouts are left as they are."""
        index = _check_coordinate("x", x) + SIZE * _check_coordinate("z", z)
        self._columns[index] = _check_word(value)

    def get_row(self, y: int, z: int) -> int:
        """Bits along x at (y, z)."""
        return self._rows[_check_coordinate("y", y) + SIZE * _check_coordinate("z", z)]

    def set_row(self, y: int, z: int, value: int) -> None:
        """Overwrite the x-row at (y, z); the other layouts are left as they are."""
        index = _check_coordinate("y", y) + SIZE * _check_coordinate("z", z)
        self._rows[index] = _check_word(value)

    def get_depth(self, x: int, y: int) -> int:
        """Bits along z at (x, y)."""
        return self._depths[_check_coordinate("y", y) + SIZE * _check_coordinate("x", x)]

    def set_depth(self, x: int, y: int, value: int) -> None:
        """Overwrite the z-line at (x, y); the other layouts are left as they are."""
        index = _check_coordinate("y", y) + SIZE * _check_coordinate("x", x)
        self._depths[index] = _check_word(value)

    def clear(self) -> None:
        for words in (self._columns, self._rows, self._depths):
            words[:] = [0] * len(words)

    def copy(self) -> "UniformGrid3D":
        other = UniformGrid3D()
        other._columns = list(self._columns)
        other._rows = list(self._rows)
        other._depths = list(self._depths)
        return other

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UniformGrid3D):
            return NotImplemented
        return (
            self._columns == other._columns
            and self._rows == other._rows
            and self._depths == other._depths
        )

    __hash__ = None  # type: ignore[assignment]


class Octree(Generic[T]):
    """A node value with an optional list of child octrees."""

    def __init__(self, node_factory: Callable[[], T]) -> None:
        self._factory = node_factory
        self.node: T = node_factory()
        self.children: list[Octree[T]] = []

    def subdivide(self) -> list["Octree[T]"]:
        """Append eight new children and return the child list."""
        self.children.extend(Octree(self._factory) for _ in range(8))
        return self.children