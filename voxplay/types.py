"""Core rendering value types: vertices, instances and meshes."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass, field
from enum import IntEnum

import numpy as np

from voxplay.transform import rotate, scale, translate


class VertexDraw(IntEnum):
    """Buffer usage hints."""

    STATIC = 0x88E4
    DYNAMIC = 0x88E8
    STREAM = 0x88E0


class VertexType(IntEnum):
    """Component types of a vertex attribute."""

    FLOAT = 0x1406
    INT = 0x1404
    UNSIGNED_INT = 0x1405
    BYTE = 0x1400
    UNSIGNED_BYTE = 0x1401
    SHORT = 0x1402
    UNSIGNED_SHORT = 0x1403
    BOOL = 0x8B56


class Primitive(IntEnum):
    """Primitive topologies."""

    POINTS = 0x0000
    LINES = 0x0001
    LINE_LOOP = 0x0002
    LINE_STRIP = 0x0003
    TRIANGLES = 0x0004
    TRIANGLE_STRIP = 0x0005
    TRIANGLE_FAN = 0x0006


def _floats(value, count: int) -> tuple[float, ...]:
    result = tuple(float(v) for v in value)
    if len(result) != count:
        raise ValueError(f"expected {count} components, got {len(result)}")
    return result


@dataclass(frozen=True)
class Vertex:
    """An immutable, hashable vertex."""

    position: tuple[float, float, float] = (0.0, 0.0, 0.0)
    normal: tuple[float, float, float] = (0.0, 0.0, 0.0)
    tex_coord: tuple[float, float] = (0.0, 0.0)

    def __post_init__(self) -> None:
        object.__setattr__(self, "position", _floats(self.position, 3))
        object.__setattr__(self, "normal", _floats(self.normal, 3))
        object.__setattr__(self, "tex_coord", _floats(self.tex_coord, 2))


@dataclass(eq=False)
class InstanceBuffer:
    """Per-instance data as uploaded to the GPU."""

    model: np.ndarray = field(default_factory=lambda: np.eye(4))
    normal_matrix: np.ndarray = field(default_factory=lambda: np.eye(3))
    color: np.ndarray = field(default_factory=lambda: np.ones(3))


@dataclass(eq=False)
class Instance:
    """A placed copy of a model with its own transform and colour."""

    id: int = 0
    translate: np.ndarray = field(default_factory=lambda: np.zeros(3))
    rotation: np.ndarray = field(default_factory=lambda: np.zeros(3))
    scale: np.ndarray = field(default_factory=lambda: np.ones(3))
    color: np.ndarray = field(default_factory=lambda: np.ones(3))
    _buffer: InstanceBuffer = field(default_factory=InstanceBuffer, repr=False)

    def update(self) -> InstanceBuffer:
        """Rebuild and return the instance buffer from the current fields."""
        rx, ry, rz = (math.radians(a) for a in np.asarray(self.rotation, dtype=float))
        model = scale(np.eye(4), self.scale)
        model = rotate(model, rx, (1.0, 0.0, 0.0))
        model = rotate(model, ry, (0.0, 1.0, 0.0))
        model = rotate(model, rz, (0.0, 0.0, 1.0))
        model = translate(model, self.translate)
        self._buffer.model = model
        self._buffer.color = np.array(self.color, dtype=float)
        self._buffer.normal_matrix = np.linalg.inv(model[:3, :3]).T
        return self._buffer


@dataclass
class Mesh:
    """A named list of vertices with triangle indices."""

    name: str = ""
    vertices: list[Vertex] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)


@dataclass
class DrawElementsIndirectCommand:
    """Arguments of one indirect indexed draw."""

    count: int = 0
    prim_count: int = 0
    first_index: int = 0
    base_vertex: int = 0
    base_instance: int = 0

    _FORMAT = struct.Struct("<5I")

    def pack(self) -> bytes:
        """Encode as five little-endian unsigned 32-bit integers."""
        return self._FORMAT.pack(
            self.count,
            self.prim_count,
            self.first_index,
            self.base_vertex,
            self.base_instance,
        )