"""A voxel world: noise terrain in a bit grid meshed into run-length faces."""

from __future__ import annotations

import math
import time
from dataclasses import dataclass
from enum import Enum

import numpy as np

from voxplay.grid import Octree, UniformGrid3D
from voxplay.types import Vertex

_WORD_MASK = 0xFFFFFFFF


def create_mask(x: int) -> int:
    """32-bit mask with bits ``x`` and above set; zero when ``x`` is 32."""
    if not 0 <= x <= 32:
        raise ValueError(f"mask width {x} is outside 0..32")
    if x == 32:
        return 0
    return ~((1 << x) - 1) & _WORD_MASK


@dataclass(frozen=True)
class Info:
    """A run of set bits: its length and the index of its lowest bit."""

    size: int
    offset: int


def get_info(bits: int) -> Info:
    """Locate the lowest run of consecutive set bits in a 32-bit word."""
    bits &= _WORD_MASK
    if bits == 0:
        return Info(size=0, offset=-1)
    offset = (bits & -bits).bit_length() - 1
    bits >>= offset
    inverted = ~bits & _WORD_MASK
    size = 32 if inverted == 0 else (inverted & -inverted).bit_length() - 1
    return Info(size=size, offset=offset)


class FaceDirection(Enum):
    TOP = "top"
    BOTTOM = "bottom"
    FRONT = "front"
    BACK = "back"
    LEFT = "left"
    RIGHT = "right"


# Corner offsets as multipliers of (size.x, size.y, size.z), and the face normal.
_FACES: dict[FaceDirection, tuple[tuple[tuple[int, int, int], ...], tuple[float, float, float]]] = {
    FaceDirection.TOP: (
        ((0, 1, 0), (1, 1, 1), (1, 1, 0), (0, 1, 0), (0, 1, 1), (1, 1, 1)),
        (0.0, 1.0, 0.0),
    ),
    FaceDirection.BOTTOM: (
        ((0, 0, 0), (1, 0, 0), (1, 0, 1), (0, 0, 0), (1, 0, 1), (0, 0, 1)),
        (0.0, -1.0, 0.0),
    ),
    FaceDirection.FRONT: (
        ((0, 0, 0), (1, 1, 0), (1, 0, 0), (0, 0, 0), (0, 1, 0), (1, 1, 0)),
        (0.0, 0.0, -1.0),
    ),
    FaceDirection.BACK: (
        ((0, 0, 1), (1, 0, 1), (1, 1, 1), (0, 0, 1), (1, 1, 1), (0, 1, 1)),
        (0.0, 0.0, 1.0),
    ),
    FaceDirection.LEFT: (
        ((0, 0, 0), (0, 0, 1), (0, 1, 1), (0, 0, 0), (0, 1, 1), (0, 1, 0)),
        (-1.0, 0.0, 0.0),
    ),
    FaceDirection.RIGHT: (
        ((1, 0, 0), (1, 1, 1), (1, 0, 1), (1, 0, 0), (1, 1, 0), (1, 1, 1)),
        (1.0, 0.0, 0.0),
    ),
}


def generate_face(vertices: list[Vertex], position, size, direction: FaceDirection) -> None:
    """Append the two triangles of one box face to ``vertices``."""
    corners, normal = _FACES[direction]
    px, py, pz = (float(v) for v in position)
    sx, sy, sz = (float(v) for v in size)
    for cx, cy, cz in corners:
        vertices.append(
            Vertex(position=(px + cx * sx, py + cy * sy, pz + cz * sz), normal=normal)
        )


class _PerlinNoise:
    """Fractal gradient noise: six octaves, lacunarity 2, persistence 0.5."""

    def __init__(self, seed: int, octaves: int = 6, frequency: float = 1.0,
                 lacunarity: float = 2.0, persistence: float = 0.5) -> None:
        perm = [int(v) for v in np.random.default_rng(seed).permutation(256)]
        self._perm = perm + perm
        self._octaves = octaves
        self._frequency = frequency
        self._lacunarity = lacunarity
        self._persistence = persistence

    @staticmethod
    def _fade(t: float) -> float:
        return t * t * t * (t * (t * 6.0 - 15.0) + 10.0)

    @staticmethod
    def _lerp(t: float, a: float, b: float) -> float:
        return a + t * (b - a)

    @staticmethod
    def _grad(hashed: int, x: float, y: float, z: float) -> float:
        h = hashed & 15
        u = x if h < 8 else y
        v = y if h < 4 else (x if h in (12, 14) else z)
        return (u if h & 1 == 0 else -u) + (v if h & 2 == 0 else -v)

    def _single(self, x: float, y: float, z: float) -> float:
        fx, fy, fz = math.floor(x), math.floor(y), math.floor(z)
        xi, yi, zi = fx & 255, fy & 255, fz & 255
        x, y, z = x - fx, y - fy, z - fz
        u, v, w = self._fade(x), self._fade(y), self._fade(z)
        p = self._perm
        a = p[xi] + yi
        aa, ab = p[a] + zi, p[a + 1] + zi
        b = p[xi + 1] + yi
        ba, bb = p[b] + zi, p[b + 1] + zi
        g, lerp = self._grad, self._lerp
        near = lerp(
            v,
            lerp(u, g(p[aa], x, y, z), g(p[ba], x - 1, y, z)),
            lerp(u, g(p[ab], x, y - 1, z), g(p[bb], x - 1, y - 1, z)),
        )
        far = lerp(
            v,
            lerp(u, g(p[aa + 1], x, y, z - 1), g(p[ba + 1], x - 1, y, z - 1)),
            lerp(u, g(p[ab + 1], x, y - 1, z - 1), g(p[bb + 1], x - 1, y - 1, z - 1)),
        )
        return lerp(w, near, far)

    def value(self, x: float, y: float, z: float) -> float:
        total = 0.0
        amplitude = 1.0
        frequency = self._frequency
        for _ in range(self._octaves):
            total += amplitude * self._single(x * frequency, y * frequency, z * frequency)
            amplitude *= self._persistence
            frequency *= self._lacunarity
        return total


def _height_map(seed: int, width: int, depth: int,
                bounds: tuple[float, float, float, float]) -> list[list[float]]:
    """Sample noise on the y=0 plane; result is indexed ``[z][x]``."""
    lower_x, upper_x, lower_z, upper_z = bounds
    step_x = (upper_x - lower_x) / width
    step_z = (upper_z - lower_z) / depth
    noise = _PerlinNoise(seed)
    return [
        [noise.value(lower_x + i * step_x, 0.0, lower_z + j * step_z) for i in range(width)]
        for j in range(depth)
    ]


class World:
    """A single voxel chunk and the triangle list meshed from it."""

    def __init__(self, seed: int | None = None) -> None:
        self.grid = UniformGrid3D()
        self.vertices: list[Vertex] = []
        self.tree: Octree[UniformGrid3D] = Octree(UniformGrid3D)
        self.generate_noise(seed)

    def update(self) -> None:
        """Rebuild ``vertices`` by merging runs of voxels along each axis."""
        self.vertices.clear()
        voxels = self.grid.copy()
        size_x, size_y, size_z = voxels.size()

        for z in range(size_z):
            for x in range(size_x):
                column = voxels.get_column(x, z)
                while column:
                    run = get_info(column)
                    column &= create_mask(run.size + run.offset)
                    position = (x, run.offset, z)
                    extent = (1.0, run.size, 1.0)
                    generate_face(self.vertices, position, extent, FaceDirection.TOP)
                    generate_face(self.vertices, position, extent, FaceDirection.BOTTOM)

        for z in range(size_z):
            for y in range(size_y):
                row = voxels.get_row(y, z)
                while row:
                    run = get_info(row)
                    row &= create_mask(run.size + run.offset)
                    position = (run.offset, y, z)
                    extent = (run.size, 1.0, 1.0)
                    generate_face(self.vertices, position, extent, FaceDirection.LEFT)
                    generate_face(self.vertices, position, extent, FaceDirection.RIGHT)

        for x in range(size_x):
            for y in range(size_y):
                depth = voxels.get_depth(x, y)
                while depth:
                    run = get_info(depth)
                    depth &= create_mask(run.size + run.offset)
                    position = (x, y, run.offset)
                    extent = (1.0, 1.0, run.size)
                    generate_face(self.vertices, position, extent, FaceDirection.FRONT)
                    generate_face(self.vertices, position, extent, FaceDirection.BACK)

    def fill_noise(self, seed: int | None = None) -> None:
        """Replace the grid with noise terrain; each column is 1 to 31 voxels tall."""
        if seed is None:
            seed = int(time.time())
        self.grid.clear()
        size_x, _, size_z = self.grid.size()
        heights = _height_map(seed, 32, 32, (1.0, 2.0, 1.0, 2.0))
        for z in range(size_z):
            for x in range(size_x):
                n = min(max(heights[z][x], -1.0), 1.0)
                height = math.floor(15.0 * (n + 1.0) + 0.5) + 1
                for y in range(height):
                    self.grid.set_value(x, y, z, 1)

    def generate_noise(self, seed: int | None = None) -> None:
        self.fill_noise(seed)
        self.update()

    def fill(self, size) -> None:
        sx, sy, sz = size
        for z in range(sz):
            for x in range(sx):
                for y in range(sy):
                    self.grid.set_value(x, y, z, 1)

    def fill_plane(self, size) -> None:
        sx, _, sz = size
        for z in range(sz):
            for x in range(sx):
                self.grid.set_value(x, 0, z, 1)

    def fill_sphere(self, size) -> None:
        sx, sy, sz = size
        cx, cy, cz = sx // 2, sy // 2, sz // 2
        radius = int(min(cx, cy, cz) - 1.0)
        for z in range(sz):
            for x in range(sx):
                for y in range(sy):
                    dx, dy, dz = x - cx, y - cy, z - cz
                    if math.isqrt(dx * dx + dy * dy + dz * dz) <= radius:
                        self.grid.set_value(x, y, z, 1)