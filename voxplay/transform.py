"""4x4 affine transforms and a voxel carrying its own transform.

Matrices are plain ``numpy`` arrays indexed ``[row, column]``. Every helper
that takes a matrix right-multiplies it, so ``translate(m, v)`` equals
``m @ T(v)``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np

_X_AXIS = (1.0, 0.0, 0.0)
_Y_AXIS = (0.0, 1.0, 0.0)
_Z_AXIS = (0.0, 0.0, 1.0)


def _vec3(value) -> np.ndarray:
    return np.asarray(value, dtype=float).reshape(3)


def _normalize(value: np.ndarray) -> np.ndarray:
    length = float(np.linalg.norm(value))
    if length == 0.0:
        raise ValueError("cannot normalise a zero-length vector")
    return value / length


def translate(matrix, offset) -> np.ndarray:
    """Return ``matrix`` followed by a translation by ``offset``."""
    step = np.eye(4)
    step[:3, 3] = _vec3(offset)
    return np.asarray(matrix, dtype=float) @ step


def rotate(matrix, angle, axis) -> np.ndarray:
    """Return ``matrix`` followed by a rotation of ``angle`` radians about ``axis``."""
    x, y, z = _normalize(_vec3(axis))
    c, s = math.cos(angle), math.sin(angle)
    cross = np.array([[0.0, -z, y], [z, 0.0, -x], [-y, x, 0.0]])
    unit = np.array([x, y, z])
    step = np.eye(4)
    step[:3, :3] = c * np.eye(3) + s * cross + (1.0 - c) * np.outer(unit, unit)
    return np.asarray(matrix, dtype=float) @ step


def scale(matrix, factors) -> np.ndarray:
    """Return ``matrix`` followed by a per-axis scale."""
    step = np.diag([*_vec3(factors), 1.0])
    return np.asarray(matrix, dtype=float) @ step


def perspective(fovy, aspect, near, far) -> np.ndarray:
    """Right-handed perspective projection mapping depth to [-1, 1]."""
    if aspect == 0:
        raise ValueError("aspect ratio must be non-zero")
    if far == near:
        raise ValueError("near and far planes must differ")
    tan_half = math.tan(fovy / 2.0)
    result = np.zeros((4, 4))
    result[0, 0] = 1.0 / (aspect * tan_half)
    result[1, 1] = 1.0 / tan_half
    result[2, 2] = -(far + near) / (far - near)
    result[2, 3] = -(2.0 * far * near) / (far - near)
    result[3, 2] = -1.0
    return result


def ortho(left, right, bottom, top, near, far) -> np.ndarray:
    """Right-handed orthographic projection mapping the box to [-1, 1]^3."""
    if right == left or top == bottom or far == near:
        raise ValueError("orthographic volume must not be degenerate")
    result = np.eye(4)
    result[0, 0] = 2.0 / (right - left)
    result[1, 1] = 2.0 / (top - bottom)
    result[2, 2] = -2.0 / (far - near)
    result[0, 3] = -(right + left) / (right - left)
    result[1, 3] = -(top + bottom) / (top - bottom)
    result[2, 3] = -(far + near) / (far - near)
    return result


def look_at(eye, center, up) -> np.ndarray:
    """Right-handed view matrix looking from ``eye`` towards ``center``."""
    eye_v = _vec3(eye)
    forward = _normalize(_vec3(center) - eye_v)
    side = _normalize(np.cross(forward, _vec3(up)))
    upward = np.cross(side, forward)
    result = np.eye(4)
    result[0, :3] = side
    result[1, :3] = upward
    result[2, :3] = -forward
    result[0, 3] = -float(side @ eye_v)
    result[1, 3] = -float(upward @ eye_v)
    result[2, 3] = float(forward @ eye_v)
    return result


def _rotate_xyz(matrix, degrees) -> np.ndarray:
    rx, ry, rz = (math.radians(a) for a in _vec3(degrees))
    matrix = rotate(matrix, rx, _X_AXIS)
    matrix = rotate(matrix, ry, _Y_AXIS)
    return rotate(matrix, rz, _Z_AXIS)


@dataclass
class Voxel:
    """A voxel type tag with its model transform."""

    type: int = 0
    identity: np.ndarray = field(default_factory=lambda: np.eye(4))

    def set_position(self, position) -> None:
        self.identity = translate(np.eye(4), position)

    def set_rotation(self, rotation) -> None:
        """Replace the transform with a rotation given in degrees (x, y, z)."""
        self.identity = _rotate_xyz(np.eye(4), rotation)

    def set_scale(self, factors) -> None:
        self.identity = scale(np.eye(4), factors)

    def translate(self, delta) -> None:
        self.identity = translate(self.identity, delta)

    def scale(self, delta) -> None:
        self.identity = scale(self.identity, delta)

    def rotate(self, delta) -> None:
        """Apply a further rotation given in degrees (x, then y, then z)."""
        self.identity = _rotate_xyz(self.identity, delta)