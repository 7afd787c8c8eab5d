"""Orthographic and perspective cameras producing view and projection matrices."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod

import numpy as np

from voxplay.transform import look_at, ortho, perspective, rotate, translate

_WORLD_UP = np.array([0.0, 1.0, 0.0])
_X_AXIS = (1.0, 0.0, 0.0)
_Y_AXIS = (0.0, 1.0, 0.0)
_Z_AXIS = (0.0, 0.0, 1.0)


def to_degree(degree: float) -> float:
    """Wrap an angle into (-360, 360) while keeping its sign."""
    magnitude = math.fmod(abs(degree), 360.0)
    return magnitude * (-1.0 if degree < 0 else 1.0)


def _unit(vector: np.ndarray) -> np.ndarray:
    length = float(np.linalg.norm(vector))
    if length == 0.0:
        raise ValueError("camera basis degenerated to a zero-length vector")
    return vector / length


def _rotate_degrees(matrix: np.ndarray, degrees) -> np.ndarray:
    rx, ry, rz = (math.radians(a) for a in degrees)
    matrix = rotate(matrix, rx, _X_AXIS)
    matrix = rotate(matrix, ry, _Y_AXIS)
    return rotate(matrix, rz, _Z_AXIS)


class Camera(ABC):
    """Interface shared by all cameras."""

    @abstractmethod
    def update(self) -> None:
        """Recompute the view and projection matrices."""

    @abstractmethod
    def set_viewport_size(self, width, height) -> None: ...

    @abstractmethod
    def set_position(self, x, y, z) -> None: ...

    @abstractmethod
    def set_rotation(self, pitch, yaw, roll) -> None: ...

    @abstractmethod
    def translate(self, dx, dy, dz) -> None: ...

    @abstractmethod
    def rotate(self, d_pitch, d_yaw, d_roll) -> None: ...

    @abstractmethod
    def view_projection_matrix(self) -> np.ndarray: ...


class OrthographicCamera(Camera):
    """A camera with a parallel projection sized by the viewport and offsets."""

    def __init__(self) -> None:
        self.width = 1.0
        self.height = 1.0
        self.offset_x = 1.0
        self.offset_y = 1.0
        self.rotation = np.zeros(3)
        self.position = np.zeros(3)
        self._view = np.eye(4)
        self._projection = np.zeros((4, 4))

    @property
    def view(self) -> np.ndarray:
        return self._view.copy()

    @property
    def projection(self) -> np.ndarray:
        return self._projection.copy()

    def update(self) -> None:
        w = self.width * self.offset_x
        h = self.height * self.offset_y
        self._projection = ortho(-w, w, -h, h, -1.0, 1.0)
        view = translate(np.eye(4), -np.asarray(self.position, dtype=float))
        self._view = _rotate_degrees(view, self.rotation)

    def set_viewport_size(self, width, height) -> None:
        self.width = float(width)
        self.height = float(height)

    def set_offset(self, offset_x, offset_y) -> None:
        self.offset_x = float(offset_x)
        self.offset_y = float(offset_y)

    def set_position(self, x, y, z) -> None:
        """Place the camera so that (x, y) is measured from the viewport's offset corner."""
        self.position = np.array(
            [x - self.width * self.offset_x, y - self.height * self.offset_y, z],
            dtype=float,
        )

    def set_rotation(self, pitch, yaw, roll) -> None:
        self.rotation = np.array([pitch, yaw, roll], dtype=float)

    def translate(self, dx, dy, dz) -> None:
        self.position = self.position + np.array([dx, dy, dz], dtype=float)

    def rotate(self, d_pitch, d_yaw, d_roll) -> None:
        self.rotation = self.rotation + np.array([d_pitch, d_yaw, d_roll], dtype=float)

    def view_projection_matrix(self) -> np.ndarray:
        return self._projection @ self._view


class PerspectiveCamera(Camera):
    """A free-flying camera with pitch, yaw and roll given in degrees."""

    def __init__(self) -> None:
        self.width = 1.0
        self.height = 1.0
        self.rotation = np.zeros(3)
        self.position = np.zeros(3)
        self.fov = 45.0
        self.far_plane = 100.0
        self.near_plane = 0.1
        self._view = np.eye(4)
        self._projection = np.zeros((4, 4))
        self._front = np.zeros(3)
        self._right = np.zeros(3)
        self._up = np.zeros(3)
        self._roll = np.zeros((4, 4))

    @property
    def view(self) -> np.ndarray:
        return self._view.copy()

    @property
    def projection(self) -> np.ndarray:
        return self._projection.copy()

    @property
    def front(self) -> np.ndarray:
        return self._front.copy()

    @property
    def right(self) -> np.ndarray:
        return self._right.copy()

    @property
    def up(self) -> np.ndarray:
        return self._up.copy()

    def update(self) -> None:
        if self.height == 0:
            raise ValueError("viewport height must be non-zero")
        pitch, yaw, roll = (math.radians(a) for a in self.rotation)
        front = _unit(
            np.array(
                [
                    math.sin(yaw) * math.cos(pitch),
                    math.sin(pitch),
                    -math.cos(yaw) * math.cos(pitch),
                ]
            )
        )
        right = _unit(np.cross(front, _WORLD_UP))
        up = _unit(np.cross(right, front))

        self._roll = rotate(np.eye(4), roll, front)
        spin = self._roll[:3, :3]
        self._front = front
        self._right = _unit(spin @ right)
        self._up = _unit(spin @ up)

        position = np.asarray(self.position, dtype=float)
        self._view = look_at(position, position + front, self._up)
        self._projection = perspective(
            math.radians(self.fov),
            self.width / self.height,
            self.near_plane,
            self.far_plane,
        )

    def set_viewport_size(self, width, height) -> None:
        self.width = float(width)
        self.height = float(height)

    def set_position(self, x, y, z) -> None:
        self.position = np.array([x, y, z], dtype=float)

    def set_rotation(self, pitch, yaw, roll) -> None:
        self.rotation = np.array(
            [to_degree(pitch), to_degree(yaw), to_degree(roll)], dtype=float
        )

    def set_projection(self, fov, near_plane, far_plane) -> None:
        self.fov = float(fov)
        self.near_plane = float(near_plane)
        self.far_plane = float(far_plane)

    def translate(self, dx, dy, dz) -> None:
        """Move along the camera's own right, up and front axes from the last update."""
        self.position = (
            self.position + dx * self._right + dy * self._up + dz * self._front
        )

    def rotate(self, d_pitch, d_yaw, d_roll) -> None:
        pitch, yaw, roll = self.rotation
        self.rotation = np.array(
            [
                to_degree(pitch + d_pitch),
                to_degree(yaw + d_yaw),
                to_degree(roll + d_roll),
            ],
            dtype=float,
        )

    def view_projection_matrix(self) -> np.ndarray:
        return self._projection @ self._view