"""Free-fly camera control driven by keyboard, mouse and scroll wheel."""

from __future__ import annotations

import numpy as np

from voxplay.camera import Camera
from voxplay.input import Input, KeyboardKey, MouseButton

_MOUSE_SMOOTHING = 0.1
_SCROLL_BOOST = 50.0
_SCROLL_BOOST_PRECISE = 10.0


class CameraController:
    """Moves and turns a camera from the current input state.

    W/S move forward and back, A/D sideways, E/Q up and down. The scroll wheel
    moves forward (or sideways while left shift is held), slower while left
    control is held. Dragging with the left mouse button turns the camera.
    """

    def __init__(self, speed: float = 15.0) -> None:
        self.speed = float(speed)
        self.enabled = True
        self.mouse = np.zeros(2)

    def update(self, camera: Camera, input_state: Input, delta: float) -> np.ndarray:
        """Apply one frame of movement and return the (x, y, z) step given to the camera."""
        if not self.enabled:
            return np.zeros(3)

        step = self.speed * delta
        translation = np.zeros(3)

        scroll_x, scroll_y = input_state.scroll
        if scroll_y:
            boost = (
                _SCROLL_BOOST_PRECISE
                if input_state.key_press(KeyboardKey.LEFT_CONTROL)
                else _SCROLL_BOOST
            )
            direction = step * boost * scroll_y
            if input_state.key_press(KeyboardKey.LEFT_SHIFT):
                translation[0] += direction
            else:
                translation[2] += direction

        if scroll_x:
            translation[0] += step * scroll_x * _SCROLL_BOOST

        moves = (
            (KeyboardKey.W, 2, 1.0),
            (KeyboardKey.S, 2, -1.0),
            (KeyboardKey.A, 0, -1.0),
            (KeyboardKey.D, 0, 1.0),
            (KeyboardKey.E, 1, 1.0),
            (KeyboardKey.Q, 1, -1.0),
        )
        for key, axis, sign in moves:
            if input_state.key_press(key):
                translation[axis] += sign * step

        position = np.asarray(input_state.mouse_position, dtype=float)
        if input_state.key_press(MouseButton.LEFT):
            dx, dy = (position - self.mouse) * _MOUSE_SMOOTHING
            camera.rotate(-dy, dx, 0.0)

        camera.translate(*translation)
        self.mouse = position
        return translation