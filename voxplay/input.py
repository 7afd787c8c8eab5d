"""Keyboard and mouse codes and a record of the current input state."""

from __future__ import annotations

from enum import IntEnum


class KeyAction(IntEnum):
    RELEASE = 0
    PRESS = 1
    REPEAT = 2


class MouseButton(IntEnum):
    UNKNOWN = -1
    LEFT = 0
    RIGHT = 1
    MIDDLE = 2
    BUTTON_4 = 3
    BUTTON_5 = 4
    BUTTON_6 = 5
    BUTTON_7 = 6
    BUTTON_8 = 7


class KeyboardKey(IntEnum):
    UNKNOWN = -1

    A = 65
    B = 66
    C = 67
    D = 68
    E = 69
    F = 70
    G = 71
    H = 72
    I = 73  # noqa: E741
    J = 74
    K = 75
    L = 76
    M = 77
    N = 78
    O = 79  # noqa: E741
    P = 80
    Q = 81
    R = 82
    S = 83
    T = 84
    U = 85
    V = 86
    W = 87
    X = 88
    Y = 89
    Z = 90

    NUM_0 = 48
    NUM_1 = 49
    NUM_2 = 50
    NUM_3 = 51
    NUM_4 = 52
    NUM_5 = 53
    NUM_6 = 54
    NUM_7 = 55
    NUM_8 = 56
    NUM_9 = 57

    F1 = 290
    F2 = 291
    F3 = 292
    F4 = 293
    F5 = 294
    F6 = 295
    F7 = 296
    F8 = 297
    F9 = 298
    F10 = 299
    F11 = 300
    F12 = 301

    ESCAPE = 256
    ENTER = 257
    TAB = 258
    BACKSPACE = 259
    INSERT = 260
    DELETE = 261
    RIGHT = 262
    LEFT = 263
    DOWN = 264
    UP = 265
    PAGE_UP = 266
    PAGE_DOWN = 267
    HOME = 268
    END = 269

    LEFT_SHIFT = 340
    LEFT_CONTROL = 341
    LEFT_ALT = 342
    LEFT_SUPER = 343
    RIGHT_SHIFT = 344
    RIGHT_CONTROL = 345
    RIGHT_ALT = 346
    RIGHT_SUPER = 347

    CAPS_LOCK = 280
    SCROLL_LOCK = 281
    NUM_LOCK = 282
    PRINT_SCREEN = 283
    PAUSE = 284

    WORLD_1 = 161
    WORLD_2 = 162

    KP_0 = 320
    KP_1 = 321
    KP_2 = 322
    KP_3 = 323
    KP_4 = 324
    KP_5 = 325
    KP_6 = 326
    KP_7 = 327
    KP_8 = 328
    KP_9 = 329
    KP_DECIMAL = 330
    KP_DIVIDE = 331
    KP_MULTIPLY = 332
    KP_SUBTRACT = 333
    KP_ADD = 334
    KP_ENTER = 335
    KP_EQUAL = 336


class Input:
    """Last known state of keys, mouse buttons, cursor and scroll wheel.

    Keys that were never reported are released.
    """

    def __init__(self) -> None:
        self._keys: dict[KeyboardKey, KeyAction] = {}
        self._buttons: dict[MouseButton, KeyAction] = {}
        self._scroll = (0.0, 0.0)
        self.mouse_position: tuple[float, float] = (0.0, 0.0)

    @staticmethod
    def _table_key(key):
        if isinstance(key, KeyboardKey):
            return "keys"
        if isinstance(key, MouseButton):
            return "buttons"
        raise TypeError(f"expected a KeyboardKey or MouseButton, got {key!r}")

    def _state(self, key) -> KeyAction:
        table = self._keys if self._table_key(key) == "keys" else self._buttons
        return table.get(key, KeyAction.RELEASE)

    def set_key_state(self, key, action) -> None:
        """Record the latest action reported for a key or mouse button."""
        table = self._keys if self._table_key(key) == "keys" else self._buttons
        table[key] = KeyAction(action)

    @property
    def scroll(self) -> tuple[float, float]:
        return self._scroll

    def scroll_callback(self, x, y) -> None:
        self._scroll = (float(x), float(y))

    def reset_scroll(self) -> None:
        self._scroll = (0.0, 0.0)

    def key_press(self, key) -> bool:
        return self._state(key) is KeyAction.PRESS

    def key_release(self, key) -> bool:
        return self._state(key) is KeyAction.RELEASE