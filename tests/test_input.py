import pytest

from voxplay.input import Input, KeyAction, KeyboardKey, MouseButton


def test_codes_match_the_key_table():
    assert KeyboardKey(65) is KeyboardKey.A
    assert KeyboardKey(256) is KeyboardKey.ESCAPE
    assert MouseButton(0) is MouseButton.LEFT
    assert KeyAction(1) is KeyAction.PRESS
    state = Input()
    state.set_key_state(KeyboardKey(65), KeyAction(1))
    assert state.key_press(KeyboardKey.A)


def test_untouched_key_is_released():
    state = Input()
    assert state.key_release(KeyboardKey.W)
    assert not state.key_press(KeyboardKey.W)


def test_press_then_release():
    state = Input()
    state.set_key_state(KeyboardKey.W, KeyAction.PRESS)
    assert state.key_press(KeyboardKey.W)
    assert not state.key_release(KeyboardKey.W)
    state.set_key_state(KeyboardKey.W, KeyAction.RELEASE)
    assert state.key_release(KeyboardKey.W)


def test_repeat_is_neither_press_nor_release():
    state = Input()
    state.set_key_state(KeyboardKey.S, KeyAction.REPEAT)
    assert not state.key_press(KeyboardKey.S)
    assert not state.key_release(KeyboardKey.S)


def test_mouse_and_keyboard_are_separate():
    state = Input()
    state.set_key_state(MouseButton.UNKNOWN, KeyAction.PRESS)
    assert state.key_press(MouseButton.UNKNOWN)
    assert not state.key_press(KeyboardKey.UNKNOWN)


def test_action_accepts_raw_code():
    state = Input()
    state.set_key_state(MouseButton.RIGHT, 1)
    assert state.key_press(MouseButton.RIGHT)


def test_invalid_action_rejected():
    state = Input()
    with pytest.raises(ValueError):
        state.set_key_state(KeyboardKey.A, 7)


def test_non_key_rejected():
    state = Input()
    with pytest.raises(TypeError):
        state.key_press("w")
    with pytest.raises(TypeError):
        state.set_key_state(65, KeyAction.PRESS)


def test_scroll_callback_and_reset():
    state = Input()
    state.scroll_callback(1.5, -2)
    assert state.scroll == (1.5, -2.0)
    state.reset_scroll()
    assert state.scroll == (0.0, 0.0)


def test_mouse_position_is_stored():
    state = Input()
    state.mouse_position = (10.0, 20.0)
    assert state.mouse_position == (10.0, 20.0)