import pytest

from gamebreaker.input import JoyButton, JoystickState, KeyboardState, ord_of


def test_key_press_hold_release_cycle():
    kb = KeyboardState()
    kb.update()
    kb.set_key("space", True)
    assert kb.pressed("space")
    assert not kb.holding("space")
    assert not kb.released("space")

    kb.update()
    assert kb.holding("space")
    assert not kb.pressed("space")

    kb.update()
    kb.set_key("space", False)
    assert kb.released("space")
    assert not kb.holding("space")

    kb.update()
    assert not kb.released("space")


def test_unknown_key_is_idle():
    kb = KeyboardState()
    assert not kb.pressed(13)
    assert not kb.released(13)
    assert not kb.holding(13)


def test_keys_are_independent():
    kb = KeyboardState()
    kb.set_key("a", True)
    assert kb.pressed("a")
    assert not kb.pressed("b")


def test_joystick_initial_state():
    joy = JoystickState()
    assert joy.count() == 0
    assert joy.working() == -1


def test_joystick_connect():
    joy = JoystickState()
    first = joy.connect()
    second = joy.connect()
    assert (first, second) == (0, 1)
    assert joy.count() == 2
    assert joy.working() == second


def test_joystick_connect_limit():
    joy = JoystickState()
    for _ in range(32):
        joy.connect()
    with pytest.raises(RuntimeError):
        joy.connect()


def test_joystick_button_cycle():
    joy = JoystickState()
    joy.set_button(0, JoyButton.CROSS, True)
    assert joy.pressed(0, JoyButton.CROSS)
    joy.update()
    assert joy.holding(0, JoyButton.CROSS)
    joy.set_button(0, JoyButton.CROSS, False)
    assert joy.released(0, JoyButton.CROSS)
    assert not joy.pressed(1, JoyButton.CROSS)


def test_joystick_out_of_range():
    joy = JoystickState()
    with pytest.raises(IndexError):
        joy.pressed(32, JoyButton.CROSS)
    with pytest.raises(IndexError):
        joy.set_button(0, JoyButton.MAX, True)


def test_joy_button_range_bounds():
    assert JoyButton.CROSS == 0
    assert JoyButton.TOUCHPAD + 1 == JoyButton.MAX
    joy = JoystickState()
    joy.set_button(31, JoyButton.TOUCHPAD, True)
    assert joy.pressed(31, JoyButton.TOUCHPAD)
    assert not joy.pressed(31, JoyButton.CROSS)


def test_ord_of_uses_first_character():
    assert ord_of("Abc") == ord_of("A")
    assert chr(ord_of("Z")) == "Z"


def test_ord_of_empty():
    assert ord_of("") == 0