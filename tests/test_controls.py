import pytest

from vehicledemo.controls import (
    DriverInput,
    KeyBindings,
    controller_driver_input,
    keyboard_driver_input,
)

IDENTITY = (0.0, 0.0, 0.0, 1.0)
YAW_HALF_TURN = (0.0, 1.0, 0.0, 0.0)
RELEASED_AXES = [0.0, 0.0, 0.0, -1.0, -1.0, 0.0]


def axes_with(**overrides):
    axes = list(RELEASED_AXES)
    for index, value in overrides.items():
        axes[int(index[1:])] = value
    return axes


def test_no_keys_gives_idle_input():
    result = keyboard_driver_input(set())
    assert result == DriverInput()
    assert not result.is_active()


def test_forward_key_gives_full_throttle():
    keys = KeyBindings()
    result = keyboard_driver_input({keys.forward})
    assert result.throttle == 1.0
    assert result.is_active()


def test_forward_and_reverse_cancel():
    keys = KeyBindings()
    result = keyboard_driver_input({keys.forward, keys.reverse})
    assert result.throttle == 0.0


def test_reverse_key_is_negative_throttle():
    keys = KeyBindings()
    assert keyboard_driver_input({keys.reverse}).throttle == -1.0


def test_steering_directions():
    keys = KeyBindings()
    assert keyboard_driver_input({keys.left}).steering == -1.0
    assert keyboard_driver_input({keys.right}).steering == 1.0
    assert keyboard_driver_input({keys.left, keys.right}).steering == 0.0


def test_brake_and_handbrake_keys():
    keys = KeyBindings()
    result = keyboard_driver_input({keys.brake, keys.handbrake})
    assert result.brake == 1.0
    assert result.handbrake == 1.0
    assert result.throttle == 0.0


def test_custom_bindings_replace_defaults():
    defaults = KeyBindings()
    custom = KeyBindings(forward=defaults.brake)
    result = keyboard_driver_input({defaults.brake}, custom)
    assert result.throttle == 1.0
    assert result.brake == 1.0
    assert keyboard_driver_input({defaults.forward}, custom).throttle == 0.0


def test_controller_with_too_few_axes_is_ignored():
    assert controller_driver_input([0.0] * 5, [0, 0], (0, 0, 0), IDENTITY) is None


def test_controller_with_too_few_buttons_is_ignored():
    assert controller_driver_input(RELEASED_AXES, [], (0, 0, 0), IDENTITY) is None


def test_controller_rejects_bad_rotation():
    with pytest.raises(ValueError):
        controller_driver_input(RELEASED_AXES, [0, 0], (0, 0, 0), (0, 0, 1))


def test_released_controller_is_idle():
    result = controller_driver_input(RELEASED_AXES, [0, 0], (0, 0, 0), IDENTITY)
    assert result == DriverInput()


def test_r2_is_throttle():
    result = controller_driver_input(axes_with(a4=1.0), [0, 0], (0, 0, 5), IDENTITY)
    assert result.throttle == 1.0
    assert result.brake == 0.0


def test_l2_brakes_while_moving_forward():
    result = controller_driver_input(axes_with(a3=1.0), [0, 0], (0, 0, 5), IDENTITY)
    assert result.brake == 1.0
    assert result.throttle == 0.0


def test_l2_reverses_while_moving_backward():
    result = controller_driver_input(axes_with(a3=1.0), [0, 0], (0, 0, -5), IDENTITY)
    assert result.throttle == -1.0
    assert result.brake == 0.0


def test_heading_decides_direction():
    backward_in_world = (0.0, 0.0, -5.0)
    turned = controller_driver_input(axes_with(a3=1.0), [0, 0], backward_in_world, YAW_HALF_TURN)
    straight = controller_driver_input(axes_with(a3=1.0), [0, 0], backward_in_world, IDENTITY)
    assert turned.brake == 1.0
    assert straight.brake == 0.0


def test_vertical_velocity_is_ignored():
    result = controller_driver_input(axes_with(a3=1.0), [0, 0], (0, -9, 0), IDENTITY)
    assert result.brake == 1.0


def test_left_stick_steers():
    result = controller_driver_input(axes_with(a0=0.5), [0, 0], (0, 0, 0), IDENTITY)
    assert result.steering == 0.5
    assert result.is_active()


def test_circle_button_is_handbrake():
    pressed = controller_driver_input(RELEASED_AXES, [0, 1], (0, 0, 0), IDENTITY)
    released = controller_driver_input(RELEASED_AXES, [1, 0], (0, 0, 0), IDENTITY)
    assert pressed.handbrake == 1.0
    assert released.handbrake == 0.0