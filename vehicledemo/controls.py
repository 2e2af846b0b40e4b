"""Driver input derived from the keyboard or a game controller."""

from __future__ import annotations

from collections.abc import Collection, Sequence
from dataclasses import dataclass

# Key codes as reported by the windowing layer.
KEY_SPACE = 32
KEY_A = 65
KEY_D = 68
KEY_Q = 81
KEY_S = 83
KEY_W = 87

# Controller layout (PS5 pad).
_L3_LR_AXIS = 0
_L3_UD_AXIS = 1
_L2_TRIGGER_AXIS = 3
_R2_TRIGGER_AXIS = 4
_CIRCLE_BUTTON = 1
_MIN_AXES = 6
_HANDBRAKE_THRESHOLD = 0.51


@dataclass(frozen=True)
class DriverInput:
    """Throttle, steering, brake and handbrake commands for a wheeled vehicle."""

    throttle: float = 0.0
    steering: float = 0.0
    brake: float = 0.0
    handbrake: float = 0.0

    def is_active(self) -> bool:
        """Whether any command is non-zero, so the vehicle body should be woken."""
        return any(
            value != 0.0
            for value in (self.throttle, self.steering, self.brake, self.handbrake)
        )


@dataclass
class KeyBindings:
    """Key codes bound to each driving action."""

    forward: int = KEY_W
    left: int = KEY_A
    right: int = KEY_D
    reverse: int = KEY_S
    brake: int = KEY_Q
    handbrake: int = KEY_SPACE


def keyboard_driver_input(
    pressed: Collection[int], bindings: KeyBindings | None = None
) -> DriverInput:
    """Translate the set of pressed keys into driver input."""
    keys = bindings if bindings is not None else KeyBindings()

    forward = 1.0 if keys.forward in pressed else 0.0
    reverse = -1.0 if keys.reverse in pressed else 0.0
    left = -1.0 if keys.left in pressed else 0.0
    right = 1.0 if keys.right in pressed else 0.0
    brake = 1.0 if keys.brake in pressed else 0.0
    handbrake = 1.0 if keys.handbrake in pressed else 0.0

    return DriverInput(
        throttle=forward + reverse,
        steering=left + right,
        brake=brake,
        handbrake=handbrake,
    )


def _rotate(rotation: Sequence[float], vector: tuple[float, float, float]) -> tuple[float, float, float]:
    """Rotate `vector` by the quaternion `rotation` given as (x, y, z, w)."""
    qx, qy, qz, qw = (float(c) for c in rotation)
    vx, vy, vz = vector
    # t = 2 * (q x v)
    tx = 2.0 * (qy * vz - qz * vy)
    ty = 2.0 * (qz * vx - qx * vz)
    tz = 2.0 * (qx * vy - qy * vx)
    return (
        vx + qw * tx + (qy * tz - qz * ty),
        vy + qw * ty + (qz * tx - qx * tz),
        vz + qw * tz + (qx * ty - qy * tx),
    )


def controller_driver_input(
    axes: Sequence[float],
    buttons: Sequence[float],
    velocity: Sequence[float],
    rotation: Sequence[float],
) -> DriverInput | None:
    """Translate controller axes and buttons into driver input.

    R2 is throttle, L2 is brake, the left stick steers and the circle button
    is the handbrake. While the vehicle moves backwards relative to its
    heading, L2 acts as reverse throttle instead of brake. `velocity` is the
    body's linear velocity and `rotation` its orientation as (x, y, z, w).
    Returns None when the controller reports too few axes or buttons.
    """
    if len(axes) < _MIN_AXES or len(buttons) <= _CIRCLE_BUTTON:
        return None
    if len(rotation) != 4:
        raise ValueError("rotation must be a quaternion (x, y, z, w)")

    forward = _rotate(rotation, (0.0, 0.0, 1.0))
    direction = float(velocity[0]) * forward[0] + float(velocity[2]) * forward[2]
    reversing = direction < 0.0

    throttle = (float(axes[_R2_TRIGGER_AXIS]) + 1.0) / 2.0
    brake = (float(axes[_L2_TRIGGER_AXIS]) + 1.0) / 2.0
    if reversing:
        throttle -= brake
        brake = 0.0

    steering = float(axes[_L3_LR_AXIS])

    handbrake_level = (float(buttons[_CIRCLE_BUTTON]) + 1.0) / 2.0
    handbrake = 1.0 if handbrake_level > _HANDBRAKE_THRESHOLD else 0.0

    return DriverInput(throttle=throttle, steering=steering, brake=brake, handbrake=handbrake)