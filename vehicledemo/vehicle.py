"""Settings for the demo's vehicle and floor."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field

import numpy as np

from vehicledemo.geometry import (
    Mesh,
    create_box_mesh,
    create_cylinder_mesh,
    mesh_bounding_box_size,
    rotate_mesh,
)

_log = logging.getLogger(__name__)

Vec3 = tuple[float, float, float]
Quat = tuple[float, float, float, float]

SHADER = "noTextureLightShadow"
BODY_POSITION: Vec3 = (0.0, 30.0, 0.0)
WHEEL_RADIUS = 0.689 / 2.0
WHEEL_WIDTH = 0.285
WHEEL_SEGMENTS = 16
WHEEL_AXIS: Vec3 = (1.0, 0.0, 0.0)
SUSPENSION_MIN_LENGTH = 0.3
SUSPENSION_MAX_LENGTH = 0.5
MAX_STEER_ANGLE = 0.52
FOUR_WHEEL_DRIVE = True
LIMITED_SLIP_RATIO = 1.4
ANTI_ROLL_BAR = True
WHEEL_OFFSETS: tuple[Vec3, ...] = (
    (0.92, 0.667, 1.24),
    (-0.92, 0.667, 1.24),
    (0.92, 0.667, -1.21),
    (-0.92, 0.667, -1.21),
)

FLOOR_POSITION: Vec3 = (0.0, 0.0, 0.0)
FLOOR_ROTATION: Quat = (1.0, 0.0, 0.0, 0.0)
FLOOR_SIZE: Vec3 = (20.0, 1.0, 20.0)


@dataclass
class WheelSettings:
    """Placement and suspension of one wheel.

    A `max_hand_brake_torque` of None leaves the physics engine's default.
    """

    position: Vec3
    radius: float
    width: float
    suspension_min_length: float
    suspension_max_length: float
    max_steer_angle: float
    max_hand_brake_torque: float | None = None


@dataclass
class DifferentialSettings:
    """A differential between two wheels; None keeps the engine's default ratio."""

    left_wheel: int
    right_wheel: int
    limited_slip_ratio: float
    engine_torque_ratio: float | None = None


@dataclass
class AntiRollBar:
    """An anti-roll bar joining two wheels."""

    left_wheel: int
    right_wheel: int


@dataclass(eq=False)
class VehicleSettings:
    """Everything needed to build the wheeled vehicle."""

    initial_position: Vec3
    body_mesh: Mesh
    body_size: Vec3
    wheel_mesh: Mesh
    offset_center_of_mass: Vec3
    wheels: list[WheelSettings] = field(default_factory=list)
    differentials: list[DifferentialSettings] = field(default_factory=list)
    anti_roll_bars: list[AntiRollBar] = field(default_factory=list)
    shader: str = SHADER
    body_material: str = "car_body"
    wheel_material: str = "car_wheel"


@dataclass(eq=False)
class FloorSettings:
    """A static box used as the ground."""

    position: Vec3
    rotation: Quat
    size: Vec3
    mesh: Mesh
    shader: str = SHADER
    material: str = "floor"
    model: str = "floor"


def build_vehicle_settings(body_mesh: Mesh) -> VehicleSettings:
    """Lay out the vehicle around a body mesh exported facing the wrong way."""
    oriented = rotate_mesh(body_mesh, (0.0, 1.0, 0.0), math.radians(90.0))
    bounds = tuple(float(v) for v in np.asarray(mesh_bounding_box_size(oriented)))
    _log.info("Vehicle body bounding box size: %.2f x %.2f x %.2f", *bounds)

    half_height = bounds[1] / 2.0

    wheels = []
    for index, offset in enumerate(WHEEL_OFFSETS):
        front = index < 2
        wheels.append(
            WheelSettings(
                position=offset,
                radius=WHEEL_RADIUS,
                width=WHEEL_WIDTH,
                suspension_min_length=SUSPENSION_MIN_LENGTH,
                suspension_max_length=SUSPENSION_MAX_LENGTH,
                max_steer_angle=MAX_STEER_ANGLE if front else 0.0,
                max_hand_brake_torque=0.0 if front else None,
            )
        )

    differentials = [
        DifferentialSettings(
            left_wheel=0,
            right_wheel=1,
            limited_slip_ratio=LIMITED_SLIP_RATIO,
            engine_torque_ratio=0.5 if FOUR_WHEEL_DRIVE else None,
        )
    ]
    if FOUR_WHEEL_DRIVE:
        differentials.append(
            DifferentialSettings(
                left_wheel=2,
                right_wheel=3,
                limited_slip_ratio=LIMITED_SLIP_RATIO,
                engine_torque_ratio=0.5,
            )
        )

    anti_roll_bars = [AntiRollBar(0, 1), AntiRollBar(2, 3)] if ANTI_ROLL_BAR else []

    return VehicleSettings(
        initial_position=BODY_POSITION,
        body_mesh=oriented,
        body_size=bounds,
        wheel_mesh=create_cylinder_mesh(
            (WHEEL_RADIUS, WHEEL_WIDTH, WHEEL_RADIUS), WHEEL_SEGMENTS, WHEEL_AXIS
        ),
        offset_center_of_mass=(0.0, -half_height, 0.0),
        wheels=wheels,
        differentials=differentials,
        anti_roll_bars=anti_roll_bars,
    )


def build_floor_settings() -> FloorSettings:
    """The ground box of the demo scene."""
    return FloorSettings(
        position=FLOOR_POSITION,
        rotation=FLOOR_ROTATION,
        size=FLOOR_SIZE,
        mesh=create_box_mesh(FLOOR_SIZE),
    )