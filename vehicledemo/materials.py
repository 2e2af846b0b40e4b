"""Phong materials used by the demo scene."""

from __future__ import annotations

from dataclasses import dataclass

Color = tuple[float, float, float]


@dataclass(frozen=True)
class Material:
    """Ambient, diffuse and specular colours with a shininess exponent."""

    ka: Color
    kd: Color
    ks: Color
    shininess: float


_SPECULAR: Color = (0.5, 0.5, 0.5)
_SHININESS = 64.0


def load_materials() -> dict[str, Material]:
    """Return the scene's materials keyed by name."""
    return {
        "floor": Material((0.6, 0.6, 0.6), (0.8, 0.8, 0.8), _SPECULAR, _SHININESS),
        "car_body": Material((0.8, 0.0, 0.0), (0.8, 0.0, 0.0), _SPECULAR, _SHININESS),
        "car_wheel": Material((0.0, 0.0, 0.8), (0.0, 0.0, 0.8), _SPECULAR, _SHININESS),
    }