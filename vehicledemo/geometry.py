"""Triangle meshes for boxes and cylinders, plus small mesh utilities."""

from __future__ import annotations

import dataclasses
import math
from collections.abc import Sequence
from dataclasses import dataclass, field

import numpy as np

_EPSILON = 1e-6
_Y_AXIS = np.array([0.0, 1.0, 0.0])


def _empty(width: int, dtype=np.float32) -> np.ndarray:
    return np.zeros((0, width), dtype=dtype)


@dataclass(eq=False)
class Mesh:
    """Vertex positions, normals, texture coordinates and triangle indices."""

    vertices: np.ndarray = field(default_factory=lambda: _empty(3))
    normals: np.ndarray = field(default_factory=lambda: _empty(3))
    tex_coords: np.ndarray = field(default_factory=lambda: _empty(2))
    indices: np.ndarray = field(default_factory=lambda: np.zeros(0, dtype=np.uint32))

    @property
    def triangles(self) -> np.ndarray:
        """Indices grouped as rows of three."""
        return self.indices.reshape(-1, 3)


def _as_vec3(value: Sequence[float], name: str) -> np.ndarray:
    vec = np.asarray(value, dtype=np.float64)
    if vec.shape != (3,):
        raise ValueError(f"{name} must have three components, got shape {vec.shape}")
    return vec


def _axis_rotation(axis: np.ndarray, angle: float) -> np.ndarray:
    """Right-handed rotation matrix of `angle` radians about `axis`."""
    norm = np.linalg.norm(axis)
    if norm == 0.0:
        raise ValueError("rotation axis must not be the zero vector")
    x, y, z = axis / norm
    cos_a, sin_a = math.cos(angle), math.sin(angle)
    cross = np.array([[0.0, -z, y], [z, 0.0, -x], [-y, x, 0.0]])
    outer = np.outer((x, y, z), (x, y, z))
    return cos_a * np.eye(3) + sin_a * cross + (1.0 - cos_a) * outer


def _align_y_with(up: np.ndarray) -> np.ndarray:
    """Rotation that carries the Y axis onto the unit vector `up`."""
    if np.linalg.norm(up - _Y_AXIS) <= _EPSILON:
        return np.eye(3)
    axis = np.cross(_Y_AXIS, up)
    if np.linalg.norm(axis) > _EPSILON:
        angle = math.acos(float(np.clip(np.dot(_Y_AXIS, up), -1.0, 1.0)))
        return _axis_rotation(axis, angle)
    if np.dot(_Y_AXIS, up) < 0.0:
        return np.diag([-1.0, -1.0, 1.0])
    return np.eye(3)


def _normalize_rows(rows: np.ndarray) -> np.ndarray:
    return rows / np.linalg.norm(rows, axis=1, keepdims=True)


def create_box_mesh(size: Sequence[float]) -> Mesh:
    """Build a box centred on the origin whose half-extents are `size`."""
    w, h, d = _as_vec3(size, "size")

    front_bottom_left = (-w, -h, -d)
    front_bottom_right = (w, -h, -d)
    front_top_left = (-w, h, -d)
    front_top_right = (w, h, -d)
    back_bottom_left = (-w, -h, d)
    back_bottom_right = (w, -h, d)
    back_top_left = (-w, h, d)
    back_top_right = (w, h, d)

    faces = [
        ((front_bottom_left, front_bottom_right, front_top_left, front_top_right), (0, 0, -1)),
        ((back_bottom_left, back_bottom_right, back_top_left, back_top_right), (0, 0, 1)),
        ((front_top_left, front_top_right, back_top_left, back_top_right), (0, 1, 0)),
        ((front_bottom_left, front_bottom_right, back_bottom_left, back_bottom_right), (0, -1, 0)),
        ((front_bottom_left, front_top_left, back_bottom_left, back_top_left), (-1, 0, 0)),
        ((front_bottom_right, front_top_right, back_bottom_right, back_top_right), (1, 0, 0)),
    ]

    vertices = [corner for corners, _ in faces for corner in corners]
    normals = [normal for _, normal in faces for _ in range(4)]
    indices = [
        2, 1, 0, 2, 3, 1,
        4, 5, 6, 5, 7, 6,
        10, 9, 8, 10, 11, 9,
        12, 13, 14, 13, 15, 14,
        18, 17, 16, 18, 19, 17,
        20, 21, 22, 21, 23, 22,
    ]

    return Mesh(
        vertices=np.array(vertices, dtype=np.float32),
        normals=np.array(normals, dtype=np.float32),
        indices=np.array(indices, dtype=np.uint32),
    )


def create_cylinder_mesh(
    size: Sequence[float],
    segments: int = 16,
    up: Sequence[float] = (0.0, 1.0, 0.0),
) -> Mesh:
    """Build a capped cylinder of radius size[0] and height size[1] along `up`."""
    if segments < 0:
        raise ValueError("segments must not be negative")
    size_vec = _as_vec3(size, "size")
    up_vec = _as_vec3(up, "up")
    up_norm = np.linalg.norm(up_vec)
    if up_norm == 0.0:
        raise ValueError("up must not be the zero vector")
    up_unit = up_vec / up_norm

    radius = float(size_vec[0])
    half_height = float(size_vec[1]) * 0.5
    rotation = _align_y_with(up_unit)

    steps = np.arange(segments)
    angles = 2.0 * math.pi * steps / segments if segments else np.zeros(0)
    cos_a, sin_a = np.cos(angles), np.sin(angles)
    fraction = steps / segments if segments else np.zeros(0)

    def ring(y: float) -> np.ndarray:
        return np.column_stack((radius * cos_a, np.full(segments, y), radius * sin_a))

    top_ring = ring(half_height)
    bottom_ring = ring(-half_height)

    side_vertices = np.stack((top_ring, bottom_ring), axis=1).reshape(-1, 3)
    side_local_normals = np.column_stack((cos_a, np.zeros(segments), sin_a))
    side_normals = np.repeat(side_local_normals, 2, axis=0)
    side_tex = np.stack(
        (np.column_stack((fraction, np.ones(segments))),
         np.column_stack((fraction, np.zeros(segments)))),
        axis=1,
    ).reshape(-1, 2)

    top_normal = np.array([0.0, 1.0, 0.0])
    bottom_normal = np.array([0.0, -1.0, 0.0])

    top_vertices = np.vstack(([0.0, half_height, 0.0], top_ring))
    top_tex = np.vstack(([0.5, 0.5], np.column_stack((0.5 + 0.5 * cos_a, 0.5 + 0.5 * sin_a))))
    bottom_vertices = np.vstack(([0.0, -half_height, 0.0], bottom_ring))
    bottom_tex = np.vstack(([0.5, 0.5], np.column_stack((0.5 + 0.5 * cos_a, 0.5 - 0.5 * sin_a))))

    local_vertices = np.vstack((side_vertices, top_vertices, bottom_vertices))
    vertices = local_vertices @ rotation.T

    rotated_side_normals = (
        _normalize_rows(side_normals @ rotation.T) if segments else _empty(3, np.float64)
    )
    cap_top = rotation @ top_normal
    cap_bottom = rotation @ bottom_normal
    normals = np.vstack((
        rotated_side_normals,
        np.tile(cap_top / np.linalg.norm(cap_top), (segments + 1, 1)),
        np.tile(cap_bottom / np.linalg.norm(cap_bottom), (segments + 1, 1)),
    ))

    tex_coords = np.vstack((side_tex, top_tex, bottom_tex))

    following = (steps + 1) % segments if segments else steps
    side_indices = np.column_stack((
        2 * steps, 2 * following, 2 * steps + 1,
        2 * following, 2 * following + 1, 2 * steps + 1,
    ))
    top_start = 2 * segments
    bottom_start = top_start + segments + 1
    top_indices = np.column_stack((
        np.full(segments, top_start), top_start + 1 + following, top_start + 1 + steps,
    ))
    bottom_indices = np.column_stack((
        np.full(segments, bottom_start), bottom_start + 1 + steps, bottom_start + 1 + following,
    ))
    indices = np.concatenate(
        (side_indices.ravel(), top_indices.ravel(), bottom_indices.ravel())
    )

    return Mesh(
        vertices=vertices.astype(np.float32),
        normals=normals.astype(np.float32),
        tex_coords=tex_coords.astype(np.float32),
        indices=indices.astype(np.uint32),
    )


def mesh_bounding_box_size(mesh: Mesh) -> np.ndarray:
    """Extent of the axis-aligned bounding box of the mesh's vertices."""
    if len(mesh.vertices) == 0:
        return np.zeros(3, dtype=np.float32)
    return mesh.vertices.max(axis=0) - mesh.vertices.min(axis=0)


def rotate_mesh(mesh: Mesh, axis: Sequence[float], angle: float) -> Mesh:
    """Return a copy of the mesh with its vertices rotated about `axis` by `angle` radians."""
    rotation = _axis_rotation(_as_vec3(axis, "axis"), angle)
    rotated = np.asarray(mesh.vertices, dtype=np.float64) @ rotation.T
    return dataclasses.replace(mesh, vertices=rotated.astype(np.float32))