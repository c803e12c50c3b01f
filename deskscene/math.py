# deskscene/math.py
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

import numpy as np

Vec3 = Tuple[float, float, float]


def deg_to_rad(d: float) -> float:
    return d * math.pi / 180.0


# -- Matrix builders --
# All matrices use the column-vector convention: p' = M @ [x, y, z, 1].


def scale_matrix(scale: Vec3) -> np.ndarray:
    sx, sy, sz = scale
    return np.diag([sx, sy, sz, 1.0]).astype(np.float32)


def rotation_x(degrees: float) -> np.ndarray:
    c = math.cos(deg_to_rad(degrees))
    s = math.sin(deg_to_rad(degrees))
    return np.array(
        [
            [1.0, 0.0, 0.0, 0.0],
            [0.0, c, -s, 0.0],
            [0.0, s, c, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ],
        dtype=np.float32,
    )


def rotation_y(degrees: float) -> np.ndarray:
    c = math.cos(deg_to_rad(degrees))
    s = math.sin(deg_to_rad(degrees))
    return np.array(
        [
            [c, 0.0, s, 0.0],
            [0.0, 1.0, 0.0, 0.0],
            [-s, 0.0, c, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ],
        dtype=np.float32,
    )


def rotation_z(degrees: float) -> np.ndarray:
    c = math.cos(deg_to_rad(degrees))
    s = math.sin(deg_to_rad(degrees))
    return np.array(
        [
            [c, -s, 0.0, 0.0],
            [s, c, 0.0, 0.0],
            [0.0, 0.0, 1.0, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ],
        dtype=np.float32,
    )


def translation_matrix(offset: Vec3) -> np.ndarray:
    m = np.identity(4, dtype=np.float32)
    m[:3, 3] = offset
    return m


def compose_transform(
    scale: Vec3, rotation_degrees: Vec3, translation: Vec3
) -> np.ndarray:
    """
    Build a model matrix from scale, XYZ Euler angles (degrees) and translation.

    Result is T @ Rz @ Ry @ Rx @ S, so an object is scaled first, then
    rotated about X, Y and Z in that order, then moved into place.
    Returns a row-major (4, 4) float32 array; transpose before uploading
    to a column-major GLSL mat4.
    """
    rx, ry, rz = rotation_degrees
    return (
        translation_matrix(translation)
        @ rotation_z(rz)
        @ rotation_y(ry)
        @ rotation_x(rx)
        @ scale_matrix(scale)
    )


def transform_point(matrix: np.ndarray, point: Vec3) -> np.ndarray:
    """Apply a 4x4 transform to a 3D point (w = 1)."""
    x, y, z = point
    out = matrix @ np.array([x, y, z, 1.0], dtype=np.float32)
    return out[:3] / out[3]


@dataclass(frozen=True, slots=True)
class TransformRequest:
    """Per-draw placement of a primitive. Not stored; composed and uploaded."""

    scale: Vec3 = (1.0, 1.0, 1.0)
    rotation_degrees: Vec3 = (0.0, 0.0, 0.0)
    translation: Vec3 = (0.0, 0.0, 0.0)

    def matrix(self) -> np.ndarray:
        return compose_transform(
            self.scale, self.rotation_degrees, self.translation
        )
