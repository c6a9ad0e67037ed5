"""Quaternion utilities.

Conventions:
- Storage order: [w, x, y, z]
- Quaternion represents body->ground rotation.
- Vector rotation: v_ground = R(q) * v_body
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray


ArrayF = NDArray[np.float64]


def quat_normalize(q: ArrayF) -> ArrayF:
    """Normalize quaternion(s) to unit length."""
    q = np.asarray(q, dtype=np.float64)
    n = np.linalg.norm(q, axis=-1)[..., np.newaxis]
    with np.errstate(divide="ignore", invalid="ignore"):
        qn = np.where(n > 0.0, q / n, q)
    return qn


def quat_identity(count: int) -> ArrayF:
    q = np.zeros((count, 4), dtype=np.float64)
    q[:, 0] = 1.0
    return q


def quat_from_axis_angle(axis: ArrayF, angle_rad: ArrayF) -> ArrayF:
    """Create quaternion(s) from axis-angle."""
    axis = np.asarray(axis, dtype=np.float64)
    angle_rad = np.asarray(angle_rad, dtype=np.float64)
    n = np.linalg.norm(axis, axis=-1, keepdims=True)
    with np.errstate(divide="ignore", invalid="ignore"):
        axis_unit = np.where(n > 0.0, axis / n, 0.0)
    half = 0.5 * angle_rad
    w = np.cos(half)[..., np.newaxis]
    xyz = axis_unit * np.sin(half)[..., np.newaxis]
    return np.concatenate([w, xyz], axis=-1)


def quat_to_rotmat(q: ArrayF) -> ArrayF:
    """Convert quaternion(s) to rotation matrix/matrices."""
    q = quat_normalize(q)
    w, x, y, z = np.split(q, 4, axis=-1)

    row0 = np.concatenate(
        [w * w + x * x - y * y - z * z, 2.0 * (x * y - w * z), 2.0 * (x * z + w * y)],
        axis=-1,
    )
    row1 = np.concatenate(
        [2.0 * (x * y + w * z), w * w - x * x + y * y - z * z, 2.0 * (y * z - w * x)],
        axis=-1,
    )
    row2 = np.concatenate(
        [2.0 * (x * z - w * y), 2.0 * (y * z + w * x), w * w - x * x - y * y + z * z],
        axis=-1,
    )
    return np.stack([row0, row1, row2], axis=-2)


def quat_rotate(q: ArrayF, v: ArrayF) -> ArrayF:
    """Rotate body-frame vector(s) into the ground frame."""
    rot = quat_to_rotmat(q)
    v = np.asarray(v, dtype=np.float64)
    return np.einsum("...ij,...j->...i", rot, v)
