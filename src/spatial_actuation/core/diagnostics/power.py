"""Spatial force and power diagnostics."""

from __future__ import annotations

import numpy as np

from ..forces.accumulator import SpatialForceAccumulator


def spatial_power(controls: np.ndarray, spatial_velocity: np.ndarray) -> float | np.ndarray:
    """Return controls . velocity for [angular, linear] ordered 6-vectors."""
    u = np.asarray(controls, dtype=np.float64)
    v = np.asarray(spatial_velocity, dtype=np.float64)
    if u.shape[-1] != 6 or v.shape[-1] != 6:
        raise ValueError("controls and spatial_velocity must have shape (..., 6)")
    p = np.sum(u * v, axis=-1)
    if p.ndim == 0:
        return float(p)
    return p


def shift_moment(
    torque: np.ndarray, force: np.ndarray, from_point: np.ndarray, to_point: np.ndarray
) -> np.ndarray:
    """Return the moment about ``to_point`` given the moment about ``from_point``."""
    torque = np.asarray(torque, dtype=np.float64)
    force = np.asarray(force, dtype=np.float64)
    offset = np.asarray(from_point, dtype=np.float64) - np.asarray(to_point, dtype=np.float64)
    return torque + np.cross(offset, force)


def net_wrench(accumulator: SpatialForceAccumulator) -> tuple[np.ndarray, np.ndarray]:
    """Return (total moment about ground origin, total force) over all bodies."""
    return accumulator.torque.sum(axis=0), accumulator.force.sum(axis=0)
