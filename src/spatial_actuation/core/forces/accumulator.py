"""Spatial force accumulation shared by all force producers in one pass.

Torques and forces are stored per body in the ground frame. Moments are
taken about the ground origin, so a point force ``f`` acting at ground
point ``p`` contributes ``p x f`` to the body's torque slot.
"""

from __future__ import annotations

from typing import Protocol

import numpy as np
from numpy.typing import NDArray

from ..math.vector import as_vec3, cross


ArrayF = NDArray[np.float64]


class BodyLike(Protocol):
    @property
    def index(self) -> int: ...


class SpatialForceAccumulator:
    def __init__(self, torque: ArrayF, force: ArrayF) -> None:
        self.torque = np.ascontiguousarray(torque, dtype=np.float64)
        self.force = np.ascontiguousarray(force, dtype=np.float64)
        if self.torque.ndim != 2 or self.torque.shape[1] != 3:
            raise ValueError("torque must have shape (M, 3)")
        if self.force.shape != self.torque.shape:
            raise ValueError("force must have shape (M, 3)")

    @classmethod
    def zeros(cls, num_bodies: int) -> "SpatialForceAccumulator":
        if num_bodies < 0:
            raise ValueError("num_bodies must be >= 0")
        return cls(
            torque=np.zeros((num_bodies, 3), dtype=np.float64),
            force=np.zeros((num_bodies, 3), dtype=np.float64),
        )

    @property
    def num_bodies(self) -> int:
        return int(self.torque.shape[0])

    def _slot(self, body: BodyLike) -> int:
        i = int(body.index)
        if not 0 <= i < self.num_bodies:
            raise ValueError(
                f"body index {i} out of range for {self.num_bodies} bodies"
            )
        return i

    def add_torque(self, body: BodyLike, torque: ArrayF) -> None:
        """Add a pure couple; the force slot is untouched."""
        self.torque[self._slot(body)] += as_vec3(torque, "torque")

    def add_point_force(self, body: BodyLike, point: ArrayF, force: ArrayF) -> None:
        """Add ``force`` acting at ground-frame ``point`` on ``body``."""
        i = self._slot(body)
        f = as_vec3(force, "force")
        p = as_vec3(point, "point")
        self.force[i] += f
        self.torque[i] += cross(p, f)

    def add_spatial_force(self, body: BodyLike, torque: ArrayF, force: ArrayF) -> None:
        i = self._slot(body)
        self.torque[i] += as_vec3(torque, "torque")
        self.force[i] += as_vec3(force, "force")

    def spatial_force(self, body: BodyLike) -> ArrayF:
        """Return [moment, force] for ``body`` as shape (6,)."""
        i = self._slot(body)
        return np.concatenate([self.torque[i], self.force[i]])

    def moment_about(self, body: BodyLike, point: ArrayF) -> ArrayF:
        """Return the body's accumulated moment about ground-frame ``point``."""
        i = self._slot(body)
        return self.torque[i] - cross(as_vec3(point, "point"), self.force[i])

    def merge(self, other: "SpatialForceAccumulator") -> None:
        """Add another (partial) accumulator into this one."""
        if other.num_bodies != self.num_bodies:
            raise ValueError("cannot merge accumulators of different sizes")
        self.torque += other.torque
        self.force += other.force

    def __iadd__(self, other: "SpatialForceAccumulator") -> "SpatialForceAccumulator":
        self.merge(other)
        return self

    def reset(self) -> None:
        self.torque.fill(0.0)
        self.force.fill(0.0)

    def copy(self) -> "SpatialForceAccumulator":
        return SpatialForceAccumulator(torque=self.torque.copy(), force=self.force.copy())
