"""Read-only kinematics queries over the rigid body state.

This is the slice of a multibody dynamics engine that actuators consume:
body origin locations and spatial velocities, both in the ground frame.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from .components.body import Body, BodySet
from .math.quat import quat_rotate
from .state.rigid_bodies import RigidBodiesState
from .state.system import SystemState


ArrayF = NDArray[np.float64]


class KinematicsEngine:
    def __init__(self, bodies: BodySet) -> None:
        self.bodies = bodies

    def body_index(self, body: Body) -> int:
        if body.name not in self.bodies or self.bodies.get(body.name) != body:
            raise ValueError(f"body '{body.name}' is not part of this model")
        return body.index

    def _rigid(self, state: SystemState, index: int) -> RigidBodiesState:
        rb = state.rigid_bodies
        if rb is None:
            raise ValueError("state has no rigid bodies")
        if index >= rb.num_bodies:
            raise ValueError(
                f"state holds {rb.num_bodies} bodies, body index {index} is out of range"
            )
        return rb

    def get_origin_location(self, body: Body, state: SystemState) -> ArrayF:
        """Return the body origin location in ground, shape (3,)."""
        i = self.body_index(body)
        rb = self._rigid(state, i)
        return rb.pos[i].copy()

    def get_spatial_velocity(self, body: Body, state: SystemState) -> tuple[ArrayF, ArrayF]:
        """Return (angular, linear) velocity of the body origin in ground."""
        i = self.body_index(body)
        rb = self._rigid(state, i)
        omega_ground = quat_rotate(rb.quat[i], rb.omega[i])
        return omega_ground, rb.vel[i].copy()
