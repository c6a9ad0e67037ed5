"""Push a torso upward with a body actuator and report force and power."""

from __future__ import annotations

import logging

import numpy as np

from spatial_actuation.core.actuators import BodyActuator
from spatial_actuation.core.controls import PrescribedControls
from spatial_actuation.core.model import Model
from spatial_actuation.core.state import RigidBodiesState, SystemState
from spatial_actuation.logging_config import setup_logging


if __name__ == "__main__":
    setup_logging(logging.DEBUG)

    # Actuator authored before the model exists; it only knows the body name.
    push = BodyActuator(name="torso_push")
    push.set_body_name("torso")

    controls = PrescribedControls()
    controls.set_controls("torso_push", np.array([0.0, 0.0, 0.0, 0.0, 0.0, 10.0]))

    model = Model(name="walker", control_source=controls)
    model.add_body("pelvis")
    model.add_body("torso")
    model.add_actuator(push)
    model.finalize_connections()

    rb = RigidBodiesState.at_rest(np.array([[0.0, 0.0, 0.0], [1.0, 0.0, 0.0]]))
    state = SystemState(rigid_bodies=rb)
    acc = model.compute_forces(state)
    torso = push.get_body()
    print("torso force:", acc.force[torso.index])
    print("torso moment about ground origin:", acc.torque[torso.index])
    print("power at rest:", model.total_power(state))

    rb.vel[torso.index] = [0.0, 0.0, 0.5]
    print("power rising at 0.5 m/s:", model.total_power(state))
