"""Split actuators across workers and merge per-worker accumulators."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import numpy as np

from spatial_actuation.core.actuators import BodyActuator
from spatial_actuation.core.controls import PrescribedControls
from spatial_actuation.core.forces import SpatialForceAccumulator
from spatial_actuation.core.model import Model
from spatial_actuation.core.state import RigidBodiesState, SystemState


def _partial(actuators: list[BodyActuator], state: SystemState, num_bodies: int) -> SpatialForceAccumulator:
    acc = SpatialForceAccumulator.zeros(num_bodies)
    for act in actuators:
        act.compute_force(state, acc)
    return acc


if __name__ == "__main__":
    rng = np.random.default_rng(0)
    n_bodies = 8
    n_actuators = 64

    controls = PrescribedControls()
    model = Model(name="swarm", control_source=controls)
    for i in range(n_bodies):
        model.add_body(f"link{i}")
    for k in range(n_actuators):
        act = BodyActuator(name=f"act{k}")
        act.set_body_name(f"link{k % n_bodies}")
        model.add_actuator(act)
        controls.set_controls(act.name, rng.normal(size=6))
    model.finalize_connections()

    state = SystemState(rigid_bodies=RigidBodiesState.at_rest(rng.normal(size=(n_bodies, 3))))

    chunks = [model.actuators[i::4] for i in range(4)]
    with ThreadPoolExecutor(max_workers=4) as pool:
        partials = list(pool.map(lambda c: _partial(c, state, n_bodies), chunks))

    merged = SpatialForceAccumulator.zeros(n_bodies)
    for part in partials:
        merged += part

    sequential = model.compute_forces(state)
    print("max torque difference:", np.max(np.abs(merged.torque - sequential.torque)))
    print("max force difference:", np.max(np.abs(merged.force - sequential.force)))
