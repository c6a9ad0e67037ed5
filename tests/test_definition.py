from __future__ import annotations

import numpy as np
import pytest

from spatial_actuation.core.actuators import ActuatorStatus
from spatial_actuation.errors import ReferenceResolutionError
from spatial_actuation.io import model_from_definition, state_from_definition, validate_definition


def _defn() -> dict:
    return {
        "schema_version": 1,
        "name": "walker",
        "bodies": [
            {"name": "pelvis"},
            {"name": "torso", "pos": [1.0, 0.0, 0.0]},
        ],
        "actuators": [
            {
                "type": "body_actuator",
                "name": "torso_push",
                "body": "torso",
                "controls": [0.0, 0.0, 0.0, 0.0, 0.0, 10.0],
            }
        ],
    }


def test_model_from_definition_end_to_end() -> None:
    defn = _defn()
    model = model_from_definition(defn)
    state = state_from_definition(defn)

    assert model.name == "walker"
    assert model.is_assembled
    act = model.get_actuator("torso_push")
    assert act.status is ActuatorStatus.READY
    assert act.get_body_name() == "torso"

    acc = model.compute_forces(state)
    assert np.allclose(acc.force[1], [0.0, 0.0, 10.0])
    assert np.allclose(acc.torque[1], [0.0, -10.0, 0.0])
    assert np.allclose(acc.force[0], 0.0)
    assert model.total_power(state) == 0.0


def test_state_defaults() -> None:
    state = state_from_definition(_defn())
    rb = state.rigid_bodies
    assert rb is not None
    assert rb.pos.shape == (2, 3)
    assert np.allclose(rb.quat, [[1.0, 0.0, 0.0, 0.0]] * 2)
    assert np.allclose(rb.vel, 0.0)
    assert state.t == 0.0


def test_units_applied_to_state_and_controls() -> None:
    defn = _defn()
    defn["units"] = {"preset": "KM", "enabled": True}
    defn["bodies"][1]["vel"] = [0.0, 0.001, 0.0]
    model = model_from_definition(defn)
    state = state_from_definition(defn)
    assert np.allclose(state.rigid_bodies.pos[1], [1000.0, 0.0, 0.0])
    assert np.allclose(state.rigid_bodies.vel[1], [0.0, 1.0, 0.0])
    acc = model.compute_forces(state)
    assert np.allclose(acc.force[1], [0.0, 0.0, 10000.0])


def test_unknown_body_fails_assembly() -> None:
    defn = _defn()
    defn["actuators"][0]["body"] = "head"
    with pytest.raises(ReferenceResolutionError):
        model_from_definition(defn)


@pytest.mark.parametrize(
    "mutate",
    [
        lambda d: d.pop("schema_version"),
        lambda d: d.pop("bodies"),
        lambda d: d["bodies"].append({"name": "torso"}),
        lambda d: d["bodies"][0].update(pos=[1.0, 2.0]),
        lambda d: d["actuators"][0].update(type="path_actuator"),
        lambda d: d["actuators"][0].update(controls=[1.0, 2.0, 3.0]),
        lambda d: d["actuators"][0].pop("body"),
        lambda d: d.update(units={"preset": "FURLONG"}),
    ],
)
def test_validate_rejects_bad_definitions(mutate) -> None:
    defn = _defn()
    mutate(defn)
    with pytest.raises(ValueError):
        validate_definition(defn)
