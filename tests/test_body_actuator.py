from __future__ import annotations

import numpy as np
import pytest

from spatial_actuation.core.actuators import ActuatorStatus, BodyActuator
from spatial_actuation.core.components import Body
from spatial_actuation.core.controls import PrescribedControls
from spatial_actuation.core.forces import SpatialForceAccumulator
from spatial_actuation.core.math.quat import quat_from_axis_angle
from spatial_actuation.core.model import Model
from spatial_actuation.core.state import RigidBodiesState, SystemState
from spatial_actuation.errors import (
    ControlVectorSizeError,
    ReferenceResolutionError,
    UnresolvedReferenceError,
)


def _make_state(
    pos: np.ndarray,
    vel: np.ndarray | None = None,
    omega_body: np.ndarray | None = None,
    quat: np.ndarray | None = None,
) -> SystemState:
    pos = np.atleast_2d(np.asarray(pos, dtype=np.float64))
    m = pos.shape[0]
    rb = RigidBodiesState(
        pos=pos,
        vel=np.zeros((m, 3)) if vel is None else np.atleast_2d(vel),
        quat=np.tile([1.0, 0.0, 0.0, 0.0], (m, 1)) if quat is None else np.atleast_2d(quat),
        omega=np.zeros((m, 3)) if omega_body is None else np.atleast_2d(omega_body),
    )
    return SystemState(rigid_bodies=rb)


def _attached(body_name: str = "torso") -> tuple[Model, BodyActuator]:
    model = Model()
    model.add_body(body_name)
    act = BodyActuator(name="act")
    act.set_body_name(body_name)
    model.add_actuator(act)
    model.finalize_connections()
    return model, act


def test_convenience_constructor_sets_name_only() -> None:
    body = Body(name="torso", index=0)
    act = BodyActuator(body)
    assert act.get_body_name() == "torso"
    assert act.status is ActuatorStatus.UNATTACHED
    assert not act.get_connector("body").is_resolved


def test_get_connector_unknown_name() -> None:
    with pytest.raises(KeyError):
        BodyActuator().get_connector("frame")


def test_attach_resolves_body() -> None:
    model, act = _attached()
    assert act.status is ActuatorStatus.READY
    assert act.get_body() is model.bodies.get("torso")
    assert act.get_body_name() == "torso"
    assert act.model is model


def test_attach_missing_body_is_invalid() -> None:
    model = Model()
    model.add_body("torso")
    act = BodyActuator(name="act")
    act.set_body_name("head")
    with pytest.raises(ReferenceResolutionError):
        act.connect_to_model(model)
    assert act.status is ActuatorStatus.INVALID

    state = _make_state(np.zeros(3))
    acc = SpatialForceAccumulator.zeros(1)
    with pytest.raises(UnresolvedReferenceError):
        act.compute_force(state, acc, controls=np.ones(6))
    with pytest.raises(UnresolvedReferenceError):
        act.get_power(state, controls=np.ones(6))
    assert np.all(acc.torque == 0.0)


def test_evaluation_before_attach_fails() -> None:
    act = BodyActuator(Body(name="torso", index=0), name="act")
    state = _make_state(np.zeros(3))
    acc = SpatialForceAccumulator.zeros(1)
    with pytest.raises(UnresolvedReferenceError):
        act.compute_force(state, acc, controls=np.zeros(6))
    with pytest.raises(UnresolvedReferenceError):
        act.get_power(state, controls=np.zeros(6))
    with pytest.raises(UnresolvedReferenceError):
        act.get_body()


def test_torque_only_adds_pure_couple() -> None:
    _, act = _attached()
    for pos in ([0.0, 0.0, 0.0], [3.0, -2.0, 5.0]):
        state = _make_state(np.array(pos))
        acc = SpatialForceAccumulator.zeros(1)
        act.compute_force(state, acc, controls=np.array([1.0, 2.0, 3.0, 0.0, 0.0, 0.0]))
        assert np.allclose(acc.force[0], 0.0)
        assert np.allclose(acc.torque[0], [1.0, 2.0, 3.0])


def test_force_only_acts_at_body_origin() -> None:
    _, act = _attached()
    p = np.array([0.5, -1.0, 2.0])
    f = np.array([3.0, 1.0, -2.0])
    state = _make_state(p)
    acc = SpatialForceAccumulator.zeros(1)
    act.compute_force(state, acc, controls=np.concatenate([np.zeros(3), f]))
    assert np.allclose(acc.force[0], f)
    assert np.allclose(acc.torque[0], np.cross(p, f))


def test_compute_force_does_not_overwrite() -> None:
    model, act = _attached()
    body = model.bodies.get("torso")
    state = _make_state(np.zeros(3))
    acc = SpatialForceAccumulator.zeros(1)
    acc.add_spatial_force(body, np.array([1.0, 0.0, 0.0]), np.array([0.0, 0.0, 1.0]))
    act.compute_force(state, acc, controls=np.array([1.0, 0.0, 0.0, 0.0, 0.0, 1.0]))
    assert np.allclose(acc.torque[0], [2.0, 0.0, 0.0])
    assert np.allclose(acc.force[0], [0.0, 0.0, 2.0])


def test_controls_come_from_model_source() -> None:
    model, act = _attached()
    assert isinstance(model.control_source, PrescribedControls)
    model.control_source.set_controls("act", [0.0, 0.0, 1.0, 2.0, 0.0, 0.0])
    state = _make_state(np.zeros(3))
    acc = SpatialForceAccumulator.zeros(1)
    act.compute_force(state, acc)
    assert np.allclose(acc.torque[0], [0.0, 0.0, 1.0])
    assert np.allclose(acc.force[0], [2.0, 0.0, 0.0])


def test_wrong_control_size_raises() -> None:
    model, act = _attached()
    state = _make_state(np.zeros(3))
    acc = SpatialForceAccumulator.zeros(1)
    with pytest.raises(ControlVectorSizeError) as excinfo:
        act.compute_force(state, acc, controls=np.ones(5))
    assert excinfo.value.expected == 6
    assert excinfo.value.got == 5

    model.control_source.set_controls("act", np.ones(7))
    with pytest.raises(ControlVectorSizeError):
        act.get_power(state)
    assert np.all(acc.force == 0.0)


def test_non_finite_controls_raise() -> None:
    _, act = _attached()
    state = _make_state(np.zeros(3))
    with pytest.raises(ValueError):
        act.get_power(state, controls=np.array([np.nan, 0.0, 0.0, 0.0, 0.0, 0.0]))


def test_power_angular_only() -> None:
    _, act = _attached()
    state = _make_state(np.zeros(3), omega_body=np.array([1.0, 0.0, 0.0]))
    power = act.get_power(state, controls=np.array([2.0, 0.0, 0.0, 0.0, 0.0, 0.0]))
    assert power == 2.0


def test_power_zero_at_rest() -> None:
    _, act = _attached()
    state = _make_state(np.array([4.0, 5.0, 6.0]))
    assert act.get_power(state, controls=np.array([3.0, -1.0, 2.0, 7.0, 8.0, -9.0])) == 0.0


def test_power_zero_without_controls() -> None:
    _, act = _attached()
    state = _make_state(
        np.zeros(3),
        vel=np.array([1.0, 2.0, 3.0]),
        omega_body=np.array([0.3, 0.2, 0.1]),
    )
    assert act.get_power(state) == 0.0


def test_power_uses_ground_frame_angular_velocity() -> None:
    _, act = _attached()
    q = quat_from_axis_angle(np.array([0.0, 0.0, 1.0]), np.array(np.pi / 2.0))
    state = _make_state(
        np.zeros(3),
        vel=np.array([0.0, 0.0, 2.0]),
        omega_body=np.array([1.0, 0.0, 0.0]),
        quat=q,
    )
    velocity = act.get_body_spatial_velocity(state)
    assert np.allclose(velocity, [0.0, 1.0, 0.0, 0.0, 0.0, 2.0])
    power = act.get_power(state, controls=np.array([0.0, 3.0, 0.0, 0.0, 0.0, 0.5]))
    assert np.isclose(power, 4.0)


def test_set_body_binds_directly() -> None:
    model = Model()
    torso = model.add_body("torso")
    pelvis = model.add_body("pelvis")
    act = BodyActuator(name="act")
    act.set_body_name("torso")
    model.add_actuator(act)
    model.finalize_connections()

    act.set_body(pelvis)
    assert act.get_body() is pelvis
    assert act.get_body_name() == "pelvis"
    assert act.status is ActuatorStatus.READY

    with pytest.raises(ValueError):
        act.set_body(Body(name="ghost", index=0))
    assert act.get_body() is pelvis
    assert torso.index == 0


def test_two_dimensional_controls_report_shape() -> None:
    _, act = _attached()
    state = _make_state(np.zeros(3))
    with pytest.raises(ControlVectorSizeError) as excinfo:
        act.get_power(state, controls=np.ones((1, 6)))
    assert excinfo.value.got == (1, 6)
    assert "(1, 6)" in str(excinfo.value)
    assert "got 6" not in str(excinfo.value)


def test_disconnect_from_model_drops_binding() -> None:
    _, act = _attached()
    act.disconnect_from_model()
    assert act.model is None
    assert act.status is ActuatorStatus.UNATTACHED
    assert act.get_body_name() == "torso"
    with pytest.raises(UnresolvedReferenceError):
        act.get_body()
