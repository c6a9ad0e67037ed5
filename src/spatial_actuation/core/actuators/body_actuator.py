"""Actuator applying a ground-frame torque and force to one body.

The six controls are ordered [torque_x, torque_y, torque_z, force_x,
force_y, force_z], all expressed in ground. The torque acts as a pure
couple; the force acts at the body origin.
"""

from __future__ import annotations

import enum
import logging
from typing import TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

from ...errors import ControlVectorSizeError, ReferenceResolutionError, UnresolvedReferenceError
from ..components.body import Body
from ..components.connector import Connector
from ..forces.accumulator import SpatialForceAccumulator
from ..state.system import SystemState

if TYPE_CHECKING:
    from ..model import Model


logger = logging.getLogger(__name__)

ArrayF = NDArray[np.float64]


class ActuatorStatus(enum.Enum):
    UNATTACHED = "unattached"
    READY = "ready"
    INVALID = "invalid"


class BodyActuator:
    num_controls = 6

    def __init__(self, body: Body | None = None, name: str = "body_actuator") -> None:
        if not name:
            raise ValueError("actuator name must be non-empty")
        self.name = name
        self._body = Connector("body", Body, owner=name)
        self._model: Model | None = None
        self.status = ActuatorStatus.UNATTACHED
        if body is not None:
            self._body.set_connectee_name(body.name)

    def __repr__(self) -> str:
        return (
            f"BodyActuator(name={self.name!r}, body={self.get_body_name()!r}, "
            f"status={self.status.value})"
        )

    @property
    def model(self) -> "Model | None":
        return self._model

    def get_connector(self, name: str) -> Connector[Body]:
        if name != "body":
            raise KeyError(name)
        return self._body

    # -- body connection ---------------------------------------------------

    def set_body_name(self, name: str) -> None:
        self._body.set_connectee_name(name)

    def get_body_name(self) -> str:
        return self._body.get_connectee_name()

    def set_body(self, body: Body) -> None:
        if self._model is not None:
            self._model.engine.body_index(body)
        self._body.connect(body)
        if self._model is not None:
            self.status = ActuatorStatus.READY

    def get_body(self) -> Body:
        return self._body.get_connectee()

    def connect_to_model(self, model: "Model") -> None:
        """Resolve the body connector against ``model``'s bodies.

        Calling this again resolves again. Moving to another model is only
        allowed once the current model no longer holds this actuator.
        """
        if self._model is not None and self._model is not model:
            if self._model.owns(self):
                raise ValueError(
                    f"actuator '{self.name}' belongs to model '{self._model.name}'; "
                    f"remove it there before connecting to '{model.name}'"
                )
            logger.info(
                "actuator '%s' moving from model '%s' to '%s'",
                self.name,
                self._model.name,
                model.name,
            )
        self._model = model
        try:
            body = self._body.resolve(model.bodies)
        except ReferenceResolutionError:
            self.status = ActuatorStatus.INVALID
            raise
        self.status = ActuatorStatus.READY
        logger.debug("actuator '%s' attached to body '%s'", self.name, body.name)

    attach_to_model = connect_to_model

    def disconnect_from_model(self) -> None:
        self._model = None
        self._body.disconnect()
        self.status = ActuatorStatus.UNATTACHED

    # -- evaluation --------------------------------------------------------

    def _require_ready(self) -> "Model":
        if self.status is not ActuatorStatus.READY or self._model is None:
            raise UnresolvedReferenceError(self.name, "body", self.get_body_name())
        return self._model

    def get_controls(self, state: SystemState, controls: ArrayF | None = None) -> ArrayF:
        """Return this actuator's validated control vector at ``state``."""
        if controls is None:
            model = self._require_ready()
            controls = model.control_source.get_controls(self, state)
        u = np.asarray(controls, dtype=np.float64)
        if u.ndim != 1 or u.shape[0] != self.num_controls:
            got = int(u.shape[0]) if u.ndim == 1 else u.shape
            raise ControlVectorSizeError(self.name, self.num_controls, got)
        if not np.all(np.isfinite(u)):
            raise ValueError(f"actuator '{self.name}' received non-finite controls")
        return u

    def compute_force(
        self,
        state: SystemState,
        accumulator: SpatialForceAccumulator,
        controls: ArrayF | None = None,
    ) -> None:
        model = self._require_ready()
        body = self._body.get_connectee()
        origin = model.engine.get_origin_location(body, state)

        u = self.get_controls(state, controls)
        torque_ground = u[0:3]
        force_ground = u[3:6]

        accumulator.add_torque(body, torque_ground)
        accumulator.add_point_force(body, origin, force_ground)

    def get_body_spatial_velocity(self, state: SystemState) -> ArrayF:
        """Return [angular, linear] ground-frame velocity of the body origin."""
        model = self._require_ready()
        angular, linear = model.engine.get_spatial_velocity(self._body.get_connectee(), state)
        return np.concatenate([angular, linear])

    def get_power(self, state: SystemState, controls: ArrayF | None = None) -> float:
        velocity = self.get_body_spatial_velocity(state)
        u = self.get_controls(state, controls)
        return float(np.dot(u, velocity))
