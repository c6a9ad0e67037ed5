"""Model: owns bodies and actuators, assembles them, and runs force passes."""

from __future__ import annotations

import logging

from ..errors import ModelNotAssembledError
from .components.body import Body, BodySet
from .controls import ControlSource, PrescribedControls
from .engine import KinematicsEngine
from .forces.accumulator import SpatialForceAccumulator
from .forces.base import Actuator
from .state.system import SystemState


logger = logging.getLogger(__name__)


class Model:
    def __init__(self, name: str = "model", control_source: ControlSource | None = None) -> None:
        self.name = name
        self.bodies = BodySet()
        self.control_source: ControlSource = (
            control_source if control_source is not None else PrescribedControls()
        )
        self._actuators: dict[str, Actuator] = {}
        self._engine = KinematicsEngine(self.bodies)
        self._assembled = False

    @property
    def engine(self) -> KinematicsEngine:
        return self._engine

    @property
    def actuators(self) -> list[Actuator]:
        return list(self._actuators.values())

    @property
    def is_assembled(self) -> bool:
        return self._assembled

    def add_body(self, name: str) -> Body:
        body = self.bodies.add(name)
        self._assembled = False
        return body

    def add_actuator(self, actuator: Actuator) -> None:
        if actuator.name in self._actuators:
            raise ValueError(f"duplicate actuator name: {actuator.name}")
        owner = actuator.model
        if owner is not None and owner is not self:
            raise ValueError(
                f"actuator '{actuator.name}' already belongs to model '{owner.name}'; "
                "remove it there first"
            )
        self._actuators[actuator.name] = actuator
        self._assembled = False

    def remove_actuator(self, name: str) -> Actuator:
        """Take an actuator out of the model and release its bindings."""
        actuator = self.get_actuator(name)
        del self._actuators[name]
        if actuator.model is self:
            actuator.disconnect_from_model()
        self._assembled = False
        return actuator

    def owns(self, actuator: Actuator) -> bool:
        return self._actuators.get(actuator.name) is actuator

    def get_actuator(self, name: str) -> Actuator:
        if name not in self._actuators:
            raise KeyError(name)
        return self._actuators[name]

    def finalize_connections(self) -> None:
        """Resolve every actuator's connectors. Must run before evaluation."""
        self._assembled = False
        for actuator in self._actuators.values():
            actuator.connect_to_model(self)
        self._assembled = True
        logger.info(
            "model '%s' assembled: %d bodies, %d actuators",
            self.name,
            len(self.bodies),
            len(self._actuators),
        )

    def _require_assembled(self) -> None:
        if not self._assembled:
            raise ModelNotAssembledError(
                f"model '{self.name}' is not assembled; call finalize_connections()"
            )

    def compute_forces(self, state: SystemState) -> SpatialForceAccumulator:
        """Fold every actuator's contribution into a fresh accumulator."""
        self._require_assembled()
        accumulator = SpatialForceAccumulator.zeros(len(self.bodies))
        for actuator in self._actuators.values():
            actuator.compute_force(state, accumulator)
        return accumulator

    def actuator_powers(self, state: SystemState) -> dict[str, float]:
        self._require_assembled()
        return {name: act.get_power(state) for name, act in self._actuators.items()}

    def total_power(self, state: SystemState) -> float:
        return float(sum(self.actuator_powers(state).values()))
