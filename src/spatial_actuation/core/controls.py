"""Control sources: where actuators read their per-state control vectors."""

from __future__ import annotations

from typing import Callable, Protocol

import numpy as np
from numpy.typing import NDArray

from .state.system import SystemState


ArrayF = NDArray[np.float64]


class ControlledActuator(Protocol):
    name: str
    num_controls: int


class ControlSource(Protocol):
    def get_controls(self, actuator: ControlledActuator, state: SystemState) -> ArrayF:
        """Return the control vector for ``actuator`` at ``state``."""


class PrescribedControls:
    """Constant control vectors keyed by actuator name.

    Actuators without an entry receive zeros.
    """

    def __init__(self, values: dict[str, ArrayF] | None = None) -> None:
        self._values: dict[str, ArrayF] = {}
        for name, value in (values or {}).items():
            self.set_controls(name, value)

    def set_controls(self, actuator_name: str, controls: ArrayF) -> None:
        self._values[actuator_name] = np.array(controls, dtype=np.float64)

    def clear(self, actuator_name: str | None = None) -> None:
        if actuator_name is None:
            self._values.clear()
        else:
            self._values.pop(actuator_name, None)

    def get_controls(self, actuator: ControlledActuator, state: SystemState) -> ArrayF:
        if actuator.name not in self._values:
            return np.zeros(actuator.num_controls, dtype=np.float64)
        return self._values[actuator.name].copy()


class FunctionControls:
    """Time-varying controls: ``fn(t)`` per actuator, evaluated at ``state.t``."""

    def __init__(self, functions: dict[str, Callable[[float], ArrayF]] | None = None) -> None:
        self.functions: dict[str, Callable[[float], ArrayF]] = dict(functions or {})

    def get_controls(self, actuator: ControlledActuator, state: SystemState) -> ArrayF:
        fn = self.functions.get(actuator.name)
        if fn is None:
            return np.zeros(actuator.num_controls, dtype=np.float64)
        return np.asarray(fn(state.t), dtype=np.float64)
