"""Actuator interface."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

import numpy as np
from numpy.typing import NDArray

from ..state.system import SystemState
from .accumulator import SpatialForceAccumulator

if TYPE_CHECKING:
    from ..model import Model


ArrayF = NDArray[np.float64]


class Actuator(Protocol):
    name: str
    num_controls: int

    @property
    def model(self) -> "Model | None":
        """The model this actuator is attached to, if any."""

    def connect_to_model(self, model: "Model") -> None:
        """Bind to ``model`` and resolve connectors against its registries."""

    def disconnect_from_model(self) -> None:
        """Drop the model and every connector binding."""

    def compute_force(
        self,
        state: SystemState,
        accumulator: SpatialForceAccumulator,
        controls: ArrayF | None = None,
    ) -> None:
        """Add this actuator's contribution to ``accumulator``."""

    def get_power(self, state: SystemState, controls: ArrayF | None = None) -> float:
        """Return the instantaneous power delivered at ``state``."""
