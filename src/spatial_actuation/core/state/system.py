"""System state container passed to every evaluation."""

from __future__ import annotations

from dataclasses import dataclass

from .rigid_bodies import RigidBodiesState


@dataclass(slots=True)
class SystemState:
    rigid_bodies: RigidBodiesState | None = None
    t: float = 0.0

    @property
    def num_bodies(self) -> int:
        if self.rigid_bodies is None:
            return 0
        return self.rigid_bodies.num_bodies

    def validate(self) -> None:
        if self.rigid_bodies is not None:
            self.rigid_bodies.validate()

    def clone(self) -> "SystemState":
        return SystemState(
            rigid_bodies=(
                self.rigid_bodies.copy() if self.rigid_bodies is not None else None
            ),
            t=self.t,
        )
