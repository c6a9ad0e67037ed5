"""Rigid body handles and the model's body registry."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True, slots=True)
class Body:
    """Named handle to one row of the rigid body state.

    The body does not own kinematics; ``index`` selects its row in
    :class:`~spatial_actuation.core.state.RigidBodiesState`.
    """
    name: str
    index: int

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise ValueError("body name must be a non-empty string")
        if self.index < 0:
            raise ValueError("body index must be >= 0")


class BodySet:
    """Ordered name -> Body registry owned by a model."""

    def __init__(self) -> None:
        self._bodies: dict[str, Body] = {}

    def add(self, name: str) -> Body:
        if name in self._bodies:
            raise ValueError(f"duplicate body name: {name}")
        body = Body(name=name, index=len(self._bodies))
        self._bodies[name] = body
        return body

    def get(self, name: str) -> Body:
        if name not in self._bodies:
            raise KeyError(name)
        return self._bodies[name]

    def contains(self, name: str) -> bool:
        return name in self._bodies

    def names(self) -> list[str]:
        return list(self._bodies.keys())

    def __contains__(self, name: object) -> bool:
        return name in self._bodies

    def __len__(self) -> int:
        return len(self._bodies)

    def __iter__(self) -> Iterator[Body]:
        return iter(self._bodies.values())
