"""State namespace."""

from .rigid_bodies import RigidBodiesState  # noqa: F401
from .system import SystemState  # noqa: F401
