"""Actuation core: components, state, forces and the model."""

from .actuators import ActuatorStatus, BodyActuator  # noqa: F401
from .components import Body, BodySet, Connector  # noqa: F401
from .controls import ControlSource, FunctionControls, PrescribedControls  # noqa: F401
from .engine import KinematicsEngine  # noqa: F401
from .forces import Actuator, SpatialForceAccumulator  # noqa: F401
from .model import Model  # noqa: F401
from .state import RigidBodiesState, SystemState  # noqa: F401
