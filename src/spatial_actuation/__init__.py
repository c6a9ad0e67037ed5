"""Spatial actuation: body actuators with deferred connections."""

__version__ = "0.1.0"

from .core import (  # noqa: F401,E402
    Actuator,
    ActuatorStatus,
    Body,
    BodyActuator,
    BodySet,
    Connector,
    ControlSource,
    FunctionControls,
    KinematicsEngine,
    Model,
    PrescribedControls,
    RigidBodiesState,
    SpatialForceAccumulator,
    SystemState,
)
from .errors import (  # noqa: F401,E402
    ActuationError,
    ControlVectorSizeError,
    ModelNotAssembledError,
    ReferenceResolutionError,
    UnresolvedReferenceError,
)
