"""Force accumulation and actuator interfaces."""

from .accumulator import SpatialForceAccumulator  # noqa: F401
from .base import Actuator  # noqa: F401
