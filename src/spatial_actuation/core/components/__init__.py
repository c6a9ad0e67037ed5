"""Components that actuators connect to."""

from .body import Body, BodySet  # noqa: F401
from .connector import Connector, Registry  # noqa: F401
