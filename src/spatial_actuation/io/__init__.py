"""Model definitions and units."""

from .definition import (  # noqa: F401
    model_from_definition,
    state_from_definition,
    validate_definition,
)
from .units import UnitsConfig, from_si, label_for, to_si  # noqa: F401
