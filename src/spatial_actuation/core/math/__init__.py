"""Math utilities namespace."""

from .quat import (  # noqa: F401
    quat_from_axis_angle,
    quat_identity,
    quat_normalize,
    quat_rotate,
    quat_to_rotmat,
)
from .vector import as_vec3, cross  # noqa: F401
