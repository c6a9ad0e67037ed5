"""Vector utilities for NumPy arrays.

All vectors are expected to be shaped (..., 3).
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import NDArray


ArrayF = NDArray[np.float64]


def as_vec3(value: Any, name: str = "vector") -> ArrayF:
    """Return ``value`` as a float64 array of shape (3,)."""
    v = np.asarray(value, dtype=np.float64)
    if v.shape != (3,):
        raise ValueError(f"{name} must have shape (3,)")
    return v


def cross(a: ArrayF, b: ArrayF) -> ArrayF:
    """Return the cross product of two vectors."""
    return np.cross(a, b)
