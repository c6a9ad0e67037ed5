"""Diagnostics helpers."""

from .power import net_wrench, shift_moment, spatial_power  # noqa: F401
