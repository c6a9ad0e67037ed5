"""Actuator implementations."""

from .body_actuator import ActuatorStatus, BodyActuator  # noqa: F401
