"""Error taxonomy for connector resolution and actuator evaluation.

All of these are structural or configuration errors. None are retried;
they propagate to whoever drives the model.
"""

from __future__ import annotations


class ActuationError(Exception):
    """Base class for errors raised by spatial_actuation."""


class UnresolvedReferenceError(ActuationError, RuntimeError):
    """A connector's connectee was read before it was resolved."""

    def __init__(self, owner: str, connector: str, connectee_name: str = "") -> None:
        self.owner = owner
        self.connector = connector
        self.connectee_name = connectee_name
        target = f" (connectee name '{connectee_name}')" if connectee_name else ""
        super().__init__(
            f"connector '{connector}' of '{owner}' is not resolved{target}"
        )


class ReferenceResolutionError(ActuationError, LookupError):
    """A connector's connectee name could not be found while assembling a model."""

    def __init__(self, owner: str, connector: str, connectee_name: str, reason: str = "") -> None:
        self.owner = owner
        self.connector = connector
        self.connectee_name = connectee_name
        msg = (
            f"connector '{connector}' of '{owner}' could not resolve "
            f"'{connectee_name}'"
        )
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg)


class ControlVectorSizeError(ActuationError, ValueError):
    """A control source supplied a vector of the wrong length."""

    def __init__(self, actuator: str, expected: int, got: int | tuple[int, ...]) -> None:
        self.actuator = actuator
        self.expected = expected
        self.got = got
        super().__init__(
            f"actuator '{actuator}' expects {expected} controls, got {_describe(got)}"
        )


class ModelNotAssembledError(ActuationError, RuntimeError):
    """A model was evaluated before its connections were finalized."""


def _describe(got: int | tuple[int, ...]) -> str:
    if isinstance(got, tuple):
        return f"an array of shape {got}"
    return str(got)
