"""Deferred, named references between components.

A connector records the *name* of the component it should point at. The
reference itself is only bound when :meth:`Connector.resolve` runs against a
registry during model assembly (or when :meth:`Connector.connect` binds an
instance directly). Reading the connectee before that is an error.
"""

from __future__ import annotations

import logging
from typing import Generic, Protocol, TypeVar

from ...errors import ReferenceResolutionError, UnresolvedReferenceError


logger = logging.getLogger(__name__)

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


class Registry(Protocol[T_co]):
    def get(self, name: str) -> T_co:
        """Return the component called ``name``; raise KeyError when absent."""


class Connector(Generic[T]):
    """Typed, named, deferred reference to a component of type ``T``."""

    def __init__(self, name: str, connectee_type: type[T], owner: str = "") -> None:
        self.name = name
        self.connectee_type = connectee_type
        self.owner = owner
        self._connectee_name = ""
        self._connectee: T | None = None

    def __repr__(self) -> str:
        state = "resolved" if self.is_resolved else "unresolved"
        return (
            f"Connector({self.name!r}, {self.connectee_type.__name__}, "
            f"connectee_name={self._connectee_name!r}, {state})"
        )

    @property
    def is_resolved(self) -> bool:
        return self._connectee is not None

    @property
    def is_stale(self) -> bool:
        """True when the recorded name no longer matches the bound component."""
        if self._connectee is None:
            return False
        bound_name = getattr(self._connectee, "name", self._connectee_name)
        return bound_name != self._connectee_name

    def get_connectee_name(self) -> str:
        return self._connectee_name

    def set_connectee_name(self, name: str) -> None:
        # The binding is kept; callers must resolve again to follow the rename.
        if self.is_resolved and name != self._connectee_name:
            logger.warning(
                "connector '%s' of '%s' renamed to '%s' after resolution; "
                "binding is stale until resolved again",
                self.name,
                self.owner,
                name,
            )
        self._connectee_name = name

    def connect(self, connectee: T) -> None:
        """Bind directly to ``connectee`` without a registry lookup."""
        if not isinstance(connectee, self.connectee_type):
            raise TypeError(
                f"connector '{self.name}' expects {self.connectee_type.__name__}, "
                f"got {type(connectee).__name__}"
            )
        self._connectee = connectee
        self._connectee_name = getattr(connectee, "name", self._connectee_name)

    def disconnect(self) -> None:
        self._connectee = None

    def resolve(self, registry: Registry[object]) -> T:
        """Look up the recorded name in ``registry`` and bind the result."""
        name = self._connectee_name
        if not name:
            self._connectee = None
            raise ReferenceResolutionError(
                self.owner, self.name, name, "no connectee name was set"
            )
        try:
            found = registry.get(name)
        except KeyError:
            self._connectee = None
            raise ReferenceResolutionError(
                self.owner, self.name, name, "no such component in the model"
            ) from None
        if not isinstance(found, self.connectee_type):
            self._connectee = None
            raise ReferenceResolutionError(
                self.owner,
                self.name,
                name,
                f"expected {self.connectee_type.__name__}, "
                f"found {type(found).__name__}",
            )
        self._connectee = found
        logger.debug("connector '%s' of '%s' resolved to '%s'", self.name, self.owner, name)
        return found

    def get_connectee(self) -> T:
        if self._connectee is None:
            raise UnresolvedReferenceError(self.owner, self.name, self._connectee_name)
        return self._connectee
