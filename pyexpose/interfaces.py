"""Public collaborator protocols for pyexpose.

These interfaces define the contract between a ``CallableObject`` and the
pieces it does not own: the reflection layer that discovers methods, the
response accumulator that receives call results, and the request descriptor
built for every exposed method. They enable structural typing so hosts can
plug in their own implementations without inheriting from concrete classes.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class MethodIntrospectable(Protocol):
    """Reflection capability used to discover and invoke a target's methods."""

    def list_public_methods(self, target: object) -> list[str]:
        """Return the public method names of *target* in a stable order.

        Returns an empty list when the target has no introspectable methods.
        """

    def has_method(self, target: object, method_name: str) -> bool:
        """Return True if *target* declares a public method named *method_name*."""

    def has_fallback_handler(self, target: object) -> bool:
        """Return True if *target* provides a catch-all hook for unknown methods."""

    def invoke_fallback(self, target: object, method_name: str, args: Sequence[Any]) -> Any:
        """Invoke *method_name* through the target's catch-all hook."""


@runtime_checkable
class ResponseAccumulator(Protocol):
    """Receives the return value of every successful dispatch."""

    def append(self, value: Any) -> None:
        """Accumulate one call result."""


@runtime_checkable
class RequestDescriptor(Protocol):
    """Server-side description of one remotely callable method.

    Implementations are constructed with a single string: the fully
    qualified call target (``prefix + classpath + class + "." + method``).
    """

    @property
    def target(self) -> str:
        """The fully qualified call target."""
