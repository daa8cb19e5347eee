"""Inbound call dispatch.

The dispatcher runs a method by name and hands its return value to a
response accumulator. It deliberately ignores the exclusion list: excluded
methods are hidden from generated stubs, but remain invocable when a caller
names them directly.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from ..interfaces import MethodIntrospectable, ResponseAccumulator
from .exclusion import is_dispatchable

logger = logging.getLogger(__name__)


class MethodNotFoundError(LookupError):
    """Raised by strict dispatch when no method or fallback hook matches."""

    def __init__(self, class_name: str, method_name: str) -> None:
        super().__init__(f"{class_name} has no method {method_name!r} and no fallback hook")
        self.class_name = class_name
        self.method_name = method_name


class Dispatcher:
    """Invokes methods of one target and forwards results to an accumulator."""

    def __init__(
        self,
        target: object,
        introspector: MethodIntrospectable,
        response: ResponseAccumulator | None = None,
    ) -> None:
        self.target = target
        self.introspector = introspector
        self.response = response

    def is_dispatchable(self, method_name: str) -> bool:
        return is_dispatchable(self.introspector, self.target, method_name)

    def dispatch(
        self,
        method_name: str,
        args: Sequence[Any] = (),
        response: ResponseAccumulator | None = None,
        *,
        strict: bool = False,
    ) -> None:
        """Invoke *method_name* with *args* and append the result to the accumulator.

        Args:
            method_name: Name of the method to run.
            args: Positional arguments, passed through unchanged.
            response: Accumulator for this call; defaults to the one given at
                construction.
            strict: Raise :class:`MethodNotFoundError` instead of doing nothing
                when the method cannot be dispatched.

        Raises:
            MethodNotFoundError: Only with ``strict=True``.
            RuntimeError: If the call is dispatchable but no accumulator is available.

        Exceptions raised by the invoked method propagate unchanged.
        """
        class_name = type(self.target).__name__
        if not self.is_dispatchable(method_name):
            if strict:
                raise MethodNotFoundError(class_name, method_name)
            logger.debug("Ignoring call to unknown method %s.%s", class_name, method_name)
            return

        accumulator = response if response is not None else self.response
        if accumulator is None:
            raise RuntimeError(
                f"No response accumulator for call to {class_name}.{method_name}. "
                "Pass one to the constructor or to dispatch()."
            )

        if self.introspector.has_method(self.target, method_name):
            result = getattr(self.target, method_name)(*args)
        else:
            logger.debug("Routing %s.%s through the fallback hook", class_name, method_name)
            result = self.introspector.invoke_fallback(self.target, method_name, args)
        accumulator.append(result)
