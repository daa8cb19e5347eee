"""Request descriptors for exposed methods.

A :class:`CallRequest` is a lightweight, server-side reference to one remote
call target. It carries only the qualified target string plus optional
parameter expressions, so the host can render links or buttons that trigger
the call from the browser.
"""
from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Any

from .exclusion import is_exposable

logger = logging.getLogger(__name__)


class CallRequest:
    """Default request descriptor.

    Attributes:
        target: Fully qualified call target (``prefix + classpath + Class.method``).
        parameters: Parameter expressions rendered verbatim by :meth:`get_script`.
    """

    def __init__(self, target: str) -> None:
        self.target = target
        self.parameters: list[str] = []

    def add_parameter(self, expression: str) -> CallRequest:
        self.parameters.append(expression)
        return self

    def get_script(self) -> str:
        """Render the call as script text, e.g. ``ns.Widget.render(1, 'a')``."""
        return f"{self.target}({', '.join(self.parameters)})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CallRequest):
            return NotImplemented
        return self.target == other.target and self.parameters == other.parameters

    def __repr__(self) -> str:
        return f"<CallRequest target={self.target}>"


def build_requests(
    prefix: str,
    classpath: str,
    class_name: str,
    methods: Iterable[str],
    excluded: Iterable[str],
    request_factory: Callable[[str], Any] = CallRequest,
) -> dict[str, Any]:
    """Map lowercase method names to request descriptors.

    When two methods lowercase to the same key, the later one in *methods*
    wins.
    """
    excluded = frozenset(excluded)
    requests: dict[str, Any] = {}
    for method_name in methods:
        if not is_exposable(class_name, method_name, excluded):
            continue
        key = method_name.lower()
        if key in requests:
            logger.debug("Request key %s for %s.%s overwrites an earlier method", key, class_name, method_name)
        requests[key] = request_factory(f"{prefix}{classpath}{class_name}.{method_name}")
    return requests
