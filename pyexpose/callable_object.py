"""CallableObject: expose one object's methods to remote callers.

Wraps a single instance, generates request descriptors and JavaScript stubs
for its exposable methods, and dispatches inbound calls back to it.

A CallableObject is not thread-safe. Configure it fully before the first
generation or dispatch, or give each request its own instance.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any

from ._internal.dispatcher import Dispatcher, MethodNotFoundError
from ._internal.exclusion import is_exposable
from ._internal.introspection import ReflectiveIntrospector
from ._internal.method_config import CLASSPATH_OPTION, EXCLUDED_OPTION, MethodConfiguration
from ._internal.requests import CallRequest, build_requests
from ._internal.stub_emitter import emit_client_script
from .config import CallableObjectConfig, ClientScriptConfig
from .interfaces import MethodIntrospectable, ResponseAccumulator

__all__ = ["CallableObject", "MethodNotFoundError"]

logger = logging.getLogger(__name__)


class CallableObject:
    """Registry entry for one object whose methods are callable remotely."""

    def __init__(
        self,
        target: object,
        *,
        response: ResponseAccumulator | None = None,
        introspector: MethodIntrospectable | None = None,
        request_factory: Callable[[str], Any] = CallRequest,
        script_config: ClientScriptConfig | None = None,
    ) -> None:
        """Initialize the CallableObject.

        Args:
            target: The object whose methods are exposed.
            response: Default accumulator receiving dispatch results.
            introspector: Reflection strategy; defaults to :class:`ReflectiveIntrospector`.
            request_factory: Builds one request descriptor from a call target string.
            script_config: Overrides for the client-side transport tokens.
        """
        self.target = target
        self.introspector = introspector if introspector is not None else ReflectiveIntrospector()
        self.request_factory = request_factory
        self.script_config = script_config
        self.configuration = MethodConfiguration()
        self._dispatcher = Dispatcher(target, self.introspector, response)

        cls = type(target)
        self._qualified_name = f"{cls.__module__}.{cls.__qualname__}"
        self._class_name = cls.__name__
        logger.info("📚 [PyExpose][Registry] Wrapped %s", self._qualified_name)

    @property
    def name(self) -> str:
        return self._qualified_name

    @property
    def class_name(self) -> str:
        return self._class_name

    @property
    def classpath(self) -> str:
        return self.configuration.classpath

    @property
    def excluded(self) -> frozenset[str]:
        return self.configuration.excluded

    def get_name(self) -> str:
        """Return the qualified name (``module.QualName``) of the wrapped object's class."""
        return self._qualified_name

    def get_methods(self) -> list[str]:
        """Return every public method name, before exclusion rules apply."""
        return self.introspector.list_public_methods(self.target)

    def get_exposed_methods(self) -> list[str]:
        return [name for name in self.get_methods() if self.is_exposable(name)]

    def is_exposable(self, method_name: str) -> bool:
        return is_exposable(self._class_name, method_name, self.configuration.excluded)

    def configure(self, method_name: str, option_name: str, option_value: Any) -> None:
        """Set a call option for *method_name* (``"*"`` for every method).

        Two option names are settings rather than call options: ``classpath``
        sets the namespace prefix and ``excluded`` replaces the list of
        methods that must not be exposed. Their *method_name* is ignored.
        """
        self.configuration.configure(method_name, option_name, option_value)

    def apply_config(self, config: CallableObjectConfig) -> None:
        """Apply a declarative configuration, e.g. one returned by :func:`load_config`."""
        if "classpath" in config:
            self.configure("*", CLASSPATH_OPTION, config["classpath"])
        if "excluded" in config:
            self.configure("*", EXCLUDED_OPTION, config["excluded"])
        for method_name, options in config.get("options", {}).items():
            for option_name, option_value in options.items():
                self.configure(method_name, option_name, option_value)

    def generate_requests(self, prefix: str = "") -> dict[str, Any]:
        """Return one request descriptor per exposed method, keyed by lowercase name.

        Args:
            prefix: Prepended to every call target; should match the prefix
                given to :meth:`generate_client_script`.
        """
        return build_requests(
            prefix,
            self.configuration.classpath,
            self._class_name,
            self.get_methods(),
            self.configuration.excluded,
            self.request_factory,
        )

    def generate_client_script(self, prefix: str = "") -> str:
        """Return the JavaScript stubs for every exposed method."""
        return emit_client_script(
            prefix,
            self._class_name,
            self.get_methods(),
            self.configuration,
            self.script_config,
        )

    def is_class(self, class_name: str) -> bool:
        """Return True if *class_name* is the qualified name of the wrapped object's class."""
        return self._qualified_name == class_name

    def has_method(self, method_name: str) -> bool:
        """Return True if a call to *method_name* would be dispatched.

        Broader than :meth:`is_exposable`: excluded methods and names handled
        by a ``__getattr__`` hook are dispatchable too.
        """
        return self._dispatcher.is_dispatchable(method_name)

    def call(
        self,
        method_name: str,
        args: Sequence[Any] = (),
        response: ResponseAccumulator | None = None,
        *,
        strict: bool = False,
    ) -> None:
        """Call *method_name* on the wrapped object and append the result to the accumulator.

        Unknown methods are ignored unless ``strict`` is set, in which case
        :class:`MethodNotFoundError` is raised.
        """
        self._dispatcher.dispatch(method_name, args, response, strict=strict)
