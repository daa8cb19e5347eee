"""
pyexpose - Expose an object's methods as remote calls with generated client stubs.

pyexpose wraps a server-side object, discovers its public methods, and turns
them into a named RPC surface: request descriptors for server-side link
generation, JavaScript stubs for the browser, and a dispatcher that routes
inbound calls back to the object.

Key Features:
    - Reflective method discovery with deterministic exclusion rules
    - Per-method and wildcard call options emitted into client stubs
    - Dispatch with an injected response accumulator
    - Declarative configuration from YAML files

Basic Usage:
    >>> import pyexpose
    >>> class Widget:
    ...     def render(self, size):
    ...         return f"<widget size={size}>"
    >>> responses = pyexpose.ResponseCollector()
    >>> widget = pyexpose.CallableObject(Widget(), response=responses)
    >>> widget.configure("*", "classpath", "app")
    >>> widget.configure("render", "mode", "'synchronous'")
    >>> script = widget.generate_client_script()
    >>> widget.call("render", [3])
    >>> responses.responses
    ['<widget size=3>']
"""

from ._internal.introspection import ReflectiveIntrospector
from ._internal.requests import CallRequest
from ._internal.response import ResponseCollector
from .callable_object import CallableObject, MethodNotFoundError
from .config import CallableObjectConfig, ClientScriptConfig, load_config
from .interfaces import MethodIntrospectable, RequestDescriptor, ResponseAccumulator

__version__ = "0.1.0"

__all__ = [
    "CallableObject",
    "CallableObjectConfig",
    "CallRequest",
    "ClientScriptConfig",
    "MethodIntrospectable",
    "MethodNotFoundError",
    "ReflectiveIntrospector",
    "RequestDescriptor",
    "ResponseAccumulator",
    "ResponseCollector",
    "load_config",
]
