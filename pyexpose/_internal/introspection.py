"""Reflective method discovery for callable objects.

The default :class:`ReflectiveIntrospector` walks the target's class
hierarchy and reports the methods a remote caller could reach. Dunder hooks
(``__init__``, ``__getattr__`` ...) are part of Python's public protocol and
are therefore reported here; deciding whether they may be exposed is the job
of the exclusion policy, not of this module.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Iterator, Sequence
from typing import Any

logger = logging.getLogger(__name__)

# Optional class attribute listing the methods a target wants to publish.
RPC_METHODS_ATTR = "__rpc_methods__"

FALLBACK_HOOK = "__getattr__"


def is_dunder(name: str) -> bool:
    return len(name) > 4 and name.startswith("__") and name.endswith("__")


def is_public_name(name: str) -> bool:
    """Return True for names reachable from outside the object's own scope.

    ``_private`` and name-mangled ``__private`` methods are not public;
    dunder protocol hooks are.
    """
    return bool(name) and (not name.startswith("_") or is_dunder(name))


def _iter_class_routines(cls: type) -> Iterator[str]:
    """Yield routine names defined along the MRO, most-derived first."""
    seen: set[str] = set()
    for klass in cls.__mro__:
        if klass is object:
            continue
        for name, attr in vars(klass).items():
            if name in seen:
                continue
            seen.add(name)
            if inspect.isroutine(attr):
                yield name


class ReflectiveIntrospector:
    """``MethodIntrospectable`` implementation based on :mod:`inspect`.

    Methods are reported in definition order, subclass methods first. A class
    may narrow its surface by declaring ``__rpc_methods__``; only the listed
    public names that resolve to routines are then reported, in the listed
    order.
    """

    def list_public_methods(self, target: object) -> list[str]:
        cls = type(target)
        declared = getattr(cls, RPC_METHODS_ATTR, None)
        if declared is not None:
            if isinstance(declared, str):
                raise TypeError(f"{cls.__name__}.{RPC_METHODS_ATTR} must be a collection of names, not a string")
            names = [name for name in declared if is_public_name(name) and self._resolves_to_routine(cls, name)]
            logger.debug("%s declares %s: %s", cls.__name__, RPC_METHODS_ATTR, names)
            return names
        return [name for name in _iter_class_routines(cls) if is_public_name(name)]

    def has_method(self, target: object, method_name: str) -> bool:
        if not is_public_name(method_name):
            return False
        return self._resolves_to_routine(type(target), method_name)

    def has_fallback_handler(self, target: object) -> bool:
        return self._resolves_to_routine(type(target), FALLBACK_HOOK)

    def invoke_fallback(self, target: object, method_name: str, args: Sequence[Any]) -> Any:
        if not self.has_fallback_handler(target):
            raise AttributeError(
                f"{type(target).__name__} has no {FALLBACK_HOOK} hook to resolve {method_name!r}"
            )
        handler = getattr(type(target), FALLBACK_HOOK)(target, method_name)
        return handler(*args)

    @staticmethod
    def _resolves_to_routine(cls: type, name: str) -> bool:
        # Class dicts only: inspect.getattr_static would also consult the metaclass.
        for klass in cls.__mro__:
            if name in vars(klass):
                return inspect.isroutine(vars(klass)[name])
        return False
