"""Exposure and dispatch predicates.

Two questions are kept apart on purpose:

- *exposable*: may the method be advertised to remote callers (descriptors
  and client stubs)?
- *dispatchable*: will the dispatcher execute it when asked by name?

The exclusion list only affects the first one.
"""

from __future__ import annotations

from collections.abc import Collection

from ..interfaces import MethodIntrospectable

MAGIC_PREFIX = "__"


def is_exposable(class_name: str, method_name: str, excluded: Collection[str]) -> bool:
    """Return True if *method_name* may appear in descriptors and stubs.

    Rules, first match decides:

    1. Magic/lifecycle methods (longer than the ``__`` prefix and starting
       with it) are never exposed.
    2. A method named like the class (constructor by convention) is never
       exposed.
    3. Methods in *excluded* (exact, case-sensitive match) are not exposed.
    """
    if len(method_name) > len(MAGIC_PREFIX) and method_name.startswith(MAGIC_PREFIX):
        return False
    if method_name == class_name:
        return False
    if method_name in excluded:
        return False
    return True


def is_dispatchable(introspector: MethodIntrospectable, target: object, method_name: str) -> bool:
    """Return True if the dispatcher will invoke *method_name* on *target*."""
    return introspector.has_method(target, method_name) or introspector.has_fallback_handler(target)
