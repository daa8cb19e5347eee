"""Per-method call options and registry settings."""

from __future__ import annotations

import logging
from typing import Any

logger = logging.getLogger(__name__)

WILDCARD = "*"
SEPARATOR = "."

CLASSPATH_OPTION = "classpath"
EXCLUDED_OPTION = "excluded"

_EXCLUDED_TYPES = (list, tuple, set, frozenset)


class MethodConfiguration:
    """Stores the classpath, the excluded method names and the call options.

    Call options are keyed by lowercase method name; the wildcard key ``*``
    holds options applied to every method. Option values are opaque
    expression fragments and are stored verbatim.
    """

    def __init__(self) -> None:
        self.classpath = ""
        self.excluded: frozenset[str] = frozenset()
        self.options: dict[str, dict[str, Any]] = {}

    def configure(self, method_name: str, option_name: str, option_value: Any) -> None:
        if option_name == CLASSPATH_OPTION:
            self._set_classpath(option_value)
            return
        if option_name == EXCLUDED_OPTION:
            self._set_excluded(option_value)
            return

        key = method_name.lower()
        self.options.setdefault(key, {})[option_name] = option_value
        logger.debug("Call option %s=%s set for %s", option_name, option_value, key)

    def call_options(self, method_name: str) -> list[tuple[str, Any]]:
        """Return wildcard options followed by the options of *method_name*.

        Both groups are returned even when keys repeat; the receiving call
        site resolves duplicates by ordinary key overwrite.
        """
        pairs = list(self.options.get(WILDCARD, {}).items())
        pairs.extend(self.options.get(method_name.lower(), {}).items())
        return pairs

    def _set_classpath(self, value: Any) -> None:
        if not value:
            return
        path = str(value).rstrip(SEPARATOR)
        if not path:
            return
        self.classpath = path + SEPARATOR
        logger.debug("Classpath set to %s", self.classpath)

    def _set_excluded(self, value: Any) -> None:
        if not isinstance(value, _EXCLUDED_TYPES):
            logger.debug("Ignoring excluded methods value of type %s", type(value).__name__)
            return
        if not all(isinstance(name, str) for name in value):
            logger.debug("Ignoring excluded methods value with non-string entries")
            return
        self.excluded = frozenset(value)
        logger.debug("Excluded methods set to %s", sorted(self.excluded, key=str))
