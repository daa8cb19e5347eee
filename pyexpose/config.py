from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, TypedDict

import yaml

logger = logging.getLogger(__name__)

_CONFIG_KEYS = frozenset({"classpath", "excluded", "options"})


class CallableObjectConfig(TypedDict, total=False):
    """Declarative configuration for a :class:`CallableObject`.

    Applied through ``CallableObject.apply_config`` so every entry follows the
    same rules as an individual ``configure`` call.
    """

    classpath: str
    """Dotted namespace prepended to the class name in descriptors and stubs."""

    excluded: list[str]
    """Method names (case-sensitive) that must never be exposed."""

    options: dict[str, dict[str, str]]
    """Call options keyed by method name, or ``"*"`` for every method."""


class ClientScriptConfig(TypedDict, total=False):
    """Tokens agreed with the client-side transport."""

    request_function: str
    """Script function issuing the remote call."""

    class_key: str
    """Key carrying the class part of the call target."""

    method_key: str
    """Key carrying the method part of the call target."""


DEFAULT_CLIENT_SCRIPT_CONFIG: ClientScriptConfig = {
    "request_function": "xajax.request",
    "class_key": "xjxcls",
    "method_key": "xjxmthd",
}


def _to_expression(value: Any) -> str:
    """Render a YAML scalar as script expression text."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    return str(value)


def load_config(path: str | Path) -> CallableObjectConfig:
    """Load a :class:`CallableObjectConfig` from a YAML file.

    Example document::

        classpath: app.widgets
        excluded: [reset]
        options:
          "*": {mode: "'synchronous'"}
          render: {readonly: true}

    Raises:
        ValueError: If the document, or its ``options`` section, has the wrong shape.
    """
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise ValueError(f"{path}: expected a mapping at the top level, got {type(data).__name__}")

    unknown = set(data) - _CONFIG_KEYS
    if unknown:
        raise ValueError(f"{path}: unknown configuration keys {sorted(unknown)}. Valid keys: {sorted(_CONFIG_KEYS)}")

    config: CallableObjectConfig = {}
    if "classpath" in data and data["classpath"] is not None:
        config["classpath"] = str(data["classpath"])
    if "excluded" in data:
        # Left as loaded: configure() ignores values that are not lists.
        config["excluded"] = data["excluded"]

    options = data.get("options") or {}
    if not isinstance(options, Mapping):
        raise ValueError(f"{path}: 'options' must be a mapping of method name to options")
    config["options"] = {}
    for method_name, method_options in options.items():
        if not isinstance(method_options, Mapping):
            raise ValueError(f"{path}: options for {method_name!r} must be a mapping")
        config["options"][str(method_name)] = {
            str(name): _to_expression(value) for name, value in method_options.items()
        }

    logger.debug("Loaded callable object configuration from %s", path)
    return config
