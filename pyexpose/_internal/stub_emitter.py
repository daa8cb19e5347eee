"""JavaScript stub generation for callable objects.

Option values are written as raw expression text: callers configure
``"true"``, ``"3"`` or ``"'sync'"`` and get exactly that in the output. No
quoting, escaping or syntax validation happens here.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

from ..config import DEFAULT_CLIENT_SCRIPT_CONFIG, ClientScriptConfig
from .exclusion import is_exposable

if TYPE_CHECKING:
    from .method_config import MethodConfiguration

logger = logging.getLogger(__name__)

_STUB_TEMPLATE = (
    "{ns}.{method} = function() {{\n"
    "  return {request_function}(\n"
    "    {{ {class_key}: '{call_class}', {method_key}: '{method}' }},\n"
    "    {{ parameters: arguments{options} }}\n"
    "  );\n"
    "}};\n"
)


def _render_options(pairs: Iterable[tuple[str, Any]]) -> str:
    return "".join(f", {key}: {value}" for key, value in pairs)


def emit_client_script(
    prefix: str,
    class_name: str,
    methods: Iterable[str],
    configuration: MethodConfiguration,
    script_config: ClientScriptConfig | None = None,
) -> str:
    """Return the namespace declaration followed by one stub per exposed method."""
    tokens = {**DEFAULT_CLIENT_SCRIPT_CONFIG, **(script_config or {})}
    classpath = configuration.classpath
    ns = f"{prefix}{classpath}{class_name}"

    chunks = [f"{ns} = {{}};\n"]
    for method_name in methods:
        if not is_exposable(class_name, method_name, configuration.excluded):
            continue
        chunks.append(
            _STUB_TEMPLATE.format(
                ns=ns,
                method=method_name,
                request_function=tokens["request_function"],
                class_key=tokens["class_key"],
                method_key=tokens["method_key"],
                call_class=f"{classpath}{class_name}",
                options=_render_options(configuration.call_options(method_name)),
            )
        )
    logger.debug("Generated %d stub(s) for %s", len(chunks) - 1, ns)
    return "".join(chunks)
