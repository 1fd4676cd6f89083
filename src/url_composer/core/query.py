"""Query string rendering."""

from collections.abc import Mapping
from typing import Any

from url_composer.core.tokens import encode_component


def render_query(mapping: Mapping[str, Any] | None) -> str:
    """Render a mapping as "key=value" pairs joined by "&".

    Values are component-encoded, keys are used verbatim. Entries keep
    the mapping's iteration order.

    Examples:
        {"a": 1, "b": "x y"} -> "a=1&b=x%20y"
        {} -> ""
    """
    if not mapping:
        return ""

    return "&".join(f"{key}={encode_component(value)}" for key, value in mapping.items())
