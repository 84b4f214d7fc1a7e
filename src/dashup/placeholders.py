"""Template interpolation with ``{name}`` placeholders."""

import re
from collections.abc import Mapping
from typing import Any

from dashup.coercion import coerce_to_string

PLACEHOLDER_PATTERN = re.compile(r"\{(\w+)\}")


def substitute_placeholders(text: str, params: Mapping[str, Any] | None = None) -> str:
    """Replace the ``{placeholders}`` of `text` with the related `params` values.

    A placeholder whose value is missing or falsy collapses to its bare name:
    ``substitute_placeholders("Hi {name}", {}) == "Hi name"``.

    Args:
        text: The template.
        params: Values by placeholder name. When ``None``, `text` is returned
            unchanged, placeholders included.

    Returns:
        str: The interpolated text.
    """
    if params is None:
        return text

    def replace(match: re.Match[str]) -> str:
        name = match.group(1)
        value = params.get(name)
        return coerce_to_string(value) if value else name

    return PLACEHOLDER_PATTERN.sub(replace, text)
