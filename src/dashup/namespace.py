"""Attach dashup helpers to a utility namespace.

Helpers are plain functions and can be imported directly. `extend` also
registers them as extra entries of an existing namespace, e.g. a module, a
``SimpleNamespace`` or a plain dict:

    >>> from dashup.namespace import extend
    >>> _ = extend()
    >>> _.slugify("Héllo World!")
    'hello-world'

Note that pydash already defines some of these names (``slugify``,
``upper_first``, ...) with different semantics; extending the ``pydash``
module itself replaces them unless ``overwrite=False`` is passed.
"""

import logging
from collections.abc import Callable, MutableMapping
from types import SimpleNamespace
from typing import Any

from dashup import case, coercion, edges, matching, merge, messages, placeholders, units
from dashup.errors import NamespaceConflictError

logger = logging.getLogger(__name__)

HELPERS: dict[str, Callable[..., Any]] = {
    "resolve_type_name": coercion.resolve_type_name,
    "resolve_id": coercion.resolve_id,
    "resolve_payload": coercion.resolve_payload,
    "coerce_to_string": coercion.coerce_to_string,
    "coerce_to_object": coercion.coerce_to_object,
    "compare_with_operator": coercion.compare_with_operator,
    "merge_recursive": merge.merge_recursive,
    "upper_first": case.upper_first,
    "lower_first": case.lower_first,
    "pascal_case": case.pascal_case,
    "dot_case": case.dot_case,
    "slugify": case.slugify,
    "substitute_placeholders": placeholders.substitute_placeholders,
    "ensure_starts_with": edges.ensure_starts_with,
    "ensure_ends_with": edges.ensure_ends_with,
    "insert_at": edges.insert_at,
    "matches_subject": matching.matches_subject,
    "time_string_to_seconds": units.time_string_to_seconds,
    "seconds_to_time_string": units.seconds_to_time_string,
    "milliseconds_to_time_string": units.milliseconds_to_time_string,
    "bytes_to_human_units": units.bytes_to_human_units,
    "bytes_rate_to_human_units": units.bytes_rate_to_human_units,
    "extract_error_message": messages.extract_error_message,
}

# lodash-up names, for code ported from JavaScript
LEGACY_ALIASES: dict[str, str] = {
    "toType": "resolve_type_name",
    "toId": "resolve_id",
    "toData": "resolve_payload",
    "toStr": "coerce_to_string",
    "toObj": "coerce_to_object",
    "compareWithOperator": "compare_with_operator",
    "mergeRecursive": "merge_recursive",
    "ucFirst": "upper_first",
    "lcFirst": "lower_first",
    "pascalCase": "pascal_case",
    "dotCase": "dot_case",
    "placeholder": "substitute_placeholders",
    "ensureStartsWith": "ensure_starts_with",
    "ensureEndsWith": "ensure_ends_with",
    "insertStr": "insert_at",
    "checkSubject": "matches_subject",
    "strToSec": "time_string_to_seconds",
    "secToStr": "seconds_to_time_string",
    "msToStr": "milliseconds_to_time_string",
    "toByteUnits": "bytes_to_human_units",
    "toByteRateUnits": "bytes_rate_to_human_units",
    "getErrorMessage": "extract_error_message",
}


def _entries(legacy: bool) -> dict[str, Callable[..., Any]]:
    entries = dict(HELPERS)
    if legacy:
        entries.update({alias: HELPERS[name] for alias, name in LEGACY_ALIASES.items()})
    return entries


def extend(namespace: Any = None, *, legacy: bool = False, overwrite: bool = True) -> Any:
    """Register the helpers as entries of `namespace`.

    Mutable mappings receive items, anything else (modules, classes, simple
    namespaces) receives attributes.

    Args:
        namespace: The namespace to extend. ``None`` creates a new
            ``SimpleNamespace``.
        legacy: Also register the lodash-up names (``toStr``, ``ucFirst``, ...).
        overwrite: When False, refuse to replace an existing entry.

    Returns:
        The extended namespace.

    Raises:
        NamespaceConflictError: If `overwrite` is False and an entry exists.
    """
    if namespace is None:
        namespace = SimpleNamespace()

    entries = _entries(legacy)

    if isinstance(namespace, MutableMapping):
        exists: Callable[[str], bool] = namespace.__contains__
        assign: Callable[[str, Any], None] = namespace.__setitem__
    else:
        exists = lambda name: hasattr(namespace, name)  # noqa: E731
        assign = lambda name, func: setattr(namespace, name, func)  # noqa: E731

    if not overwrite:
        for name in entries:
            if exists(name):
                raise NamespaceConflictError(name)

    for name, func in entries.items():
        assign(name, func)

    logger.debug(
        "Registered %d helpers on %s (legacy=%s)",
        len(entries),
        type(namespace).__name__,
        legacy,
    )
    return namespace
