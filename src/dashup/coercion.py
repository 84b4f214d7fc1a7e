"""Type coercion helpers.

Resolve ambiguous inputs to canonical shapes: a type tag, a resource id, a
request payload, a string or a decoded JSON object. Also provides a comparison
driven by an operator string.
"""

import datetime
import json
import operator as op
import re
from collections.abc import Callable, Mapping, Sequence, Set
from numbers import Number
from typing import Any

from dashup.errors import ParseError, UnsupportedOperatorError
from dashup.kinds import ValueKind, classify, get_field, is_object

FORM_DATA_FIELD = "_form_data"


def _strict_eq(v1: Any, v2: Any) -> bool:
    return type(v1) is type(v2) and v1 == v2


def _strict_ne(v1: Any, v2: Any) -> bool:
    return not _strict_eq(v1, v2)


OPERATORS: dict[str, Callable[[Any, Any], bool]] = {
    "===": _strict_eq,
    "!==": _strict_ne,
    ">": op.gt,
    "<": op.lt,
    ">=": op.ge,
    "<=": op.le,
    "==": op.eq,
    "!=": op.ne,
}


def resolve_type_name(value: Any) -> str:
    """Return a lowercase type tag for `value`.

    The tag is derived from structural ``isinstance`` checks against abstract
    base classes, so subclasses and registered virtual subclasses classify the
    same way as the builtins they stand in for.

    Args:
        value: Any value.

    Returns:
        str: One of ``"null"``, ``"boolean"``, ``"number"``, ``"string"``,
        ``"bytes"``, ``"error"``, ``"regexp"``, ``"date"``, ``"object"``,
        ``"set"``, ``"array"`` or ``"function"``.
    """
    # bool is a Number, so it is checked first
    checks: tuple[tuple[type | tuple[type, ...], str], ...] = (
        (bool, "boolean"),
        (Number, "number"),
        (str, "string"),
        ((bytes, bytearray), "bytes"),
        (BaseException, "error"),
        (re.Pattern, "regexp"),
        ((datetime.date, datetime.time), "date"),
        (Mapping, "object"),
        (Set, "set"),
        (Sequence, "array"),
    )
    if value is None:
        return "null"
    for types, name in checks:
        if isinstance(value, types):
            return name
    if callable(value):
        return "function"
    return "object"


def resolve_id(resource_or_id: Any) -> Any:
    """Resolve the resource ID from a resource object or a resource ID.

    Args:
        resource_or_id: A resource (mapping or record) or an ID.

    Returns:
        The ``id`` field of the resource (``_id`` when ``id`` is falsy), or
        the input itself when it is not an object.
    """
    if is_object(resource_or_id):
        return get_field(resource_or_id, "id") or get_field(resource_or_id, "_id")
    return resource_or_id


def resolve_payload(resource: Any) -> Any:
    """Return the payload to transmit for `resource` (post, put and patch).

    A form-data body can be carried in the resource's ``_form_data`` field, in
    which case it replaces the resource itself.
    """
    return get_field(resource, FORM_DATA_FIELD) or resource


def coerce_to_string(value: Any) -> str:
    """Ensure that `value` is a string.

    Objects and ``None`` are serialized as JSON; anything else goes through
    ``str()``. Inside the JSON, sets become lists and values JSON cannot
    encode (dates, records, ...) become their ``str()``.
    """
    if value is None or is_object(value):
        return json.dumps(value, default=_json_fallback)
    return str(value)


def _json_fallback(value: Any) -> Any:
    if isinstance(value, Set):
        return list(value)
    return str(value)


def coerce_to_object(value: Any) -> Any:
    """Ensure that `value` is an object.

    Args:
        value: An object, or a JSON document as ``str``/``bytes``.

    Returns:
        `value` unchanged when it is already an object (or ``None``), else the
        decoded JSON value.

    Raises:
        ParseError: If `value` is not valid JSON or is a non-string scalar.
    """
    if classify(value) is not ValueKind.SCALAR:
        return value
    try:
        return json.loads(value)
    except (json.JSONDecodeError, TypeError, UnicodeDecodeError) as e:
        raise ParseError(value) from e


def compare_with_operator(v1: Any, operator: str, v2: Any) -> bool:
    """Compare `v1` and `v2` with `operator`.

    ``===``/``!==`` are strict: both operands must have the same type and be
    equal. ``==``/``!=`` use plain Python equality, so ``1 == 1.0``. Ordering
    operators use native ordering; unorderable operands raise ``TypeError``.

    Args:
        v1: Left operand.
        operator: One of ``===``, ``!==``, ``>``, ``<``, ``>=``, ``<=``,
            ``==``, ``!=``.
        v2: Right operand.

    Returns:
        bool: The comparison result.

    Raises:
        UnsupportedOperatorError: If `operator` is not supported.
    """
    if (compare := OPERATORS.get(operator)) is None:
        raise UnsupportedOperatorError(operator)
    return bool(compare(v1, v2))
