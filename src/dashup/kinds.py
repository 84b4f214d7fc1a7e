"""Discriminated classification of arbitrary Python values.

Helpers that need to know whether a value "is an object" classify it first and
branch on the resulting `ValueKind`, instead of probing class names.
"""

from collections.abc import Mapping, Sequence, Set
from enum import Enum
from numbers import Number
from typing import Any


class ValueKind(Enum):
    """Coarse category of a value.

    Kinds:
    - NULL: ``None``.
    - SCALAR: strings, bytes, numbers and booleans.
    - SEQUENCE: non-string sequences and sets.
    - MAPPING: any ``collections.abc.Mapping``.
    - RECORD: any other instance; its fields are read as attributes.
    """

    NULL = "null"
    SCALAR = "scalar"
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    RECORD = "record"


OBJECT_KINDS = frozenset({ValueKind.SEQUENCE, ValueKind.MAPPING, ValueKind.RECORD})


def classify(value: Any) -> ValueKind:
    """Return the `ValueKind` of `value`.

    Args:
        value: Any value.

    Returns:
        ValueKind: The category `value` belongs to.
    """
    if value is None:
        return ValueKind.NULL
    if isinstance(value, (str, bytes, bytearray, Number)):
        return ValueKind.SCALAR
    if isinstance(value, Mapping):
        return ValueKind.MAPPING
    if isinstance(value, (Sequence, Set)):
        return ValueKind.SEQUENCE
    return ValueKind.RECORD


def is_object(value: Any) -> bool:
    """Return True if `value` is a container or a record (not None, not a scalar)."""
    return classify(value) in OBJECT_KINDS


def get_field(value: Any, name: str, default: Any = None) -> Any:
    """Read the field `name` from a mapping or a record.

    Mappings are read by key and records by attribute. Any other kind of value
    has no fields and yields `default`.
    """
    kind = classify(value)
    if kind is ValueKind.MAPPING:
        return value.get(name, default)
    if kind is ValueKind.RECORD:
        return getattr(value, name, default)
    return default
