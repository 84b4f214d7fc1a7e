"""Unit tests for dashup.kinds."""

from collections import OrderedDict
from types import MappingProxyType, SimpleNamespace

import pytest

from dashup.kinds import ValueKind, classify, get_field, is_object


@pytest.mark.parametrize(
    "value, kind",
    [
        (None, ValueKind.NULL),
        ("text", ValueKind.SCALAR),
        (b"raw", ValueKind.SCALAR),
        (42, ValueKind.SCALAR),
        (1.5, ValueKind.SCALAR),
        (True, ValueKind.SCALAR),
        ([1, 2], ValueKind.SEQUENCE),
        ((1, 2), ValueKind.SEQUENCE),
        ({1, 2}, ValueKind.SEQUENCE),
        ({"a": 1}, ValueKind.MAPPING),
        (OrderedDict(a=1), ValueKind.MAPPING),
        (MappingProxyType({"a": 1}), ValueKind.MAPPING),
        (SimpleNamespace(a=1), ValueKind.RECORD),
        (object(), ValueKind.RECORD),
    ],
)
def test_classify(value, kind):
    """Values are classified structurally."""
    assert classify(value) is kind


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, False),
        ("", False),
        (0, False),
        ([], True),
        ({}, True),
        (SimpleNamespace(), True),
    ],
)
def test_is_object(value, expected):
    """Empty containers are still objects; None and scalars are not."""
    assert is_object(value) is expected


def test_get_field_reads_mapping_keys_and_record_attributes():
    """Mappings are read by key, records by attribute."""
    assert get_field({"id": 7}, "id") == 7
    assert get_field(SimpleNamespace(id=8), "id") == 8


def test_get_field_default():
    """Missing fields and field-less values yield the default."""
    assert get_field({}, "id") is None
    assert get_field(SimpleNamespace(), "id", "x") == "x"
    assert get_field("id", "id", "x") == "x"
    assert get_field([1], "id") is None
