"""Unit tests for dashup.namespace."""

import logging
from types import ModuleType, SimpleNamespace

import pytest

import dashup
from dashup.errors import NamespaceConflictError
from dashup.namespace import HELPERS, LEGACY_ALIASES, extend


def test_helpers_cover_public_api():
    """Every public helper exported by the package is registered."""
    exported = set(dashup.__all__) - {"__version__", "extend"}
    assert set(HELPERS) == exported
    for name, func in HELPERS.items():
        assert getattr(dashup, name) is func


def test_legacy_aliases_point_to_helpers():
    """Every alias resolves to a registered helper."""
    assert set(LEGACY_ALIASES.values()) <= set(HELPERS)


def test_extend_creates_namespace_by_default():
    """Without a namespace, a fresh SimpleNamespace is returned."""
    ns = extend()
    assert isinstance(ns, SimpleNamespace)
    assert ns.slugify("Héllo World!") == "hello-world"
    assert not hasattr(ns, "toStr")


def test_extend_module_attributes():
    """Modules and objects receive attributes."""
    module = ModuleType("utils")
    assert extend(module) is module
    assert module.bytes_to_human_units(1536) == "1.50 KB"


def test_extend_mapping_items():
    """Mutable mappings receive items and keep their own entries."""
    registry = {"own": len}
    assert extend(registry) is registry
    assert registry["own"] is len
    assert registry["pascal_case"]("foo bar") == "FooBar"


def test_extend_legacy_names():
    """Legacy names are opt-in."""
    ns = extend(legacy=True)
    assert ns.toByteUnits(512) == "512 bytes"
    assert ns.placeholder("Hi {name}", {"name": "Amy"}) == "Hi Amy"
    assert ns.ucFirst is HELPERS["upper_first"]


def test_extend_overwrites_by_default():
    """Existing entries are replaced unless told otherwise."""
    ns = SimpleNamespace(slugify=None)
    extend(ns)
    assert ns.slugify is HELPERS["slugify"]


@pytest.mark.parametrize(
    "namespace", [SimpleNamespace(slugify=None), {"slugify": None}], ids=["attr", "item"]
)
def test_extend_refuses_conflicts(namespace):
    """With overwrite=False, an existing entry aborts before any change."""
    with pytest.raises(NamespaceConflictError, match="slugify"):
        extend(namespace, overwrite=False)
    if isinstance(namespace, dict):
        assert namespace == {"slugify": None}
    else:
        assert vars(namespace) == {"slugify": None}


def test_extend_logs_registration(caplog):
    """Registration is logged at DEBUG level."""
    caplog.set_level(logging.DEBUG, logger="dashup.namespace")
    extend({}, legacy=True)
    assert any(
        record.name == "dashup.namespace"
        and record.levelno == logging.DEBUG
        and "Registered" in record.getMessage()
        for record in caplog.records
    )
