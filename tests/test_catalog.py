"""Tests for the component type catalog."""

from __future__ import annotations

import pytest

from deploy_planner.api import UnknownTypeError
from deploy_planner.constants import ComponentOption
from deploy_planner.models import CatalogMember, ComponentCatalog, ComponentType


def test_from_dict_skips_members_of_undeclared_types(caplog) -> None:
    catalog = ComponentCatalog.from_dict({
        "version": "59.0",
        "types": [{"name": "ApexClass"}],
        "members": [
            {"name": "X", "type": "Ghost"},
            {"name": "OrderService", "type": "ApexClass", "id": "1"},
        ],
    })

    assert catalog.get_member("Ghost:X") is None
    assert catalog.get_type("Ghost") is None
    assert catalog.get_type("ApexClass").member_keys == ["ApexClass:OrderService"]
    assert len(catalog.warnings) == 1
    assert "Ghost" in catalog.warnings[0]
    assert "Ghost:X" in caplog.text


def test_add_member_rejects_undeclared_type() -> None:
    catalog = ComponentCatalog(version="59.0")

    with pytest.raises(UnknownTypeError):
        catalog.add_member("Ghost", CatalogMember(key="Ghost:X", name="X", type="Ghost"))


def test_from_dict_option_argument_applies_when_document_has_none() -> None:
    document = {
        "version": "59.0",
        "types": [{"name": "ApexClass"}],
        "members": [{"name": "pkg__Helper", "type": "ApexClass", "namespace_prefix": "pkg"}],
    }

    assert ComponentCatalog.from_dict(document, ComponentOption.NONE).member_count == 0
    assert ComponentCatalog.from_dict(document).member_count == 1

    document["component_option"] = "all"
    assert ComponentCatalog.from_dict(document, ComponentOption.NONE).member_count == 1


def test_child_types_are_registered_with_parent() -> None:
    catalog = ComponentCatalog(version="59.0")
    catalog.add_type(ComponentType(name="CustomObject", child_type_names=["CustomField"]))

    assert catalog.get_type("CustomField").parent_type == "CustomObject"
    assert catalog.type_count == 2


def test_duplicate_member_keys_are_recorded_once() -> None:
    catalog = ComponentCatalog(version="59.0")
    catalog.add_type(ComponentType(name="ApexClass"))
    member = CatalogMember(key="ApexClass:A", name="A", type="ApexClass")

    assert catalog.add_member("ApexClass", member) is True
    assert catalog.add_member("ApexClass", member) is False
    assert catalog.get_type("ApexClass").member_keys == ["ApexClass:A"]
