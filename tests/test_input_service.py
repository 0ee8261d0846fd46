"""Tests for edge list and catalog loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from deploy_planner.api import InputError, ValidationError
from deploy_planner.constants import ComponentOption, ErrorCode
from deploy_planner.models import PlannerConfig
from deploy_planner.services import InputService


def test_load_edges_accepts_records_wrapper(write_json, record) -> None:
    path = write_json("deps.json", {
        "totalSize": 1,
        "records": [record("1", "OrderService", "2", "Invoice__c", ref_type="CustomObject")],
    })

    edges = InputService().load_edges(path)

    assert len(edges) == 1
    assert edges[0].id == "1"
    assert edges[0].ref_type == "CustomObject"


def test_parse_edges_accepts_snake_case_and_numeric_ids() -> None:
    edges = InputService().parse_edges([
        {"id": 10, "name": "A", "type": "ApexClass", "ref_id": 20, "ref_name": "B", "ref_type": "ApexClass"},
    ])

    assert edges[0].id == "10"
    assert edges[0].ref_id == "20"


def test_blank_ids_become_missing_and_reach_the_graph_as_malformed() -> None:
    edges = InputService().parse_edges([{"id": "1", "name": "A", "ref_id": ""}])

    assert edges[0].ref_id is None
    assert not edges[0].is_complete


def test_schema_errors_are_collected(write_json) -> None:
    path = write_json("deps.json", [
        {"MetadataComponentId": ["nested"]},
        "not a record",
    ])

    with pytest.raises(ValidationError) as exc_info:
        InputService().load_edges(path)

    assert exc_info.value.error_code == ErrorCode.SCHEMA_VALIDATION_FAILED
    assert len(exc_info.value.errors) == 2
    assert exc_info.value.errors[0].startswith("0/MetadataComponentId")


def test_missing_file_is_input_error(tmp_path: Path) -> None:
    with pytest.raises(InputError) as exc_info:
        InputService().load_edges(tmp_path / "nope.json")

    assert exc_info.value.error_code == ErrorCode.INPUT_NOT_FOUND


def test_invalid_json_is_input_error(tmp_path: Path) -> None:
    path = tmp_path / "deps.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(InputError) as exc_info:
        InputService().load_edges(path)

    assert exc_info.value.error_code == ErrorCode.INPUT_FORMAT_ERROR


def test_load_catalog_from_yaml(write_yaml, catalog_document) -> None:
    path = write_yaml("catalog.yaml", catalog_document)

    catalog = InputService().load_catalog(path)

    assert catalog.version == "59.0"
    assert catalog.type_count == 3
    assert catalog.member_count == 5
    assert catalog.get_type("ApexClass").member_keys == [
        "ApexClass:Zeta", "ApexClass:beta", "ApexClass:Alpha", "ApexClass:AlphaTest",
    ]
    assert catalog.get_type("ApexClass").has_meta_file


def test_member_of_undeclared_type_is_skipped_with_warning(catalog_document) -> None:
    catalog_document["members"].append({"name": "Orphan", "type": "Flow"})
    service = InputService()

    catalog = service.parse_catalog(catalog_document)

    assert catalog.get_member("Flow:Orphan") is None
    assert any("Flow" in w for w in service.warnings)


def test_unusual_catalog_version_is_a_warning(catalog_document) -> None:
    catalog_document["version"] = "v59"
    service = InputService()

    catalog = service.parse_catalog(catalog_document)

    assert catalog.version == "v59"
    assert any("v59" in w for w in service.warnings)


def test_catalog_without_types_is_rejected() -> None:
    with pytest.raises(ValidationError) as exc_info:
        InputService().parse_catalog({"version": "59.0"})

    assert any("types" in e for e in exc_info.value.errors)


def test_component_option_from_config_filters_members(catalog_document) -> None:
    catalog_document["members"].append(
        {"name": "pkg__Helper", "type": "ApexClass", "namespace_prefix": "pkg"}
    )
    config = PlannerConfig(component_option=ComponentOption.NONE)

    catalog = InputService(config).parse_catalog(catalog_document)

    assert catalog.get_member("ApexClass:pkg__Helper") is None
    assert catalog.member_count == 5


def test_document_component_option_wins(catalog_document) -> None:
    catalog_document["component_option"] = "wildcard_only"
    config = PlannerConfig(component_option=ComponentOption.ALL)

    catalog = InputService(config).parse_catalog(catalog_document)

    assert catalog.member_count == 0
    assert all(not t.member_keys for t in catalog.types.values())
