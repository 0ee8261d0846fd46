"""Tests for the public planner API."""

from __future__ import annotations

import pytest

import deploy_planner
from deploy_planner import Planner, ResidualCycleError, ValidationError, plan
from deploy_planner.models import Edge, OperationStatus


def test_plan_accepts_raw_records() -> None:
    result = plan([{"id": "1", "name": "A", "type": "ApexClass",
                    "ref_id": "2", "ref_name": "B", "ref_type": "ApexClass"}])

    assert [[c.name for c in g] for g in result.groups] == [["B"], ["A"]]
    assert result.status == OperationStatus.SUCCESS


def test_plan_accepts_mixed_edges_and_records(edge) -> None:
    result = plan([
        edge("1", "A", "2", "B"),
        {"MetadataComponentId": "2", "MetadataComponentName": "B",
         "RefMetadataComponentId": "3", "RefMetadataComponentName": "C"},
    ])

    assert [[c.id for c in g] for g in result.groups] == [["3"], ["2"], ["1"]]


def test_invalid_records_raise_validation_error() -> None:
    with pytest.raises(ValidationError):
        plan([["not", "a", "record"]])


def test_residual_policy_option_accepts_strings(three_cycle_edges) -> None:
    with pytest.raises(ResidualCycleError):
        plan(three_cycle_edges, residual_policy="fail")


def test_planner_with_config_dict_and_catalog_document(catalog_document) -> None:
    planner = Planner({"manifest": {"xml_declaration": True}})

    result = planner.plan([Edge("1", "Alpha", "ApexClass", "2", "beta", "ApexClass")], catalog_document)

    assert len(result.manifests) == 4
    assert result.manifests[0].text.startswith("<?xml")


def test_catalog_warnings_reach_the_result(catalog_document) -> None:
    catalog_document["members"].append({"name": "Orphan", "type": "Flow"})

    result = Planner().plan([], catalog_document)

    assert any("Orphan" in w for w in result.warnings)
    assert result.groups == []


def test_plan_files(write_json, write_yaml, record, catalog_document) -> None:
    edges_path = write_json("deps.json", [record("1", "Alpha", "2", "beta")])
    catalog_path = write_yaml("catalog.yaml", catalog_document)

    result = Planner().plan_files(edges_path, catalog_path, "force")

    assert result.plan.stage_of("1") == 1
    assert [m.label for m in result.manifests] == ["all", "group-0", "group-1", "group-2"]


def test_from_config_file(tmp_path) -> None:
    path = tmp_path / "planner.yaml"
    path.write_text("similarity_threshold: 80\n", encoding="utf-8")

    planner = Planner.from_config_file(path)

    assert planner.config.pairing.similarity_threshold == 80


def test_package_exports_version() -> None:
    assert deploy_planner.__version__ == "0.3.0"
