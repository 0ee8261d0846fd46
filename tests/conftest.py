from __future__ import annotations

import json
from pathlib import Path
from typing import Callable, Dict, List

import pytest
import yaml

from deploy_planner.core import DependencyGraph
from deploy_planner.models import ComponentCatalog, Edge


def make_edge(id: str, name: str, ref_id: str, ref_name: str,
              type: str = "ApexClass", ref_type: str = "ApexClass") -> Edge:
    return Edge(id=id, name=name, type=type, ref_id=ref_id, ref_name=ref_name, ref_type=ref_type)


def make_record(id: str, name: str, ref_id: str, ref_name: str,
                type: str = "ApexClass", ref_type: str = "ApexClass") -> Dict[str, str]:
    """Dependency record with the remote query field names."""
    return {
        "MetadataComponentId": id,
        "MetadataComponentName": name,
        "MetadataComponentType": type,
        "RefMetadataComponentId": ref_id,
        "RefMetadataComponentName": ref_name,
        "RefMetadataComponentType": ref_type,
    }


@pytest.fixture
def edge() -> Callable[..., Edge]:
    """Factory for dependency edges ("id depends on ref_id")."""
    return make_edge


@pytest.fixture
def record() -> Callable[..., Dict[str, str]]:
    return make_record


@pytest.fixture
def chain_edges() -> List[Edge]:
    """Service -> Repository -> Invoice__c"""
    return [
        make_edge("1", "OrderService", "2", "OrderRepository"),
        make_edge("2", "OrderRepository", "3", "Invoice__c", ref_type="CustomObject"),
    ]


@pytest.fixture
def three_cycle_edges() -> List[Edge]:
    """A -> B -> C -> A plus an independent component."""
    return [
        make_edge("a", "Alpha", "b", "Beta", type="CustomObject", ref_type="CustomObject"),
        make_edge("b", "Beta", "c", "Gamma", type="CustomObject", ref_type="CustomObject"),
        make_edge("c", "Gamma", "a", "Alpha", type="CustomObject", ref_type="CustomObject"),
        make_edge("e", "Epsilon", "f", "Zeta", type="CustomObject", ref_type="CustomObject"),
    ]


@pytest.fixture
def graph_of() -> Callable[..., DependencyGraph]:
    """Build a graph from edges, optionally seeding isolated components first."""

    def _build(edges=(), components=()) -> DependencyGraph:
        graph = DependencyGraph()
        for component_id, name, component_type in components:
            graph.ensure_component(component_id, name, component_type)
        for index, item in enumerate(edges):
            graph.add_edge(item, index)
        return graph

    return _build


@pytest.fixture
def catalog_document() -> Dict:
    return {
        "version": "59.0",
        "types": [
            {"name": "CustomObject"},
            {"name": "ApexClass", "suffix": "cls", "meta_file": True},
            {"name": "Layout"},
        ],
        "members": [
            {"name": "Zeta", "type": "ApexClass", "id": "3"},
            {"name": "beta", "type": "ApexClass", "id": "2"},
            {"name": "Alpha", "type": "ApexClass", "id": "1"},
            {"name": "AlphaTest", "type": "ApexClass", "id": "4"},
            {"name": "Invoice__c", "type": "CustomObject", "id": "5"},
        ],
    }


@pytest.fixture
def catalog(catalog_document) -> ComponentCatalog:
    return ComponentCatalog.from_dict(catalog_document)


@pytest.fixture
def write_json(tmp_path: Path) -> Callable[[str, object], Path]:
    def _write(name: str, data: object) -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def write_yaml(tmp_path: Path) -> Callable[[str, object], Path]:
    def _write(name: str, data: object) -> Path:
        path = tmp_path / name
        path.write_text(yaml.safe_dump(data, sort_keys=False), encoding="utf-8")
        return path

    return _write
