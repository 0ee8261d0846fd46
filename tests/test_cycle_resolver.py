"""Tests for direct cycle removal."""

from __future__ import annotations

from deploy_planner.core import CycleResolver, DependencyGraph, DeploymentStager
from deploy_planner.models import PairingTable


def test_first_visited_side_drops_back_edge(edge) -> None:
    graph = DependencyGraph.build([
        edge("a", "Account", "b", "AccountShare"),
        edge("b", "AccountShare", "a", "Account"),
    ])

    removed = CycleResolver().remove_direct_cycles(graph)

    assert removed == [("a", "b")]
    assert graph.components["a"].dependencies == []
    assert graph.components["b"].dependencies == ["a"]
    assert graph.in_degree == {"a": 0, "b": 1}


def test_mutual_pair_is_fully_staged(edge) -> None:
    graph = DependencyGraph.build([
        edge("a", "Account", "b", "AccountShare", type="CustomObject", ref_type="CustomObject"),
        edge("b", "AccountShare", "a", "Account", type="CustomObject", ref_type="CustomObject"),
    ])
    CycleResolver().remove_direct_cycles(graph)

    plan = DeploymentStager().stage(graph, PairingTable())

    assert plan.residual == []
    assert [[c.id for c in group] for group in plan.groups] == [["a"], ["b"]]


def test_chains_are_left_alone(chain_edges) -> None:
    graph = DependencyGraph.build(chain_edges)

    assert CycleResolver().remove_direct_cycles(graph) == []
    assert graph.edges() == [("1", "2"), ("2", "3")]


def test_longer_cycles_are_not_broken(three_cycle_edges) -> None:
    graph = DependencyGraph.build(three_cycle_edges)
    before = graph.edges()

    assert CycleResolver().remove_direct_cycles(graph) == []
    assert graph.edges() == before
