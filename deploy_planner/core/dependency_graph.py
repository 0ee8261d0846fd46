"""Dependency graph built from raw edge facts"""

import logging
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from ..models.component import Component, Edge


class DependencyGraph:
    """Component registry with dependency lists and in-degree counts

    ``in_degree[id]`` always equals the number of entries in
    ``components[id].dependencies``. Iteration follows first-seen order so
    every later pass is deterministic.
    """

    def __init__(self):
        self.components: Dict[str, Component] = {}
        self.in_degree: Dict[str, int] = {}
        self.warnings: List[str] = []
        self.logger = logging.getLogger(self.__class__.__name__)

    @classmethod
    def build(cls, edges: Iterable[Edge]) -> 'DependencyGraph':
        """
        Build a graph from dependency edges

        Args:
            edges: Edges meaning "id depends on ref_id"

        Returns:
            DependencyGraph instance
        """
        graph = cls()
        for index, edge in enumerate(edges):
            graph.add_edge(edge, index)

        graph.logger.debug(
            f"Built graph: {len(graph.components)} components, "
            f"{graph.edge_count} dependencies, {len(graph.warnings)} warnings"
        )
        return graph

    def add_edge(self, edge: Edge, index: Optional[int] = None) -> bool:
        """
        Add one edge to the graph

        Both endpoints are registered on first sight. Self references and
        duplicate pairs leave dependencies and in-degree unchanged.

        Returns:
            True if a new dependency was recorded
        """
        if not edge.is_complete:
            where = f" #{index}" if index is not None else ""
            message = (
                f"Skipping malformed edge{where}: missing "
                f"{'id' if not edge.id else 'ref_id'} ({edge.name} -> {edge.ref_name})"
            )
            self.warnings.append(message)
            self.logger.warning(message)
            return False

        component = self.ensure_component(edge.id, edge.name, edge.type)
        self.ensure_component(edge.ref_id, edge.ref_name, edge.ref_type)

        if edge.is_self_reference:
            return False

        if component.add_dependency(edge.ref_id):
            self.in_degree[edge.id] += 1
            return True
        return False

    def ensure_component(self, component_id: str, name: Optional[str], component_type: Optional[str]) -> Component:
        """Get a component, creating a stub the first time it is seen"""
        component = self.components.get(component_id)
        if component is None:
            component = Component(
                id=component_id,
                name=name or component_id,
                type=component_type or ""
            )
            self.components[component_id] = component
            self.in_degree[component_id] = 0
        return component

    def remove_dependencies(self, component_id: str, ref_ids: Iterable[str]) -> int:
        """Drop dependencies of a component and keep in-degree in step"""
        removed = self.components[component_id].remove_dependencies(ref_ids)
        self.in_degree[component_id] -= removed
        return removed

    def get(self, component_id: str) -> Optional[Component]:
        return self.components.get(component_id)

    def dependents(self) -> Dict[str, List[str]]:
        """Reverse adjacency: id -> ids of components depending on it"""
        reverse: Dict[str, List[str]] = {cid: [] for cid in self.components}
        for component in self.components.values():
            for dep_id in component.dependencies:
                reverse[dep_id].append(component.id)
        return reverse

    def edges(self) -> List[Tuple[str, str]]:
        """Snapshot of current (component, dependency) pairs"""
        return [
            (component.id, dep_id)
            for component in self.components.values()
            for dep_id in component.dependencies
        ]

    @property
    def edge_count(self) -> int:
        return sum(len(c.dependencies) for c in self.components.values())

    def __contains__(self, component_id: str) -> bool:
        return component_id in self.components

    def __iter__(self) -> Iterator[Component]:
        return iter(self.components.values())

    def __len__(self) -> int:
        return len(self.components)
