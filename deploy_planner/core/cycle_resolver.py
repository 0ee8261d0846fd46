"""Direct (two-node) cycle removal"""

import logging
from typing import List, Tuple

from .dependency_graph import DependencyGraph


class CycleResolver:
    """Break mutual A <-> B dependencies in place

    Only direct cycles are handled. The component visited first drops its
    edge to the other; the other keeps its edge, so the pair can still be
    ordered. Longer cycles are left for the stager to report.
    """

    def __init__(self):
        self.logger = logging.getLogger(self.__class__.__name__)

    def remove_direct_cycles(self, graph: DependencyGraph) -> List[Tuple[str, str]]:
        """
        Remove direct cycles from the graph

        Args:
            graph: Graph to mutate

        Returns:
            Removed (component id, dependency id) pairs in visit order
        """
        removed: List[Tuple[str, str]] = []

        for component_id in list(graph.components):
            component = graph.components[component_id]
            back_edges = [
                dep_id for dep_id in component.dependencies
                if component_id in graph.components[dep_id].dependencies
            ]
            if not back_edges:
                continue

            graph.remove_dependencies(component_id, back_edges)
            for dep_id in back_edges:
                removed.append((component_id, dep_id))
                self.logger.debug(
                    f"Broke direct cycle: {component.key} no longer waits for "
                    f"{graph.components[dep_id].key}"
                )

        if removed:
            self.logger.info(f"Removed {len(removed)} direct cycle edge(s)")
        return removed
