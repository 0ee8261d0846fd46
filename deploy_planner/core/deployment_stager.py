"""Level-synchronized topological staging"""

import logging
from collections import deque
from typing import Deque, Dict, List

from .dependency_graph import DependencyGraph
from ..models.component import Component
from ..models.plan import NodeState, PairingTable, ResidualComponent, StagePlan
from ..utils.sorting import component_key


class DeploymentStager:
    """Assign components to ordered deployment stages

    Runs Kahn's algorithm one level at a time: every component whose
    dependencies are all placed joins the next stage. Paired tests never
    go out ahead of their subject; they are held back and placed in the
    same stage as the subject once it is placed. Components still unplaced
    when the queue runs dry are reported as residual and kept out of every
    group.
    """

    def __init__(self):
        self.logger = logging.getLogger(self.__class__.__name__)

    def stage(self, graph: DependencyGraph, pairing: PairingTable) -> StagePlan:
        """
        Stage a resolved graph

        Dependencies are removed from the graph as they are satisfied, so
        every placed component ends with an empty dependency list. The
        pairing table is consumed as subjects are placed.

        Args:
            graph: Graph after cycle resolution
            pairing: Pairing table from the test matcher

        Returns:
            StagePlan with groups, untested subjects and residual diagnostics
        """
        plan = StagePlan()
        dependents = graph.dependents()
        states: Dict[str, NodeState] = {cid: NodeState.UNSEEN for cid in graph.components}
        untested_seen = set()

        queue: Deque[str] = deque()
        for component_id, degree in graph.in_degree.items():
            if degree == 0:
                queue.append(component_id)
                states[component_id] = NodeState.QUEUED

        while queue:
            level: List[Component] = []

            # Only the nodes queued before this level started belong to it
            for _ in range(len(queue)):
                component_id = queue.popleft()
                if states[component_id] == NodeState.PLACED:
                    continue

                if pairing.pending_subject(component_id) is not None:
                    # Test waits for its subject
                    continue

                placed = [self._place(graph, component_id, level, states)]

                if pairing.is_subject(component_id):
                    test_id = pairing.consume(component_id)
                    if test_id is None:
                        if component_id not in untested_seen:
                            untested_seen.add(component_id)
                            plan.untested.append(component_id)
                    elif states[test_id] != NodeState.PLACED:
                        placed.append(self._place(graph, test_id, level, states))

                for placed_id in placed:
                    self._release_dependents(graph, placed_id, dependents, states, queue)

            if level:
                index = plan.add_group(sorted(level, key=component_key))
                self.logger.debug(f"Stage {index}: {len(level)} component(s)")

        plan.residual = self._collect_residual(graph, pairing, states)
        plan.unmatched_tests = pairing.unmatched_tests()

        self.logger.info(
            f"Staged {len(plan.assignments)} of {len(graph)} component(s) "
            f"into {plan.group_count} group(s)"
        )
        return plan

    def _place(self,
               graph: DependencyGraph,
               component_id: str,
               level: List[Component],
               states: Dict[str, NodeState]) -> str:
        """Put a component into the current level"""
        component = graph.components[component_id]
        graph.remove_dependencies(component_id, list(component.dependencies))
        states[component_id] = NodeState.PLACED
        level.append(component)
        return component_id

    def _release_dependents(self,
                            graph: DependencyGraph,
                            placed_id: str,
                            dependents: Dict[str, List[str]],
                            states: Dict[str, NodeState],
                            queue: Deque[str]) -> None:
        """Satisfy the placed component in everything that waits for it"""
        for dependent_id in dependents[placed_id]:
            if states[dependent_id] == NodeState.PLACED:
                continue
            if not graph.remove_dependencies(dependent_id, [placed_id]):
                continue
            if graph.in_degree[dependent_id] == 0 and states[dependent_id] == NodeState.UNSEEN:
                states[dependent_id] = NodeState.QUEUED
                queue.append(dependent_id)

    def _collect_residual(self,
                          graph: DependencyGraph,
                          pairing: PairingTable,
                          states: Dict[str, NodeState]) -> List[ResidualComponent]:
        """Describe every component that was never placed"""
        residual = []
        for component in graph:
            if states[component.id] == NodeState.PLACED:
                continue

            entry = ResidualComponent(
                id=component.id,
                name=component.name,
                type=component.type,
                in_degree=graph.in_degree[component.id],
                unmet_dependencies=[
                    (dep_id, graph.components[dep_id].name)
                    for dep_id in component.dependencies
                ],
                awaiting_subject=pairing.pending_subject(component.id)
            )
            residual.append(entry)
            self.logger.warning(f"Not staged: {entry.describe()}")

        return residual
