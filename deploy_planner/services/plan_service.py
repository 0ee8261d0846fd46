# deploy_planner/services/plan_service.py
"""Resolution pipeline service"""

import logging
from typing import Iterable, List, Optional

from ..api.exceptions import ResidualCycleError
from ..constants import ErrorCode, ResidualPolicy, UNASSIGNED_STAGE
from ..core import (
    DependencyGraph,
    CycleResolver,
    TestAffinityMatcher,
    DeploymentStager,
    ManifestBuilder,
)
from ..models.catalog import ComponentCatalog
from ..models.component import Edge
from ..models.config import PlannerConfig
from ..models.manifest import ManifestResult
from ..models.plan import StagePlan
from ..models.result import OperationStatus, PlanResult
from ..utils.sorting import component_key


class PlanService:
    """Run graph build, cycle removal, test pairing, staging and manifests

    Every call to ``resolve`` builds its own graph from the given edges, so
    one service instance can be reused across runs.
    """

    def __init__(self, config: Optional[PlannerConfig] = None):
        """Initialize plan service

        Args:
            config: Planner configuration (defaults if not provided)
        """
        self.config = config or PlannerConfig()
        self.cycle_resolver = CycleResolver()
        self.matcher = TestAffinityMatcher(self.config.pairing)
        self.stager = DeploymentStager()
        self.manifest_builder = ManifestBuilder(self.config.manifest, self.config.pairing)
        self.logger = logging.getLogger(self.__class__.__name__)

    def resolve(self,
                edges: Iterable[Edge],
                residual_policy: Optional[ResidualPolicy] = None) -> PlanResult:
        """
        Resolve edges into ordered deployment groups

        Args:
            edges: Dependency edges
            residual_policy: Override for the configured residual policy

        Returns:
            PlanResult; status is PARTIAL when components were left over

        Raises:
            ResidualCycleError: If components are left over and the policy
                is ``fail``
        """
        policy = residual_policy or self.config.residual_policy
        result = PlanResult(status=OperationStatus.IN_PROGRESS)

        graph = DependencyGraph.build(edges)
        for warning in graph.warnings:
            result.add_warning(warning)

        result.removed_cycles = self.cycle_resolver.remove_direct_cycles(graph)
        pairing = self.matcher.match(graph)
        plan = self.stager.stage(graph, pairing)
        result.plan = plan

        for test_id in plan.unmatched_tests:
            message = f"Test {graph.components[test_id].name} ({test_id}) has no matching subject"
            result.add_warning(message)
            self.logger.warning(message)

        if plan.untested:
            self.logger.info(f"{len(plan.untested)} subject(s) without a matching test")

        if plan.has_residual:
            for entry in plan.residual:
                result.add_error(
                    ErrorCode.RESIDUAL_CYCLE,
                    f"Not staged: {entry.describe()}",
                    **entry.to_dict()
                )

            if policy == ResidualPolicy.FAIL:
                result.complete(OperationStatus.FAILED)
                raise ResidualCycleError(plan.residual)

            if policy == ResidualPolicy.FORCE:
                result.forced_group = self._force_residual(graph, plan)
                result.add_warning(
                    f"Forced {len(plan.residual)} unstaged component(s) into final group "
                    f"{result.forced_group + 1}"
                )
            else:
                result.add_warning(f"{len(plan.residual)} component(s) left unstaged")

            result.message = f"{plan.group_count} group(s), {len(plan.residual)} unstaged"
            result.complete(OperationStatus.PARTIAL)
        else:
            result.message = f"{plan.group_count} group(s)"
            result.complete(OperationStatus.SUCCESS)

        return result

    def build_manifests(self, catalog: ComponentCatalog, plan: StagePlan) -> List[ManifestResult]:
        """
        Build the full manifest set

        Order: unfiltered, unassigned (-1), then one per stage.

        Args:
            catalog: Type catalog with resolved members
            plan: Staging result

        Returns:
            List of manifest results
        """
        manifests = [self.manifest_builder.build(catalog, plan.assignments)]
        for group in range(UNASSIGNED_STAGE, plan.group_count):
            manifests.append(self.manifest_builder.build(catalog, plan.assignments, group))
        return manifests

    def run(self,
            edges: Iterable[Edge],
            catalog: Optional[ComponentCatalog] = None,
            residual_policy: Optional[ResidualPolicy] = None) -> PlanResult:
        """Resolve and, when a catalog is given, build the manifest set"""
        result = self.resolve(edges, residual_policy)
        if catalog is not None:
            result.manifests = self.build_manifests(catalog, result.plan)
        return result

    def _force_residual(self, graph: DependencyGraph, plan: StagePlan) -> int:
        """Append residual components as one catch-all group"""
        components = []
        for entry in plan.residual:
            component = graph.components[entry.id]
            graph.remove_dependencies(component.id, list(component.dependencies))
            components.append(component)
        return plan.add_group(sorted(components, key=component_key))
