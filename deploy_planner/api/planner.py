"""Planner API for resolution runs"""

from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

from ..constants import ResidualPolicy
from ..models import ComponentCatalog, Edge, PlanResult, PlannerConfig
from ..services import ConfigService, InputService, PlanService


class Planner:
    """Planner class for deployment planning"""

    def __init__(self, config: Optional[Union[PlannerConfig, Dict[str, Any]]] = None):
        """
        Initialize planner

        Args:
            config: PlannerConfig or configuration dictionary (defaults
                if not provided)
        """
        if isinstance(config, dict):
            config = PlannerConfig.from_dict(config)
        self.config = config or PlannerConfig()
        self.input_service = InputService(self.config)
        self.plan_service = PlanService(self.config)

    @classmethod
    def from_config_file(cls, config_path: Optional[Path] = None) -> 'Planner':
        """
        Create a planner from a YAML configuration file

        Args:
            config_path: Config file (falls back to the environment and
                working directory lookup)

        Returns:
            Planner instance
        """
        return cls(ConfigService(config_path).load_config())

    def plan(self,
             edges: Iterable[Union[Edge, Dict[str, Any]]],
             catalog: Optional[Union[ComponentCatalog, Dict[str, Any]]] = None,
             residual_policy: Optional[Union[ResidualPolicy, str]] = None) -> PlanResult:
        """
        Plan deployment groups

        Args:
            edges: Edge objects or raw dependency records
            catalog: ComponentCatalog or catalog document; when given the
                manifest set is built too
            residual_policy: Override for the configured residual policy

        Returns:
            PlanResult

        Raises:
            ValidationError: If raw records or the catalog document are invalid
            ResidualCycleError: If components are left over under the
                ``fail`` policy
        """
        edge_list = self._normalize_edges(edges)

        if isinstance(catalog, dict):
            catalog = self.input_service.parse_catalog(catalog)

        if isinstance(residual_policy, str):
            residual_policy = ResidualPolicy(residual_policy)

        result = self.plan_service.run(edge_list, catalog, residual_policy)
        for warning in self.input_service.warnings:
            result.add_warning(warning)
        return result

    def plan_files(self,
                   edges_path: Union[str, Path],
                   catalog_path: Optional[Union[str, Path]] = None,
                   residual_policy: Optional[Union[ResidualPolicy, str]] = None) -> PlanResult:
        """
        Plan from an edge list file and an optional catalog file

        Args:
            edges_path: JSON edge list
            catalog_path: YAML or JSON catalog
            residual_policy: Override for the configured residual policy

        Returns:
            PlanResult
        """
        edges = self.input_service.load_edges(Path(edges_path))
        catalog = None
        if catalog_path is not None:
            catalog = self.input_service.load_catalog(Path(catalog_path))
        return self.plan(edges, catalog, residual_policy)

    def _normalize_edges(self, edges: Iterable[Union[Edge, Dict[str, Any]]]) -> List[Edge]:
        edges = list(edges)
        raw = [e for e in edges if not isinstance(e, Edge)]
        if not raw:
            return edges
        if len(raw) == len(edges):
            return self.input_service.parse_edges(raw)
        return [e if isinstance(e, Edge) else Edge.from_record(e) for e in edges]


def plan(edges: Iterable[Union[Edge, Dict[str, Any]]],
         catalog: Optional[Union[ComponentCatalog, Dict[str, Any]]] = None,
         **options) -> PlanResult:
    """
    Convenience function for planning

    Args:
        edges: Edge objects or raw dependency records
        catalog: Optional catalog for manifest generation
        **options: Planner options
            - config: PlannerConfig or configuration dictionary
            - residual_policy: 'report', 'force' or 'fail'

    Returns:
        PlanResult

    Examples:
        >>> result = plan([{"id": "1", "name": "A", "type": "ApexClass",
        ...                 "ref_id": "2", "ref_name": "B", "ref_type": "ApexClass"}])
        >>> [[c.name for c in g] for g in result.groups]
        [['B'], ['A']]
    """
    planner = Planner(options.get('config'))
    return planner.plan(edges, catalog, options.get('residual_policy'))
