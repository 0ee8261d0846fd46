# deploy_planner/models/__init__.py
"""Data models for deploy-planner"""

from .component import Component, Edge
from .catalog import CatalogMember, ComponentType, ComponentCatalog
from .plan import MatchState, NodeState, TestMatch, PairingTable, ResidualComponent, StagePlan
from .manifest import ManifestNode, ManifestResult
from .result import OperationStatus, ErrorDetail, Result, PlanResult
from .config import PairingConfig, ManifestConfig, PlannerConfig

__all__ = [
    # Graph models
    "Component",
    "Edge",

    # Catalog models
    "CatalogMember",
    "ComponentType",
    "ComponentCatalog",

    # Pairing and staging models
    "MatchState",
    "NodeState",
    "TestMatch",
    "PairingTable",
    "ResidualComponent",
    "StagePlan",

    # Manifest models
    "ManifestNode",
    "ManifestResult",

    # Result models
    "OperationStatus",
    "ErrorDetail",
    "Result",
    "PlanResult",

    # Config models
    "PairingConfig",
    "ManifestConfig",
    "PlannerConfig",
]
