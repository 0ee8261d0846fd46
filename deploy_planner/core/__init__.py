"""Core functionality for deploy-planner"""

from .dependency_graph import DependencyGraph
from .cycle_resolver import CycleResolver
from .test_matcher import TestAffinityMatcher
from .deployment_stager import DeploymentStager
from .manifest_builder import ManifestBuilder
from .validation_engine import ValidationEngine, ValidationResult

__all__ = [
    "DependencyGraph",
    "CycleResolver",
    "TestAffinityMatcher",
    "DeploymentStager",
    "ManifestBuilder",
    "ValidationEngine",
    "ValidationResult",
]
