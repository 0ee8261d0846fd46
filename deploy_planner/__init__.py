"""Deploy Planner - ordered deployment groups for interdependent metadata.

Turns pairwise "depends-on" facts into staged deployment groups, keeps test
artifacts together with the code they validate, and renders one package
manifest per group.
"""

from .__version__ import __version__, __version_info__, __author__, __email__, __license__

# Exceptions
from .api.exceptions import (
    PlannerError,
    ConfigError,
    ValidationError,
    InputError,
    UnknownTypeError,
    ResidualCycleError,
)

# Core API
from .api.planner import Planner, plan

# Data models
from .models import (
    Component,
    Edge,
    ComponentCatalog,
    ComponentType,
    CatalogMember,
    PairingTable,
    StagePlan,
    ResidualComponent,
    ManifestResult,
    PlanResult,
    PlannerConfig,
)

__all__ = [
    # Version information
    "__version__",
    "__version_info__",
    "__author__",
    "__email__",
    "__license__",

    # Main classes
    "Planner",

    # Core API functions
    "plan",

    # Data models
    "Component",
    "Edge",
    "ComponentCatalog",
    "ComponentType",
    "CatalogMember",
    "PairingTable",
    "StagePlan",
    "ResidualComponent",
    "ManifestResult",
    "PlanResult",
    "PlannerConfig",

    # Exceptions
    "PlannerError",
    "ConfigError",
    "ValidationError",
    "InputError",
    "UnknownTypeError",
    "ResidualCycleError",
]
