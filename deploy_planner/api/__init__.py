# deploy_planner/api/__init__.py
"""API layer for deploy-planner"""

from .exceptions import (
    PlannerError,
    ConfigError,
    ValidationError,
    InputError,
    UnknownTypeError,
    ResidualCycleError,
)
from .planner import Planner, plan

__all__ = [
    # Main classes
    "Planner",

    # Convenience functions
    "plan",

    # Exceptions
    "PlannerError",
    "ConfigError",
    "ValidationError",
    "InputError",
    "UnknownTypeError",
    "ResidualCycleError",
]
