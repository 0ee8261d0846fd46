# deploy_planner/services/__init__.py
"""Business logic services for deploy-planner"""

from .config_service import ConfigService
from .input_service import InputService
from .plan_service import PlanService

__all__ = [
    "ConfigService",
    "InputService",
    "PlanService",
]
