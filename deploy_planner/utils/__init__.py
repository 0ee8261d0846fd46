# deploy_planner/utils/__init__.py
"""Utility functions for deploy-planner"""

from .similarity import edit_distance, similarity
from .sorting import ordinal_key, component_key
from .version_utils import parse_version, is_valid_api_version

__all__ = [
    "edit_distance",
    "similarity",
    "ordinal_key",
    "component_key",
    "parse_version",
    "is_valid_api_version",
]
