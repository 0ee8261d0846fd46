# deploy_planner/cli/commands/__init__.py
"""CLI commands"""

from . import groups
from . import manifest
from . import similarity
from . import config

__all__ = [
    "groups",
    "manifest",
    "similarity",
    "config",
]
