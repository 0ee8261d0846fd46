"""Configuration management service"""

import logging
import os
from pathlib import Path
from typing import Optional

import yaml

from ..api.exceptions import ConfigError
from ..constants import ENV_CONFIG_PATH, PROJECT_CONFIG_FILE
from ..models.config import PlannerConfig


class ConfigService:
    """Service for loading planner configuration"""

    def __init__(self, config_path: Optional[Path] = None):
        """Initialize config service

        Args:
            config_path: Explicit config file. Falls back to the path in
                DEPLOY_PLANNER_CONFIG, then .deploy-planner.yaml in the
                current directory.
        """
        if config_path is None:
            env_path = os.environ.get(ENV_CONFIG_PATH)
            config_path = Path(env_path) if env_path else Path.cwd() / PROJECT_CONFIG_FILE
        self.config_path = Path(config_path)
        self._config: Optional[PlannerConfig] = None
        self.logger = logging.getLogger(self.__class__.__name__)

    @property
    def config(self) -> PlannerConfig:
        """Get current configuration (lazy load)"""
        if self._config is None:
            self.load_config()
        return self._config

    def load_config(self) -> PlannerConfig:
        """Load configuration from file

        A missing file is not an error: defaults are used.

        Returns:
            Loaded configuration

        Raises:
            ConfigError: If the file cannot be parsed or holds invalid values
        """
        if not self.config_path.exists():
            self.logger.debug(f"No configuration at {self.config_path}, using defaults")
            self._config = PlannerConfig()
            return self._config

        with open(self.config_path, 'r', encoding='utf-8') as f:
            content = f.read()

        # Simple environment variable expansion
        content = os.path.expandvars(content)

        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {self.config_path}: {e}")

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(f"Configuration root must be a mapping: {self.config_path}")

        self._config = PlannerConfig.from_dict(data)
        self.logger.debug(f"Loaded configuration from {self.config_path}")
        return self._config

    def dump_config(self) -> str:
        """Render the effective configuration as YAML"""
        return yaml.dump(self.config.to_dict(), default_flow_style=False, sort_keys=False)
