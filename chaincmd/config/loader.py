"""Configuration loader for the CLI.

This module provides utilities for loading and merging configuration from
the user config, the project config and an explicit file.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from loguru import logger
from pydantic import ValidationError

from chaincmd.config.schemas import ChainCmdConfig, deep_merge
from chaincmd.errors import ConfigurationError


class ConfigurationLoader:
    """Loads and merges configuration from multiple sources."""

    PROJECT_CONFIG_NAMES = ["chaincmd.yaml", "chaincmd.yml", ".chaincmd.yaml"]

    @staticmethod
    def find_project_config(cwd: Optional[Path] = None) -> Optional[Path]:
        """Find project configuration file in the current directory.

        Returns:
            Path to config file if found, None otherwise
        """
        cwd = cwd or Path.cwd()

        for name in ConfigurationLoader.PROJECT_CONFIG_NAMES:
            config_path = cwd / name
            if config_path.exists():
                logger.debug(f"Found project config: {config_path}")
                return config_path

        return None

    @staticmethod
    def find_user_config() -> Optional[Path]:
        """Find user configuration file.

        Returns:
            Path to user config file if found, None otherwise
        """
        user_config = Path.home() / ".chaincmd" / "config.yaml"
        if user_config.exists():
            logger.debug(f"Found user config: {user_config}")
            return user_config
        return None

    @staticmethod
    def load_yaml_config(path: Path) -> Dict[str, Any]:
        """Load configuration from YAML file.

        Args:
            path: Path to YAML file

        Returns:
            Configuration dictionary

        Raises:
            ConfigurationError: If file cannot be loaded
        """
        try:
            with open(path, "r") as f:
                config = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Failed to load config from {path}: {e}") from e

        if not isinstance(config, dict):
            raise ConfigurationError(f"Config file {path} must contain a mapping")

        logger.debug(f"Loaded config from {path}")
        return config

    @staticmethod
    def merge_configs(configs: List[Dict[str, Any]]) -> Dict[str, Any]:
        """Merge multiple configuration dictionaries.

        Later configs override earlier ones.
        """
        result: Dict[str, Any] = {}

        for config in configs:
            result = deep_merge(result, config)

        return result

    def load(self, config_path: Optional[Path] = None, cwd: Optional[Path] = None) -> ChainCmdConfig:
        """Load the effective configuration.

        Sources in increasing precedence: user config, project config,
        ``config_path``. Environment variables apply to anything none of the
        files set.

        Raises:
            ConfigurationError: If a file is missing, unreadable or invalid
        """
        paths = [self.find_user_config(), self.find_project_config(cwd)]

        if config_path is not None:
            if not config_path.exists():
                raise ConfigurationError(f"Config file not found: {config_path}")
            paths.append(config_path)

        configs = [self.load_yaml_config(path) for path in paths if path is not None]
        merged = self.merge_configs(configs)

        try:
            return ChainCmdConfig.from_dict(merged)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e


def load_config(config_path: Optional[Path] = None) -> ChainCmdConfig:
    """Load configuration with the default loader."""
    return ConfigurationLoader().load(config_path)
