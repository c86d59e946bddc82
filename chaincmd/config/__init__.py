"""Configuration management for chaincmd."""

from chaincmd.config.loader import ConfigurationLoader, load_config
from chaincmd.config.schemas import ChainCmdConfig, ChainConfig, LoggingConfig

__all__ = [
    "ChainCmdConfig",
    "ChainConfig",
    "ConfigurationLoader",
    "LoggingConfig",
    "load_config",
]
