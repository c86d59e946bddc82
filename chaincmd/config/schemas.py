"""Configuration schemas for the chaincmd CLI.

This module defines the configuration structure and validation schemas
using Pydantic. Chains themselves are registered in code at bootstrap and are
never read from configuration.
"""

from pathlib import Path
from typing import Any, Dict, Union

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field("INFO", description="Logging level")
    format: str = Field("simple", description="Log format (simple or detailed)")
    file_output: bool = Field(False, description="Enable file logging for the command chain channel")
    file_dir: Path = Field(Path("./var/log"), description="Log file directory")
    file_name: str = Field("command_chain.log", description="Log file name")
    rotation: str = Field("10 MB", description="Log file rotation")
    retention: str = Field("7 days", description="Log file retention")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate logging level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Invalid logging level. Must be one of: {valid_levels}")
        return v_upper

    @field_validator("format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        """Validate log format."""
        if v not in ("simple", "detailed"):
            raise ValueError("Invalid log format. Must be 'simple' or 'detailed'")
        return v


class ChainConfig(BaseModel):
    """Chain execution policy."""

    continue_on_member_failure: bool = Field(
        True,
        description="Keep running the remaining members when one is missing or fails",
    )


class ChainCmdConfig(BaseSettings):
    """Main chaincmd configuration.

    Combines all sub-configurations and handles environment variable loading,
    e.g. ``CHAINCMD_LOGGING__LEVEL=DEBUG``.
    """

    model_config = SettingsConfigDict(
        env_prefix="CHAINCMD_",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    version: str = Field("1.0", description="Configuration version")
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    chain: ChainConfig = Field(default_factory=ChainConfig)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ChainCmdConfig":
        """Create configuration from dictionary."""
        return cls(**data)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return self.model_dump(exclude_none=True)

    def merge(self, other: Union["ChainCmdConfig", Dict[str, Any]]) -> "ChainCmdConfig":
        """Merge with another configuration."""
        if isinstance(other, dict):
            other_dict = other
        else:
            other_dict = other.to_dict()

        merged = deep_merge(self.to_dict(), other_dict)
        return self.__class__.from_dict(merged)


def deep_merge(base: Dict[str, Any], update: Dict[str, Any]) -> Dict[str, Any]:
    """Deep merge two dictionaries, values from ``update`` win."""
    result = base.copy()

    for key, value in update.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value

    return result
