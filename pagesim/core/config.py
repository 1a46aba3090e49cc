# Copyright 2025 Ilya Makarov
#
# Licensed under the Business Source License 1.1
# Change Date: 2028-11-05
# Change License: Apache License 2.0

"""
PageSim Configuration System

Configuration management supporting:
- Environment variables (PAGESIM_*)
- Config files (~/.pagesim/config.yaml, ./.pagesim.yaml)
- Programmatic defaults
- Pydantic validation

The simulation engine never reads this module; the CLI resolves a
configuration and passes plain capacities to PageManager.
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .exceptions import ConfigFileError, ConfigValidationError

logger = logging.getLogger("pagesim.config")


# ============================================================================
# Configuration Models
# ============================================================================


class PathsConfig(BaseModel):
    """Path configuration"""
    model_config = ConfigDict(arbitrary_types_allowed=True)

    pagesim_home: Path = Field(
        default_factory=lambda: Path.home() / ".pagesim",
        description="PageSim home directory",
    )
    log_dir: Path = Field(
        default_factory=lambda: Path.home() / ".pagesim" / "logs",
        description="Log files directory",
    )

    @field_validator("*", mode="before")
    @classmethod
    def ensure_path(cls, v):
        """Convert strings to Path objects"""
        if isinstance(v, str):
            return Path(v).expanduser()
        return v


class SimulationConfig(BaseModel):
    """Tier capacities"""

    memory_capacity: int = Field(
        default=10, description="Physical memory capacity (pages)", ge=0
    )
    swap_capacity: int = Field(
        default=15, description="Swap memory capacity (pages)", ge=0
    )


class ObservabilityConfig(BaseModel):
    """Logging configuration"""

    log_level: str = Field(default="INFO", description="Logging level")
    file_logging: bool = Field(default=True, description="Write a rotating log file")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level"""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Invalid log level. Must be one of: {valid_levels}")
        return v_upper


class PageSimConfig(BaseModel):
    """Complete PageSim configuration"""
    model_config = ConfigDict(arbitrary_types_allowed=True)

    paths: PathsConfig = Field(
        default_factory=PathsConfig, description="Path configuration"
    )
    simulation: SimulationConfig = Field(
        default_factory=SimulationConfig, description="Simulation configuration"
    )
    observability: ObservabilityConfig = Field(
        default_factory=ObservabilityConfig,
        description="Observability configuration",
    )


# ============================================================================
# Configuration Loader
# ============================================================================


class ConfigLoader:
    """Load configuration from multiple sources"""

    @staticmethod
    def load_from_env() -> Dict[str, Any]:
        """Load configuration from environment variables"""
        config: Dict[str, Any] = {}

        pagesim_home = os.getenv("PAGESIM_HOME")
        if pagesim_home:
            config.setdefault("paths", {})["pagesim_home"] = pagesim_home

        log_dir = os.getenv("PAGESIM_LOG_DIR")
        if log_dir:
            config.setdefault("paths", {})["log_dir"] = log_dir

        memory_capacity = os.getenv("PAGESIM_MEMORY_CAPACITY")
        if memory_capacity:
            config.setdefault("simulation", {})["memory_capacity"] = _env_int(
                "PAGESIM_MEMORY_CAPACITY", memory_capacity
            )

        swap_capacity = os.getenv("PAGESIM_SWAP_CAPACITY")
        if swap_capacity:
            config.setdefault("simulation", {})["swap_capacity"] = _env_int(
                "PAGESIM_SWAP_CAPACITY", swap_capacity
            )

        log_level = os.getenv("PAGESIM_LOG_LEVEL")
        if log_level:
            config.setdefault("observability", {})["log_level"] = log_level

        file_logs = os.getenv("PAGESIM_FILE_LOGS")
        if file_logs:
            config.setdefault("observability", {})["file_logging"] = (
                file_logs.lower() == "true"
            )

        return config

    @staticmethod
    def load_from_file(file_path: Path) -> Dict[str, Any]:
        """Load configuration from a YAML file"""
        if not file_path.exists():
            return {}

        try:
            with open(file_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigFileError(
                f"Failed to load config file {file_path}", path=str(file_path), cause=e
            )

        if not isinstance(data, dict):
            raise ConfigFileError(
                f"Config file {file_path} must contain a mapping",
                path=str(file_path),
            )
        return data

    @staticmethod
    def merge_configs(*configs: Dict[str, Any]) -> Dict[str, Any]:
        """Deep merge multiple configuration dictionaries"""
        result: Dict[str, Any] = {}
        for config in configs:
            for key, value in config.items():
                if (
                    key in result
                    and isinstance(result[key], dict)
                    and isinstance(value, dict)
                ):
                    result[key] = ConfigLoader.merge_configs(result[key], value)
                else:
                    result[key] = value
        return result


def _env_int(name: str, raw: str) -> int:
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigValidationError(
            f"{name} must be an integer", details={"value": raw}, cause=e
        )


# ============================================================================
# Global Configuration Instance
# ============================================================================

_config: Optional[PageSimConfig] = None


def get_config() -> PageSimConfig:
    """
    Get global PageSim configuration

    Configuration is loaded from (in order of precedence):
    1. Environment variables (PAGESIM_*)
    2. .pagesim.yaml in current directory
    3. ~/.pagesim/config.yaml
    4. Default values
    """
    global _config

    if _config is None:
        _config = load_config()

    return _config


def load_config(
    config_file: Optional[Path] = None, env_override: bool = True
) -> PageSimConfig:
    """
    Load configuration from all sources

    Args:
        config_file: Optional specific config file to load
        env_override: Whether environment variables override file config

    Returns:
        PageSimConfig instance

    Raises:
        ConfigFileError: A config file could not be parsed
        ConfigValidationError: The merged configuration is invalid
    """
    configs = []

    default_locations = [
        Path.home() / ".pagesim" / "config.yaml",
        Path.cwd() / ".pagesim.yaml",
    ]

    for location in default_locations:
        file_config = ConfigLoader.load_from_file(location)
        if file_config:
            configs.append(file_config)
            logger.debug(f"Loaded config from {location}")

    if config_file:
        if not config_file.exists():
            raise ConfigFileError(
                f"Config file not found: {config_file}", path=str(config_file)
            )
        file_config = ConfigLoader.load_from_file(config_file)
        if file_config:
            configs.append(file_config)
            logger.debug(f"Loaded config from {config_file}")

    if env_override:
        env_config = ConfigLoader.load_from_env()
        if env_config:
            configs.append(env_config)
            logger.debug("Loaded config from environment")

    merged = ConfigLoader.merge_configs(*configs) if configs else {}

    try:
        return PageSimConfig(**merged)
    except ValidationError as e:
        raise ConfigValidationError(
            "Config validation failed", details={"errors": e.errors()}, cause=e
        )


def reload_config() -> PageSimConfig:
    """Reload global configuration"""
    global _config
    _config = load_config()
    logger.info("Configuration reloaded")
    return _config
