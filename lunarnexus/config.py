"""
LUNAR NEXUS Configuration System

Configuration for the application layer using pydantic for validation and
YAML for human-readable config files. The calculation engine takes no
configuration; it receives the observer location as plain arguments.

Configuration loading priority:
1. Environment variables (LUNARNEXUS_*)
2. Config file given with --config
3. ./lunarnexus.yaml (current directory)
4. ~/.lunarnexus/config.yaml (user home)
5. Built-in defaults

Usage:
    from lunarnexus.config import load_config

    config = load_config()
    print(config.observer.latitude)
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Literal, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from lunarnexus.constants import (
    CONFIG_FILENAME,
    DEFAULT_FORECAST_DAYS,
    DEFAULT_LATITUDE_DEG,
    DEFAULT_LONGITUDE_DEG,
    DEFAULT_SITE_NAME,
    DEFAULT_TIMEZONE,
    ENV_PREFIX,
    LATITUDE_MAX_DEG,
    LATITUDE_MIN_DEG,
    LONGITUDE_MAX_DEG,
    LONGITUDE_MIN_DEG,
    MAX_FORECAST_DAYS,
)
from lunarnexus.exceptions import ConfigurationError

__all__ = [
    "LunarNexusConfig",
    "ObserverConfig",
    "ForecastConfig",
    "load_config",
    "get_config_paths",
]


class ObserverConfig(BaseModel):
    """Observer location used when no coordinates are given explicitly."""

    latitude: float = Field(
        default=DEFAULT_LATITUDE_DEG,
        ge=LATITUDE_MIN_DEG,
        le=LATITUDE_MAX_DEG,
        description="Latitude in decimal degrees (positive = North)",
    )
    longitude: float = Field(
        default=DEFAULT_LONGITUDE_DEG,
        ge=LONGITUDE_MIN_DEG,
        le=LONGITUDE_MAX_DEG,
        description="Longitude in decimal degrees (positive = East)",
    )
    timezone: str = Field(
        default=DEFAULT_TIMEZONE,
        description="IANA timezone identifier, shown on the report's location line",
    )
    name: str = Field(
        default=DEFAULT_SITE_NAME,
        description="Human-readable location name, shown on the report's location line",
    )

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        """Validate timezone is a plausible IANA identifier."""
        if "/" not in v and v not in ("UTC", "GMT"):
            raise ValueError(f"Invalid timezone format: {v}. Use IANA format like 'America/New_York'")
        return v


class ForecastConfig(BaseModel):
    """Multi-day phase forecast settings."""

    days: int = Field(
        default=DEFAULT_FORECAST_DAYS,
        ge=1,
        le=MAX_FORECAST_DAYS,
        description="Number of days after the selected date to forecast",
    )


class LunarNexusConfig(BaseModel):
    """Top-level configuration."""

    model_config = ConfigDict(extra="ignore")

    observer: ObserverConfig = Field(default_factory=ObserverConfig)
    forecast: ForecastConfig = Field(default_factory=ForecastConfig)

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description="Global logging level",
    )
    log_file: Optional[str] = Field(
        default=None,
        description="Optional rotating log file path",
    )


# =============================================================================
# Configuration Loading
# =============================================================================


def get_config_paths() -> list[Path]:
    """Config file paths to search, in priority order (first found wins)."""
    home = Path.home()
    return [
        Path(".") / CONFIG_FILENAME,
        Path("./lunarnexus.yml"),
        home / ".lunarnexus" / "config.yaml",
        home / ".lunarnexus" / "config.yml",
        Path("/etc/lunarnexus/config.yaml"),
    ]


def _apply_env_overrides(config_dict: dict) -> dict:
    """Apply LUNARNEXUS_SECTION_KEY environment variables.

    Example: LUNARNEXUS_OBSERVER_LATITUDE=51.5 -> observer.latitude.
    Values stay strings; pydantic converts them to each field's type.
    A single-part key such as LUNARNEXUS_LOG_LEVEL sets a top-level field
    when it names one.
    """
    top_level = set(LunarNexusConfig.model_fields)

    for key, value in os.environ.items():
        if not key.startswith(ENV_PREFIX):
            continue

        name = key[len(ENV_PREFIX):].lower()
        if name in top_level and name not in ("observer", "forecast"):
            config_dict[name] = value
            continue

        parts = name.split("_")
        if len(parts) < 2:
            continue

        section = parts[0]
        setting = "_".join(parts[1:])

        if not isinstance(config_dict.get(section), dict):
            config_dict[section] = {}
        config_dict[section][setting] = value

    return config_dict


def load_config(config_path: Optional[str | Path] = None) -> LunarNexusConfig:
    """Load and validate configuration.

    Args:
        config_path: Explicit config file path, or None for auto-discovery.

    Returns:
        Validated LunarNexusConfig.

    Raises:
        ConfigurationError: If the file is missing, unreadable or invalid.
    """
    config_dict: dict = {}

    if config_path:
        path = Path(config_path)
        if not path.exists():
            raise ConfigurationError(f"Config file not found: {path}")
        config_files = [path]
    else:
        config_files = get_config_paths()

    for path in config_files:
        if path.exists():
            try:
                with open(path, encoding="utf-8") as f:
                    config_dict = yaml.safe_load(f) or {}
                break
            except yaml.YAMLError as e:
                raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e
            except OSError as e:
                raise ConfigurationError(f"Cannot read {path}: {e}") from e

    if not isinstance(config_dict, dict):
        raise ConfigurationError("Configuration root must be a mapping")

    config_dict = _apply_env_overrides(config_dict)

    try:
        return LunarNexusConfig(**config_dict)
    except Exception as e:
        raise ConfigurationError(f"Configuration validation failed: {e}") from e
