"""
SUNRISE Configuration System

Site and solver configuration using pydantic for type-safe validation and
YAML for human-readable config files.

Configuration loading priority:
1. Environment variables (SUNRISE_*)
2. Config file passed to load_config()
3. ./sunrise.yaml (current directory)
4. ~/.sunrise/config.yaml (user home)
5. Built-in defaults

Usage:
    from sunrise.config import load_config

    # Load with automatic discovery
    config = load_config()

    # Load from specific file
    config = load_config("/path/to/sunrise.yaml")

    # Access configuration
    print(config.site.latitude)
    print(config.solver.max_search_days)
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Literal, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import yaml
from pydantic import BaseModel, Field, field_validator

from sunrise.constants import (
    CONFIG_ENV_PREFIX,
    CONFIG_FILENAME,
    DEFAULT_SITE_LATITUDE,
    DEFAULT_SITE_LONGITUDE,
    DEFAULT_SITE_NAME,
    DEFAULT_SITE_TIMEZONE,
    EVENT_SEARCH_MAX_DAYS,
    REFINEMENT_MAX_ITERATIONS,
    SOLAR_NOON_MAX_ITERATIONS,
)
from sunrise.exceptions import ConfigurationError
from sunrise.models import ObserverLocation

__all__ = [
    "SunriseConfig",
    "SiteConfig",
    "SolverConfig",
    "load_config",
    "get_config_paths",
]


# =============================================================================
# Configuration Models
# =============================================================================


class SiteConfig(BaseModel):
    """Observer site location configuration."""

    # Geographic location
    latitude: float = Field(
        default=DEFAULT_SITE_LATITUDE,
        ge=-90.0,
        le=90.0,
        description="Site latitude in decimal degrees (positive = North)",
    )
    longitude: float = Field(
        default=DEFAULT_SITE_LONGITUDE,
        ge=-180.0,
        le=180.0,
        description="Site longitude in decimal degrees (positive = East)",
    )

    # Timezone used for results and for naive request times
    timezone: str = Field(
        default=DEFAULT_SITE_TIMEZONE,
        description="IANA timezone identifier for the site",
    )

    # Site name for logging/display
    name: str = Field(
        default=DEFAULT_SITE_NAME,
        description="Human-readable site name",
    )

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        """Validate timezone against the IANA database."""
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(
                f"Unknown timezone: {v}. Use IANA format like 'Europe/London'"
            ) from e
        return v

    def to_location(self) -> ObserverLocation:
        """Convert to the ObserverLocation used by SunriseService."""
        return ObserverLocation(
            latitude=self.latitude,
            longitude=self.longitude,
            timezone=self.timezone,
            name=self.name,
        )


class SolverConfig(BaseModel):
    """Iteration limits for the sunrise, sunset and solar noon solvers."""

    max_search_days: int = Field(
        default=EVENT_SEARCH_MAX_DAYS,
        ge=1,
        le=1000,
        description="Days searched for the nearest event on polar dates",
    )
    refinement_iterations: int = Field(
        default=REFINEMENT_MAX_ITERATIONS,
        ge=1,
        le=20,
        description="Maximum fixed-point passes for sunrise/sunset",
    )
    noon_iterations: int = Field(
        default=SOLAR_NOON_MAX_ITERATIONS,
        ge=1,
        le=50,
        description="Maximum fixed-point passes for solar noon",
    )


class SunriseConfig(BaseModel):
    """Top-level configuration."""

    site: SiteConfig = Field(default_factory=SiteConfig)
    solver: SolverConfig = Field(default_factory=SolverConfig)

    # Logging level override
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Package logging level",
    )

    class Config:
        """Pydantic configuration."""

        extra = "ignore"  # Ignore unknown fields in config file


# =============================================================================
# Configuration Loading
# =============================================================================


def get_config_paths() -> list[Path]:
    """Get list of config file paths to search.

    Returns paths in priority order (first found wins).
    """
    paths = []

    # Current directory
    paths.append(Path(".") / CONFIG_FILENAME)
    paths.append(Path(".") / "sunrise.yml")

    # User home directory
    home = Path.home()
    paths.append(home / ".sunrise" / "config.yaml")
    paths.append(home / ".sunrise" / "config.yml")

    # System config (Linux)
    paths.append(Path("/etc/sunrise/config.yaml"))

    return paths


def _coerce_env_value(value: str) -> bool | int | float | str:
    if value.lower() in ("true", "false"):
        return value.lower() == "true"
    try:
        return int(value)
    except ValueError:
        pass
    try:
        return float(value)
    except ValueError:
        return value  # Keep as string


def _apply_env_overrides(config_dict: dict) -> dict:
    """Apply environment variable overrides.

    Environment variables are in format: SUNRISE_SECTION_KEY
    Example: SUNRISE_SITE_LATITUDE=69.65, SUNRISE_SOLVER_MAX_SEARCH_DAYS=200
    Top-level fields use their own name: SUNRISE_LOG_LEVEL=DEBUG
    """
    top_level = {name for name in SunriseConfig.model_fields if name not in ("site", "solver")}

    for key, value in os.environ.items():
        if not key.startswith(CONFIG_ENV_PREFIX):
            continue

        name = key[len(CONFIG_ENV_PREFIX):].lower()
        if name in top_level:
            config_dict[name] = value.upper() if name == "log_level" else value
            continue

        # Parse key: SUNRISE_SITE_TIMEZONE -> site.timezone
        parts = name.split("_")
        if len(parts) < 2:
            continue

        section = parts[0]
        setting = "_".join(parts[1:])

        # Apply to config dict
        if not isinstance(config_dict.get(section), dict):
            config_dict[section] = {}

        # Timezone names and site names stay strings
        if setting in ("timezone", "name"):
            config_dict[section][setting] = value
        else:
            config_dict[section][setting] = _coerce_env_value(value)

    return config_dict


def load_config(config_path: Optional[str | Path] = None) -> SunriseConfig:
    """Load configuration from file with validation.

    Args:
        config_path: Explicit config file path, or None for auto-discovery

    Returns:
        Validated SunriseConfig object

    Raises:
        ConfigurationError: If config file is invalid or cannot be loaded
    """
    config_dict: dict = {}

    # Find config file
    if config_path:
        path = Path(config_path)
        if not path.exists():
            raise ConfigurationError(f"Config file not found: {path}")
        config_files = [path]
    else:
        config_files = get_config_paths()

    # Load first found config file
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
        raise ConfigurationError(f"Config file must contain a mapping, got {type(config_dict).__name__}")

    # Apply environment variable overrides
    config_dict = _apply_env_overrides(config_dict)

    # Validate and create config object
    try:
        return SunriseConfig(**config_dict)
    except Exception as e:
        raise ConfigurationError(f"Configuration validation failed: {e}") from e
