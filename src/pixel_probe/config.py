"""
pixel-probe Configuration
=========================

This module handles configuration for a single probe run.

Two kinds of configuration exist:
    ProbeConfig - What to probe (path, coordinates, alpha format).
                  Built from the command line, once per run.
    Settings    - How to probe (allowed extensions, output precision,
                  logging). Loaded from file and environment.

Settings Sources (in order of precedence):
    1. Command-line overrides (highest priority)
    2. Environment variables
    3. YAML settings file
    4. Default values (lowest priority)

Environment Variable Mapping:
    PIXEL_PROBE_ALLOWED_EXTENSIONS -> validation.allowed_extensions (comma separated)
    PIXEL_PROBE_ALPHA_PRECISION    -> output.alpha_precision
    PIXEL_PROBE_LOG_LEVEL          -> logging.level
    PIXEL_PROBE_LOG_FORMAT         -> logging.format

Nothing is loaded at import time; main() calls load_config() and passes
the result down.

Example:
    from pixel_probe.config import load_config, setup_logging

    settings = load_config()
    setup_logging(settings)
    print(settings.validation.allowed_extensions)
"""

import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from pixel_probe.errors import ConfigError
from pixel_probe.validation import DEFAULT_EXTENSIONS


logger = logging.getLogger(__name__)


# =============================================================================
# Run Configuration
# =============================================================================

class ProbeConfig(BaseModel):
    """
    Arguments for one probe, parsed from the command line.

    Attributes:
        image_path: Path to a JPEG or PNG file
        x: Pixel column
        y: Pixel row
        alpha_as_float: Report alpha as a float in [0, 1]
    """

    model_config = ConfigDict(frozen=True)

    image_path: str = Field(..., min_length=1, description="Path to JPG or PNG file")
    x: int = Field(default=0, description="X coordinate of the pixel")
    y: int = Field(default=0, description="Y coordinate of the pixel")
    alpha_as_float: bool = Field(default=False, description="Render alpha as float")


# =============================================================================
# Settings Models
# =============================================================================

class ValidationConfig(BaseModel):
    """File validation configuration."""

    allowed_extensions: List[str] = Field(
        default_factory=lambda: list(DEFAULT_EXTENSIONS),
        min_length=1,
        description="Accepted file extensions (case-insensitive)",
    )

    @field_validator("allowed_extensions")
    @classmethod
    def _dotted(cls, value: List[str]) -> List[str]:
        cleaned = []
        for ext in value:
            ext = ext.strip()
            if not ext:
                continue
            cleaned.append(ext if ext.startswith(".") else f".{ext}")
        if not cleaned:
            raise ValueError("at least one extension is required")
        return cleaned


class OutputConfig(BaseModel):
    """Output formatting configuration."""

    alpha_precision: int = Field(
        default=6,
        ge=0,
        le=17,
        description="Decimal places when alpha is rendered as a float",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="WARNING", description="Log level")
    format: str = Field(default="text", description="Log format: json or text")

    @field_validator("level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        value = value.upper()
        if not isinstance(logging.getLevelName(value), int):
            raise ValueError(f"unknown log level: {value}")
        return value

    @field_validator("format")
    @classmethod
    def _known_format(cls, value: str) -> str:
        value = value.lower()
        if value not in ("json", "text"):
            raise ValueError(f"log format must be 'json' or 'text', got {value!r}")
        return value


class Settings(BaseModel):
    """
    Main settings class for pixel-probe.

    Loads configuration from YAML file and environment variables.
    Environment variables take precedence over file values.
    """

    model_config = ConfigDict(frozen=True)

    validation: ValidationConfig = Field(default_factory=ValidationConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


# =============================================================================
# Configuration Loading
# =============================================================================

def _search_paths() -> List[Path]:
    return [
        Path("pixel_probe.yaml"),
        Path("pixel_probe.yml"),
        Path.home() / ".config" / "pixel_probe" / "config.yaml",
    ]


def load_config(
    config_path: Optional[str] = None,
    overrides: Optional[Dict[str, Dict[str, Any]]] = None,
) -> Settings:
    """
    Load settings from YAML file and environment variables.

    Priority (highest to lowest):
        1. Explicit overrides (command-line flags)
        2. Environment variables
        3. YAML config file
        4. Default values

    Args:
        config_path: Path to a YAML file. If None, searches common locations.
            An explicit path that does not exist is an error.
        overrides: Section -> {key: value} mapping applied last

    Returns:
        Settings: Loaded configuration

    Raises:
        ConfigError: If the file cannot be read or a value is invalid
    """
    if config_path is not None and not Path(config_path).is_file():
        raise ConfigError(f"config file not found: {config_path}")

    if config_path is None:
        for path in _search_paths():
            if path.is_file():
                config_path = str(path)
                break

    config_data = {}
    if config_path:
        logger.debug(f"Loading config from: {config_path}")
        try:
            with open(config_path, "r") as f:
                config_data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"cannot read config file {config_path}: {e}") from e
        if not isinstance(config_data, dict):
            raise ConfigError(f"config file {config_path} must contain a mapping")
        # "logging:" with nothing under it loads as None
        for name in Settings.model_fields:
            if name in config_data:
                _section(config_data, name)
    else:
        logger.debug("No config file found, using defaults and environment variables")

    _apply_env_overrides(config_data)

    for section, values in (overrides or {}).items():
        _section(config_data, section).update(values)

    try:
        return Settings.model_validate(config_data)
    except ValidationError as e:
        raise ConfigError(f"invalid settings: {e}") from e


def _section(config_data: dict, name: str) -> dict:
    """Return the mapping for a settings section, creating it if empty."""
    section = config_data.get(name)
    if section is None:
        section = config_data[name] = {}
    elif not isinstance(section, dict):
        raise ConfigError(
            f"settings section '{name}' must be a mapping, got {type(section).__name__}"
        )
    return section


def _apply_env_overrides(config_data: dict) -> None:
    """Apply environment variable overrides to config data."""

    if env_exts := os.environ.get("PIXEL_PROBE_ALLOWED_EXTENSIONS"):
        _section(config_data, "validation")["allowed_extensions"] = env_exts.split(",")

    if env_precision := os.environ.get("PIXEL_PROBE_ALPHA_PRECISION"):
        try:
            precision = int(env_precision)
        except ValueError as e:
            raise ConfigError(
                f"PIXEL_PROBE_ALPHA_PRECISION must be an integer, got {env_precision!r}"
            ) from e
        _section(config_data, "output")["alpha_precision"] = precision

    if env_level := os.environ.get("PIXEL_PROBE_LOG_LEVEL"):
        _section(config_data, "logging")["level"] = env_level
    if env_format := os.environ.get("PIXEL_PROBE_LOG_FORMAT"):
        _section(config_data, "logging")["format"] = env_format


def setup_logging(settings: Settings) -> None:
    """Configure root logging on stderr based on settings."""
    log_level = getattr(logging, settings.logging.level.upper(), logging.WARNING)

    if settings.logging.format == "json":
        log_format = '{"time": "%(asctime)s", "level": "%(levelname)s", "module": "%(name)s", "message": "%(message)s"}'
    else:
        log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt="%Y-%m-%dT%H:%M:%S",
        stream=sys.stderr,
        force=True,
    )
