"""Configuration loading and validation for hashetag."""

from __future__ import annotations

import hashlib
import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, field_validator

from hashetag.exceptions import ConfigError

logger = logging.getLogger(__name__)


class EtagConfig(BaseModel):
    """Configuration for ETag rendering."""

    length: int = 0  # 0 means the default of 32 hex characters
    algorithm: str = "sha256"
    weak: bool = False

    @field_validator("algorithm")
    @classmethod
    def _check_algorithm(cls, value: str) -> str:
        name = value.lower()
        if name not in hashlib.algorithms_available or name.startswith("shake_"):
            raise ValueError(f"unknown hash algorithm {value!r}")
        return name


class Config(BaseModel):
    """Main configuration for hashetag."""

    version: int = 1
    etag: EtagConfig = Field(default_factory=EtagConfig)


def find_config_file(config_path: Path | None = None) -> Path | None:
    """Find the configuration file.

    Search order (first found wins):
    1. Explicit path
    2. ./hashetag.yaml (current directory)
    3. ./.hashetag/config.yaml (project directory)

    Args:
        config_path: Optional explicit config path.

    Returns:
        Path to config file if found, None otherwise.
    """
    if config_path is not None:
        if config_path.exists():
            return config_path
        raise ConfigError(f"Config file not found: {config_path}")

    cwd_config = Path("hashetag.yaml")
    if cwd_config.exists():
        return cwd_config

    project_config = Path(".hashetag/config.yaml")
    if project_config.exists():
        return project_config

    return None


def load_config(config_path: Path | None = None) -> Config:
    """Load configuration from file or return defaults.

    Args:
        config_path: Optional explicit config path.

    Returns:
        Config object with loaded or default values.

    Raises:
        ConfigError: If config file exists but is invalid.
    """
    found_path = find_config_file(config_path)

    if found_path is None:
        logger.debug("No config file found, using defaults")
        return Config()

    logger.debug("Loading config from %s", found_path)
    try:
        with found_path.open() as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in config file: {e}") from e
    except OSError as e:
        raise ConfigError(f"Could not read config file: {e}") from e

    if data is None:
        return Config()

    try:
        return Config.model_validate(data)
    except ValueError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e


def load_etag_config(config_path: Path | None = None) -> EtagConfig:
    """Load only the ETag settings.

    Args:
        config_path: Optional explicit config path.

    Returns:
        The ``etag`` section of the found config, or its defaults.

    Raises:
        ConfigError: If config file exists but is invalid.
    """
    config = load_config(config_path)
    logger.debug(
        "ETag settings: algorithm=%s length=%d weak=%s",
        config.etag.algorithm,
        config.etag.length,
        config.etag.weak,
    )
    return config.etag
