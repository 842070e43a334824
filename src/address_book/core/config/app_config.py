from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from enum import Enum
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv
from pydantic import Field, ValidationError, field_validator

from address_book.constants import ConfigKey
from address_book.core.common.exceptions import ConfigurationError
from address_book.core.interfaces.model_bases import DomainModel

logger = logging.getLogger(__name__)


def _env_to_bool(name: str, default: bool, env: Mapping[str, str]) -> bool:
    """Return an environment variable parsed as a boolean flag."""
    value = env.get(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


class LogLevel(str, Enum):
    """Log levels for configuration."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LoggingConfig(DomainModel):
    """Logging configuration."""

    level: LogLevel = LogLevel.WARNING
    log_file: str | None = None

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().upper()
        return v


class AppConfig(DomainModel):
    """Top-level application configuration."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    # Load the bundled sample contacts when no seed file is given
    sample_data: bool = True
    # YAML file with a list of persons to start with
    seed_file: str | None = None

    @classmethod
    def env_overrides(cls, environ: Mapping[str, str] | None = None) -> dict[str, Any]:
        """Collect the configuration values present in the environment.

        Only variables that are actually set show up in the returned mapping so
        that they can be layered over file values.
        """
        env = environ if environ is not None else os.environ
        overrides: dict[str, Any] = {}

        level = env.get(ConfigKey.LOG_LEVEL.env_name)
        if level:
            overrides.setdefault("logging", {})["level"] = level
        log_file = env.get(ConfigKey.LOG_FILE.env_name)
        if log_file:
            overrides.setdefault("logging", {})["log_file"] = log_file
        seed_file = env.get(ConfigKey.SEED_FILE.env_name)
        if seed_file:
            overrides["seed_file"] = seed_file
        if ConfigKey.SAMPLE_DATA.env_name in env:
            overrides["sample_data"] = _env_to_bool(
                ConfigKey.SAMPLE_DATA.env_name, True, env
            )
        return overrides


def _merge_dicts(base: dict[str, Any], override: Mapping[str, Any]) -> None:
    for key, value in override.items():
        if isinstance(value, Mapping) and isinstance(base.get(key), dict):
            _merge_dicts(base[key], value)
        else:
            base[key] = value


def _load_config_file(path: Path) -> dict[str, Any]:
    if path.suffix.lower() not in [".yaml", ".yml"]:
        raise ConfigurationError(
            f"Unsupported configuration file format: {path.suffix}. Use YAML (.yaml/.yml).",
            details={"path": str(path)},
        )

    try:
        with open(path, encoding="utf-8") as f:
            file_config = yaml.safe_load(f) or {}
    except yaml.YAMLError as exc:
        raise ConfigurationError(
            f"Invalid YAML in configuration file {path}: {exc}",
            details={"path": str(path)},
        ) from exc

    if not isinstance(file_config, dict):
        raise ConfigurationError(
            f"Configuration file {path} must contain a mapping at the top level",
            details={"path": str(path)},
        )
    return file_config


def load_config(
    config_path: str | Path | None = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> AppConfig:
    """
    Load configuration from file and environment.

    Environment values win over file values. When ``environ`` is not given the
    process environment is used, after loading a ``.env`` file if present.

    Args:
        config_path: Optional path to a YAML configuration file
        environ: Optional environment mapping, mainly for tests

    Returns:
        AppConfig instance

    Raises:
        ConfigurationError: If the file or the resulting values are invalid
    """
    if environ is None:
        load_dotenv()
        environ = os.environ

    config_data: dict[str, Any] = AppConfig().model_dump()

    if config_path:
        path = Path(config_path)
        if not path.exists():
            logger.warning(f"Configuration file not found: {config_path}")
        else:
            _merge_dicts(config_data, _load_config_file(path))
            logger.debug("Loaded configuration file %s", path)

    _merge_dicts(config_data, AppConfig.env_overrides(environ))

    try:
        return AppConfig.model_validate(config_data)
    except ValidationError as exc:
        raise ConfigurationError(
            f"Invalid configuration: {exc}", details={"errors": exc.errors()}
        ) from exc
