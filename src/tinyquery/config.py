"""
src/tinyquery/config.py

tinyquery Configuration Module.

Configuration Precedence (Highest to Lowest):
1. Overrides passed to load_config()
2. tinyquery.yaml (explicit path, or the working directory)
3. Pydantic Default Values
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from tinyquery.constants import DEFAULT_CONFIG_FILENAME, DEFAULT_ENVIRON_VAR
from tinyquery.errors import ConfigError
from tinyquery.source import EnvironSource, QuerySource, StaticSource

PACKAGE_LOGGER = "tinyquery"


class SourceConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    kind: Literal["environ", "static"] = "environ"
    environ_var: str = DEFAULT_ENVIRON_VAR
    query: str = ""  # used when kind == "static"


class LoggingConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"


class TinyQueryConfig(BaseModel):
    source: SourceConfig = Field(default_factory=SourceConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def load_config(config_path: Path | None = None, overrides: dict[str, Any] | None = None) -> TinyQueryConfig:
    resolved_path = _resolve_config_path(config_path)
    data: dict[str, Any] = {}
    if resolved_path is not None:
        data = _load_yaml(resolved_path)
    if overrides:
        data = _deep_update(data, overrides)
    try:
        return TinyQueryConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration: {exc}") from exc


def build_source(config: TinyQueryConfig) -> QuerySource:
    if config.source.kind == "static":
        return StaticSource(config.source.query)
    return EnvironSource(config.source.environ_var)


def configure_logging(config: TinyQueryConfig) -> logging.Logger:
    """Apply the configured level to the package logger. Handlers are left alone."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(config.logging.level)
    return logger


def serialize_config(config: TinyQueryConfig) -> dict[str, Any]:
    return config.model_dump(mode="json")


def _resolve_config_path(config_path: Path | None) -> Path | None:
    if config_path is not None:
        if not config_path.exists():
            raise ConfigError(f"Config file not found: {config_path}")
        return config_path
    default_path = Path.cwd() / DEFAULT_CONFIG_FILENAME
    return default_path if default_path.exists() else None


def _load_yaml(path: Path) -> dict[str, Any]:
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to read config file: {path}") from exc
    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in config file: {path}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError("Config file must define a mapping.")
    return data


def _deep_update(base: dict[str, Any], updates: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in updates.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_update(merged[key], value)
        else:
            merged[key] = value
    return merged
