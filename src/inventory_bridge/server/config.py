# SPDX-License-Identifier: Apache-2.0
"""
Inventory bridge configuration.

Settings are read once at process start, either from a YAML file named by
CONFIG_PATH or from environment variables, and passed explicitly to the
components that need them.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Mapping, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..exceptions import ConfigurationError

DEFAULT_API_URL = "http://localhost:8000/api"
DEFAULT_TIMEOUT = 30.0
DEFAULT_LOG_LEVEL = "INFO"


class Settings(BaseModel):
    """Immutable runtime configuration"""
    model_config = ConfigDict(frozen=True)

    api_url: str = Field(DEFAULT_API_URL, description="Base URL of the inventory API")
    api_token: Optional[str] = Field(None, description="Static bearer token for the inventory API")
    timeout: float = Field(DEFAULT_TIMEOUT, gt=0, description="Per-request timeout in seconds")
    log_level: str = Field(DEFAULT_LOG_LEVEL, description="Root log level")

    @field_validator("api_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        value = value.strip().rstrip("/")
        if not value:
            raise ValueError("api_url must not be empty")
        return value

    @field_validator("api_token")
    @classmethod
    def _empty_token_is_none(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not value.strip():
            return None
        return value

    @field_validator("log_level")
    @classmethod
    def _upper_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level {value!r}")
        return level


def _build(data: Mapping[str, Any]) -> Settings:
    try:
        return Settings(**{k: v for k, v in data.items() if v is not None})
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e


def load_config_from_file(config_path: str) -> Settings:
    """Load settings from a YAML file"""
    with open(config_path, "r") as f:
        config_data = yaml.safe_load(f) or {}

    if not isinstance(config_data, dict):
        raise ConfigurationError(f"Configuration file {config_path} must contain a mapping")
    return _build(config_data)


def create_config_from_env(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build settings from environment variables or defaults"""
    env = os.environ if environ is None else environ
    return _build(
        {
            "api_url": env.get("LARAVEL_API_URL"),
            "api_token": env.get("LARAVEL_API_TOKEN"),
            "timeout": env.get("LARAVEL_API_TIMEOUT"),
            "log_level": env.get("LOG_LEVEL"),
        }
    )


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Resolve settings: CONFIG_PATH file when it exists, else the environment."""
    env = os.environ if environ is None else environ
    config_path = env.get("CONFIG_PATH")
    if config_path and os.path.exists(config_path):
        return load_config_from_file(config_path)
    return create_config_from_env(env)


__all__ = ["Settings", "create_config_from_env", "load_config_from_file", "load_settings"]
