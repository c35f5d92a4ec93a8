"""Configuration management with Pydantic Settings + optional YAML."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import click
import yaml
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_API_URL = "https://api.bigcommerce.com"
STORE_HASH_ENV = "BIGCOMMERCE_STORE_HASH"
CONFIG_PATH_ENV = "BIGCOMMERCE_PROVIDER_CONFIG"
CONFIG_DIR_ENV = "BIGCOMMERCE_PROVIDER_CONFIG_DIR"
APP_NAME = "bigcommerce-provider"


class ProviderSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="BIGCOMMERCE_",
        case_sensitive=False,
        extra="ignore",
    )

    store_hash: str = ""
    api_url: str = DEFAULT_API_URL
    timeout: float | None = None  # None: block until the API answers
    log_level: str = "INFO"
    log_json: bool = False


def get_config_dir() -> Path:
    """Directory holding the default ``config.yaml``."""
    return Path(os.environ.get(CONFIG_DIR_ENV) or click.get_app_dir(APP_NAME))


def _read_yaml(config_path: str | Path | None) -> dict[str, Any]:
    if config_path is None:
        config_path = os.environ.get(CONFIG_PATH_ENV)
    if config_path is None:
        default = get_config_dir() / "config.yaml"
        if default.exists():
            config_path = default

    if config_path is None:
        return {}

    path = Path(config_path)
    if not path.exists():
        return {}
    with open(path) as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping at the top level")
    return data


def load_settings(config_path: str | Path | None = None, **overrides: Any) -> ProviderSettings:
    """Load settings from env vars, overlaid by a YAML file, then by explicit overrides.

    Overrides that are ``None`` or empty strings are dropped so an unset
    provider attribute still falls back to the environment.
    """
    values = _read_yaml(config_path)
    values.update({k: v for k, v in overrides.items() if v not in (None, "")})
    # Init kwargs take priority over env vars in pydantic-settings
    return ProviderSettings(**values)
