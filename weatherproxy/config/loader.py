"""YAML config loader with environment overrides."""

import os
from pathlib import Path
from typing import Any

import yaml

from weatherproxy.config.defaults import CITY_LOCATIONS
from weatherproxy.config.schema import ProxyConfig

PORT_ENV = "PORT"


def load_config(path: str | Path | None = None) -> ProxyConfig:
    """Load and validate config from a YAML file.

    A missing path or empty file yields the defaults. The PORT environment
    variable, when set, overrides server.port.
    """
    raw: dict[str, Any] = {}
    if path is not None and Path(path).exists():
        with open(path, encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}

    port = os.environ.get(PORT_ENV)
    if port:
        raw.setdefault("server", {})["port"] = int(port)

    return ProxyConfig(**raw)


def resolve_api_key(config: ProxyConfig) -> str | None:
    """Read the CWA API key from the environment. Blank values count as unset."""
    value = os.environ.get(config.upstream.api_key_env, "").strip()
    return value or None


def city_table(config: ProxyConfig) -> dict[str, str]:
    """Effective city table: defaults plus any configured entries."""
    return {**CITY_LOCATIONS, **config.cities}


def get_config_value(config: ProxyConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'server.port'."""
    parts = dotted_key.split(".")
    obj: Any = config
    for part in parts:
        if isinstance(obj, list):
            obj = obj[int(part)]
        elif isinstance(obj, dict):
            obj = obj[part]
        elif hasattr(obj, part):
            obj = getattr(obj, part)
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj
