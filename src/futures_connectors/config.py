from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .settings import ExchangeSettings, Settings

logger = logging.getLogger(__name__)

ENV_PREFIX = "FUTURES_CONNECTORS_"
CONFIG_ENV = f"{ENV_PREFIX}CONFIG"
LOG_LEVEL_ENV = f"{ENV_PREFIX}LOG_LEVEL"
DEFAULT_CONFIG_PATH = "config.yml"

_RESERVED_KEYS = {"CONFIG", "LOG_LEVEL"}
# Never type-converted: a numeric-looking API key is still a string
_STRING_FIELDS = {"api_key", "api_secret", "username", "password", "url", "base_url", "coin_base_url"}


def _deep_set(obj: dict[str, Any], path: list[str], value: Any) -> None:
    cur: dict[str, Any] = obj
    for key in path[:-1]:
        nxt = cur.get(key)
        if not isinstance(nxt, dict):
            nxt = {}
            cur[key] = nxt
        cur = nxt
    cur[path[-1]] = value


def _parse_env_value(raw: str) -> Any:
    """Read an override as a YAML scalar so ``true``/``10``/``null`` get their types."""
    try:
        value = yaml.safe_load(raw)
    except yaml.YAMLError:
        return raw
    if isinstance(value, (dict, list)):
        return raw
    return value


def _apply_env_overrides(data: dict[str, Any], *, prefix: str = ENV_PREFIX) -> dict[str, Any]:
    """Merge ``<PREFIX>A__B__C=value`` variables into ``data["a"]["b"]["c"]``."""
    merged: dict[str, Any] = dict(data)

    for key, raw_value in sorted(os.environ.items()):
        if not key.startswith(prefix):
            continue

        remainder = key[len(prefix) :]
        if remainder in _RESERVED_KEYS:
            continue

        path = [p.lower() for p in remainder.split("__") if p]
        if not path:
            continue

        logger.debug("Config override from %s", key)
        value = raw_value if path[-1] in _STRING_FIELDS else _parse_env_value(raw_value)
        _deep_set(merged, path, value)

    return merged


def _read_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        logger.debug("Config file %s not found, using defaults and environment", path)
        return {}

    try:
        loaded = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in {path}: {exc}") from exc

    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise ValueError(f"Config root must be a mapping, got: {type(loaded)!r}")
    return loaded


def load_settings(config_path: str | Path | None = None) -> Settings:
    """Load settings from YAML with environment overrides applied on top.

    The file is ``config_path``, else ``$FUTURES_CONNECTORS_CONFIG``, else
    ``./config.yml``. A missing file is not an error.

    Raises:
        ValueError: The file or the merged configuration is invalid
    """
    if config_path is None:
        config_path = os.environ.get(CONFIG_ENV, DEFAULT_CONFIG_PATH)

    data = _apply_env_overrides(_read_yaml(Path(config_path)))

    try:
        return Settings.model_validate(data)
    except ValidationError as exc:
        raise ValueError(f"Invalid configuration: {exc}") from exc


def get_exchange_settings(settings: Settings, exchange: str) -> ExchangeSettings:
    """Settings block for ``exchange``; defaults when the config has none."""
    from .exchanges.factory import resolve_exchange_name

    canonical = resolve_exchange_name(exchange)
    for name, block in settings.exchanges.items():
        if resolve_exchange_name(name) == canonical:
            return block
    return ExchangeSettings()
