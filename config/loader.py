"""
Configuration loader.

Loads configuration from:
1. Default values (built-in)
2. TOML config file (candlechart.toml or ~/.config/candlechart/config.toml)
3. Environment variables

Priority: env vars > config file > defaults
"""

import logging
import os
import tomllib
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from .schema import CandlechartConfig

logger = logging.getLogger(__name__)

# Config file search paths (in priority order)
CONFIG_PATHS = [
    Path("candlechart.toml"),                            # Current directory
    Path(".candlechart.toml"),                           # Hidden in current directory
    Path.home() / ".config" / "candlechart" / "config.toml",  # User config
]

# Environment variable prefix
ENV_PREFIX = "CANDLECHART_"


class ConfigError(Exception):
    """Configuration error with helpful message."""

    def __init__(self, message: str, source: str | None = None, field: str | None = None):
        self.source = source
        self.field = field
        super().__init__(message)

    def __str__(self) -> str:
        parts = [super().__str__()]
        if self.source:
            parts.append(f"Source: {self.source}")
        if self.field:
            parts.append(f"Field: {self.field}")
        return " | ".join(parts)


def _load_toml_file(path: Path) -> dict[str, Any]:
    """Load TOML file if it exists."""
    if not path.exists():
        return {}

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
        logger.info(f"Loaded config from: {path}")
        return data
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(f"Failed to parse TOML: {e}", source=str(path))


def _find_config_file() -> Path | None:
    """Find the first existing config file."""
    for path in CONFIG_PATHS:
        if path.exists():
            return path
    return None


def _load_env_overrides() -> dict[str, Any]:
    """Load overrides from environment variables."""
    overrides: dict[str, Any] = {}

    if data_env := os.environ.get(f"{ENV_PREFIX}DATA"):
        overrides.setdefault("data", {})["csv_path"] = data_env

    if bars_env := os.environ.get(f"{ENV_PREFIX}VISIBLE_BARS"):
        try:
            visible_bars = int(bars_env)
        except ValueError:
            raise ConfigError(
                f"Expected an integer, got {bars_env!r}",
                source="environment",
                field=f"{ENV_PREFIX}VISIBLE_BARS",
            )
        overrides.setdefault("view", {})["visible_bars"] = visible_bars

    return overrides


def _deep_merge(base: dict, override: dict) -> dict:
    """Deep merge two dictionaries."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def load_config(config_path: Path | str | None = None) -> CandlechartConfig:
    """
    Load and validate configuration.

    Args:
        config_path: Explicit path to config file (optional)

    Returns:
        Validated CandlechartConfig

    Raises:
        ConfigError: If configuration is invalid
    """
    config_data: dict[str, Any] = {}
    source = "defaults"

    # Load from config file
    if config_path:
        path = Path(config_path)
        if not path.exists():
            raise ConfigError(f"Config file not found: {path}", source=str(path))
        config_data = _load_toml_file(path)
        source = str(path)
    else:
        found_path = _find_config_file()
        if found_path:
            config_data = _load_toml_file(found_path)
            source = str(found_path)

    env_overrides = _load_env_overrides()
    if env_overrides:
        config_data = _deep_merge(config_data, env_overrides)
        logger.debug(f"Applied {len(env_overrides)} override section(s) from environment")

    # Validate and create config
    try:
        config = CandlechartConfig(**config_data)
    except ValidationError as e:
        errors = e.errors()
        if errors:
            first_error = errors[0]
            field = ".".join(str(loc) for loc in first_error.get("loc", []))
            msg = first_error.get("msg", "Validation error")
            raise ConfigError(f"Invalid configuration: {msg}", source=source, field=field)
        raise ConfigError(f"Invalid configuration: {e}", source=source)

    return config


@lru_cache
def get_config() -> CandlechartConfig:
    """
    Get singleton configuration instance.

    Uses LRU cache to ensure config is loaded only once.
    """
    return load_config()


def reload_config(config_path: Path | str | None = None) -> CandlechartConfig:
    """
    Force reload configuration.

    Clears the cache and reloads from file/environment.
    """
    get_config.cache_clear()
    if config_path:
        return load_config(config_path)
    return get_config()
