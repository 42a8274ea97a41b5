"""
seed-split configuration — optional TOML file with CLI/env overrides.

Lookup order for the file:
    1. explicit path (``--config``)
    2. $SEEDSPLIT_CONFIG
    3. ~/.seedsplit/config.toml

Example config.toml:
    language = "english"
    checksum = true
    log_level = "INFO"
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

from seedsplit import CONFIG_DEFAULT_PATH, CONFIG_ENV_VAR, DEFAULT_LANGUAGE
from seedsplit.errors import ConfigError

log = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, Any] = {
    "language": DEFAULT_LANGUAGE,
    "checksum": True,  # write standard checksum bits into phrase padding
    "log_level": "WARNING",
}

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def config_path(path: str | Path | None = None) -> Path:
    """Resolve which config file to read (it may not exist)."""
    if path:
        return Path(path).expanduser()
    env = os.environ.get(CONFIG_ENV_VAR, "").strip()
    if env:
        return Path(env).expanduser()
    return Path(CONFIG_DEFAULT_PATH).expanduser()


def _validate(config: dict[str, Any]) -> None:
    if not isinstance(config["language"], str) or not config["language"]:
        raise ConfigError(f"language must be a non-empty string, got {config['language']!r}")
    if not isinstance(config["checksum"], bool):
        raise ConfigError(f"checksum must be true or false, got {config['checksum']!r}")
    level = config["log_level"]
    if not isinstance(level, str) or level.upper() not in _LOG_LEVELS:
        raise ConfigError(
            f"log_level must be one of {', '.join(_LOG_LEVELS)}, got {level!r}"
        )
    config["log_level"] = level.upper()


def load_config(path: str | Path | None = None) -> dict[str, Any]:
    """Load config from TOML, falling back to defaults.

    Raises:
        ConfigError: If a known key has an invalid value.
    """
    config = dict(DEFAULT_CONFIG)

    cfg_path = config_path(path)
    if cfg_path.is_file():
        try:
            import tomllib
        except ImportError:
            import tomli as tomllib

        try:
            with open(cfg_path, "rb") as f:
                file_config = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            log.warning("Failed to load config from %s: %s", cfg_path, e)
            file_config = {}

        for key, value in file_config.items():
            if key not in DEFAULT_CONFIG:
                log.warning("Ignoring unknown config key %r in %s", key, cfg_path)
                continue
            config[key] = value
        log.debug("Loaded config from %s", cfg_path)

    _validate(config)
    return config
