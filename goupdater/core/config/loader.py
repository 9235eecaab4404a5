"""
Configuration loader — reads config.yml into ``UpdaterConfig``.

Lookup order: explicit ``--config`` path, then ``$GOUP_CONFIG``, then
``~/.config/go-updater/config.yml``. A missing file at the implicit
locations means "all defaults"; a missing explicit file is an error.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from goupdater.core.models.config import UpdaterConfig

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "GOUP_CONFIG"
DEFAULT_CONFIG_RELPATH = Path(".config") / "go-updater" / "config.yml"


class ConfigError(Exception):
    """Raised when the updater configuration is invalid or unreadable."""


def find_config_file(home: Path | None = None) -> Path | None:
    """Return the implicit config file if one exists."""
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)

    candidate = (home or Path.home()) / DEFAULT_CONFIG_RELPATH
    return candidate if candidate.is_file() else None


def load_config(path: Path | None = None, *, home: Path | None = None) -> UpdaterConfig:
    """Load and validate the updater configuration.

    Args:
        path: Explicit config path (must exist). If None, searches the
            implicit locations and falls back to defaults.
        home: Home directory override for the implicit lookup.

    Raises:
        ConfigError: The file is missing (explicit path), unreadable,
            not YAML, or fails validation.
    """
    if path is None:
        path = find_config_file(home)
        if path is None:
            logger.debug("No config file found, using defaults")
            return UpdaterConfig()

    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    logger.debug("Loading config from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return UpdaterConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    try:
        return UpdaterConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {path}: {e}") from e
