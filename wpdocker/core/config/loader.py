"""
Configuration loader — reads an optional setup YAML into ``SetupConfig``.

Without a file the built-in defaults apply, which reproduce the stock
``wordpress-docker`` scaffold.  A file only needs the keys it changes:

    project_dir: blog-stack
    nginx:
      http_port: 8080
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from wpdocker.core.models.setup import SetupConfig

logger = logging.getLogger(__name__)

# Environment variable naming a config file when --config is not given
CONFIG_ENV_VAR = "WPD_CONFIG"


class ConfigError(Exception):
    """Raised when setup configuration is invalid or missing."""


def resolve_config_path(path: Path | None = None) -> Path | None:
    """Pick the config file: explicit path first, then ``$WPD_CONFIG``."""
    if path is not None:
        return path
    env_path = os.environ.get(CONFIG_ENV_VAR, "").strip()
    return Path(env_path) if env_path else None


def load_config(path: Path | None = None) -> SetupConfig:
    """Load and validate setup configuration.

    Args:
        path: Explicit path to a YAML file. If None, ``$WPD_CONFIG`` is
            consulted; if that is unset too, defaults are returned.

    Returns:
        Validated SetupConfig.

    Raises:
        ConfigError: If the file is missing or invalid.
    """
    path = resolve_config_path(path)
    if path is None:
        logger.debug("No config file given, using defaults")
        return SetupConfig()

    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    logger.debug("Loading setup config from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    # An empty file means "all defaults"
    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    try:
        config = SetupConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid setup configuration in {path}: {e}") from e

    logger.info("Loaded setup config from %s (project_dir=%s)", path, config.project_dir)
    return config
