"""Configuration file support for the CLI.

A config file supplies defaults for flags the user did not pass::

    include_pre_releases: true
    log_level: WARNING
    versions_file: ./versions.yml

Values given on the command line always win.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional

import yaml

from constants import Constants

logger = logging.getLogger(__name__)

_KNOWN_KEYS = {"include_pre_releases", "log_level", "versions_file"}


class ConfigError(Exception):
    """The configuration file exists but cannot be used."""


def resolve_config_path(cli_path: Optional[str]) -> Optional[str]:
    """Return the config path from the CLI, else from LATEST_VERSION_CONFIG."""
    if cli_path:
        return cli_path
    env_path = os.environ.get(Constants.ENV_CONFIG)
    if env_path and env_path.strip():
        return env_path.strip()
    return None


def load_config(config_path: Optional[str]) -> Dict[str, Any]:
    """Load configuration from a YAML or JSON file.

    Args:
        config_path: Path to the file, or None.

    Returns:
        Validated configuration dict; empty when no file is configured or found.

    Raises:
        ConfigError: if the file cannot be parsed or holds invalid values.
    """
    if not config_path:
        return {}

    if not os.path.isfile(config_path):
        logger.warning("Config file not found: %s", config_path)
        return {}

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Failed to load config {config_path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config {config_path} must be a mapping")

    for key in sorted(set(data) - _KNOWN_KEYS):
        logger.warning("Ignoring unknown config key '%s' in %s", key, config_path)

    config: Dict[str, Any] = {}
    if "include_pre_releases" in data:
        value = data["include_pre_releases"]
        if not isinstance(value, bool):
            raise ConfigError("include_pre_releases must be true or false")
        config["include_pre_releases"] = value
    if "log_level" in data:
        level = str(data["log_level"]).upper()
        if level not in Constants.LOG_LEVELS:
            raise ConfigError(f"log_level must be one of {', '.join(Constants.LOG_LEVELS)}")
        config["log_level"] = level
    if "versions_file" in data:
        path = str(data["versions_file"])
        # relative to the config file, not the working directory
        config["versions_file"] = os.path.join(os.path.dirname(os.path.abspath(config_path)), path)
    return config


def apply_config_defaults(args, config: Dict[str, Any]) -> None:
    """Fill in args the CLI left unset from ``config``."""
    if args.INCLUDE_PRE_RELEASES is None:
        args.INCLUDE_PRE_RELEASES = bool(config.get("include_pre_releases", False))
    if not args.LOG_LEVEL:
        args.LOG_LEVEL = config.get("log_level")
    if not args.VERSIONS_FILE:
        args.VERSIONS_FILE = config.get("versions_file")
