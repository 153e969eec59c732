"""Configuration management for sdkmodels."""

import copy
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv

from .constants import (
    COLLISION_POLICIES,
    COMMUNITY_PROVIDERS,
    CONFIG_FILENAME,
    DEFAULT_EXCLUDED_ALIASES,
    DEFAULT_OUTPUT_FILE,
    OFFICIAL_SCOPES,
    OUTPUT_FORMATS,
    TYPE_FILE_CANDIDATES,
)

DEFAULT_CONFIG: Dict[str, Any] = {
    "version": 1,
    "official_scopes": list(OFFICIAL_SCOPES),
    "community_providers": list(COMMUNITY_PROVIDERS),
    "type_file_candidates": list(TYPE_FILE_CANDIDATES),
    "ignore_providers": [],
    "excluded_aliases": list(DEFAULT_EXCLUDED_ALIASES),
    "output_file": DEFAULT_OUTPUT_FILE,
    "output_format": "typescript",
    "on_collision": "error",
}

_LIST_KEYS = (
    "official_scopes",
    "community_providers",
    "type_file_candidates",
    "ignore_providers",
    "excluded_aliases",
)


class ConfigError(ValueError):
    """Raised for configuration values that cannot be used."""


def validate_config(config: Dict) -> bool:
    """Basic structural check for configuration.

    Args:
        config: Configuration dictionary to validate

    Returns:
        True if config has valid structure, False otherwise
    """
    if not isinstance(config, dict):
        return False

    if "version" not in config:
        return False

    if not isinstance(config["version"], int):
        return False

    for key in _LIST_KEYS:
        if key not in config:
            continue
        value = config[key]
        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            return False

    if "output_file" in config and not isinstance(config["output_file"], str):
        return False

    if config.get("output_format", "typescript") not in OUTPUT_FORMATS:
        return False

    if config.get("on_collision", "error") not in COLLISION_POLICIES:
        return False

    return True


def is_safe_to_create_config(root_path: Path) -> bool:
    """Check if the directory is a sensitive system path to prevent accidental config creation.

    Args:
        root_path: The directory path to check.

    Returns:
        True if the path is considered safe, False if it is a sensitive system directory.
    """
    abs_path = root_path.resolve()
    sensitive_parents = {"/bin", "/sbin", "/etc", "/usr", "/var", "/root", "/boot", "/dev"}

    if abs_path == Path.home() or abs_path == Path("/"):
        return False

    path_str = str(abs_path)
    return not any(path_str == s or path_str.startswith(s + "/") for s in sensitive_parents)


def load_or_create_config(
    root_path: Path,
    write_back: bool = True,
    logger: Optional[logging.Logger] = None
) -> Dict[str, Any]:
    """Load the project configuration, merged over the defaults.

    Args:
        root_path: Directory to look for config.
        write_back: If True, persist the merged config when it is safe to do so.
        logger: Optional logger instance.

    Returns:
        The merged configuration dictionary.
    """
    logger = logger or logging.getLogger(__name__)
    config_path = root_path / CONFIG_FILENAME
    config = copy.deepcopy(DEFAULT_CONFIG)

    if config_path.exists():
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                loaded_config = json.load(f)

            if not validate_config(loaded_config):
                logger.warning("Config file has invalid structure, using defaults")
            else:
                config.update(loaded_config)
        except (OSError, ValueError) as e:
            logger.warning(f"Failed to read config: {e}")

    if write_back and (config_path.exists() or is_safe_to_create_config(root_path)):
        try:
            with open(config_path, "w", encoding="utf-8") as f:
                json.dump(config, f, indent=4)
        except OSError as e:
            logger.error(f"Could not save config: {e}")

    return config


def load_env_file(start_path: Path) -> bool:
    """Load a ``.env`` file from the project directory if it exists.

    Existing environment variables are never overridden.

    Returns:
        True if a ``.env`` file was found and loaded.
    """
    env_file = start_path / ".env"
    if not env_file.exists():
        return False
    return load_dotenv(env_file, override=False)
