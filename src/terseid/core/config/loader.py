"""
Configuration loading with multi-layer merging.

Implements the configuration precedence chain:
    defaults < user config < project config < env vars

Env vars are read from the process environment layered over .env files:
    ~/.config/terseid/.env < {project}/.env < {project}/.env.local < shell
"""

import json
import logging
import os
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from dotenv import dotenv_values

from .models import TerseidConfig

logger = logging.getLogger(__name__)

# Global cache to avoid reloading config multiple times per session
_config_cache: TerseidConfig | None = None

PROJECT_CONFIG_NAME = ".terseid.json"
PROJECT_ENV_NAMES = (".env", ".env.local")


def get_xdg_config_home() -> Path:
    """
    Get XDG config home directory.

    Returns:
        Path to config directory (defaults to ~/.config)
    """
    if xdg_home := os.environ.get("XDG_CONFIG_HOME"):
        return Path(xdg_home)
    return Path.home() / ".config"


def get_user_config_path() -> Path:
    """
    Get path to user configuration file.

    Returns:
        Path to ~/.config/terseid/config.json (or XDG equivalent)
    """
    return get_xdg_config_home() / "terseid" / "config.json"


def get_project_config_path(cwd: Path | None = None) -> Path:
    """
    Get path to project configuration file.

    Args:
        cwd: Working directory to search from (defaults to current directory)

    Returns:
        Path to .terseid.json in the project root
    """
    if cwd is None:
        cwd = Path.cwd()
    return cwd / PROJECT_CONFIG_NAME


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """
    Deep merge two dictionaries.

    Values in `override` take precedence over values in `base`.
    Nested dicts are merged, not replaced.

    Example:
        >>> deep_merge({"ids": {"prefix": "bd", "min_hash_length": 3}}, {"ids": {"prefix": "tk"}})
        {'ids': {'prefix': 'tk', 'min_hash_length': 3}}
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def load_json_file(path: Path) -> dict[str, Any] | None:
    """
    Load a JSON file, returning None if it doesn't exist or is invalid.

    Args:
        path: Path to JSON file

    Returns:
        Parsed JSON as dict, or None if file doesn't exist or can't be parsed
    """
    if not path.exists():
        return None

    try:
        with path.open(encoding="utf-8") as f:
            data = json.load(f)
            if isinstance(data, dict):
                return data
            logger.warning("Ignoring config at %s: top level is not an object", path)
            return None
    except (json.JSONDecodeError, OSError) as e:
        logger.warning("Failed to parse config at %s: %s", path, e)
        return None


def get_env_file_paths(project_dir: Path | None = None) -> list[Path]:
    """
    Get the .env files that feed TERSEID_* overrides, lowest precedence first.

    Args:
        project_dir: Project directory holding .env/.env.local (defaults to cwd)

    Returns:
        User .env followed by the project's .env and .env.local
    """
    if project_dir is None:
        project_dir = Path.cwd()
    user_env = get_xdg_config_home() / "terseid" / ".env"
    return [user_env, *(project_dir / name for name in PROJECT_ENV_NAMES)]


def load_env_files(paths: Iterable[Path]) -> dict[str, str]:
    """
    Read .env files with python-dotenv; later files win.

    Missing files are skipped and keys without a value are dropped.
    Nothing is written to os.environ.
    """
    values: dict[str, str] = {}
    for path in paths:
        if not path.exists():
            continue
        for key, value in dotenv_values(path).items():
            if value is not None:
                values[key] = value
        logger.debug("Read env file %s", path)
    return values


def get_environment(project_dir: Path | None = None) -> dict[str, str]:
    """Process environment layered over the project's .env files."""
    return {**load_env_files(get_env_file_paths(project_dir)), **os.environ}


def _set_int(
    result: dict[str, Any], env: Mapping[str, str], section: str, key: str, env_var: str
) -> None:
    raw = env.get(env_var)
    if not raw:
        return
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Invalid %s value '%s', ignoring", env_var, raw)
        return
    result.setdefault(section, {})[key] = value


def apply_env_overrides(
    config_dict: dict[str, Any], env: Mapping[str, str] | None = None
) -> dict[str, Any]:
    """
    Apply environment variable overrides to configuration.

    Env vars have the highest precedence and override all config files.

    Supported env vars:
        TERSEID_PREFIX - overrides ids.prefix
        TERSEID_MIN_HASH_LENGTH - overrides ids.min_hash_length
        TERSEID_MAX_HASH_LENGTH - overrides ids.max_hash_length
        TERSEID_MAX_COLLISION_PROB - overrides ids.max_collision_prob
        TERSEID_SUBSTRING_MATCH - overrides resolver.allow_substring_match
        TERSEID_IDS_FILE - overrides store.ids_file

    Args:
        config_dict: Configuration dictionary to override
        env: Variables to read (defaults to os.environ)

    Returns:
        Configuration dictionary with env var overrides applied
    """
    if env is None:
        env = os.environ

    result = {
        key: dict(value) if isinstance(value, dict) else value
        for key, value in config_dict.items()
    }

    if prefix := env.get("TERSEID_PREFIX"):
        result.setdefault("ids", {})["prefix"] = prefix.lower()

    _set_int(result, env, "ids", "min_hash_length", "TERSEID_MIN_HASH_LENGTH")
    _set_int(result, env, "ids", "max_hash_length", "TERSEID_MAX_HASH_LENGTH")

    if prob_str := env.get("TERSEID_MAX_COLLISION_PROB"):
        try:
            prob = float(prob_str)
            if not 0.0 < prob < 1.0:
                logger.warning(
                    "TERSEID_MAX_COLLISION_PROB must be between 0 and 1, got %s, ignoring",
                    prob_str,
                )
            else:
                result.setdefault("ids", {})["max_collision_prob"] = prob
        except ValueError:
            logger.warning("Invalid TERSEID_MAX_COLLISION_PROB value '%s', ignoring", prob_str)

    if (substring_str := env.get("TERSEID_SUBSTRING_MATCH")) is not None:
        enabled = substring_str.lower() not in ("false", "0", "")
        result.setdefault("resolver", {})["allow_substring_match"] = enabled

    if ids_file := env.get("TERSEID_IDS_FILE"):
        result.setdefault("store", {})["ids_file"] = ids_file

    return result


def get_default_config() -> dict[str, Any]:
    """
    Get hardcoded default configuration.

    Returns:
        Dictionary with default configuration values
    """
    return {
        "ids": {
            "prefix": "id",
            "min_hash_length": 3,
            "max_hash_length": 8,
            "max_collision_prob": 0.25,
        },
        "resolver": {"allowed_prefixes": [], "allow_substring_match": True},
        "store": {"ids_file": ".terseid/ids.txt"},
    }


def load_config(project_dir: Path | None = None, use_cache: bool = True) -> TerseidConfig:
    """
    Load configuration with multi-layer merging.

    Configuration precedence (highest to lowest):
        1. Environment variables (TERSEID_*), from the shell or .env files
        2. Project config (.terseid.json)
        3. User config (~/.config/terseid/config.json)
        4. Hardcoded defaults

    Args:
        project_dir: Project directory holding .terseid.json and .env files
            (defaults to cwd)
        use_cache: If True, return cached config from previous load

    Returns:
        Validated TerseidConfig instance

    Raises:
        ValidationError: If the merged config fails Pydantic validation

    Example:
        >>> config = load_config()
        >>> config.ids.min_hash_length
        3
    """
    global _config_cache

    if use_cache and _config_cache is not None:
        return _config_cache

    merged = get_default_config()

    user_config_path = get_user_config_path()
    if user_config := load_json_file(user_config_path):
        merged = deep_merge(merged, user_config)

    project_config_path = get_project_config_path(project_dir)
    if project_config := load_json_file(project_config_path):
        merged = deep_merge(merged, project_config)

    merged = apply_env_overrides(merged, get_environment(project_dir))

    config = TerseidConfig(**merged)

    _config_cache = config

    return config


def clear_cache() -> None:
    """
    Clear the cached configuration.

    Useful for testing or when config files change during execution.
    """
    global _config_cache
    _config_cache = None
