"""
Configuration models and loading.

This module provides Pydantic models for terseid configuration
with multi-layer merging: defaults < user < project < env vars.
"""

from .loader import (
    clear_cache,
    get_env_file_paths,
    get_project_config_path,
    get_user_config_path,
    get_xdg_config_home,
    load_config,
)
from .models import (
    IdConfig,
    ResolverConfig,
    ResolverSettings,
    StoreConfig,
    TerseidConfig,
)

__all__ = [
    # Models
    "IdConfig",
    "ResolverConfig",
    "ResolverSettings",
    "StoreConfig",
    "TerseidConfig",
    # Loader functions
    "clear_cache",
    "get_env_file_paths",
    "get_project_config_path",
    "get_user_config_path",
    "get_xdg_config_home",
    "load_config",
]
