"""
Configuration management for the eosmon package.

This module loads and validates ``config.toml``. The resulting AppConfig is
passed explicitly to the client and the CLI; nothing is cached globally.
"""

from .loader import DEFAULT_CONFIG_PATH, load_config, load_toml_file
from .storage_config import StorageConfig
from .validators import (
    validate_app_config,
    validate_client_config,
    validate_storage_config,
)

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "StorageConfig",
    "load_config",
    "load_toml_file",
    "validate_app_config",
    "validate_client_config",
    "validate_storage_config",
]
