"""
Configuration file loading.

This module reads ``config.toml`` and builds a validated AppConfig. There is
no process-wide cache: callers load the configuration once and pass it on.
"""

import logging
import tomllib
from pathlib import Path
from typing import Any, Dict

from ..models.config import AppConfig
from ..validation import handle_config_error, ErrorSeverity
from .validators import validate_app_config

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent.parent / "conf" / "config.toml"


def load_toml_file(file_path: Path, description: str = "configuration file") -> Dict[str, Any]:
    """
    Read a TOML document; ``description`` names it in log messages.

    Raises:
        FileNotFoundError: If the file is missing
        tomllib.TOMLDecodeError: If the file is not valid TOML (logged as
            critical before propagating)
    """
    logger.info(f"Loading {description} from: {file_path}")

    if not file_path.exists():
        logger.error(f"{description} not found: {file_path}")
        raise FileNotFoundError(f"{description} not found: {file_path}")

    try:
        with open(file_path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        handle_config_error(
            error=e,
            context=f"parsing {description}",
            severity=ErrorSeverity.CRITICAL,
            reraise=True,
            logger=logger
        )
        raise


def load_config(config_path: Path = DEFAULT_CONFIG_PATH) -> AppConfig:
    """
    Load and validate the application configuration.

    Relative ``snapshot.output_dir`` values are resolved against the
    directory holding the configuration file.

    Raises:
        FileNotFoundError: If the configuration file is missing
        ValidationError: If a value fails validation
        tomllib.TOMLDecodeError: If the file is malformed
    """
    config_path = Path(config_path)
    data = load_toml_file(config_path, "main configuration file")
    app_config = validate_app_config(data, base_dir=config_path.parent)
    logger.info(
        f"Loaded configuration for MGM {app_config.client.mgm_url} "
        f"(binary: {app_config.client.binary}, timeout: {app_config.client.timeout}s)"
    )
    return app_config
