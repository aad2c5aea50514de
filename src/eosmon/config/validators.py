"""
Validation of the raw configuration read from ``config.toml``.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional

from ..models.config import (
    AppConfig,
    ClientConfig,
    DEFAULT_EOS_BINARY,
    DEFAULT_MGM_URL,
    DEFAULT_TIMEOUT_SECONDS,
)
from ..validation import (
    ValidationError,
    validate_enum_choice,
    validate_executable_path,
    validate_mgm_url,
    validate_positive_float,
)
from .storage_config import StorageConfig

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def validate_client_config(eos_data: Dict[str, Any]) -> ClientConfig:
    """
    Validate the ``[eos]`` section and create a ClientConfig.

    Raises:
        ValidationError: If validation fails
    """
    binary = validate_executable_path(
        eos_data.get("binary", DEFAULT_EOS_BINARY), field_name="eos.binary"
    )
    mgm_url = validate_mgm_url(
        eos_data.get("mgm_url", DEFAULT_MGM_URL), field_name="eos.mgm_url"
    )
    timeout = validate_positive_float(
        eos_data.get("timeout_seconds", DEFAULT_TIMEOUT_SECONDS),
        min_value=0.1,
        max_value=600.0,
        field_name="eos.timeout_seconds",
    )

    identity: Optional[str] = eos_data.get("identity", "")
    if not isinstance(identity, str):
        raise ValidationError(
            "eos.identity must be a string", field_name="eos.identity", value=identity
        )

    enable_command_logging = eos_data.get("enable_command_logging", False)
    if not isinstance(enable_command_logging, bool):
        raise ValidationError(
            "eos.enable_command_logging must be a boolean",
            field_name="eos.enable_command_logging",
            value=enable_command_logging,
        )

    return ClientConfig(
        binary=binary,
        mgm_url=mgm_url,
        timeout=timeout,
        identity=identity.strip() or None,
        enable_command_logging=enable_command_logging,
    )


def validate_storage_config(snapshot_data: Dict[str, Any]) -> StorageConfig:
    """Validate the ``[snapshot]`` storage settings."""
    try:
        return StorageConfig.from_dict(snapshot_data)
    except ValueError as e:
        raise ValidationError(str(e), field_name="snapshot", value=snapshot_data) from e


def validate_app_config(data: Dict[str, Any], base_dir: Path = Path(".")) -> AppConfig:
    """
    Validate the whole configuration document.

    Args:
        data: Parsed TOML document
        base_dir: Directory relative output paths are resolved against

    Returns:
        Validated AppConfig instance
    """
    client = validate_client_config(data.get("eos", {}))

    log_level = validate_enum_choice(
        data.get("logging", {}).get("level", "INFO"),
        choices=LOG_LEVELS,
        field_name="logging.level",
        case_sensitive=False,
    )

    snapshot_data = data.get("snapshot", {})
    storage = validate_storage_config(snapshot_data)

    output_dir = snapshot_data.get("output_dir", "snapshots")
    if not isinstance(output_dir, str) or not output_dir.strip():
        raise ValidationError(
            "snapshot.output_dir must be a non-empty string",
            field_name="snapshot.output_dir",
            value=output_dir,
        )
    output_path = Path(output_dir)
    if not output_path.is_absolute():
        output_path = base_dir / output_path

    return AppConfig(
        client=client,
        log_level=log_level,
        storage=storage,
        output_dir=output_path,
    )
