"""
Configuration data models.

This module contains the configuration handed explicitly to the EOS client
and the root application configuration loaded from ``config.toml``.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from ..config.storage_config import StorageConfig

DEFAULT_EOS_BINARY = "/usr/bin/eos"
DEFAULT_MGM_URL = "root://eos-example.org"
DEFAULT_TIMEOUT_SECONDS = 10.0


@dataclass(frozen=True)
class ClientConfig:
    """
    Settings threaded through every call the client makes to the eos binary.

    Attributes:
        binary: Absolute path of the eos administration tool.
        mgm_url: MGM endpoint exported to the tool as EOS_MGM_URL.
        timeout: Deadline in seconds for one listing operation.
        identity: Default OS user to impersonate via ``-r <uid> <gid>``.
            None disables impersonation.
        enable_command_logging: Log every rendered command line.
        logger: Logger receiving the command lines; defaults to the
            ``eosmon.system.commands`` module logger.
    """

    binary: str = DEFAULT_EOS_BINARY
    mgm_url: str = DEFAULT_MGM_URL
    timeout: float = DEFAULT_TIMEOUT_SECONDS
    identity: Optional[str] = None
    enable_command_logging: bool = False
    logger: Optional[logging.Logger] = field(default=None, repr=False, compare=False)


@dataclass
class AppConfig:
    """
    The root configuration object that aggregates all loaded settings.
    """

    # Settings for the EOS client.
    client: ClientConfig
    # Root log level for the command-line front end.
    log_level: str = "INFO"
    # Snapshot storage settings.
    storage: StorageConfig = field(default_factory=StorageConfig)
    # Directory receiving snapshot files.
    output_dir: Path = Path("snapshots")
