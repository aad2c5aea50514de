"""
Data models for the eosmon package.

- records: immutable snapshots of EOS entities
- config: client and application configuration
"""

from .config import AppConfig, ClientConfig
from .records import (
    FSInfoRecord,
    GroupRecord,
    NamespaceActivityRecord,
    NamespaceRecord,
    NodeRecord,
    SpaceRecord,
    VersionRecord,
)

__all__ = [
    "AppConfig",
    "ClientConfig",
    "FSInfoRecord",
    "GroupRecord",
    "NamespaceActivityRecord",
    "NamespaceRecord",
    "NodeRecord",
    "SpaceRecord",
    "VersionRecord",
]
