"""
eosmon: typed listings of an EOS storage cluster.

This package drives the ``eos`` administration tool, parses its monitoring
format and JSON output and returns immutable records for nodes, spaces,
scheduling groups, filesystems, software versions and namespace statistics.

The package is organized into specialized modules:
- config: Configuration loading and validation
- models: Records and configuration data structures
- validation: Error taxonomy and input validation
- system: Command execution, identity resolution, process termination
- parsing: Monitoring-format tokenizer and record projectors
- client: EosClient with one listing per entity kind
- storage: Snapshot export through Polars
- cli: Command-line interface

Usage:
    From command line:
        eosmon -c conf/config.toml -k nodes -k groups

    Programmatically:
        from eosmon import EosClient, ClientConfig
        client = EosClient(ClientConfig(mgm_url="root://eos.example.org"))
        nodes = client.list_nodes()
"""

# Configuration is imported first: the models depend on its storage settings.
from .config import load_config
from .models import (
    AppConfig,
    ClientConfig,
    FSInfoRecord,
    GroupRecord,
    NamespaceActivityRecord,
    NamespaceRecord,
    NodeRecord,
    SpaceRecord,
    VersionRecord,
)
from .client import EosClient
from .parsing import tokenize
from .validation import (
    CommandCancelledError,
    CommandError,
    CommandFailedError,
    CommandTimeoutError,
    EosError,
    IdentityResolutionError,
    NotFoundError,
    ProtocolError,
    ValidationError,
)

__version__ = "1.0.0"

__all__ = [
    "load_config",
    "EosClient",
    "tokenize",
    # Models
    "AppConfig",
    "ClientConfig",
    "FSInfoRecord",
    "GroupRecord",
    "NamespaceActivityRecord",
    "NamespaceRecord",
    "NodeRecord",
    "SpaceRecord",
    "VersionRecord",
    # Errors
    "EosError",
    "IdentityResolutionError",
    "CommandError",
    "CommandTimeoutError",
    "CommandCancelledError",
    "CommandFailedError",
    "NotFoundError",
    "ProtocolError",
    "ValidationError",
]
