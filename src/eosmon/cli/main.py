"""
Command-line interface for eosmon.

Runs one listing per requested entity kind against the configured EOS
instance and prints the records as tables or stores them as a snapshot.
"""

import argparse
import dataclasses
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence, Tuple, Type

import polars as pl

from ..client import EosClient
from ..config import DEFAULT_CONFIG_PATH, load_config
from ..models import (
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
from ..storage import SnapshotWriter, records_to_frame
from ..validation import (
    EosError,
    ValidationError,
    handle_cli_error,
    validate_mgm_url,
)

# --- Logging Setup ---
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)-5.5s] %(name)s:%(filename)s:%(lineno)d\t %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    stream=sys.stderr,
)
logger = logging.getLogger(__name__)

KINDS = ["nodes", "spaces", "groups", "filesystems", "versions", "namespace"]

Table = Tuple[str, list, Type]


def collect_kind(client: EosClient, kind: str, identity: Optional[str] = None) -> List[Table]:
    """
    Run the listing for one entity kind.

    Returns:
        List of (table name, records, record type). ``namespace`` produces
        two tables, statistics and activity.
    """
    if kind == "nodes":
        return [("nodes", client.list_nodes(identity), NodeRecord)]
    if kind == "spaces":
        return [("spaces", client.list_spaces(identity), SpaceRecord)]
    if kind == "groups":
        return [("groups", client.list_groups(identity), GroupRecord)]
    if kind == "filesystems":
        return [("filesystems", client.list_filesystems(identity), FSInfoRecord)]
    if kind == "versions":
        return [("versions", client.list_versions(identity), VersionRecord)]
    if kind == "namespace":
        stats, activity = client.list_namespace(identity)
        return [
            ("namespace", stats, NamespaceRecord),
            ("namespace_activity", activity, NamespaceActivityRecord),
        ]
    raise ValueError(f"Unknown entity kind: {kind}")


def _load_app_config(config_path: Optional[Path]) -> AppConfig:
    if config_path is None:
        if not DEFAULT_CONFIG_PATH.exists():
            logger.warning(
                f"No configuration at {DEFAULT_CONFIG_PATH}, using built-in defaults"
            )
            return AppConfig(client=ClientConfig())
        config_path = DEFAULT_CONFIG_PATH
    return load_config(config_path)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="List the nodes, spaces, groups, filesystems, versions and "
        "namespace statistics of an EOS instance."
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        help=f"Path to config.toml. Defaults to {DEFAULT_CONFIG_PATH}.",
    )
    parser.add_argument(
        "-k",
        "--kind",
        action="append",
        choices=KINDS,
        help="Entity kind to list; repeat for several. Defaults to all kinds.",
    )
    parser.add_argument(
        "--identity",
        type=str,
        help="OS user to impersonate via 'eos -r <uid> <gid>'.",
    )
    parser.add_argument(
        "--mgm-url",
        type=str,
        help="Override the MGM endpoint from the configuration.",
    )
    parser.add_argument(
        "--format",
        choices=["table", "parquet", "json"],
        default="table",
        help="Print tables (default) or write a parquet/json snapshot.",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        help="Directory for snapshots. Defaults to snapshot.output_dir from config.",
    )
    return parser


def main_cli(argv: Optional[Sequence[str]] = None) -> None:
    """
    Main command-line interface for eosmon.

    A kind whose listing or snapshot write fails is logged and skipped. The
    process exits with status 1 when every requested kind failed.

    Raises:
        SystemExit: On configuration errors or when all listings failed.
    """
    args = build_parser().parse_args(argv)

    try:
        app_config = _load_app_config(args.config)
    except (FileNotFoundError, ValidationError) as e:
        handle_cli_error(error=e, context="configuration loading", exit_code=1, logger=logger)

    logging.getLogger().setLevel(app_config.log_level)

    client_config = app_config.client
    if args.mgm_url:
        try:
            mgm_url = validate_mgm_url(args.mgm_url, field_name="--mgm-url")
        except ValidationError as e:
            handle_cli_error(error=e, context="--mgm-url validation", exit_code=1, logger=logger)
        client_config = dataclasses.replace(client_config, mgm_url=mgm_url)

    client = EosClient(client_config)
    kinds = args.kind or KINDS

    writer = None
    if args.format != "table":
        storage = dataclasses.replace(app_config.storage, format=args.format)
        writer = SnapshotWriter(storage, args.output_dir or app_config.output_dir)

    failures = 0
    for kind in kinds:
        try:
            tables = collect_kind(client, kind, args.identity)
        except EosError as e:
            logger.error(f"Listing {kind} failed: {type(e).__name__}: {e}")
            failures += 1
            continue

        if writer is not None:
            try:
                for name, records, record_type in tables:
                    writer.write(name, records, record_type)
            except OSError as e:
                logger.error(f"Writing {kind} snapshot failed: {type(e).__name__}: {e}")
                failures += 1
            continue

        for name, records, record_type in tables:
            with pl.Config(tbl_rows=-1, tbl_cols=-1, tbl_width_chars=65535, fmt_str_lengths=1000):
                print(f"# {name} ({len(records)})")
                print(records_to_frame(records, record_type))

    if failures == len(kinds):
        logger.error("All listings failed")
        sys.exit(1)

    if writer is not None:
        logger.info(f"Snapshot written to {writer.directory}")


if __name__ == "__main__":
    main_cli()
