"""
Export of record listings to Polars DataFrames and snapshot files.

A snapshot is a directory holding one file per entity kind, written by the
backend selected in the storage configuration (Parquet or JSON).
"""

import logging
import time
from dataclasses import astuple, fields
from pathlib import Path
from typing import Sequence, Type

import polars as pl

from ..config.storage_config import StorageConfig
from .factory import create_storage

logger = logging.getLogger(__name__)


def record_columns(record_type: Type) -> list:
    """Column names of ``record_type``, in field order."""
    return [f.name for f in fields(record_type)]


def records_to_frame(records: Sequence, record_type: Type) -> pl.DataFrame:
    """
    Convert a list of records into a DataFrame of string columns.

    An empty list still yields the full schema of ``record_type``.
    """
    schema = {name: pl.Utf8 for name in record_columns(record_type)}
    rows = [astuple(record) for record in records]
    return pl.DataFrame(rows, schema=schema, orient="row")


class SnapshotWriter:
    """
    Writes the listings of one collection cycle into a snapshot directory.

    Attributes:
        config: Storage format and compression.
        directory: Directory receiving the files of this snapshot.
    """

    def __init__(self, config: StorageConfig, output_dir: Path):
        self.config = config
        self.storage = create_storage(config)
        self.captured_at = time.strftime("%Y%m%d_%H%M%S")
        self.directory = Path(output_dir) / f"snapshot_{self.captured_at}"

    def write(self, kind: str, records: Sequence, record_type: Type) -> Path:
        """
        Store the records of one entity kind.

        Returns:
            Path of the written file.
        """
        path = self.directory / f"{kind}{self.storage.suffix}"
        self.storage.write_listing(
            path, kind, records_to_frame(records, record_type), self.captured_at
        )
        logger.info(f"Wrote {len(records)} {kind} records to {path}")
        return path
