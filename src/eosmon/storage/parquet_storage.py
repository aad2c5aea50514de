"""
Parquet storage for snapshot listings, built on Polars.
"""

import logging
from pathlib import Path
from typing import List, Literal, Optional

import polars as pl

from .base import SnapshotStorage

logger = logging.getLogger(__name__)


class ParquetStorage(SnapshotStorage):
    """
    Columnar storage of listings. The capture time is kept in the directory
    name of the snapshot, not in the file.
    """

    suffix = ".parquet"

    def __init__(self, compression: Literal["snappy", "gzip", "brotli", "lz4", "zstd"] = "snappy"):
        self.compression = compression
        logger.debug(f"Initialized ParquetStorage with compression: {compression}")

    def write_listing(self, path: Path, kind: str, frame: pl.DataFrame, captured_at: str) -> None:
        path = Path(path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            frame.write_parquet(path, compression=self.compression)
        except Exception as e:
            logger.error(f"Failed to write {kind} listing to {path}: {e}")
            raise
        logger.debug(f"Wrote {frame.height} {kind} rows to {path}")

    def read_listing(self, path: Path, columns: Optional[List[str]] = None) -> pl.DataFrame:
        try:
            return pl.read_parquet(path, columns=columns)
        except Exception as e:
            logger.error(f"Failed to read listing from {path}: {e}")
            raise
