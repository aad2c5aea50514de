"""
Storage of record snapshots.

Records of one collection cycle can be converted to Polars DataFrames and
written as Parquet files or JSON documents, one per entity kind.
"""

from .base import SnapshotStorage
from .json_storage import JsonStorage
from .parquet_storage import ParquetStorage
from .factory import create_storage
from .snapshot import SnapshotWriter, record_columns, records_to_frame

__all__ = [
    "JsonStorage",
    "SnapshotStorage",
    "ParquetStorage",
    "SnapshotWriter",
    "create_storage",
    "record_columns",
    "records_to_frame",
]
