"""
Snapshot storage configuration model.

This module defines the StorageConfig dataclass which selects the format and
compression used when records are written to disk.
"""

from typing import Literal, Dict, Any
from dataclasses import dataclass

SUPPORTED_FORMATS = ("parquet", "json")
SUPPORTED_COMPRESSIONS = ("snappy", "gzip", "brotli", "lz4", "zstd")


@dataclass(frozen=True)
class StorageConfig:
    """
    Configuration model for snapshot storage settings.

    Attributes:
        format: Storage format type
            - 'parquet': columnar format with compression
            - 'json': one JSON document per entity kind, human readable
        compression: Compression algorithm for Parquet format

    Note:
        Compression only applies to Parquet. JSON is always written
        uncompressed.
    """

    format: Literal["parquet", "json"] = "parquet"
    compression: Literal["snappy", "gzip", "brotli", "lz4", "zstd"] = "snappy"

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> "StorageConfig":
        """
        Create a StorageConfig instance from a dictionary.

        Raises:
            ValueError: If invalid configuration values are provided
        """
        format_type = config_dict.get("format", "parquet")
        compression = config_dict.get("compression", "snappy")

        if format_type not in SUPPORTED_FORMATS:
            raise ValueError(f"Unsupported storage format: {format_type}")

        if format_type == "parquet" and compression not in SUPPORTED_COMPRESSIONS:
            raise ValueError(f"Unsupported compression algorithm: {compression}")

        return cls(format=format_type, compression=compression)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "format": self.format,
            "compression": self.compression,
        }
