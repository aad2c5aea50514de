"""
Factory for creating snapshot storage backends.
"""

import logging

from ..config.storage_config import StorageConfig
from .base import SnapshotStorage
from .json_storage import JsonStorage
from .parquet_storage import ParquetStorage

logger = logging.getLogger(__name__)


def create_storage(config: StorageConfig) -> SnapshotStorage:
    """
    Create the backend selected by ``config.format``.

    Raises:
        ValueError: If an unsupported format type is specified
    """
    if config.format == "parquet":
        logger.debug(f"Creating ParquetStorage with compression: {config.compression}")
        return ParquetStorage(compression=config.compression)
    if config.format == "json":
        logger.debug("Creating JsonStorage")
        return JsonStorage()
    raise ValueError(f"Unsupported storage format: {config.format}")
