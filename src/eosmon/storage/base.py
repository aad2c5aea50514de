"""
Abstract base class for snapshot storage backends.

A backend persists the listing of one entity kind, handed over as a Polars
DataFrame of string columns, and can read it back.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional

import polars as pl


class SnapshotStorage(ABC):
    """Abstract base class for snapshot storage backends."""

    # File suffix of one listing, including the dot.
    suffix: str = ""

    @abstractmethod
    def write_listing(self, path: Path, kind: str, frame: pl.DataFrame, captured_at: str) -> None:
        """
        Persist the listing of one entity kind.

        Args:
            path: Target file; missing parent directories are created
            kind: Entity kind, e.g. ``"groups"``
            frame: One row per record, one string column per record field
            captured_at: Timestamp of the collection cycle
        """

    @abstractmethod
    def read_listing(self, path: Path, columns: Optional[List[str]] = None) -> pl.DataFrame:
        """
        Read a listing back.

        Args:
            path: File written by :meth:`write_listing`
            columns: Optional subset of columns to load
        """

    def exists(self, path: Path) -> bool:
        return Path(path).exists()
