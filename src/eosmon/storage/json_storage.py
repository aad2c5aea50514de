"""
JSON document storage for snapshot listings.
"""

import json
import logging
from pathlib import Path
from typing import List, Optional

import polars as pl

from .base import SnapshotStorage

logger = logging.getLogger(__name__)


class JsonStorage(SnapshotStorage):
    """
    Document storage of listings::

        {"kind": "groups", "captured_at": "...", "columns": [...], "records": [{...}]}

    The column list keeps the schema of empty listings.
    """

    suffix = ".json"

    def write_listing(self, path: Path, kind: str, frame: pl.DataFrame, captured_at: str) -> None:
        path = Path(path)
        document = {
            "kind": kind,
            "captured_at": captured_at,
            "columns": frame.columns,
            "records": frame.to_dicts(),
        }
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, "w", encoding="utf-8") as f:
                json.dump(document, f, indent=2, ensure_ascii=False)
        except OSError as e:
            logger.error(f"Failed to write {kind} listing to {path}: {e}")
            raise
        logger.debug(f"Wrote {frame.height} {kind} records to {path}")

    def read_listing(self, path: Path, columns: Optional[List[str]] = None) -> pl.DataFrame:
        with open(path, "r", encoding="utf-8") as f:
            document = json.load(f)
        schema = {name: pl.Utf8 for name in document.get("columns", [])}
        frame = pl.DataFrame(document.get("records", []), schema=schema or None)
        return frame.select(columns) if columns else frame
