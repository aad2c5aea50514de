"""
Unit tests for snapshot storage configuration.
"""

from dataclasses import FrozenInstanceError

import pytest

from eosmon.config import StorageConfig


@pytest.mark.unit
class TestStorageConfig:
    """Test cases for StorageConfig class."""

    def test_default_values(self):
        config = StorageConfig()

        assert config.format == "parquet"
        assert config.compression == "snappy"

    def test_from_dict(self):
        config = StorageConfig.from_dict({"format": "parquet", "compression": "brotli"})

        assert config == StorageConfig(format="parquet", compression="brotli")

    def test_from_dict_defaults(self):
        assert StorageConfig.from_dict({}) == StorageConfig()

    def test_from_dict_ignores_unknown_keys(self):
        """The [snapshot] section also carries output_dir."""
        config = StorageConfig.from_dict({"format": "json", "output_dir": "snapshots"})

        assert config.format == "json"

    def test_from_dict_invalid_format(self):
        with pytest.raises(ValueError) as excinfo:
            StorageConfig.from_dict({"format": "csv"})

        assert "Unsupported storage format" in str(excinfo.value)

    def test_from_dict_invalid_compression(self):
        with pytest.raises(ValueError) as excinfo:
            StorageConfig.from_dict({"format": "parquet", "compression": "invalid"})

        assert "Unsupported compression algorithm" in str(excinfo.value)

    def test_to_dict(self):
        assert StorageConfig(format="json", compression="gzip").to_dict() == {
            "format": "json",
            "compression": "gzip",
        }

    def test_frozen(self):
        config = StorageConfig()

        with pytest.raises(FrozenInstanceError):
            config.format = "json"
