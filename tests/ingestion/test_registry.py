from pathlib import Path

import pytest

from ingestion import get_ingestion_module, get_available_modules, get_module_for_path
import ingestion.csv_ledger as csv_ledger
import ingestion.yaml_ledger as yaml_ledger


class TestGetIngestionModule:
    """Tests for get_ingestion_module function."""

    def test_get_csv_module(self):
        """Test retrieving the csv module."""
        assert get_ingestion_module("csv") == csv_ledger

    def test_get_yaml_module(self):
        """Test retrieving the yaml module."""
        assert get_ingestion_module("yaml") == yaml_ledger

    def test_get_invalid_module_raises_error(self):
        """Test that requesting an unknown module raises ValueError."""
        with pytest.raises(ValueError, match="Unknown ingestion module: json"):
            get_ingestion_module("json")


class TestGetAvailableModules:
    """Tests for get_available_modules function."""

    def test_returns_all_modules(self):
        """Test that all expected modules are returned."""
        assert set(get_available_modules()) == {"csv", "yaml"}


class TestGetModuleForPath:
    """Tests for get_module_for_path function."""

    @pytest.mark.parametrize(
        "path,expected",
        [
            ("ledger.csv", csv_ledger),
            ("ledger.CSV", csv_ledger),
            ("seed.yaml", yaml_ledger),
            (Path("dir/seed.yml"), yaml_ledger),
        ],
    )
    def test_by_suffix(self, path, expected):
        """Test choosing a module by file suffix."""
        assert get_module_for_path(path) == expected

    def test_unsupported_suffix(self):
        """Test that an unknown suffix raises ValueError."""
        with pytest.raises(ValueError, match=r"Unsupported seed file type: \.xlsx \(available: csv, yaml\)"):
            get_module_for_path("ledger.xlsx")
