"""Shared pytest fixtures for all tests."""

import pytest

from config import Config
from services.base import Services
from services.records import RecordStore
from tests.helpers import add_sample_records


@pytest.fixture
def test_config(tmp_path):
    """Create a test configuration pointing to a temporary directory.

    Args:
        tmp_path: pytest tmp_path fixture for temporary directory.

    Returns:
        Config: Test configuration object.
    """
    return Config(
        base_dir=tmp_path / "ledger",
        log_level="DEBUG",
        log_dir=tmp_path / "ledger" / "logs",
        currency_symbol="₹",
        top_expenses=5,
        seed_file=None,
    )


@pytest.fixture
def store():
    """Create an empty RecordStore."""
    return RecordStore()


@pytest.fixture
def sample_store(store):
    """Create a RecordStore holding the six sample records (ids 1-6)."""
    add_sample_records(store)
    return store


@pytest.fixture
def services(test_config):
    """Create a Services container with an empty ledger.

    Args:
        test_config: Test configuration fixture.

    Returns:
        Services: Services container for testing.
    """
    return Services(test_config)


@pytest.fixture
def sample_services(services):
    """Create a Services container whose ledger holds the six sample records."""
    add_sample_records(services.records)
    return services
