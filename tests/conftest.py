"""
Pytest configuration og shared fixtures.
"""

import logging

import pytest

from platform_utils.config import Settings
from platform_utils.dependencies import reset_singletons


@pytest.fixture(autouse=True)
def clean_singletons():
    """Automatically reset singletons before hver test."""
    reset_singletons()
    yield
    reset_singletons()


@pytest.fixture
def settings(tmp_path):
    """Create test settings that never touch the working directory."""
    return Settings(
        _env_file=None,
        log_file_path=str(tmp_path / "logs" / "test.log"),
        copy_chunk_size_kb=4,
        archive_chunk_size_kb=4,
    )


@pytest.fixture
def test_logger():
    return logging.getLogger("platform_utils.tests")
