import pytest

from matchkit.config import reset_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    """Re-read MATCHKIT_* environment variables for every test."""
    reset_settings()
    yield
    reset_settings()
