"""Root conftest — shared test configuration."""

import os

import pytest

# Ensure tests never pick up a real secret or database
os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

from app.config import Settings  # noqa: E402
from tests.auth_helpers import TEST_SECRET  # noqa: E402


@pytest.fixture
def settings() -> Settings:
    return Settings(
        jwt_secret=TEST_SECRET,
        database_url="sqlite+aiosqlite:///:memory:",
        log_format="text",
    )
