"""Root test fixtures shared across all test types.

Database-specific fixtures are in tests/integration/conftest.py.
"""

import os

# Set environment before any app imports: testing disables rate limiting
os.environ.setdefault("APP_ENV", "testing")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./commune-test.db")
os.environ.setdefault("JWT_SECRET_KEY", "test-only-secret-key-0123456789abcdef0123456789")

# ruff: noqa: E402 - Imports must be after env var setup
from collections.abc import Callable, Generator

import pytest

from src.commune.core.config import get_settings
from tests.helpers import RecordingDelivery

# Clear settings cache to ensure test environment variables are picked up
get_settings.cache_clear()


@pytest.fixture
def override_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[Callable[..., None]]:
    """Override settings for a single test.

    Usage:
        override_settings(token_recheck_principal_status=True)
    """

    def _override(**values: object) -> None:
        for key, value in values.items():
            monkeypatch.setenv(key.upper(), str(value))
        get_settings.cache_clear()

    yield _override
    get_settings.cache_clear()


@pytest.fixture
def delivery() -> RecordingDelivery:
    """Delivery channel that records codes instead of emailing them."""
    return RecordingDelivery()
