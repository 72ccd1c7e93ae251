"""Root test fixtures shared across all test types.

This conftest contains fixtures that can be used by both unit and integration tests.
Database-specific fixtures are in tests/integration/conftest.py.
"""

import os

# Set env before any app imports; integration tests build their own engine.
os.environ.setdefault("APP_ENV", "testing")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")

# ruff: noqa: E402 - Imports must be after env var setup
from uuid import uuid4

import pytest

from src.hrdesk.core.config import get_settings
from src.hrdesk.core.context import CallerContext

# Clear settings cache to ensure test environment variables are picked up
get_settings.cache_clear()


@pytest.fixture
def anonymous_caller() -> CallerContext:
    """A caller whose tenant does not exist in any database."""
    return CallerContext(tenant_id=uuid4())
