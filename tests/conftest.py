"""Pytest configuration and fixtures."""

import os
from collections.abc import Generator
from typing import Any
from unittest.mock import MagicMock, patch

import pytest
from fastapi.testclient import TestClient

from factories import TEST_JWT_SECRET

# Set test environment variables before importing application modules
os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("DEBUG", "true")
os.environ.setdefault("SUPABASE_URL", "https://test-project.supabase.co")
os.environ.setdefault("SUPABASE_SECRET_KEY", "test-secret-key")
os.environ["SUPABASE_JWT_SECRET"] = TEST_JWT_SECRET
os.environ["SUPABASE_SIGNING_KEY_JWK"] = ""


@pytest.fixture(scope="session")
def test_settings() -> Generator[Any, None, None]:
    """Provide test settings with cleared cache.

    Yields:
        Settings: Test configuration settings.
    """
    from skillswap.core.config import get_settings

    get_settings.cache_clear()
    settings = get_settings()
    yield settings
    get_settings.cache_clear()


@pytest.fixture
def mock_tables() -> dict[str, MagicMock]:
    """Per-table query builder mocks."""
    return {"profiles": MagicMock(), "skill_requests": MagicMock()}


@pytest.fixture
def mock_supabase_client(mock_tables: dict[str, MagicMock]) -> Generator[MagicMock, None, None]:
    """Provide a mocked Supabase client shared by every service.

    client.table(name) returns the matching entry of mock_tables.

    Yields:
        MagicMock: Mocked Supabase client for testing.
    """
    mock_client = MagicMock()
    mock_client.table.side_effect = lambda name: mock_tables[name]

    with patch("skillswap.core.supabase.get_supabase_client", return_value=mock_client), \
            patch("skillswap.services.profile_service.get_supabase_client", return_value=mock_client), \
            patch("skillswap.services.skill_request_service.get_supabase_client", return_value=mock_client):
        yield mock_client


@pytest.fixture
def client(mock_supabase_client: MagicMock) -> Generator[TestClient, None, None]:
    """Provide a test client for the FastAPI application.

    Args:
        mock_supabase_client: Mocked Supabase client fixture.

    Yields:
        TestClient: FastAPI test client.
    """
    from skillswap.main import app

    with TestClient(app) as test_client:
        yield test_client
