"""
Pytest fixtures for pushup tracker tests.

Provides a test app whose data and auth dependencies are replaced by
in-memory fakes, so router tests never touch Supabase.
"""

from typing import Generator

import pytest
from fastapi.testclient import TestClient

from api.deps import (
    get_current_user,
    get_goal_repo,
    get_optional_user,
    get_record_repo,
    get_settings,
)
from backend.main import create_app
from backend.settings import Settings
from tests.fakes import FakeGoalRepository, FakePushupRecordRepository


# ---------------------------------------------------------------------------
# Auth Mock
# ---------------------------------------------------------------------------

TEST_USER_ID = "test-user-123"
OTHER_USER_ID = "other-user-456"


async def mock_get_current_user() -> str:
    """Mock auth dependency that returns a test user."""
    return TEST_USER_ID


async def mock_get_optional_user() -> str:
    return TEST_USER_ID


async def mock_anonymous_user() -> None:
    return None


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------


@pytest.fixture
def test_settings() -> Settings:
    """Test settings with minimal configuration."""
    return Settings(
        environment="test",
        supabase_url="https://test.supabase.co",
        supabase_service_role_key="test-key",
        supabase_jwt_secret="test-jwt-secret-at-least-32-bytes-long",
        api_keys="sk_test_abc123",
        _env_file=None,
    )


# ---------------------------------------------------------------------------
# Fakes
# ---------------------------------------------------------------------------


@pytest.fixture
def record_repo() -> FakePushupRecordRepository:
    return FakePushupRecordRepository()


@pytest.fixture
def goal_repo() -> FakeGoalRepository:
    return FakeGoalRepository()


# ---------------------------------------------------------------------------
# Test App and Client
# ---------------------------------------------------------------------------


@pytest.fixture
def app(test_settings, record_repo, goal_repo):
    """Create test application instance wired to the fakes."""
    test_app = create_app(settings=test_settings)
    test_app.dependency_overrides[get_settings] = lambda: test_settings
    test_app.dependency_overrides[get_record_repo] = lambda: record_repo
    test_app.dependency_overrides[get_goal_repo] = lambda: goal_repo
    return test_app


@pytest.fixture
def client(app) -> Generator[TestClient, None, None]:
    """
    Authenticated TestClient.
    Properly cleans up dependency overrides after each test.
    """
    app.dependency_overrides[get_current_user] = mock_get_current_user
    app.dependency_overrides[get_optional_user] = mock_get_optional_user
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def anonymous_client(app) -> Generator[TestClient, None, None]:
    """TestClient for a visitor with no session. Redirects are not followed."""
    app.dependency_overrides[get_optional_user] = mock_anonymous_user
    yield TestClient(app, follow_redirects=False)
    app.dependency_overrides.clear()
