"""
Pytest fixtures shared by the Overload Tracker API tests.
"""

from typing import Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from api.deps import (
    get_current_user,
    get_program_repo,
    get_stats_repo,
    get_workout_log_repo,
)
from backend.main import create_app
from backend.settings import Settings, get_settings
from tests.fakes import (
    TEST_USER_ID,
    FakeProgramRepository,
    FakeStatsRepository,
    FakeWorkoutLogRepository,
    create_program_repo,
    create_stats_repo,
    create_workout_log_repo,
)


# ---------------------------------------------------------------------------
# Auth Mock
# ---------------------------------------------------------------------------


async def mock_get_current_user() -> str:
    """Mock auth dependency that returns the test user."""
    return TEST_USER_ID


# ---------------------------------------------------------------------------
# Fake Repositories
# ---------------------------------------------------------------------------


@pytest.fixture
def program_repo() -> FakeProgramRepository:
    """Fake program repository seeded with the sample program."""
    return create_program_repo()


@pytest.fixture
def log_repo() -> FakeWorkoutLogRepository:
    """Empty fake workout log repository."""
    return create_workout_log_repo()


@pytest.fixture
def stats_repo() -> FakeStatsRepository:
    """Fake stats repository (streak 3, no stored grade)."""
    return create_stats_repo(streak=3)


# ---------------------------------------------------------------------------
# Test App and Client
# ---------------------------------------------------------------------------


@pytest.fixture
def test_settings() -> Settings:
    """Test settings with minimal configuration."""
    return Settings(environment="test", _env_file=None)


@pytest.fixture
def app(test_settings: Settings) -> FastAPI:
    """Create test application instance."""
    return create_app(settings=test_settings)


@pytest.fixture
def client(
    app: FastAPI,
    test_settings: Settings,
    program_repo: FakeProgramRepository,
    log_repo: FakeWorkoutLogRepository,
    stats_repo: FakeStatsRepository,
) -> Generator[TestClient, None, None]:
    """
    TestClient with auth mocked and every repository replaced by a fake.
    Cleans up dependency overrides after each test.
    """
    app.dependency_overrides[get_current_user] = mock_get_current_user
    app.dependency_overrides[get_settings] = lambda: test_settings
    app.dependency_overrides[get_program_repo] = lambda: program_repo
    app.dependency_overrides[get_workout_log_repo] = lambda: log_repo
    app.dependency_overrides[get_stats_repo] = lambda: stats_repo
    yield TestClient(app)
    app.dependency_overrides.clear()
