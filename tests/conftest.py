"""
Shared pytest fixtures.

The app is built with test settings and every dependency that would reach
Supabase or the wall clock is overridden with a fake.
"""
from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from api.deps import get_clock, get_workout_repo
from backend.main import create_app
from backend.settings import Settings
from tests.fakes import FakeWorkoutRepository

# Wednesday, mid-day: the ISO week runs Mon 2024-03-11 .. Sun 2024-03-17
FIXED_NOW = datetime(2024, 3, 13, 12, 0, 0)


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def workout_repo() -> FakeWorkoutRepository:
    """Fresh in-memory repository per test."""
    return FakeWorkoutRepository()


@pytest.fixture
def test_settings() -> Settings:
    return Settings(environment="test", _env_file=None)


@pytest.fixture
def app(test_settings, workout_repo):
    """App with the fake repository and a pinned clock."""
    app = create_app(settings=test_settings)
    app.dependency_overrides[get_workout_repo] = lambda: workout_repo
    app.dependency_overrides[get_clock] = lambda: (lambda: FIXED_NOW)
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)
