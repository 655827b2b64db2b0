"""Shared test configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient

from api.dependencies import get_profile_repository
from api.router import limiter
from main import app
from services.repository.memory import MemoryProfileRepository


@pytest.fixture
def repository():
    """A fresh in-memory profile store per test."""
    return MemoryProfileRepository()


@pytest.fixture
def client(repository):
    """API client wired to the test's in-memory repository."""
    limiter.reset()
    app.dependency_overrides[get_profile_repository] = lambda: repository
    yield TestClient(app)
    app.dependency_overrides.clear()
