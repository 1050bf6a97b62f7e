"""Shared fixtures for API endpoint tests."""

import pytest
from fastapi.testclient import TestClient

from teamscope.api import deps
from teamscope.main import app
from teamscope.services.access import TeamAccessService


@pytest.fixture
def service(qa_world):
    return TeamAccessService(qa_world["store"])


@pytest.fixture
def client_for(service):
    """Build a TestClient acting as the given user over the in-memory store."""

    def _make(user):
        app.dependency_overrides[deps.get_current_active_user] = lambda: user
        app.dependency_overrides[deps.get_access_service] = lambda: service
        return TestClient(app)

    yield _make
    app.dependency_overrides.clear()
