"""Shared fixtures for the HTTP tests."""

import pytest
from fastapi.testclient import TestClient

from server.main import app
from server.server_utils import limiter


@pytest.fixture
def client(monkeypatch):
    """Test client with a fresh resolution cache and rate limiting off."""
    monkeypatch.setattr(limiter, "enabled", False)
    with TestClient(app) as test_client:
        yield test_client
