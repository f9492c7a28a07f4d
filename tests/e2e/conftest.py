"""Fixtures for end-to-end API tests."""

import pytest
from fastapi.testclient import TestClient

from inkwell.config import Settings
from inkwell.interface.api.app import create_app
from tests.di import build_test_container


def _client(unmock=None) -> TestClient:
    # Settings read after the autouse fixture points UPLOADS__ROOT at tmp_path
    app = create_app(container=build_test_container(unmock=unmock), settings=Settings())
    return TestClient(app)


@pytest.fixture
def client():
    """Test client backed by in-memory repositories and storage."""
    with _client() as test_client:
        yield test_client


@pytest.fixture
def disk_client():
    """Test client that writes uploads to the temporary uploads directory."""
    with _client(unmock={"storage"}) as test_client:
        yield test_client
