# tests/services/api/conftest.py
from __future__ import annotations

import pytest
from starlette.testclient import TestClient

from mediagraph.services.api.app import create_app


@pytest.fixture()
def api_client(container):
    """
    A TestClient over an app wired to the per-test container, so the API
    and the `catalog` / `graph` fixtures see the same stores.
    """
    app = create_app(container=container)
    with TestClient(app) as client:
        yield client


@pytest.fixture()
def raw_client(container):
    """Like api_client, but server errors come back as 500 responses instead of raising."""
    app = create_app(container=container)
    with TestClient(app, raise_server_exceptions=False) as client:
        yield client
