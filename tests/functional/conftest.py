# This project was developed with assistance from AI tools.
"""Fixtures for functional tests.

The real app from ``loandesk.main`` is a module singleton. Each test gets
its own in-memory store through a ``get_store`` override, and
``_clean_overrides`` clears it afterwards so state never leaks between
tests. The lifespan is not run, so nothing is seeded unless a test asks.
"""

import pytest
from fastapi.testclient import TestClient

from loandesk.db.store import InMemoryStore, get_store
from loandesk.main import app as real_app


@pytest.fixture(autouse=True)
def _clean_overrides():
    """Clear app dependency overrides after each test."""
    yield
    real_app.dependency_overrides.clear()


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def app(store):
    """Return the real FastAPI app, backed by this test's store."""
    real_app.dependency_overrides[get_store] = lambda: store
    return real_app


@pytest.fixture
def client(app):
    return TestClient(app)
