# This project was developed with assistance from AI tools.
"""Tests for app construction and the startup/shutdown lifecycle."""

from fastapi.testclient import TestClient

from loandesk import main
from loandesk.core.config import settings
from loandesk.db.store import InMemoryStore
from loandesk.services.directory import DEPARTMENTS_KEY


class _TrackingStore(InMemoryStore):
    def __init__(self):
        super().__init__()
        self.disposed = False

    def dispose(self):
        self.disposed = True


def test_app_uses_configured_name_and_debug():
    assert main.app.title == settings.APP_NAME
    assert main.app.debug == settings.DEBUG


def test_lifespan_seeds_then_disposes_store(monkeypatch):
    store = _TrackingStore()
    monkeypatch.setattr(main, "init_store", lambda cfg: store)
    monkeypatch.setattr(settings, "SEED_DEFAULT_DEPARTMENT", True)

    with TestClient(main.app):
        assert store.contains(DEPARTMENTS_KEY)
        assert store.disposed is False

    assert store.disposed is True


def test_base_store_dispose_is_a_no_op():
    store = InMemoryStore({"banks": []})
    store.dispose()
    assert store.get("banks") == []
