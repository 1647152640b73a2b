# This project was developed with assistance from AI tools.
"""Tests for the key-value store backends."""

import pytest

from loandesk.db.config import StoreSettings
from loandesk.db.store import InMemoryStore, SqlStore, create_store, init_store


@pytest.fixture(params=["memory", "sql"])
def any_store(request, tmp_path):
    if request.param == "memory":
        yield InMemoryStore()
    else:
        store = SqlStore(f"sqlite:///{tmp_path / 'kv.db'}")
        yield store
        store.dispose()


# ---------------------------------------------------------------------------
# Contract shared by every backend
# ---------------------------------------------------------------------------


def test_missing_key_returns_none(any_store):
    assert any_store.get("departments") is None
    assert any_store.contains("departments") is False


def test_set_then_get_returns_value(any_store):
    any_store.set("banks", [{"id": "bank-1", "name": "State Bank"}])
    assert any_store.get("banks") == [{"id": "bank-1", "name": "State Bank"}]
    assert any_store.contains("banks") is True


def test_set_replaces_whole_value(any_store):
    """Writes are last-write-wins on the full value, never merged."""
    any_store.set("banks", [{"id": "a"}, {"id": "b"}])
    any_store.set("banks", [{"id": "c"}])
    assert any_store.get("banks") == [{"id": "c"}]


def test_returned_value_is_a_copy(any_store):
    any_store.set("departments", [{"id": "1"}])
    loaded = any_store.get("departments")
    loaded.append({"id": "2"})
    assert any_store.get("departments") == [{"id": "1"}]


def test_delete_is_idempotent(any_store):
    any_store.set("currentUser", {"role": "branch"})
    any_store.delete("currentUser")
    any_store.delete("currentUser")
    assert any_store.get("currentUser") is None


def test_none_value_rejected(any_store):
    with pytest.raises(ValueError, match="use delete"):
        any_store.set("banks", None)


def test_non_json_value_rejected(any_store):
    with pytest.raises(TypeError):
        any_store.set("banks", {"when": object()})


def test_empty_collection_counts_as_present(any_store):
    any_store.set("departments", [])
    assert any_store.contains("departments") is True
    assert any_store.get("departments") == []


# ---------------------------------------------------------------------------
# Backend specifics
# ---------------------------------------------------------------------------


def test_in_memory_initial_values_are_copied():
    seed = {"banks": [{"id": "bank-1"}]}
    store = InMemoryStore(seed)
    seed["banks"].append({"id": "bank-2"})
    assert store.get("banks") == [{"id": "bank-1"}]
    assert store.keys() == ["banks"]


def test_sql_store_survives_restart(tmp_path):
    url = f"sqlite:///{tmp_path / 'kv.db'}"
    first = SqlStore(url)
    first.set("loanApplications", [{"id": "APP-1", "status": "pending"}])
    first.dispose()

    second = SqlStore(url)
    assert second.get("loanApplications") == [{"id": "APP-1", "status": "pending"}]
    second.dispose()


def test_sql_store_in_memory_url_shares_one_database():
    store = SqlStore("sqlite://")
    store.set("banks", [])
    assert store.get("banks") == []


def test_create_store_picks_backend(tmp_path):
    assert isinstance(create_store("memory://"), InMemoryStore)
    assert isinstance(create_store(f"sqlite:///{tmp_path / 'x.db'}"), SqlStore)


def test_get_store_before_init_raises(monkeypatch):
    from loandesk.db import store as store_module

    monkeypatch.setattr(store_module, "_store", None)
    with pytest.raises(RuntimeError, match="not initialised"):
        store_module.get_store()


def test_init_store_sets_singleton(monkeypatch):
    from loandesk.db import store as store_module

    monkeypatch.setattr(store_module, "_store", None)
    created = init_store(StoreSettings(STORE_URL="memory://"))
    assert store_module.get_store() is created
