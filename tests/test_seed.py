# This project was developed with assistance from AI tools.
"""Tests for default directory seeding."""

from loandesk.services.directory import DEPARTMENTS_KEY
from loandesk.services.seed import seed_default_department


def test_seeds_fresh_store(store, directory, session_context):
    assert seed_default_department(store) is True

    departments = directory.list_departments()
    assert [d.username for d in departments] == ["agri_dept"]
    session_context.login_department("agri_dept", "agri123")
    assert session_context.current().data_scope.department == "agriculture"


def test_seeding_is_one_shot(store, directory):
    seed_default_department(store)
    assert seed_default_department(store) is False
    assert len(directory.list_departments()) == 1


def test_empty_collection_is_left_alone(store):
    store.set(DEPARTMENTS_KEY, [])
    assert seed_default_department(store) is False
    assert store.get(DEPARTMENTS_KEY) == []
