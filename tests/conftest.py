# This project was developed with assistance from AI tools.
"""Shared fixtures: every service runs against a fresh in-memory store."""

import pytest

from loandesk.db.store import InMemoryStore
from loandesk.services.application import ApplicationRegistry
from loandesk.services.directory import DirectoryService
from loandesk.services.session import SessionContext

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "admin123"


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def directory(store):
    return DirectoryService(store)


@pytest.fixture
def registry(store, directory):
    return ApplicationRegistry(store, directory)


@pytest.fixture
def session_context(store, directory):
    return SessionContext(
        store,
        directory,
        admin_username=ADMIN_USERNAME,
        admin_password=ADMIN_PASSWORD,
    )


@pytest.fixture
def state_bank(directory):
    """'State Bank' with a single 'Main' branch. Returns (bank, issued credential)."""
    bank = directory.add_bank("State Bank")
    credential = directory.add_branch(bank.id, "Main")
    return directory.get_bank(bank.id), credential
