# This project was developed with assistance from AI tools.
"""FastAPI dependency providers for the service layer."""

from fastapi import Depends

from .core.config import settings
from .db.store import KeyValueStore, get_store
from .services.application import ApplicationRegistry
from .services.directory import DirectoryService
from .services.session import SessionContext


def get_directory(store: KeyValueStore = Depends(get_store)) -> DirectoryService:
    return DirectoryService(store)


def get_registry(
    store: KeyValueStore = Depends(get_store),
    directory: DirectoryService = Depends(get_directory),
) -> ApplicationRegistry:
    return ApplicationRegistry(store, directory)


def get_session_context(
    store: KeyValueStore = Depends(get_store),
    directory: DirectoryService = Depends(get_directory),
) -> SessionContext:
    return SessionContext(
        store,
        directory,
        admin_username=settings.ADMIN_USERNAME,
        admin_password=settings.ADMIN_PASSWORD,
        admin_name=settings.ADMIN_DISPLAY_NAME,
    )
