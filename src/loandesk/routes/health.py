# This project was developed with assistance from AI tools.
"""Liveness endpoint."""

from fastapi import APIRouter, Depends

from ..db.store import KeyValueStore, get_store

router = APIRouter()


@router.get("/")
async def health(store: KeyValueStore = Depends(get_store)) -> dict[str, str]:
    """Report that the API is up and which store backend it uses."""
    return {"status": "ok", "store": type(store).__name__}
