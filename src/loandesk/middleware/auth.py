# This project was developed with assistance from AI tools.
"""
Session-backed authentication for FastAPI routes.

The logged-in actor is whatever session record the store currently holds
(see ``services/session.py``); this module turns it into a ``UserContext``
dependency and provides route-level capability checks. Denials are
logged by the session service.
"""

from typing import Annotated

from fastapi import Depends, HTTPException, status

from ..core.auth import Capability
from ..deps import get_session_context
from ..schemas.auth import UserContext
from ..services.errors import AuthenticationError, PermissionDeniedError
from ..services.session import SessionContext


async def get_current_user(
    session_context: SessionContext = Depends(get_session_context),
) -> UserContext:
    """FastAPI dependency: return the logged-in actor or answer 401."""
    user = session_context.current()
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not logged in",
        )
    return user


# Type alias for use in route signatures
CurrentUser = Annotated[UserContext, Depends(get_current_user)]


def require_capability(capability: Capability):
    """Dependency factory: restrict a route to roles holding ``capability``.

    Usage:
        @router.get("/banks", dependencies=[Depends(require_capability(Capability.VIEW_BANKS))])
    """

    async def _check(
        session_context: SessionContext = Depends(get_session_context),
    ) -> UserContext:
        try:
            return session_context.require(capability)
        except AuthenticationError as exc:
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(exc)) from exc
        except PermissionDeniedError as exc:
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(exc)) from exc

    return _check
