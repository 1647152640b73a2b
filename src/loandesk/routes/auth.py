# This project was developed with assistance from AI tools.
"""Login, logout and current-actor routes for all three roles."""

import asyncio

from fastapi import APIRouter, Depends, status

from ..core.auth import capabilities_for
from ..core.config import settings
from ..deps import get_session_context
from ..middleware.auth import CurrentUser
from ..schemas.auth import LoginRequest, MeResponse, UserContext
from ..services.session import SessionContext

router = APIRouter()


async def _login_delay() -> None:
    if settings.LOGIN_DELAY_SECONDS > 0:
        await asyncio.sleep(settings.LOGIN_DELAY_SECONDS)


def _me(user: UserContext) -> MeResponse:
    return MeResponse(
        user_id=user.user_id,
        role=user.role,
        name=user.name,
        login_time=user.login_time,
        capabilities=sorted(c.value for c in capabilities_for(user.role)),
    )


@router.post("/admin/login", response_model=MeResponse)
async def admin_login(
    body: LoginRequest,
    session_context: SessionContext = Depends(get_session_context),
) -> MeResponse:
    await _login_delay()
    session_context.login_admin(body.username, body.password)
    return _me(session_context.current())


@router.post("/department/login", response_model=MeResponse)
async def department_login(
    body: LoginRequest,
    session_context: SessionContext = Depends(get_session_context),
) -> MeResponse:
    await _login_delay()
    session_context.login_department(body.username, body.password)
    return _me(session_context.current())


@router.post("/branch/login", response_model=MeResponse)
async def branch_login(
    body: LoginRequest,
    session_context: SessionContext = Depends(get_session_context),
) -> MeResponse:
    await _login_delay()
    session_context.login_branch(body.username, body.password)
    return _me(session_context.current())


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(session_context: SessionContext = Depends(get_session_context)) -> None:
    session_context.logout()


@router.get("/me", response_model=MeResponse)
async def me(user: CurrentUser) -> MeResponse:
    """Return the logged-in actor and what it may do."""
    return _me(user)
