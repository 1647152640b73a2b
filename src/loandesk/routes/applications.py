# This project was developed with assistance from AI tools.
"""Loan application routes with capability enforcement.

Out-of-scope applications answer 404 rather than 403 so that a department
or branch cannot discover other actors' applications.
"""

import asyncio

from fastapi import APIRouter, Depends, HTTPException, Query, status

from ..core.auth import Capability
from ..core.config import settings
from ..db.enums import ApplicationStatus
from ..db.models import LoanApplication
from ..deps import get_registry
from ..middleware.auth import CurrentUser, require_capability
from ..schemas import Pagination
from ..schemas.application import (
    ApplicationCreate,
    ApplicationListResponse,
    ApplicationResponse,
    DecisionRequest,
    DisbursementRequest,
)
from ..schemas.auth import UserContext
from ..schemas.status import StatusSummaryResponse
from ..services.application import ApplicationRegistry
from ..services.scope import in_scope
from ..services.status import TERMINAL_STATUSES, get_status_info, get_status_summary

router = APIRouter()


def _build_app_response(application: LoanApplication) -> ApplicationResponse:
    return ApplicationResponse.from_record(
        application,
        status_info=get_status_info(application.status),
        is_terminal=application.status in TERMINAL_STATUSES,
    )


def _get_visible(registry: ApplicationRegistry, user: UserContext, application_id: str) -> LoanApplication:
    application = registry.get(application_id)
    if application is None or not in_scope(application, user.data_scope):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Application not found",
        )
    return application


@router.post(
    "/",
    response_model=ApplicationResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_capability(Capability.SUBMIT_APPLICATIONS))],
)
async def submit_application(
    body: ApplicationCreate,
    user: CurrentUser,
    registry: ApplicationRegistry = Depends(get_registry),
) -> ApplicationResponse:
    """Submit an application on behalf of the logged-in department."""
    if settings.SUBMIT_DELAY_SECONDS > 0:
        await asyncio.sleep(settings.SUBMIT_DELAY_SECONDS)
    application = registry.submit(
        loan_type=body.loan_type,
        applicant_name=body.applicant_name,
        address=body.address,
        bank_id=body.bank_id,
        branch_name=body.branch_name,
        description=body.description,
        department=user.data_scope.department or "",
        department_id=user.data_scope.department_id,
    )
    return _build_app_response(application)


@router.get("/", response_model=ApplicationListResponse)
async def list_applications(
    user: CurrentUser,
    registry: ApplicationRegistry = Depends(get_registry),
    offset: int = Query(default=0, ge=0),
    limit: int = Query(default=20, ge=1, le=100),
    filter_status: ApplicationStatus | None = None,
) -> ApplicationListResponse:
    """List applications visible to the current actor, in submission order."""
    visible = registry.list_visible(user.data_scope, status=filter_status)
    total = len(visible)
    page = visible[offset : offset + limit]
    return ApplicationListResponse(
        data=[_build_app_response(a) for a in page],
        pagination=Pagination(
            total=total,
            offset=offset,
            limit=limit,
            has_more=(offset + limit) < total,
        ),
    )


@router.get("/summary", response_model=StatusSummaryResponse)
async def application_summary(
    user: CurrentUser,
    registry: ApplicationRegistry = Depends(get_registry),
) -> StatusSummaryResponse:
    """Per-status counts over the applications visible to the current actor."""
    return get_status_summary(registry, user.data_scope)


@router.get("/{application_id}", response_model=ApplicationResponse)
async def get_application(
    application_id: str,
    user: CurrentUser,
    registry: ApplicationRegistry = Depends(get_registry),
) -> ApplicationResponse:
    return _build_app_response(_get_visible(registry, user, application_id))


@router.post(
    "/{application_id}/decision",
    response_model=ApplicationResponse,
    dependencies=[Depends(require_capability(Capability.DECIDE_APPLICATIONS))],
)
async def decide_application(
    application_id: str,
    body: DecisionRequest,
    registry: ApplicationRegistry = Depends(get_registry),
) -> ApplicationResponse:
    """Approve or reject a pending application."""
    return _build_app_response(registry.decide(application_id, body.action))


@router.post(
    "/{application_id}/disbursement",
    response_model=ApplicationResponse,
    dependencies=[Depends(require_capability(Capability.DISBURSE_APPLICATIONS))],
)
async def disburse_application(
    application_id: str,
    user: CurrentUser,
    body: DisbursementRequest | None = None,
    registry: ApplicationRegistry = Depends(get_registry),
) -> ApplicationResponse:
    """Record disbursement of an approved application addressed to this branch."""
    _get_visible(registry, user, application_id)
    disbursed_by = (body.disbursed_by if body else None) or user.name
    return _build_app_response(registry.disburse(application_id, disbursed_by))
