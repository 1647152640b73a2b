# This project was developed with assistance from AI tools.
"""Loan application request/response schemas."""

from datetime import datetime

from ..db.enums import ApplicationStatus, DecisionAction, LoanType
from ..db.models import AdminAction, BranchAction, CamelModel, LoanApplication
from . import Pagination
from .status import StatusInfo


class ApplicationCreate(CamelModel):
    loan_type: LoanType = LoanType.INDIVIDUAL
    applicant_name: str
    address: str
    bank_id: str
    branch_name: str
    description: str = ""


class DecisionRequest(CamelModel):
    action: DecisionAction


class DisbursementRequest(CamelModel):
    """``disbursed_by`` defaults to the logged-in branch officer's name."""

    disbursed_by: str | None = None


class ApplicationResponse(CamelModel):
    id: str
    loan_type: LoanType
    applicant_name: str
    address: str
    bank_branch: str
    description: str
    department: str
    department_id: str | None = None
    status: ApplicationStatus
    status_info: StatusInfo
    is_terminal: bool
    submitted_at: datetime
    admin_action: AdminAction | None = None
    branch_action: BranchAction | None = None

    @classmethod
    def from_record(
        cls, application: LoanApplication, status_info: StatusInfo, is_terminal: bool
    ) -> "ApplicationResponse":
        return cls(
            **application.model_dump(),
            status_info=status_info,
            is_terminal=is_terminal,
        )


class ApplicationListResponse(CamelModel):
    data: list[ApplicationResponse]
    pagination: Pagination
