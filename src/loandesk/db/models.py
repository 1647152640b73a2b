# This project was developed with assistance from AI tools.
"""
Loan desk -- persisted record models

Departments, banks with their branch credentials, loan applications and
session records. Records are stored as camelCase JSON (``createdAt``,
``bankBranch``, ...) and exposed as snake_case attributes.
"""

import secrets
import time
from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .enums import ApplicationStatus, DecisionAction, LoanType, UserRole

BANK_SCHEMA_VERSION = 2


def new_record_id(prefix: str) -> str:
    """Return a unique time-based id such as ``APP-1760700000000-3fa9c1``."""
    return f"{prefix}-{int(time.time() * 1000)}-{secrets.token_hex(3)}"


class CamelModel(BaseModel):
    """Base for records persisted with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_record(self) -> dict:
        """Serialize to the JSON shape written to the store."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class Department(CamelModel):
    """Government department that submits loan applications."""

    id: str
    name: str
    code: str | None = None
    description: str | None = None
    username: str
    password: str
    created_at: datetime | None = None

    @property
    def key(self) -> str:
        """Value stamped on the applications this department submits."""
        return self.code or self.name

    def __repr__(self):
        return f"<Department(id={self.id}, username='{self.username}')>"


class BranchCredential(CamelModel):
    """Login identity for one bank branch."""

    username: str
    password: str
    bank_name: str
    branch_name: str


class Branch(CamelModel):
    """A branch paired with its credential.

    ``credential`` is None only for branches carried over from legacy
    records that never had one issued.
    """

    name: str
    credential: BranchCredential | None = None


class Bank(CamelModel):
    id: str
    name: str
    schema_version: int = BANK_SCHEMA_VERSION
    branches: list[Branch] = Field(default_factory=list)

    @property
    def branch_names(self) -> list[str]:
        return [b.name for b in self.branches]

    @property
    def credentials(self) -> list[BranchCredential | None]:
        """Credentials index-aligned with ``branch_names``."""
        return [b.credential for b in self.branches]

    def find_branch(self, branch_name: str) -> Branch | None:
        for branch in self.branches:
            if branch.name == branch_name:
                return branch
        return None

    def bank_branch_label(self, branch_name: str) -> str:
        return f"{self.name} - {branch_name}"

    def __repr__(self):
        return f"<Bank(id={self.id}, name='{self.name}', branches={len(self.branches)})>"


class AdminAction(CamelModel):
    action: DecisionAction
    timestamp: datetime


class BranchAction(CamelModel):
    action: Literal["disbursed"] = "disbursed"
    timestamp: datetime
    disbursed_by: str


class LoanApplication(CamelModel):
    """Loan application submitted by a department."""

    id: str
    loan_type: LoanType
    applicant_name: str
    address: str
    bank_branch: str
    description: str = ""
    department: str
    department_id: str | None = None
    status: ApplicationStatus = ApplicationStatus.PENDING
    submitted_at: datetime
    admin_action: AdminAction | None = None
    branch_action: BranchAction | None = None

    def __repr__(self):
        return f"<LoanApplication(id={self.id}, status='{self.status.value}')>"


class AdminSession(CamelModel):
    role: UserRole = UserRole.ADMIN
    username: str
    name: str
    login_time: datetime


class DepartmentSession(CamelModel):
    role: UserRole = UserRole.DEPARTMENT
    department_id: str | None = None
    department: str
    name: str
    login_time: datetime


class BranchSession(CamelModel):
    role: UserRole = UserRole.BRANCH
    username: str
    bank_name: str
    branch_name: str
    name: str
    login_time: datetime

    @property
    def bank_branch(self) -> str:
        return f"{self.bank_name} - {self.branch_name}"
