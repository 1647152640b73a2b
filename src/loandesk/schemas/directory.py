# This project was developed with assistance from AI tools.
"""Department and bank directory request/response schemas.

Passwords are returned in responses: the admin screens display and copy
them. This mirrors the demo's plaintext credential model.
"""

from datetime import datetime

from pydantic import Field

from ..db.models import Bank, BranchCredential, CamelModel, Department


class DepartmentCreate(CamelModel):
    name: str
    username: str
    password: str
    code: str | None = None
    description: str | None = None


class DepartmentResponse(CamelModel):
    id: str
    name: str
    code: str | None = None
    description: str | None = None
    username: str
    password: str
    created_at: datetime | None = None

    @classmethod
    def from_record(cls, department: Department) -> "DepartmentResponse":
        return cls.model_validate(department.model_dump())


class DepartmentListResponse(CamelModel):
    data: list[DepartmentResponse]
    total: int


class PasswordUpdate(CamelModel):
    new_password: str


class PasswordSuggestion(CamelModel):
    password: str


class BankCreate(CamelModel):
    name: str


class BranchCreate(CamelModel):
    branch_name: str = Field(min_length=1)


class BranchResponse(CamelModel):
    index: int
    name: str
    credential: BranchCredential | None = None


class BankResponse(CamelModel):
    id: str
    name: str
    branches: list[BranchResponse]

    @classmethod
    def from_record(cls, bank: Bank) -> "BankResponse":
        return cls(
            id=bank.id,
            name=bank.name,
            branches=[
                BranchResponse(index=i, name=b.name, credential=b.credential)
                for i, b in enumerate(bank.branches)
            ],
        )


class BankListResponse(CamelModel):
    data: list[BankResponse]
    total: int


class CredentialListResponse(CamelModel):
    data: list[BranchCredential]
    total: int
