# This project was developed with assistance from AI tools.
"""Versioned deserialization of persisted records.

Records written by earlier versions of the app are upgraded here, field by
field, before validation. Writes always emit the current shape.

Bank records
    v1 (no ``schemaVersion``): ``branches`` is a list of names and
    ``credentials`` a parallel list that may be missing or shorter.

    * missing ``credentials`` -> ``[]``
    * ``credentials[i]`` pairs with ``branches[i]``
    * a branch without a credential keeps ``credential = None``
    * surplus credentials are dropped
    * missing ``name`` -> ``""``

    v2: ``branches`` is a list of ``{name, credential}`` records.

Department records
    missing ``code``, ``description`` or ``createdAt`` -> None

Loan application records
    missing ``status`` -> ``"pending"``; missing ``description`` -> ``""``

Session records
    a record with no ``role`` but a ``department`` field is a department
    session written before roles were recorded.
"""

import logging
from typing import Any

from .enums import ApplicationStatus, UserRole
from .models import (
    BANK_SCHEMA_VERSION,
    AdminSession,
    Bank,
    BranchSession,
    Department,
    DepartmentSession,
    LoanApplication,
)

logger = logging.getLogger(__name__)


class SchemaVersionError(ValueError):
    """Raised when a persisted record carries a version this code cannot read."""

    pass


def _upgrade_bank_v1(raw: dict[str, Any]) -> dict[str, Any]:
    names = raw.get("branches") or []
    credentials = raw.get("credentials") or []
    if len(credentials) > len(names):
        logger.warning(
            "Bank %s has %d credentials for %d branches; dropping the surplus",
            raw.get("id"),
            len(credentials),
            len(names),
        )
    branches = []
    for index, name in enumerate(names):
        credential = credentials[index] if index < len(credentials) else None
        branches.append({"name": name, "credential": credential})
    return {
        "id": raw["id"],
        "name": raw.get("name", ""),
        "schemaVersion": BANK_SCHEMA_VERSION,
        "branches": branches,
    }


def load_bank(raw: dict[str, Any]) -> Bank:
    version = raw.get("schemaVersion", 1)
    if version == 1:
        raw = _upgrade_bank_v1(raw)
    elif version != BANK_SCHEMA_VERSION:
        raise SchemaVersionError(
            f"Bank {raw.get('id')} has schemaVersion {version}; "
            f"newest supported is {BANK_SCHEMA_VERSION}"
        )
    return Bank.model_validate(raw)


def load_department(raw: dict[str, Any]) -> Department:
    return Department.model_validate(raw)


def load_application(raw: dict[str, Any]) -> LoanApplication:
    raw = {"status": ApplicationStatus.PENDING.value, "description": "", **raw}
    return LoanApplication.model_validate(raw)


def load_session(raw: dict[str, Any]) -> AdminSession | DepartmentSession | BranchSession:
    role = raw.get("role")
    if role is None and "department" in raw:
        role = UserRole.DEPARTMENT.value
    if role == UserRole.ADMIN.value:
        return AdminSession.model_validate({"username": "admin", **raw})
    if role == UserRole.DEPARTMENT.value:
        return DepartmentSession.model_validate({**raw, "role": role})
    if role == UserRole.BRANCH.value:
        return BranchSession.model_validate(raw)
    raise SchemaVersionError(f"Unrecognized session record role: {role!r}")


def load_banks(raw: list | None) -> list[Bank]:
    return [load_bank(item) for item in raw or []]


def load_departments(raw: list | None) -> list[Department]:
    return [load_department(item) for item in raw or []]


def load_applications(raw: list | None) -> list[LoanApplication]:
    return [load_application(item) for item in raw or []]


def dump_records(records) -> list[dict]:
    """Serialize a collection of records for a wholesale write."""
    return [record.to_record() for record in records]
