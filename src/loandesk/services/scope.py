# This project was developed with assistance from AI tools.
"""Shared data scope filtering for application listings.

Admins see every application, departments see the ones they submitted and
branches see the ones addressed to their "<Bank> - <Branch>" label. An
empty scope sees nothing.

Applications carry the submitting department's id. Records written before
that field existed have only the department key, so they fall back to
matching on it.
"""

from ..db.models import LoanApplication
from ..schemas.auth import DataScope


def _submitted_by(application: LoanApplication, scope: DataScope) -> bool:
    if scope.department_id and application.department_id:
        return application.department_id == scope.department_id
    return bool(scope.department) and application.department == scope.department


def apply_data_scope(
    applications: list[LoanApplication], scope: DataScope
) -> list[LoanApplication]:
    if scope.full_pipeline:
        return list(applications)
    if scope.department or scope.department_id:
        return [a for a in applications if _submitted_by(a, scope)]
    if scope.bank_branch:
        return [a for a in applications if a.bank_branch == scope.bank_branch]
    return []


def in_scope(application: LoanApplication, scope: DataScope) -> bool:
    return bool(apply_data_scope([application], scope))
