# This project was developed with assistance from AI tools.
"""Pure auth utility functions with no FastAPI or HTTP dependencies.

Used by the session service (login, capability checks) and by the
middleware layer (route-level RBAC). Keeping them separate from
``middleware/auth.py`` lets services run without importing FastAPI.

Passwords are compared through a ``CredentialVerifier``. The default
``PlaintextVerifier`` stores and compares passwords as given, which is a
demo simplification: swap in a hashing verifier before real use.
"""

import enum
import hmac

from ..db.enums import UserRole
from ..schemas.auth import DataScope


class CredentialVerifier:
    """Seam between stored passwords and login attempts."""

    def prepare(self, password: str) -> str:
        """Return the value to persist for ``password``."""
        raise NotImplementedError

    def verify(self, stored: str, candidate: str) -> bool:
        raise NotImplementedError


class PlaintextVerifier(CredentialVerifier):
    """Stores passwords unchanged and compares them exactly."""

    def prepare(self, password: str) -> str:
        return password

    def verify(self, stored: str, candidate: str) -> bool:
        return hmac.compare_digest(stored.encode(), candidate.encode())


class Capability(str, enum.Enum):
    MANAGE_DEPARTMENTS = "manage_departments"
    MANAGE_BANKS = "manage_banks"
    VIEW_BANKS = "view_banks"
    VIEW_ALL_APPLICATIONS = "view_all_applications"
    DECIDE_APPLICATIONS = "decide_applications"
    SUBMIT_APPLICATIONS = "submit_applications"
    DISBURSE_APPLICATIONS = "disburse_applications"


ROLE_CAPABILITIES: dict[UserRole, frozenset[Capability]] = {
    UserRole.ADMIN: frozenset(
        {
            Capability.MANAGE_DEPARTMENTS,
            Capability.MANAGE_BANKS,
            Capability.VIEW_BANKS,
            Capability.VIEW_ALL_APPLICATIONS,
            Capability.DECIDE_APPLICATIONS,
        }
    ),
    UserRole.DEPARTMENT: frozenset({Capability.VIEW_BANKS, Capability.SUBMIT_APPLICATIONS}),
    UserRole.BRANCH: frozenset({Capability.DISBURSE_APPLICATIONS}),
}


def capabilities_for(role: UserRole) -> frozenset[Capability]:
    return ROLE_CAPABILITIES.get(role, frozenset())


def build_data_scope(
    role: UserRole,
    *,
    department: str | None = None,
    department_id: str | None = None,
    bank_branch: str | None = None,
) -> DataScope:
    """Build application visibility rules based on the actor's role."""
    if role == UserRole.ADMIN:
        return DataScope(full_pipeline=True)
    if role == UserRole.DEPARTMENT:
        return DataScope(department=department, department_id=department_id)
    if role == UserRole.BRANCH:
        return DataScope(bank_branch=bank_branch)
    return DataScope()
