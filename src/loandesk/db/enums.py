# This project was developed with assistance from AI tools.
"""
Domain enums for the loan application lifecycle.

Shared by the persisted record models (db package) and the HTTP
schemas (schemas package).
"""

import enum


class ApplicationStatus(str, enum.Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    DISBURSED = "disbursed"

    @classmethod
    def terminal_statuses(cls) -> frozenset["ApplicationStatus"]:
        """Statuses with no outgoing transition."""
        return frozenset({cls.REJECTED, cls.DISBURSED})

    @classmethod
    def valid_transitions(cls) -> dict["ApplicationStatus", frozenset["ApplicationStatus"]]:
        """Allowed status transitions in the application lifecycle."""
        return {
            cls.PENDING: frozenset({cls.APPROVED, cls.REJECTED}),
            cls.APPROVED: frozenset({cls.DISBURSED}),
            cls.REJECTED: frozenset(),
            cls.DISBURSED: frozenset(),
        }


class DecisionAction(str, enum.Enum):
    """Actions an administrator can record against a pending application."""

    APPROVED = "approved"
    REJECTED = "rejected"


class LoanType(str, enum.Enum):
    SHG = "shg"
    INDIVIDUAL = "individual"


class UserRole(str, enum.Enum):
    ADMIN = "admin"
    DEPARTMENT = "department"
    BRANCH = "branch"
