# This project was developed with assistance from AI tools.
__version__ = "0.1.0"

from .enums import ApplicationStatus, DecisionAction, LoanType, UserRole
from .models import (
    AdminAction,
    AdminSession,
    Bank,
    Branch,
    BranchAction,
    BranchCredential,
    BranchSession,
    Department,
    DepartmentSession,
    LoanApplication,
)
from .store import InMemoryStore, KeyValueStore, SqlStore, create_store, get_store, init_store

__all__ = [
    "__version__",
    # Store
    "KeyValueStore",
    "InMemoryStore",
    "SqlStore",
    "create_store",
    "get_store",
    "init_store",
    # Enums
    "ApplicationStatus",
    "DecisionAction",
    "LoanType",
    "UserRole",
    # Models
    "AdminAction",
    "AdminSession",
    "Bank",
    "Branch",
    "BranchAction",
    "BranchCredential",
    "BranchSession",
    "Department",
    "DepartmentSession",
    "LoanApplication",
]
