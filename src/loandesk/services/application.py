# This project was developed with assistance from AI tools.
"""Loan application registry and its status state machine.

    pending --(admin)--> approved --(branch)--> disbursed
    pending --(admin)--> rejected

Every change rewrites the whole ``loanApplications`` collection. Nothing is
ever removed from it, and no transition can be undone.
"""

import logging
from datetime import UTC, datetime

from ..db.enums import ApplicationStatus, DecisionAction, LoanType
from ..db.models import AdminAction, BranchAction, LoanApplication, new_record_id
from ..db.schema import dump_records, load_applications
from ..db.store import KeyValueStore
from ..schemas.auth import DataScope
from .directory import DirectoryService
from .errors import EmptyFieldError, InvalidBankBranchError, InvalidTransitionError, NotFoundError
from .scope import apply_data_scope

logger = logging.getLogger(__name__)

APPLICATIONS_KEY = "loanApplications"

_VALID_TRANSITIONS = ApplicationStatus.valid_transitions()


def check_transition(current: ApplicationStatus, new_status: ApplicationStatus) -> None:
    """Raise InvalidTransitionError unless ``current -> new_status`` is allowed."""
    allowed = _VALID_TRANSITIONS.get(current, frozenset())
    if new_status not in allowed:
        raise InvalidTransitionError(
            f"Cannot transition from '{current.value}' to '{new_status.value}'. "
            f"Allowed: {sorted(s.value for s in allowed) if allowed else 'none (terminal status)'}."
        )


class ApplicationRegistry:
    def __init__(self, store: KeyValueStore, directory: DirectoryService):
        self._store = store
        self._directory = directory

    def _load(self) -> list[LoanApplication]:
        return load_applications(self._store.get(APPLICATIONS_KEY))

    def _save(self, applications: list[LoanApplication]) -> None:
        self._store.set(APPLICATIONS_KEY, dump_records(applications))

    def list_all(self) -> list[LoanApplication]:
        """All applications in submission order."""
        return self._load()

    def list_visible(
        self, scope: DataScope, status: ApplicationStatus | None = None
    ) -> list[LoanApplication]:
        """Applications visible under ``scope``, optionally narrowed to one status."""
        applications = apply_data_scope(self._load(), scope)
        if status is not None:
            applications = [a for a in applications if a.status == status]
        return applications

    def get(self, application_id: str) -> LoanApplication | None:
        for application in self._load():
            if application.id == application_id:
                return application
        return None

    def count_by_status(self, applications: list[LoanApplication] | None = None) -> dict[ApplicationStatus, int]:
        """Count applications per status; every status gets an entry, zero included."""
        if applications is None:
            applications = self._load()
        counts = {status: 0 for status in ApplicationStatus}
        for application in applications:
            counts[application.status] += 1
        return counts

    def submit(
        self,
        loan_type: LoanType | str,
        applicant_name: str,
        address: str,
        bank_id: str,
        branch_name: str,
        description: str,
        department: str,
        department_id: str | None = None,
    ) -> LoanApplication:
        """Record a new pending application for a bank branch.

        ``department`` is the submitting department's key; ``department_id``
        ties the record to that one department for visibility.

        Raises:
            EmptyFieldError: applicant name, address or department is blank.
            InvalidBankBranchError: the bank/branch pair does not exist.
        """
        for field, value in (
            ("applicant_name", applicant_name),
            ("address", address),
            ("department", department),
        ):
            if not value or not value.strip():
                raise EmptyFieldError(field)

        resolved = self._directory.resolve_branch(bank_id, branch_name)
        if resolved is None:
            raise InvalidBankBranchError(
                f"Branch '{branch_name}' does not exist for bank {bank_id}"
            )
        bank, branch = resolved

        application = LoanApplication(
            id=new_record_id("APP"),
            loan_type=LoanType(loan_type),
            applicant_name=applicant_name.strip(),
            address=address.strip(),
            bank_branch=bank.bank_branch_label(branch.name),
            description=(description or "").strip(),
            department=department,
            department_id=department_id,
            status=ApplicationStatus.PENDING,
            submitted_at=datetime.now(UTC),
        )
        self._save([*self._load(), application])
        logger.info(
            "Application submitted: id=%s department=%s branch=%s",
            application.id,
            department,
            application.bank_branch,
        )
        return application

    def _transition(
        self, application_id: str, new_status: ApplicationStatus, **changes
    ) -> LoanApplication:
        applications = self._load()
        for index, application in enumerate(applications):
            if application.id != application_id:
                continue
            check_transition(application.status, new_status)
            updated = application.model_copy(update={"status": new_status, **changes})
            applications[index] = updated
            self._save(applications)
            logger.info(
                "Application %s: %s -> %s",
                application_id,
                application.status.value,
                new_status.value,
            )
            return updated
        raise NotFoundError(f"Application {application_id} not found")

    def decide(self, application_id: str, action: DecisionAction | str) -> LoanApplication:
        """Approve or reject a pending application. There is no re-review."""
        action = DecisionAction(action)
        return self._transition(
            application_id,
            ApplicationStatus(action.value),
            admin_action=AdminAction(action=action, timestamp=datetime.now(UTC)),
        )

    def disburse(self, application_id: str, disbursed_by: str) -> LoanApplication:
        """Mark an approved application as paid out by a branch."""
        if not disbursed_by or not disbursed_by.strip():
            raise EmptyFieldError("disbursed_by")
        return self._transition(
            application_id,
            ApplicationStatus.DISBURSED,
            branch_action=BranchAction(
                timestamp=datetime.now(UTC), disbursed_by=disbursed_by.strip()
            ),
        )
