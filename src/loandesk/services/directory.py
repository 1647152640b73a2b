# This project was developed with assistance from AI tools.
"""Department and bank/branch directory service.

Owns the ``departments`` and ``banks`` collections. Every mutation loads the
whole collection, builds a new list and writes it back in one ``set``.

Known gaps kept from the original workflow (logged, not enforced):

* bank names are not checked for uniqueness;
* derived branch usernames are not checked for collisions;
* department login matches usernames case-sensitively although the
  uniqueness check on creation is case-insensitive.
"""

import logging
from datetime import UTC, datetime

from ..core.auth import CredentialVerifier, PlaintextVerifier
from ..db.models import Bank, Branch, BranchCredential, Department, new_record_id
from ..db.schema import dump_records, load_banks, load_departments
from ..db.store import KeyValueStore
from .credentials import generate_password, generate_username
from .errors import (
    DuplicateDepartmentCodeError,
    DuplicateUsernameError,
    EmptyFieldError,
    EmptyPasswordError,
    NotFoundError,
)

logger = logging.getLogger(__name__)

DEPARTMENTS_KEY = "departments"
BANKS_KEY = "banks"


def _require(value: str | None, field: str) -> str:
    if value is None or not value.strip():
        raise EmptyFieldError(field)
    return value.strip()


def _matches(query: str, *values: str) -> bool:
    needle = query.lower()
    return any(needle in value.lower() for value in values)


def _warn_if_issued(banks: list[Bank], username: str) -> None:
    if any(c is not None and c.username == username for b in banks for c in b.credentials):
        logger.warning("Branch username '%s' is already issued to another branch", username)


class DirectoryService:
    """Departments, banks and the credentials that let them log in."""

    def __init__(self, store: KeyValueStore, verifier: CredentialVerifier | None = None):
        self._store = store
        self._verifier = verifier or PlaintextVerifier()

    # -----------------------------------------------------------------------
    # Departments
    # -----------------------------------------------------------------------

    def list_departments(self) -> list[Department]:
        return load_departments(self._store.get(DEPARTMENTS_KEY))

    def _save_departments(self, departments: list[Department]) -> None:
        self._store.set(DEPARTMENTS_KEY, dump_records(departments))

    def get_department(self, department_id: str) -> Department | None:
        for department in self.list_departments():
            if department.id == department_id:
                return department
        return None

    def search_departments(self, query: str = "") -> list[Department]:
        """Departments whose name or username contains ``query`` (case-insensitive)."""
        departments = self.list_departments()
        if not query.strip():
            return departments
        return [d for d in departments if _matches(query.strip(), d.name, d.username)]

    def add_department(
        self,
        name: str,
        username: str,
        password: str,
        code: str | None = None,
        description: str | None = None,
    ) -> Department:
        """Create a department login.

        Raises:
            EmptyFieldError: name, username or password is blank.
            DuplicateUsernameError: another department already uses the
                username, compared case-insensitively.
            DuplicateDepartmentCodeError: another department already uses the
                resulting code (the name when no code is given), compared
                case-insensitively.
        """
        name = _require(name, "name")
        username = _require(username, "username")
        if not password or not password.strip():
            raise EmptyPasswordError()

        departments = self.list_departments()
        if any(d.username.lower() == username.lower() for d in departments):
            raise DuplicateUsernameError(f"Username '{username}' already exists")

        code = code.strip() if code and code.strip() else None
        key = code or name
        if any(d.key.lower() == key.lower() for d in departments):
            raise DuplicateDepartmentCodeError(f"Department code '{key}' is already in use")

        department = Department(
            id=new_record_id("dept"),
            name=name,
            code=code,
            description=description.strip() if description and description.strip() else None,
            username=username,
            password=self._verifier.prepare(password),
            created_at=datetime.now(UTC),
        )
        self._save_departments([*departments, department])
        logger.info("Department created: id=%s username=%s", department.id, department.username)
        return department

    def update_department_password(self, department_id: str, new_password: str) -> Department:
        """Replace a department's password.

        Raises:
            NotFoundError: ``department_id`` does not exist (checked first).
            EmptyPasswordError: ``new_password`` is blank.
        """
        departments = self.list_departments()
        index = next((i for i, d in enumerate(departments) if d.id == department_id), None)
        if index is None:
            raise NotFoundError(f"Department {department_id} not found")
        if not new_password or not new_password.strip():
            raise EmptyPasswordError()

        updated = departments[index].model_copy(
            update={"password": self._verifier.prepare(new_password)}
        )
        departments[index] = updated
        self._save_departments(departments)
        logger.info("Department password updated: id=%s", department_id)
        return updated

    def delete_department(self, department_id: str) -> None:
        departments = self.list_departments()
        remaining = [d for d in departments if d.id != department_id]
        if len(remaining) == len(departments):
            return
        self._save_departments(remaining)
        logger.info("Department deleted: id=%s", department_id)

    def find_department_by_credentials(self, username: str, password: str) -> Department | None:
        """Return the department whose username and password both match exactly."""
        for department in self.list_departments():
            if department.username == username and self._verifier.verify(
                department.password, password
            ):
                return department
        return None

    # -----------------------------------------------------------------------
    # Banks and branches
    # -----------------------------------------------------------------------

    def list_banks(self) -> list[Bank]:
        return load_banks(self._store.get(BANKS_KEY))

    def _save_banks(self, banks: list[Bank]) -> None:
        self._store.set(BANKS_KEY, dump_records(banks))

    def get_bank(self, bank_id: str) -> Bank | None:
        for bank in self.list_banks():
            if bank.id == bank_id:
                return bank
        return None

    def search_banks(self, query: str = "") -> list[Bank]:
        """Banks whose name, or any of whose branch names, contains ``query``."""
        banks = self.list_banks()
        if not query.strip():
            return banks
        return [b for b in banks if _matches(query.strip(), b.name, *b.branch_names)]

    def resolve_branch(self, bank_id: str, branch_name: str) -> tuple[Bank, Branch] | None:
        """Look up a bank/branch pair, as used when a department submits an application."""
        bank = self.get_bank(bank_id)
        if bank is None:
            return None
        branch = bank.find_branch(branch_name)
        if branch is None:
            return None
        return bank, branch

    def add_bank(self, name: str) -> Bank:
        name = _require(name, "name")
        banks = self.list_banks()
        if any(b.name.lower() == name.lower() for b in banks):
            logger.warning("Bank name '%s' is already in use; adding another bank with it", name)

        bank = Bank(id=new_record_id("bank"), name=name)
        self._save_banks([*banks, bank])
        logger.info("Bank created: id=%s", bank.id)
        return bank

    def delete_bank(self, bank_id: str) -> None:
        banks = self.list_banks()
        remaining = [b for b in banks if b.id != bank_id]
        if len(remaining) == len(banks):
            return
        self._save_banks(remaining)
        logger.info("Bank deleted: id=%s", bank_id)

    def _issue_credential(self, bank: Bank, branch_name: str) -> tuple[BranchCredential, BranchCredential]:
        """Return (issued, stored) credentials; ``issued`` carries the clear password."""
        password = generate_password()
        issued = BranchCredential(
            username=generate_username(bank.name, branch_name),
            password=password,
            bank_name=bank.name,
            branch_name=branch_name,
        )
        stored = issued.model_copy(update={"password": self._verifier.prepare(password)})
        return issued, stored

    def add_branch(self, bank_id: str, branch_name: str) -> BranchCredential:
        """Add a branch to a bank and issue its login.

        Returns the issued credential, including the generated password.

        Raises:
            NotFoundError: ``bank_id`` does not exist.
            EmptyFieldError: ``branch_name`` is blank.
        """
        branch_name = _require(branch_name, "branch_name")
        banks = self.list_banks()
        index = next((i for i, b in enumerate(banks) if b.id == bank_id), None)
        if index is None:
            raise NotFoundError(f"Bank {bank_id} not found")

        bank = banks[index]
        issued, stored = self._issue_credential(bank, branch_name)

        _warn_if_issued(banks, issued.username)

        banks[index] = bank.model_copy(
            update={"branches": [*bank.branches, Branch(name=branch_name, credential=stored)]}
        )
        self._save_banks(banks)
        logger.info("Branch added: bank=%s branch=%s", bank_id, branch_name)
        return issued

    def delete_branch(self, bank_id: str, index: int) -> None:
        """Remove the branch (and with it, its credential) at ``index``.

        Unknown banks and out-of-range indexes are ignored.
        """
        banks = self.list_banks()
        for position, bank in enumerate(banks):
            if bank.id != bank_id:
                continue
            if not 0 <= index < len(bank.branches):
                return
            branches = [b for i, b in enumerate(bank.branches) if i != index]
            banks[position] = bank.model_copy(update={"branches": branches})
            self._save_banks(banks)
            logger.info("Branch deleted: bank=%s index=%d", bank_id, index)
            return

    def reset_branch_password(self, bank_id: str, index: int) -> BranchCredential:
        """Issue a fresh password for a branch, or a first credential for a legacy one."""
        banks = self.list_banks()
        for position, bank in enumerate(banks):
            if bank.id != bank_id:
                continue
            if not 0 <= index < len(bank.branches):
                raise NotFoundError(f"Bank {bank_id} has no branch at index {index}")
            branch = bank.branches[index]
            issued, stored = self._issue_credential(bank, branch.name)
            if branch.credential is not None:
                # Username stays stable across resets
                issued = issued.model_copy(update={"username": branch.credential.username})
                stored = stored.model_copy(update={"username": branch.credential.username})
            else:
                _warn_if_issued(banks, issued.username)
            branches = list(bank.branches)
            branches[index] = branch.model_copy(update={"credential": stored})
            banks[position] = bank.model_copy(update={"branches": branches})
            self._save_banks(banks)
            logger.info("Branch password reset: bank=%s index=%d", bank_id, index)
            return issued
        raise NotFoundError(f"Bank {bank_id} not found")

    def all_credentials(self) -> list[BranchCredential]:
        """Every issued branch credential, in bank then branch order."""
        return [c for bank in self.list_banks() for c in bank.credentials if c is not None]

    def search_credentials(self, query: str = "") -> list[BranchCredential]:
        credentials = self.all_credentials()
        if not query.strip():
            return credentials
        return [c for c in credentials if _matches(query.strip(), c.bank_name, c.branch_name)]

    def find_branch_credential(self, username: str, password: str) -> BranchCredential | None:
        """Return the first credential whose username and password both match exactly."""
        for credential in self.all_credentials():
            if credential.username == username and self._verifier.verify(
                credential.password, password
            ):
                return credential
        return None
