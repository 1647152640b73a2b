# This project was developed with assistance from AI tools.
"""Session context: who is logged in on this client, and what they may do.

A session is nothing more than a record in the store: ``adminUser`` for the
administrator, ``currentUser`` for a department or branch. There is no
token, no expiry and no refresh. Only one actor is logged in at a time, so
every login clears both keys before writing its own.
"""

import logging
from datetime import UTC, datetime

from ..core.auth import Capability, CredentialVerifier, PlaintextVerifier, build_data_scope, capabilities_for
from ..db.enums import UserRole
from ..db.models import AdminSession, BranchSession, DepartmentSession
from ..db.schema import load_session
from ..db.store import KeyValueStore
from ..schemas.auth import UserContext
from .directory import DirectoryService
from .errors import AuthenticationError, PermissionDeniedError

logger = logging.getLogger(__name__)

ADMIN_SESSION_KEY = "adminUser"
USER_SESSION_KEY = "currentUser"


class SessionContext:
    def __init__(
        self,
        store: KeyValueStore,
        directory: DirectoryService,
        *,
        admin_username: str,
        admin_password: str,
        admin_name: str = "System Administrator",
        verifier: CredentialVerifier | None = None,
    ):
        self._store = store
        self._directory = directory
        self._admin_username = admin_username
        self._admin_password = admin_password
        self._admin_name = admin_name
        self._verifier = verifier or PlaintextVerifier()

    def _replace(self, key: str, record) -> None:
        self._store.delete(ADMIN_SESSION_KEY)
        self._store.delete(USER_SESSION_KEY)
        self._store.set(key, record.to_record())

    def login_admin(self, username: str, password: str) -> AdminSession:
        if username != self._admin_username or not self._verifier.verify(
            self._admin_password, password
        ):
            logger.info("Admin login rejected for username=%s", username)
            raise AuthenticationError("Invalid admin credentials")
        session = AdminSession(
            username=username, name=self._admin_name, login_time=datetime.now(UTC)
        )
        self._replace(ADMIN_SESSION_KEY, session)
        logger.info("Admin logged in")
        return session

    def login_department(self, username: str, password: str) -> DepartmentSession:
        department = self._directory.find_department_by_credentials(username, password)
        if department is None:
            logger.info("Department login rejected for username=%s", username)
            raise AuthenticationError("Invalid username or password")
        session = DepartmentSession(
            department_id=department.id,
            department=department.key,
            name=department.name,
            login_time=datetime.now(UTC),
        )
        self._replace(USER_SESSION_KEY, session)
        logger.info("Department logged in: id=%s", department.id)
        return session

    def login_branch(self, username: str, password: str) -> BranchSession:
        credential = self._directory.find_branch_credential(username, password)
        if credential is None:
            logger.info("Branch login rejected for username=%s", username)
            raise AuthenticationError("Invalid username or password")
        session = BranchSession(
            username=credential.username,
            bank_name=credential.bank_name,
            branch_name=credential.branch_name,
            name=f"{credential.branch_name} Branch Officer",
            login_time=datetime.now(UTC),
        )
        self._replace(USER_SESSION_KEY, session)
        logger.info("Branch logged in: username=%s", credential.username)
        return session

    def logout(self) -> None:
        self._store.delete(ADMIN_SESSION_KEY)
        self._store.delete(USER_SESSION_KEY)

    def current(self) -> UserContext | None:
        """Rebuild the logged-in actor from the stored session record, if any."""
        raw = self._store.get(ADMIN_SESSION_KEY) or self._store.get(USER_SESSION_KEY)
        if raw is None:
            return None
        record = load_session(raw)

        if isinstance(record, AdminSession):
            return UserContext(
                user_id=record.username,
                role=UserRole.ADMIN,
                name=record.name,
                login_time=record.login_time,
                data_scope=build_data_scope(UserRole.ADMIN),
            )
        if isinstance(record, DepartmentSession):
            return UserContext(
                user_id=record.department_id or record.department,
                role=UserRole.DEPARTMENT,
                name=record.name,
                login_time=record.login_time,
                data_scope=build_data_scope(
                    UserRole.DEPARTMENT,
                    department=record.department,
                    department_id=record.department_id,
                ),
            )
        return UserContext(
            user_id=record.username,
            role=UserRole.BRANCH,
            name=record.name,
            login_time=record.login_time,
            data_scope=build_data_scope(UserRole.BRANCH, bank_branch=record.bank_branch),
        )

    def can(self, capability: Capability) -> bool:
        user = self.current()
        return user is not None and capability in capabilities_for(user.role)

    def require(self, capability: Capability) -> UserContext:
        """Return the current actor, or raise if nobody is logged in or the role lacks ``capability``."""
        user = self.current()
        if user is None:
            raise AuthenticationError("Not logged in")
        if capability not in capabilities_for(user.role):
            logger.warning(
                "Capability denied: user=%s role=%s capability=%s",
                user.user_id,
                user.role.value,
                capability.value,
            )
            raise PermissionDeniedError("Insufficient permissions")
        return user
