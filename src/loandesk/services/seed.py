# This project was developed with assistance from AI tools.
"""Default directory data.

On a fresh store the department login page has nothing to log in with, so
the Agriculture Department is created with a known demo credential.
Simulated for demonstration purposes only.
"""

import logging
from datetime import UTC, datetime

from ..db.models import Department
from ..db.schema import dump_records
from ..db.store import KeyValueStore
from .directory import DEPARTMENTS_KEY

logger = logging.getLogger(__name__)

DEFAULT_DEPARTMENT = {
    "id": "1",
    "name": "Agriculture Department",
    "code": "agriculture",
    "description": "Government Agriculture Department",
    "username": "agri_dept",
    "password": "agri123",
}


def seed_default_department(store: KeyValueStore) -> bool:
    """Create the default department unless a departments collection exists.

    An existing but empty collection counts as existing: an admin who
    deleted every department does not get the default back.

    Returns True when the department was written.
    """
    if store.contains(DEPARTMENTS_KEY):
        return False
    department = Department(**DEFAULT_DEPARTMENT, created_at=datetime.now(UTC))
    store.set(DEPARTMENTS_KEY, dump_records([department]))
    logger.info("Seeded default department: username=%s", department.username)
    return True
