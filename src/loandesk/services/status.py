# This project was developed with assistance from AI tools.
"""Application status presentation and summary reporting."""

import logging

from ..db.enums import ApplicationStatus
from ..schemas.auth import DataScope
from ..schemas.status import StatusCount, StatusInfo, StatusSummaryResponse
from .application import ApplicationRegistry

logger = logging.getLogger(__name__)

# Human-readable descriptions for each application status.
STATUS_INFO: dict[str, StatusInfo] = {
    ApplicationStatus.PENDING.value: StatusInfo(
        label="Pending Review",
        description="The application has been submitted and is waiting for an administrator.",
        next_step="An administrator approves or rejects the application.",
    ),
    ApplicationStatus.APPROVED.value: StatusInfo(
        label="Approved",
        description="The application was approved and sent to the selected bank branch.",
        next_step="The bank branch records the disbursement.",
    ),
    ApplicationStatus.REJECTED.value: StatusInfo(
        label="Rejected",
        description="The application was not approved.",
        next_step="No further action. A new application can be submitted.",
    ),
    ApplicationStatus.DISBURSED.value: StatusInfo(
        label="Disbursed",
        description="The bank branch has paid out the loan.",
        next_step="No further action required.",
    ),
}

TERMINAL_STATUSES = ApplicationStatus.terminal_statuses()


def get_status_info(status: ApplicationStatus | str) -> StatusInfo:
    value = status.value if isinstance(status, ApplicationStatus) else status
    return STATUS_INFO.get(
        value,
        StatusInfo(
            label=value.replace("_", " ").title(),
            description="The application is being processed.",
            next_step="Contact the administrator for details.",
        ),
    )


def get_status_summary(registry: ApplicationRegistry, scope: DataScope) -> StatusSummaryResponse:
    """Count the applications visible under ``scope`` by status."""
    visible = registry.list_visible(scope)
    counts = registry.count_by_status(visible)
    return StatusSummaryResponse(
        total=len(visible),
        counts={status.value: count for status, count in counts.items()},
        breakdown=[
            StatusCount(status=status.value, label=get_status_info(status).label, count=count)
            for status, count in counts.items()
        ],
    )
