# This project was developed with assistance from AI tools.
"""Application status presentation schemas."""

from pydantic import BaseModel

from ..db.models import CamelModel


class StatusInfo(BaseModel):
    """Human-readable description of one application status."""

    label: str
    description: str
    next_step: str


class StatusCount(CamelModel):
    status: str
    label: str
    count: int


class StatusSummaryResponse(CamelModel):
    """Per-status counts for the dashboard cards."""

    total: int
    counts: dict[str, int]
    breakdown: list[StatusCount]
