# This project was developed with assistance from AI tools.
"""Tests for status presentation and summaries."""

from loandesk.db.enums import ApplicationStatus, DecisionAction
from loandesk.schemas.auth import DataScope
from loandesk.services.status import STATUS_INFO, TERMINAL_STATUSES, get_status_info, get_status_summary


def test_every_status_has_info():
    for status in ApplicationStatus:
        assert status.value in STATUS_INFO
        info = get_status_info(status)
        assert info.label
        assert info.next_step


def test_pending_label():
    assert get_status_info(ApplicationStatus.PENDING).label == "Pending Review"
    assert get_status_info("disbursed").label == "Disbursed"


def test_unknown_status_falls_back():
    assert get_status_info("on_hold").label == "On Hold"


def test_terminal_statuses():
    assert TERMINAL_STATUSES == {ApplicationStatus.REJECTED, ApplicationStatus.DISBURSED}


def test_summary_respects_scope(registry, state_bank):
    bank, _ = state_bank
    for department in ("agriculture", "agriculture", "fisheries"):
        registry.submit("individual", "Asha Devi", "12 Market Road", bank.id, "Main", "", department)
    first = registry.list_all()[0]
    registry.decide(first.id, DecisionAction.APPROVED)

    everything = get_status_summary(registry, DataScope(full_pipeline=True))
    assert everything.total == 3
    assert everything.counts == {"pending": 2, "approved": 1, "rejected": 0, "disbursed": 0}

    agriculture = get_status_summary(registry, DataScope(department="agriculture"))
    assert agriculture.total == 2
    assert agriculture.counts["approved"] == 1
    pending = next(c for c in agriculture.breakdown if c.status == "pending")
    assert pending.label == "Pending Review"
    assert pending.count == 1
