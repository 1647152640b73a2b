# This project was developed with assistance from AI tools.
"""Functional tests: who can see and do what.

Departments see only their own applications, branches only the ones
addressed to them. Out-of-scope reads answer 404.
"""

import pytest

from .data_factory import create_agriculture_department, create_bank_with_branch, submit_application
from .personas import as_admin, as_branch, as_department

pytestmark = pytest.mark.functional


@pytest.fixture
def two_of_everything(client):
    """Two departments, two branches, and one application from each department."""
    as_admin(client)
    create_agriculture_department(client)
    client.post(
        "/api/departments/",
        json={"name": "Fisheries", "code": "fisheries", "username": "fish_dept", "password": "fish123"},
    )
    sbi, sbi_login = create_bank_with_branch(client)
    canara, canara_login = create_bank_with_branch(client, "Canara Bank", "Station Road")

    as_department(client)
    agri_app = submit_application(client, sbi["id"])
    as_department(client, "fish_dept", "fish123")
    fish_app = submit_application(client, canara["id"], "Station Road", applicantName="Ravi Kumar")

    as_admin(client)
    for app in (agri_app, fish_app):
        client.post(f"/api/applications/{app['id']}/decision", json={"action": "approved"})

    return {
        "agri_app": agri_app,
        "fish_app": fish_app,
        "sbi_login": sbi_login,
        "canara_login": canara_login,
    }


class TestUnauthenticated:
    @pytest.mark.parametrize(
        ("method", "path"),
        [
            ("get", "/api/applications/"),
            ("get", "/api/departments/"),
            ("get", "/api/banks/"),
            ("get", "/api/auth/me"),
        ],
    )
    def test_requires_login(self, client, method, path):
        resp = getattr(client, method)(path)
        assert resp.status_code == 401
        assert resp.json()["detail"] == "Not logged in"

    def test_bad_credentials(self, client):
        resp = client.post("/api/auth/admin/login", json={"username": "admin", "password": "nope"})
        assert resp.status_code == 401
        assert resp.json()["code"] == "authentication_failed"

    def test_logout_ends_session(self, client):
        as_admin(client)
        assert client.get("/api/auth/me").status_code == 200
        assert client.post("/api/auth/logout").status_code == 204
        assert client.get("/api/auth/me").status_code == 401


class TestDepartmentIsolation:
    def test_sees_only_own_applications(self, client, two_of_everything):
        as_department(client)
        resp = client.get("/api/applications/")
        assert [a["id"] for a in resp.json()["data"]] == [two_of_everything["agri_app"]["id"]]

    def test_shared_code_is_refused(self, client, two_of_everything):
        as_admin(client)
        resp = client.post(
            "/api/departments/",
            json={"name": "Agri Copy", "code": "AGRICULTURE", "username": "copy", "password": "pw"},
        )
        assert resp.status_code == 409
        assert resp.json()["code"] == "duplicate_department_code"

    def test_replacement_department_does_not_inherit_applications(self, client, two_of_everything):
        """A new department reusing a deleted department's code starts with nothing."""
        as_admin(client)
        old = next(
            d for d in client.get("/api/departments/").json()["data"] if d["username"] == "agri_dept"
        )
        client.delete(f"/api/departments/{old['id']}")
        client.post(
            "/api/departments/",
            json={"name": "Agriculture Dept", "code": "agriculture", "username": "agri_new", "password": "pw"},
        )

        as_department(client, "agri_new", "pw")
        assert client.get("/api/applications/").json()["data"] == []
        resp = client.get(f"/api/applications/{two_of_everything['agri_app']['id']}")
        assert resp.status_code == 404

    def test_other_department_application_is_404(self, client, two_of_everything):
        as_department(client)
        resp = client.get(f"/api/applications/{two_of_everything['fish_app']['id']}")
        assert resp.status_code == 404

    def test_cannot_decide_or_manage(self, client, two_of_everything):
        as_department(client)
        app_id = two_of_everything["agri_app"]["id"]
        resp = client.post(f"/api/applications/{app_id}/decision", json={"action": "rejected"})
        assert resp.status_code == 403
        assert client.get("/api/departments/").status_code == 403
        assert client.post("/api/banks/", json={"name": "Rogue Bank"}).status_code == 403

    def test_can_read_banks(self, client, two_of_everything):
        as_department(client)
        resp = client.get("/api/banks/")
        assert resp.status_code == 200
        assert resp.json()["total"] == 2


class TestBranchIsolation:
    def test_sees_only_addressed_applications(self, client, two_of_everything):
        as_branch(client, two_of_everything["canara_login"])
        resp = client.get("/api/applications/")
        assert [a["applicantName"] for a in resp.json()["data"]] == ["Ravi Kumar"]

    def test_cannot_disburse_other_branch_application(self, client, two_of_everything):
        as_branch(client, two_of_everything["canara_login"])
        resp = client.post(f"/api/applications/{two_of_everything['agri_app']['id']}/disbursement")
        assert resp.status_code == 404

    def test_cannot_submit_or_view_banks(self, client, two_of_everything):
        as_branch(client, two_of_everything["sbi_login"])
        assert client.get("/api/banks/").status_code == 403
        resp = client.post(
            "/api/applications/",
            json={"applicantName": "x", "address": "y", "bankId": "b", "branchName": "Main"},
        )
        assert resp.status_code == 403


class TestAdmin:
    def test_sees_everything(self, client, two_of_everything):
        as_admin(client)
        resp = client.get("/api/applications/")
        assert resp.json()["pagination"]["total"] == 2

    def test_cannot_submit_or_disburse(self, client, two_of_everything):
        me = as_admin(client)
        assert "submit_applications" not in me["capabilities"]
        resp = client.post(f"/api/applications/{two_of_everything['agri_app']['id']}/disbursement")
        assert resp.status_code == 403

    def test_unknown_application_is_404(self, client):
        as_admin(client)
        assert client.get("/api/applications/APP-missing").status_code == 404
        resp = client.post("/api/applications/APP-missing/decision", json={"action": "approved"})
        assert resp.status_code == 404


def test_health_reports_store(client):
    resp = client.get("/health/")
    assert resp.json() == {"status": "ok", "store": "InMemoryStore"}
