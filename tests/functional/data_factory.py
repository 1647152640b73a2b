# This project was developed with assistance from AI tools.
"""Directory setup through the admin API.

Each helper expects an admin session to be active on ``client``.
"""

from .personas import AGRI_PASSWORD, AGRI_USERNAME


def create_agriculture_department(client) -> dict:
    resp = client.post(
        "/api/departments/",
        json={
            "name": "Agriculture Department",
            "code": "agriculture",
            "username": AGRI_USERNAME,
            "password": AGRI_PASSWORD,
        },
    )
    assert resp.status_code == 201, resp.text
    return resp.json()


def create_bank_with_branch(client, bank_name: str = "State Bank", branch_name: str = "Main") -> tuple[dict, dict]:
    """Returns (bank body, issued credential body)."""
    resp = client.post("/api/banks/", json={"name": bank_name})
    assert resp.status_code == 201, resp.text
    bank = resp.json()
    resp = client.post(f"/api/banks/{bank['id']}/branches", json={"branchName": branch_name})
    assert resp.status_code == 201, resp.text
    return bank, resp.json()


def submit_application(client, bank_id: str, branch_name: str = "Main", **overrides) -> dict:
    body = {
        "loanType": "individual",
        "applicantName": "Asha Devi",
        "address": "12 Market Road",
        "bankId": bank_id,
        "branchName": branch_name,
        "description": "Dairy unit",
        **overrides,
    }
    resp = client.post("/api/applications/", json=body)
    assert resp.status_code == 201, resp.text
    return resp.json()
