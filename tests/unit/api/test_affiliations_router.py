"""Tests for the team/affiliation endpoints and app wiring."""

from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from api.dependencies import get_team_service
from api.error_handlers import register_error_handlers
from api.routers.affiliations import router
from api.services.hr_locks import HRLockRegistry
from api.services.team_service import TeamService

HR = "hr@acme.test"


@pytest.fixture
def team_store(store):
    store.add_user(email=HR, role="hr", current_employees=2)
    store.add_affiliation(id="aff-1", employee_email="a@acme.test", hr_email=HR, company_name="Acme")
    store.add_affiliation(id="aff-2", employee_email="b@acme.test", hr_email=HR, company_name="Acme")
    return store


@pytest.fixture
def client(team_store):
    app = FastAPI()
    register_error_handlers(app)
    app.include_router(router)

    team = TeamService(team_store.affiliation_repo, team_store.user_repo, locks=HRLockRegistry())
    app.dependency_overrides[get_team_service] = lambda: team
    return TestClient(app)


class TestAffiliationEndpoints:
    def test_list_affiliates(self, client):
        response = client.get(f"/api/affiliates/{HR}")

        assert response.status_code == 200
        assert sorted(a["employee_email"] for a in response.json()) == ["a@acme.test", "b@acme.test"]
        assert response.json()[0]["role"] == "employee"

    def test_list_my_affiliations(self, client):
        response = client.get("/api/my-affiliations/a@acme.test")

        assert response.status_code == 200
        assert [a["company_name"] for a in response.json()] == ["Acme"]

    def test_remove_affiliate(self, client, team_store):
        response = client.delete("/api/affiliates/aff-1")

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "affiliation_id": "aff-1",
            "employee_email": "a@acme.test",
            "hr_email": HR,
        }
        assert team_store.user_by_email(HR).current_employees == 1

    def test_remove_unknown_affiliate_is_404(self, client):
        response = client.delete("/api/affiliates/aff-missing")

        assert response.status_code == 404
        assert "aff-missing" in response.json()["detail"]


class TestAppWiring:
    """The assembled application exposes health and both routers."""

    def test_health(self):
        from api.main import app

        response = TestClient(app).get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "service": "assetverse-api"}

    def test_routes_registered(self):
        from api.main import app

        paths = set(app.openapi()["paths"])
        assert {
            "/api/requests",
            "/api/requests/{request_id}",
            "/api/my-requests/{email}",
            "/api/affiliates/{hr_email}",
            "/api/affiliates/{affiliation_id}",
            "/api/my-affiliations/{email}",
        } <= paths
