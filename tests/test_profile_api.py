"""Tests for profile API endpoints."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from portfolio_cms.api.main import app
from portfolio_cms.services.profiles import profile_store


@pytest.fixture
def client() -> TestClient:
    """Create a test client for the API."""
    return TestClient(app)


@pytest.fixture
def profile_payload() -> dict:
    return {
        "full_name": "Maria Santos",
        "email": "maria.santos@email.com",
        "phone": "+351 912 345 678",
        "bio": "Full-stack developer",
        "github_url": "https://github.com/mariasantos",
        "date_of_birth": "1995-04-02",
    }


def _create(client: TestClient, payload: dict) -> int:
    response = client.post("/profile", json=payload)
    assert response.status_code == 201
    return profile_store.list_all()[0]["id"]


class TestCreateProfile:
    """Tests for POST /profile."""

    def test_create_returns_message_only(self, client: TestClient, profile_payload: dict) -> None:
        response = client.post("/profile", json=profile_payload)

        assert response.status_code == 201
        assert response.json() == {"status": "success", "message": "Profile created successfully"}

    def test_round_trip(self, client: TestClient, profile_payload: dict) -> None:
        profile_id = _create(client, profile_payload)

        data = client.get("/profile", params={"id": profile_id}).json()["data"]
        for field, value in profile_payload.items():
            assert data[field] == value
        assert data["address"] is None

    def test_missing_required_fields(self, client: TestClient) -> None:
        response = client.post("/profile", json={"bio": "No name", "email": "  "})

        assert response.status_code == 400
        assert response.json() == {
            "status": "error",
            "message": "Missing required fields: full_name and email are required",
        }

    def test_invalid_email_creates_nothing(self, client: TestClient, profile_payload: dict) -> None:
        profile_payload["email"] = "not-an-email"

        response = client.post("/profile", json=profile_payload)

        assert response.status_code == 400
        assert response.json()["message"] == "Invalid email format"
        assert profile_store.list_all() == []

    def test_duplicate_email_rejected(self, client: TestClient, profile_payload: dict) -> None:
        _create(client, profile_payload)

        response = client.post("/profile", json={**profile_payload, "full_name": "Other"})

        assert response.status_code == 400
        assert response.json()["message"] == "Email already exists"
        assert len(profile_store.list_all()) == 1

    def test_invalid_date(self, client: TestClient, profile_payload: dict) -> None:
        profile_payload["date_of_birth"] = "yesterday"

        response = client.post("/profile", json=profile_payload)

        assert response.status_code == 400
        assert response.json()["message"].startswith("Invalid date_of_birth:")

    def test_body_must_be_object(self, client: TestClient) -> None:
        response = client.post("/profile", json=["Maria"])

        assert response.status_code == 400
        assert response.json()["status"] == "error"


class TestGetProfile:
    """Tests for GET /profile."""

    def test_list(self, client: TestClient, profile_payload: dict) -> None:
        _create(client, profile_payload)

        body = client.get("/profile").json()

        assert body["status"] == "success"
        assert body["count"] == 1
        assert body["data"][0]["full_name"] == "Maria Santos"

    def test_missing_id_is_404(self, client: TestClient) -> None:
        response = client.get("/profile", params={"id": 99})

        assert response.status_code == 404
        assert response.json() == {"status": "error", "message": "Profile not found"}

    def test_non_integer_id_is_400(self, client: TestClient) -> None:
        response = client.get("/profile", params={"id": "abc"})

        assert response.status_code == 400

    def test_stats(self, client: TestClient, profile_payload: dict) -> None:
        profile_id = _create(client, profile_payload)

        response = client.get("/profile", params={"action": "stats", "id": profile_id})

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["completion_percentage"] == 60
        assert data["total_education"] == 0
        assert data["total_projects"] == 0

    def test_stats_requires_id(self, client: TestClient) -> None:
        response = client.get("/profile", params={"action": "stats"})

        assert response.status_code == 400
        assert response.json()["message"] == "Profile ID is required"

    def test_stats_missing_profile(self, client: TestClient) -> None:
        response = client.get("/profile", params={"action": "stats", "id": 5})

        assert response.status_code == 404

    def test_unknown_action(self, client: TestClient) -> None:
        response = client.get("/profile", params={"action": "explode"})

        assert response.status_code == 400
        assert response.json()["message"] == "Unknown action 'explode'"


class TestUpdateProfile:
    """Tests for PUT /profile."""

    def test_full_replace(self, client: TestClient, profile_payload: dict) -> None:
        profile_id = _create(client, profile_payload)

        response = client.put(
            "/profile",
            json={"id": profile_id, "full_name": "Maria S.", "email": "maria.santos@email.com"},
        )

        assert response.status_code == 200
        assert response.json()["message"] == "Profile updated successfully"
        data = profile_store.get_by_id(profile_id)
        assert data["full_name"] == "Maria S."
        assert data["bio"] is None

    def test_requires_id(self, client: TestClient, profile_payload: dict) -> None:
        response = client.put("/profile", json=profile_payload)

        assert response.status_code == 400
        assert response.json()["message"] == "Profile ID is required"

    def test_missing_profile_is_404(self, client: TestClient, profile_payload: dict) -> None:
        response = client.put("/profile", json={**profile_payload, "id": 77})

        assert response.status_code == 404
        assert response.json()["message"] == "Profile not found"

    def test_email_of_other_profile_rejected(
        self, client: TestClient, profile_payload: dict
    ) -> None:
        _create(client, profile_payload)
        client.post("/profile", json={"full_name": "John Reyes", "email": "john.reyes@email.com"})
        john = next(p for p in profile_store.list_all() if p["full_name"] == "John Reyes")

        response = client.put(
            "/profile",
            json={"id": john["id"], "full_name": "John Reyes", "email": "maria.santos@email.com"},
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Email already exists"
        assert profile_store.get_by_id(john["id"])["email"] == "john.reyes@email.com"


class TestDeleteProfile:
    """Tests for DELETE /profile."""

    def test_delete_twice(self, client: TestClient, profile_payload: dict) -> None:
        profile_id = _create(client, profile_payload)

        first = client.delete("/profile", params={"id": profile_id})
        second = client.delete("/profile", params={"id": profile_id})

        assert first.status_code == 200
        assert first.json()["message"] == "Profile deleted successfully"
        assert second.status_code == 404

    def test_requires_id(self, client: TestClient) -> None:
        response = client.delete("/profile")

        assert response.status_code == 400
        assert response.json()["message"] == "Profile ID is required"


class TestProfileEmailUniqueness:
    """Tests for the case-insensitive email check."""

    def test_duplicate_email_differing_in_case(
        self, client: TestClient, profile_payload: dict
    ) -> None:
        _create(client, profile_payload)

        response = client.post(
            "/profile", json={"full_name": "Other", "email": "MARIA.Santos@Email.com"}
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Email already exists"
        assert len(profile_store.list_all()) == 1

    def test_own_email_in_new_case_is_allowed(
        self, client: TestClient, profile_payload: dict
    ) -> None:
        profile_id = _create(client, profile_payload)

        response = client.put(
            "/profile",
            json={"id": profile_id, "full_name": "Maria", "email": "Maria.Santos@email.com"},
        )

        assert response.status_code == 200

    def test_failed_email_lookup_is_500(
        self, client: TestClient, profile_payload: dict, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setattr(
            "portfolio_cms.api.routes.profile.email_exists", lambda email, exclude_id=None: None
        )

        response = client.post("/profile", json=profile_payload)

        assert response.status_code == 500
        assert response.json() == {"status": "error", "message": "Failed to verify email"}
        assert profile_store.list_all() == []
