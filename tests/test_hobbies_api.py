"""Tests for hobbies API endpoints."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from portfolio_cms.api.main import app
from portfolio_cms.services.hobbies import hobby_store


@pytest.fixture
def client() -> TestClient:
    """Create a test client."""
    return TestClient(app)


def _hobby_id(name: str) -> int:
    return next(h["id"] for h in hobby_store.list_all() if h["hobby_name"] == name)


class TestHobbiesApi:
    """Tests for /hobbies."""

    def test_create_and_read_back(self, client: TestClient) -> None:
        payload = {"hobby_name": "Coding", "description": "Open source", "icon_class": "fa-code"}

        assert client.post("/hobbies", json=payload).status_code == 201

        data = client.get("/hobbies", params={"id": _hobby_id("Coding")}).json()["data"]
        assert {k: data[k] for k in payload} == payload

    def test_name_is_required(self, client: TestClient) -> None:
        response = client.post("/hobbies", json={"hobby_name": "   ", "description": "x"})

        assert response.status_code == 400
        assert response.json()["message"] == "Missing required field: hobby_name is required"

    def test_search(self, client: TestClient) -> None:
        client.post("/hobbies", json={"hobby_name": "Coding"})
        client.post("/hobbies", json={"hobby_name": "Cooking"})

        body = client.get("/hobbies", params={"action": "search", "keyword": "COD"}).json()

        assert body["count"] == 1
        assert body["data"][0]["hobby_name"] == "Coding"

    def test_search_requires_keyword(self, client: TestClient) -> None:
        response = client.get("/hobbies", params={"action": "search", "keyword": " "})

        assert response.status_code == 400
        assert response.json()["message"] == "Keyword parameter is required"

    def test_count(self, client: TestClient) -> None:
        client.post("/hobbies", json={"hobby_name": "Coding"})
        client.post("/hobbies", json={"hobby_name": "Chess"})

        body = client.get("/hobbies", params={"action": "count"}).json()

        assert body["data"] == {"total": 2}

    def test_update_missing_hobby(self, client: TestClient) -> None:
        response = client.put("/hobbies", json={"id": 3, "hobby_name": "Chess"})

        assert response.status_code == 404
        assert response.json()["message"] == "Hobby not found"

    def test_update(self, client: TestClient) -> None:
        client.post("/hobbies", json={"hobby_name": "Chess", "description": "Blitz"})
        hobby_id = _hobby_id("Chess")

        response = client.put("/hobbies", json={"id": str(hobby_id), "hobby_name": "Go"})

        assert response.status_code == 200
        assert hobby_store.get_by_id(hobby_id)["hobby_name"] == "Go"
        assert hobby_store.get_by_id(hobby_id)["description"] is None

    def test_delete_twice(self, client: TestClient) -> None:
        client.post("/hobbies", json={"hobby_name": "Chess"})
        hobby_id = _hobby_id("Chess")

        assert client.delete("/hobbies", params={"id": hobby_id}).status_code == 200
        second = client.delete("/hobbies", params={"id": hobby_id})
        assert second.status_code == 404
        assert second.json() == {"status": "error", "message": "Hobby not found"}

    def test_oversized_id_is_rejected(self, client: TestClient) -> None:
        too_big = 2**63

        assert client.get("/hobbies", params={"id": too_big}).status_code == 400
        assert client.delete("/hobbies", params={"id": too_big}).status_code == 400
        response = client.put("/hobbies", json={"id": too_big, "hobby_name": "Chess"})
        assert response.status_code == 400
        assert response.json()["message"] == "Invalid hobby ID"

    def test_largest_valid_id_is_not_found(self, client: TestClient) -> None:
        response = client.get("/hobbies", params={"id": 2**63 - 1})

        assert response.status_code == 404
