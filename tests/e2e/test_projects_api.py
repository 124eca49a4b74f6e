"""End-to-end tests for project and project response endpoints."""

from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from learnhub.interface.api.app import create_app
from tests.di import build_test_container
from tests.e2e.client import register


@pytest.fixture
def client():
    """Test client over in-memory persistence."""
    with TestClient(create_app(build_test_container())) as client:
        yield client


def _create_project(client, headers, title="Translate lecture notes", type="FREE"):
    response = client.post(
        "/v1/projects",
        json={"title": title, "body": "Details of the project", "type": type},
        headers=headers,
    )
    assert response.status_code == 201, response.text
    return response.json()["project_id"]


class TestProjects:
    """Tests for project endpoints."""

    def test_create_and_get_project(self, client):
        # Arrange
        admin = register(client, "ada", admin=True)

        # Act
        project_id = _create_project(client, admin, type="PAID")
        response = client.get(f"/v1/projects/{project_id}")

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert data["type"] == "PAID"
        assert data["priority"] == 0
        assert data["author_name"] == "ada"
        assert data["body"] == "Details of the project"

    def test_non_admin_cannot_create_project(self, client):
        # Arrange
        user = register(client, "bob")

        # Act
        response = client.post(
            "/v1/projects",
            json={"title": "t", "body": "b", "type": "FREE"},
            headers=user,
        )

        # Assert
        assert response.status_code == 403

    def test_listing_orders_by_priority(self, client):
        # Arrange
        admin = register(client, "ada", admin=True)
        low = _create_project(client, admin, title="Low")
        high = _create_project(client, admin, title="High")
        client.put(f"/v1/projects/{high}/priority", json={"priority": 5}, headers=admin)

        # Act
        data = client.get("/v1/projects").json()

        # Assert
        assert [row["id"] for row in data["items"]] == [high, low]
        assert data["total"] == 2

    def test_listing_filters_by_type(self, client):
        # Arrange
        admin = register(client, "ada", admin=True)
        _create_project(client, admin, type="FREE")
        paid = _create_project(client, admin, type="PAID")

        # Act
        data = client.get("/v1/projects?type=PAID").json()

        # Assert
        assert [row["id"] for row in data["items"]] == [paid]

    def test_only_admin_reprioritizes(self, client):
        # Arrange
        admin = register(client, "ada", admin=True)
        user = register(client, "bob")
        project_id = _create_project(client, admin)

        # Act
        response = client.put(
            f"/v1/projects/{project_id}/priority", json={"priority": 3}, headers=user
        )

        # Assert
        assert response.status_code == 403

    def test_update_and_delete_project(self, client):
        # Arrange
        admin = register(client, "ada", admin=True)
        project_id = _create_project(client, admin)

        # Act
        updated = client.put(
            f"/v1/projects/{project_id}",
            json={"title": "Renamed", "body": "New body", "type": "PAID"},
            headers=admin,
        )
        fetched = client.get(f"/v1/projects/{project_id}").json()
        deleted = client.delete(f"/v1/projects/{project_id}", headers=admin)

        # Assert
        assert updated.status_code == 204
        assert fetched["title"] == "Renamed"
        assert fetched["type"] == "PAID"
        assert deleted.status_code == 204
        assert client.get(f"/v1/projects/{project_id}").status_code == 404

    def test_unknown_project_is_not_found(self, client):
        assert client.get(f"/v1/projects/{uuid4()}").status_code == 404


class TestProjectResponses:
    """Tests for responding to projects and verifying responses."""

    def test_respond_and_verify(self, client):
        # Arrange
        admin = register(client, "ada", admin=True)
        responder = register(client, "bob")
        project_id = _create_project(client, admin, type="PAID")

        # Act
        created = client.post(
            f"/v1/projects/{project_id}/responses",
            json={"body": "I can help", "payment_number": "01700000000"},
            headers=responder,
        )
        response_id = created.json()["response_id"]
        forbidden = client.put(
            f"/v1/projects/responses/{response_id}?verify=true", headers=responder
        )
        verified = client.put(
            f"/v1/projects/responses/{response_id}?verify=true", headers=admin
        )
        fetched = client.get(f"/v1/projects/responses/{response_id}").json()

        # Assert
        assert created.status_code == 201
        assert forbidden.status_code == 403
        assert verified.status_code == 200
        assert verified.json() == {"response_id": response_id, "is_verified": True}
        assert fetched["is_verified"] is True
        assert fetched["responder_name"] == "bob"
        assert fetched["payment_number"] == "01700000000"

    def test_list_responses_filters_by_verification(self, client):
        # Arrange
        admin = register(client, "ada", admin=True)
        responder = register(client, "bob")
        project_id = _create_project(client, admin)
        ids = []
        for body in ("first", "second"):
            created = client.post(
                f"/v1/projects/{project_id}/responses",
                json={"body": body},
                headers=responder,
            )
            ids.append(created.json()["response_id"])
        client.put(f"/v1/projects/responses/{ids[0]}?verify=true", headers=admin)

        # Act
        everything = client.get(f"/v1/projects/{project_id}/responses").json()
        verified = client.get(
            f"/v1/projects/{project_id}/responses?is_verified=true"
        ).json()
        unverified = client.get(
            f"/v1/projects/{project_id}/responses?is_verified=false"
        ).json()

        # Assert
        assert everything["total"] == 2
        assert [row["id"] for row in verified["items"]] == [ids[0]]
        assert [row["id"] for row in unverified["items"]] == [ids[1]]

    def test_respond_to_unknown_project_is_not_found(self, client):
        # Arrange
        responder = register(client, "bob")

        # Act
        response = client.post(
            f"/v1/projects/{uuid4()}/responses",
            json={"body": "Hello"},
            headers=responder,
        )

        # Assert
        assert response.status_code == 404

    def test_verify_requires_query_flag(self, client):
        # Arrange
        admin = register(client, "ada", admin=True)

        # Act
        response = client.put(f"/v1/projects/responses/{uuid4()}", headers=admin)

        # Assert
        assert response.status_code == 422
