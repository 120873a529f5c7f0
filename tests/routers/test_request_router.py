"""Tests for join request router endpoints."""

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session

from app.models.project import Project
from app.models.volunteer import Volunteer
from app.services import request as request_service

NONEXISTENT_ID = 99999


@pytest.fixture(name="request_id")
def request_id_fixture(session: Session, project: Project, sender: Volunteer) -> int:
    request = request_service.create_request(session, project.id_project, sender)
    return request.id_request


class TestCreateRequestEndpoint:
    def test_create_request(
        self,
        client: TestClient,
        project: Project,
        owner: Volunteer,
        sender: Volunteer,
        token_headers,
    ):
        response = client.post(
            "/requests/",
            params={"projectId": project.id_project},
            headers=token_headers("sender"),
        )

        assert response.status_code == 201
        data = response.json()
        assert data["status"] == "pending"
        assert data["id_sender"] == sender.id_volunteer
        assert data["id_receiver"] == owner.id_volunteer
        assert data["id_project"] == project.id_project
        assert data["decided_at"] is None

    def test_create_request_without_trailing_slash(
        self, client: TestClient, project: Project, sender: Volunteer, token_headers
    ):
        response = client.post(
            "/requests",
            params={"projectId": project.id_project},
            headers=token_headers("sender"),
            follow_redirects=False,
        )

        assert response.status_code == 201
        assert response.json()["id_project"] == project.id_project

    def test_create_request_unknown_project(
        self, client: TestClient, sender: Volunteer, token_headers
    ):
        response = client.post(
            "/requests/",
            params={"projectId": NONEXISTENT_ID},
            headers=token_headers("sender"),
        )
        assert response.status_code == 404

    def test_create_request_requires_auth(self, client: TestClient, project: Project):
        response = client.post("/requests/", params={"projectId": project.id_project})
        assert response.status_code == 401

    def test_create_request_requires_project_id(
        self, client: TestClient, sender: Volunteer, token_headers
    ):
        response = client.post("/requests/", headers=token_headers("sender"))
        assert response.status_code == 422


class TestReadRequestEndpoints:
    def test_read_request(
        self, client: TestClient, request_id: int, outsider: Volunteer, token_headers
    ):
        response = client.get(
            f"/requests/{request_id}", headers=token_headers("outsider")
        )
        assert response.status_code == 200
        assert response.json()["id_request"] == request_id

    def test_read_request_not_found(
        self, client: TestClient, sender: Volunteer, token_headers
    ):
        response = client.get(
            f"/requests/{NONEXISTENT_ID}", headers=token_headers("sender")
        )
        assert response.status_code == 404
        assert "not found" in response.json()["detail"]

    def test_read_request_participants(
        self,
        client: TestClient,
        request_id: int,
        owner: Volunteer,
        sender: Volunteer,
        project: Project,
        token_headers,
    ):
        headers = token_headers("sender")

        sender_res = client.get(f"/requests/{request_id}/sender", headers=headers)
        receiver_res = client.get(f"/requests/{request_id}/receiver", headers=headers)
        project_res = client.get(f"/requests/{request_id}/project", headers=headers)

        assert sender_res.json()["id_volunteer"] == sender.id_volunteer
        assert sender_res.json()["user"]["username"] == "sender"
        assert receiver_res.json()["id_volunteer"] == owner.id_volunteer
        assert project_res.json()["id_project"] == project.id_project

    def test_list_requests_by_status(
        self,
        client: TestClient,
        session: Session,
        request_id: int,
        project: Project,
        owner: Volunteer,
        outsider: Volunteer,
        token_headers,
    ):
        request_service.create_request(session, project.id_project, outsider)
        request_service.decline_request(session, request_id, owner)
        headers = token_headers("owner")

        pending = client.get(
            "/requests/", params={"status": "pending"}, headers=headers
        )
        declined = client.get(
            "/requests/", params={"status": "declined"}, headers=headers
        )

        assert [r["id_sender"] for r in pending.json()] == [outsider.id_volunteer]
        assert [r["id_request"] for r in declined.json()] == [request_id]

    def test_list_requests_rejects_unknown_status(
        self, client: TestClient, owner: Volunteer, token_headers
    ):
        response = client.get(
            "/requests/", params={"status": "approved"}, headers=token_headers("owner")
        )
        assert response.status_code == 422

    def test_list_requests_without_trailing_slash(
        self, client: TestClient, request_id: int, owner: Volunteer, token_headers
    ):
        response = client.get(
            "/requests", headers=token_headers("owner"), follow_redirects=False
        )

        assert response.status_code == 200
        assert [r["id_request"] for r in response.json()] == [request_id]


class TestDecisionEndpoints:
    def test_accept_request(
        self,
        client: TestClient,
        request_id: int,
        project: Project,
        sender: Volunteer,
        token_headers,
    ):
        response = client.patch(
            f"/requests/{request_id}/accept", headers=token_headers("owner")
        )

        assert response.status_code == 200
        assert response.json()["status"] == "accepted"
        assert response.json()["decided_at"] is not None

        members = client.get(f"/projects/{project.id_project}/members")
        assert [m["id_volunteer"] for m in members.json()] == [sender.id_volunteer]

    def test_accept_by_non_owner_is_forbidden(
        self,
        client: TestClient,
        request_id: int,
        outsider: Volunteer,
        project: Project,
        token_headers,
    ):
        response = client.patch(
            f"/requests/{request_id}/accept", headers=token_headers("outsider")
        )

        assert response.status_code == 403
        assert client.get(f"/projects/{project.id_project}/members").json() == []

    def test_accept_twice_conflicts(
        self, client: TestClient, request_id: int, token_headers
    ):
        headers = token_headers("owner")
        client.patch(f"/requests/{request_id}/accept", headers=headers)

        response = client.patch(f"/requests/{request_id}/accept", headers=headers)

        assert response.status_code == 409
        assert response.json()["state"] == "accepted"

    def test_decline_request(
        self, client: TestClient, request_id: int, project: Project, token_headers
    ):
        response = client.patch(
            f"/requests/{request_id}/decline", headers=token_headers("owner")
        )

        assert response.status_code == 200
        assert response.json()["status"] == "declined"
        assert client.get(f"/projects/{project.id_project}/members").json() == []

    def test_decline_after_decline_conflicts(
        self, client: TestClient, request_id: int, token_headers
    ):
        headers = token_headers("owner")
        client.patch(f"/requests/{request_id}/decline", headers=headers)

        response = client.patch(f"/requests/{request_id}/decline", headers=headers)

        assert response.status_code == 409
        assert response.json()["state"] == "declined"

    def test_decide_unknown_request(
        self, client: TestClient, owner: Volunteer, token_headers
    ):
        response = client.patch(
            f"/requests/{NONEXISTENT_ID}/accept", headers=token_headers("owner")
        )
        assert response.status_code == 404


class TestDeleteRequestEndpoint:
    def test_admin_can_delete(
        self, client: TestClient, request_id: int, admin_headers, token_headers
    ):
        response = client.delete(f"/requests/{request_id}", headers=admin_headers)

        assert response.status_code == 200
        assert response.json()["id_request"] == request_id
        assert (
            client.get(
                f"/requests/{request_id}", headers=token_headers("sender")
            ).status_code
            == 404
        )

    def test_volunteer_cannot_delete(
        self, client: TestClient, request_id: int, token_headers
    ):
        response = client.delete(
            f"/requests/{request_id}", headers=token_headers("owner")
        )
        assert response.status_code == 401

    def test_admin_token_cannot_read_as_volunteer(
        self, client: TestClient, request_id: int, admin_headers
    ):
        response = client.get(f"/requests/{request_id}", headers=admin_headers)
        assert response.status_code == 401
