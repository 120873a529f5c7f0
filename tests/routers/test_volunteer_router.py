"""Tests for volunteer router endpoints."""

from fastapi.testclient import TestClient
from sqlmodel import Session

from app.models.project import Project
from app.models.volunteer import Volunteer
from app.services import project as project_service

NONEXISTENT_ID = 99999

VOLUNTEER_PAYLOAD = {
    "user_in": {
        "username": "frank",
        "email": "frank@example.com",
        "password": "Password123",
    },
    "volunteer_in": {
        "name": "Frank",
        "surname": "Ocean",
        "birth_date": "1994-07-08",
        "contact": "0605060708",
        "skills": ["music"],
        "interests": ["culture"],
    },
}


class TestRegistration:
    def test_create_volunteer(self, client: TestClient):
        response = client.post("/volunteers/", json=VOLUNTEER_PAYLOAD)

        assert response.status_code == 201
        data = response.json()
        assert data["name"] == "Frank"
        assert data["reputation"] == 0
        assert data["skills"] == ["music"]
        assert data["user"]["username"] == "frank"
        assert "password" not in data["user"]
        assert "hashed_password" not in data["user"]

    def test_create_volunteer_duplicate(self, client: TestClient):
        client.post("/volunteers/", json=VOLUNTEER_PAYLOAD)
        response = client.post("/volunteers/", json=VOLUNTEER_PAYLOAD)
        assert response.status_code == 409

    def test_create_volunteer_short_password(self, client: TestClient):
        payload = {
            **VOLUNTEER_PAYLOAD,
            "user_in": {**VOLUNTEER_PAYLOAD["user_in"], "password": "short"},
        }
        response = client.post("/volunteers/", json=payload)
        assert response.status_code == 422


class TestReadVolunteers:
    def test_read_me(self, client: TestClient, owner: Volunteer, token_headers):
        response = client.get("/volunteers/me", headers=token_headers("owner"))
        assert response.status_code == 200
        assert response.json()["id_volunteer"] == owner.id_volunteer

    def test_read_me_requires_auth(self, client: TestClient):
        assert client.get("/volunteers/me").status_code == 401

    def test_read_volunteer_and_lists(self, client: TestClient, owner: Volunteer):
        vid = owner.id_volunteer

        assert client.get(f"/volunteers/{vid}").json()["name"] == "Owner"
        assert client.get(f"/volunteers/{vid}/skills").json() == ["planning"]
        assert client.get(f"/volunteers/{vid}/interests").json() == ["environment"]
        assert len(client.get("/volunteers/").json()) == 1

    def test_read_volunteer_not_found(self, client: TestClient):
        assert client.get(f"/volunteers/{NONEXISTENT_ID}").status_code == 404
        assert client.get(f"/volunteers/{NONEXISTENT_ID}/skills").status_code == 404

    def test_owned_and_participating_projects(
        self,
        client: TestClient,
        session: Session,
        project: Project,
        owner: Volunteer,
        sender: Volunteer,
    ):
        project_service.add_member(session, project.id_project, sender.id_volunteer)
        session.commit()

        owned = client.get(f"/volunteers/{owner.id_volunteer}/owned-projects")
        joined = client.get(f"/volunteers/{sender.id_volunteer}/projects")

        assert [p["id_project"] for p in owned.json()] == [project.id_project]
        assert [p["id_project"] for p in joined.json()] == [project.id_project]
        assert joined.json()[0]["member_ids"] == [sender.id_volunteer]


class TestModifyVolunteer:
    def test_update_own_profile(
        self, client: TestClient, owner: Volunteer, token_headers
    ):
        response = client.patch(
            f"/volunteers/{owner.id_volunteer}",
            json={"interests": ["education", "health"]},
            headers=token_headers("owner"),
        )

        assert response.status_code == 200
        assert response.json()["interests"] == ["education", "health"]
        assert response.json()["skills"] == ["planning"]

    def test_update_other_profile_forbidden(
        self, client: TestClient, owner: Volunteer, outsider: Volunteer, token_headers
    ):
        response = client.patch(
            f"/volunteers/{owner.id_volunteer}",
            json={"contact": "hacked"},
            headers=token_headers("outsider"),
        )
        assert response.status_code == 403

    def test_delete_own_profile(
        self, client: TestClient, owner: Volunteer, token_headers
    ):
        vid = owner.id_volunteer

        response = client.delete(f"/volunteers/{vid}", headers=token_headers("owner"))

        assert response.status_code == 204
        assert client.get(f"/volunteers/{vid}").status_code == 404

    def test_delete_other_profile_forbidden(
        self, client: TestClient, owner: Volunteer, outsider: Volunteer, token_headers
    ):
        response = client.delete(
            f"/volunteers/{owner.id_volunteer}", headers=token_headers("outsider")
        )
        assert response.status_code == 403
