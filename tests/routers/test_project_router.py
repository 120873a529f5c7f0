"""Tests for project router endpoints."""

from fastapi.testclient import TestClient
from sqlmodel import Session

from app.models.category import Category
from app.models.project import Project
from app.models.volunteer import Volunteer
from app.services import project as project_service

NONEXISTENT_ID = 99999


class TestProjectCrud:
    def test_create_project(
        self, client: TestClient, owner: Volunteer, category: Category, token_headers
    ):
        response = client.post(
            "/projects/",
            json={
                "name": "Repair Cafe",
                "description": "Fix things together",
                "category_ids": [category.id_categ],
            },
            headers=token_headers("owner"),
        )

        assert response.status_code == 201
        data = response.json()
        assert data["id_owner"] == owner.id_volunteer
        assert data["member_ids"] == []
        assert data["categories"][0]["name"] == "Environment"
        assert data["categories"][0]["popularity"] == 1

    def test_create_project_requires_auth(self, client: TestClient):
        response = client.post("/projects/", json={"name": "Nope"})
        assert response.status_code == 401

    def test_list_and_filter_projects(
        self,
        client: TestClient,
        project: Project,
        category: Category,
        owner: Volunteer,
        token_headers,
    ):
        client.post(
            "/projects/", json={"name": "Untagged"}, headers=token_headers("owner")
        )

        everything = client.get("/projects/")
        tagged = client.get("/projects/", params={"category_id": category.id_categ})

        assert len(everything.json()) == 2
        assert [p["id_project"] for p in tagged.json()] == [project.id_project]

    def test_read_project_not_found(self, client: TestClient):
        response = client.get(f"/projects/{NONEXISTENT_ID}")
        assert response.status_code == 404

    def test_update_project_owner_only(
        self, client: TestClient, project: Project, outsider: Volunteer, token_headers
    ):
        forbidden = client.patch(
            f"/projects/{project.id_project}",
            json={"name": "Mine now"},
            headers=token_headers("outsider"),
        )
        allowed = client.patch(
            f"/projects/{project.id_project}",
            json={"name": "Bigger Garden"},
            headers=token_headers("owner"),
        )

        assert forbidden.status_code == 403
        assert allowed.status_code == 200
        assert allowed.json()["name"] == "Bigger Garden"

    def test_delete_project(self, client: TestClient, project: Project, token_headers):
        project_id = project.id_project

        response = client.delete(
            f"/projects/{project_id}", headers=token_headers("owner")
        )

        assert response.status_code == 204
        assert client.get(f"/projects/{project_id}").status_code == 404


class TestProjectRelations:
    def test_read_owner_and_categories(
        self, client: TestClient, project: Project, owner: Volunteer
    ):
        owner_res = client.get(f"/projects/{project.id_project}/owner")
        categories_res = client.get(f"/projects/{project.id_project}/categories")

        assert owner_res.json()["id_volunteer"] == owner.id_volunteer
        assert [c["name"] for c in categories_res.json()] == ["Environment"]

    def test_remove_member(
        self,
        client: TestClient,
        session: Session,
        project: Project,
        sender: Volunteer,
        token_headers,
    ):
        project_service.add_member(session, project.id_project, sender.id_volunteer)
        session.commit()

        response = client.delete(
            f"/projects/{project.id_project}/members/{sender.id_volunteer}",
            headers=token_headers("sender"),
        )

        assert response.status_code == 204
        assert client.get(f"/projects/{project.id_project}/members").json() == []

    def test_remove_non_member(
        self, client: TestClient, project: Project, sender: Volunteer, token_headers
    ):
        response = client.delete(
            f"/projects/{project.id_project}/members/{sender.id_volunteer}",
            headers=token_headers("owner"),
        )
        assert response.status_code == 404

    def test_transfer_ownership(
        self, client: TestClient, project: Project, outsider: Volunteer, token_headers
    ):
        response = client.put(
            f"/projects/{project.id_project}/owner",
            json={"id_volunteer": outsider.id_volunteer},
            headers=token_headers("owner"),
        )

        assert response.status_code == 200
        assert response.json()["id_owner"] == outsider.id_volunteer
        owner_res = client.get(f"/projects/{project.id_project}/owner")
        assert owner_res.json()["id_volunteer"] == outsider.id_volunteer

    def test_transfer_ownership_non_owner(
        self, client: TestClient, project: Project, outsider: Volunteer, token_headers
    ):
        response = client.put(
            f"/projects/{project.id_project}/owner",
            json={"id_volunteer": outsider.id_volunteer},
            headers=token_headers("outsider"),
        )
        assert response.status_code == 403
