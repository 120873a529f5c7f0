"""Tests for category router endpoints."""

from fastapi.testclient import TestClient

from app.models.category import Category
from app.models.project import Project

NONEXISTENT_ID = 99999


class TestPublicCategoryEndpoints:
    def test_list_categories(
        self, client: TestClient, category: Category, project: Project
    ):
        response = client.get("/categories/")

        assert response.status_code == 200
        assert response.json() == [
            {
                "id_categ": category.id_categ,
                "name": "Environment",
                "description": "Green projects",
                "popularity": 1,
            }
        ]

    def test_read_category_and_projects(
        self, client: TestClient, category: Category, project: Project
    ):
        single = client.get(f"/categories/{category.id_categ}")
        projects = client.get(f"/categories/{category.id_categ}/projects")

        assert single.json()["name"] == "Environment"
        assert [p["id_project"] for p in projects.json()] == [project.id_project]

    def test_read_category_not_found(self, client: TestClient):
        assert client.get(f"/categories/{NONEXISTENT_ID}").status_code == 404


class TestAdminCategoryEndpoints:
    def test_create_category_as_admin(self, client: TestClient, admin_headers):
        response = client.post(
            "/categories/",
            json={"name": "Sports", "description": "Clubs and events"},
            headers=admin_headers,
        )

        assert response.status_code == 201
        assert response.json()["popularity"] == 0

    def test_create_category_as_volunteer(
        self, client: TestClient, owner, token_headers
    ):
        response = client.post(
            "/categories/", json={"name": "Sports"}, headers=token_headers("owner")
        )
        assert response.status_code == 401

    def test_create_duplicate_category(
        self, client: TestClient, category: Category, admin_headers
    ):
        response = client.post(
            "/categories/", json={"name": "Environment"}, headers=admin_headers
        )
        assert response.status_code == 409

    def test_update_and_delete_category(
        self, client: TestClient, category: Category, admin_headers
    ):
        category_id = category.id_categ
        updated = client.patch(
            f"/categories/{category_id}",
            json={"description": "Nature"},
            headers=admin_headers,
        )
        deleted = client.delete(f"/categories/{category_id}", headers=admin_headers)

        assert updated.json()["description"] == "Nature"
        assert deleted.status_code == 204
        assert client.get(f"/categories/{category_id}").status_code == 404
