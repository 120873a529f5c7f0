from fastapi.testclient import TestClient

from app.main import app


class TestApplication:
    def test_app_metadata(self):
        assert app.title == "Volunteer Matchmaking API"

    def test_health_check(self, client: TestClient):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

    def test_routers_included(self, client: TestClient):
        paths = client.get("/openapi.json").json()["paths"]
        for expected in (
            "/auth/token",
            "/auth/refresh",
            "/volunteers/",
            "/projects/{project_id}/owner",
            "/categories/",
            "/requests/",
            "/requests/{request_id}/accept",
            "/requests/{request_id}/decline",
        ):
            assert expected in paths

    def test_internal_admin_login_mounted(self, client: TestClient):
        response = client.post(
            "/internal/admin/login", data={"username": "nobody", "password": "x"}
        )
        assert response.status_code == 401

    def test_internal_routes_hidden_from_schema(self, client: TestClient):
        schema = client.get("/openapi.json").json()
        assert not any(path.startswith("/internal") for path in schema["paths"])
        assert "/requests/{request_id}/accept" in schema["paths"]

    def test_unknown_route(self, client: TestClient):
        assert client.get("/does-not-exist").status_code == 404
