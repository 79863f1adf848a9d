# =============================================================================
# tests/test_api.py - HTTP Endpoint Tests
# =============================================================================
# Exercises the application through FastAPI's TestClient against a SQLite
# database. See conftest.py for the client fixture.
# =============================================================================

import re
from uuid import UUID

from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from chirpy.config import settings


RFC3339_UTC = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}Z$")


# =============================================================================
# Health Check
# =============================================================================

class TestHealthz:

    def test_ok(self, client):
        response = client.get("/api/healthz")
        assert response.status_code == 200
        assert response.text == "OK"
        assert response.headers["content-type"] == "text/plain; charset=utf-8"

    def test_wrong_method(self, client):
        response = client.post("/api/healthz")
        assert response.status_code == 405
        assert response.content == b""

    def test_not_counted_as_hit(self, client, hits):
        client.get("/api/healthz")
        assert hits.read() == 0


# =============================================================================
# Chirp Validation
# =============================================================================

class TestValidateChirp:

    def test_cleans_chirp(self, client):
        response = client.post(
            "/api/validate_chirp",
            json={"body": "This is a kerfuffle opinion I need to share"}
        )
        assert response.status_code == 200
        assert response.json() == {
            "cleaned_body": "This is a **** opinion I need to share"
        }

    def test_case_and_punctuation(self, client):
        response = client.post(
            "/api/validate_chirp",
            json={"body": "fornax SHARBERT Kerfuffle!"}
        )
        assert response.json() == {"cleaned_body": "**** **** ****"}

    def test_max_length_is_accepted(self, client):
        response = client.post("/api/validate_chirp", json={"body": "a" * 140})
        assert response.status_code == 200

    def test_too_long(self, client):
        response = client.post("/api/validate_chirp", json={"body": " " * 141})
        assert response.status_code == 400
        assert response.json() == {"error": "Chirp is too long"}

    def test_invalid_json(self, client):
        response = client.post(
            "/api/validate_chirp",
            content=b"{not json",
            headers={"Content-Type": "application/json"}
        )
        assert response.status_code == 400
        assert response.json() == {"error": "Something went wrong"}

    def test_empty_payload(self, client):
        response = client.post("/api/validate_chirp")
        assert response.status_code == 400
        assert response.json() == {"error": "Something went wrong"}

    def test_body_of_wrong_type(self, client):
        response = client.post("/api/validate_chirp", json={"body": 42})
        assert response.status_code == 400
        assert response.json() == {"error": "Something went wrong"}

    def test_payload_not_an_object(self, client):
        response = client.post("/api/validate_chirp", json=["body"])
        assert response.status_code == 400

    def test_null_body(self, client):
        response = client.post("/api/validate_chirp", json={"body": None})
        assert response.status_code == 400
        assert response.json() == {"error": "Something went wrong"}

    def test_invalid_utf8(self, client):
        response = client.post(
            "/api/validate_chirp",
            content=b'{"body": "\xff\xfe"}',
            headers={"Content-Type": "application/json"}
        )
        assert response.status_code == 400
        assert response.json() == {"error": "Something went wrong"}

    def test_missing_body_is_empty_chirp(self, client):
        response = client.post("/api/validate_chirp", json={})
        assert response.status_code == 200
        assert response.json() == {"cleaned_body": ""}

    def test_wrong_method(self, client):
        response = client.get("/api/validate_chirp")
        assert response.status_code == 405
        assert response.content == b""


# =============================================================================
# Users
# =============================================================================

class TestCreateUser:

    def test_creates_user(self, client):
        response = client.post("/api/users", json={"email": "saul@bettercall.com"})

        assert response.status_code == 201
        data = response.json()
        assert set(data) == {"id", "created_at", "updated_at", "email"}
        assert data["email"] == "saul@bettercall.com"
        UUID(data["id"])
        assert RFC3339_UTC.match(data["created_at"])
        assert RFC3339_UTC.match(data["updated_at"])

    def test_ids_are_unique(self, client):
        first = client.post("/api/users", json={"email": "a@example.com"}).json()
        second = client.post("/api/users", json={"email": "b@example.com"}).json()
        assert first["id"] != second["id"]

    def test_email_format_not_checked(self, client):
        response = client.post("/api/users", json={"email": "not an email"})
        assert response.status_code == 201

    def test_duplicate_email_is_store_failure(self, client):
        client.post("/api/users", json={"email": "walt@example.com"})
        response = client.post("/api/users", json={"email": "walt@example.com"})

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to create user"}

    def test_unreachable_database(self, client, monkeypatch):
        async def refused_commit(self):
            raise ConnectionRefusedError(111, "Connection refused")

        monkeypatch.setattr(AsyncSession, "commit", refused_commit)
        response = client.post("/api/users", json={"email": "gus@example.com"})

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to create user"}
        assert "refused" not in response.text

    def test_invalid_json(self, client):
        response = client.post(
            "/api/users",
            content=b"nope",
            headers={"Content-Type": "application/json"}
        )
        assert response.status_code == 400
        assert response.json() == {"error": "Invalid request"}

    def test_wrong_method(self, client):
        response = client.get("/api/users")
        assert response.status_code == 405


# =============================================================================
# Static Files and Hit Counting
# =============================================================================

class TestFileServer:

    def test_serves_index(self, client):
        response = client.get("/app/")
        assert response.status_code == 200
        assert "Welcome to Chirpy" in response.text

    def test_each_request_is_a_hit(self, client, hits):
        client.get("/app/")
        client.get("/app/index.html")
        client.get("/app/missing.png")
        assert hits.read() == 3

    def test_root_redirects_to_app(self, client):
        response = client.get("/", follow_redirects=False)
        assert response.status_code == 302
        assert response.headers["location"] == "/app/"

    def test_root_redirect_is_get_only(self, client):
        response = client.post("/", follow_redirects=False)
        assert response.status_code == 405
        assert response.content == b""

    def test_unknown_path_is_not_redirected(self, client, hits):
        response = client.get("/nowhere/else", follow_redirects=False)
        assert response.status_code == 404
        assert "location" not in response.headers
        assert hits.read() == 0

    def test_unknown_path(self, client):
        response = client.get("/nowhere")
        assert response.status_code == 404
        assert response.json() == {"error": "Not Found"}


# =============================================================================
# Admin
# =============================================================================

class TestMetrics:

    def test_reports_hits(self, client):
        for _ in range(3):
            client.get("/app/")

        response = client.get("/admin/metrics")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert "<h1>Welcome, Chirpy Admin</h1>" in response.text
        assert "Chirpy has been visited 3 times!" in response.text

    def test_admin_requests_are_not_hits(self, client):
        client.get("/admin/metrics")
        response = client.get("/admin/metrics")
        assert "Chirpy has been visited 0 times!" in response.text

    def test_wrong_method(self, client):
        response = client.post("/admin/metrics")
        assert response.status_code == 405
        assert response.content == b""


class TestReset:

    def test_resets_hits_and_deletes_users(self, client, hits):
        client.get("/app/")
        client.post("/api/users", json={"email": "jesse@example.com"})

        response = client.post("/admin/reset")

        assert response.status_code == 200
        assert response.headers["content-type"] == "text/plain; charset=utf-8"
        assert hits.read() == 0
        # The email is free again
        again = client.post("/api/users", json={"email": "jesse@example.com"})
        assert again.status_code == 201

    def test_forbidden_outside_dev(self, client, hits, monkeypatch):
        monkeypatch.setattr(settings, "PLATFORM", "production")
        client.get("/app/")
        client.post("/api/users", json={"email": "mike@example.com"})

        response = client.post("/admin/reset")

        assert response.status_code == 403
        assert response.json() == {"error": "Forbidden"}
        assert hits.read() == 1
        # Users were kept
        dup = client.post("/api/users", json={"email": "mike@example.com"})
        assert dup.status_code == 500

    def test_store_failure(self, client, hits, monkeypatch):
        client.get("/app/")

        async def failing_execute(self, *args, **kwargs):
            raise OperationalError("DELETE FROM users", {}, Exception("database is down"))

        monkeypatch.setattr(AsyncSession, "execute", failing_execute)
        response = client.post("/admin/reset")

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to delete users"}
        assert "database is down" not in response.text
        assert hits.read() == 1

    def test_unreachable_database(self, client, hits, monkeypatch):
        client.get("/app/")

        async def refused_execute(self, *args, **kwargs):
            raise ConnectionRefusedError(111, "Connection refused")

        monkeypatch.setattr(AsyncSession, "execute", refused_execute)
        response = client.post("/admin/reset")

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to delete users"}
        assert hits.read() == 1

    def test_wrong_method(self, client):
        response = client.get("/admin/reset")
        assert response.status_code == 405
