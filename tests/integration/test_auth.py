"""Tests for dashboard login and token-protected routes."""

from datetime import timedelta

import pytest
from httpx import AsyncClient

from src.veloria.core.security import create_access_token

pytestmark = [pytest.mark.integration, pytest.mark.asyncio]


class TestLogin:
    async def test_login_returns_token_and_user(
        self, client: AsyncClient, admin_user: dict
    ) -> None:
        response = await client.post(
            "/api/auth/login",
            json={"email": admin_user["email"], "password": admin_user["password"]},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["token"]
        assert data["tokenType"] == "bearer"
        assert data["user"] == {
            "id": admin_user["id"],
            "name": "Studio Admin",
            "email": admin_user["email"],
            "role": "admin",
        }

    async def test_login_email_is_case_insensitive(
        self, client: AsyncClient, admin_user: dict
    ) -> None:
        response = await client.post(
            "/api/auth/login",
            json={"email": admin_user["email"].upper(), "password": admin_user["password"]},
        )

        assert response.status_code == 200

    async def test_wrong_password_is_rejected(self, client: AsyncClient, admin_user: dict) -> None:
        response = await client.post(
            "/api/auth/login",
            json={"email": admin_user["email"], "password": "not-the-password"},
        )

        assert response.status_code == 401
        body = response.json()
        assert body["success"] is False
        assert body["message"] == "Invalid credentials"

    async def test_unknown_email_gets_same_error(self, client: AsyncClient, engine) -> None:
        response = await client.post(
            "/api/auth/login",
            json={"email": "nobody@example.com", "password": "whatever"},
        )

        assert response.status_code == 401
        assert response.json()["message"] == "Invalid credentials"

    async def test_malformed_email_is_401_not_422(self, client: AsyncClient, engine) -> None:
        response = await client.post(
            "/api/auth/login", json={"email": "not-an-email", "password": "whatever"}
        )

        assert response.status_code == 401

    async def test_missing_fields_are_422(self, client: AsyncClient, engine) -> None:
        response = await client.post("/api/auth/login", json={"email": "a@example.com"})

        assert response.status_code == 422
        assert response.json()["success"] is False


class TestProtectedRoutes:
    async def test_me_returns_current_user(
        self, client: AsyncClient, admin_user: dict, admin_headers: dict
    ) -> None:
        response = await client.get("/api/auth/me", headers=admin_headers)

        assert response.status_code == 200
        assert response.json()["email"] == admin_user["email"]

    async def test_missing_token(self, client: AsyncClient) -> None:
        response = await client.get("/api/projects/admin")

        assert response.status_code == 401
        assert response.json()["message"] == "Not authorized, no token"

    async def test_invalid_token(self, client: AsyncClient) -> None:
        response = await client.get(
            "/api/projects/admin", headers={"Authorization": "Bearer not.a.jwt"}
        )

        assert response.status_code == 401
        assert response.json()["message"] == "Not authorized, token failed"

    async def test_expired_token(self, client: AsyncClient, admin_user: dict) -> None:
        token = create_access_token(
            admin_user["id"], admin_user["role"], expires_delta=timedelta(seconds=-1)
        )

        response = await client.get(
            "/api/bookings/admin", headers={"Authorization": f"Bearer {token}"}
        )

        assert response.status_code == 401

    async def test_token_for_deleted_user(self, client: AsyncClient, engine) -> None:
        token = create_access_token("0f8fad5b-d9cb-469f-a165-70867728950e", "admin")

        response = await client.get(
            "/api/contact/admin", headers={"Authorization": f"Bearer {token}"}
        )

        assert response.status_code == 401

    async def test_editor_cannot_delete(
        self, client: AsyncClient, editor_headers: dict
    ) -> None:
        response = await client.delete(
            "/api/projects/admin/0f8fad5b-d9cb-469f-a165-70867728950e",
            headers=editor_headers,
        )

        assert response.status_code == 403
        assert response.json()["message"] == "Not authorized as an admin"

    async def test_error_responses_carry_request_id(self, client: AsyncClient) -> None:
        response = await client.get(
            "/api/projects/admin", headers={"X-Request-ID": "3f2a4b6c-8d1e-4f5a-9b7c-0d1e2f3a4b5c"}
        )

        assert response.json()["request_id"] == "3f2a4b6c-8d1e-4f5a-9b7c-0d1e2f3a4b5c"
        assert response.headers["X-Request-ID"] == "3f2a4b6c-8d1e-4f5a-9b7c-0d1e2f3a4b5c"
