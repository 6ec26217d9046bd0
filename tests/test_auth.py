"""Tests for registration and the profile endpoint."""

from unittest.mock import patch

from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from mindweave import models
from tests.conftest import auth_headers, create_access_token


class TestRegister:
    def test_register_creates_profile(self, client: TestClient, db_session: Session) -> None:
        response = client.post(
            "/api/v1/auth/register",
            json={
                "email": "New.User@Example.com",
                "password": "correct-horse",
                "displayName": "New User",
            },
        )

        assert response.status_code == status.HTTP_201_CREATED
        body = response.json()
        assert body["success"] is True
        assert body["message"] == "User registered successfully."
        assert body["data"]["email"] == "new.user@example.com"
        assert body["data"]["displayName"] == "New User"
        assert body["data"]["subscription"] == "free"
        assert "password" not in body["data"]
        assert "hashedPassword" not in body["data"]

        user = db_session.query(models.User).filter_by(email="new.user@example.com").one()
        assert user.hashed_password is not None
        assert user.hashed_password != "correct-horse"

    def test_register_missing_fields_is_400(self, client: TestClient) -> None:
        response = client.post("/api/v1/auth/register", json={"email": "a@example.com"})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["success"] is False

    def test_register_duplicate_email_is_409(
        self, client: TestClient, test_user: models.User
    ) -> None:
        response = client.post(
            "/api/v1/auth/register",
            json={
                "email": test_user.email,
                "password": "another-password",
                "displayName": "Someone Else",
            },
        )

        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.json() == {
            "success": False,
            "message": "The email address is already in use by another account.",
        }

    def test_register_disabled_is_403(self, client: TestClient) -> None:
        with patch(
            "mindweave.application.identity.use_cases.register_user_use_case."
            "is_user_registrations_enabled",
            return_value=False,
        ):
            response = client.post(
                "/api/v1/auth/register",
                json={
                    "email": "late@example.com",
                    "password": "correct-horse",
                    "displayName": "Late",
                },
            )

        assert response.status_code == status.HTTP_403_FORBIDDEN


class TestMe:
    def test_get_me(self, client: TestClient, test_user: models.User) -> None:
        response = client.get("/api/v1/auth/me", headers=auth_headers(test_user.id))

        assert response.status_code == status.HTTP_200_OK
        data = response.json()["data"]
        assert data["uid"] == test_user.id
        assert data["email"] == test_user.email

    def test_get_me_without_profile_is_404(self, client: TestClient) -> None:
        response = client.get("/api/v1/auth/me", headers=auth_headers(424242))

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["message"] == "User profile not found."

    def test_invalid_token_is_401(self, client: TestClient) -> None:
        response = client.get("/api/v1/auth/me", headers={"Authorization": "Bearer not-a-jwt"})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_refresh_token_is_rejected(self, client: TestClient, test_user: models.User) -> None:
        token = create_access_token(test_user.id, type="refresh")

        response = client.get("/api/v1/auth/me", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_core_routes_require_a_profile(self, client: TestClient) -> None:
        """A valid token for a uid with no profile cannot use the app."""
        response = client.get("/api/v1/sources", headers=auth_headers(424242))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
