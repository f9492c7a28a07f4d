"""End-to-end tests for signup, login and the auth gate."""

from datetime import datetime, timedelta, timezone
from uuid import UUID

import jwt as pyjwt

from inkwell.config import Settings
from tests.e2e.client import signup
from tests.factories import STRONG_PASSWORD


def _expired_token(user_id: str) -> str:
    settings = Settings().auth
    issued = datetime.now(timezone.utc) - timedelta(days=2)
    return pyjwt.encode(
        {"sub": user_id, "iat": issued, "exp": issued + timedelta(days=1)},
        settings.jwt_secret,
        algorithm="HS256",
    )


class TestSignupAndLogin:
    """Signup and login endpoints."""

    def test_signup_then_login(self, client):
        # Arrange
        user_id, _ = signup(client)

        # Act
        response = client.post(
            "/auth/login",
            json={"email": "ADA@example.com", "password": STRONG_PASSWORD},
        )

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert data["userId"] == user_id
        assert UUID(user_id)
        assert data["token"].count(".") == 2

    def test_duplicate_signup_conflicts(self, client):
        signup(client)

        response = client.post(
            "/auth/signup",
            json={"email": "ada@example.com", "username": "x", "password": STRONG_PASSWORD},
        )

        assert response.status_code == 409
        assert response.json() == {"detail": "User already exists"}

    def test_signup_missing_field(self, client):
        response = client.post("/auth/signup", json={"email": "ada@example.com"})

        assert response.status_code == 400
        assert response.json()["detail"] == "All fields are required"

    def test_signup_weak_password(self, client):
        response = client.post(
            "/auth/signup",
            json={"email": "ada@example.com", "username": "ada", "password": "short1!"},
        )

        assert response.status_code == 400
        assert "at least 12 characters" in response.json()["detail"]

    def test_login_failures_are_indistinguishable(self, client):
        signup(client)

        wrong_password = client.post(
            "/auth/login", json={"email": "ada@example.com", "password": "Nope1234567!"}
        )
        unknown_email = client.post(
            "/auth/login", json={"email": "who@example.com", "password": STRONG_PASSWORD}
        )

        assert wrong_password.status_code == unknown_email.status_code == 400
        assert wrong_password.json() == unknown_email.json() == {
            "detail": "Invalid credentials"
        }

    def test_login_with_unencodable_password(self, client):
        """A lone surrogate escape in the JSON body is just a wrong password."""
        signup(client)

        response = client.post(
            "/auth/login",
            content=b'{"email": "ada@example.com", "password": "\\ud800abc"}',
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json() == {"detail": "Invalid credentials"}


class TestVerify:
    """GET /auth/verify."""

    def test_valid_token(self, client):
        user_id, headers = signup(client)

        response = client.get("/auth/verify", headers=headers)

        assert response.status_code == 200
        data = response.json()
        assert data["valid"] is True
        assert data["user"]["sub"] == user_id
        assert data["user"]["exp"] - data["user"]["iat"] == 86400

    def test_missing_token(self, client):
        response = client.get("/auth/verify")

        assert response.status_code == 401
        assert response.json() == {"detail": "Authentication required"}


class TestAuthGate:
    """Protected routes reject bad credentials without side effects."""

    def test_missing_token_challenges(self, client):
        response = client.get("/auth/me")

        assert response.status_code == 401
        assert response.json() == {"detail": "Authentication required"}
        assert response.headers["www-authenticate"] == "Bearer"

    def test_expired_token_does_not_mutate(self, client):
        # Arrange
        user_id, headers = signup(client)
        expired = {"Authorization": f"Bearer {_expired_token(user_id)}"}

        # Act
        response = client.post("/auth/stats/post", headers=expired)

        # Assert
        assert response.status_code == 401
        assert response.json() == {"detail": "Invalid or expired token"}
        assert client.get("/auth/stats", headers=headers).json()["posts"] == 0

    def test_tampered_token(self, client):
        _, headers = signup(client)
        tampered = {"Authorization": headers["Authorization"][:-3] + "abc"}

        response = client.put("/auth/update", json={"username": "x"}, headers=tampered)

        assert response.status_code == 401
        assert client.get("/auth/me", headers=headers).json()["username"] == "ada"

    def test_deleted_account_token_is_refused(self, client):
        # Arrange
        _, headers = signup(client)

        # Act
        deleted = client.delete("/auth/delete", headers=headers)
        after = client.get("/auth/me", headers=headers)

        # Assert
        assert deleted.status_code == 200
        assert deleted.json() == {"message": "Account deleted successfully"}
        assert after.status_code == 401
        assert after.json() == {"detail": "User not found"}
