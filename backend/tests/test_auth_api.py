"""Tests for cookie sessions: identity-token signup and login, logout, expiry and throttling."""

from datetime import datetime, timedelta, timezone

import jwt
from firebase_admin import auth

from cuesheet.core.config import settings
from cuesheet.core.rate_limit import login_limiter
from cuesheet.core.security import create_session_token, decode_session_token


class TestSessionTokens:
    def test_round_trip_claims(self):
        claims = decode_session_token(create_session_token("a@example.com", "uid-1"))
        assert claims.email == "a@example.com"
        assert claims.uid == "uid-1"

    def test_expired_token_is_rejected(self, client):
        token = jwt.encode(
            {"email": "a@example.com", "exp": datetime.now(timezone.utc) - timedelta(minutes=1)},
            settings.JWT_SECRET,
            algorithm=settings.JWT_ALGORITHM,
        )
        client.cookies.set(settings.COOKIE_NAME, token)

        response = client.post("/api/logout")
        assert response.status_code == 401
        assert response.json() == {"message": "Unauthorized: Invalid token"}

    def test_wrong_signature_is_rejected(self, client):
        token = jwt.encode({"email": "a@example.com"}, "another-secret-of-sufficient-length!!", algorithm="HS256")
        client.cookies.set(settings.COOKIE_NAME, token)
        assert client.post("/api/logout").status_code == 401


class TestSignupAndLogin:
    def test_signup_sets_http_only_cookie(self, client):
        response = client.post("/api/signup", json={"idToken": "id:new@example.com", "displayName": "New"})

        assert response.status_code == 201
        body = response.json()
        assert body["message"] == "User created"
        assert body["user"]["email"] == "new@example.com"
        assert body["user"]["uid"] == "uid-new@example.com"
        assert body["user"]["role"] == "user"
        assert body["insertedId"] == body["user"]["_id"]

        set_cookie = response.headers["set-cookie"]
        assert set_cookie.startswith(f"{settings.COOKIE_NAME}=")
        assert "HttpOnly" in set_cookie
        assert "SameSite=lax" in set_cookie

    def test_signup_again_acknowledges(self, client):
        client.post("/api/signup", json={"idToken": "id:new@example.com"})
        response = client.post("/api/signup", json={"idToken": "id:new@example.com", "displayName": "Later"})

        assert response.status_code == 200
        assert response.json()["insertedId"] is None
        assert response.json()["user"]["displayName"] == "Later"

    def test_admin_emails_get_admin_role(self, client):
        response = client.post("/api/signup", json={"idToken": "id:admin@example.com"})
        assert response.json()["user"]["role"] == "admin"

    def test_identity_comes_from_the_verified_token(self, client):
        response = client.post(
            "/api/signup",
            json={"idToken": "id:mallory@example.com", "email": "admin@example.com", "uid": "admin-uid"},
        )

        assert response.json()["user"]["email"] == "mallory@example.com"
        assert response.json()["user"]["role"] == "user"
        assert client.get("/users").status_code == 403

    def test_signup_after_email_change_keeps_the_user(self, client):
        first = client.post("/api/signup", json={"idToken": "id:old@example.com:fb-1"}).json()

        response = client.post("/api/signup", json={"idToken": "id:new@example.com:fb-1"})

        assert response.status_code == 200
        assert response.json()["user"]["_id"] == first["user"]["_id"]
        assert response.json()["user"]["email"] == "new@example.com"

    def test_login_known_user(self, client):
        client.post("/users", json={"email": "known@example.com"})

        response = client.post("/api/login", json={"idToken": "id:known@example.com"})

        assert response.status_code == 200
        assert response.json()["message"] == "Login successful"
        assert response.json()["user"]["lastLoginAt"]
        assert settings.COOKIE_NAME in response.cookies

    def test_login_unknown_user(self, client):
        response = client.post("/api/login", json={"idToken": "id:stranger@example.com"})
        assert response.status_code == 401
        assert response.json() == {"message": "Invalid credentials"}

    def test_login_without_identity_token_is_rejected(self, client, login_as):
        login_as("admin@example.com")
        client.cookies.clear()

        response = client.post("/api/login", json={"email": "admin@example.com"})

        assert response.status_code == 401
        assert response.json() == {"message": "Unauthorized: Identity token missing"}
        assert settings.COOKIE_NAME not in response.cookies
        assert client.get("/users").status_code == 401

    def test_forged_identity_token_is_rejected(self, client, login_as):
        login_as("admin@example.com")
        client.cookies.clear()

        for path in ("/api/login", "/api/signup"):
            response = client.post(path, json={"idToken": "forged.admin.token"})
            assert response.status_code == 401
            assert response.json() == {"message": "Unauthorized: Invalid identity token"}

    def test_identity_provider_outage(self, client, monkeypatch):
        def unavailable(id_token, app=None, check_revoked=False):
            raise auth.CertificateFetchError("Failed to fetch public key certificates", None)

        monkeypatch.setattr(auth, "verify_id_token", unavailable)

        response = client.post("/api/login", json={"idToken": "id:known@example.com"})
        assert response.status_code == 503
        assert response.json() == {"message": "Identity provider unavailable"}

    def test_logout_clears_cookie(self, client, login_as):
        login_as("editor@example.com")

        response = client.post("/api/logout")

        assert response.status_code == 200
        assert response.json() == {"message": "Logged out"}
        assert "Max-Age=0" in response.headers["set-cookie"]
        assert client.post("/api/logout").status_code == 401

    def test_logout_requires_session(self, client):
        assert client.post("/api/logout").status_code == 401


class TestLoginThrottling:
    def test_too_many_attempts(self, client, monkeypatch):
        monkeypatch.setattr(login_limiter, "calls", 2)

        for _ in range(2):
            assert client.post("/api/login", json={"idToken": "id:x@example.com"}).status_code == 401

        response = client.post("/api/login", json={"idToken": "id:x@example.com"})
        assert response.status_code == 429
        assert response.json()["message"].startswith("Too many attempts.")
