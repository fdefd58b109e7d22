"""Tests for user sync, admin checks and admin-only user management."""

import uuid


class TestCreateOrAcknowledgeUser:
    def test_creates_then_acknowledges(self, client):
        created = client.post("/users", json={"email": "new@example.com", "displayName": "New"})
        assert created.status_code == 201
        assert created.json()["message"] == "User created"
        assert uuid.UUID(created.json()["insertedId"])

        existing = client.post("/users", json={"email": "new@example.com", "displayName": "Renamed"})
        assert existing.status_code == 200
        assert existing.json() == {"message": "User already exists", "insertedId": None}

    def test_known_uid_with_new_email_is_existing(self, admin_client):
        assert admin_client.post("/users", json={"email": "a@example.com", "uid": "fb-1"}).status_code == 201

        response = admin_client.post("/users", json={"email": "new@example.com", "uid": "fb-1"})

        assert response.status_code == 200
        assert response.json() == {"message": "User already exists", "insertedId": None}
        users = admin_client.get("/users").json()
        assert [(u["email"], u["uid"]) for u in users][1:] == [("new@example.com", "fb-1")]

    def test_uid_is_the_key_without_email(self, client):
        assert client.post("/users", json={"uid": "firebase-1"}).status_code == 201
        assert client.post("/users", json={"uid": "firebase-1"}).json()["insertedId"] is None

    def test_needs_email_or_uid(self, client):
        response = client.post("/users", json={"displayName": "Nobody"})
        assert response.status_code == 400
        assert response.json() == {"message": "Missing required fields: email"}

    def test_session_sync_uses_token_identity(self, client, login_as):
        login_as("editor@example.com")
        response = client.post("/api/user", json={"email": "spoofed@example.com", "displayName": "Editor"})

        assert response.json() == {"message": "User already exists", "insertedId": None}
        assert client.get("/users/admin/spoofed@example.com").json() == {"isAdmin": False}


class TestAdminCheck:
    def test_reports_role(self, client, login_as):
        login_as("admin@example.com")
        login_as("editor@example.com")

        assert client.get("/users/admin/admin@example.com").json() == {"isAdmin": True}
        assert client.get("/users/admin/editor@example.com").json() == {"isAdmin": False}
        assert client.get("/users/admin/nobody@example.com").json() == {"isAdmin": False}


class TestUserManagement:
    def test_list_requires_admin(self, client, login_as):
        assert client.get("/users").status_code == 401

        login_as("editor@example.com")
        response = client.get("/users")
        assert response.status_code == 403
        assert response.json() == {"message": "Forbidden: Admins only"}

    def test_admin_lists_users(self, admin_client):
        admin_client.post("/users", json={"email": "someone@example.com"})

        emails = [u["email"] for u in admin_client.get("/users").json()]
        assert emails == ["admin@example.com", "someone@example.com"]

    def test_role_change_takes_effect_on_next_request(self, client, login_as):
        editor = login_as("editor@example.com")
        assert client.get("/users").status_code == 403

        login_as("admin@example.com")
        response = client.patch(f"/users/{editor['user']['_id']}", json={"role": "admin"})
        assert response.status_code == 200
        assert response.json()["role"] == "admin"

        login_as("editor@example.com")
        assert client.get("/users").status_code == 200

    def test_delete_user(self, admin_client):
        user_id = admin_client.post("/users", json={"email": "gone@example.com"}).json()["insertedId"]

        response = admin_client.delete(f"/users/{user_id}")
        assert response.status_code == 200
        assert admin_client.delete(f"/users/{user_id}").status_code == 404
        assert admin_client.patch(f"/users/{user_id}", json={"role": "admin"}).status_code == 404
