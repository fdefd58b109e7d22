"""
Test configuration for the cue sheet API.

Every test runs the app lifespan against a fresh SQLite file.
"""

import os
import tempfile
from pathlib import Path

_TMP_DIR = Path(tempfile.mkdtemp(prefix="cuesheet-tests-"))
DB_FILE = _TMP_DIR / "test.db"

os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{DB_FILE}"
os.environ["JWT_SECRET"] = "test-only-cuesheet-secret-with-enough-length"
os.environ["ADMIN_EMAILS"] = '["admin@example.com"]'
os.environ["COOKIE_SECURE"] = "false"
os.environ["LOGIN_RATE_LIMIT_CALLS"] = "100"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from firebase_admin import auth  # noqa: E402

from cuesheet.core import identity  # noqa: E402
from cuesheet.core.rate_limit import login_limiter  # noqa: E402
from cuesheet.main import app  # noqa: E402

ADMIN_EMAIL = "admin@example.com"


def fake_verify_id_token(id_token, app=None, check_revoked=False):
    """Accept tokens of the form `id:<email>` or `id:<email>:<uid>`."""
    scheme, _, rest = id_token.partition(":")
    if scheme != "id" or not rest:
        raise auth.InvalidIdTokenError("Could not verify ID token")
    email, _, uid = rest.partition(":")
    return {"uid": uid or f"uid-{email}", "email": email}


@pytest.fixture(autouse=True)
def firebase_tokens(monkeypatch):
    monkeypatch.setattr(identity, "get_firebase_app", lambda: None)
    monkeypatch.setattr(identity.auth, "verify_id_token", fake_verify_id_token)


@pytest.fixture
def client():
    if DB_FILE.exists():
        DB_FILE.unlink()
    login_limiter.reset()
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def login_as(client):
    """Sign up (or back in) as the given email; the session cookie stays on the client."""

    def _login(email: str, **extra):
        response = client.post("/api/signup", json={"idToken": f"id:{email}", **extra})
        assert response.status_code in (200, 201), response.text
        return response.json()

    return _login


@pytest.fixture
def admin_client(client, login_as):
    login_as(ADMIN_EMAIL)
    return client
