"""Session tokens carried in an http-only cookie."""

from datetime import datetime, timedelta, timezone

import jwt
from fastapi import Response
from pydantic import BaseModel

from cuesheet.core.config import settings


class SessionClaims(BaseModel):
    email: str | None = None
    uid: str | None = None


class InvalidSessionToken(Exception):
    pass


def create_session_token(email: str | None, uid: str | None = None) -> str:
    now = datetime.now(timezone.utc)
    payload = {
        "email": email,
        "uid": uid,
        "iat": now,
        "exp": now + timedelta(hours=settings.JWT_EXPIRES_HOURS),
    }
    return jwt.encode(payload, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def decode_session_token(token: str) -> SessionClaims:
    """Verify signature and expiry, returning the identity claims.

    Raises InvalidSessionToken for any signature, expiry or format failure.
    """
    try:
        payload = jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM])
    except jwt.InvalidTokenError as exc:
        raise InvalidSessionToken(str(exc)) from exc
    return SessionClaims(email=payload.get("email"), uid=payload.get("uid"))


def _cookie_attributes() -> dict:
    return {
        "httponly": True,
        "secure": settings.COOKIE_SECURE,
        "samesite": settings.COOKIE_SAMESITE,
        "path": "/",
    }


def set_session_cookie(response: Response, token: str) -> None:
    response.set_cookie(
        settings.COOKIE_NAME,
        token,
        max_age=settings.JWT_EXPIRES_HOURS * 3600,
        **_cookie_attributes(),
    )


def clear_session_cookie(response: Response) -> None:
    response.delete_cookie(settings.COOKIE_NAME, **_cookie_attributes())
