"""Firebase ID token verification for signup and login."""

import json
import logging

import firebase_admin
from firebase_admin import auth, credentials
from pydantic import BaseModel

from cuesheet.core.config import settings

logger = logging.getLogger(__name__)


class VerifiedIdentity(BaseModel):
    uid: str
    email: str | None = None
    display_name: str | None = None


class InvalidIdentityToken(Exception):
    pass


class IdentityProviderUnavailable(Exception):
    pass


def get_firebase_app() -> firebase_admin.App:
    try:
        return firebase_admin.get_app()
    except ValueError:
        logger.info("Initializing Firebase app")

    if settings.FIREBASE_CREDENTIALS_JSON:
        credential = credentials.Certificate(json.loads(settings.FIREBASE_CREDENTIALS_JSON))
    else:
        credential = credentials.ApplicationDefault()
    options = {"projectId": settings.FIREBASE_PROJECT_ID} if settings.FIREBASE_PROJECT_ID else None
    return firebase_admin.initialize_app(credential, options)


def verify_identity_token(id_token: str) -> VerifiedIdentity:
    """Verify a Firebase ID token and return the identity it asserts.

    Raises InvalidIdentityToken for malformed, expired, revoked or disabled-user tokens.
    """
    try:
        decoded = auth.verify_id_token(
            id_token,
            app=get_firebase_app(),
            check_revoked=settings.FIREBASE_CHECK_REVOKED,
        )
    except auth.CertificateFetchError as exc:
        raise IdentityProviderUnavailable(str(exc)) from exc
    except (ValueError, auth.InvalidIdTokenError, auth.UserDisabledError) as exc:
        raise InvalidIdentityToken(str(exc)) from exc
    return VerifiedIdentity(uid=decoded["uid"], email=decoded.get("email"), display_name=decoded.get("name"))
