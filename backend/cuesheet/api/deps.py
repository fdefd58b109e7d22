"""Request dependencies for sessions, the admin gate and repositories."""

import logging

from fastapi import Depends, HTTPException, Request
from sqlalchemy.ext.asyncio import AsyncSession

from cuesheet.core.config import settings
from cuesheet.core.database import get_db
from cuesheet.core.identity import (
    IdentityProviderUnavailable,
    InvalidIdentityToken,
    VerifiedIdentity,
    verify_identity_token,
)
from cuesheet.core.rate_limit import login_limiter
from cuesheet.core.security import InvalidSessionToken, SessionClaims, decode_session_token
from cuesheet.models.program import Program, SpecialProgram
from cuesheet.services.program_repository import ProgramRepository
from cuesheet.services.user_repository import UserRepository

logger = logging.getLogger(__name__)


def get_program_repository(db: AsyncSession = Depends(get_db)) -> ProgramRepository:
    return ProgramRepository(db, Program)


def get_special_repository(db: AsyncSession = Depends(get_db)) -> ProgramRepository:
    return ProgramRepository(db, SpecialProgram)


def get_user_repository(db: AsyncSession = Depends(get_db)) -> UserRepository:
    return UserRepository(db)


def get_current_claims(request: Request) -> SessionClaims:
    token = request.cookies.get(settings.COOKIE_NAME)
    if not token:
        raise HTTPException(status_code=401, detail="Unauthorized: Token missing")
    try:
        return decode_session_token(token)
    except InvalidSessionToken as exc:
        logger.info("Rejected session token: %s", exc)
        raise HTTPException(status_code=401, detail="Unauthorized: Invalid token")


def verify_identity(id_token: str | None) -> VerifiedIdentity:
    if not id_token:
        raise HTTPException(status_code=401, detail="Unauthorized: Identity token missing")
    try:
        return verify_identity_token(id_token)
    except InvalidIdentityToken as exc:
        logger.info("Rejected identity token: %s", exc)
        raise HTTPException(status_code=401, detail="Unauthorized: Invalid identity token")
    except IdentityProviderUnavailable as exc:
        logger.error("Identity provider unavailable: %s", exc)
        raise HTTPException(status_code=503, detail="Identity provider unavailable")


async def require_admin(
    claims: SessionClaims = Depends(get_current_claims),
    users: UserRepository = Depends(get_user_repository),
) -> SessionClaims:
    if not claims.email:
        logger.info("Forbidden: no user info in session for admin check")
        raise HTTPException(status_code=403, detail="Forbidden: No user info")
    if not await users.is_admin(claims.email):
        logger.info("Forbidden: user %s is not an admin", claims.email)
        raise HTTPException(status_code=403, detail="Forbidden: Admins only")
    return claims


def owner_for(claims: SessionClaims) -> str | None:
    """Owner filter for writes; None when programs are shared."""
    if not settings.OWNER_SCOPED:
        return None
    if not claims.email:
        raise HTTPException(status_code=403, detail="Forbidden: No user info")
    return claims.email


def get_owner_scope(request: Request) -> str | None:
    """Owner filter for reads; only owner-scoped deployments require a session."""
    if not settings.OWNER_SCOPED:
        return None
    return owner_for(get_current_claims(request))


async def limit_login_attempts(request: Request) -> None:
    key = request.client.host if request.client else "anonymous"
    retry_in = login_limiter.hit(key)
    if retry_in is not None:
        logger.warning("Throttled sign-in attempts from %s", key)
        raise HTTPException(status_code=429, detail=f"Too many attempts. Retry in {retry_in}s.")
