"""Session API: signup, login and logout over an http-only cookie.

Signup and login exchange a Firebase ID token for a session cookie; the
identity always comes from the verified token, never from the request body.
"""

from fastapi import APIRouter, Depends, HTTPException, Response

from cuesheet.api.deps import get_current_claims, get_user_repository, limit_login_attempts, verify_identity
from cuesheet.core.security import clear_session_cookie, create_session_token, set_session_cookie
from cuesheet.schemas.base import MessageResponse
from cuesheet.schemas.user import LoginRequest, SessionResponse, SignupRequest
from cuesheet.services.user_repository import UserRepository

router = APIRouter(prefix="/api", tags=["auth"])


@router.post("/signup", response_model=SessionResponse, dependencies=[Depends(limit_login_attempts)])
async def signup(
    data: SignupRequest,
    response: Response,
    users: UserRepository = Depends(get_user_repository),
):
    identity = verify_identity(data.id_token)
    user, created = await users.sync_identity(
        email=identity.email,
        uid=identity.uid,
        display_name=data.display_name or identity.display_name,
        username=data.username,
    )
    set_session_cookie(response, create_session_token(user.email, user.uid))
    if created:
        response.status_code = 201
        return {"message": "User created", "inserted_id": user.id, "user": user}
    return {"message": "User already exists", "inserted_id": None, "user": user}


@router.post("/login", response_model=SessionResponse, dependencies=[Depends(limit_login_attempts)])
async def login(
    data: LoginRequest,
    response: Response,
    users: UserRepository = Depends(get_user_repository),
):
    identity = verify_identity(data.id_token)
    user = await users.find_identity(identity.email, identity.uid)
    if not user:
        raise HTTPException(status_code=401, detail="Invalid credentials")
    await users.touch_login(user)
    set_session_cookie(response, create_session_token(user.email, user.uid))
    return {"message": "Login successful", "user": user}


@router.post("/logout", response_model=MessageResponse, dependencies=[Depends(get_current_claims)])
async def logout(response: Response):
    clear_session_cookie(response)
    return {"message": "Logged out"}
