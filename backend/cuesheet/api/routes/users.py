"""Users API: identity sync, admin check and admin-only user management."""

from fastapi import APIRouter, Depends, HTTPException, Response

from cuesheet.api.deps import get_current_claims, get_user_repository, require_admin
from cuesheet.core.security import SessionClaims
from cuesheet.schemas.base import MessageResponse
from cuesheet.schemas.user import AdminCheckResponse, RoleUpdate, UserResponse, UserSync, UserSyncResponse
from cuesheet.services.user_repository import UserRepository

router = APIRouter(tags=["users"])


async def sync_user(users: UserRepository, data: UserSync, response: Response) -> dict:
    if not data.email and not data.uid:
        raise HTTPException(status_code=400, detail="Missing required fields: email")
    user, created = await users.sync_identity(
        email=data.email,
        uid=data.uid,
        display_name=data.display_name,
        username=data.username,
    )
    if created:
        response.status_code = 201
        return {"message": "User created", "inserted_id": user.id}
    return {"message": "User already exists", "inserted_id": None}


@router.post("/users", response_model=UserSyncResponse)
async def create_user(
    data: UserSync,
    response: Response,
    users: UserRepository = Depends(get_user_repository),
):
    return await sync_user(users, data, response)


@router.post("/api/user", response_model=UserSyncResponse)
async def sync_session_user(
    data: UserSync,
    response: Response,
    claims: SessionClaims = Depends(get_current_claims),
    users: UserRepository = Depends(get_user_repository),
):
    identity = data.model_copy(update={"email": claims.email, "uid": claims.uid or data.uid})
    return await sync_user(users, identity, response)


@router.get("/users/admin/{email}", response_model=AdminCheckResponse)
async def check_admin(email: str, users: UserRepository = Depends(get_user_repository)):
    return {"is_admin": await users.is_admin(email)}


@router.get("/users", response_model=list[UserResponse], dependencies=[Depends(require_admin)])
async def list_users(users: UserRepository = Depends(get_user_repository)):
    return await users.list()


@router.patch("/users/{user_id}", response_model=UserResponse, dependencies=[Depends(require_admin)])
async def update_user_role(
    user_id: str,
    data: RoleUpdate,
    users: UserRepository = Depends(get_user_repository),
):
    user = await users.set_role(user_id, data.role)
    if not user:
        raise HTTPException(status_code=404, detail="User not found.")
    return user


@router.delete("/users/{user_id}", response_model=MessageResponse, dependencies=[Depends(require_admin)])
async def delete_user(user_id: str, users: UserRepository = Depends(get_user_repository)):
    if not await users.delete(user_id):
        raise HTTPException(status_code=404, detail="User not found.")
    return {"message": "User deleted successfully."}
