import uuid
from datetime import datetime

from pydantic import Field

from cuesheet.schemas.base import CamelModel


class UserSync(CamelModel):
    email: str | None = None
    uid: str | None = None
    username: str | None = None
    display_name: str | None = None


class LoginRequest(CamelModel):
    id_token: str | None = None


class SignupRequest(LoginRequest):
    username: str | None = None
    display_name: str | None = None


class RoleUpdate(CamelModel):
    role: str = Field(min_length=1, max_length=20)


class UserResponse(CamelModel):
    id: uuid.UUID = Field(serialization_alias="_id")
    email: str | None = None
    uid: str | None = None
    username: str | None = None
    display_name: str | None = None
    role: str
    created_at: datetime
    last_login_at: datetime | None = None

    model_config = {**CamelModel.model_config, "from_attributes": True}


class UserSyncResponse(CamelModel):
    message: str
    inserted_id: uuid.UUID | None = None


class SessionResponse(UserSyncResponse):
    user: UserResponse


class AdminCheckResponse(CamelModel):
    is_admin: bool
