"""User repository: identity sync, role changes and removal."""

import uuid

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from cuesheet.core.config import settings
from cuesheet.models.base import utcnow
from cuesheet.models.user import User
from cuesheet.services.program_repository import parse_id

ADMIN_ROLE = "admin"
DEFAULT_ROLE = "user"


class UserRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def list(self):
        result = await self.db.execute(select(User).order_by(User.created_at, User.id))
        return result.scalars().all()

    async def get(self, user_id: str) -> User | None:
        oid = parse_id(user_id)
        if oid is None:
            return None
        return await self.db.get(User, oid)

    async def get_by_email(self, email: str) -> User | None:
        result = await self.db.execute(select(User).where(User.email == email))
        return result.scalars().first()

    async def get_by_uid(self, uid: str) -> User | None:
        result = await self.db.execute(select(User).where(User.uid == uid))
        return result.scalars().first()

    async def find_identity(self, email: str | None, uid: str | None) -> User | None:
        user = await self.get_by_email(email) if email else None
        if user is None and uid:
            user = await self.get_by_uid(uid)
        return user

    async def is_admin(self, email: str) -> bool:
        user = await self.get_by_email(email)
        return user is not None and user.role == ADMIN_ROLE

    async def sync_identity(
        self,
        email: str | None,
        uid: str | None = None,
        display_name: str | None = None,
        username: str | None = None,
    ) -> tuple[User, bool]:
        """Create the user, or refresh the volatile fields of an existing one.

        Email is the lookup key; uid matches a user whose email has changed
        at the identity provider. Returns the user and whether it was created.
        """
        if not email and not uid:
            raise ValueError("email or uid is required")
        user = await self.find_identity(email, uid)
        now = utcnow()
        if user:
            if email and user.email != email:
                user.email = email
            if display_name is not None:
                user.display_name = display_name
            user.last_login_at = now
            await self.db.commit()
            return user, False

        user = User(
            id=uuid.uuid4(),
            email=email,
            uid=uid,
            username=username,
            display_name=display_name,
            role=ADMIN_ROLE if email and email in settings.ADMIN_EMAILS else DEFAULT_ROLE,
            last_login_at=now,
        )
        self.db.add(user)
        await self.db.commit()
        return user, True

    async def touch_login(self, user: User) -> User:
        user.last_login_at = utcnow()
        await self.db.commit()
        return user

    async def set_role(self, user_id: str, role: str) -> User | None:
        user = await self.get(user_id)
        if user is None:
            return None
        user.role = role
        await self.db.commit()
        return user

    async def delete(self, user_id: str) -> bool:
        oid = parse_id(user_id)
        if oid is None:
            return False
        result = await self.db.execute(delete(User).where(User.id == oid))
        await self.db.commit()
        return result.rowcount > 0
