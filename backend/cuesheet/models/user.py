from datetime import datetime

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from cuesheet.models.base import Base, TimestampMixin, UTCDateTime, UUIDMixin


class User(UUIDMixin, TimestampMixin, Base):
    __tablename__ = "users"

    email: Mapped[str | None] = mapped_column(String(320), unique=True, nullable=True)
    uid: Mapped[str | None] = mapped_column(String(128), unique=True, nullable=True)  # identity-provider id
    username: Mapped[str | None] = mapped_column(String(100), nullable=True)
    display_name: Mapped[str | None] = mapped_column(String(200), nullable=True)
    role: Mapped[str] = mapped_column(String(20), default="user")  # admin | user
    last_login_at: Mapped[datetime | None] = mapped_column(UTCDateTime, nullable=True)
