from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from cuesheet.models.base import Base, TimestampMixin, UUIDMixin


class ProgramFieldsMixin:
    program_type: Mapped[str] = mapped_column(String(50), default="")  # Song | General | free text
    day: Mapped[str] = mapped_column(String(20), default="", index=True)
    shift: Mapped[str] = mapped_column(String(50), default="", index=True)
    order_index: Mapped[int] = mapped_column(Integer, default=0)
    serial: Mapped[str] = mapped_column(String(50), default="")
    broadcast_time: Mapped[str] = mapped_column(String(50), default="")
    program_details: Mapped[str] = mapped_column(Text, default="")
    period: Mapped[str] = mapped_column(String(50), default="")

    # Song-only
    artist: Mapped[str] = mapped_column(String(200), default="")
    lyricist: Mapped[str] = mapped_column(String(200), default="")
    composer: Mapped[str] = mapped_column(String(200), default="")
    cd_cut: Mapped[str] = mapped_column(String(50), default="", index=True)
    duration: Mapped[str] = mapped_column(String(20), default="")

    owner: Mapped[str | None] = mapped_column(String(320), nullable=True, index=True)  # user email when owner-scoped


class Program(UUIDMixin, TimestampMixin, ProgramFieldsMixin, Base):
    __tablename__ = "cue_programs"


class SpecialProgram(UUIDMixin, TimestampMixin, ProgramFieldsMixin, Base):
    __tablename__ = "special_programs"

    source: Mapped[str] = mapped_column(String(100), default="unknown", index=True)
