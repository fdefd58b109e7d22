from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from cuesheet.models.base import Base, TimestampMixin, UUIDMixin


class SongMetadata(UUIDMixin, TimestampMixin, Base):
    __tablename__ = "songs_metadata"

    cd_cut: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    artist: Mapped[str] = mapped_column(String(200), default="")
    lyricist: Mapped[str] = mapped_column(String(200), default="")
    composer: Mapped[str] = mapped_column(String(200), default="")
    duration: Mapped[str] = mapped_column(String(20), default="")
    program_type: Mapped[str] = mapped_column(String(50), default="Song")
