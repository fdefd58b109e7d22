"""Database initialization and seed data."""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from cuesheet.core.config import settings
from cuesheet.core.database import engine
from cuesheet.models import Base
from cuesheet.models.song import SongMetadata

logger = logging.getLogger(__name__)


async def create_tables():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def seed_song_catalog(db: AsyncSession):
    existing = await db.execute(select(SongMetadata))
    if existing.scalars().first():
        return

    songs = [
        SongMetadata(cd_cut="123-A", title="আমার সোনার বাংলা", artist="রবীন্দ্রনাথ ঠাকুর", lyricist="রবীন্দ্রনাথ ঠাকুর", composer="রবীন্দ্রনাথ ঠাকুর", duration="03:00"),
        SongMetadata(cd_cut="456-B", title="ধন ধান্য পুষ্প ভরা", artist="দ্বিজেন্দ্রলাল রায়", lyricist="দ্বিজেন্দ্রলাল রায়", composer="দ্বিজেন্দ্রলাল রায়", duration="02:30"),
        SongMetadata(cd_cut="789-C", title="মোরা একটি ফুলকে বাঁচাবো বলে", artist="গোবিন্দ হালদার", lyricist="গোবিন্দ হালদার", composer="আপেল মাহমুদ", duration="04:15"),
    ]
    db.add_all(songs)
    logger.info("Seeded %d songs into the song catalog", len(songs))


async def seed_all(db: AsyncSession):
    if settings.SEED_SONG_CATALOG:
        await seed_song_catalog(db)
    await db.commit()
