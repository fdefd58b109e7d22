"""Song lookup: resolves a cdCut against the configured song source."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from cuesheet.core.config import settings
from cuesheet.models.program import Program
from cuesheet.models.song import SongMetadata
from cuesheet.services.program_repository import ProgramRepository

CATALOG_SOURCE = "catalog"


async def list_catalog(db: AsyncSession):
    result = await db.execute(select(SongMetadata).order_by(SongMetadata.cd_cut, SongMetadata.id))
    return result.scalars().all()


async def find_catalog_song(db: AsyncSession, cd_cut: str) -> SongMetadata | None:
    result = await db.execute(
        select(SongMetadata)
        .where(SongMetadata.cd_cut == cd_cut)
        .order_by(SongMetadata.created_at, SongMetadata.id)
        .limit(1)
    )
    return result.scalars().first()


async def lookup_song(db: AsyncSession, cd_cut: str) -> Program | SongMetadata | None:
    if settings.SONG_SOURCE == CATALOG_SOURCE:
        return await find_catalog_song(db, cd_cut)
    return await ProgramRepository(db, Program).find_by_cd_cut(cd_cut, song_only=True)
