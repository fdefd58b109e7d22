"""Songs API: song-type entries listed and resolved by cdCut."""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from cuesheet.api.deps import get_program_repository, get_special_repository, owner_for, require_admin
from cuesheet.core.database import get_db
from cuesheet.core.security import SessionClaims
from cuesheet.models.song import SongMetadata
from cuesheet.schemas.base import MessageResponse
from cuesheet.schemas.program import ProgramResponse, SpecialProgramResponse
from cuesheet.schemas.song import SongMetadataResponse
from cuesheet.services.program_repository import ProgramRepository
from cuesheet.services.song_service import list_catalog, lookup_song

router = APIRouter(tags=["songs"])


@router.get("/songs", response_model=list[ProgramResponse])
async def list_songs(programs: ProgramRepository = Depends(get_program_repository)):
    return await programs.list_songs()


@router.get("/api/specialSongs", response_model=list[SpecialProgramResponse])
async def list_special_songs(programs: ProgramRepository = Depends(get_special_repository)):
    return await programs.list_songs()


@router.get("/api/songs/catalog", response_model=list[SongMetadataResponse])
async def list_song_catalog(db: AsyncSession = Depends(get_db)):
    return await list_catalog(db)


@router.get("/api/songs/byCdCut/{cd_cut}")
async def get_song_by_cd_cut(cd_cut: str, db: AsyncSession = Depends(get_db)):
    song = await lookup_song(db, cd_cut)
    if not song:
        raise HTTPException(status_code=404, detail="Song not found")
    if isinstance(song, SongMetadata):
        return SongMetadataResponse.model_validate(song)
    return ProgramResponse.model_validate(song)


@router.get("/api/specialSongs/byCdCut/{cd_cut}", response_model=SpecialProgramResponse)
async def get_special_song_by_cd_cut(
    cd_cut: str,
    programs: ProgramRepository = Depends(get_special_repository),
):
    song = await programs.find_by_cd_cut(cd_cut)
    if not song:
        raise HTTPException(status_code=404, detail="Song not found")
    return song


@router.delete("/songs/{song_id}", response_model=MessageResponse)
async def delete_song(
    song_id: str,
    claims: SessionClaims = Depends(require_admin),
    programs: ProgramRepository = Depends(get_program_repository),
):
    if not await programs.delete(song_id, owner=owner_for(claims), song_only=True):
        raise HTTPException(status_code=404, detail="Song not found.")
    return {"message": "Song deleted successfully."}


@router.delete("/specialSongs/{song_id}", response_model=MessageResponse)
async def delete_special_song(
    song_id: str,
    claims: SessionClaims = Depends(require_admin),
    programs: ProgramRepository = Depends(get_special_repository),
):
    if not await programs.delete(song_id, owner=owner_for(claims), song_only=True):
        raise HTTPException(status_code=404, detail="Special song not found.")
    return {"message": "Special song deleted successfully."}
