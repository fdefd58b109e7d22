"""Special programs API: entries outside the day/shift grid, tagged by source."""

from fastapi import APIRouter, Depends, HTTPException

from cuesheet.api.deps import get_current_claims, get_owner_scope, get_special_repository, owner_for, require_admin
from cuesheet.core.security import SessionClaims
from cuesheet.schemas.base import MessageResponse
from cuesheet.schemas.program import SpecialProgramPayload, SpecialProgramResponse
from cuesheet.services.program_repository import ProgramRepository
from cuesheet.services.program_service import build_special_document, prepare_special_update

router = APIRouter(prefix="/api/special", tags=["special"])


@router.get("", response_model=list[SpecialProgramResponse])
async def list_special_programs(
    source: str | None = None,
    owner: str | None = Depends(get_owner_scope),
    programs: ProgramRepository = Depends(get_special_repository),
):
    return await programs.list(owner=owner, source=source or None)


@router.post("", response_model=SpecialProgramResponse, status_code=201)
async def create_special_program(
    data: SpecialProgramPayload,
    claims: SessionClaims = Depends(get_current_claims),
    programs: ProgramRepository = Depends(get_special_repository),
):
    values = build_special_document(data.model_dump())
    values["owner"] = owner_for(claims)
    return await programs.insert(values)


@router.put("/{program_id}", response_model=SpecialProgramResponse)
async def update_special_program(
    program_id: str,
    data: SpecialProgramPayload,
    claims: SessionClaims = Depends(require_admin),
    programs: ProgramRepository = Depends(get_special_repository),
):
    program = await programs.get(program_id, owner=owner_for(claims))
    if not program:
        raise HTTPException(status_code=404, detail="Not found or no permission")
    changes = prepare_special_update(data.model_dump(exclude_unset=True), program.program_type)
    return await programs.update(program, changes)


@router.delete("/{program_id}", response_model=MessageResponse)
async def delete_special_program(
    program_id: str,
    claims: SessionClaims = Depends(get_current_claims),
    programs: ProgramRepository = Depends(get_special_repository),
):
    if not await programs.delete(program_id, owner=owner_for(claims)):
        raise HTTPException(status_code=404, detail="Special program not found.")
    return {"message": "Special program deleted successfully."}
