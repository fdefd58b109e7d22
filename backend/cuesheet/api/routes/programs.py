"""Programs API: day/shift cue sheet entries."""

from fastapi import APIRouter, Depends, HTTPException

from cuesheet.api.deps import get_current_claims, get_owner_scope, get_program_repository, owner_for, require_admin
from cuesheet.core.security import SessionClaims
from cuesheet.schemas.base import MessageResponse
from cuesheet.schemas.program import ProgramPayload, ProgramResponse
from cuesheet.services.program_repository import ProgramRepository
from cuesheet.services.program_service import build_program_document, prepare_program_update

router = APIRouter(prefix="/api/programs", tags=["programs"])

NOT_FOUND = "Not found or no permission"


@router.get("", response_model=list[ProgramResponse])
async def list_programs(
    day: str | None = None,
    shift: str | None = None,
    owner: str | None = Depends(get_owner_scope),
    programs: ProgramRepository = Depends(get_program_repository),
):
    if not day or not shift:
        raise HTTPException(status_code=400, detail="Day and Shift are required")
    return await programs.list_by_slot(day, shift, owner=owner)


@router.post("", response_model=ProgramResponse, status_code=201)
async def create_program(
    data: ProgramPayload,
    claims: SessionClaims = Depends(get_current_claims),
    programs: ProgramRepository = Depends(get_program_repository),
):
    values = build_program_document(data.model_dump())
    values["owner"] = owner_for(claims)
    return await programs.insert(values)


@router.put("/{program_id}", response_model=ProgramResponse)
async def update_program(
    program_id: str,
    data: ProgramPayload,
    claims: SessionClaims = Depends(require_admin),
    programs: ProgramRepository = Depends(get_program_repository),
):
    program = await programs.get(program_id, owner=owner_for(claims))
    if not program:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    changes = prepare_program_update(data.model_dump(exclude_unset=True), program.program_type)
    return await programs.update(program, changes)


@router.delete("/{program_id}", response_model=MessageResponse)
async def delete_program(
    program_id: str,
    claims: SessionClaims = Depends(get_current_claims),
    programs: ProgramRepository = Depends(get_program_repository),
):
    if not await programs.delete(program_id, owner=owner_for(claims)):
        raise HTTPException(status_code=404, detail="Program not found.")
    return {"message": "Program deleted successfully."}
