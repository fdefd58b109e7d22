import uuid
from datetime import datetime
from typing import Any

from pydantic import Field

from cuesheet.schemas.base import CamelModel


class ProgramPayload(CamelModel):
    """Create/update body; every field is optional so rules can report what is missing."""

    program_type: str | None = None
    serial: str | int | None = None
    broadcast_time: str | None = None
    program_details: str | None = None
    day: str | None = None
    shift: str | None = None
    period: str | None = None
    order_index: Any = None  # coerced by program rules
    artist: str | None = None
    lyricist: str | None = None
    composer: str | None = None
    cd_cut: str | None = None
    duration: str | None = None


class SpecialProgramPayload(ProgramPayload):
    source: str | None = None


class ProgramResponse(CamelModel):
    id: uuid.UUID = Field(serialization_alias="_id")
    program_type: str
    serial: str
    broadcast_time: str
    program_details: str
    day: str
    shift: str
    period: str
    order_index: int
    artist: str
    lyricist: str
    composer: str
    cd_cut: str
    duration: str
    owner: str | None = None
    created_at: datetime

    model_config = {**CamelModel.model_config, "from_attributes": True}


class SpecialProgramResponse(ProgramResponse):
    source: str
