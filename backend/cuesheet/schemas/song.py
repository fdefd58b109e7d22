import uuid

from pydantic import Field

from cuesheet.schemas.base import CamelModel


class SongMetadataResponse(CamelModel):
    id: uuid.UUID = Field(serialization_alias="_id")
    cd_cut: str
    title: str
    artist: str
    lyricist: str
    composer: str
    duration: str
    program_type: str

    model_config = {**CamelModel.model_config, "from_attributes": True}
