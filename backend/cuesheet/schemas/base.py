from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Wire models use the camelCase field names stored by existing clients."""

    model_config = {"alias_generator": to_camel, "populate_by_name": True}


class MessageResponse(CamelModel):
    message: str
