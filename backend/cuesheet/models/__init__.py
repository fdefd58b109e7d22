from cuesheet.models.base import Base
from cuesheet.models.program import Program, SpecialProgram
from cuesheet.models.song import SongMetadata
from cuesheet.models.user import User

__all__ = [
    "Base",
    "Program",
    "SpecialProgram",
    "SongMetadata",
    "User",
]
