"""Program repository: CRUD over regular or special programs, optionally scoped to an owner."""

import uuid

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from cuesheet.models.program import Program, SpecialProgram
from cuesheet.services.program_service import SONG

PLACEHOLDER_CD_CUTS = ("", "...")


def parse_id(value: str) -> uuid.UUID | None:
    try:
        return uuid.UUID(str(value))
    except ValueError:
        return None


class ProgramRepository:
    def __init__(self, db: AsyncSession, model: type[Program] | type[SpecialProgram]):
        self.db = db
        self.model = model

    def _ordered(self, query):
        return query.order_by(self.model.order_index, self.model.created_at, self.model.id)

    def _scoped(self, query, owner: str | None):
        if owner is not None:
            query = query.where(self.model.owner == owner)
        return query

    async def list_by_slot(self, day: str, shift: str, owner: str | None = None):
        query = select(self.model).where(self.model.day == day, self.model.shift == shift)
        result = await self.db.execute(self._ordered(self._scoped(query, owner)))
        return result.scalars().all()

    async def list(self, owner: str | None = None, **filters):
        query = select(self.model)
        for column, value in filters.items():
            if value is not None:
                query = query.where(getattr(self.model, column) == value)
        result = await self.db.execute(self._ordered(self._scoped(query, owner)))
        return result.scalars().all()

    async def list_songs(self):
        query = (
            select(self.model)
            .where(
                self.model.program_type == SONG,
                self.model.cd_cut.is_not(None),
                self.model.cd_cut.not_in(PLACEHOLDER_CD_CUTS),
            )
            .order_by(self.model.cd_cut, self.model.created_at, self.model.id)
        )
        result = await self.db.execute(query)
        return result.scalars().all()

    async def find_by_cd_cut(self, cd_cut: str, song_only: bool = False):
        """First entry with this cdCut, oldest first; cdCut is not unique."""
        query = select(self.model).where(self.model.cd_cut == cd_cut)
        if song_only:
            query = query.where(self.model.program_type == SONG)
        query = query.order_by(self.model.created_at, self.model.id).limit(1)
        result = await self.db.execute(query)
        return result.scalars().first()

    async def get(self, program_id: str, owner: str | None = None):
        oid = parse_id(program_id)
        if oid is None:
            return None
        query = self._scoped(select(self.model).where(self.model.id == oid), owner)
        result = await self.db.execute(query)
        return result.scalars().first()

    async def insert(self, values: dict):
        program = self.model(**values)
        self.db.add(program)
        await self.db.commit()
        return program

    async def update(self, program, changes: dict):
        for key, value in changes.items():
            setattr(program, key, value)
        await self.db.commit()
        return program

    async def delete(self, program_id: str, owner: str | None = None, song_only: bool = False) -> bool:
        oid = parse_id(program_id)
        if oid is None:
            return False
        stmt = delete(self.model).where(self.model.id == oid)
        if owner is not None:
            stmt = stmt.where(self.model.owner == owner)
        if song_only:
            stmt = stmt.where(self.model.program_type == SONG)
        result = await self.db.execute(stmt)
        await self.db.commit()
        return result.rowcount > 0
