"""SQLAlchemy implementation of character gateway."""

from __future__ import annotations

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from apps.market.application.character.ports import CharacterGateway
from apps.market.domain.entities import (
    Character,
    CharacterPermit,
    DeadCharacter,
    RetiredCharacter,
)
from apps.market.infrastructure.persistence_postgres.adapters.errors import (
    translate_db_errors,
)


def _active():
    return (Character.retired_at.is_(None), Character.died_at.is_(None))


class SqlaCharacterGateway(CharacterGateway):
    """캐릭터 저장소 SQLAlchemy 구현."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    @translate_db_errors
    async def get_active_by_user(
        self, user_id: UUID, *, for_update: bool = False
    ) -> Character | None:
        stmt = select(Character).where(Character.user_id == user_id, *_active())
        if for_update:
            stmt = stmt.with_for_update().execution_options(populate_existing=True)
        result = await self._session.execute(stmt)
        return result.scalars().first()

    @translate_db_errors
    async def get_by_id(
        self, character_id: UUID, *, for_update: bool = False
    ) -> Character | None:
        stmt = select(Character).where(Character.id == character_id)
        if for_update:
            stmt = stmt.with_for_update().execution_options(populate_existing=True)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    @translate_db_errors
    async def list_active(self) -> list[Character]:
        result = await self._session.execute(select(Character).where(*_active()))
        return list(result.scalars().all())

    @translate_db_errors
    async def list_branch_members(
        self, branch: str, *, exclude_user_id: UUID | None = None
    ) -> list[Character]:
        stmt = select(Character).where(Character.branch == branch, *_active())
        if exclude_user_id is not None:
            stmt = stmt.where(Character.user_id != exclude_user_id)
        result = await self._session.execute(stmt.order_by(Character.name.asc()))
        return list(result.scalars().all())

    @translate_db_errors
    async def list_permits(self, character_id: UUID) -> list[str]:
        result = await self._session.execute(
            select(CharacterPermit.permit_type).where(
                CharacterPermit.character_id == character_id
            )
        )
        return list(result.scalars().all())

    @translate_db_errors
    async def add(self, character: Character) -> None:
        self._session.add(character)
        await self._session.flush()

    @translate_db_errors
    async def add_permit(self, permit: CharacterPermit) -> None:
        self._session.add(permit)
        await self._session.flush()

    @translate_db_errors
    async def archive_retired(self, character: Character, archive: RetiredCharacter) -> None:
        self._session.add(archive)
        await self._session.delete(character)
        await self._session.flush()

    @translate_db_errors
    async def archive_dead(self, character: Character, archive: DeadCharacter) -> None:
        self._session.add(archive)
        await self._session.delete(character)
        await self._session.flush()

    @translate_db_errors
    async def list_dead(self, *, limit: int | None = None) -> list[DeadCharacter]:
        stmt = select(DeadCharacter).order_by(DeadCharacter.died_at.desc())
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await self._session.execute(stmt)
        return list(result.scalars().all())
