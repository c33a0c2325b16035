"""SQLAlchemy implementation of inventory gateway."""

from __future__ import annotations

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from apps.market.application.character.ports import InventoryGateway
from apps.market.domain.entities import CharacterItem
from apps.market.infrastructure.persistence_postgres.adapters.errors import (
    translate_db_errors,
)


class SqlaInventoryGateway(InventoryGateway):
    """인벤토리 저장소 SQLAlchemy 구현."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    @translate_db_errors
    async def list_items(self, character_id: UUID) -> list[CharacterItem]:
        result = await self._session.execute(
            select(CharacterItem)
            .where(CharacterItem.character_id == character_id)
            .order_by(CharacterItem.acquired_at.desc())
        )
        return list(result.scalars().all())

    @translate_db_errors
    async def get_item(
        self, item_id: UUID, *, for_update: bool = False
    ) -> CharacterItem | None:
        stmt = select(CharacterItem).where(CharacterItem.id == item_id)
        if for_update:
            stmt = stmt.with_for_update().execution_options(populate_existing=True)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    @translate_db_errors
    async def find_stack(
        self,
        character_id: UUID,
        item_name: str,
        crafter_user_id: UUID | None,
    ) -> CharacterItem | None:
        crafter_clause = (
            CharacterItem.crafter_user_id.is_(None)
            if crafter_user_id is None
            else CharacterItem.crafter_user_id == crafter_user_id
        )
        result = await self._session.execute(
            select(CharacterItem)
            .where(
                CharacterItem.character_id == character_id,
                CharacterItem.item_name == item_name,
                crafter_clause,
            )
            .order_by(CharacterItem.acquired_at.asc())
            .limit(1)
            .with_for_update()
        )
        return result.scalars().first()

    @translate_db_errors
    async def add_item(self, item: CharacterItem) -> None:
        self._session.add(item)
        await self._session.flush()

    @translate_db_errors
    async def delete_item(self, item: CharacterItem) -> None:
        await self._session.delete(item)
        await self._session.flush()
