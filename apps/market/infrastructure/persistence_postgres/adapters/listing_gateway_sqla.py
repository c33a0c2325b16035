"""SQLAlchemy implementation of listing gateway."""

from __future__ import annotations

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from apps.market.application.marketplace.ports import ListingGateway
from apps.market.domain.entities import MarketplaceListing
from apps.market.domain.value_objects import Money
from apps.market.infrastructure.persistence_postgres.adapters.errors import (
    translate_db_errors,
)


class SqlaListingGateway(ListingGateway):
    """마켓 리스팅 저장소 SQLAlchemy 구현."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    @translate_db_errors
    async def list_listings(
        self,
        *,
        category: str | None = None,
        limit: int | None = None,
    ) -> list[MarketplaceListing]:
        stmt = select(MarketplaceListing).order_by(MarketplaceListing.listed_at.desc())
        if category is not None:
            stmt = stmt.where(MarketplaceListing.category == category)
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await self._session.execute(stmt)
        return list(result.scalars().all())

    @translate_db_errors
    async def get(
        self, listing_id: UUID, *, for_update: bool = False
    ) -> MarketplaceListing | None:
        stmt = select(MarketplaceListing).where(MarketplaceListing.id == listing_id)
        if for_update:
            stmt = stmt.with_for_update().execution_options(populate_existing=True)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    @translate_db_errors
    async def find_npc_stock(
        self,
        name: str,
        *,
        price: Money | None = None,
        category: str | None = None,
    ) -> MarketplaceListing | None:
        stmt = select(MarketplaceListing).where(
            MarketplaceListing.name == name,
            MarketplaceListing.seller_user_id.is_(None),
        )
        if price is not None:
            stmt = stmt.where(
                MarketplaceListing.crowns == price.crowns,
                MarketplaceListing.pennies == price.pennies,
            )
        if category is not None:
            stmt = stmt.where(MarketplaceListing.category == category)
        result = await self._session.execute(
            stmt.order_by(MarketplaceListing.listed_at.asc()).limit(1).with_for_update()
        )
        return result.scalars().first()

    @translate_db_errors
    async def add(self, listing: MarketplaceListing) -> None:
        self._session.add(listing)
        await self._session.flush()

    @translate_db_errors
    async def add_many(self, listings: list[MarketplaceListing]) -> None:
        self._session.add_all(listings)
        await self._session.flush()

    @translate_db_errors
    async def delete(self, listing: MarketplaceListing) -> None:
        await self._session.delete(listing)
        await self._session.flush()
