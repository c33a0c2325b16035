"""SQLAlchemy implementation of account gateway."""

from __future__ import annotations

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from apps.market.domain.entities import Account
from apps.market.infrastructure.persistence_postgres.adapters.errors import (
    translate_db_errors,
)


class SqlaAccountGateway:
    """계정 저장소 SQLAlchemy 구현."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    @translate_db_errors
    async def get_by_email(self, email: str) -> Account | None:
        result = await self._session.execute(select(Account).where(Account.email == email))
        return result.scalar_one_or_none()

    @translate_db_errors
    async def add(self, account: Account) -> None:
        self._session.add(account)
        await self._session.flush()

    @translate_db_errors
    async def get_display_names(self, user_ids: list[UUID]) -> dict[UUID, str]:
        if not user_ids:
            return {}
        result = await self._session.execute(select(Account).where(Account.id.in_(user_ids)))
        return {account.id: account.display_name for account in result.scalars().all()}
