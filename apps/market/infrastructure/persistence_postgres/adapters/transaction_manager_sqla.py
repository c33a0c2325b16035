"""SQLAlchemy implementation of transaction manager."""

from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from apps.market.application.common.exceptions import GatewayError

logger = logging.getLogger(__name__)


class SqlaTransactionManager:
    """트랜잭션 관리자 SQLAlchemy 구현."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def commit(self) -> None:
        """트랜잭션을 커밋합니다. 실패 시 롤백 후 GatewayError."""
        try:
            await self._session.commit()
        except SQLAlchemyError as e:
            logger.error("Commit failed", extra={"error": str(e)})
            await self._session.rollback()
            raise GatewayError(f"Backend request failed ({type(e).__name__})") from e

    async def rollback(self) -> None:
        """트랜잭션을 롤백합니다."""
        await self._session.rollback()
