"""Retire / declare death commands.

활성 캐릭터를 아카이브 테이블로 옮기고 삭제합니다.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import TYPE_CHECKING
from uuid import UUID

from apps.market.application.character.dto import CharacterSummary, LifecycleResult
from apps.market.application.common.exceptions import ActiveCharacterNotFoundError
from apps.market.domain.entities import DeadCharacter, RetiredCharacter

if TYPE_CHECKING:
    from apps.market.application.character.ports import CharacterGateway
    from apps.market.application.common.ports import TransactionManager

logger = logging.getLogger(__name__)


class RetireCharacterInteractor:
    """캐릭터 은퇴 유스케이스."""

    def __init__(
        self,
        character_gateway: "CharacterGateway",
        transaction_manager: "TransactionManager",
    ) -> None:
        self._characters = character_gateway
        self._tx = transaction_manager

    async def execute(self, user_id: UUID) -> LifecycleResult:
        character = await self._characters.get_active_by_user(user_id, for_update=True)
        if character is None:
            raise ActiveCharacterNotFoundError()

        summary = CharacterSummary.from_entity(character)
        archive = RetiredCharacter.from_character(character, datetime.now(timezone.utc))
        await self._characters.archive_retired(character, archive)
        await self._tx.commit()

        logger.info(
            "Character retired",
            extra={"user_id": str(user_id), "character_id": str(summary.id)},
        )
        return LifecycleResult(
            message=f"Character '{summary.name}' has been retired.",
            character=summary,
        )


class DeclareDeathInteractor:
    """캐릭터 사망 처리 유스케이스."""

    def __init__(
        self,
        character_gateway: "CharacterGateway",
        transaction_manager: "TransactionManager",
    ) -> None:
        self._characters = character_gateway
        self._tx = transaction_manager

    async def execute(self, user_id: UUID) -> LifecycleResult:
        character = await self._characters.get_active_by_user(user_id, for_update=True)
        if character is None:
            raise ActiveCharacterNotFoundError()

        summary = CharacterSummary.from_entity(character)
        archive = DeadCharacter.from_character(character, datetime.now(timezone.utc))
        await self._characters.archive_dead(character, archive)
        await self._tx.commit()

        logger.info(
            "Character died",
            extra={"user_id": str(user_id), "character_id": str(summary.id)},
        )
        return LifecycleResult(
            message=f"Character '{summary.name}' has passed away.",
            character=summary,
        )
