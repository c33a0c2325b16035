"""Create character command."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import TYPE_CHECKING
from uuid import UUID

from apps.market.application.character.dto import (
    CharacterSummary,
    CreateCharacterRequest,
    LifecycleResult,
)
from apps.market.application.character.exceptions import CharacterAlreadyExistsError
from apps.market.domain.entities import Character, CharacterPermit
from apps.market.domain.value_objects import Money

if TYPE_CHECKING:
    from apps.market.application.character.ports import CharacterGateway
    from apps.market.application.character.services import CharacterPolicy
    from apps.market.application.common.ports import TransactionManager

logger = logging.getLogger(__name__)


class CreateCharacterInteractor:
    """캐릭터 생성 유스케이스."""

    def __init__(
        self,
        character_gateway: "CharacterGateway",
        transaction_manager: "TransactionManager",
        policy: "CharacterPolicy",
        *,
        starting_balance: Money | None = None,
    ) -> None:
        self._characters = character_gateway
        self._tx = transaction_manager
        self._policy = policy
        self._starting_balance = starting_balance or Money.zero()

    async def execute(self, user_id: UUID, request: CreateCharacterRequest) -> LifecycleResult:
        """활성 캐릭터를 생성하고 길드별 시작 퍼밋을 부여합니다.

        Args:
            user_id: 사용자 ID
            request: 생성 요청

        Returns:
            LifecycleResult

        Raises:
            CharacterValidationError: 입력 오류
            CharacterAlreadyExistsError: 이미 활성 캐릭터 보유
        """
        validated = self._policy.validate_creation(request)

        if await self._characters.get_active_by_user(user_id, for_update=True) is not None:
            raise CharacterAlreadyExistsError()

        now = datetime.now(timezone.utc)
        character = Character(
            user_id=user_id,
            name=validated.name,
            race=validated.race.value,
            guild=validated.guild.value,
            branch=validated.branch.value,
            crowns=self._starting_balance.crowns,
            pennies=self._starting_balance.pennies,
            created_at=now,
        )
        await self._characters.add(character)

        for permit_type in self._policy.starting_permits(character.guild):
            await self._characters.add_permit(
                CharacterPermit(
                    character_id=character.id,
                    permit_type=permit_type,
                    created_at=now,
                )
            )

        await self._tx.commit()

        logger.info(
            "Character created",
            extra={
                "user_id": str(user_id),
                "character_id": str(character.id),
                "guild": character.guild,
            },
        )
        return LifecycleResult(
            message=f"Character '{character.name}' created successfully!",
            character=CharacterSummary.from_entity(character),
        )
