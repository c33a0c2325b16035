"""Check blacksmith access query."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from apps.market.application.character.dto import BlacksmithAccess, CharacterSummary
from apps.market.application.common.exceptions import (
    ActiveCharacterNotFoundError,
    PermitRequiredError,
)
from apps.market.domain.enums import PermitType

if TYPE_CHECKING:
    from apps.market.application.character.ports import CharacterGateway


class CheckBlacksmithAccessQuery:
    """대장간 접근 확인 (blacksmith 퍼밋 필요)."""

    def __init__(self, character_gateway: "CharacterGateway") -> None:
        self._characters = character_gateway

    async def execute(self, user_id: UUID) -> BlacksmithAccess:
        """
        Raises:
            ActiveCharacterNotFoundError: 활성 캐릭터 없음
            PermitRequiredError: blacksmith 퍼밋 미보유
        """
        character = await self._characters.get_active_by_user(user_id)
        if character is None:
            raise ActiveCharacterNotFoundError()

        permits = await self._characters.list_permits(character.id)
        if PermitType.BLACKSMITH.value not in permits:
            raise PermitRequiredError(PermitType.BLACKSMITH.value)

        return BlacksmithAccess(
            message=f"Welcome to the Blacksmith Shop, {character.name}!",
            character=CharacterSummary.from_entity(character),
        )
