"""Get inventory query."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from apps.market.application.character.dto import (
    CharacterSummary,
    InventoryItemView,
    InventoryView,
)
from apps.market.application.common.exceptions import ActiveCharacterNotFoundError

if TYPE_CHECKING:
    from apps.market.application.character.ports import CharacterGateway, InventoryGateway
    from apps.market.application.character.services import CharacterPolicy


class GetInventoryQuery:
    """캐릭터 인벤토리 조회 쿼리.

    캐릭터, 보유 아이템(최근 획득순), 퍼밋, 신청 가능한 퍼밋을 반환합니다.
    """

    def __init__(
        self,
        character_gateway: "CharacterGateway",
        inventory_gateway: "InventoryGateway",
        policy: "CharacterPolicy",
    ) -> None:
        self._characters = character_gateway
        self._inventory = inventory_gateway
        self._policy = policy

    async def execute(self, user_id: UUID) -> InventoryView:
        character = await self._characters.get_active_by_user(user_id)
        if character is None:
            raise ActiveCharacterNotFoundError()

        items = await self._inventory.list_items(character.id)
        permits = await self._characters.list_permits(character.id)

        return InventoryView(
            character=CharacterSummary.from_entity(character),
            items=[InventoryItemView.from_entity(item) for item in items],
            permits=sorted(permits),
            grantable_permits=self._policy.grantable_permits(character.guild, permits),
        )
