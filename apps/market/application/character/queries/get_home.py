"""Get home query."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from apps.market.application.character.dto import CharacterSummary, HomeView
from apps.market.application.common.exceptions import ActiveCharacterNotFoundError
from apps.market.application.marketplace.dto import ListingView

if TYPE_CHECKING:
    from apps.market.application.character.ports import CharacterGateway
    from apps.market.application.marketplace.ports import ListingGateway


class GetHomeQuery:
    """홈 화면 쿼리 (캐릭터 + 최신 리스팅)."""

    def __init__(
        self,
        character_gateway: "CharacterGateway",
        listing_gateway: "ListingGateway",
        *,
        latest_limit: int = 3,
    ) -> None:
        self._characters = character_gateway
        self._listings = listing_gateway
        self._latest_limit = latest_limit

    async def execute(self, user_id: UUID) -> HomeView:
        character = await self._characters.get_active_by_user(user_id)
        if character is None:
            raise ActiveCharacterNotFoundError()

        latest = await self._listings.list_listings(limit=self._latest_limit)
        return HomeView(
            character=CharacterSummary.from_entity(character),
            latest_listings=[ListingView.from_entity(listing) for listing in latest],
        )
