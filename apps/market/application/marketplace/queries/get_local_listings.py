"""Get local (branch) listings query."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from apps.market.application.common.exceptions import ActiveCharacterNotFoundError
from apps.market.application.marketplace.dto import (
    UNKNOWN_CRAFTER_NAME,
    UNKNOWN_SELLER_NAME,
    ListingView,
    LocalMarketView,
)
from apps.market.application.marketplace.services import parse_category_filter

if TYPE_CHECKING:
    from apps.market.application.character.ports import CharacterGateway
    from apps.market.application.marketplace.ports import ListingGateway
    from apps.market.domain.entities import MarketplaceListing


class GetLocalListingsQuery:
    """지부 마켓 조회 쿼리.

    판매자 지부는 seller_character_id 가 있으면 그 캐릭터의 지부,
    없으면 판매 사용자의 활성 캐릭터 지부입니다. 지부를 알 수 없는
    리스팅(NPC 재고 포함)은 제외됩니다.
    """

    def __init__(
        self,
        character_gateway: "CharacterGateway",
        listing_gateway: "ListingGateway",
    ) -> None:
        self._characters = character_gateway
        self._listings = listing_gateway

    async def execute(self, user_id: UUID, category: str | None = None) -> LocalMarketView:
        character = await self._characters.get_active_by_user(user_id)
        if character is None:
            raise ActiveCharacterNotFoundError()
        if not character.branch:
            return LocalMarketView(branch=None, listings=[])

        active = await self._characters.list_active()
        by_character = {c.id: c for c in active}
        by_user = {c.user_id: c for c in active}

        listings = await self._listings.list_listings(category=parse_category_filter(category))

        result: list[ListingView] = []
        for listing in listings:
            seller = self._resolve_seller(listing, by_character, by_user)
            if seller is None or seller.branch != character.branch:
                continue

            crafter = by_user.get(listing.crafter_user_id) if listing.crafter_user_id else None
            result.append(
                ListingView.from_entity(
                    listing,
                    seller_character_name=seller.name or UNKNOWN_SELLER_NAME,
                    crafter_character_name=crafter.name if crafter else UNKNOWN_CRAFTER_NAME,
                )
            )

        return LocalMarketView(branch=character.branch, listings=result)

    @staticmethod
    def _resolve_seller(listing: "MarketplaceListing", by_character: dict, by_user: dict):
        if listing.seller_character_id is not None:
            return by_character.get(listing.seller_character_id)
        if listing.seller_user_id is not None:
            return by_user.get(listing.seller_user_id)
        return None
