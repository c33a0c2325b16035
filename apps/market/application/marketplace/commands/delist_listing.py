"""Delist listing command."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import TYPE_CHECKING
from uuid import UUID

from apps.market.application.marketplace.dto import MarketActionResult
from apps.market.application.marketplace.exceptions import (
    ListingNotFoundError,
    NotListingSellerError,
)
from apps.market.domain.entities import CharacterItem

if TYPE_CHECKING:
    from apps.market.application.character.ports import CharacterGateway, InventoryGateway
    from apps.market.application.common.ports import TransactionManager
    from apps.market.application.marketplace.ports import ListingGateway

logger = logging.getLogger(__name__)

DELISTED = "Item removed from marketplace and returned to inventory."


class DelistListingInteractor:
    """리스팅 회수 유스케이스.

    남은 수량은 판매자의 활성 캐릭터 인벤토리로 돌아갑니다.
    """

    def __init__(
        self,
        character_gateway: "CharacterGateway",
        inventory_gateway: "InventoryGateway",
        listing_gateway: "ListingGateway",
        transaction_manager: "TransactionManager",
    ) -> None:
        self._characters = character_gateway
        self._inventory = inventory_gateway
        self._listings = listing_gateway
        self._tx = transaction_manager

    async def execute(self, user_id: UUID, listing_id: UUID) -> MarketActionResult:
        listing = await self._listings.get(listing_id, for_update=True)
        if listing is None:
            raise ListingNotFoundError()

        character = await self._characters.get_active_by_user(user_id, for_update=True)
        character_id = character.id if character is not None else None
        if not listing.is_sold_by(user_id, character_id):
            raise NotListingSellerError()

        if character is not None and listing.quantity > 0:
            stack = await self._inventory.find_stack(
                character.id, listing.name, listing.crafter_user_id
            )
            if stack is not None:
                stack.quantity += listing.quantity
            else:
                await self._inventory.add_item(
                    CharacterItem(
                        character_id=character.id,
                        item_name=listing.name,
                        quantity=listing.quantity,
                        crafter_user_id=listing.crafter_user_id,
                        acquired_at=datetime.now(timezone.utc),
                    )
                )

        await self._listings.delete(listing)
        await self._tx.commit()

        logger.info(
            "Listing delisted",
            extra={"listing_id": str(listing_id), "user_id": str(user_id)},
        )
        return MarketActionResult(message=DELISTED, listing_id=listing_id)
