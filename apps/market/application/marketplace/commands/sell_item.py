"""Sell item command."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import TYPE_CHECKING
from uuid import UUID

from apps.market.application.common.exceptions import ActiveCharacterNotFoundError
from apps.market.application.marketplace.dto import MarketActionResult, SellItemRequest
from apps.market.application.marketplace.exceptions import InventoryItemNotFoundError
from apps.market.domain.entities import MarketplaceListing

if TYPE_CHECKING:
    from apps.market.application.character.ports import CharacterGateway, InventoryGateway
    from apps.market.application.common.ports import TransactionManager
    from apps.market.application.marketplace.ports import ListingGateway
    from apps.market.application.marketplace.services import SaleValidator

logger = logging.getLogger(__name__)

SALE_LISTED = "Item(s) successfully listed on marketplace!"


class SellItemInteractor:
    """인벤토리 아이템 판매 등록 유스케이스."""

    def __init__(
        self,
        character_gateway: "CharacterGateway",
        inventory_gateway: "InventoryGateway",
        listing_gateway: "ListingGateway",
        transaction_manager: "TransactionManager",
        validator: "SaleValidator",
    ) -> None:
        self._characters = character_gateway
        self._inventory = inventory_gateway
        self._listings = listing_gateway
        self._tx = transaction_manager
        self._validator = validator

    async def execute(self, user_id: UUID, request: SellItemRequest) -> MarketActionResult:
        """아이템을 마켓에 등록합니다.

        가격과 카테고리는 저장소 호출 전에, 수량은 보유 수량 조회 후 검증합니다.

        Raises:
            SaleValidationError: 가격/카테고리/수량 오류
            ActiveCharacterNotFoundError: 활성 캐릭터 없음
            InventoryItemNotFoundError: 아이템 없음 또는 다른 캐릭터 소유
        """
        price = self._validator.validate_price(request.price_crowns, request.price_pennies)
        category = self._validator.validate_category(request.category)

        character = await self._characters.get_active_by_user(user_id, for_update=True)
        if character is None:
            raise ActiveCharacterNotFoundError()

        item = await self._inventory.get_item(request.character_item_id, for_update=True)
        if item is None or item.character_id != character.id:
            raise InventoryItemNotFoundError()

        quantity = self._validator.validate_quantity(request.quantity, item.quantity)

        item.quantity -= quantity
        if item.quantity == 0:
            await self._inventory.delete_item(item)

        listing = MarketplaceListing(
            name=item.item_name,
            crowns=price.crowns,
            pennies=price.pennies,
            category=category.value,
            quantity=quantity,
            seller_user_id=user_id,
            seller_character_id=character.id,
            crafter_user_id=item.crafter_user_id,
            listed_at=datetime.now(timezone.utc),
        )
        await self._listings.add(listing)
        await self._tx.commit()

        logger.info(
            "Item listed",
            extra={
                "listing_id": str(listing.id),
                "character_id": str(character.id),
                "quantity": quantity,
            },
        )
        return MarketActionResult(message=SALE_LISTED, listing_id=listing.id)
