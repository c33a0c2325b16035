"""Buy listing command.

구매 이전(transfer) 절차: 구매자 정산, 판매자 입금, 재고 차감, 인벤토리 병합을
하나의 트랜잭션에서 수행합니다.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import TYPE_CHECKING
from uuid import UUID

from apps.market.application.common.exceptions import PermitRequiredError
from apps.market.application.marketplace.dto import BuyListingRequest, MarketActionResult
from apps.market.application.marketplace.exceptions import (
    BuyerMismatchError,
    ListingNotFoundError,
    ListingSoldOutError,
    OwnListingPurchaseError,
)
from apps.market.domain.entities import CharacterItem

if TYPE_CHECKING:
    from apps.market.application.character.ports import CharacterGateway, InventoryGateway
    from apps.market.application.common.ports import TransactionManager
    from apps.market.application.marketplace.ports import ListingGateway
    from apps.market.domain.entities import Character, MarketplaceListing
    from apps.market.domain.services import PurchaseCalculator

logger = logging.getLogger(__name__)

PURCHASE_SUCCEEDED = "Item successfully purchased and added to inventory."


class BuyListingInteractor:
    """리스팅 구매 유스케이스."""

    def __init__(
        self,
        character_gateway: "CharacterGateway",
        inventory_gateway: "InventoryGateway",
        listing_gateway: "ListingGateway",
        transaction_manager: "TransactionManager",
        calculator: "PurchaseCalculator",
    ) -> None:
        self._characters = character_gateway
        self._inventory = inventory_gateway
        self._listings = listing_gateway
        self._tx = transaction_manager
        self._calculator = calculator

    async def execute(self, user_id: UUID, request: BuyListingRequest) -> MarketActionResult:
        """리스팅 1개를 구매합니다.

        Args:
            user_id: 요청 사용자 ID
            request: 구매 요청

        Returns:
            MarketActionResult (구매 후 잔액 포함)

        Raises:
            BuyerMismatchError: 구매 캐릭터가 요청자의 활성 캐릭터가 아님
            ListingNotFoundError: 리스팅 없음
            ListingSoldOutError: 재고 없음
            OwnListingPurchaseError: 본인 리스팅
            PermitRequiredError: 필요한 퍼밋 미보유
            InsufficientFundsError: 잔액 부족
        """
        buyer = await self._characters.get_active_by_user(user_id)
        if buyer is None or buyer.id != request.buyer_character_id:
            raise BuyerMismatchError()

        listing = await self._listings.get(request.listing_id, for_update=True)
        if listing is None:
            raise ListingNotFoundError()
        if listing.sold_out:
            raise ListingSoldOutError()
        if listing.is_sold_by(user_id, buyer.id):
            raise OwnListingPurchaseError()

        if listing.required_permit:
            permits = await self._characters.list_permits(buyer.id)
            if listing.required_permit not in permits:
                raise PermitRequiredError(listing.required_permit)

        seller_id = await self._resolve_seller_id(listing)
        locked = await self._lock_characters({buyer.id, seller_id} - {None})
        buyer = locked.get(buyer.id)
        if buyer is None or not buyer.is_active:
            raise BuyerMismatchError()

        price = listing.price
        remaining = self._calculator.settle(buyer.balance, price)
        buyer.set_balance(remaining)

        seller = locked.get(seller_id) if seller_id is not None else None
        if seller is not None and seller.is_active and seller.id != buyer.id:
            seller.set_balance(self._calculator.credit(seller.balance, price))

        listing.quantity -= 1
        if listing.quantity <= 0 and not listing.is_npc_stock:
            await self._listings.delete(listing)

        await self._add_to_inventory(buyer, listing)
        await self._tx.commit()

        logger.info(
            "Listing purchased",
            extra={
                "listing_id": str(listing.id),
                "buyer_character_id": str(buyer.id),
                "price_pennies": price.total_pennies,
            },
        )
        return MarketActionResult(
            message=PURCHASE_SUCCEEDED,
            listing_id=listing.id,
            crowns=remaining.crowns,
            pennies=remaining.pennies,
        )

    async def _resolve_seller_id(self, listing: "MarketplaceListing") -> UUID | None:
        """입금 대상 캐릭터 ID.

        판매 캐릭터가 기록된 리스팅은 그 캐릭터에게만 입금합니다 (아카이브되었으면
        입금 없음). 판매 캐릭터 없이 등록된 리스팅만 판매 사용자의 활성 캐릭터로
        입금합니다.
        """
        if listing.seller_character_id is not None:
            return listing.seller_character_id
        if listing.seller_user_id is None:
            return None
        seller = await self._characters.get_active_by_user(listing.seller_user_id)
        return seller.id if seller is not None else None

    async def _lock_characters(self, character_ids: "set[UUID]") -> "dict[UUID, Character]":
        # 캐릭터 행 잠금은 항상 ID 오름차순
        locked: "dict[UUID, Character]" = {}
        for character_id in sorted(character_ids):
            character = await self._characters.get_by_id(character_id, for_update=True)
            if character is not None:
                locked[character_id] = character
        return locked

    async def _add_to_inventory(self, buyer: "Character", listing: "MarketplaceListing") -> None:
        stack = await self._inventory.find_stack(buyer.id, listing.name, listing.crafter_user_id)
        if stack is not None:
            stack.quantity += 1
            return
        await self._inventory.add_item(
            CharacterItem(
                character_id=buyer.id,
                item_name=listing.name,
                quantity=1,
                crafter_user_id=listing.crafter_user_id,
                acquired_at=datetime.now(timezone.utc),
            )
        )
