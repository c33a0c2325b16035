"""NPC shop stock commands.

상점 재고 등록, 템플릿 재고 보충, 임의 리스팅 생성(개발용)을 담당합니다.
NPC 재고는 seller_user_id 가 없는 리스팅입니다.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import TYPE_CHECKING
from uuid import UUID

from apps.market.application.marketplace.dto import (
    GeneratedListings,
    ListingView,
    MarketActionResult,
    StockShopItemRequest,
)
from apps.market.application.marketplace.exceptions import InvalidListingCountError
from apps.market.application.marketplace.services import REPLENISHED_STOCK
from apps.market.domain.entities import MarketplaceListing
from apps.market.domain.value_objects import Money

if TYPE_CHECKING:
    from apps.market.application.character.ports import CharacterGateway
    from apps.market.application.common.ports import TransactionManager
    from apps.market.application.marketplace.ports import ListingGateway
    from apps.market.application.marketplace.services import (
        RandomListingGenerator,
        SaleValidator,
        StockTemplate,
    )

logger = logging.getLogger(__name__)

DEFAULT_GENERATED_LISTINGS = 5


class StockShopItemInteractor:
    """NPC 상점 재고 등록 유스케이스.

    같은 이름의 NPC 리스팅이 있으면 수량을 더하고 가격/카테고리를 갱신합니다.
    """

    def __init__(
        self,
        listing_gateway: "ListingGateway",
        transaction_manager: "TransactionManager",
        validator: "SaleValidator",
    ) -> None:
        self._listings = listing_gateway
        self._tx = transaction_manager
        self._validator = validator

    async def execute(self, request: StockShopItemRequest) -> MarketActionResult:
        """
        Raises:
            ShopItemValidationError: 누락 또는 잘못된 입력
        """
        name, price, category, quantity, permit = self._validator.validate_shop_item(
            request.name,
            request.crowns,
            request.pennies,
            request.category,
            request.quantity,
            request.required_permit,
        )

        listing = await self._listings.find_npc_stock(name)
        if listing is not None:
            listing.quantity += quantity
            listing.crowns = price.crowns
            listing.pennies = price.pennies
            listing.category = category.value
            listing.required_permit = permit
            if request.description:
                listing.description = request.description
        else:
            listing = MarketplaceListing(
                name=name,
                description=request.description,
                crowns=price.crowns,
                pennies=price.pennies,
                category=category.value,
                quantity=quantity,
                required_permit=permit,
                listed_at=datetime.now(timezone.utc),
            )
            await self._listings.add(listing)

        await self._tx.commit()

        logger.info(
            "Shop item stocked",
            extra={"listing_id": str(listing.id), "name": name, "quantity": quantity},
        )
        return MarketActionResult(
            message=f"{quantity} {name}(s) successfully added to marketplace.",
            listing_id=listing.id,
        )


class ReplenishStockInteractor:
    """템플릿 NPC 재고 보충 유스케이스.

    - 리스팅 없음 → 수량 1로 생성
    - 수량 0 → 1로 보충
    - 재고 있음 → 변경 없음
    """

    def __init__(
        self,
        listing_gateway: "ListingGateway",
        transaction_manager: "TransactionManager",
        templates: "tuple[StockTemplate, ...]" = REPLENISHED_STOCK,
    ) -> None:
        self._listings = listing_gateway
        self._tx = transaction_manager
        self._templates = templates

    async def execute(self) -> MarketActionResult:
        for template in self._templates:
            listing = await self._listings.find_npc_stock(
                template.name,
                price=Money(template.crowns, template.pennies),
                category=template.category.value,
            )
            if listing is None:
                await self._listings.add(
                    MarketplaceListing(
                        name=template.name,
                        description=template.description,
                        crowns=template.crowns,
                        pennies=template.pennies,
                        category=template.category.value,
                        quantity=1,
                        required_permit=template.required_permit,
                        listed_at=datetime.now(timezone.utc),
                    )
                )
                logger.info("Stock listing created", extra={"name": template.name})
            elif listing.quantity <= 0:
                listing.quantity = 1
                logger.info("Stock listing replenished", extra={"name": template.name})

        await self._tx.commit()

        names = ", ".join(t.name for t in self._templates)
        return MarketActionResult(message=f"{names} replenishment check complete.")


class GenerateListingsInteractor:
    """임의 리스팅 생성 유스케이스 (개발용)."""

    def __init__(
        self,
        character_gateway: "CharacterGateway",
        listing_gateway: "ListingGateway",
        transaction_manager: "TransactionManager",
        generator: "RandomListingGenerator",
        *,
        max_count: int = 50,
    ) -> None:
        self._characters = character_gateway
        self._listings = listing_gateway
        self._tx = transaction_manager
        self._generator = generator
        self._max_count = max_count

    async def execute(
        self, user_id: UUID, count: int = DEFAULT_GENERATED_LISTINGS
    ) -> GeneratedListings:
        if count <= 0 or count > self._max_count:
            raise InvalidListingCountError(self._max_count)

        character = await self._characters.get_active_by_user(user_id)
        listings = self._generator.generate(
            count,
            seller_user_id=user_id,
            seller_character_id=character.id if character is not None else None,
        )
        await self._listings.add_many(listings)
        await self._tx.commit()

        logger.info("Random listings generated", extra={"count": count})
        return GeneratedListings(
            message=f"{count} random items added to marketplace.",
            listings=[ListingView.from_entity(listing) for listing in listings],
        )
