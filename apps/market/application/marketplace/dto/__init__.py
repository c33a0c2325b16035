"""Marketplace DTOs."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from apps.market.domain.entities import MarketplaceListing

UNKNOWN_SELLER_NAME = "Unknown Adventurer"
UNKNOWN_CRAFTER_NAME = "Unknown Crafter"


@dataclass(frozen=True, slots=True)
class ListingView:
    """리스팅 조회 결과.

    지역 마켓 조회에서만 seller/crafter 캐릭터 이름이 채워집니다.
    """

    id: UUID
    name: str
    description: str | None
    crowns: int
    pennies: int
    category: str
    quantity: int
    seller_user_id: UUID | None
    seller_character_id: UUID | None
    crafter_user_id: UUID | None
    required_permit: str | None
    listed_at: datetime | None
    seller_character_name: str | None = None
    crafter_character_name: str | None = None

    @property
    def is_npc_stock(self) -> bool:
        return self.seller_user_id is None

    @classmethod
    def from_entity(
        cls,
        listing: MarketplaceListing,
        *,
        seller_character_name: str | None = None,
        crafter_character_name: str | None = None,
    ) -> ListingView:
        price = listing.price
        return cls(
            id=listing.id,
            name=listing.name,
            description=listing.description,
            crowns=price.crowns,
            pennies=price.pennies,
            category=listing.category,
            quantity=listing.quantity,
            seller_user_id=listing.seller_user_id,
            seller_character_id=listing.seller_character_id,
            crafter_user_id=listing.crafter_user_id,
            required_permit=listing.required_permit,
            listed_at=listing.listed_at,
            seller_character_name=seller_character_name,
            crafter_character_name=crafter_character_name,
        )


@dataclass(frozen=True, slots=True)
class LocalMarketView:
    """지역 마켓 화면 데이터."""

    branch: str | None
    listings: list[ListingView]


@dataclass(frozen=True, slots=True)
class SellItemRequest:
    """판매 등록 요청.

    Attributes:
        character_item_id: 판매할 인벤토리 아이템 ID
        price_crowns: 가격 (crowns)
        price_pennies: 가격 (pennies, 0~11)
        category: 카테고리
        quantity: 판매 수량
    """

    character_item_id: UUID
    price_crowns: int
    price_pennies: int
    category: str | None
    quantity: int = 1


@dataclass(frozen=True, slots=True)
class BuyListingRequest:
    """구매 요청."""

    listing_id: UUID
    buyer_character_id: UUID


@dataclass(frozen=True, slots=True)
class StockShopItemRequest:
    """NPC 상점 재고 등록 요청."""

    name: str | None
    crowns: int | None
    pennies: int | None
    category: str | None
    quantity: int | None
    description: str | None = None
    required_permit: str | None = None


@dataclass(frozen=True, slots=True)
class MarketActionResult:
    """마켓 작업 결과.

    Attributes:
        message: 사용자 메시지
        listing_id: 대상 리스팅 ID
        crowns: 작업 후 잔액 (구매 시)
        pennies: 작업 후 잔액 (구매 시)
    """

    message: str
    listing_id: UUID | None = None
    crowns: int | None = None
    pennies: int | None = None


@dataclass(frozen=True, slots=True)
class GeneratedListings:
    """임의 리스팅 생성 결과."""

    message: str
    listings: list[ListingView]


__all__ = [
    "BuyListingRequest",
    "GeneratedListings",
    "ListingView",
    "LocalMarketView",
    "MarketActionResult",
    "SellItemRequest",
    "StockShopItemRequest",
    "UNKNOWN_CRAFTER_NAME",
    "UNKNOWN_SELLER_NAME",
]
