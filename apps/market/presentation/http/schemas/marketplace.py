"""Marketplace HTTP Schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class ListingResponse(BaseModel):
    """마켓 리스팅."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    description: str | None = None
    crowns: int
    pennies: int
    category: str
    quantity: int
    seller_user_id: UUID | None = None
    seller_character_id: UUID | None = None
    crafter_user_id: UUID | None = None
    required_permit: str | None = None
    listed_at: datetime | None = None
    is_npc_stock: bool = Field(False, description="NPC 상점 재고 여부")
    seller_character_name: str | None = None
    crafter_character_name: str | None = None


class LocalMarketResponse(BaseModel):
    """지부 마켓 페이지."""

    model_config = ConfigDict(from_attributes=True)

    branch: str | None = None
    listings: list[ListingResponse]


class SellItemBody(BaseModel):
    """판매 등록 요청.

    가격 범위 검증은 사용자 메시지를 위해 애플리케이션 계층에서 수행합니다.
    """

    character_item_id: UUID = Field(..., description="인벤토리 아이템 ID")
    price_crowns: int = Field(0, description="가격 (crowns)")
    price_pennies: int = Field(0, description="가격 (pennies)")
    category: str | None = Field(None, description="카테고리")
    quantity: int = Field(
        1,
        validation_alias=AliasChoices("quantity", "quantity_to_sell"),
        description="판매 수량",
    )


class BuyListingBody(BaseModel):
    """구매 요청."""

    buyer_character_id: UUID = Field(..., description="구매 캐릭터 ID")


class MarketActionResponse(BaseModel):
    """마켓 작업 결과."""

    model_config = ConfigDict(from_attributes=True)

    message: str
    listing_id: UUID | None = None
    crowns: int | None = None
    pennies: int | None = None


class StockShopItemBody(BaseModel):
    """NPC 상점 재고 등록 요청."""

    name: str | None = None
    crowns: int | None = None
    pennies: int | None = None
    category: str | None = None
    quantity: int | None = None
    description: str | None = None
    required_permit: str | None = None


class GenerateListingsBody(BaseModel):
    """임의 리스팅 생성 요청."""

    count: int = Field(5, description="생성 개수")


class GeneratedListingsResponse(BaseModel):
    """임의 리스팅 생성 결과."""

    model_config = ConfigDict(from_attributes=True)

    message: str
    listings: list[ListingResponse]
