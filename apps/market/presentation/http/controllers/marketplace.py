"""Marketplace Controller.

판매 등록, 구매, 판매 취소 엔드포인트입니다.
"""

from uuid import UUID

from fastapi import APIRouter, Depends

from apps.market.application.marketplace.commands import (
    BuyListingInteractor,
    DelistListingInteractor,
    SellItemInteractor,
)
from apps.market.application.marketplace.dto import BuyListingRequest, SellItemRequest
from apps.market.presentation.http.auth.dependencies import get_auth_user_id
from apps.market.presentation.http.schemas.marketplace import (
    BuyListingBody,
    MarketActionResponse,
    SellItemBody,
)
from apps.market.setup.dependencies import (
    get_buy_listing_interactor,
    get_delist_listing_interactor,
    get_sell_item_interactor,
)

router = APIRouter(prefix="/marketplace", tags=["marketplace"])


@router.post(
    "/listings",
    response_model=MarketActionResponse,
    status_code=201,
    summary="인벤토리 아이템 판매 등록",
)
async def sell_item(
    body: SellItemBody,
    user_id: UUID = Depends(get_auth_user_id),
    interactor: SellItemInteractor = Depends(get_sell_item_interactor),
) -> MarketActionResponse:
    result = await interactor.execute(
        user_id,
        SellItemRequest(
            character_item_id=body.character_item_id,
            price_crowns=body.price_crowns,
            price_pennies=body.price_pennies,
            category=body.category,
            quantity=body.quantity,
        ),
    )
    return MarketActionResponse.model_validate(result)


@router.post(
    "/listings/{listing_id}/purchase",
    response_model=MarketActionResponse,
    summary="리스팅 구매",
)
async def buy_listing(
    listing_id: UUID,
    body: BuyListingBody,
    user_id: UUID = Depends(get_auth_user_id),
    interactor: BuyListingInteractor = Depends(get_buy_listing_interactor),
) -> MarketActionResponse:
    """리스팅 1개를 구매합니다.

    buyer_character_id 는 요청자의 활성 캐릭터와 일치해야 합니다.
    """
    result = await interactor.execute(
        user_id,
        BuyListingRequest(listing_id=listing_id, buyer_character_id=body.buyer_character_id),
    )
    return MarketActionResponse.model_validate(result)


@router.delete(
    "/listings/{listing_id}",
    response_model=MarketActionResponse,
    summary="판매 취소",
)
async def delist_listing(
    listing_id: UUID,
    user_id: UUID = Depends(get_auth_user_id),
    interactor: DelistListingInteractor = Depends(get_delist_listing_interactor),
) -> MarketActionResponse:
    result = await interactor.execute(user_id, listing_id)
    return MarketActionResponse.model_validate(result)
