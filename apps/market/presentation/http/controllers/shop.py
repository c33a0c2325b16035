"""Internal Shop Controller.

NPC 상점 재고를 관리하는 내부 엔드포인트입니다.
X-Internal-Token 헤더로 보호됩니다.
"""

from fastapi import APIRouter, Depends

from apps.market.application.marketplace.commands import (
    ReplenishStockInteractor,
    StockShopItemInteractor,
)
from apps.market.application.marketplace.dto import StockShopItemRequest
from apps.market.presentation.http.auth.dependencies import require_internal_token
from apps.market.presentation.http.schemas.marketplace import (
    MarketActionResponse,
    StockShopItemBody,
)
from apps.market.setup.dependencies import (
    get_replenish_stock_interactor,
    get_stock_shop_item_interactor,
)

router = APIRouter(
    prefix="/internal/shop",
    tags=["internal"],
    dependencies=[Depends(require_internal_token)],
)


@router.post("/items", response_model=MarketActionResponse, status_code=201)
async def stock_shop_item(
    body: StockShopItemBody,
    interactor: StockShopItemInteractor = Depends(get_stock_shop_item_interactor),
) -> MarketActionResponse:
    """NPC 재고를 등록합니다 (같은 이름이면 수량 합산)."""
    result = await interactor.execute(StockShopItemRequest(**body.model_dump()))
    return MarketActionResponse.model_validate(result)


@router.post("/replenish", response_model=MarketActionResponse)
async def replenish_stock(
    interactor: ReplenishStockInteractor = Depends(get_replenish_stock_interactor),
) -> MarketActionResponse:
    """품절된 템플릿 재고를 1개로 보충합니다."""
    result = await interactor.execute()
    return MarketActionResponse.model_validate(result)
