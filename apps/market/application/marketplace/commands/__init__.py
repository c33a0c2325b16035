"""Marketplace commands."""

from apps.market.application.marketplace.commands.buy_listing import BuyListingInteractor
from apps.market.application.marketplace.commands.delist_listing import (
    DelistListingInteractor,
)
from apps.market.application.marketplace.commands.sell_item import SellItemInteractor
from apps.market.application.marketplace.commands.shop_stock import (
    GenerateListingsInteractor,
    ReplenishStockInteractor,
    StockShopItemInteractor,
)

__all__ = [
    "BuyListingInteractor",
    "DelistListingInteractor",
    "GenerateListingsInteractor",
    "ReplenishStockInteractor",
    "SellItemInteractor",
    "StockShopItemInteractor",
]
