"""Marketplace services."""

from apps.market.application.marketplace.services.sale_validator import (
    SaleValidator,
    parse_category,
    parse_category_filter,
)
from apps.market.application.marketplace.services.shop_catalogue import (
    ITEM_TEMPLATES,
    REPLENISHED_STOCK,
    SHORTSWORD,
    ItemTemplate,
    RandomListingGenerator,
    StockTemplate,
)

__all__ = [
    "ITEM_TEMPLATES",
    "ItemTemplate",
    "REPLENISHED_STOCK",
    "RandomListingGenerator",
    "SHORTSWORD",
    "SaleValidator",
    "StockTemplate",
    "parse_category",
    "parse_category_filter",
]
