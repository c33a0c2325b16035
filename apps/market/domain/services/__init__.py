"""Domain Services."""

from apps.market.domain.services.purchase_calculator import PurchaseCalculator, PurchaseQuote

__all__ = ["PurchaseCalculator", "PurchaseQuote"]
