"""Marketplace application exceptions."""

from __future__ import annotations

from apps.market.application.common.exceptions.base import (
    AuthenticationError,
    ConflictError,
    ForbiddenError,
    NotFoundError,
    ValidationError,
)


class SaleValidationError(ValidationError):
    """판매 입력 오류."""

    code = "INVALID_SALE"


class ShopItemValidationError(ValidationError):
    """상점 재고 입력 오류."""

    code = "INVALID_SHOP_ITEM"

    def __init__(self) -> None:
        super().__init__(
            "Missing or invalid required parameters (name, crowns, pennies, category, quantity)."
        )


class InvalidListingCountError(ValidationError):
    """생성 개수 오류."""

    code = "INVALID_COUNT"

    def __init__(self, maximum: int) -> None:
        super().__init__(f"Count must be between 1 and {maximum}.")


class ListingNotFoundError(NotFoundError):
    """리스팅 없음."""

    code = "LISTING_NOT_FOUND"

    def __init__(self) -> None:
        super().__init__("Marketplace item not found.")


class InventoryItemNotFoundError(NotFoundError):
    """인벤토리 아이템 없음 (또는 다른 캐릭터 소유)."""

    code = "ITEM_NOT_FOUND"

    def __init__(self) -> None:
        super().__init__("No item selected or character not found.")


class ListingSoldOutError(ConflictError):
    """재고 없음."""

    code = "LISTING_SOLD_OUT"

    def __init__(self) -> None:
        super().__init__("This item is out of stock.")


class OwnListingPurchaseError(ConflictError):
    """자신의 리스팅 구매 시도."""

    code = "OWN_LISTING"

    def __init__(self) -> None:
        super().__init__("You cannot buy your own item.")


class BuyerMismatchError(ForbiddenError):
    """구매 캐릭터가 요청자의 활성 캐릭터가 아님."""

    code = "BUYER_MISMATCH"

    def __init__(self) -> None:
        super().__init__("You need an active character to buy items.")


class NotListingSellerError(ForbiddenError):
    """판매자만 리스팅을 내릴 수 있음."""

    code = "NOT_LISTING_SELLER"

    def __init__(self) -> None:
        super().__init__("Only the seller can delist this item.")


class InvalidInternalTokenError(AuthenticationError):
    """내부 API 토큰 불일치."""

    code = "INVALID_INTERNAL_TOKEN"

    def __init__(self) -> None:
        super().__init__("Unauthorized")


__all__ = [
    "BuyerMismatchError",
    "InvalidInternalTokenError",
    "InvalidListingCountError",
    "InventoryItemNotFoundError",
    "ListingNotFoundError",
    "ListingSoldOutError",
    "NotListingSellerError",
    "OwnListingPurchaseError",
    "SaleValidationError",
    "ShopItemValidationError",
]
