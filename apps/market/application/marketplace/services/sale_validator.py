"""SaleValidator.

판매/상점 입력을 쓰기 전에 검증합니다. 검증 순서와 메시지는 사용자에게
그대로 노출됩니다.
"""

from __future__ import annotations

from apps.market.application.marketplace.exceptions import (
    SaleValidationError,
    ShopItemValidationError,
)
from apps.market.domain.enums import ItemCategory, PermitType
from apps.market.domain.value_objects import PENNIES_PER_CROWN, Money

PRICE_NEGATIVE = "Price cannot be negative."
PRICE_ZERO = "Price cannot be zero."
PENNIES_OVERFLOW = "Pennies must be less than 12. Please convert 12 pennies to 1 Crown."
CATEGORY_REQUIRED = "Please select a category for the item."
QUANTITY_OUT_OF_RANGE = "Quantity to sell must be between 1 and {owned}."


def parse_category(value: str | None) -> ItemCategory | None:
    if not value:
        return None
    try:
        return ItemCategory(value.strip().lower())
    except ValueError:
        return None


def parse_category_filter(value: str | None) -> str | None:
    """'all' 또는 빈 값은 필터 없음(None)."""
    if not value or value.strip().lower() == "all":
        return None
    return value.strip().lower()


class SaleValidator:
    """판매 입력 검증 서비스."""

    def validate_price(self, crowns: int, pennies: int) -> Money:
        """가격을 검증합니다.

        Raises:
            SaleValidationError: 음수, 0, pennies >= 12
        """
        if crowns < 0 or pennies < 0:
            raise SaleValidationError(PRICE_NEGATIVE)
        if crowns == 0 and pennies == 0:
            raise SaleValidationError(PRICE_ZERO)
        if pennies >= PENNIES_PER_CROWN:
            raise SaleValidationError(PENNIES_OVERFLOW)
        return Money(crowns, pennies)

    def validate_category(self, category: str | None) -> ItemCategory:
        parsed = parse_category(category)
        if parsed is None:
            raise SaleValidationError(CATEGORY_REQUIRED)
        return parsed

    def validate_quantity(self, quantity: int, owned: int) -> int:
        if quantity <= 0 or quantity > owned:
            raise SaleValidationError(QUANTITY_OUT_OF_RANGE.format(owned=owned))
        return quantity

    def validate_shop_item(
        self,
        name: str | None,
        crowns: int | None,
        pennies: int | None,
        category: str | None,
        quantity: int | None,
        required_permit: str | None = None,
    ) -> tuple[str, Money, ItemCategory, int, str | None]:
        """상점 재고 입력을 검증합니다.

        Raises:
            ShopItemValidationError: 누락 또는 잘못된 값
        """
        if not name or not name.strip():
            raise ShopItemValidationError()
        if crowns is None or pennies is None or quantity is None or quantity <= 0:
            raise ShopItemValidationError()
        if crowns < 0 or not 0 <= pennies < PENNIES_PER_CROWN or (crowns == 0 and pennies == 0):
            raise ShopItemValidationError()
        parsed_category = parse_category(category)
        if parsed_category is None:
            raise ShopItemValidationError()

        permit: str | None = None
        if required_permit:
            try:
                permit = PermitType(required_permit.strip().lower()).value
            except ValueError as e:
                raise ShopItemValidationError() from e

        return name.strip(), Money(crowns, pennies), parsed_category, quantity, permit
