"""PurchaseCalculator.

잔액과 가격을 총 페니로 평탄화하여 비교/차감하고
다시 crowns/pennies로 분할하는 순수 도메인 서비스입니다.
"""

from __future__ import annotations

from dataclasses import dataclass

from apps.market.domain.exceptions.money import InsufficientFundsError
from apps.market.domain.value_objects.money import Money


@dataclass(frozen=True, slots=True)
class PurchaseQuote:
    """구매 견적.

    Attributes:
        affordable: 구매 가능 여부
        remaining: 구매 후 잔액 (구매 불가 시 None)
    """

    affordable: bool
    remaining: Money | None


class PurchaseCalculator:
    """구매 금액 계산 서비스."""

    def can_afford(self, balance: Money, price: Money) -> bool:
        return balance.total_pennies >= price.total_pennies

    def quote(self, balance: Money, price: Money) -> PurchaseQuote:
        """구매 가능 여부와 구매 후 잔액을 계산합니다."""
        if not self.can_afford(balance, price):
            return PurchaseQuote(affordable=False, remaining=None)
        return PurchaseQuote(affordable=True, remaining=balance - price)

    def settle(self, balance: Money, price: Money) -> Money:
        """구매를 정산합니다.

        Args:
            balance: 구매자 잔액
            price: 가격

        Returns:
            구매 후 잔액

        Raises:
            InsufficientFundsError: 잔액 부족 (잔액은 변경되지 않음)
        """
        quote = self.quote(balance, price)
        if not quote.affordable or quote.remaining is None:
            raise InsufficientFundsError(balance, price)
        return quote.remaining

    def credit(self, balance: Money, amount: Money) -> Money:
        """판매 대금을 잔액에 더합니다."""
        return balance + amount
