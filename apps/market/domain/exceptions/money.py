"""Currency 도메인 예외."""

from __future__ import annotations

from typing import TYPE_CHECKING

from apps.market.domain.exceptions.base import DomainError

if TYPE_CHECKING:
    from apps.market.domain.value_objects.money import Money


class InvalidMoneyError(DomainError):
    """유효하지 않은 금액 (crowns < 0 또는 pennies 범위 밖)."""


class InsufficientFundsError(DomainError):
    """잔액이 가격보다 부족함."""

    def __init__(self, balance: "Money", price: "Money") -> None:
        self.balance = balance
        self.price = price
        super().__init__(
            f"Insufficient funds: balance {balance} is less than price {price}."
        )
