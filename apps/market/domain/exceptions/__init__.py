"""도메인 예외."""

from apps.market.domain.exceptions.base import DomainError
from apps.market.domain.exceptions.money import InsufficientFundsError, InvalidMoneyError
from apps.market.domain.exceptions.validation import InvalidEmailError

__all__ = [
    "DomainError",
    "InsufficientFundsError",
    "InvalidEmailError",
    "InvalidMoneyError",
]
