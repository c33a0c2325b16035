"""Domain Value Objects."""

from apps.market.domain.value_objects.email import Email
from apps.market.domain.value_objects.money import PENNIES_PER_CROWN, Money

__all__ = ["Email", "Money", "PENNIES_PER_CROWN"]
