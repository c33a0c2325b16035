"""Domain Enums."""

from apps.market.domain.enums.market import Branch, Guild, ItemCategory, PermitType, Race

__all__ = ["Branch", "Guild", "ItemCategory", "PermitType", "Race"]
