"""Domain Entities."""

from apps.market.domain.entities.account import UNKNOWN_USER_NAME, Account
from apps.market.domain.entities.character import (
    DEFAULT_RANK,
    Character,
    CharacterItem,
    CharacterPermit,
    DeadCharacter,
    RetiredCharacter,
)
from apps.market.domain.entities.listing import MarketplaceListing

__all__ = [
    "Account",
    "Character",
    "CharacterItem",
    "CharacterPermit",
    "DEFAULT_RANK",
    "DeadCharacter",
    "MarketplaceListing",
    "RetiredCharacter",
    "UNKNOWN_USER_NAME",
]
