"""Character services."""

from apps.market.application.character.services.character_generator import (
    RandomCharacterGenerator,
)
from apps.market.application.character.services.character_policy import (
    CharacterPolicy,
    ValidatedCharacter,
)

__all__ = ["CharacterPolicy", "RandomCharacterGenerator", "ValidatedCharacter"]
