"""Character commands."""

from apps.market.application.character.commands.add_pennies import AddPenniesInteractor
from apps.market.application.character.commands.create_character import (
    CreateCharacterInteractor,
)
from apps.market.application.character.commands.generate_characters import (
    GenerateCharactersInteractor,
)
from apps.market.application.character.commands.grant_permit import GrantPermitInteractor
from apps.market.application.character.commands.retire_character import (
    DeclareDeathInteractor,
    RetireCharacterInteractor,
)

__all__ = [
    "AddPenniesInteractor",
    "CreateCharacterInteractor",
    "DeclareDeathInteractor",
    "GenerateCharactersInteractor",
    "GrantPermitInteractor",
    "RetireCharacterInteractor",
]
