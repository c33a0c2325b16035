"""Generate random characters command (dev tool)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.market.application.character.dto import CharacterSummary, GeneratedCharacters

if TYPE_CHECKING:
    from apps.market.application.character.ports import CharacterGateway
    from apps.market.application.character.services import RandomCharacterGenerator
    from apps.market.application.common.ports import TransactionManager

logger = logging.getLogger(__name__)

DEFAULT_GENERATED_CHARACTERS = 10


class GenerateCharactersInteractor:
    """임의 캐릭터 일괄 생성 유스케이스."""

    def __init__(
        self,
        character_gateway: "CharacterGateway",
        transaction_manager: "TransactionManager",
        generator: "RandomCharacterGenerator",
    ) -> None:
        self._characters = character_gateway
        self._tx = transaction_manager
        self._generator = generator

    async def execute(self, count: int = DEFAULT_GENERATED_CHARACTERS) -> GeneratedCharacters:
        characters = self._generator.generate(count)
        for character in characters:
            await self._characters.add(character)
        await self._tx.commit()

        logger.info("Random characters generated", extra={"count": len(characters)})
        return GeneratedCharacters(
            message=f"{len(characters)} random characters generated and added successfully!",
            characters=[CharacterSummary.from_entity(c) for c in characters],
        )
