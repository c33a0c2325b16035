"""Add pennies (allowance) command."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from apps.market.application.character.dto import BalanceResult
from apps.market.application.common.exceptions import ActiveCharacterNotFoundError
from apps.market.domain.value_objects import Money

if TYPE_CHECKING:
    from apps.market.application.character.ports import CharacterGateway
    from apps.market.application.common.ports import TransactionManager

logger = logging.getLogger(__name__)


class AddPenniesInteractor:
    """용돈 지급 유스케이스.

    12 pennies 이상은 crowns로 올림되어 저장됩니다.
    """

    def __init__(
        self,
        character_gateway: "CharacterGateway",
        transaction_manager: "TransactionManager",
        *,
        allowance_pennies: int = 10,
    ) -> None:
        self._characters = character_gateway
        self._tx = transaction_manager
        self._allowance = Money.from_pennies(allowance_pennies)

    async def execute(self, user_id: UUID) -> BalanceResult:
        character = await self._characters.get_active_by_user(user_id, for_update=True)
        if character is None:
            raise ActiveCharacterNotFoundError()

        balance = character.balance + self._allowance
        character.set_balance(balance)
        await self._tx.commit()

        logger.info(
            "Allowance added",
            extra={
                "character_id": str(character.id),
                "crowns": balance.crowns,
                "pennies": balance.pennies,
            },
        )
        return BalanceResult(
            message=(
                f"Added {self._allowance.total_pennies} pennies! Your new balance is "
                f"{balance.crowns} crowns and {balance.pennies} pennies."
            ),
            crowns=balance.crowns,
            pennies=balance.pennies,
        )
