"""Grant permit command."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import TYPE_CHECKING
from uuid import UUID

from apps.market.application.character.dto import PermitGrantResult
from apps.market.application.character.exceptions import (
    PermitAlreadyGrantedError,
    PermitNotGrantableError,
)
from apps.market.application.common.exceptions import ActiveCharacterNotFoundError
from apps.market.domain.entities import CharacterPermit

if TYPE_CHECKING:
    from apps.market.application.character.ports import CharacterGateway
    from apps.market.application.character.services import CharacterPolicy
    from apps.market.application.common.ports import TransactionManager

logger = logging.getLogger(__name__)


class GrantPermitInteractor:
    """퍼밋 자가 부여 유스케이스 (예: 대장장이 길드의 blacksmith 퍼밋)."""

    def __init__(
        self,
        character_gateway: "CharacterGateway",
        transaction_manager: "TransactionManager",
        policy: "CharacterPolicy",
    ) -> None:
        self._characters = character_gateway
        self._tx = transaction_manager
        self._policy = policy

    async def execute(self, user_id: UUID, permit_type: str) -> PermitGrantResult:
        """퍼밋을 부여합니다.

        Raises:
            ActiveCharacterNotFoundError: 활성 캐릭터 없음
            PermitNotGrantableError: 길드가 신청할 수 없는 퍼밋
            PermitAlreadyGrantedError: 이미 보유
        """
        character = await self._characters.get_active_by_user(user_id, for_update=True)
        if character is None:
            raise ActiveCharacterNotFoundError()

        permit_type = (permit_type or "").strip().lower()
        if not self._policy.can_self_grant(character.guild, permit_type):
            raise PermitNotGrantableError(permit_type, character.guild)

        held = await self._characters.list_permits(character.id)
        if permit_type in held:
            raise PermitAlreadyGrantedError(permit_type)

        await self._characters.add_permit(
            CharacterPermit(
                character_id=character.id,
                permit_type=permit_type,
                created_at=datetime.now(timezone.utc),
            )
        )
        await self._tx.commit()

        logger.info(
            "Permit granted",
            extra={"character_id": str(character.id), "permit_type": permit_type},
        )
        return PermitGrantResult(
            message=f"{permit_type.capitalize()} Permit granted!",
            permit_type=permit_type,
        )
