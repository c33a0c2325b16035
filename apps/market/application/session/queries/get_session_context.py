"""Get session context query."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from apps.market.application.common.exceptions import GatewayError
from apps.market.application.session.dto import SessionContext

if TYPE_CHECKING:
    from apps.market.application.character.ports import CharacterGateway

logger = logging.getLogger(__name__)

CHARACTER_LOAD_FAILED = "Failed to load character data: {reason}"


class GetSessionContextQuery:
    """세션 컨텍스트 조회 쿼리.

    활성 캐릭터와 퍼밋을 불러옵니다. 조회가 실패하면 안내 메시지를 남기고
    캐릭터가 없는 것으로 처리합니다.
    """

    def __init__(self, character_gateway: "CharacterGateway") -> None:
        self._characters = character_gateway

    async def execute(self, user_id: UUID | None) -> SessionContext:
        if user_id is None:
            return SessionContext()

        try:
            character = await self._characters.get_active_by_user(user_id)
            permits: list[str] = []
            if character is not None:
                permits = await self._characters.list_permits(character.id)
        except GatewayError as e:
            logger.warning(
                "Character lookup failed, treating session as characterless",
                extra={"user_id": str(user_id), "error": e.message},
            )
            return SessionContext(
                user_id=user_id,
                notice=CHARACTER_LOAD_FAILED.format(reason=e.message),
            )

        return SessionContext(
            user_id=user_id,
            character=character,
            permits=tuple(permits),
        )
