"""Community queries.

지부 구성원, 최근 사망자, 사망 캐릭터 목록을 조회합니다.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from apps.market.application.character.dto import (
    BranchMembersView,
    BranchMemberView,
    DeadCharacterView,
)
from apps.market.application.common.exceptions import ActiveCharacterNotFoundError
from apps.market.domain.entities import UNKNOWN_USER_NAME

if TYPE_CHECKING:
    from apps.market.application.auth.ports import AccountGateway
    from apps.market.application.character.ports import CharacterGateway


class GetBranchMembersQuery:
    """같은 지부의 다른 사용자 활성 캐릭터 목록."""

    def __init__(self, character_gateway: "CharacterGateway") -> None:
        self._characters = character_gateway

    async def execute(self, user_id: UUID) -> BranchMembersView:
        character = await self._characters.get_active_by_user(user_id)
        if character is None:
            raise ActiveCharacterNotFoundError()
        if not character.branch:
            return BranchMembersView(branch=None, members=[])

        members = await self._characters.list_branch_members(
            character.branch, exclude_user_id=user_id
        )
        return BranchMembersView(
            branch=character.branch,
            members=[
                BranchMemberView(
                    id=m.id,
                    name=m.name,
                    race=m.race,
                    guild=m.guild,
                    guild_rank=m.guild_rank,
                    social_rank=m.social_rank,
                )
                for m in members
            ],
        )


class GetRecentlyDeadQuery:
    """최근 사망자 목록 (died_at 내림차순)."""

    def __init__(self, character_gateway: "CharacterGateway", *, limit: int = 20) -> None:
        self._characters = character_gateway
        self._limit = limit

    async def execute(self) -> list[DeadCharacterView]:
        dead = await self._characters.list_dead(limit=self._limit)
        return [DeadCharacterView.from_entity(d) for d in dead]


class GetDeadCharactersQuery:
    """전체 사망 캐릭터 목록 + 소유자 이름."""

    def __init__(
        self,
        character_gateway: "CharacterGateway",
        account_gateway: "AccountGateway",
    ) -> None:
        self._characters = character_gateway
        self._accounts = account_gateway

    async def execute(self) -> list[DeadCharacterView]:
        dead = await self._characters.list_dead()
        if not dead:
            return []

        owner_ids = list({d.user_id for d in dead})
        names = await self._accounts.get_display_names(owner_ids)
        return [
            DeadCharacterView.from_entity(d, owner_name=names.get(d.user_id, UNKNOWN_USER_NAME))
            for d in dead
        ]
