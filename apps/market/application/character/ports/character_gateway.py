"""Character Gateway Port."""

from abc import ABC, abstractmethod
from uuid import UUID

from apps.market.domain.entities import (
    Character,
    CharacterPermit,
    DeadCharacter,
    RetiredCharacter,
)


class CharacterGateway(ABC):
    """캐릭터 저장소 포트.

    단건 조회는 없으면 None을 반환합니다 (실패가 아닌 부재).
    저장소 호출 실패는 GatewayError로 전달됩니다.
    """

    @abstractmethod
    async def get_active_by_user(
        self, user_id: UUID, *, for_update: bool = False
    ) -> Character | None:
        """사용자의 활성 캐릭터를 조회합니다.

        Args:
            user_id: 사용자 ID
            for_update: 행 잠금 여부

        Returns:
            활성 캐릭터 또는 None
        """
        ...

    @abstractmethod
    async def get_by_id(
        self, character_id: UUID, *, for_update: bool = False
    ) -> Character | None:
        """ID로 캐릭터를 조회합니다."""
        ...

    @abstractmethod
    async def list_active(self) -> list[Character]:
        """모든 활성 캐릭터를 조회합니다."""
        ...

    @abstractmethod
    async def list_branch_members(
        self, branch: str, *, exclude_user_id: UUID | None = None
    ) -> list[Character]:
        """지부의 활성 캐릭터를 이름순으로 조회합니다."""
        ...

    @abstractmethod
    async def list_permits(self, character_id: UUID) -> list[str]:
        """캐릭터가 보유한 퍼밋 타입 목록."""
        ...

    @abstractmethod
    async def add(self, character: Character) -> None:
        """캐릭터를 추가합니다."""
        ...

    @abstractmethod
    async def add_permit(self, permit: CharacterPermit) -> None:
        """퍼밋을 추가합니다."""
        ...

    @abstractmethod
    async def archive_retired(self, character: Character, archive: RetiredCharacter) -> None:
        """은퇴 아카이브에 기록하고 활성 캐릭터를 삭제합니다."""
        ...

    @abstractmethod
    async def archive_dead(self, character: Character, archive: DeadCharacter) -> None:
        """사망 아카이브에 기록하고 활성 캐릭터를 삭제합니다."""
        ...

    @abstractmethod
    async def list_dead(self, *, limit: int | None = None) -> list[DeadCharacter]:
        """사망 캐릭터를 died_at 내림차순으로 조회합니다."""
        ...
