"""Inventory Gateway Port."""

from abc import ABC, abstractmethod
from uuid import UUID

from apps.market.domain.entities import CharacterItem


class InventoryGateway(ABC):
    """캐릭터 인벤토리 저장소 포트."""

    @abstractmethod
    async def list_items(self, character_id: UUID) -> list[CharacterItem]:
        """인벤토리를 acquired_at 내림차순으로 조회합니다."""
        ...

    @abstractmethod
    async def get_item(
        self, item_id: UUID, *, for_update: bool = False
    ) -> CharacterItem | None:
        """인벤토리 아이템을 조회합니다."""
        ...

    @abstractmethod
    async def find_stack(
        self,
        character_id: UUID,
        item_name: str,
        crafter_user_id: UUID | None,
    ) -> CharacterItem | None:
        """같은 이름/제작자의 아이템 행을 잠금 조회합니다."""
        ...

    @abstractmethod
    async def add_item(self, item: CharacterItem) -> None:
        ...

    @abstractmethod
    async def delete_item(self, item: CharacterItem) -> None:
        ...
