"""Listing Gateway Port."""

from abc import ABC, abstractmethod
from uuid import UUID

from apps.market.domain.entities import MarketplaceListing
from apps.market.domain.value_objects import Money


class ListingGateway(ABC):
    """마켓 리스팅 저장소 포트."""

    @abstractmethod
    async def list_listings(
        self,
        *,
        category: str | None = None,
        limit: int | None = None,
    ) -> list[MarketplaceListing]:
        """리스팅을 listed_at 내림차순으로 조회합니다.

        Args:
            category: 카테고리 필터 (None 이면 전체)
            limit: 최대 개수

        Returns:
            리스팅 목록
        """
        ...

    @abstractmethod
    async def get(
        self, listing_id: UUID, *, for_update: bool = False
    ) -> MarketplaceListing | None:
        """리스팅을 조회합니다."""
        ...

    @abstractmethod
    async def find_npc_stock(
        self,
        name: str,
        *,
        price: Money | None = None,
        category: str | None = None,
    ) -> MarketplaceListing | None:
        """NPC 재고를 잠금 조회합니다.

        Args:
            name: 아이템 이름
            price: 주어지면 가격(crowns, pennies)까지 일치해야 함
            category: 주어지면 카테고리까지 일치해야 함
        """
        ...

    @abstractmethod
    async def add(self, listing: MarketplaceListing) -> None:
        ...

    @abstractmethod
    async def add_many(self, listings: list[MarketplaceListing]) -> None:
        ...

    @abstractmethod
    async def delete(self, listing: MarketplaceListing) -> None:
        ...
