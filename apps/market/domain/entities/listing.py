"""Marketplace Listing Entity."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4

from apps.market.domain.value_objects.money import Money


@dataclass
class MarketplaceListing:
    """마켓 판매 목록.

    seller_user_id 가 없으면 NPC 재고(상점 아이템)입니다.
    NPC 재고는 수량 0이 되어도 보충을 위해 남겨 둡니다.

    Attributes:
        id: 리스팅 ID
        name: 아이템 이름
        crowns: 가격 (crowns)
        pennies: 가격 (pennies)
        category: 카테고리
        quantity: 남은 수량
        description: 아이템 설명
        seller_user_id: 판매자 사용자 ID
        seller_character_id: 판매자 캐릭터 ID
        crafter_user_id: 제작자 사용자 ID
        required_permit: 구매에 필요한 퍼밋
        listed_at: 등록 시각
    """

    name: str
    crowns: int
    pennies: int
    category: str
    quantity: int = 1
    description: str | None = None
    seller_user_id: UUID | None = None
    seller_character_id: UUID | None = None
    crafter_user_id: UUID | None = None
    required_permit: str | None = None
    id: UUID = field(default_factory=uuid4)
    listed_at: datetime | None = None

    @property
    def price(self) -> Money:
        return Money.normalized(self.crowns, self.pennies)

    @property
    def is_npc_stock(self) -> bool:
        return self.seller_user_id is None

    @property
    def sold_out(self) -> bool:
        return self.quantity <= 0

    def is_sold_by(self, user_id: UUID, character_id: UUID | None = None) -> bool:
        if character_id is not None and self.seller_character_id == character_id:
            return True
        return self.seller_user_id is not None and self.seller_user_id == user_id

    def __hash__(self) -> int:
        return hash(self.id)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MarketplaceListing):
            return False
        return self.id == other.id
