"""Shop catalogue.

NPC 상점 보충 템플릿과 임의 리스팅 생성 템플릿입니다.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from datetime import datetime, timezone
from uuid import UUID

from apps.market.domain.entities import MarketplaceListing
from apps.market.domain.enums import ItemCategory


@dataclass(frozen=True, slots=True)
class StockTemplate:
    """NPC 재고 보충 템플릿."""

    name: str
    crowns: int
    pennies: int
    category: ItemCategory
    description: str
    required_permit: str | None = None


@dataclass(frozen=True, slots=True)
class ItemTemplate:
    """임의 생성용 아이템 템플릿 (crowns 범위)."""

    name: str
    description: str
    min_crowns: int
    max_crowns: int
    category: ItemCategory = ItemCategory.MISC


SHORTSWORD = StockTemplate(
    name="Shortsword",
    crowns=4,
    pennies=6,
    category=ItemCategory.WEAPONS,
    description="A basic, well-balanced shortsword, ideal for new adventurers.",
)

REPLENISHED_STOCK: tuple[StockTemplate, ...] = (SHORTSWORD,)

ITEM_TEMPLATES: tuple[ItemTemplate, ...] = (
    ItemTemplate("Iron Sword", "A sturdy sword, good for beginners.", 5, 15, ItemCategory.WEAPONS),
    ItemTemplate("Leather Armor", "Light and flexible protection.", 8, 20, ItemCategory.ARMOUR),
    ItemTemplate("Healing Potion", "Restores a small amount of health.", 1, 3, ItemCategory.CONSUMABLE),
    ItemTemplate("Wooden Shield", "A basic shield for defense.", 3, 10, ItemCategory.ARMOUR),
    ItemTemplate("Magic Scroll", "Contains a minor spell.", 10, 30, ItemCategory.CONSUMABLE),
    ItemTemplate("Gold Ring", "A simple, elegant ring.", 15, 40),
    ItemTemplate("Traveler's Cloak", "Keeps you warm on long journeys.", 4, 12, ItemCategory.ARMOUR),
    ItemTemplate("Enchanted Dagger", "A sharp blade with a faint glow.", 20, 50, ItemCategory.WEAPONS),
    ItemTemplate("Mysterious Orb", "Pulsates with an unknown energy.", 30, 70),
    ItemTemplate("Dragon Scale", "A rare and valuable material.", 50, 100),
    ItemTemplate("Elven Bow", "A finely crafted bow, light and accurate.", 25, 60, ItemCategory.WEAPONS),
    ItemTemplate("Dwarven Axe", "Heavy and powerful, ideal for close combat.", 18, 45, ItemCategory.WEAPONS),
    ItemTemplate("Goblin Ear", "A gruesome trophy, surprisingly valuable.", 2, 8),
    ItemTemplate("Phoenix Feather", "Said to bring good fortune and rebirth.", 75, 150),
    ItemTemplate("Map to Lost Treasure", "A tattered map hinting at forgotten riches.", 40, 90),
)


class RandomListingGenerator:
    """템플릿에서 임의 리스팅을 생성합니다."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    def generate(
        self,
        count: int,
        *,
        seller_user_id: UUID,
        seller_character_id: UUID | None = None,
    ) -> list[MarketplaceListing]:
        now = datetime.now(timezone.utc)
        listings = []
        for _ in range(count):
            template = self._rng.choice(ITEM_TEMPLATES)
            listings.append(
                MarketplaceListing(
                    name=template.name,
                    description=template.description,
                    crowns=self._rng.randint(template.min_crowns, template.max_crowns),
                    pennies=self._rng.randint(0, 11),
                    category=template.category.value,
                    quantity=1,
                    seller_user_id=seller_user_id,
                    seller_character_id=seller_character_id,
                    listed_at=now,
                )
            )
        return listings
