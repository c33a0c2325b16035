"""Character DTOs."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID

from apps.market.application.marketplace.dto import ListingView
from apps.market.domain.entities import Character, CharacterItem, DeadCharacter


@dataclass(frozen=True, slots=True)
class CreateCharacterRequest:
    """캐릭터 생성 요청."""

    name: str
    race: str | None
    guild: str | None
    branch: str | None = None


@dataclass(frozen=True, slots=True)
class CharacterSummary:
    """캐릭터 요약.

    Attributes:
        crowns: 정규화된 크라운
        pennies: 정규화된 페니 (0~11)
    """

    id: UUID
    user_id: UUID
    name: str
    race: str
    guild: str
    branch: str | None
    guild_rank: str
    social_rank: int
    crowns: int
    pennies: int
    created_at: datetime | None = None

    @classmethod
    def from_entity(cls, character: Character) -> CharacterSummary:
        balance = character.balance
        return cls(
            id=character.id,
            user_id=character.user_id,
            name=character.name,
            race=character.race,
            guild=character.guild,
            branch=character.branch,
            guild_rank=character.guild_rank,
            social_rank=character.social_rank,
            crowns=balance.crowns,
            pennies=balance.pennies,
            created_at=character.created_at,
        )


@dataclass(frozen=True, slots=True)
class InventoryItemView:
    """인벤토리 아이템."""

    id: UUID
    item_name: str
    quantity: int
    acquired_at: datetime | None
    crafter_user_id: UUID | None

    @classmethod
    def from_entity(cls, item: CharacterItem) -> InventoryItemView:
        return cls(
            id=item.id,
            item_name=item.item_name,
            quantity=item.quantity,
            acquired_at=item.acquired_at,
            crafter_user_id=item.crafter_user_id,
        )


@dataclass(frozen=True, slots=True)
class InventoryView:
    """인벤토리 화면 데이터."""

    character: CharacterSummary
    items: list[InventoryItemView]
    permits: list[str]
    grantable_permits: list[str] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class HomeView:
    """홈 화면 데이터."""

    character: CharacterSummary
    latest_listings: list[ListingView]


@dataclass(frozen=True, slots=True)
class BranchMemberView:
    """지부 구성원."""

    id: UUID
    name: str
    race: str
    guild: str
    guild_rank: str
    social_rank: int


@dataclass(frozen=True, slots=True)
class BranchMembersView:
    """지부 구성원 화면 데이터 (branch 가 없으면 members 는 비어 있음)."""

    branch: str | None
    members: list[BranchMemberView]


@dataclass(frozen=True, slots=True)
class DeadCharacterView:
    """사망 캐릭터."""

    id: UUID
    name: str
    race: str
    guild: str
    branch: str | None
    guild_rank: str
    died_at: datetime
    owner_name: str | None = None

    @classmethod
    def from_entity(
        cls, dead: DeadCharacter, owner_name: str | None = None
    ) -> DeadCharacterView:
        return cls(
            id=dead.id,
            name=dead.name,
            race=dead.race,
            guild=dead.guild,
            branch=dead.branch,
            guild_rank=dead.guild_rank,
            died_at=dead.died_at,
            owner_name=owner_name,
        )


@dataclass(frozen=True, slots=True)
class LifecycleResult:
    """생성/은퇴/사망 결과."""

    message: str
    character: CharacterSummary


@dataclass(frozen=True, slots=True)
class BalanceResult:
    """잔액 변경 결과."""

    message: str
    crowns: int
    pennies: int


@dataclass(frozen=True, slots=True)
class PermitGrantResult:
    """퍼밋 부여 결과."""

    message: str
    permit_type: str


@dataclass(frozen=True, slots=True)
class BlacksmithAccess:
    """대장간 접근 결과."""

    message: str
    character: CharacterSummary


@dataclass(frozen=True, slots=True)
class GeneratedCharacters:
    """임의 캐릭터 생성 결과."""

    message: str
    characters: list[CharacterSummary]


__all__ = [
    "BalanceResult",
    "BlacksmithAccess",
    "BranchMemberView",
    "BranchMembersView",
    "CharacterSummary",
    "CreateCharacterRequest",
    "DeadCharacterView",
    "GeneratedCharacters",
    "HomeView",
    "InventoryItemView",
    "InventoryView",
    "LifecycleResult",
    "PermitGrantResult",
]
