"""Character Entities.

플레이어 캐릭터, 퍼밋, 인벤토리, 아카이브(은퇴/사망) 엔티티입니다.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4

from apps.market.domain.value_objects.money import Money

DEFAULT_RANK = "recruit"


@dataclass
class Character:
    """캐릭터 엔티티.

    사용자는 활성 캐릭터(retired_at, died_at 모두 NULL)를 최대 하나만 가집니다.

    Attributes:
        id: 캐릭터 ID
        user_id: 소유 사용자 ID (accounts.id)
        name: 캐릭터 이름
        race: 종족
        guild: 길드
        branch: 소속 지부
        guild_rank: 길드 랭크
        social_rank: 사회 랭크
        crowns: 보유 크라운
        pennies: 보유 페니 (정규화 시 0~11)
        created_at: 생성 시각
        retired_at: 은퇴 시각
        died_at: 사망 시각
    """

    user_id: UUID
    name: str
    race: str
    guild: str
    branch: str | None = None
    guild_rank: str = DEFAULT_RANK
    social_rank: int = 0
    crowns: int = 0
    pennies: int = 0
    id: UUID = field(default_factory=uuid4)
    created_at: datetime | None = None
    retired_at: datetime | None = None
    died_at: datetime | None = None

    @property
    def is_active(self) -> bool:
        return self.retired_at is None and self.died_at is None

    @property
    def balance(self) -> Money:
        """현재 잔액. 과거 데이터의 pennies >= 12 는 crowns로 올림됩니다."""
        return Money.normalized(self.crowns, self.pennies)

    def set_balance(self, money: Money) -> None:
        self.crowns = money.crowns
        self.pennies = money.pennies

    def __hash__(self) -> int:
        return hash(self.id)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Character):
            return False
        return self.id == other.id


@dataclass
class CharacterPermit:
    """캐릭터 퍼밋 (캐릭터 ↔ 퍼밋 타입)."""

    character_id: UUID
    permit_type: str
    id: UUID = field(default_factory=uuid4)
    created_at: datetime | None = None


@dataclass
class CharacterItem:
    """인벤토리 아이템.

    같은 (item_name, crafter_user_id) 조합은 한 행에 수량으로 합쳐집니다.
    """

    character_id: UUID
    item_name: str
    quantity: int = 1
    crafter_user_id: UUID | None = None
    id: UUID = field(default_factory=uuid4)
    acquired_at: datetime | None = None


@dataclass
class RetiredCharacter:
    """은퇴 캐릭터 아카이브."""

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
    created_at: datetime | None
    retired_at: datetime

    @classmethod
    def from_character(cls, character: Character, retired_at: datetime) -> RetiredCharacter:
        return cls(
            id=character.id,
            user_id=character.user_id,
            name=character.name,
            race=character.race,
            guild=character.guild,
            branch=character.branch,
            guild_rank=character.guild_rank,
            social_rank=character.social_rank,
            crowns=character.crowns,
            pennies=character.pennies,
            created_at=character.created_at,
            retired_at=retired_at,
        )


@dataclass
class DeadCharacter:
    """사망 캐릭터 아카이브."""

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
    created_at: datetime | None
    died_at: datetime

    @classmethod
    def from_character(cls, character: Character, died_at: datetime) -> DeadCharacter:
        return cls(
            id=character.id,
            user_id=character.user_id,
            name=character.name,
            race=character.race,
            guild=character.guild,
            branch=character.branch,
            guild_rank=character.guild_rank,
            social_rank=character.social_rank,
            crowns=character.crowns,
            pennies=character.pennies,
            created_at=character.created_at,
            died_at=died_at,
        )
