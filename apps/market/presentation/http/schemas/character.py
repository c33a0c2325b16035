"""Character HTTP Schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class CharacterResponse(BaseModel):
    """캐릭터 요약."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    race: str
    guild: str
    branch: str | None = None
    guild_rank: str
    social_rank: int
    crowns: int = Field(..., description="크라운")
    pennies: int = Field(..., description="페니 (0~11)")
    created_at: datetime | None = None


class InventoryItemResponse(BaseModel):
    """인벤토리 아이템."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    item_name: str
    quantity: int
    acquired_at: datetime | None = None
    crafter_user_id: UUID | None = None


class InventoryResponse(BaseModel):
    """인벤토리 페이지."""

    model_config = ConfigDict(from_attributes=True)

    character: CharacterResponse
    items: list[InventoryItemResponse]
    permits: list[str]
    grantable_permits: list[str] = Field(default_factory=list, description="신청 가능한 퍼밋")


class BranchMemberResponse(BaseModel):
    """지부 구성원."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    race: str
    guild: str
    guild_rank: str
    social_rank: int


class BranchMembersResponse(BaseModel):
    """지부 구성원 페이지."""

    model_config = ConfigDict(from_attributes=True)

    branch: str | None = None
    members: list[BranchMemberResponse]


class DeadCharacterResponse(BaseModel):
    """사망 캐릭터."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    race: str
    guild: str
    branch: str | None = None
    guild_rank: str
    died_at: datetime
    owner_name: str | None = None


class CreateCharacterBody(BaseModel):
    """캐릭터 생성 요청."""

    name: str = Field("", description="캐릭터 이름")
    race: str | None = Field(None, description="종족")
    guild: str | None = Field(None, description="길드")
    branch: str | None = Field(None, description="지부 (생략 시 기본 지부)")


class LifecycleResponse(BaseModel):
    """생성/은퇴/사망 결과."""

    model_config = ConfigDict(from_attributes=True)

    message: str
    character: CharacterResponse


class BalanceResponse(BaseModel):
    """잔액 변경 결과."""

    model_config = ConfigDict(from_attributes=True)

    message: str
    crowns: int
    pennies: int


class GrantPermitBody(BaseModel):
    """퍼밋 신청 요청."""

    permit_type: str = Field("blacksmith", description="퍼밋 타입")


class PermitGrantResponse(BaseModel):
    """퍼밋 부여 결과."""

    model_config = ConfigDict(from_attributes=True)

    message: str
    permit_type: str


class BlacksmithResponse(BaseModel):
    """대장간 페이지."""

    model_config = ConfigDict(from_attributes=True)

    message: str
    character: CharacterResponse


class GeneratedCharactersResponse(BaseModel):
    """임의 캐릭터 생성 결과."""

    model_config = ConfigDict(from_attributes=True)

    message: str
    characters: list[CharacterResponse]
