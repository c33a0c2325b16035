"""CharacterPolicy.

캐릭터 생성 입력 검증, 길드별 시작 퍼밋, 자가 부여 가능 퍼밋 등
포트 의존성 없는 순수 애플리케이션 로직입니다.
"""

from __future__ import annotations

from dataclasses import dataclass

from apps.market.application.character.exceptions import CharacterValidationError
from apps.market.application.character.dto import CreateCharacterRequest
from apps.market.domain.enums import Branch, Guild, PermitType, Race

NAME_REQUIRED = "Character name cannot be empty."
RACE_REQUIRED = "Please select a character race."
GUILD_REQUIRED = "Please select a character guild."
INVALID_BRANCH = "Please select a valid branch."

MAX_NAME_LENGTH = 64

# 생성 시 자동 부여되는 퍼밋
STARTING_PERMITS: dict[Guild, tuple[PermitType, ...]] = {
    Guild.MERCENARY: (PermitType.WEAPON, PermitType.ARMOUR),
    Guild.SCOUT: (PermitType.WEAPON,),
    Guild.BLACKSMITH: (),
}

# 캐릭터가 직접 신청할 수 있는 퍼밋
SELF_GRANTABLE_PERMITS: dict[Guild, tuple[PermitType, ...]] = {
    Guild.BLACKSMITH: (PermitType.BLACKSMITH,),
}


@dataclass(frozen=True, slots=True)
class ValidatedCharacter:
    """검증된 생성 입력."""

    name: str
    race: Race
    guild: Guild
    branch: Branch


def _parse_enum(enum_cls, value: str | None):
    if not value:
        return None
    normalized = value.strip().lower()
    for member in enum_cls:
        if member.value.lower() == normalized:
            return member
    return None


class CharacterPolicy:
    """캐릭터 정책 서비스."""

    def __init__(self, default_branch: str = Branch.PORTSMOUTH.value) -> None:
        branch = _parse_enum(Branch, default_branch)
        if branch is None:
            raise ValueError(f"Unknown default branch: {default_branch}")
        self._default_branch = branch

    def validate_creation(self, request: CreateCharacterRequest) -> ValidatedCharacter:
        """생성 요청을 검증합니다.

        Raises:
            CharacterValidationError: 이름/종족/길드/지부 오류
        """
        name = (request.name or "").strip()
        if not name:
            raise CharacterValidationError(NAME_REQUIRED)
        if len(name) > MAX_NAME_LENGTH:
            raise CharacterValidationError(
                f"Character name must be at most {MAX_NAME_LENGTH} characters."
            )

        race = _parse_enum(Race, request.race)
        if race is None:
            raise CharacterValidationError(RACE_REQUIRED)

        guild = _parse_enum(Guild, request.guild)
        if guild is None:
            raise CharacterValidationError(GUILD_REQUIRED)

        if request.branch:
            branch = _parse_enum(Branch, request.branch)
            if branch is None:
                raise CharacterValidationError(INVALID_BRANCH)
        else:
            branch = self._default_branch

        return ValidatedCharacter(name=name, race=race, guild=guild, branch=branch)

    def starting_permits(self, guild: str) -> list[str]:
        parsed = _parse_enum(Guild, guild)
        if parsed is None:
            return []
        return [p.value for p in STARTING_PERMITS.get(parsed, ())]

    def grantable_permits(self, guild: str, held: list[str] | tuple[str, ...]) -> list[str]:
        """아직 보유하지 않은 자가 부여 가능 퍼밋."""
        parsed = _parse_enum(Guild, guild)
        if parsed is None:
            return []
        return [
            p.value for p in SELF_GRANTABLE_PERMITS.get(parsed, ()) if p.value not in held
        ]

    def can_self_grant(self, guild: str, permit_type: str) -> bool:
        parsed = _parse_enum(Guild, guild)
        if parsed is None:
            return False
        return permit_type in {p.value for p in SELF_GRANTABLE_PERMITS.get(parsed, ())}
