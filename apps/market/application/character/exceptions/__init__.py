"""Character application exceptions."""

from __future__ import annotations

from apps.market.application.common.exceptions.base import (
    ConflictError,
    ForbiddenError,
    ValidationError,
)


class CharacterValidationError(ValidationError):
    """캐릭터 생성 입력 오류."""

    code = "INVALID_CHARACTER"


class CharacterAlreadyExistsError(ConflictError):
    """이미 활성 캐릭터가 있음."""

    code = "CHARACTER_ALREADY_EXISTS"

    def __init__(self) -> None:
        super().__init__("You already have an active character.")


class PermitAlreadyGrantedError(ConflictError):
    """이미 보유한 퍼밋."""

    code = "PERMIT_ALREADY_GRANTED"

    def __init__(self, permit_type: str) -> None:
        super().__init__(f"Character already holds a {permit_type} permit.")


class PermitNotGrantableError(ForbiddenError):
    """스스로 받을 수 없는 퍼밋."""

    code = "PERMIT_NOT_GRANTABLE"

    def __init__(self, permit_type: str, guild: str) -> None:
        super().__init__(f"A {permit_type} permit cannot be granted to the {guild} guild.")


__all__ = [
    "CharacterAlreadyExistsError",
    "CharacterValidationError",
    "PermitAlreadyGrantedError",
    "PermitNotGrantableError",
]
