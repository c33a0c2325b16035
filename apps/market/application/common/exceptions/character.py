"""활성 캐릭터 공통 예외."""

from __future__ import annotations

from apps.market.application.common.exceptions.base import NotFoundError


class ActiveCharacterNotFoundError(NotFoundError):
    """활성 캐릭터 없음."""

    code = "CHARACTER_NOT_FOUND"

    def __init__(self) -> None:
        super().__init__("No active character found.")
