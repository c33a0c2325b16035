"""Session DTOs."""

from __future__ import annotations

from dataclasses import dataclass, field
from uuid import UUID

from apps.market.domain.entities import Character


@dataclass(frozen=True, slots=True)
class SessionContext:
    """요청 단위 세션 컨텍스트.

    Attributes:
        user_id: 로그인 사용자 ID (익명이면 None)
        character: 활성 캐릭터
        permits: 활성 캐릭터의 퍼밋 타입
        notice: 사용자에게 보여줄 안내 메시지
    """

    user_id: UUID | None = None
    character: Character | None = None
    permits: tuple[str, ...] = field(default_factory=tuple)
    notice: str | None = None

    @property
    def authenticated(self) -> bool:
        return self.user_id is not None

    @property
    def has_character(self) -> bool:
        return self.character is not None

    def has_permit(self, permit_type: str) -> bool:
        return permit_type in self.permits


__all__ = ["SessionContext"]
