"""Account Entity."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4

UNKNOWN_USER_NAME = "Unknown User"


@dataclass
class Account:
    """로그인 계정 엔티티.

    Attributes:
        email: 로그인 이메일 (소문자 정규화)
        password_hash: bcrypt 해시
        first_name: 이름
        last_name: 성
    """

    email: str
    password_hash: str
    first_name: str | None = None
    last_name: str | None = None
    id: UUID = field(default_factory=uuid4)
    created_at: datetime | None = None

    @property
    def display_name(self) -> str:
        parts = [p for p in (self.first_name, self.last_name) if p]
        return " ".join(parts) if parts else UNKNOWN_USER_NAME
