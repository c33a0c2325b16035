"""Auth DTOs."""

from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, slots=True)
class SignUpRequest:
    """회원가입 요청."""

    email: str
    password: str
    first_name: str | None = None
    last_name: str | None = None


@dataclass(frozen=True, slots=True)
class SignInRequest:
    """로그인 요청."""

    email: str
    password: str


@dataclass(frozen=True, slots=True)
class AuthResult:
    """인증 결과.

    Attributes:
        user_id: 계정 ID
        email: 이메일
        access_token: 액세스 토큰
        expires_at: 만료 시각 (Unix timestamp)
    """

    user_id: UUID
    email: str
    access_token: str
    expires_at: int


__all__ = ["AuthResult", "SignInRequest", "SignUpRequest"]
