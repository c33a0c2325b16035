"""TokenIssuer Port.

액세스 토큰 발급/검증 인터페이스입니다.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID


@dataclass(frozen=True, slots=True)
class IssuedToken:
    """발급된 액세스 토큰."""

    access_token: str
    expires_at: int


class TokenIssuer(Protocol):
    """토큰 발급/검증 인터페이스.

    구현체:
        - JwtTokenService (infrastructure/security/)
    """

    def issue(self, user_id: UUID) -> IssuedToken:
        """액세스 토큰을 발급합니다."""
        ...

    def decode_user_id(self, token: str) -> UUID:
        """토큰을 검증하고 사용자 ID를 반환합니다.

        Raises:
            InvalidTokenError: 서명/형식/발급자 오류
            TokenExpiredError: 만료
        """
        ...
