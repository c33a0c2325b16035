"""인증 관련 공통 예외."""

from __future__ import annotations

from apps.market.application.common.exceptions.base import AuthenticationError


class AuthenticationRequiredError(AuthenticationError):
    """로그인 세션 없음."""

    code = "AUTHENTICATION_REQUIRED"

    def __init__(self) -> None:
        super().__init__("Authentication required")


class InvalidTokenError(AuthenticationError):
    """유효하지 않은 액세스 토큰."""

    code = "INVALID_TOKEN"

    def __init__(self, reason: str = "Invalid token") -> None:
        super().__init__(reason)


class TokenExpiredError(AuthenticationError):
    """만료된 액세스 토큰."""

    code = "TOKEN_EXPIRED"

    def __init__(self) -> None:
        super().__init__("Token expired")
