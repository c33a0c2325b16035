"""JWT Token Service.

TokenIssuer 포트의 구현체입니다.
"""

from __future__ import annotations

import time
import uuid
from datetime import timedelta
from typing import Any

from jose import ExpiredSignatureError, JWTError, jwt

from apps.market.application.auth.ports import IssuedToken
from apps.market.application.common.exceptions import InvalidTokenError, TokenExpiredError

ACCESS_TOKEN_TYPE = "access"


class JwtTokenService:
    """JWT 액세스 토큰 서비스."""

    def __init__(
        self,
        *,
        secret_key: str,
        algorithm: str = "HS256",
        issuer: str = "crowns-market",
        audience: str = "crowns-market-api",
        access_token_expire_minutes: int = 60,
    ) -> None:
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._issuer = issuer
        self._audience = audience
        self._access_token_expire = timedelta(minutes=access_token_expire_minutes)

    def _now_timestamp(self) -> int:
        """현재 UTC Unix timestamp 반환."""
        return int(time.time())

    def issue(self, user_id: uuid.UUID) -> IssuedToken:
        """액세스 토큰 발급."""
        now = self._now_timestamp()
        expires_at = now + int(self._access_token_expire.total_seconds())

        payload: dict[str, Any] = {
            "sub": str(user_id),
            "jti": str(uuid.uuid4()),
            "type": ACCESS_TOKEN_TYPE,
            "exp": expires_at,
            "iat": now,
            "nbf": now,
            "iss": self._issuer,
            "aud": self._audience,
        }

        token = jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
        return IssuedToken(access_token=token, expires_at=expires_at)

    def decode_user_id(self, token: str) -> uuid.UUID:
        """토큰 디코딩 후 사용자 ID 반환."""
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                audience=self._audience,
                issuer=self._issuer,
            )
        except ExpiredSignatureError as e:
            raise TokenExpiredError() from e
        except JWTError as e:
            raise InvalidTokenError(str(e)) from e

        if payload.get("type") != ACCESS_TOKEN_TYPE:
            raise InvalidTokenError("Token type mismatch")
        try:
            return uuid.UUID(payload["sub"])
        except (KeyError, TypeError, ValueError) as e:
            raise InvalidTokenError("Invalid subject") from e
