"""Sign in command."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.market.application.auth.dto import AuthResult, SignInRequest
from apps.market.application.auth.exceptions import InvalidCredentialsError
from apps.market.domain.exceptions import InvalidEmailError
from apps.market.domain.value_objects import Email

if TYPE_CHECKING:
    from apps.market.application.auth.ports import (
        AccountGateway,
        PasswordHasher,
        TokenIssuer,
    )

logger = logging.getLogger(__name__)


class SignInInteractor:
    """로그인 유스케이스."""

    def __init__(
        self,
        account_gateway: "AccountGateway",
        password_hasher: "PasswordHasher",
        token_issuer: "TokenIssuer",
    ) -> None:
        self._accounts = account_gateway
        self._hasher = password_hasher
        self._tokens = token_issuer

    async def execute(self, request: SignInRequest) -> AuthResult:
        """이메일/비밀번호를 확인하고 액세스 토큰을 발급합니다.

        Raises:
            InvalidCredentialsError: 계정 없음 또는 비밀번호 불일치
        """
        try:
            email = Email.parse(request.email)
        except InvalidEmailError as e:
            raise InvalidCredentialsError() from e

        account = await self._accounts.get_by_email(email.value)
        if account is None or not self._hasher.verify(request.password, account.password_hash):
            logger.info("Sign in rejected", extra={"email": repr(email)})
            raise InvalidCredentialsError()

        issued = self._tokens.issue(account.id)
        logger.info("Sign in succeeded", extra={"user_id": str(account.id)})
        return AuthResult(
            user_id=account.id,
            email=account.email,
            access_token=issued.access_token,
            expires_at=issued.expires_at,
        )
