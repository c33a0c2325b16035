"""Sign up command - Creates an account and issues an access token."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import TYPE_CHECKING

from apps.market.application.auth.dto import AuthResult, SignUpRequest
from apps.market.application.auth.exceptions import (
    AccountAlreadyExistsError,
    WeakPasswordError,
)
from apps.market.domain.entities import Account
from apps.market.domain.value_objects import Email

if TYPE_CHECKING:
    from apps.market.application.auth.ports import (
        AccountGateway,
        PasswordHasher,
        TokenIssuer,
    )
    from apps.market.application.common.ports import TransactionManager

logger = logging.getLogger(__name__)


class SignUpInteractor:
    """회원가입 유스케이스."""

    def __init__(
        self,
        account_gateway: "AccountGateway",
        password_hasher: "PasswordHasher",
        token_issuer: "TokenIssuer",
        transaction_manager: "TransactionManager",
        *,
        min_password_length: int = 8,
    ) -> None:
        self._accounts = account_gateway
        self._hasher = password_hasher
        self._tokens = token_issuer
        self._tx = transaction_manager
        self._min_password_length = min_password_length

    async def execute(self, request: SignUpRequest) -> AuthResult:
        """계정을 생성하고 바로 로그인 토큰을 발급합니다.

        Raises:
            InvalidEmailError: 이메일 형식 오류
            WeakPasswordError: 비밀번호 길이 부족
            AccountAlreadyExistsError: 이미 가입된 이메일
        """
        email = Email.parse(request.email)
        if len(request.password or "") < self._min_password_length:
            raise WeakPasswordError(self._min_password_length)

        if await self._accounts.get_by_email(email.value) is not None:
            raise AccountAlreadyExistsError()

        account = Account(
            email=email.value,
            password_hash=self._hasher.hash(request.password),
            first_name=(request.first_name or "").strip() or None,
            last_name=(request.last_name or "").strip() or None,
            created_at=datetime.now(timezone.utc),
        )
        await self._accounts.add(account)
        await self._tx.commit()

        logger.info("Account created", extra={"user_id": str(account.id)})

        issued = self._tokens.issue(account.id)
        return AuthResult(
            user_id=account.id,
            email=account.email,
            access_token=issued.access_token,
            expires_at=issued.expires_at,
        )
