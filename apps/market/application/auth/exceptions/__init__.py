"""Auth application exceptions."""

from __future__ import annotations

from apps.market.application.common.exceptions.base import (
    AuthenticationError,
    ConflictError,
    ValidationError,
)


class AccountAlreadyExistsError(ConflictError):
    """이미 가입된 이메일."""

    code = "ACCOUNT_ALREADY_EXISTS"

    def __init__(self) -> None:
        super().__init__("An account with this email already exists.")


class InvalidCredentialsError(AuthenticationError):
    """이메일 또는 비밀번호 불일치."""

    code = "INVALID_CREDENTIALS"

    def __init__(self) -> None:
        super().__init__("Invalid login credentials")


class WeakPasswordError(ValidationError):
    """비밀번호 정책 위반."""

    code = "WEAK_PASSWORD"

    def __init__(self, min_length: int) -> None:
        super().__init__(f"Password must be at least {min_length} characters.")


__all__ = [
    "AccountAlreadyExistsError",
    "InvalidCredentialsError",
    "WeakPasswordError",
]
