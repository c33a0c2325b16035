"""값 검증 도메인 예외."""

from apps.market.domain.exceptions.base import DomainError


class InvalidEmailError(DomainError):
    """유효하지 않은 이메일."""
