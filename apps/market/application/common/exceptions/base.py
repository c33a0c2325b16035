"""Base application exceptions.

HTTP 계층은 카테고리 클래스 단위로 상태 코드를 매핑하고
응답 code는 각 예외의 ``code`` 속성을 사용합니다.
"""

from __future__ import annotations


class ApplicationError(Exception):
    """애플리케이션 계층 기본 예외."""

    code = "APPLICATION_ERROR"

    def __init__(self, message: str = "Application error occurred") -> None:
        self.message = message
        super().__init__(message)


class ValidationError(ApplicationError):
    """사용자 입력 검증 실패 (쓰기 전에 차단)."""

    code = "VALIDATION_ERROR"


class AuthenticationError(ApplicationError):
    """인증 실패."""

    code = "UNAUTHORIZED"


class ForbiddenError(ApplicationError):
    """권한 없음."""

    code = "FORBIDDEN"


class NotFoundError(ApplicationError):
    """대상 없음."""

    code = "NOT_FOUND"


class ConflictError(ApplicationError):
    """현재 상태와 충돌."""

    code = "CONFLICT"


class FeatureDisabledError(NotFoundError):
    """비활성화된 기능 (예: 개발용 엔드포인트)."""

    code = "FEATURE_DISABLED"

    def __init__(self) -> None:
        super().__init__("Not Found")
