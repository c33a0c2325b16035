"""Gateway (backend) exceptions."""

from __future__ import annotations

from apps.market.application.common.exceptions.base import ApplicationError


class GatewayError(ApplicationError):
    """저장소/백엔드 호출 실패.

    재시도 없이 작업을 중단하고 사용자에게 메시지로 전달합니다.
    """

    code = "BACKEND_UNAVAILABLE"

    def __init__(self, message: str = "Backend request failed") -> None:
        super().__init__(message)
