"""퍼밋 관련 공통 예외."""

from __future__ import annotations

from apps.market.application.common.exceptions.base import ForbiddenError


class PermitRequiredError(ForbiddenError):
    """필요한 퍼밋 미보유."""

    code = "PERMIT_REQUIRED"

    def __init__(self, permit_type: str) -> None:
        self.permit_type = permit_type
        super().__init__(f"Permit Required: a {permit_type} permit is needed.")
