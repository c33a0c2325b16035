"""Page access gate.

모든 페이지 라우트에 적용되는 라우터 의존성입니다. 판정 결과가
리다이렉트이면 AccessRedirect 를 발생시키고, 핸들러가 RedirectResponse 로
변환합니다.
"""

from __future__ import annotations

import logging
from uuid import UUID

from fastapi import Depends, Request

from apps.market.application.session.dto import SessionContext
from apps.market.application.session.queries import GetSessionContextQuery
from apps.market.application.session.services import AccessGate
from apps.market.presentation.http.auth.dependencies import get_optional_user_id
from apps.market.setup.dependencies import get_access_gate, get_session_context_query

logger = logging.getLogger(__name__)

NOTICE_HEADER = "X-Market-Notice"


class AccessRedirect(Exception):
    """게이트가 다른 경로로 이동을 결정함."""

    def __init__(self, location: str, notice: str | None = None) -> None:
        self.location = location
        self.notice = notice
        super().__init__(location)


async def enforce_access_gate(
    request: Request,
    user_id: UUID | None = Depends(get_optional_user_id),
    query: GetSessionContextQuery = Depends(get_session_context_query),
    gate: AccessGate = Depends(get_access_gate),
) -> SessionContext:
    """세션 컨텍스트를 조회하고 현재 경로에 대한 게이트 판정을 적용합니다.

    Returns:
        통과 시 SessionContext

    Raises:
        AccessRedirect: 다른 경로로 이동해야 함
    """
    context = await query.execute(user_id)
    decision = gate.decide(context.authenticated, context.has_character, request.url.path)

    if not decision.allowed:
        logger.debug(
            "Access gate redirect",
            extra={
                "path": request.url.path,
                "state": decision.state.value,
                "redirect_to": decision.redirect_to,
            },
        )
        raise AccessRedirect(decision.redirect_to, notice=context.notice)

    return context
