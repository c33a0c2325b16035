"""Auth dependencies.

액세스 토큰은 cm_access 쿠키 또는 Authorization: Bearer 헤더로 전달됩니다.
"""

from __future__ import annotations

import hmac
import logging
from typing import Optional
from uuid import UUID

from fastapi import Depends, Header, Request

from apps.market.application.common.exceptions import (
    AuthenticationError,
    AuthenticationRequiredError,
    FeatureDisabledError,
)
from apps.market.application.marketplace.exceptions import InvalidInternalTokenError
from apps.market.infrastructure.security import JwtTokenService
from apps.market.presentation.http.auth.cookie_params import ACCESS_COOKIE_NAME
from apps.market.setup.config import Settings, get_settings
from apps.market.setup.dependencies import get_token_service

logger = logging.getLogger(__name__)


def _parse_bearer(header_value: Optional[str]) -> Optional[str]:
    """Bearer 토큰에서 실제 토큰 값을 추출합니다."""
    if not header_value:
        return None
    scheme, _, token = header_value.partition(" ")
    if scheme.lower() != "bearer" or not token:
        return None
    return token.strip()


def extract_access_token(request: Request, authorization: Optional[str]) -> Optional[str]:
    """헤더 우선, 없으면 쿠키에서 토큰을 꺼냅니다."""
    return _parse_bearer(authorization) or request.cookies.get(ACCESS_COOKIE_NAME) or None


def get_optional_user_id(
    request: Request,
    authorization: Optional[str] = Header(None, alias="Authorization"),
    token_service: JwtTokenService = Depends(get_token_service),
) -> UUID | None:
    """로그인 사용자 ID (없거나 유효하지 않으면 None)."""
    token = extract_access_token(request, authorization)
    if not token:
        return None
    try:
        return token_service.decode_user_id(token)
    except AuthenticationError as e:
        logger.debug("Ignoring invalid access token", extra={"reason": e.message})
        return None


def get_auth_user_id(
    request: Request,
    authorization: Optional[str] = Header(None, alias="Authorization"),
    token_service: JwtTokenService = Depends(get_token_service),
) -> UUID:
    """로그인 사용자 ID.

    Raises:
        AuthenticationRequiredError: 토큰 없음
        InvalidTokenError: 유효하지 않은 토큰
        TokenExpiredError: 만료된 토큰
    """
    token = extract_access_token(request, authorization)
    if not token:
        raise AuthenticationRequiredError()
    return token_service.decode_user_id(token)


def require_internal_token(
    x_internal_token: Optional[str] = Header(None, alias="X-Internal-Token"),
    settings: Settings = Depends(get_settings),
) -> None:
    """내부 API 토큰 확인 (설정되지 않았으면 통과)."""
    expected = settings.internal_api_token
    if not expected:
        return
    if not x_internal_token or not hmac.compare_digest(x_internal_token, expected):
        raise InvalidInternalTokenError()


def require_dev_tools(settings: Settings = Depends(get_settings)) -> None:
    """개발용 엔드포인트 활성화 확인."""
    if not settings.dev_tools_enabled:
        raise FeatureDisabledError()
