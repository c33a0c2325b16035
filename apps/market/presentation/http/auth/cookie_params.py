"""Cookie Parameters.

인증 쿠키 설정을 관리합니다.
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING

from apps.market.setup.config import get_settings

if TYPE_CHECKING:
    from fastapi import Response

# Cookie names (프론트엔드와 일치해야 함)
ACCESS_COOKIE_NAME = "cm_access"

# Cookie settings
COOKIE_PATH = "/"
COOKIE_SAMESITE = "lax"


def get_cookie_params() -> dict:
    """쿠키 공통 파라미터."""
    settings = get_settings()
    params = {
        "path": COOKIE_PATH,
        "httponly": True,
        "secure": settings.cookie_secure,
        "samesite": COOKIE_SAMESITE,
    }
    if settings.cookie_domain:
        params["domain"] = settings.cookie_domain
    return params


def set_auth_cookie(response: "Response", *, access_token: str, expires_at: int) -> None:
    """인증 쿠키 설정."""
    response.set_cookie(
        key=ACCESS_COOKIE_NAME,
        value=access_token,
        max_age=max(expires_at - int(time.time()), 1),
        **get_cookie_params(),
    )


def clear_auth_cookie(response: "Response") -> None:
    """인증 쿠키 삭제."""
    base_params = get_cookie_params()
    # httponly는 delete_cookie에서 지원 안 함
    del base_params["httponly"]

    response.delete_cookie(ACCESS_COOKIE_NAME, **base_params)
