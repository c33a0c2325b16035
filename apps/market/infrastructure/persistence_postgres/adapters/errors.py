"""DB 예외 변환.

SQLAlchemyError 를 애플리케이션 계층의 GatewayError 로 바꿉니다.
"""

from __future__ import annotations

import functools
import logging
from typing import Awaitable, Callable, ParamSpec, TypeVar

from sqlalchemy.exc import SQLAlchemyError

from apps.market.application.common.exceptions import GatewayError

logger = logging.getLogger(__name__)

P = ParamSpec("P")
R = TypeVar("R")


def translate_db_errors(func: Callable[P, Awaitable[R]]) -> Callable[P, Awaitable[R]]:
    """게이트웨이 메서드의 SQLAlchemyError 를 GatewayError 로 변환합니다."""

    @functools.wraps(func)
    async def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        try:
            return await func(*args, **kwargs)
        except SQLAlchemyError as e:
            logger.error(
                "Database operation failed",
                extra={"operation": func.__qualname__, "error": str(e)},
            )
            raise GatewayError(f"Backend request failed ({type(e).__name__})") from e

    return wrapper
