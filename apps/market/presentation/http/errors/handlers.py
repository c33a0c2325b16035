"""Exception Handlers.

도메인/애플리케이션 예외를 HTTP 응답으로 변환합니다.
Starlette 는 예외 클래스의 MRO 를 따라 핸들러를 찾으므로
카테고리 베이스 클래스 단위로 등록합니다.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, RedirectResponse
from sqlalchemy.exc import SQLAlchemyError

from apps.market.application.common.exceptions import (
    ApplicationError,
    AuthenticationError,
    ConflictError,
    ForbiddenError,
    GatewayError,
    NotFoundError,
    ValidationError,
)
from apps.market.domain.exceptions import (
    DomainError,
    InsufficientFundsError,
    InvalidEmailError,
    InvalidMoneyError,
)
from apps.market.presentation.http.gate import NOTICE_HEADER, AccessRedirect

logger = logging.getLogger(__name__)

_APPLICATION_STATUS: tuple[tuple[type[ApplicationError], int], ...] = (
    (ValidationError, 422),
    (AuthenticationError, 401),
    (ForbiddenError, 403),
    (NotFoundError, 404),
    (ConflictError, 409),
    (GatewayError, 503),
    (ApplicationError, 400),
)


def _error(status_code: int, detail: str, code: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"detail": detail, "code": code})


def _application_handler(status_code: int):
    async def handler(request: Request, exc: ApplicationError) -> JSONResponse:
        if status_code >= 500:
            logger.error(
                "Backend failure",
                extra={"path": request.url.path, "error": exc.message},
            )
        return _error(status_code, exc.message, exc.code)

    return handler


def register_exception_handlers(app: FastAPI) -> None:
    """예외 핸들러 등록."""

    @app.exception_handler(AccessRedirect)
    async def access_redirect_handler(request: Request, exc: AccessRedirect):
        response = RedirectResponse(url=exc.location)
        if exc.notice:
            response.headers[NOTICE_HEADER] = exc.notice
        return response

    for exc_class, status_code in _APPLICATION_STATUS:
        app.add_exception_handler(exc_class, _application_handler(status_code))

    @app.exception_handler(InvalidMoneyError)
    async def invalid_money_handler(request: Request, exc: InvalidMoneyError):
        return _error(422, exc.message, "INVALID_MONEY")

    @app.exception_handler(InvalidEmailError)
    async def invalid_email_handler(request: Request, exc: InvalidEmailError):
        return _error(422, exc.message, "INVALID_EMAIL")

    @app.exception_handler(InsufficientFundsError)
    async def insufficient_funds_handler(request: Request, exc: InsufficientFundsError):
        return _error(409, exc.message, "INSUFFICIENT_FUNDS")

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError):
        return _error(400, exc.message, "DOMAIN_ERROR")

    @app.exception_handler(SQLAlchemyError)
    async def sqlalchemy_error_handler(request: Request, exc: SQLAlchemyError):
        logger.error(
            "Unhandled database error",
            extra={"path": request.url.path, "error": str(exc)},
        )
        return _error(503, "Backend request failed", "BACKEND_UNAVAILABLE")
