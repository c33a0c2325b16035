"""Market Service Main Entry Point.

캐릭터 생애주기, 인벤토리, 마켓 거래를 제공하는 API 서버입니다.

분산 트레이싱 통합:
- FastAPI 자동 계측 (HTTP 요청/응답)
- SQLAlchemy 자동 계측 (쿼리)
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from apps.market.infrastructure.observability import (
    instrument_fastapi,
    instrument_sqlalchemy,
    setup_tracing,
    shutdown_tracing,
)
from apps.market.presentation.http.controllers import (
    auth,
    characters,
    community,
    dev,
    health,
    marketplace,
    pages,
    shop,
)
from apps.market.presentation.http.errors import register_exception_handlers
from apps.market.setup.config import get_settings
from apps.market.setup.database import dispose_engine, engine
from apps.market.setup.logging import setup_logging

logger = logging.getLogger(__name__)
settings = get_settings()


def _init_orm_mappers() -> None:
    """ORM 매퍼 초기화."""
    from apps.market.infrastructure.persistence_postgres import start_mappers

    start_mappers()
    logger.info("ORM mappers initialized")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """애플리케이션 라이프사이클 관리."""
    setup_logging(settings.log_level)
    logger.info("Starting Market API service", extra={"environment": settings.environment})

    # ORM 매퍼 초기화 (Imperative Mapping)
    _init_orm_mappers()

    # OpenTelemetry 설정
    if settings.otel_enabled:
        setup_tracing(
            settings.service_name,
            endpoint=settings.otel_exporter_endpoint,
            sampling_rate=settings.otel_sampling_rate,
            environment=settings.environment,
        )
        instrument_sqlalchemy(engine)

    yield

    # Cleanup
    logger.info("Shutting down Market API service")
    shutdown_tracing()
    await dispose_engine()


def create_app() -> FastAPI:
    """FastAPI 앱을 생성합니다."""
    app = FastAPI(
        title=settings.app_name,
        description="캐릭터 생애주기 및 마켓 거래 서비스",
        version="1.0.0",
        lifespan=lifespan,
    )

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # 예외 핸들러 등록
    register_exception_handlers(app)

    # OpenTelemetry FastAPI instrumentation
    if settings.otel_enabled:
        instrument_fastapi(app)

    # Routers
    app.include_router(health.router)
    app.include_router(auth.router, prefix="/api/v1")
    app.include_router(characters.router, prefix="/api/v1")
    app.include_router(marketplace.router, prefix="/api/v1")
    app.include_router(community.router, prefix="/api/v1")
    app.include_router(shop.router, prefix="/api/v1")
    app.include_router(dev.router, prefix="/api/v1")
    app.include_router(pages.router)
    # catch-all 은 마지막에 등록
    app.include_router(pages.fallback_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "apps.market.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
