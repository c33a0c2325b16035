"""OpenTelemetry Tracing - Market Service.

FastAPI 요청과 SQLAlchemy 쿼리를 계측합니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from fastapi import FastAPI
    from sqlalchemy.ext.asyncio import AsyncEngine

logger = logging.getLogger(__name__)

_tracer_provider: Any = None


def setup_tracing(
    service_name: str,
    *,
    endpoint: str,
    sampling_rate: float = 1.0,
    environment: str = "local",
    service_version: str = "1.0.0",
) -> bool:
    """OpenTelemetry 트레이싱 설정.

    Args:
        service_name: 서비스 이름
        endpoint: OTLP gRPC 수집기 주소
        sampling_rate: 샘플링 비율 (0.0~1.0)
        environment: 배포 환경
        service_version: 서비스 버전

    Returns:
        설정 성공 여부
    """
    global _tracer_provider

    try:
        from opentelemetry import trace
        from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import (
            OTLPSpanExporter,
        )
        from opentelemetry.sdk.resources import Resource
        from opentelemetry.sdk.trace import TracerProvider
        from opentelemetry.sdk.trace.export import BatchSpanProcessor
        from opentelemetry.sdk.trace.sampling import TraceIdRatioBased

        resource = Resource.create(
            {
                "service.name": service_name,
                "service.version": service_version,
                "deployment.environment": environment,
            }
        )

        provider = TracerProvider(resource=resource, sampler=TraceIdRatioBased(sampling_rate))
        provider.add_span_processor(
            BatchSpanProcessor(
                OTLPSpanExporter(endpoint=endpoint, insecure=True),
                max_queue_size=2048,
                max_export_batch_size=512,
                schedule_delay_millis=1000,
            )
        )

        trace.set_tracer_provider(provider)
        _tracer_provider = provider

        logger.info(
            "OpenTelemetry tracing configured",
            extra={
                "service": service_name,
                "endpoint": endpoint,
                "sampling_rate": sampling_rate,
            },
        )
        return True

    except ImportError as e:
        logger.warning(f"OpenTelemetry not available: {e}")
        return False
    except Exception as e:
        logger.error(f"Failed to configure tracing: {e}")
        return False


def instrument_fastapi(app: "FastAPI") -> None:
    """FastAPI 자동 계측."""
    try:
        from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor

        FastAPIInstrumentor.instrument_app(app, excluded_urls="health,ready")
        logger.info("FastAPI instrumentation enabled")

    except ImportError:
        logger.warning("FastAPIInstrumentor not available")
    except Exception as e:
        logger.error(f"Failed to instrument FastAPI: {e}")


def instrument_sqlalchemy(engine: "AsyncEngine") -> None:
    """SQLAlchemy 자동 계측 (쿼리 span)."""
    try:
        from opentelemetry.instrumentation.sqlalchemy import SQLAlchemyInstrumentor

        SQLAlchemyInstrumentor().instrument(engine=engine.sync_engine)
        logger.info("SQLAlchemy instrumentation enabled")

    except ImportError:
        logger.warning("SQLAlchemyInstrumentor not available")
    except Exception as e:
        logger.error(f"Failed to instrument SQLAlchemy: {e}")


def shutdown_tracing() -> None:
    """남은 span을 내보내고 트레이서를 종료합니다."""
    global _tracer_provider

    if _tracer_provider is None:
        return
    try:
        _tracer_provider.shutdown()
    except Exception as e:
        logger.warning(f"Tracer shutdown failed: {e}")
    finally:
        _tracer_provider = None
