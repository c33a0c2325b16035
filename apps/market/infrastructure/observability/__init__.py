"""Observability (OpenTelemetry)."""

from apps.market.infrastructure.observability.tracing import (
    instrument_fastapi,
    instrument_sqlalchemy,
    setup_tracing,
    shutdown_tracing,
)

__all__ = [
    "instrument_fastapi",
    "instrument_sqlalchemy",
    "setup_tracing",
    "shutdown_tracing",
]
