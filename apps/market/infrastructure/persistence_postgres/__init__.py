"""PostgreSQL persistence (SQLAlchemy imperative mapping)."""

from apps.market.infrastructure.persistence_postgres.mappings import start_mappers
from apps.market.infrastructure.persistence_postgres.registry import (
    MARKET_SCHEMA,
    mapper_registry,
    metadata,
)

__all__ = ["MARKET_SCHEMA", "mapper_registry", "metadata", "start_mappers"]
