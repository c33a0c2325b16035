"""SQLAlchemy registry for the market schema."""

from sqlalchemy import MetaData
from sqlalchemy.orm import registry

MARKET_SCHEMA = "market"

metadata = MetaData(schema=MARKET_SCHEMA)
mapper_registry = registry(metadata=metadata)
