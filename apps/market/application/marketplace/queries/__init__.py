"""Marketplace queries."""

from apps.market.application.marketplace.queries.get_listings import GetListingsQuery
from apps.market.application.marketplace.queries.get_local_listings import (
    GetLocalListingsQuery,
)

__all__ = ["GetListingsQuery", "GetLocalListingsQuery"]
