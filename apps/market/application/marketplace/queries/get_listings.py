"""Get listings query."""

from __future__ import annotations

from typing import TYPE_CHECKING

from apps.market.application.marketplace.dto import ListingView
from apps.market.application.marketplace.services import parse_category_filter

if TYPE_CHECKING:
    from apps.market.application.marketplace.ports import ListingGateway


class GetListingsQuery:
    """전체 마켓 리스팅 조회 쿼리 (최근 등록순)."""

    def __init__(self, listing_gateway: "ListingGateway") -> None:
        self._listings = listing_gateway

    async def execute(
        self, category: str | None = None, *, limit: int | None = None
    ) -> list[ListingView]:
        """
        Args:
            category: 카테고리 ('all' 또는 None 이면 전체)
            limit: 최대 개수
        """
        listings = await self._listings.list_listings(
            category=parse_category_filter(category),
            limit=limit,
        )
        return [ListingView.from_entity(listing) for listing in listings]
