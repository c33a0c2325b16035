"""Marketplace Ports."""

from apps.market.application.marketplace.ports.listing_gateway import ListingGateway

__all__ = ["ListingGateway"]
