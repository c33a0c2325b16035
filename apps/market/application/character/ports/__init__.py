"""Character Ports."""

from apps.market.application.character.ports.character_gateway import CharacterGateway
from apps.market.application.character.ports.inventory_gateway import InventoryGateway

__all__ = ["CharacterGateway", "InventoryGateway"]
