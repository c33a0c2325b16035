"""SQLAlchemy adapters."""

from apps.market.infrastructure.persistence_postgres.adapters.account_gateway_sqla import (
    SqlaAccountGateway,
)
from apps.market.infrastructure.persistence_postgres.adapters.character_gateway_sqla import (
    SqlaCharacterGateway,
)
from apps.market.infrastructure.persistence_postgres.adapters.inventory_gateway_sqla import (
    SqlaInventoryGateway,
)
from apps.market.infrastructure.persistence_postgres.adapters.listing_gateway_sqla import (
    SqlaListingGateway,
)
from apps.market.infrastructure.persistence_postgres.adapters.transaction_manager_sqla import (
    SqlaTransactionManager,
)

__all__ = [
    "SqlaAccountGateway",
    "SqlaCharacterGateway",
    "SqlaInventoryGateway",
    "SqlaListingGateway",
    "SqlaTransactionManager",
]
