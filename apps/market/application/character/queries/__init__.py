"""Character queries."""

from apps.market.application.character.queries.check_blacksmith_access import (
    CheckBlacksmithAccessQuery,
)
from apps.market.application.character.queries.community import (
    GetBranchMembersQuery,
    GetDeadCharactersQuery,
    GetRecentlyDeadQuery,
)
from apps.market.application.character.queries.get_home import GetHomeQuery
from apps.market.application.character.queries.get_inventory import GetInventoryQuery

__all__ = [
    "CheckBlacksmithAccessQuery",
    "GetBranchMembersQuery",
    "GetDeadCharactersQuery",
    "GetHomeQuery",
    "GetInventoryQuery",
    "GetRecentlyDeadQuery",
]
