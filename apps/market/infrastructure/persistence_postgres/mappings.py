"""ORM Mappings.

Imperative Mapping을 사용하여 도메인 엔티티를 테이블에 매핑합니다.
도메인 엔티티는 SQLAlchemy에 의존하지 않습니다. 컬럼 이름과
속성 이름이 같으므로 properties 없이 기본 매핑을 사용합니다.
"""

from sqlalchemy import Table

from apps.market.domain.entities import (
    Account,
    Character,
    CharacterItem,
    CharacterPermit,
    DeadCharacter,
    MarketplaceListing,
    RetiredCharacter,
)
from apps.market.infrastructure.persistence_postgres.registry import mapper_registry
from apps.market.infrastructure.persistence_postgres.tables import (
    accounts_table,
    character_items_table,
    character_permits_table,
    characters_table,
    dead_characters_table,
    marketplace_items_table,
    retired_characters_table,
)

ENTITY_TABLES: tuple[tuple[type, Table], ...] = (
    (Account, accounts_table),
    (Character, characters_table),
    (CharacterPermit, character_permits_table),
    (CharacterItem, character_items_table),
    (MarketplaceListing, marketplace_items_table),
    (RetiredCharacter, retired_characters_table),
    (DeadCharacter, dead_characters_table),
)


def _map(entity: type, table: Table) -> None:
    if hasattr(entity, "__mapper__"):
        return
    mapper_registry.map_imperatively(entity, table)


def start_mappers() -> None:
    """모든 매퍼 시작.

    앱 부팅 시 한 번만 호출됩니다. 이미 매핑된 엔티티는 건너뜁니다.
    """
    for entity, table in ENTITY_TABLES:
        _map(entity, table)
