"""Persistence 어댑터 테스트 (DB 연결 없음).

매퍼 초기화, 테이블 스키마, DB 예외 → GatewayError 변환을 검증합니다.
"""

from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from apps.market.application.common.exceptions import GatewayError
from apps.market.domain.entities import Character
from apps.market.domain.value_objects import Money
from apps.market.infrastructure.persistence_postgres import (
    MARKET_SCHEMA,
    metadata,
    start_mappers,
)
from apps.market.infrastructure.persistence_postgres.adapters import (
    SqlaCharacterGateway,
    SqlaListingGateway,
    SqlaTransactionManager,
)
from apps.market.infrastructure.persistence_postgres.adapters.errors import (
    translate_db_errors,
)


@pytest.fixture(scope="module", autouse=True)
def mappers() -> None:
    start_mappers()


class TestMappings:
    def test_start_mappers_is_idempotent(self) -> None:
        start_mappers()

        assert hasattr(Character, "__mapper__")

    def test_mapped_entity_still_constructs(self) -> None:
        character = Character(user_id=uuid4(), name="Aldric", race="human", guild="scout")

        assert character.is_active
        assert character.guild_rank == "recruit"

    def test_tables_live_in_market_schema(self) -> None:
        names = {table.name for table in metadata.sorted_tables}

        assert names == {
            "accounts",
            "characters",
            "character_permits",
            "character_items",
            "marketplace_items",
            "retired_characters",
            "dead_characters",
        }
        assert all(table.schema == MARKET_SCHEMA for table in metadata.sorted_tables)

    def test_single_active_character_index(self) -> None:
        characters = metadata.tables[f"{MARKET_SCHEMA}.characters"]
        index = next(i for i in characters.indexes if i.name == "uq_characters_active_user")

        assert index.unique
        assert [c.name for c in index.columns] == ["user_id"]

    def test_seller_character_id_survives_archiving(self) -> None:
        listings = metadata.tables[f"{MARKET_SCHEMA}.marketplace_items"]

        assert not listings.c.seller_character_id.foreign_keys


@pytest.mark.asyncio
class TestErrorTranslation:
    async def test_sqlalchemy_error_becomes_gateway_error(self) -> None:
        @translate_db_errors
        async def failing() -> None:
            raise OperationalError("SELECT 1", {}, Exception("connection refused"))

        with pytest.raises(GatewayError) as exc_info:
            await failing()

        assert exc_info.value.message == "Backend request failed (OperationalError)"

    async def test_gateway_query_failure(self) -> None:
        session = MagicMock()
        session.execute = AsyncMock(
            side_effect=OperationalError("SELECT", {}, Exception("timeout"))
        )
        gateway = SqlaCharacterGateway(session)

        with pytest.raises(GatewayError):
            await gateway.get_active_by_user(uuid4())

    async def test_commit_failure_rolls_back(self) -> None:
        session = MagicMock()
        session.commit = AsyncMock(side_effect=IntegrityError("INSERT", {}, Exception("dup")))
        session.rollback = AsyncMock()
        tx = SqlaTransactionManager(session)

        with pytest.raises(GatewayError):
            await tx.commit()

        session.rollback.assert_awaited_once()


@pytest.mark.asyncio
class TestNpcStockLookup:
    async def test_template_lookup_matches_price_and_category(self) -> None:
        session = MagicMock()
        session.execute = AsyncMock(return_value=MagicMock())
        gateway = SqlaListingGateway(session)

        await gateway.find_npc_stock("Shortsword", price=Money(4, 6), category="weapons")

        stmt = session.execute.await_args.args[0]
        assert "crowns = " in str(stmt)
        assert {"Shortsword", 4, 6, "weapons"} <= set(stmt.compile().params.values())

    async def test_name_only_lookup(self) -> None:
        session = MagicMock()
        session.execute = AsyncMock(return_value=MagicMock())
        gateway = SqlaListingGateway(session)

        await gateway.find_npc_stock("Longbow")

        stmt = session.execute.await_args.args[0]
        assert "crowns = " not in str(stmt)
        assert "category = " not in str(stmt)
