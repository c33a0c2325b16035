"""GetSessionContextQuery 테스트."""

from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from apps.market.application.common.exceptions import GatewayError
from apps.market.application.session.queries import GetSessionContextQuery
from apps.market.domain.entities import Character

pytestmark = pytest.mark.asyncio


@pytest.fixture
def mock_character_gateway() -> AsyncMock:
    gateway = AsyncMock()
    gateway.get_active_by_user = AsyncMock(return_value=None)
    gateway.list_permits = AsyncMock(return_value=[])
    return gateway


class TestGetSessionContextQuery:
    async def test_anonymous(self, mock_character_gateway: AsyncMock) -> None:
        query = GetSessionContextQuery(character_gateway=mock_character_gateway)

        context = await query.execute(None)

        assert not context.authenticated
        assert not context.has_character
        mock_character_gateway.get_active_by_user.assert_not_awaited()

    async def test_loads_character_and_permits(self, mock_character_gateway: AsyncMock) -> None:
        user_id = uuid4()
        character = Character(user_id=user_id, name="Aldric", race="human", guild="mercenary")
        mock_character_gateway.get_active_by_user.return_value = character
        mock_character_gateway.list_permits.return_value = ["weapon", "armour"]
        query = GetSessionContextQuery(character_gateway=mock_character_gateway)

        context = await query.execute(user_id)

        assert context.authenticated
        assert context.character is character
        assert context.has_permit("weapon")
        assert not context.has_permit("blacksmith")
        assert context.notice is None
        mock_character_gateway.list_permits.assert_awaited_once_with(character.id)

    async def test_no_character(self, mock_character_gateway: AsyncMock) -> None:
        query = GetSessionContextQuery(character_gateway=mock_character_gateway)

        context = await query.execute(uuid4())

        assert context.authenticated
        assert not context.has_character
        mock_character_gateway.list_permits.assert_not_awaited()

    async def test_gateway_failure_becomes_notice(
        self, mock_character_gateway: AsyncMock
    ) -> None:
        """조회 실패 시 캐릭터 없음으로 처리하고 안내 메시지를 남깁니다."""
        mock_character_gateway.get_active_by_user.side_effect = GatewayError("connection lost")
        query = GetSessionContextQuery(character_gateway=mock_character_gateway)

        context = await query.execute(uuid4())

        assert context.authenticated
        assert not context.has_character
        assert context.notice == "Failed to load character data: connection lost"
