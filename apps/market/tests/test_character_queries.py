"""Character query 단위 테스트."""

from datetime import datetime, timezone
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from apps.market.application.character.queries import (
    CheckBlacksmithAccessQuery,
    GetBranchMembersQuery,
    GetDeadCharactersQuery,
    GetHomeQuery,
    GetInventoryQuery,
    GetRecentlyDeadQuery,
)
from apps.market.application.character.services import CharacterPolicy
from apps.market.application.common.exceptions import (
    ActiveCharacterNotFoundError,
    PermitRequiredError,
)
from apps.market.domain.entities import (
    Character,
    CharacterItem,
    DeadCharacter,
    MarketplaceListing,
)

pytestmark = pytest.mark.asyncio


@pytest.fixture
def character() -> Character:
    return Character(
        user_id=uuid4(),
        name="Hilda",
        race="dwarf",
        guild="blacksmith",
        branch="Guildford",
        crowns=2,
        pennies=15,
    )


@pytest.fixture
def mock_character_gateway(character: Character) -> AsyncMock:
    gateway = AsyncMock()
    gateway.get_active_by_user = AsyncMock(return_value=character)
    gateway.list_permits = AsyncMock(return_value=[])
    return gateway


def _dead(name: str, user_id=None) -> DeadCharacter:
    living = Character(user_id=user_id or uuid4(), name=name, race="elf", guild="scout")
    return DeadCharacter.from_character(living, datetime.now(timezone.utc))


class TestGetInventoryQuery:
    async def test_returns_items_and_grantable_permits(
        self, mock_character_gateway: AsyncMock, character: Character
    ) -> None:
        inventory = AsyncMock()
        inventory.list_items.return_value = [
            CharacterItem(character_id=character.id, item_name="Hammer", quantity=2)
        ]
        query = GetInventoryQuery(mock_character_gateway, inventory, CharacterPolicy())

        view = await query.execute(character.user_id)

        # 과거 데이터의 pennies >= 12 는 정규화되어 보입니다
        assert (view.character.crowns, view.character.pennies) == (3, 3)
        assert [item.item_name for item in view.items] == ["Hammer"]
        assert view.permits == []
        assert view.grantable_permits == ["blacksmith"]

    async def test_without_character(self, mock_character_gateway: AsyncMock) -> None:
        mock_character_gateway.get_active_by_user.return_value = None
        query = GetInventoryQuery(mock_character_gateway, AsyncMock(), CharacterPolicy())

        with pytest.raises(ActiveCharacterNotFoundError):
            await query.execute(uuid4())


async def test_home_shows_latest_listings(
    mock_character_gateway: AsyncMock, character: Character
) -> None:
    listings = AsyncMock()
    listings.list_listings.return_value = [
        MarketplaceListing(name="Shortsword", crowns=4, pennies=6, category="weapons")
    ]
    query = GetHomeQuery(mock_character_gateway, listings, latest_limit=3)

    view = await query.execute(character.user_id)

    assert view.character.name == "Hilda"
    assert view.latest_listings[0].name == "Shortsword"
    listings.list_listings.assert_awaited_once_with(limit=3)


class TestGetBranchMembersQuery:
    async def test_excludes_caller(
        self, mock_character_gateway: AsyncMock, character: Character
    ) -> None:
        other = Character(user_id=uuid4(), name="Osric", race="human", guild="scout", branch="Guildford")
        mock_character_gateway.list_branch_members.return_value = [other]
        query = GetBranchMembersQuery(mock_character_gateway)

        view = await query.execute(character.user_id)

        assert view.branch == "Guildford"
        assert [m.name for m in view.members] == ["Osric"]
        mock_character_gateway.list_branch_members.assert_awaited_once_with(
            "Guildford", exclude_user_id=character.user_id
        )

    async def test_without_branch(
        self, mock_character_gateway: AsyncMock, character: Character
    ) -> None:
        character.branch = None
        query = GetBranchMembersQuery(mock_character_gateway)

        view = await query.execute(character.user_id)

        assert view.branch is None
        assert view.members == []
        mock_character_gateway.list_branch_members.assert_not_awaited()


async def test_recently_dead_uses_limit(mock_character_gateway: AsyncMock) -> None:
    mock_character_gateway.list_dead.return_value = [_dead("Fenwyn")]
    query = GetRecentlyDeadQuery(mock_character_gateway, limit=20)

    views = await query.execute()

    assert [v.name for v in views] == ["Fenwyn"]
    mock_character_gateway.list_dead.assert_awaited_once_with(limit=20)


class TestGetDeadCharactersQuery:
    async def test_owner_names(self, mock_character_gateway: AsyncMock) -> None:
        known_owner = uuid4()
        mock_character_gateway.list_dead.return_value = [
            _dead("Fenwyn", known_owner),
            _dead("Jorlyn"),
        ]
        accounts = AsyncMock()
        accounts.get_display_names.return_value = {known_owner: "Ada Lovelace"}
        query = GetDeadCharactersQuery(mock_character_gateway, accounts)

        views = await query.execute()

        assert views[0].owner_name == "Ada Lovelace"
        assert views[1].owner_name == "Unknown User"

    async def test_empty(self, mock_character_gateway: AsyncMock) -> None:
        mock_character_gateway.list_dead.return_value = []
        accounts = AsyncMock()
        query = GetDeadCharactersQuery(mock_character_gateway, accounts)

        assert await query.execute() == []
        accounts.get_display_names.assert_not_awaited()


class TestCheckBlacksmithAccessQuery:
    async def test_with_permit(
        self, mock_character_gateway: AsyncMock, character: Character
    ) -> None:
        mock_character_gateway.list_permits.return_value = ["blacksmith"]
        query = CheckBlacksmithAccessQuery(mock_character_gateway)

        result = await query.execute(character.user_id)

        assert result.message == "Welcome to the Blacksmith Shop, Hilda!"

    async def test_without_permit(
        self, mock_character_gateway: AsyncMock, character: Character
    ) -> None:
        mock_character_gateway.list_permits.return_value = ["weapon"]
        query = CheckBlacksmithAccessQuery(mock_character_gateway)

        with pytest.raises(PermitRequiredError):
            await query.execute(character.user_id)
