"""Marketplace command 단위 테스트.

검증 포인트:
1. 구매: 검증 순서, 잔액 정산, 판매자 입금, 재고 차감, 인벤토리 병합
2. 판매: 검증 실패 시 저장소 호출 없음, 인벤토리 차감
3. 회수/상점 재고/보충
"""

import random
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from apps.market.application.common.exceptions import PermitRequiredError
from apps.market.application.marketplace.commands import (
    BuyListingInteractor,
    DelistListingInteractor,
    GenerateListingsInteractor,
    ReplenishStockInteractor,
    SellItemInteractor,
    StockShopItemInteractor,
)
from apps.market.application.marketplace.dto import (
    BuyListingRequest,
    SellItemRequest,
    StockShopItemRequest,
)
from apps.market.application.marketplace.exceptions import (
    BuyerMismatchError,
    InvalidListingCountError,
    InventoryItemNotFoundError,
    ListingNotFoundError,
    ListingSoldOutError,
    NotListingSellerError,
    OwnListingPurchaseError,
    SaleValidationError,
)
from apps.market.application.marketplace.services import (
    RandomListingGenerator,
    SaleValidator,
)
from apps.market.domain.entities import Character, CharacterItem, MarketplaceListing
from apps.market.domain.exceptions import InsufficientFundsError
from apps.market.domain.services import PurchaseCalculator
from apps.market.domain.value_objects import Money

pytestmark = pytest.mark.asyncio


@pytest.fixture
def buyer() -> Character:
    return Character(
        user_id=uuid4(),
        name="Aldric",
        race="human",
        guild="mercenary",
        branch="Portsmouth",
        crowns=10,
        pennies=0,
    )


@pytest.fixture
def seller() -> Character:
    return Character(
        user_id=uuid4(),
        name="Brom",
        race="dwarf",
        guild="blacksmith",
        branch="Portsmouth",
        crowns=1,
        pennies=9,
    )


@pytest.fixture
def known_characters(buyer: Character) -> dict:
    """get_by_id 로 조회되는 (아카이브되지 않은) 캐릭터 행."""
    return {buyer.id: buyer}


@pytest.fixture
def mock_character_gateway(buyer: Character, known_characters: dict) -> AsyncMock:
    gateway = AsyncMock()
    gateway.get_active_by_user = AsyncMock(return_value=buyer)
    gateway.get_by_id = AsyncMock(
        side_effect=lambda character_id, **_: known_characters.get(character_id)
    )
    gateway.list_permits = AsyncMock(return_value=[])
    return gateway


@pytest.fixture
def mock_inventory_gateway() -> AsyncMock:
    gateway = AsyncMock()
    gateway.find_stack = AsyncMock(return_value=None)
    gateway.get_item = AsyncMock(return_value=None)
    return gateway


@pytest.fixture
def mock_listing_gateway() -> AsyncMock:
    gateway = AsyncMock()
    gateway.get = AsyncMock(return_value=None)
    gateway.find_npc_stock = AsyncMock(return_value=None)
    return gateway


@pytest.fixture
def buy_interactor(
    mock_character_gateway: AsyncMock,
    mock_inventory_gateway: AsyncMock,
    mock_listing_gateway: AsyncMock,
    mock_tx: AsyncMock,
) -> BuyListingInteractor:
    return BuyListingInteractor(
        character_gateway=mock_character_gateway,
        inventory_gateway=mock_inventory_gateway,
        listing_gateway=mock_listing_gateway,
        transaction_manager=mock_tx,
        calculator=PurchaseCalculator(),
    )


def _player_listing(seller: Character, **overrides) -> MarketplaceListing:
    fields = dict(
        name="Hammer",
        crowns=4,
        pennies=6,
        category="weapons",
        quantity=1,
        seller_user_id=seller.user_id,
        seller_character_id=seller.id,
    )
    fields.update(overrides)
    return MarketplaceListing(**fields)


class TestBuyListing:
    async def test_transfers_funds_and_item(
        self,
        buy_interactor: BuyListingInteractor,
        known_characters: dict,
        mock_inventory_gateway: AsyncMock,
        mock_listing_gateway: AsyncMock,
        mock_tx: AsyncMock,
        buyer: Character,
        seller: Character,
    ) -> None:
        listing = _player_listing(seller)
        mock_listing_gateway.get.return_value = listing
        known_characters[seller.id] = seller

        result = await buy_interactor.execute(
            buyer.user_id, BuyListingRequest(listing_id=listing.id, buyer_character_id=buyer.id)
        )

        assert result.message == "Item successfully purchased and added to inventory."
        # 10c 0p - 4c 6p = 5c 6p
        assert (buyer.crowns, buyer.pennies) == (5, 6)
        assert (result.crowns, result.pennies) == (5, 6)
        # 1c 9p + 4c 6p = 6c 3p
        assert (seller.crowns, seller.pennies) == (6, 3)
        assert listing.quantity == 0
        mock_listing_gateway.delete.assert_awaited_once_with(listing)
        added = mock_inventory_gateway.add_item.await_args.args[0]
        assert added.character_id == buyer.id
        assert added.item_name == "Hammer"
        assert added.quantity == 1
        mock_tx.commit.assert_awaited_once()

    async def test_npc_stock_kept_at_zero(
        self,
        buy_interactor: BuyListingInteractor,
        mock_listing_gateway: AsyncMock,
        mock_inventory_gateway: AsyncMock,
        buyer: Character,
    ) -> None:
        listing = MarketplaceListing(name="Shortsword", crowns=4, pennies=6, category="weapons")
        mock_listing_gateway.get.return_value = listing
        stack = CharacterItem(character_id=buyer.id, item_name="Shortsword", quantity=2)
        mock_inventory_gateway.find_stack.return_value = stack

        await buy_interactor.execute(
            buyer.user_id, BuyListingRequest(listing_id=listing.id, buyer_character_id=buyer.id)
        )

        assert listing.quantity == 0
        mock_listing_gateway.delete.assert_not_awaited()
        assert stack.quantity == 3
        mock_inventory_gateway.add_item.assert_not_awaited()

    async def test_buyer_mismatch(
        self, buy_interactor: BuyListingInteractor, mock_listing_gateway: AsyncMock, buyer: Character
    ) -> None:
        with pytest.raises(BuyerMismatchError):
            await buy_interactor.execute(
                buyer.user_id, BuyListingRequest(listing_id=uuid4(), buyer_character_id=uuid4())
            )

        mock_listing_gateway.get.assert_not_awaited()

    async def test_listing_not_found(
        self, buy_interactor: BuyListingInteractor, buyer: Character
    ) -> None:
        with pytest.raises(ListingNotFoundError):
            await buy_interactor.execute(
                buyer.user_id, BuyListingRequest(listing_id=uuid4(), buyer_character_id=buyer.id)
            )

    async def test_sold_out(
        self,
        buy_interactor: BuyListingInteractor,
        mock_listing_gateway: AsyncMock,
        buyer: Character,
        seller: Character,
    ) -> None:
        listing = _player_listing(seller, quantity=0)
        mock_listing_gateway.get.return_value = listing

        with pytest.raises(ListingSoldOutError):
            await buy_interactor.execute(
                buyer.user_id, BuyListingRequest(listing_id=listing.id, buyer_character_id=buyer.id)
            )

    async def test_own_listing(
        self, buy_interactor: BuyListingInteractor, mock_listing_gateway: AsyncMock, buyer: Character
    ) -> None:
        listing = _player_listing(buyer)
        mock_listing_gateway.get.return_value = listing

        with pytest.raises(OwnListingPurchaseError):
            await buy_interactor.execute(
                buyer.user_id, BuyListingRequest(listing_id=listing.id, buyer_character_id=buyer.id)
            )

    async def test_permit_required(
        self,
        buy_interactor: BuyListingInteractor,
        mock_character_gateway: AsyncMock,
        mock_listing_gateway: AsyncMock,
        mock_tx: AsyncMock,
        buyer: Character,
        seller: Character,
    ) -> None:
        listing = _player_listing(seller, required_permit="blacksmith")
        mock_listing_gateway.get.return_value = listing
        mock_character_gateway.list_permits.return_value = ["weapon", "armour"]

        with pytest.raises(PermitRequiredError) as exc_info:
            await buy_interactor.execute(
                buyer.user_id, BuyListingRequest(listing_id=listing.id, buyer_character_id=buyer.id)
            )

        assert exc_info.value.message == "Permit Required: a blacksmith permit is needed."
        assert (buyer.crowns, buyer.pennies) == (10, 0)
        mock_tx.commit.assert_not_awaited()

    async def test_insufficient_funds_leaves_state_unchanged(
        self,
        buy_interactor: BuyListingInteractor,
        mock_listing_gateway: AsyncMock,
        mock_inventory_gateway: AsyncMock,
        mock_tx: AsyncMock,
        buyer: Character,
        seller: Character,
    ) -> None:
        listing = _player_listing(seller, crowns=10, pennies=1)
        mock_listing_gateway.get.return_value = listing

        with pytest.raises(InsufficientFundsError):
            await buy_interactor.execute(
                buyer.user_id, BuyListingRequest(listing_id=listing.id, buyer_character_id=buyer.id)
            )

        assert (buyer.crowns, buyer.pennies) == (10, 0)
        assert listing.quantity == 1
        mock_inventory_gateway.add_item.assert_not_awaited()
        mock_tx.commit.assert_not_awaited()

    async def test_archived_seller_not_credited(
        self,
        buy_interactor: BuyListingInteractor,
        mock_character_gateway: AsyncMock,
        mock_listing_gateway: AsyncMock,
        buyer: Character,
        seller: Character,
    ) -> None:
        # seller 는 은퇴하여 characters 행이 없고, 같은 사용자가 새 캐릭터를 만든 상태
        successor = Character(
            user_id=seller.user_id, name="Brom II", race="dwarf", guild="scout", crowns=0
        )
        active_by_user = {buyer.user_id: buyer, seller.user_id: successor}
        mock_character_gateway.get_active_by_user.side_effect = (
            lambda user_id, **_: active_by_user.get(user_id)
        )
        listing = _player_listing(seller)
        mock_listing_gateway.get.return_value = listing

        await buy_interactor.execute(
            buyer.user_id, BuyListingRequest(listing_id=listing.id, buyer_character_id=buyer.id)
        )

        assert (buyer.crowns, buyer.pennies) == (5, 6)
        assert (successor.crowns, successor.pennies) == (0, 0)

    async def test_listing_without_seller_character_credits_active_character(
        self,
        buy_interactor: BuyListingInteractor,
        mock_character_gateway: AsyncMock,
        mock_listing_gateway: AsyncMock,
        known_characters: dict,
        buyer: Character,
        seller: Character,
    ) -> None:
        known_characters[seller.id] = seller
        active_by_user = {buyer.user_id: buyer, seller.user_id: seller}
        mock_character_gateway.get_active_by_user.side_effect = (
            lambda user_id, **_: active_by_user.get(user_id)
        )
        listing = _player_listing(seller, seller_character_id=None)
        mock_listing_gateway.get.return_value = listing

        await buy_interactor.execute(
            buyer.user_id, BuyListingRequest(listing_id=listing.id, buyer_character_id=buyer.id)
        )

        assert (seller.crowns, seller.pennies) == (6, 3)

    async def test_locks_characters_in_id_order(
        self,
        buy_interactor: BuyListingInteractor,
        mock_character_gateway: AsyncMock,
        mock_listing_gateway: AsyncMock,
        known_characters: dict,
        buyer: Character,
        seller: Character,
    ) -> None:
        known_characters[seller.id] = seller
        listing = _player_listing(seller)
        mock_listing_gateway.get.return_value = listing

        await buy_interactor.execute(
            buyer.user_id, BuyListingRequest(listing_id=listing.id, buyer_character_id=buyer.id)
        )

        calls = mock_character_gateway.get_by_id.await_args_list
        assert [c.args[0] for c in calls] == sorted([buyer.id, seller.id])
        assert all(c.kwargs == {"for_update": True} for c in calls)


@pytest.fixture
def sell_interactor(
    mock_character_gateway: AsyncMock,
    mock_inventory_gateway: AsyncMock,
    mock_listing_gateway: AsyncMock,
    mock_tx: AsyncMock,
) -> SellItemInteractor:
    return SellItemInteractor(
        character_gateway=mock_character_gateway,
        inventory_gateway=mock_inventory_gateway,
        listing_gateway=mock_listing_gateway,
        transaction_manager=mock_tx,
        validator=SaleValidator(),
    )


class TestSellItem:
    async def test_lists_part_of_stack(
        self,
        sell_interactor: SellItemInteractor,
        mock_inventory_gateway: AsyncMock,
        mock_listing_gateway: AsyncMock,
        buyer: Character,
    ) -> None:
        item = CharacterItem(character_id=buyer.id, item_name="Arrow", quantity=5)
        mock_inventory_gateway.get_item.return_value = item

        result = await sell_interactor.execute(
            buyer.user_id,
            SellItemRequest(
                character_item_id=item.id,
                price_crowns=0,
                price_pennies=3,
                category="weapons",
                quantity=2,
            ),
        )

        assert result.message == "Item(s) successfully listed on marketplace!"
        assert item.quantity == 3
        mock_inventory_gateway.delete_item.assert_not_awaited()
        listing = mock_listing_gateway.add.await_args.args[0]
        assert listing.quantity == 2
        assert listing.seller_character_id == buyer.id
        assert listing.seller_user_id == buyer.user_id

    async def test_selling_whole_stack_removes_item(
        self,
        sell_interactor: SellItemInteractor,
        mock_inventory_gateway: AsyncMock,
        buyer: Character,
    ) -> None:
        item = CharacterItem(character_id=buyer.id, item_name="Arrow", quantity=2)
        mock_inventory_gateway.get_item.return_value = item

        await sell_interactor.execute(
            buyer.user_id,
            SellItemRequest(item.id, price_crowns=1, price_pennies=0, category="misc", quantity=2),
        )

        mock_inventory_gateway.delete_item.assert_awaited_once_with(item)

    async def test_invalid_price_before_any_lookup(
        self,
        sell_interactor: SellItemInteractor,
        mock_character_gateway: AsyncMock,
        mock_tx: AsyncMock,
        buyer: Character,
    ) -> None:
        with pytest.raises(SaleValidationError):
            await sell_interactor.execute(
                buyer.user_id,
                SellItemRequest(uuid4(), price_crowns=1, price_pennies=12, category="misc"),
            )

        mock_character_gateway.get_active_by_user.assert_not_awaited()
        mock_tx.commit.assert_not_awaited()

    async def test_price_checked_before_category(
        self, sell_interactor: SellItemInteractor, buyer: Character
    ) -> None:
        with pytest.raises(SaleValidationError) as exc_info:
            await sell_interactor.execute(
                buyer.user_id,
                SellItemRequest(uuid4(), price_crowns=0, price_pennies=0, category=""),
            )

        assert exc_info.value.message == "Price cannot be zero."

    async def test_item_of_another_character(
        self,
        sell_interactor: SellItemInteractor,
        mock_inventory_gateway: AsyncMock,
        buyer: Character,
    ) -> None:
        mock_inventory_gateway.get_item.return_value = CharacterItem(
            character_id=uuid4(), item_name="Arrow", quantity=1
        )

        with pytest.raises(InventoryItemNotFoundError):
            await sell_interactor.execute(
                buyer.user_id,
                SellItemRequest(uuid4(), price_crowns=1, price_pennies=0, category="misc"),
            )

    async def test_quantity_over_owned(
        self,
        sell_interactor: SellItemInteractor,
        mock_inventory_gateway: AsyncMock,
        mock_listing_gateway: AsyncMock,
        buyer: Character,
    ) -> None:
        item = CharacterItem(character_id=buyer.id, item_name="Arrow", quantity=2)
        mock_inventory_gateway.get_item.return_value = item

        with pytest.raises(SaleValidationError) as exc_info:
            await sell_interactor.execute(
                buyer.user_id,
                SellItemRequest(item.id, price_crowns=1, price_pennies=0, category="misc", quantity=3),
            )

        assert exc_info.value.message == "Quantity to sell must be between 1 and 2."
        assert item.quantity == 2
        mock_listing_gateway.add.assert_not_awaited()


class TestDelistListing:
    async def test_returns_to_inventory(
        self,
        mock_character_gateway: AsyncMock,
        mock_inventory_gateway: AsyncMock,
        mock_listing_gateway: AsyncMock,
        mock_tx: AsyncMock,
        buyer: Character,
    ) -> None:
        listing = _player_listing(buyer, quantity=3)
        mock_listing_gateway.get.return_value = listing
        interactor = DelistListingInteractor(
            mock_character_gateway, mock_inventory_gateway, mock_listing_gateway, mock_tx
        )

        await interactor.execute(buyer.user_id, listing.id)

        returned = mock_inventory_gateway.add_item.await_args.args[0]
        assert returned.quantity == 3
        assert returned.character_id == buyer.id
        mock_listing_gateway.delete.assert_awaited_once_with(listing)
        mock_tx.commit.assert_awaited_once()

    async def test_only_seller(
        self,
        mock_character_gateway: AsyncMock,
        mock_inventory_gateway: AsyncMock,
        mock_listing_gateway: AsyncMock,
        mock_tx: AsyncMock,
        buyer: Character,
        seller: Character,
    ) -> None:
        mock_listing_gateway.get.return_value = _player_listing(seller)
        interactor = DelistListingInteractor(
            mock_character_gateway, mock_inventory_gateway, mock_listing_gateway, mock_tx
        )

        with pytest.raises(NotListingSellerError):
            await interactor.execute(buyer.user_id, uuid4())

        mock_listing_gateway.delete.assert_not_awaited()


class TestShopStock:
    async def test_stock_new_item(
        self, mock_listing_gateway: AsyncMock, mock_tx: AsyncMock
    ) -> None:
        interactor = StockShopItemInteractor(mock_listing_gateway, mock_tx, SaleValidator())

        result = await interactor.execute(
            StockShopItemRequest(name="Longbow", crowns=6, pennies=0, category="weapons", quantity=2)
        )

        assert result.message == "2 Longbow(s) successfully added to marketplace."
        listing = mock_listing_gateway.add.await_args.args[0]
        assert listing.is_npc_stock
        assert listing.quantity == 2

    async def test_stock_existing_item_adds_quantity(
        self, mock_listing_gateway: AsyncMock, mock_tx: AsyncMock
    ) -> None:
        existing = MarketplaceListing(
            name="Longbow", crowns=5, pennies=0, category="weapons", quantity=1
        )
        mock_listing_gateway.find_npc_stock.return_value = existing
        interactor = StockShopItemInteractor(mock_listing_gateway, mock_tx, SaleValidator())

        await interactor.execute(
            StockShopItemRequest(name="Longbow", crowns=6, pennies=3, category="weapons", quantity=2)
        )

        assert existing.quantity == 3
        assert (existing.crowns, existing.pennies) == (6, 3)
        mock_listing_gateway.add.assert_not_awaited()

    async def test_replenish_creates_missing_stock(
        self, mock_listing_gateway: AsyncMock, mock_tx: AsyncMock
    ) -> None:
        interactor = ReplenishStockInteractor(mock_listing_gateway, mock_tx)

        result = await interactor.execute()

        assert result.message == "Shortsword replenishment check complete."
        created = mock_listing_gateway.add.await_args.args[0]
        assert created.name == "Shortsword"
        assert (created.crowns, created.pennies, created.quantity) == (4, 6, 1)

    async def test_replenish_sold_out_stock(
        self, mock_listing_gateway: AsyncMock, mock_tx: AsyncMock
    ) -> None:
        sold_out = MarketplaceListing(
            name="Shortsword", crowns=4, pennies=6, category="weapons", quantity=0
        )
        mock_listing_gateway.find_npc_stock.return_value = sold_out
        interactor = ReplenishStockInteractor(mock_listing_gateway, mock_tx)

        await interactor.execute()

        assert sold_out.quantity == 1
        mock_listing_gateway.add.assert_not_awaited()

    async def test_replenish_leaves_stocked_listing(
        self, mock_listing_gateway: AsyncMock, mock_tx: AsyncMock
    ) -> None:
        stocked = MarketplaceListing(
            name="Shortsword", crowns=4, pennies=6, category="weapons", quantity=4
        )
        mock_listing_gateway.find_npc_stock.return_value = stocked
        interactor = ReplenishStockInteractor(mock_listing_gateway, mock_tx)

        await interactor.execute()

        assert stocked.quantity == 4

    async def test_replenish_matches_template_price_and_category(
        self, mock_listing_gateway: AsyncMock, mock_tx: AsyncMock
    ) -> None:
        interactor = ReplenishStockInteractor(mock_listing_gateway, mock_tx)

        await interactor.execute()

        mock_listing_gateway.find_npc_stock.assert_awaited_once_with(
            "Shortsword", price=Money(4, 6), category="weapons"
        )


class TestGenerateListings:
    async def test_attributed_to_caller(
        self,
        mock_character_gateway: AsyncMock,
        mock_listing_gateway: AsyncMock,
        mock_tx: AsyncMock,
        buyer: Character,
    ) -> None:
        interactor = GenerateListingsInteractor(
            mock_character_gateway,
            mock_listing_gateway,
            mock_tx,
            RandomListingGenerator(random.Random(3)),
        )

        result = await interactor.execute(buyer.user_id, 5)

        assert result.message == "5 random items added to marketplace."
        listings = mock_listing_gateway.add_many.await_args.args[0]
        assert len(listings) == 5
        assert all(listing.seller_character_id == buyer.id for listing in listings)

    @pytest.mark.parametrize("count", [0, 51])
    async def test_count_bounds(
        self,
        mock_character_gateway: AsyncMock,
        mock_listing_gateway: AsyncMock,
        mock_tx: AsyncMock,
        count: int,
    ) -> None:
        interactor = GenerateListingsInteractor(
            mock_character_gateway,
            mock_listing_gateway,
            mock_tx,
            RandomListingGenerator(),
            max_count=50,
        )

        with pytest.raises(InvalidListingCountError):
            await interactor.execute(uuid4(), count)
