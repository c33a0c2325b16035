"""Dependency injection setup."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from apps.market.application.auth.commands import SignInInteractor, SignUpInteractor
from apps.market.application.character.commands import (
    AddPenniesInteractor,
    CreateCharacterInteractor,
    DeclareDeathInteractor,
    GenerateCharactersInteractor,
    GrantPermitInteractor,
    RetireCharacterInteractor,
)
from apps.market.application.character.queries import (
    CheckBlacksmithAccessQuery,
    GetBranchMembersQuery,
    GetDeadCharactersQuery,
    GetHomeQuery,
    GetInventoryQuery,
    GetRecentlyDeadQuery,
)
from apps.market.application.character.services import (
    CharacterPolicy,
    RandomCharacterGenerator,
)
from apps.market.application.marketplace.commands import (
    BuyListingInteractor,
    DelistListingInteractor,
    GenerateListingsInteractor,
    ReplenishStockInteractor,
    SellItemInteractor,
    StockShopItemInteractor,
)
from apps.market.application.marketplace.queries import (
    GetListingsQuery,
    GetLocalListingsQuery,
)
from apps.market.application.marketplace.services import (
    RandomListingGenerator,
    SaleValidator,
)
from apps.market.application.session.queries import GetSessionContextQuery
from apps.market.application.session.services import AccessGate
from apps.market.domain.services import PurchaseCalculator
from apps.market.domain.value_objects import Money
from apps.market.infrastructure.persistence_postgres.adapters import (
    SqlaAccountGateway,
    SqlaCharacterGateway,
    SqlaInventoryGateway,
    SqlaListingGateway,
    SqlaTransactionManager,
)
from apps.market.infrastructure.security import BcryptPasswordHasher, JwtTokenService
from apps.market.setup.config import Settings, get_settings
from apps.market.setup.database import get_db_session

# Type alias for dependency injection
SessionDep = Annotated[AsyncSession, Depends(get_db_session)]
SettingsDep = Annotated[Settings, Depends(get_settings)]


# Services
def get_token_service(settings: SettingsDep) -> JwtTokenService:
    """JwtTokenService 인스턴스를 반환합니다."""
    return JwtTokenService(
        secret_key=settings.jwt_secret_key,
        algorithm=settings.jwt_algorithm,
        issuer=settings.jwt_issuer,
        audience=settings.jwt_audience,
        access_token_expire_minutes=settings.access_token_expire_minutes,
    )


def get_password_hasher(settings: SettingsDep) -> BcryptPasswordHasher:
    return BcryptPasswordHasher(rounds=settings.bcrypt_rounds)


def get_character_policy(settings: SettingsDep) -> CharacterPolicy:
    return CharacterPolicy(default_branch=settings.default_branch)


def get_access_gate() -> AccessGate:
    return AccessGate()


# Session
def get_session_context_query(session: SessionDep) -> GetSessionContextQuery:
    """GetSessionContextQuery 인스턴스를 반환합니다."""
    return GetSessionContextQuery(character_gateway=SqlaCharacterGateway(session))


# Auth
def get_sign_up_interactor(
    session: SessionDep,
    settings: SettingsDep,
    hasher: BcryptPasswordHasher = Depends(get_password_hasher),
    token_service: JwtTokenService = Depends(get_token_service),
) -> SignUpInteractor:
    """SignUpInteractor 인스턴스를 반환합니다."""
    return SignUpInteractor(
        account_gateway=SqlaAccountGateway(session),
        password_hasher=hasher,
        token_issuer=token_service,
        transaction_manager=SqlaTransactionManager(session),
        min_password_length=settings.password_min_length,
    )


def get_sign_in_interactor(
    session: SessionDep,
    hasher: BcryptPasswordHasher = Depends(get_password_hasher),
    token_service: JwtTokenService = Depends(get_token_service),
) -> SignInInteractor:
    """SignInInteractor 인스턴스를 반환합니다."""
    return SignInInteractor(
        account_gateway=SqlaAccountGateway(session),
        password_hasher=hasher,
        token_issuer=token_service,
    )


# Character commands
def get_create_character_interactor(
    session: SessionDep,
    settings: SettingsDep,
    policy: CharacterPolicy = Depends(get_character_policy),
) -> CreateCharacterInteractor:
    """CreateCharacterInteractor 인스턴스를 반환합니다."""
    return CreateCharacterInteractor(
        character_gateway=SqlaCharacterGateway(session),
        transaction_manager=SqlaTransactionManager(session),
        policy=policy,
        starting_balance=Money(settings.starting_crowns, settings.starting_pennies),
    )


def get_retire_character_interactor(session: SessionDep) -> RetireCharacterInteractor:
    return RetireCharacterInteractor(
        character_gateway=SqlaCharacterGateway(session),
        transaction_manager=SqlaTransactionManager(session),
    )


def get_declare_death_interactor(session: SessionDep) -> DeclareDeathInteractor:
    return DeclareDeathInteractor(
        character_gateway=SqlaCharacterGateway(session),
        transaction_manager=SqlaTransactionManager(session),
    )


def get_add_pennies_interactor(session: SessionDep, settings: SettingsDep) -> AddPenniesInteractor:
    return AddPenniesInteractor(
        character_gateway=SqlaCharacterGateway(session),
        transaction_manager=SqlaTransactionManager(session),
        allowance_pennies=settings.allowance_pennies,
    )


def get_grant_permit_interactor(
    session: SessionDep,
    policy: CharacterPolicy = Depends(get_character_policy),
) -> GrantPermitInteractor:
    return GrantPermitInteractor(
        character_gateway=SqlaCharacterGateway(session),
        transaction_manager=SqlaTransactionManager(session),
        policy=policy,
    )


def get_generate_characters_interactor(session: SessionDep) -> GenerateCharactersInteractor:
    return GenerateCharactersInteractor(
        character_gateway=SqlaCharacterGateway(session),
        transaction_manager=SqlaTransactionManager(session),
        generator=RandomCharacterGenerator(),
    )


# Character queries
def get_inventory_query(
    session: SessionDep,
    policy: CharacterPolicy = Depends(get_character_policy),
) -> GetInventoryQuery:
    return GetInventoryQuery(
        character_gateway=SqlaCharacterGateway(session),
        inventory_gateway=SqlaInventoryGateway(session),
        policy=policy,
    )


def get_home_query(session: SessionDep, settings: SettingsDep) -> GetHomeQuery:
    return GetHomeQuery(
        character_gateway=SqlaCharacterGateway(session),
        listing_gateway=SqlaListingGateway(session),
        latest_limit=settings.latest_listings_limit,
    )


def get_branch_members_query(session: SessionDep) -> GetBranchMembersQuery:
    return GetBranchMembersQuery(character_gateway=SqlaCharacterGateway(session))


def get_recently_dead_query(session: SessionDep, settings: SettingsDep) -> GetRecentlyDeadQuery:
    return GetRecentlyDeadQuery(
        character_gateway=SqlaCharacterGateway(session),
        limit=settings.recently_dead_limit,
    )


def get_dead_characters_query(session: SessionDep) -> GetDeadCharactersQuery:
    return GetDeadCharactersQuery(
        character_gateway=SqlaCharacterGateway(session),
        account_gateway=SqlaAccountGateway(session),
    )


def get_blacksmith_access_query(session: SessionDep) -> CheckBlacksmithAccessQuery:
    return CheckBlacksmithAccessQuery(character_gateway=SqlaCharacterGateway(session))


# Marketplace
def get_listings_query(session: SessionDep) -> GetListingsQuery:
    return GetListingsQuery(listing_gateway=SqlaListingGateway(session))


def get_local_listings_query(session: SessionDep) -> GetLocalListingsQuery:
    return GetLocalListingsQuery(
        character_gateway=SqlaCharacterGateway(session),
        listing_gateway=SqlaListingGateway(session),
    )


def get_sell_item_interactor(session: SessionDep) -> SellItemInteractor:
    """SellItemInteractor 인스턴스를 반환합니다."""
    return SellItemInteractor(
        character_gateway=SqlaCharacterGateway(session),
        inventory_gateway=SqlaInventoryGateway(session),
        listing_gateway=SqlaListingGateway(session),
        transaction_manager=SqlaTransactionManager(session),
        validator=SaleValidator(),
    )


def get_buy_listing_interactor(session: SessionDep) -> BuyListingInteractor:
    """BuyListingInteractor 인스턴스를 반환합니다."""
    return BuyListingInteractor(
        character_gateway=SqlaCharacterGateway(session),
        inventory_gateway=SqlaInventoryGateway(session),
        listing_gateway=SqlaListingGateway(session),
        transaction_manager=SqlaTransactionManager(session),
        calculator=PurchaseCalculator(),
    )


def get_delist_listing_interactor(session: SessionDep) -> DelistListingInteractor:
    return DelistListingInteractor(
        character_gateway=SqlaCharacterGateway(session),
        inventory_gateway=SqlaInventoryGateway(session),
        listing_gateway=SqlaListingGateway(session),
        transaction_manager=SqlaTransactionManager(session),
    )


def get_stock_shop_item_interactor(session: SessionDep) -> StockShopItemInteractor:
    return StockShopItemInteractor(
        listing_gateway=SqlaListingGateway(session),
        transaction_manager=SqlaTransactionManager(session),
        validator=SaleValidator(),
    )


def get_replenish_stock_interactor(session: SessionDep) -> ReplenishStockInteractor:
    return ReplenishStockInteractor(
        listing_gateway=SqlaListingGateway(session),
        transaction_manager=SqlaTransactionManager(session),
    )


def get_generate_listings_interactor(
    session: SessionDep, settings: SettingsDep
) -> GenerateListingsInteractor:
    return GenerateListingsInteractor(
        character_gateway=SqlaCharacterGateway(session),
        listing_gateway=SqlaListingGateway(session),
        transaction_manager=SqlaTransactionManager(session),
        generator=RandomListingGenerator(),
        max_count=settings.generate_listings_max,
    )
