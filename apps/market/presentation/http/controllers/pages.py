"""Page Controller.

클라이언트 라우트 경로별 뷰 모델을 반환합니다. 모든 경로에 세션 게이트가
적용되며, 게이트 판정이 리다이렉트이면 핸들러는 실행되지 않습니다.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request

from apps.market.application.character.dto import CharacterSummary
from apps.market.application.character.queries import (
    CheckBlacksmithAccessQuery,
    GetBranchMembersQuery,
    GetHomeQuery,
    GetInventoryQuery,
    GetRecentlyDeadQuery,
)
from apps.market.application.common.exceptions import (
    AuthenticationRequiredError,
    NotFoundError,
)
from apps.market.application.marketplace.queries import (
    GetListingsQuery,
    GetLocalListingsQuery,
)
from apps.market.application.session.dto import SessionContext
from apps.market.application.session.queries import GetSessionContextQuery
from apps.market.application.session.services import AccessGate, normalize_path
from apps.market.domain.enums import Branch, Guild, Race
from apps.market.presentation.http.auth.dependencies import get_optional_user_id
from apps.market.presentation.http.gate import AccessRedirect, enforce_access_gate
from apps.market.presentation.http.schemas.character import (
    BlacksmithResponse,
    BranchMembersResponse,
    CharacterResponse,
    DeadCharacterResponse,
    InventoryResponse,
)
from apps.market.presentation.http.schemas.marketplace import (
    ListingResponse,
    LocalMarketResponse,
)
from apps.market.presentation.http.schemas.pages import (
    CreateCharacterPage,
    HomePage,
    IndexPage,
    LoginPage,
    MarketplacePage,
)
from apps.market.setup.dependencies import (
    get_access_gate,
    get_blacksmith_access_query,
    get_branch_members_query,
    get_home_query,
    get_inventory_query,
    get_listings_query,
    get_local_listings_query,
    get_recently_dead_query,
    get_session_context_query,
)

API_PREFIX = "/api/"

router = APIRouter(tags=["pages"], dependencies=[Depends(enforce_access_gate)])

# 모든 라우트 뒤에 등록해야 함
fallback_router = APIRouter(tags=["pages"])


def _user_id(context: SessionContext) -> UUID:
    if context.user_id is None:
        raise AuthenticationRequiredError()
    return context.user_id


@router.get("/", response_model=IndexPage)
async def index(context: SessionContext = Depends(enforce_access_gate)) -> IndexPage:
    return IndexPage(
        character=CharacterResponse.model_validate(
            CharacterSummary.from_entity(context.character)
        )
    )


@router.get("/login", response_model=LoginPage)
async def login_page(context: SessionContext = Depends(enforce_access_gate)) -> LoginPage:
    return LoginPage(notice=context.notice)


@router.get("/create-character", response_model=CreateCharacterPage)
async def create_character_page(
    context: SessionContext = Depends(enforce_access_gate),
) -> CreateCharacterPage:
    """캐릭터 생성 폼 옵션."""
    return CreateCharacterPage(
        races=[race.value for race in Race],
        guilds=[guild.value for guild in Guild],
        branches=[branch.value for branch in Branch],
        notice=context.notice,
    )


@router.get("/home", response_model=HomePage)
async def home_page(
    context: SessionContext = Depends(enforce_access_gate),
    query: GetHomeQuery = Depends(get_home_query),
) -> HomePage:
    view = await query.execute(_user_id(context))
    return HomePage(
        character=CharacterResponse.model_validate(view.character),
        latest_listings=[ListingResponse.model_validate(v) for v in view.latest_listings],
    )


@router.get("/character-inventory", response_model=InventoryResponse)
async def inventory_page(
    context: SessionContext = Depends(enforce_access_gate),
    query: GetInventoryQuery = Depends(get_inventory_query),
) -> InventoryResponse:
    view = await query.execute(_user_id(context))
    return InventoryResponse.model_validate(view)


@router.get("/marketplace", response_model=MarketplacePage)
async def marketplace_page(
    category: str = Query("all", description="카테고리 필터 ('all' 이면 전체)"),
    query: GetListingsQuery = Depends(get_listings_query),
) -> MarketplacePage:
    views = await query.execute(category)
    return MarketplacePage(
        category=category,
        listings=[ListingResponse.model_validate(v) for v in views],
    )


@router.get("/branch-members", response_model=BranchMembersResponse)
async def branch_members_page(
    context: SessionContext = Depends(enforce_access_gate),
    query: GetBranchMembersQuery = Depends(get_branch_members_query),
) -> BranchMembersResponse:
    view = await query.execute(_user_id(context))
    return BranchMembersResponse.model_validate(view)


@router.get("/the-recently-dead", response_model=list[DeadCharacterResponse])
async def recently_dead_page(
    query: GetRecentlyDeadQuery = Depends(get_recently_dead_query),
) -> list[DeadCharacterResponse]:
    views = await query.execute()
    return [DeadCharacterResponse.model_validate(v) for v in views]


@router.get("/local-marketplace", response_model=LocalMarketResponse)
async def local_marketplace_page(
    category: str = Query("all", description="카테고리 필터 ('all' 이면 전체)"),
    context: SessionContext = Depends(enforce_access_gate),
    query: GetLocalListingsQuery = Depends(get_local_listings_query),
) -> LocalMarketResponse:
    view = await query.execute(_user_id(context), category)
    return LocalMarketResponse.model_validate(view)


@router.get("/blacksmith", response_model=BlacksmithResponse)
async def blacksmith_page(
    context: SessionContext = Depends(enforce_access_gate),
    query: CheckBlacksmithAccessQuery = Depends(get_blacksmith_access_query),
) -> BlacksmithResponse:
    """blacksmith 퍼밋이 없으면 403."""
    result = await query.execute(_user_id(context))
    return BlacksmithResponse.model_validate(result)


@fallback_router.get("/{path:path}", include_in_schema=False)
async def unknown_page(
    request: Request,
    path: str,
    user_id: UUID | None = Depends(get_optional_user_id),
    query: GetSessionContextQuery = Depends(get_session_context_query),
    gate: AccessGate = Depends(get_access_gate),
) -> None:
    """알 수 없는 페이지 경로.

    API 경로는 게이트 없이 404 를 반환하고, 그 외 경로는 게이트 판정을 따릅니다.
    게이트를 통과한 끝 슬래시 경로는 정규화된 경로로 이동합니다.
    """
    if request.url.path.startswith(API_PREFIX):
        raise NotFoundError("Not Found")

    await enforce_access_gate(request, user_id=user_id, query=query, gate=gate)
    normalized = normalize_path(request.url.path)
    if normalized != request.url.path:
        raise AccessRedirect(normalized)
    raise NotFoundError(f"Page not found: /{path}")
