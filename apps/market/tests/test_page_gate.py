"""Page route + access gate 테스트.

세션 상태별 리다이렉트(307), 안내 헤더, catch-all 동작을 검증합니다.
"""

from unittest.mock import AsyncMock
from uuid import uuid4

from fastapi import FastAPI
from fastapi.testclient import TestClient

from apps.market.application.character.dto import CharacterSummary, HomeView
from apps.market.application.common.exceptions import PermitRequiredError
from apps.market.application.marketplace.dto import ListingView
from apps.market.application.session.dto import SessionContext
from apps.market.domain.entities import Character, MarketplaceListing
from apps.market.presentation.http.auth.dependencies import get_optional_user_id
from apps.market.presentation.http.controllers import pages
from apps.market.presentation.http.errors import register_exception_handlers
from apps.market.presentation.http.gate import NOTICE_HEADER
from apps.market.setup.dependencies import (
    get_blacksmith_access_query,
    get_home_query,
    get_listings_query,
    get_session_context_query,
)

USER_ID = uuid4()
CHARACTER = Character(user_id=USER_ID, name="Aldric", race="human", guild="mercenary", branch="Portsmouth")


def _provide(value):
    return lambda: value


def create_test_app(context: SessionContext, overrides: dict | None = None) -> FastAPI:
    """세션 컨텍스트를 고정한 테스트 앱."""
    query = AsyncMock()
    query.execute.return_value = context

    app = FastAPI()
    register_exception_handlers(app)
    app.include_router(pages.router)
    app.include_router(pages.fallback_router)

    app.dependency_overrides[get_optional_user_id] = _provide(context.user_id)
    app.dependency_overrides[get_session_context_query] = _provide(query)
    for dependency, value in (overrides or {}).items():
        app.dependency_overrides[dependency] = _provide(value)
    return app


def _client(context: SessionContext, overrides: dict | None = None) -> TestClient:
    return TestClient(create_test_app(context, overrides), follow_redirects=False)


ANONYMOUS = SessionContext()
NO_CHARACTER = SessionContext(user_id=USER_ID)
READY = SessionContext(user_id=USER_ID, character=CHARACTER, permits=("weapon", "armour"))


class TestAnonymous:
    def test_redirects_to_login(self) -> None:
        client = _client(ANONYMOUS)

        for path in ("/", "/home", "/marketplace", "/create-character", "/somewhere"):
            response = client.get(path)
            assert response.status_code == 307, path
            assert response.headers["location"] == "/login"

    def test_login_page(self) -> None:
        response = _client(ANONYMOUS).get("/login")

        assert response.status_code == 200
        assert response.json()["page"] == "login"


class TestNeedsCharacter:
    def test_redirects_to_create_character(self) -> None:
        client = _client(NO_CHARACTER)

        for path in ("/", "/login", "/home", "/blacksmith"):
            response = client.get(path)
            assert response.status_code == 307, path
            assert response.headers["location"] == "/create-character"

    def test_create_character_page_lists_options(self) -> None:
        response = _client(NO_CHARACTER).get("/create-character")

        assert response.status_code == 200
        body = response.json()
        assert "half elf" in body["races"]
        assert body["guilds"] == ["mercenary", "scout", "blacksmith"]
        assert body["branches"] == ["Portsmouth", "Guildford"]

    def test_load_failure_notice_header(self) -> None:
        context = SessionContext(
            user_id=USER_ID, notice="Failed to load character data: Backend request failed"
        )

        response = _client(context).get("/home")

        assert response.status_code == 307
        assert response.headers["location"] == "/create-character"
        assert response.headers[NOTICE_HEADER] == (
            "Failed to load character data: Backend request failed"
        )


class TestReady:
    def test_login_and_create_redirect_home(self) -> None:
        client = _client(READY)

        for path in ("/login", "/create-character", "/unknown-page"):
            response = client.get(path)
            assert response.status_code == 307, path
            assert response.headers["location"] == "/home"

    def test_home_page(self) -> None:
        query = AsyncMock()
        listing = MarketplaceListing(name="Shortsword", crowns=4, pennies=6, category="weapons")
        query.execute.return_value = HomeView(
            character=CharacterSummary.from_entity(CHARACTER),
            latest_listings=[ListingView.from_entity(listing)],
        )

        response = _client(READY, {get_home_query: query}).get("/home")

        assert response.status_code == 200
        body = response.json()
        assert body["character"]["name"] == "Aldric"
        assert body["latest_listings"][0]["is_npc_stock"] is True
        query.execute.assert_awaited_once_with(USER_ID)

    def test_marketplace_category(self) -> None:
        query = AsyncMock()
        query.execute.return_value = []

        response = _client(READY, {get_listings_query: query}).get("/marketplace?category=armour")

        assert response.status_code == 200
        assert response.json() == {"page": "marketplace", "category": "armour", "listings": []}
        query.execute.assert_awaited_once_with("armour")

    def test_trailing_slash_redirects_to_canonical_path(self) -> None:
        response = _client(READY).get("/home/")

        assert response.status_code == 307
        assert response.headers["location"].endswith("/home")

    def test_blacksmith_requires_permit(self) -> None:
        query = AsyncMock()
        query.execute.side_effect = PermitRequiredError("blacksmith")

        response = _client(READY, {get_blacksmith_access_query: query}).get("/blacksmith")

        assert response.status_code == 403
        assert response.json() == {
            "detail": "Permit Required: a blacksmith permit is needed.",
            "code": "PERMIT_REQUIRED",
        }


def test_unknown_api_path_is_not_gated() -> None:
    response = _client(ANONYMOUS).get("/api/v1/nothing-here")

    assert response.status_code == 404
    assert response.json()["code"] == "NOT_FOUND"
