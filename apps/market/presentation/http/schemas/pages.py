"""Page HTTP Schemas.

클라이언트 라우트 경로별 뷰 모델입니다.
"""

from pydantic import BaseModel, Field

from apps.market.presentation.http.schemas.character import CharacterResponse
from apps.market.presentation.http.schemas.marketplace import ListingResponse


class IndexPage(BaseModel):
    """첫 화면."""

    page: str = "index"
    character: CharacterResponse


class LoginPage(BaseModel):
    """로그인 화면."""

    page: str = "login"
    notice: str | None = None


class CreateCharacterPage(BaseModel):
    """캐릭터 생성 화면."""

    page: str = "create-character"
    races: list[str]
    guilds: list[str]
    branches: list[str]
    notice: str | None = Field(None, description="캐릭터 조회 실패 안내")


class HomePage(BaseModel):
    """홈 화면."""

    page: str = "home"
    character: CharacterResponse
    latest_listings: list[ListingResponse]


class MarketplacePage(BaseModel):
    """전체 마켓 화면."""

    page: str = "marketplace"
    category: str = "all"
    listings: list[ListingResponse]
