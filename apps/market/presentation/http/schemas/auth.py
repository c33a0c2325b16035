"""Auth HTTP Schemas."""

from uuid import UUID

from pydantic import BaseModel, Field

from apps.market.presentation.http.schemas.character import CharacterResponse


class SignUpBody(BaseModel):
    """회원가입 요청."""

    email: str = Field(..., description="이메일")
    password: str = Field(..., description="비밀번호")
    first_name: str | None = Field(None, description="이름")
    last_name: str | None = Field(None, description="성")


class SignInBody(BaseModel):
    """로그인 요청."""

    email: str = Field(..., description="이메일")
    password: str = Field(..., description="비밀번호")


class AuthResponse(BaseModel):
    """인증 응답 (토큰은 쿠키로도 설정됨)."""

    user_id: UUID = Field(..., description="계정 ID")
    email: str = Field(..., description="이메일")
    access_token: str = Field(..., description="액세스 토큰 (Bearer 용)")
    expires_at: int = Field(..., description="만료 시각 (Unix timestamp)")


class SessionResponse(BaseModel):
    """현재 세션 상태."""

    authenticated: bool = Field(..., description="로그인 여부")
    state: str = Field(..., description="anonymous | needs_character | ready")
    user_id: UUID | None = Field(None, description="계정 ID")
    character: CharacterResponse | None = Field(None, description="활성 캐릭터")
    permits: list[str] = Field(default_factory=list, description="보유 퍼밋")
    notice: str | None = Field(None, description="안내 메시지")
