"""Auth Controller.

회원가입/로그인/로그아웃과 현재 세션 조회 엔드포인트입니다.
토큰은 cm_access 쿠키로 설정되고 응답 본문에도 포함됩니다.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Response

from apps.market.application.auth.commands import SignInInteractor, SignUpInteractor
from apps.market.application.auth.dto import SignInRequest, SignUpRequest
from apps.market.application.character.dto import CharacterSummary
from apps.market.application.session.queries import GetSessionContextQuery
from apps.market.application.session.services import AccessGate
from apps.market.presentation.http.auth.cookie_params import (
    clear_auth_cookie,
    set_auth_cookie,
)
from apps.market.presentation.http.auth.dependencies import get_optional_user_id
from apps.market.presentation.http.schemas.auth import (
    AuthResponse,
    SessionResponse,
    SignInBody,
    SignUpBody,
)
from apps.market.presentation.http.schemas.character import CharacterResponse
from apps.market.presentation.http.schemas.common import MessageResponse
from apps.market.setup.dependencies import (
    get_access_gate,
    get_session_context_query,
    get_sign_in_interactor,
    get_sign_up_interactor,
)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/signup", response_model=AuthResponse, status_code=201, summary="회원가입")
async def sign_up(
    body: SignUpBody,
    response: Response,
    interactor: SignUpInteractor = Depends(get_sign_up_interactor),
) -> AuthResponse:
    result = await interactor.execute(
        SignUpRequest(
            email=body.email,
            password=body.password,
            first_name=body.first_name,
            last_name=body.last_name,
        )
    )
    set_auth_cookie(response, access_token=result.access_token, expires_at=result.expires_at)
    return AuthResponse.model_validate(result, from_attributes=True)


@router.post("/login", response_model=AuthResponse, summary="로그인")
async def sign_in(
    body: SignInBody,
    response: Response,
    interactor: SignInInteractor = Depends(get_sign_in_interactor),
) -> AuthResponse:
    result = await interactor.execute(SignInRequest(email=body.email, password=body.password))
    set_auth_cookie(response, access_token=result.access_token, expires_at=result.expires_at)
    return AuthResponse.model_validate(result, from_attributes=True)


@router.post("/logout", response_model=MessageResponse, summary="로그아웃")
async def sign_out(response: Response) -> MessageResponse:
    """쿠키를 삭제합니다. 토큰은 만료까지 유효합니다."""
    clear_auth_cookie(response)
    return MessageResponse(message="Logged out.")


@router.get("/session", response_model=SessionResponse, summary="현재 세션")
async def get_session(
    user_id: UUID | None = Depends(get_optional_user_id),
    query: GetSessionContextQuery = Depends(get_session_context_query),
    gate: AccessGate = Depends(get_access_gate),
) -> SessionResponse:
    context = await query.execute(user_id)
    state = gate.resolve_state(context.authenticated, context.has_character)
    character = None
    if context.character is not None:
        character = CharacterResponse.model_validate(
            CharacterSummary.from_entity(context.character)
        )
    return SessionResponse(
        authenticated=context.authenticated,
        state=state.value,
        user_id=context.user_id,
        character=character,
        permits=list(context.permits),
        notice=context.notice,
    )
