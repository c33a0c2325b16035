"""Character Controller.

활성 캐릭터 생성과 생애주기(은퇴/사망), 용돈, 퍼밋 엔드포인트입니다.
"""

from uuid import UUID

from fastapi import APIRouter, Depends

from apps.market.application.character.commands import (
    AddPenniesInteractor,
    CreateCharacterInteractor,
    DeclareDeathInteractor,
    GrantPermitInteractor,
    RetireCharacterInteractor,
)
from apps.market.application.character.dto import CreateCharacterRequest
from apps.market.presentation.http.auth.dependencies import get_auth_user_id
from apps.market.presentation.http.schemas.character import (
    BalanceResponse,
    CreateCharacterBody,
    GrantPermitBody,
    LifecycleResponse,
    PermitGrantResponse,
)
from apps.market.setup.dependencies import (
    get_add_pennies_interactor,
    get_create_character_interactor,
    get_declare_death_interactor,
    get_grant_permit_interactor,
    get_retire_character_interactor,
)

router = APIRouter(prefix="/characters", tags=["characters"])


@router.post("", response_model=LifecycleResponse, status_code=201, summary="캐릭터 생성")
async def create_character(
    body: CreateCharacterBody,
    user_id: UUID = Depends(get_auth_user_id),
    interactor: CreateCharacterInteractor = Depends(get_create_character_interactor),
) -> LifecycleResponse:
    """활성 캐릭터를 생성합니다 (계정당 하나)."""
    result = await interactor.execute(
        user_id,
        CreateCharacterRequest(
            name=body.name,
            race=body.race,
            guild=body.guild,
            branch=body.branch,
        ),
    )
    return LifecycleResponse.model_validate(result)


@router.post("/me/retire", response_model=LifecycleResponse, summary="캐릭터 은퇴")
async def retire_character(
    user_id: UUID = Depends(get_auth_user_id),
    interactor: RetireCharacterInteractor = Depends(get_retire_character_interactor),
) -> LifecycleResponse:
    result = await interactor.execute(user_id)
    return LifecycleResponse.model_validate(result)


@router.post("/me/death", response_model=LifecycleResponse, summary="캐릭터 사망 처리")
async def declare_death(
    user_id: UUID = Depends(get_auth_user_id),
    interactor: DeclareDeathInteractor = Depends(get_declare_death_interactor),
) -> LifecycleResponse:
    result = await interactor.execute(user_id)
    return LifecycleResponse.model_validate(result)


@router.post("/me/pennies", response_model=BalanceResponse, summary="용돈 받기")
async def add_pennies(
    user_id: UUID = Depends(get_auth_user_id),
    interactor: AddPenniesInteractor = Depends(get_add_pennies_interactor),
) -> BalanceResponse:
    result = await interactor.execute(user_id)
    return BalanceResponse.model_validate(result)


@router.post("/me/permits", response_model=PermitGrantResponse, summary="퍼밋 신청")
async def grant_permit(
    body: GrantPermitBody,
    user_id: UUID = Depends(get_auth_user_id),
    interactor: GrantPermitInteractor = Depends(get_grant_permit_interactor),
) -> PermitGrantResponse:
    result = await interactor.execute(user_id, body.permit_type)
    return PermitGrantResponse.model_validate(result)
