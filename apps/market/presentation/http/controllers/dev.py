"""Dev Tools Controller.

테스트 데이터 생성용 엔드포인트입니다. dev_tools_enabled 일 때만 노출됩니다.
"""

from uuid import UUID

from fastapi import APIRouter, Depends

from apps.market.application.character.commands import GenerateCharactersInteractor
from apps.market.application.marketplace.commands import GenerateListingsInteractor
from apps.market.presentation.http.auth.dependencies import (
    get_auth_user_id,
    require_dev_tools,
)
from apps.market.presentation.http.schemas.character import GeneratedCharactersResponse
from apps.market.presentation.http.schemas.marketplace import (
    GenerateListingsBody,
    GeneratedListingsResponse,
)
from apps.market.setup.dependencies import (
    get_generate_characters_interactor,
    get_generate_listings_interactor,
)

router = APIRouter(prefix="/dev", tags=["dev"], dependencies=[Depends(require_dev_tools)])


@router.post("/characters", response_model=GeneratedCharactersResponse, status_code=201)
async def generate_characters(
    interactor: GenerateCharactersInteractor = Depends(get_generate_characters_interactor),
) -> GeneratedCharactersResponse:
    result = await interactor.execute()
    return GeneratedCharactersResponse.model_validate(result)


@router.post("/listings", response_model=GeneratedListingsResponse, status_code=201)
async def generate_listings(
    body: GenerateListingsBody,
    user_id: UUID = Depends(get_auth_user_id),
    interactor: GenerateListingsInteractor = Depends(get_generate_listings_interactor),
) -> GeneratedListingsResponse:
    result = await interactor.execute(user_id, body.count)
    return GeneratedListingsResponse.model_validate(result)
