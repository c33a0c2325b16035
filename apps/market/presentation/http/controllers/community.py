"""Community Controller."""

from fastapi import APIRouter, Depends

from apps.market.application.character.queries import GetDeadCharactersQuery
from apps.market.presentation.http.schemas.character import DeadCharacterResponse
from apps.market.setup.dependencies import get_dead_characters_query

router = APIRouter(prefix="/community", tags=["community"])


@router.get(
    "/dead-characters",
    response_model=list[DeadCharacterResponse],
    summary="사망 캐릭터 목록 (소유자 이름 포함)",
)
async def list_dead_characters(
    query: GetDeadCharactersQuery = Depends(get_dead_characters_query),
) -> list[DeadCharacterResponse]:
    views = await query.execute()
    return [DeadCharacterResponse.model_validate(view) for view in views]
