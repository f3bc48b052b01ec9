from uuid import UUID

from fastapi import APIRouter, Depends, status

from bingo.dependencies.services import get_player_service
from bingo.schemas.card import CardResponse, MarkNumberRequest
from bingo.services.player_service import PlayerService

router = APIRouter()


@router.get(
    "/{card_id}",
    response_model=CardResponse,
    status_code=status.HTTP_200_OK,
)
async def read_card(
    card_id: UUID,
    player_service: PlayerService = Depends(get_player_service),
):
    card = await player_service.get_card_by_id(card_id)
    return CardResponse.model_validate(card)


@router.post(
    "/{card_id}/mark",
    response_model=CardResponse,
    status_code=status.HTTP_200_OK,
)
async def mark_number(
    card_id: UUID,
    request: MarkNumberRequest,
    player_service: PlayerService = Depends(get_player_service),
):
    card = await player_service.mark_number(card_id, request.number)
    return CardResponse.model_validate(card)
