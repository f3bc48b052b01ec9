from uuid import UUID

from fastapi import APIRouter, Depends, status

from bingo.dependencies.services import get_player_service
from bingo.schemas.card import CardResponse
from bingo.schemas.player import (
    PlayerResponse,
    UpdateConnectionRequest,
    WinCheckResponse,
)
from bingo.services.player_service import PlayerService

router = APIRouter()


@router.get(
    "/{player_id}",
    response_model=PlayerResponse,
    status_code=status.HTTP_200_OK,
)
async def read_player(
    player_id: UUID,
    player_service: PlayerService = Depends(get_player_service),
):
    player = await player_service.get_player(player_id)
    return PlayerResponse.model_validate(player)


@router.get(
    "/{player_id}/card",
    response_model=CardResponse,
    status_code=status.HTTP_200_OK,
)
async def read_player_card(
    player_id: UUID,
    player_service: PlayerService = Depends(get_player_service),
):
    card = await player_service.get_card(player_id)
    return CardResponse.model_validate(card)


@router.patch(
    "/{player_id}/connection",
    response_model=PlayerResponse,
    status_code=status.HTTP_200_OK,
)
async def update_connection_status(
    player_id: UUID,
    request: UpdateConnectionRequest,
    player_service: PlayerService = Depends(get_player_service),
):
    player = await player_service.update_connection_status(
        player_id, request.connection_status
    )
    return PlayerResponse.model_validate(player)


@router.get(
    "/{player_id}/win",
    response_model=WinCheckResponse,
    status_code=status.HTTP_200_OK,
)
async def check_win(
    player_id: UUID,
    player_service: PlayerService = Depends(get_player_service),
):
    win_pattern, has_won = await player_service.check_win(player_id)
    return WinCheckResponse(win_pattern=win_pattern, has_won=has_won)


@router.post(
    "/{player_id}/win",
    response_model=PlayerResponse,
    status_code=status.HTTP_200_OK,
)
async def declare_win(
    player_id: UUID,
    player_service: PlayerService = Depends(get_player_service),
):
    player = await player_service.declare_win(player_id)
    return PlayerResponse.model_validate(player)
