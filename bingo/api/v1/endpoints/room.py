from uuid import UUID

from fastapi import APIRouter, Depends, status

from bingo.dependencies.repositories import get_room_by_id
from bingo.dependencies.services import get_player_service, get_room_service
from bingo.models.room import Room
from bingo.schemas.card import CardResponse
from bingo.schemas.player import JoinRoomRequest, JoinRoomResponse, PlayerResponse
from bingo.schemas.room import (
    AvailableNumbersResponse,
    CreateRoomRequest,
    DrawNumberRequest,
    RoomResponse,
    UpdateRoomStatusRequest,
)
from bingo.services.player_service import PlayerService
from bingo.services.room_service import RoomService

router = APIRouter()


@router.post(
    "",
    response_model=RoomResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_room(
    request: CreateRoomRequest,
    room_service: RoomService = Depends(get_room_service),
):
    room = await room_service.create_room(
        name=request.name,
        organizer_id=request.organizer_id,
    )
    return RoomResponse.model_validate(room)


@router.get(
    "/code/{code}",
    response_model=RoomResponse,
    status_code=status.HTTP_200_OK,
)
async def read_room_by_code(
    code: str,
    room_service: RoomService = Depends(get_room_service),
):
    room = await room_service.get_room_by_code(code)
    return RoomResponse.model_validate(room)


@router.get(
    "/{room_id}",
    response_model=RoomResponse,
    status_code=status.HTTP_200_OK,
)
async def read_room(room: Room = Depends(get_room_by_id)):
    return RoomResponse.model_validate(room)


@router.patch(
    "/{room_id}/status",
    response_model=RoomResponse,
    status_code=status.HTTP_200_OK,
)
async def update_room_status(
    room_id: UUID,
    request: UpdateRoomStatusRequest,
    room_service: RoomService = Depends(get_room_service),
):
    room = await room_service.update_status(room_id, request.status)
    return RoomResponse.model_validate(room)


@router.post(
    "/{room_id}/draw",
    response_model=RoomResponse,
    status_code=status.HTTP_200_OK,
)
async def draw_number(
    room_id: UUID,
    request: DrawNumberRequest,
    room_service: RoomService = Depends(get_room_service),
):
    room = await room_service.draw_number(room_id, request.number)
    return RoomResponse.model_validate(room)


@router.get(
    "/{room_id}/available-numbers",
    response_model=AvailableNumbersResponse,
    status_code=status.HTTP_200_OK,
)
async def read_available_numbers(
    room_id: UUID,
    room_service: RoomService = Depends(get_room_service),
):
    numbers = await room_service.get_available_numbers(room_id)
    return AvailableNumbersResponse(
        room_id=room_id,
        numbers=numbers,
        remaining=len(numbers),
    )


@router.post(
    "/{room_id}/players",
    response_model=JoinRoomResponse,
    status_code=status.HTTP_200_OK,
)
async def join_room(
    room_id: UUID,
    request: JoinRoomRequest,
    player_service: PlayerService = Depends(get_player_service),
):
    player, card = await player_service.join_room(
        room_id=room_id,
        player_name=request.player_name,
        session_id=request.session_id,
    )
    return JoinRoomResponse(
        player=PlayerResponse.model_validate(player),
        card=CardResponse.model_validate(card),
    )


@router.get(
    "/{room_id}/players",
    response_model=list[PlayerResponse],
    status_code=status.HTTP_200_OK,
)
async def read_room_players(
    room_id: UUID,
    player_service: PlayerService = Depends(get_player_service),
):
    players = await player_service.get_players(room_id)
    return [PlayerResponse.model_validate(player) for player in players]
