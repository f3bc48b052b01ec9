import random

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from bingo.db.session import get_session
from bingo.dependencies.repositories import (
    get_card_repository,
    get_player_repository,
    get_room_repository,
)
from bingo.repositories.card_repository import CardRepository
from bingo.repositories.player_repository import PlayerRepository
from bingo.repositories.room_repository import RoomRepository
from bingo.services.player_service import PlayerService
from bingo.services.room_service import RoomService

_random_source = random.Random()


def get_random_source() -> random.Random:
    return _random_source


def get_room_service(
    session: AsyncSession = Depends(get_session),
    room_repository: RoomRepository = Depends(get_room_repository),
    rng: random.Random = Depends(get_random_source),
) -> RoomService:
    return RoomService(
        session=session,
        room_repository=room_repository,
        rng=rng,
    )


def get_player_service(
    session: AsyncSession = Depends(get_session),
    room_repository: RoomRepository = Depends(get_room_repository),
    player_repository: PlayerRepository = Depends(get_player_repository),
    card_repository: CardRepository = Depends(get_card_repository),
    rng: random.Random = Depends(get_random_source),
) -> PlayerService:
    return PlayerService(
        session=session,
        room_repository=room_repository,
        player_repository=player_repository,
        card_repository=card_repository,
        rng=rng,
    )
