from uuid import UUID

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from bingo.db.session import get_session
from bingo.models.room import Room
from bingo.repositories.card_repository import CardRepository
from bingo.repositories.player_repository import PlayerRepository
from bingo.repositories.room_repository import RoomRepository


def get_room_repository(session: AsyncSession = Depends(get_session)) -> RoomRepository:
    return RoomRepository(session)


def get_player_repository(
    session: AsyncSession = Depends(get_session),
) -> PlayerRepository:
    return PlayerRepository(session)


def get_card_repository(session: AsyncSession = Depends(get_session)) -> CardRepository:
    return CardRepository(session)


async def get_room_by_id(
    room_id: UUID,
    room_repository: RoomRepository = Depends(get_room_repository),
) -> Room:
    return await room_repository.filter_one_or_raise(id=room_id)
