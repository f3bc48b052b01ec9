from sqlalchemy.ext.asyncio import AsyncSession

from bingo.core.error import DomainErrorCode
from bingo.core.state_machine import RoomStatus
from bingo.models.room import Room
from bingo.repositories.base_repository import BaseRepository


class RoomRepository(BaseRepository[Room]):
    def __init__(self, session: AsyncSession):
        super().__init__(session, Room, DomainErrorCode.ROOM_NOT_FOUND)

    async def code_exists(self, code: str) -> bool:
        return await self.count(code=code) > 0

    async def append_drawn_number(self, room: Room, number: int) -> bool:
        return await self.compare_and_set(
            room.id,
            room.version,
            Room.status == RoomStatus.DRAWING,
            drawn_numbers=[*room.drawn_numbers, number],
        )

    async def change_status(
        self, room: Room, current: RoomStatus, target: RoomStatus
    ) -> bool:
        # Bumping the version invalidates draws that read the old status
        return await self.update_where(
            room.id,
            Room.status == current,
            status=target,
            version=Room.version + 1,
        )
