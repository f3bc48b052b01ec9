import logging
import random
from uuid import UUID, uuid4

from sqlalchemy.ext.asyncio import AsyncSession

from bingo.core.config import settings
from bingo.core.draw import next_available_numbers, pick_number
from bingo.core.error import BingoDomainError, DomainErrorCode
from bingo.core.room_code import generate_room_code
from bingo.core.state_machine import RoomStatus, ensure_can_draw, ensure_transition
from bingo.models.room import Room
from bingo.repositories.room_repository import RoomRepository
from bingo.util.validators import (
    normalize_room_code,
    validate_number,
    validate_room_name,
)

logger = logging.getLogger(__name__)


class RoomService:
    def __init__(
        self,
        session: AsyncSession,
        room_repository: RoomRepository | None = None,
        rng: random.Random | None = None,
    ):
        self.session = session
        self.room_repository = room_repository or RoomRepository(session)
        self.rng = rng or random.Random()

    async def generate_unique_code(
        self, max_attempts: int = settings.ROOM_CODE_MAX_ATTEMPTS
    ) -> str:
        for _ in range(max_attempts):
            code = generate_room_code(self.rng)
            if not await self.room_repository.code_exists(code):
                return code
            logger.warning("Room code collision on %s, regenerating", code)

        raise BingoDomainError(
            code=DomainErrorCode.ROOM_CODE_CREATE_FAILED,
            message=f"Cannot create room code after {max_attempts} tries",
            details={
                "max_attempts": max_attempts,
            },
        )

    async def create_room(self, name: str, organizer_id: str | None = None) -> Room:
        room_name = validate_room_name(name)
        code = await self.generate_unique_code()

        room = Room(
            code=code,
            name=room_name,
            status=RoomStatus.WAITING,
            organizer_id=organizer_id or str(uuid4()),
            drawn_numbers=[],
        )
        created_room = await self.room_repository.create(room)
        await self.session.commit()

        logger.info("Created room %s with code %s", created_room.id, code)
        return created_room

    async def get_room(self, room_id: UUID) -> Room:
        return await self.room_repository.filter_one_or_raise(id=room_id)

    async def get_room_by_code(self, code: str) -> Room:
        return await self.room_repository.filter_one_or_raise(
            code=normalize_room_code(code)
        )

    async def update_status(self, room_id: UUID, status: RoomStatus) -> Room:
        # Status only moves forward, so a lost race settles on a later pass
        while True:
            room = await self.room_repository.get_fresh_or_raise(room_id)
            if not ensure_transition(room, status):
                return room

            previous = RoomStatus(room.status)
            if await self.room_repository.change_status(room, previous, status):
                await self.session.commit()
                break

            await self.session.rollback()
            logger.warning("Concurrent status change on room %s, re-reading", room_id)

        logger.info(
            "Room %s moved from %s to %s",
            room_id,
            previous.value,
            status.value,
        )
        return await self.room_repository.get_fresh_or_raise(room_id)

    async def start_drawing(self, room_id: UUID) -> Room:
        return await self.update_status(room_id, RoomStatus.DRAWING)

    async def finish_game(self, room_id: UUID) -> Room:
        return await self.update_status(room_id, RoomStatus.FINISHED)

    async def draw_number(
        self,
        room_id: UUID,
        number: int | None = None,
        max_retries: int = settings.DRAW_MAX_RETRIES,
    ) -> Room:
        if number is not None:
            validate_number(number)

        for attempt in range(max_retries):
            room = await self.room_repository.get_fresh_or_raise(room_id)
            ensure_can_draw(room)

            drawn = number if number is not None else pick_number(
                room.drawn_numbers, self.rng
            )
            if drawn in room.drawn_numbers:
                return room

            if await self.room_repository.append_drawn_number(room, drawn):
                await self.session.commit()
                logger.info("Room %s drew %d", room_id, drawn)
                return await self.room_repository.get_fresh_or_raise(room_id)

            await self.session.rollback()
            logger.warning(
                "Concurrent draw on room %s, retrying (attempt %d)",
                room_id,
                attempt + 1,
            )

        raise BingoDomainError(
            code=DomainErrorCode.DRAW_CONFLICT,
            message=f"Could not draw a number in room {room_id} after {max_retries} tries",
            details={"room_id": str(room_id), "max_retries": max_retries},
        )

    async def get_available_numbers(self, room_id: UUID) -> list[int]:
        room = await self.room_repository.filter_one_or_raise(id=room_id)
        return sorted(next_available_numbers(room.drawn_numbers))
