from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from bingo.core.state_machine import RoomStatus


class CreateRoomRequest(BaseModel):
    name: str
    organizer_id: str | None = None


class UpdateRoomStatusRequest(BaseModel):
    status: RoomStatus


class DrawNumberRequest(BaseModel):
    number: int | None = None


class RoomResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    code: str
    name: str
    status: RoomStatus
    organizer_id: str
    drawn_numbers: list[int]
    created_at: datetime | None = None
    updated_at: datetime | None = None


class AvailableNumbersResponse(BaseModel):
    room_id: UUID
    numbers: list[int]
    remaining: int
