from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from bingo.core.win import WinPattern
from bingo.models.player import ConnectionStatus
from bingo.schemas.card import CardResponse


class JoinRoomRequest(BaseModel):
    player_name: str
    session_id: str


class UpdateConnectionRequest(BaseModel):
    connection_status: ConnectionStatus


class PlayerResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    room_id: UUID
    session_id: str
    name: str
    connection_status: ConnectionStatus
    has_won: datetime | None = None
    win_pattern: WinPattern | None = None


class JoinRoomResponse(BaseModel):
    player: PlayerResponse
    card: CardResponse


class WinCheckResponse(BaseModel):
    win_pattern: WinPattern | None = None
    has_won: bool
