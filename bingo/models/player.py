from datetime import datetime
from enum import Enum
from uuid import UUID, uuid4

from sqlalchemy import Column, DateTime, UniqueConstraint
from sqlmodel import Field, SQLModel

from bingo.core.win import WinPattern
from bingo.models.time_stamp_mixin import TimeStampMixin


class ConnectionStatus(str, Enum):
    CONNECTED = "connected"
    DISCONNECTED = "disconnected"


class Player(TimeStampMixin, SQLModel, table=True):  # type: ignore[call-arg]
    id: UUID = Field(
        default_factory=uuid4,
        primary_key=True,
    )
    room_id: UUID = Field(foreign_key="room.id", index=True)
    session_id: str = Field(max_length=64)
    name: str = Field(max_length=50)
    connection_status: ConnectionStatus = Field(default=ConnectionStatus.CONNECTED)

    has_won: datetime | None = Field(
        default=None,
        sa_column=Column(DateTime(timezone=True), nullable=True),
    )
    win_pattern: WinPattern | None = Field(default=None)

    __table_args__ = (UniqueConstraint("room_id", "session_id"),)
