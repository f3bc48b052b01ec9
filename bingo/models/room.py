from uuid import UUID, uuid4

from sqlalchemy import Column
from sqlmodel import Field, SQLModel

from bingo.core.state_machine import RoomStatus
from bingo.models.column_types import IntegerList
from bingo.models.time_stamp_mixin import TimeStampMixin


class Room(TimeStampMixin, SQLModel, table=True):  # type: ignore[call-arg]
    id: UUID = Field(
        default_factory=uuid4,
        primary_key=True,
    )
    code: str = Field(
        max_length=6,
        index=True,
        nullable=False,
        unique=True,
    )
    name: str = Field(max_length=100)
    status: RoomStatus = Field(default=RoomStatus.WAITING)
    organizer_id: str = Field(max_length=64)
    drawn_numbers: list[int] = Field(
        default_factory=list,
        sa_column=Column(IntegerList, nullable=False),
    )
    version: int = Field(default=0, nullable=False)
