from uuid import UUID, uuid4

from sqlalchemy import Column, UniqueConstraint
from sqlmodel import Field, SQLModel

from bingo.models.column_types import IntegerList, IntegerSet
from bingo.models.time_stamp_mixin import TimeStampMixin


class Card(TimeStampMixin, SQLModel, table=True):  # type: ignore[call-arg]
    id: UUID = Field(
        default_factory=uuid4,
        primary_key=True,
    )
    player_id: UUID = Field(foreign_key="player.id")
    numbers: list[int] = Field(
        sa_column=Column(IntegerList, nullable=False),
    )
    marked_numbers: list[int] = Field(
        default_factory=list,
        sa_column=Column(IntegerSet, nullable=False),
    )
    version: int = Field(default=0, nullable=False)

    __table_args__ = (UniqueConstraint("player_id"),)
