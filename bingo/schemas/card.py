from uuid import UUID

from pydantic import BaseModel, ConfigDict


class MarkNumberRequest(BaseModel):
    number: int


class CardResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    player_id: UUID
    numbers: list[int]
    marked_numbers: list[int]
