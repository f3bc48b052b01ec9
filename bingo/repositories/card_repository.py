from collections.abc import Iterable
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from bingo.core.error import DomainErrorCode
from bingo.models.card import Card
from bingo.repositories.base_repository import BaseRepository


class CardRepository(BaseRepository[Card]):
    def __init__(self, session: AsyncSession):
        super().__init__(session, Card, DomainErrorCode.CARD_NOT_FOUND)

    async def get_by_player(self, player_id: UUID) -> Card | None:
        return await self.filter_one(player_id=player_id)

    async def get_by_player_or_raise(self, player_id: UUID) -> Card:
        return await self.filter_one_or_raise(player_id=player_id)

    async def replace_marked_numbers(self, card: Card, marked: Iterable[int]) -> bool:
        return await self.compare_and_set(
            card.id,
            card.version,
            marked_numbers=sorted(set(marked)),
        )
