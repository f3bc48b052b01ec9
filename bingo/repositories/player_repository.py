from datetime import datetime
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from bingo.core.error import DomainErrorCode
from bingo.core.win import WinPattern
from bingo.models.player import Player
from bingo.repositories.base_repository import BaseRepository


class PlayerRepository(BaseRepository[Player]):
    def __init__(self, session: AsyncSession):
        super().__init__(session, Player, DomainErrorCode.PLAYER_NOT_FOUND)

    async def get_by_session(self, room_id: UUID, session_id: str) -> Player | None:
        return await self.filter_one(room_id=room_id, session_id=session_id)

    async def get_by_room(self, room_id: UUID) -> list[Player]:
        return await self.filter(room_id=room_id)

    async def record_win(
        self, player: Player, pattern: WinPattern, won_at: datetime
    ) -> bool:
        """Store the win unless one is already recorded for this player."""
        return await self.update_where(
            player.id,
            Player.has_won.is_(None),  # type: ignore[union-attr]
            has_won=won_at,
            win_pattern=pattern,
        )
