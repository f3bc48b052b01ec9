import logging
import random
from datetime import UTC, datetime
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from bingo.core.card import generate_card
from bingo.core.config import settings
from bingo.core.error import BingoDomainError, DomainErrorCode
from bingo.core.state_machine import ensure_can_join
from bingo.core.win import WinPattern, check_win
from bingo.models.card import Card
from bingo.models.player import ConnectionStatus, Player
from bingo.repositories.card_repository import CardRepository
from bingo.repositories.player_repository import PlayerRepository
from bingo.repositories.room_repository import RoomRepository
from bingo.util.validators import (
    validate_number,
    validate_player_name,
    validate_session_id,
)

logger = logging.getLogger(__name__)


class PlayerService:
    def __init__(
        self,
        session: AsyncSession,
        room_repository: RoomRepository | None = None,
        player_repository: PlayerRepository | None = None,
        card_repository: CardRepository | None = None,
        rng: random.Random | None = None,
    ):
        self.session = session
        self.room_repository = room_repository or RoomRepository(session)
        self.player_repository = player_repository or PlayerRepository(session)
        self.card_repository = card_repository or CardRepository(session)
        self.rng = rng or random.Random()

    async def join_room(
        self, room_id: UUID, player_name: str, session_id: str
    ) -> tuple[Player, Card]:
        room = await self.room_repository.filter_one_or_raise(id=room_id)
        validate_session_id(session_id)

        existing_player = await self.player_repository.get_by_session(
            room_id, session_id
        )
        ensure_can_join(room, existing_player=existing_player)

        if existing_player:
            return existing_player, await self._card_for(existing_player)

        name = validate_player_name(player_name)
        try:
            player = await self.player_repository.create(
                Player(room_id=room_id, session_id=session_id, name=name)
            )
            card = await self._create_card_internal(player.id)
            await self.session.commit()
        except IntegrityError:
            # Lost a race against the same session joining concurrently
            await self.session.rollback()
            winner = await self.player_repository.get_by_session(room_id, session_id)
            if winner is None:
                raise
            return winner, await self._card_for(winner)

        logger.info("Player %s (%s) joined room %s", player.id, name, room_id)
        return player, card

    async def _create_card_internal(self, player_id: UUID) -> Card:
        card = Card(
            player_id=player_id,
            numbers=generate_card(self.rng),
            marked_numbers=[],
        )
        return await self.card_repository.create(card)

    async def _card_for(self, player: Player) -> Card:
        card = await self.card_repository.get_by_player(player.id)
        if card is None:
            logger.warning("Player %s had no card, issuing one", player.id)
            card = await self._create_card_internal(player.id)
            await self.session.commit()
        return card

    async def get_player(self, player_id: UUID) -> Player:
        return await self.player_repository.filter_one_or_raise(id=player_id)

    async def get_players(self, room_id: UUID) -> list[Player]:
        await self.room_repository.filter_one_or_raise(id=room_id)
        return await self.player_repository.get_by_room(room_id)

    async def get_card(self, player_id: UUID) -> Card:
        await self.player_repository.filter_one_or_raise(id=player_id)
        return await self.card_repository.get_by_player_or_raise(player_id)

    async def get_card_by_id(self, card_id: UUID) -> Card:
        return await self.card_repository.filter_one_or_raise(id=card_id)

    async def update_connection_status(
        self, player_id: UUID, connection_status: ConnectionStatus
    ) -> Player:
        player = await self.player_repository.filter_one_or_raise(id=player_id)
        if player.connection_status == connection_status:
            return player

        player.connection_status = connection_status
        updated_player = await self.player_repository.update(player)
        await self.session.commit()
        return updated_player

    async def mark_number(
        self,
        card_id: UUID,
        number: int,
        max_retries: int = settings.MARK_MAX_RETRIES,
    ) -> Card:
        validate_number(number)

        for attempt in range(max_retries):
            card = await self.card_repository.get_fresh_or_raise(card_id)

            if number not in card.numbers:
                raise BingoDomainError(
                    code=DomainErrorCode.NUMBER_NOT_ON_CARD,
                    message=f"Number {number} is not on card {card_id}",
                    details={"card_id": str(card_id), "number": number},
                )

            if number in card.marked_numbers:
                return card

            player = await self.player_repository.filter_one_or_raise(
                id=card.player_id
            )
            room = await self.room_repository.get_fresh_or_raise(player.room_id)
            if number not in room.drawn_numbers:
                raise BingoDomainError(
                    code=DomainErrorCode.NUMBER_NOT_DRAWN,
                    message=f"Number {number} has not been drawn yet",
                    details={
                        "card_id": str(card_id),
                        "room_id": str(room.id),
                        "number": number,
                    },
                )

            marked = [*card.marked_numbers, number]
            if await self.card_repository.replace_marked_numbers(card, marked):
                await self.session.commit()
                return await self.card_repository.get_fresh_or_raise(card_id)

            await self.session.rollback()
            logger.warning(
                "Concurrent mark on card %s, retrying (attempt %d)",
                card_id,
                attempt + 1,
            )

        raise BingoDomainError(
            code=DomainErrorCode.MARK_CONFLICT,
            message=f"Could not mark card {card_id} after {max_retries} tries",
            details={"card_id": str(card_id), "max_retries": max_retries},
        )

    async def check_win(self, player_id: UUID) -> tuple[WinPattern | None, bool]:
        player = await self.player_repository.filter_one_or_raise(id=player_id)
        card = await self.card_repository.get_by_player_or_raise(player_id)
        return check_win(card.numbers, card.marked_numbers), player.has_won is not None

    async def declare_win(self, player_id: UUID) -> Player:
        player = await self.player_repository.filter_one_or_raise(id=player_id)
        if player.has_won is not None:
            return player

        card = await self.card_repository.get_by_player_or_raise(player_id)
        pattern = check_win(card.numbers, card.marked_numbers)
        if pattern is None:
            raise BingoDomainError(
                code=DomainErrorCode.NO_WINNING_PATTERN,
                message=f"Player {player_id} has no winning pattern",
                details={
                    "player_id": str(player_id),
                    "marked_count": len(card.marked_numbers),
                },
            )

        if await self.player_repository.record_win(player, pattern, datetime.now(UTC)):
            await self.session.commit()
            logger.info(
                "Player %s won room %s with %s", player_id, player.room_id, pattern.value
            )
        else:
            await self.session.rollback()
            logger.info("Win for player %s was already recorded", player_id)

        return await self.player_repository.get_fresh_or_raise(player_id)
