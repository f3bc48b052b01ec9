import pytest_asyncio

from bingo.services.player_service import PlayerService
from bingo.services.room_service import RoomService


@pytest_asyncio.fixture
async def mock_room_service(mocker, seeded_rng):
    session = mocker.AsyncMock()
    room_repository = mocker.AsyncMock()

    return RoomService(
        session=session,
        room_repository=room_repository,
        rng=seeded_rng,
    )


@pytest_asyncio.fixture
async def mock_player_service(mocker, first_choice_rng):
    session = mocker.AsyncMock()
    room_repository = mocker.AsyncMock()
    player_repository = mocker.AsyncMock()
    card_repository = mocker.AsyncMock()

    return PlayerService(
        session=session,
        room_repository=room_repository,
        player_repository=player_repository,
        card_repository=card_repository,
        rng=first_choice_rng,
    )
