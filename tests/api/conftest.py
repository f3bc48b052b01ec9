import uuid

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from bingo.core.state_machine import RoomStatus
from bingo.db.session import get_session
from bingo.dependencies.repositories import (
    get_card_repository,
    get_player_repository,
    get_room_repository,
)
from bingo.dependencies.services import get_player_service, get_room_service
from bingo.main import app
from bingo.models.card import Card
from bingo.models.player import Player
from bingo.models.room import Room

SAMPLE_CARD = [
    1, 16, 31, 46, 61,
    2, 17, 32, 47, 62,
    3, 18, 0, 48, 63,
    4, 19, 34, 49, 64,
    5, 20, 35, 50, 65,
]


@pytest_asyncio.fixture
async def client(mocker):
    mock_session = mocker.AsyncMock()

    mock_room_repository = mocker.AsyncMock()
    mock_player_repository = mocker.AsyncMock()
    mock_card_repository = mocker.AsyncMock()

    mock_room_service = mocker.AsyncMock()
    mock_player_service = mocker.AsyncMock()

    app.dependency_overrides[get_session] = lambda: mock_session

    app.dependency_overrides[get_room_repository] = lambda: mock_room_repository
    app.dependency_overrides[get_player_repository] = lambda: mock_player_repository
    app.dependency_overrides[get_card_repository] = lambda: mock_card_repository

    app.dependency_overrides[get_room_service] = lambda: mock_room_service
    app.dependency_overrides[get_player_service] = lambda: mock_player_service

    mocks = {
        "session": mock_session,
        "repositories": {
            "room": mock_room_repository,
            "player": mock_player_repository,
            "card": mock_card_repository,
        },
        "services": {
            "room_service": mock_room_service,
            "player_service": mock_player_service,
        },
    }

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client_instance:
        yield client_instance, mocks

    app.dependency_overrides.clear()


@pytest.fixture
def mock_room():
    return Room(
        id=uuid.uuid4(),
        code="ABC123",
        name="Friday Bingo",
        status=RoomStatus.WAITING,
        organizer_id="organizer-1",
        drawn_numbers=[],
    )


@pytest.fixture
def mock_player(mock_room):
    return Player(
        id=uuid.uuid4(),
        room_id=mock_room.id,
        session_id="session-1",
        name="Alice",
    )


@pytest.fixture
def mock_card(mock_player):
    return Card(
        id=uuid.uuid4(),
        player_id=mock_player.id,
        numbers=list(SAMPLE_CARD),
        marked_numbers=[],
    )
