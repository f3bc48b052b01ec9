import uuid

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel

from bingo.core.config import get_test_settings
from bingo.core.state_machine import RoomStatus
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
async def test_engine():
    test_settings = get_test_settings()
    engine = create_async_engine(
        test_settings.database_uri,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
        await conn.run_sync(SQLModel.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)

    await engine.dispose()


@pytest_asyncio.fixture
async def test_db_session(test_engine) -> AsyncSession:
    async_session = async_sessionmaker(
        bind=test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )

    async with async_session() as session:
        try:
            yield session
        finally:
            await session.rollback()
            await session.close()


@pytest_asyncio.fixture
async def test_room(test_db_session) -> Room:
    room = Room(
        code="ABC123",
        name="Friday Bingo",
        status=RoomStatus.WAITING,
        organizer_id="organizer-1",
        drawn_numbers=[],
    )

    test_db_session.add(room)
    await test_db_session.commit()
    await test_db_session.refresh(room)

    return room


@pytest_asyncio.fixture
async def test_drawing_room(test_db_session) -> Room:
    room = Room(
        code="XYZ789",
        name="Drawing Room",
        status=RoomStatus.DRAWING,
        organizer_id="organizer-2",
        drawn_numbers=[16, 1, 31],
    )

    test_db_session.add(room)
    await test_db_session.commit()
    await test_db_session.refresh(room)

    return room


@pytest_asyncio.fixture
async def test_player(test_db_session, test_drawing_room) -> Player:
    player = Player(
        room_id=test_drawing_room.id,
        session_id="session-1",
        name="Alice",
    )

    test_db_session.add(player)
    await test_db_session.commit()
    await test_db_session.refresh(player)

    return player


@pytest_asyncio.fixture
async def test_card(test_db_session, test_player) -> Card:
    card = Card(
        player_id=test_player.id,
        numbers=list(SAMPLE_CARD),
        marked_numbers=[],
    )

    test_db_session.add(card)
    await test_db_session.commit()
    await test_db_session.refresh(card)

    return card


@pytest.fixture
def room_id():
    return uuid.uuid4()


@pytest.fixture
def player_id():
    return uuid.uuid4()


@pytest.fixture
def card_id():
    return uuid.uuid4()


@pytest.fixture
def sample_card():
    return list(SAMPLE_CARD)
