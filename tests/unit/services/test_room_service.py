import pytest

from bingo.core.error import BingoDomainError, DomainErrorCode
from bingo.core.room_code import is_valid_room_code
from bingo.core.state_machine import RoomStatus
from bingo.models.room import Room


def make_room(room_id, status=RoomStatus.WAITING, drawn_numbers=None, version=0):
    return Room(
        id=room_id,
        code="ABC123",
        name="Friday Bingo",
        status=status,
        organizer_id="organizer-1",
        drawn_numbers=drawn_numbers or [],
        version=version,
    )


class TestRoomServiceCreateRoom:
    @pytest.mark.asyncio
    async def test_create_room_success(self, mock_room_service):
        mock_room_service.room_repository.code_exists.return_value = False
        mock_room_service.room_repository.create.side_effect = lambda room: room

        room = await mock_room_service.create_room("  Friday Bingo ", "organizer-1")

        assert room.name == "Friday Bingo"
        assert room.status == RoomStatus.WAITING
        assert room.organizer_id == "organizer-1"
        assert room.drawn_numbers == []
        assert is_valid_room_code(room.code)
        mock_room_service.session.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_create_room_generates_organizer_id(self, mock_room_service):
        mock_room_service.room_repository.code_exists.return_value = False
        mock_room_service.room_repository.create.side_effect = lambda room: room

        room = await mock_room_service.create_room("Friday Bingo")

        assert room.organizer_id

    @pytest.mark.asyncio
    async def test_create_room_invalid_name(self, mock_room_service):
        with pytest.raises(BingoDomainError) as exc_info:
            await mock_room_service.create_room("   ")

        assert exc_info.value.code == DomainErrorCode.INVALID_NAME
        mock_room_service.room_repository.create.assert_not_awaited()
        mock_room_service.session.commit.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_create_room_retries_on_code_collision(self, mock_room_service):
        mock_room_service.room_repository.code_exists.side_effect = [True, True, False]
        mock_room_service.room_repository.create.side_effect = lambda room: room

        room = await mock_room_service.create_room("Friday Bingo")

        assert mock_room_service.room_repository.code_exists.await_count == 3
        last_checked = mock_room_service.room_repository.code_exists.await_args.args[0]
        assert room.code == last_checked

    @pytest.mark.asyncio
    async def test_create_room_code_attempts_exhausted(self, mock_room_service):
        mock_room_service.room_repository.code_exists.return_value = True

        with pytest.raises(BingoDomainError) as exc_info:
            await mock_room_service.generate_unique_code(max_attempts=3)

        assert exc_info.value.code == DomainErrorCode.ROOM_CODE_CREATE_FAILED
        assert exc_info.value.details["max_attempts"] == 3
        assert mock_room_service.room_repository.code_exists.await_count == 3


class TestRoomServiceLookup:
    @pytest.mark.asyncio
    async def test_get_room_by_code_is_case_normalized(self, mock_room_service, room_id):
        room = make_room(room_id)
        mock_room_service.room_repository.filter_one_or_raise.return_value = room

        result = await mock_room_service.get_room_by_code("abc123")

        assert result is room
        mock_room_service.room_repository.filter_one_or_raise.assert_awaited_once_with(
            code="ABC123"
        )

    @pytest.mark.asyncio
    async def test_get_room_by_code_invalid(self, mock_room_service):
        with pytest.raises(BingoDomainError) as exc_info:
            await mock_room_service.get_room_by_code("ABC")

        assert exc_info.value.code == DomainErrorCode.INVALID_ROOM_CODE
        mock_room_service.room_repository.filter_one_or_raise.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_get_room_not_found(self, mock_room_service, room_id):
        mock_room_service.room_repository.filter_one_or_raise.side_effect = (
            BingoDomainError(
                code=DomainErrorCode.ROOM_NOT_FOUND,
                message="Room not found",
                details={"room_id": str(room_id)},
            )
        )

        with pytest.raises(BingoDomainError) as exc_info:
            await mock_room_service.get_room(room_id)

        assert exc_info.value.code == DomainErrorCode.ROOM_NOT_FOUND

    @pytest.mark.asyncio
    async def test_get_available_numbers(self, mock_room_service, room_id):
        room = make_room(room_id, RoomStatus.DRAWING, drawn_numbers=list(range(3, 76)))
        mock_room_service.room_repository.filter_one_or_raise.return_value = room

        assert await mock_room_service.get_available_numbers(room_id) == [1, 2]


class TestRoomServiceStatus:
    @pytest.mark.asyncio
    async def test_start_drawing(self, mock_room_service, room_id):
        repo = mock_room_service.room_repository
        room = make_room(room_id)
        after = make_room(room_id, RoomStatus.DRAWING, version=1)
        repo.get_fresh_or_raise.side_effect = [room, after]
        repo.change_status.return_value = True

        result = await mock_room_service.start_drawing(room_id)

        assert result.status == RoomStatus.DRAWING
        repo.change_status.assert_awaited_once_with(
            room, RoomStatus.WAITING, RoomStatus.DRAWING
        )
        mock_room_service.session.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_finish_game(self, mock_room_service, room_id):
        repo = mock_room_service.room_repository
        repo.get_fresh_or_raise.side_effect = [
            make_room(room_id, RoomStatus.DRAWING),
            make_room(room_id, RoomStatus.FINISHED, version=1),
        ]
        repo.change_status.return_value = True

        result = await mock_room_service.finish_game(room_id)

        assert result.status == RoomStatus.FINISHED

    @pytest.mark.asyncio
    async def test_same_status_is_noop(self, mock_room_service, room_id):
        room = make_room(room_id, RoomStatus.DRAWING)
        mock_room_service.room_repository.get_fresh_or_raise.return_value = room

        result = await mock_room_service.update_status(room_id, RoomStatus.DRAWING)

        assert result is room
        mock_room_service.room_repository.change_status.assert_not_awaited()
        mock_room_service.session.commit.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_skipping_to_finished_is_rejected(self, mock_room_service, room_id):
        room = make_room(room_id)
        mock_room_service.room_repository.get_fresh_or_raise.return_value = room

        with pytest.raises(BingoDomainError) as exc_info:
            await mock_room_service.finish_game(room_id)

        assert exc_info.value.code == DomainErrorCode.INVALID_STATUS_TRANSITION
        assert room.status == RoomStatus.WAITING
        mock_room_service.session.commit.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_concurrent_start_settles_as_noop(self, mock_room_service, room_id):
        repo = mock_room_service.room_repository
        started = make_room(room_id, RoomStatus.DRAWING, version=1)
        repo.get_fresh_or_raise.side_effect = [make_room(room_id), started]
        repo.change_status.return_value = False

        result = await mock_room_service.start_drawing(room_id)

        assert result is started
        repo.change_status.assert_awaited_once()
        mock_room_service.session.rollback.assert_awaited_once()
        mock_room_service.session.commit.assert_not_awaited()


class TestRoomServiceDraw:
    @pytest.mark.asyncio
    async def test_draw_explicit_number(self, mock_room_service, room_id):
        before = make_room(room_id, RoomStatus.DRAWING, drawn_numbers=[5])
        after = make_room(room_id, RoomStatus.DRAWING, drawn_numbers=[5, 42], version=1)
        repo = mock_room_service.room_repository
        repo.get_fresh_or_raise.side_effect = [before, after]
        repo.append_drawn_number.return_value = True

        result = await mock_room_service.draw_number(room_id, 42)

        assert result.drawn_numbers == [5, 42]
        repo.append_drawn_number.assert_awaited_once_with(before, 42)
        mock_room_service.session.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_draw_random_number_is_undrawn(self, mock_room_service, room_id):
        drawn = list(range(1, 75))
        room = make_room(room_id, RoomStatus.DRAWING, drawn_numbers=drawn)
        repo = mock_room_service.room_repository
        repo.get_fresh_or_raise.return_value = room
        repo.append_drawn_number.return_value = True

        await mock_room_service.draw_number(room_id)

        repo.append_drawn_number.assert_awaited_once_with(room, 75)

    @pytest.mark.asyncio
    async def test_draw_duplicate_is_noop(self, mock_room_service, room_id):
        room = make_room(room_id, RoomStatus.DRAWING, drawn_numbers=[5, 42])
        mock_room_service.room_repository.get_fresh_or_raise.return_value = room

        result = await mock_room_service.draw_number(room_id, 42)

        assert result.drawn_numbers == [5, 42]
        mock_room_service.room_repository.append_drawn_number.assert_not_awaited()
        mock_room_service.session.commit.assert_not_awaited()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("number", [0, 76, -3])
    async def test_draw_out_of_range(self, mock_room_service, room_id, number):
        with pytest.raises(BingoDomainError) as exc_info:
            await mock_room_service.draw_number(room_id, number)

        assert exc_info.value.code == DomainErrorCode.INVALID_NUMBER
        mock_room_service.room_repository.get_fresh_or_raise.assert_not_awaited()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [RoomStatus.WAITING, RoomStatus.FINISHED])
    async def test_draw_requires_drawing_status(self, mock_room_service, room_id, status):
        room = make_room(room_id, status)
        mock_room_service.room_repository.get_fresh_or_raise.return_value = room

        with pytest.raises(BingoDomainError) as exc_info:
            await mock_room_service.draw_number(room_id, 10)

        assert exc_info.value.code == DomainErrorCode.ROOM_NOT_DRAWING

    @pytest.mark.asyncio
    @pytest.mark.parametrize("number", [None, 10])
    async def test_draw_exhausted(self, mock_room_service, room_id, number):
        room = make_room(room_id, RoomStatus.DRAWING, drawn_numbers=list(range(1, 76)))
        mock_room_service.room_repository.get_fresh_or_raise.return_value = room

        with pytest.raises(BingoDomainError) as exc_info:
            await mock_room_service.draw_number(room_id, number)

        assert exc_info.value.code == DomainErrorCode.NUMBERS_EXHAUSTED
        mock_room_service.room_repository.append_drawn_number.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_draw_retries_after_lost_race(self, mock_room_service, room_id):
        stale = make_room(room_id, RoomStatus.DRAWING, drawn_numbers=[5])
        fresh = make_room(room_id, RoomStatus.DRAWING, drawn_numbers=[5, 9], version=1)
        done = make_room(room_id, RoomStatus.DRAWING, drawn_numbers=[5, 9, 42], version=2)
        repo = mock_room_service.room_repository
        repo.get_fresh_or_raise.side_effect = [stale, fresh, done]
        repo.append_drawn_number.side_effect = [False, True]

        result = await mock_room_service.draw_number(room_id, 42)

        assert result.drawn_numbers == [5, 9, 42]
        assert repo.append_drawn_number.await_count == 2
        mock_room_service.session.rollback.assert_awaited_once()
        mock_room_service.session.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_draw_race_resolved_by_other_writer(self, mock_room_service, room_id):
        stale = make_room(room_id, RoomStatus.DRAWING, drawn_numbers=[5])
        fresh = make_room(room_id, RoomStatus.DRAWING, drawn_numbers=[5, 42], version=1)
        repo = mock_room_service.room_repository
        repo.get_fresh_or_raise.side_effect = [stale, fresh]
        repo.append_drawn_number.return_value = False

        result = await mock_room_service.draw_number(room_id, 42)

        assert result.drawn_numbers == [5, 42]
        repo.append_drawn_number.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_draw_gives_up_after_max_retries(self, mock_room_service, room_id):
        room = make_room(room_id, RoomStatus.DRAWING, drawn_numbers=[5])
        repo = mock_room_service.room_repository
        repo.get_fresh_or_raise.return_value = room
        repo.append_drawn_number.return_value = False

        with pytest.raises(BingoDomainError) as exc_info:
            await mock_room_service.draw_number(room_id, 42, max_retries=3)

        assert exc_info.value.code == DomainErrorCode.DRAW_CONFLICT
        assert repo.append_drawn_number.await_count == 3
        mock_room_service.session.commit.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_draw_losing_to_finish_is_rejected(self, mock_room_service, room_id):
        repo = mock_room_service.room_repository
        repo.get_fresh_or_raise.side_effect = [
            make_room(room_id, RoomStatus.DRAWING, drawn_numbers=[5]),
            make_room(room_id, RoomStatus.FINISHED, drawn_numbers=[5], version=1),
        ]
        repo.append_drawn_number.return_value = False

        with pytest.raises(BingoDomainError) as exc_info:
            await mock_room_service.draw_number(room_id, 42)

        assert exc_info.value.code == DomainErrorCode.ROOM_NOT_DRAWING
        mock_room_service.session.commit.assert_not_awaited()
