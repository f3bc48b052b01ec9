"""Room lifecycle rules.

Rooms move strictly forward: ``waiting -> drawing -> finished``. Every
room-mutating operation asks this module first, so status checks are not
repeated ad hoc at call sites.
"""

from enum import Enum
from typing import Any, Protocol
from uuid import UUID

from bingo.core.draw import TOTAL_NUMBERS
from bingo.core.error import BingoDomainError, DomainErrorCode


class RoomStatus(str, Enum):
    WAITING = "waiting"
    DRAWING = "drawing"
    FINISHED = "finished"


class RoomLike(Protocol):
    id: UUID
    status: RoomStatus
    drawn_numbers: list[int]


ALLOWED_TRANSITIONS: dict[RoomStatus, frozenset[RoomStatus]] = {
    RoomStatus.WAITING: frozenset({RoomStatus.DRAWING}),
    RoomStatus.DRAWING: frozenset({RoomStatus.FINISHED}),
    RoomStatus.FINISHED: frozenset(),
}


def can_transition(current: RoomStatus, target: RoomStatus) -> bool:
    return target in ALLOWED_TRANSITIONS[current]


def ensure_transition(room: RoomLike, target: RoomStatus) -> bool:
    """Validate a status change.

    Returns False when the room is already in ``target`` (nothing to do) and
    True when the transition should be applied.
    """
    current = RoomStatus(room.status)
    if current == target:
        return False

    if not can_transition(current, target):
        raise BingoDomainError(
            code=DomainErrorCode.INVALID_STATUS_TRANSITION,
            message=f"Room cannot move from {current.value} to {target.value}",
            details=_room_details(room, target=target.value),
        )
    return True


def ensure_can_join(room: RoomLike, *, existing_player: Any | None) -> None:
    if existing_player is not None:
        return

    if room.status != RoomStatus.WAITING:
        raise BingoDomainError(
            code=DomainErrorCode.ROOM_NOT_ACCEPTING_PLAYERS,
            message=f"Room with ID {room.id} is not accepting players",
            details=_room_details(room),
        )


def ensure_can_draw(room: RoomLike) -> None:
    if room.status != RoomStatus.DRAWING:
        raise BingoDomainError(
            code=DomainErrorCode.ROOM_NOT_DRAWING,
            message=f"Room with ID {room.id} is not drawing numbers",
            details=_room_details(room),
        )

    if len(room.drawn_numbers) >= TOTAL_NUMBERS:
        raise BingoDomainError(
            code=DomainErrorCode.NUMBERS_EXHAUSTED,
            message=f"All {TOTAL_NUMBERS} numbers have already been drawn",
            details=_room_details(room, drawn_count=len(room.drawn_numbers)),
        )


def _room_details(room: RoomLike, **extra: Any) -> dict[str, Any]:
    return {"room_id": str(room.id), "status": RoomStatus(room.status).value, **extra}
