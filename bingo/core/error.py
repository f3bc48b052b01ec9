from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    NOT_FOUND = "NOT_FOUND"
    INVALID_INPUT = "INVALID_INPUT"
    CONFLICT = "CONFLICT"
    EXHAUSTED = "EXHAUSTED"
    UNAVAILABLE = "UNAVAILABLE"


class DomainErrorCode(str, Enum):
    ROOM_NOT_FOUND = "ROOM_NOT_FOUND"
    PLAYER_NOT_FOUND = "PLAYER_NOT_FOUND"
    CARD_NOT_FOUND = "CARD_NOT_FOUND"

    INVALID_ROOM_CODE = "INVALID_ROOM_CODE"
    INVALID_NUMBER = "INVALID_NUMBER"
    INVALID_NAME = "INVALID_NAME"
    INVALID_SESSION_ID = "INVALID_SESSION_ID"
    NUMBER_NOT_ON_CARD = "NUMBER_NOT_ON_CARD"

    ROOM_NOT_ACCEPTING_PLAYERS = "ROOM_NOT_ACCEPTING_PLAYERS"
    ROOM_NOT_DRAWING = "ROOM_NOT_DRAWING"
    INVALID_STATUS_TRANSITION = "INVALID_STATUS_TRANSITION"
    NUMBER_NOT_DRAWN = "NUMBER_NOT_DRAWN"
    NO_WINNING_PATTERN = "NO_WINNING_PATTERN"
    DRAW_CONFLICT = "DRAW_CONFLICT"
    MARK_CONFLICT = "MARK_CONFLICT"

    NUMBERS_EXHAUSTED = "NUMBERS_EXHAUSTED"

    STORAGE_UNAVAILABLE = "STORAGE_UNAVAILABLE"
    ROOM_CODE_CREATE_FAILED = "ROOM_CODE_CREATE_FAILED"

    @property
    def kind(self) -> ErrorKind:
        return _ERROR_KINDS[self]


_ERROR_KINDS: dict[DomainErrorCode, ErrorKind] = {
    DomainErrorCode.ROOM_NOT_FOUND: ErrorKind.NOT_FOUND,
    DomainErrorCode.PLAYER_NOT_FOUND: ErrorKind.NOT_FOUND,
    DomainErrorCode.CARD_NOT_FOUND: ErrorKind.NOT_FOUND,
    DomainErrorCode.INVALID_ROOM_CODE: ErrorKind.INVALID_INPUT,
    DomainErrorCode.INVALID_NUMBER: ErrorKind.INVALID_INPUT,
    DomainErrorCode.INVALID_NAME: ErrorKind.INVALID_INPUT,
    DomainErrorCode.INVALID_SESSION_ID: ErrorKind.INVALID_INPUT,
    DomainErrorCode.NUMBER_NOT_ON_CARD: ErrorKind.INVALID_INPUT,
    DomainErrorCode.ROOM_NOT_ACCEPTING_PLAYERS: ErrorKind.CONFLICT,
    DomainErrorCode.ROOM_NOT_DRAWING: ErrorKind.CONFLICT,
    DomainErrorCode.INVALID_STATUS_TRANSITION: ErrorKind.CONFLICT,
    DomainErrorCode.NUMBER_NOT_DRAWN: ErrorKind.CONFLICT,
    DomainErrorCode.NO_WINNING_PATTERN: ErrorKind.CONFLICT,
    DomainErrorCode.DRAW_CONFLICT: ErrorKind.CONFLICT,
    DomainErrorCode.MARK_CONFLICT: ErrorKind.CONFLICT,
    DomainErrorCode.NUMBERS_EXHAUSTED: ErrorKind.EXHAUSTED,
    DomainErrorCode.STORAGE_UNAVAILABLE: ErrorKind.UNAVAILABLE,
    DomainErrorCode.ROOM_CODE_CREATE_FAILED: ErrorKind.UNAVAILABLE,
}


class BingoDomainError(Exception):
    def __init__(
        self,
        code: DomainErrorCode,
        message: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        self.code = code
        self.kind = code.kind
        self.message = message or code.name
        self.details = details or {}
        super().__init__(self.message)
