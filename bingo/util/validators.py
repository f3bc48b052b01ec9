from bingo.core.draw import MAX_NUMBER, MIN_NUMBER
from bingo.core.error import BingoDomainError, DomainErrorCode
from bingo.core.room_code import ROOM_CODE_LENGTH, is_valid_room_code

ROOM_NAME_MAX_LENGTH = 100
PLAYER_NAME_MAX_LENGTH = 50
SESSION_ID_MAX_LENGTH = 64


def normalize_room_code(code: str) -> str:
    normalized = code.strip().upper()
    if not is_valid_room_code(normalized):
        raise BingoDomainError(
            code=DomainErrorCode.INVALID_ROOM_CODE,
            message=f"Room code must be {ROOM_CODE_LENGTH} letters or digits",
            details={
                "code": code,
            },
        )
    return normalized


def validate_number(number: int) -> int:
    if isinstance(number, bool) or not MIN_NUMBER <= number <= MAX_NUMBER:
        raise BingoDomainError(
            code=DomainErrorCode.INVALID_NUMBER,
            message=f"Number must be between {MIN_NUMBER} and {MAX_NUMBER}",
            details={
                "number": number,
            },
        )
    return number


def _validate_name(name: str, max_length: int) -> str:
    stripped = name.strip()

    if not stripped:
        raise BingoDomainError(
            code=DomainErrorCode.INVALID_NAME,
            message="Name cannot be empty or only whitespace",
            details={
                "name": name,
            },
        )

    if len(stripped) > max_length:
        raise BingoDomainError(
            code=DomainErrorCode.INVALID_NAME,
            message=f"Name must be {max_length} characters or less",
            details={
                "name": name,
                "length": len(stripped),
            },
        )

    return stripped


def validate_room_name(name: str) -> str:
    return _validate_name(name, ROOM_NAME_MAX_LENGTH)


def validate_player_name(name: str) -> str:
    return _validate_name(name, PLAYER_NAME_MAX_LENGTH)


def validate_session_id(session_id: str) -> str:
    if not session_id or session_id.isspace() or len(session_id) > SESSION_ID_MAX_LENGTH:
        raise BingoDomainError(
            code=DomainErrorCode.INVALID_SESSION_ID,
            message=f"Session ID must be 1 to {SESSION_ID_MAX_LENGTH} characters",
            details={
                "session_id": session_id,
            },
        )
    return session_id
