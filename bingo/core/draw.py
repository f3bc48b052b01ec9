from collections.abc import Collection
from random import Random

from bingo.core.error import BingoDomainError, DomainErrorCode

MIN_NUMBER = 1
MAX_NUMBER = 75
TOTAL_NUMBERS = MAX_NUMBER - MIN_NUMBER + 1

ALL_NUMBERS = frozenset(range(MIN_NUMBER, MAX_NUMBER + 1))


def next_available_numbers(drawn: Collection[int]) -> set[int]:
    return set(ALL_NUMBERS.difference(drawn))


def pick_number(drawn: Collection[int], rng: Random) -> int:
    available = sorted(next_available_numbers(drawn))
    if not available:
        raise BingoDomainError(
            code=DomainErrorCode.NUMBERS_EXHAUSTED,
            message=f"All {TOTAL_NUMBERS} numbers have already been drawn",
            details={"drawn_count": len(drawn)},
        )
    return rng.choice(available)
