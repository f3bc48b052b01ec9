"""Bingo card generation.

A card is a flat row-major list of 25 integers. Column ``c`` holds indices
``c, c + 5, c + 10, c + 15, c + 20`` and draws its numbers from a fixed
15-number range (B 1-15, I 16-30, N 31-45, G 46-60, O 61-75). The centre cell
is the free cell and always holds ``FREE_CELL_VALUE``.
"""

from collections.abc import Sequence
from random import Random

GRID_SIZE = 5
CARD_SIZE = GRID_SIZE * GRID_SIZE
FREE_CELL_INDEX = 12
FREE_CELL_VALUE = 0
COLUMN_SPAN = 15
COLUMN_LETTERS = "BINGO"


def column_range(col: int) -> range:
    if not 0 <= col < GRID_SIZE:
        raise ValueError(f"column must be between 0 and {GRID_SIZE - 1}, got {col}")
    start = col * COLUMN_SPAN + 1
    return range(start, start + COLUMN_SPAN)


def _sample_column(col: int, rng: Random) -> list[int]:
    candidates = list(column_range(col))
    picked: list[int] = []
    for _ in range(GRID_SIZE):
        picked.append(candidates.pop(rng.randrange(len(candidates))))
    return picked


def generate_card(rng: Random) -> list[int]:
    columns = [_sample_column(col, rng) for col in range(GRID_SIZE)]

    card = [columns[col][row] for row in range(GRID_SIZE) for col in range(GRID_SIZE)]
    card[FREE_CELL_INDEX] = FREE_CELL_VALUE
    return card


def is_valid_card(numbers: Sequence[int]) -> bool:
    if len(numbers) != CARD_SIZE or numbers[FREE_CELL_INDEX] != FREE_CELL_VALUE:
        return False

    seen: set[int] = set()
    for index, value in enumerate(numbers):
        if index == FREE_CELL_INDEX:
            continue
        if value in seen or value not in column_range(index % GRID_SIZE):
            return False
        seen.add(value)
    return True
