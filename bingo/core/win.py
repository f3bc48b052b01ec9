from collections.abc import Collection, Sequence
from enum import Enum

from bingo.core.card import FREE_CELL_VALUE, GRID_SIZE


class WinPattern(str, Enum):
    FULL = "full"
    LINE = "line"
    COLUMN = "column"
    DIAGONAL = "diagonal"


ROWS: tuple[tuple[int, ...], ...] = tuple(
    tuple(range(row * GRID_SIZE, (row + 1) * GRID_SIZE)) for row in range(GRID_SIZE)
)
COLUMNS: tuple[tuple[int, ...], ...] = tuple(
    tuple(range(col, GRID_SIZE * GRID_SIZE, GRID_SIZE)) for col in range(GRID_SIZE)
)
MAIN_DIAGONAL = tuple(i * (GRID_SIZE + 1) for i in range(GRID_SIZE))
ANTI_DIAGONAL = tuple((i + 1) * (GRID_SIZE - 1) for i in range(GRID_SIZE))


def check_win(numbers: Sequence[int], marked: Collection[int]) -> WinPattern | None:
    """Return the highest-priority pattern the marked cells complete.

    Priority is full card, then any row, then any column, then either
    diagonal. The free cell counts as marked.
    """
    marked_set = set(marked)

    def is_marked(index: int) -> bool:
        value = numbers[index]
        return value == FREE_CELL_VALUE or value in marked_set

    def complete(indices: Sequence[int]) -> bool:
        return all(is_marked(i) for i in indices)

    if complete(range(len(numbers))):
        return WinPattern.FULL

    if any(complete(row) for row in ROWS):
        return WinPattern.LINE

    if any(complete(col) for col in COLUMNS):
        return WinPattern.COLUMN

    if complete(MAIN_DIAGONAL) or complete(ANTI_DIAGONAL):
        return WinPattern.DIAGONAL

    return None
