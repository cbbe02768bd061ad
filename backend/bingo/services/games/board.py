import random
from typing import List, Optional, Sequence

BOARD_SIDE = 5
BOARD_CELLS = BOARD_SIDE * BOARD_SIDE


def _lines() -> List[List[int]]:
    rows = [[r * BOARD_SIDE + c for c in range(BOARD_SIDE)] for r in range(BOARD_SIDE)]
    cols = [[r * BOARD_SIDE + c for r in range(BOARD_SIDE)] for c in range(BOARD_SIDE)]
    diagonal = [i * BOARD_SIDE + i for i in range(BOARD_SIDE)]
    anti_diagonal = [i * BOARD_SIDE + (BOARD_SIDE - 1 - i) for i in range(BOARD_SIDE)]
    return rows + cols + [diagonal, anti_diagonal]


# Rows, then columns, then (0,6,12,18,24) and (4,8,12,16,20)
LINES = _lines()


def generate_board(rng: Optional[random.Random] = None) -> List[int]:
    """Return a uniformly shuffled board holding 1..25 exactly once.

    Fisher-Yates from the last index down to 1, swapping each slot with a
    uniformly chosen slot at or before it.
    """
    rng = rng or random
    numbers = list(range(1, BOARD_CELLS + 1))
    for i in range(len(numbers) - 1, 0, -1):
        j = rng.randint(0, i)
        numbers[i], numbers[j] = numbers[j], numbers[i]
    return numbers


def count_completed_lines(marks: Sequence[bool]) -> int:
    """Count fully marked rows, columns and diagonals of a row-major 5x5 grid."""
    return sum(1 for line in LINES if all(marks[i] for i in line))
