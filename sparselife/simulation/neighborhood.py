"""
Lookup tables for simultaneous neighbor counting.

A live cell surveys the 5x5 box around itself. Every cell it finds is a
neighbor of some of the eight positions adjacent to the center, so a
single pass over the box yields the live-neighbor count of all eight
candidate birth positions at once.
"""

from typing import Dict, List, Tuple

from ..core.cell import DIRECTION_OFFSETS


SURVEY_RADIUS = 2

# Every adjacent position starts with the center cell as one live neighbor
CENTER_CONTRIBUTION = 1

BIRTH_COUNT = 3
SURVIVAL_COUNTS = frozenset((2, 3))

# (dy, dx) of a surveyed cell relative to the center -> direction counters
# it increments. Directions: 0 NW, 1 N, 2 NE, 3 W, 4 E, 5 SW, 6 S, 7 SE.
COUNTER_TABLE: Dict[Tuple[int, int], Tuple[int, ...]] = {
    (2, -2): (0,),
    (2, -1): (0, 1),
    (2, 0): (0, 1, 2),
    (2, 1): (1, 2),
    (2, 2): (2,),

    (1, -2): (0, 3),
    (1, -1): (1, 3),
    (1, 0): (0, 2, 3, 4),
    (1, 1): (1, 4),
    (1, 2): (2, 4),

    (0, -2): (0, 3, 5),
    (0, -1): (0, 1, 5, 6),
    (0, 1): (1, 2, 6, 7),
    (0, 2): (2, 4, 7),

    (-1, -2): (3, 5),
    (-1, -1): (3, 6),
    (-1, 0): (3, 4, 5, 7),
    (-1, 1): (4, 6),
    (-1, 2): (4, 7),

    (-2, -2): (5,),
    (-2, -1): (5, 6),
    (-2, 0): (5, 6, 7),
    (-2, 1): (6, 7),
    (-2, 2): (7,),
}


def counters_for_offset(dx: int, dy: int) -> Tuple[int, ...]:
    """
    Direction counters incremented by a cell at offset (dx, dy) from the center.

    Offsets outside the survey box, and the center itself, increment nothing.
    """
    return COUNTER_TABLE.get((dy, dx), ())


def new_counters() -> List[int]:
    return [CENTER_CONTRIBUTION] * len(DIRECTION_OFFSETS)


def accumulate(counters: List[int], dx: int, dy: int) -> None:
    for index in counters_for_offset(dx, dy):
        counters[index] += 1
