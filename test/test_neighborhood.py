from __future__ import annotations
import pytest
from sparselife.core.cell import DIRECTION_OFFSETS
from sparselife.simulation.neighborhood import (
    COUNTER_TABLE,
    accumulate,
    counters_for_offset,
    new_counters,
)

OFFSETS = [(dx, dy) for dx in range(-2, 3) for dy in range(-2, 3)]


def chebyshev(a: tuple[int, int], b: tuple[int, int]) -> int:
    return max(abs(a[0] - b[0]), abs(a[1] - b[1]))


def test_table_covers_survey_box_without_center() -> None:
    assert set(COUNTER_TABLE) == {(dy, dx) for dx, dy in OFFSETS if (dx, dy) != (0, 0)}


@pytest.mark.parametrize("dx,dy", OFFSETS)
def test_table_matches_adjacency(dx: int, dy: int) -> None:
    expected = tuple(
        i
        for i, d in enumerate(DIRECTION_OFFSETS)
        if d != (dx, dy) and chebyshev(d, (dx, dy)) <= 1
    )
    if (dx, dy) == (0, 0):
        # The center is pre-seeded into every counter
        assert counters_for_offset(dx, dy) == ()
    else:
        assert counters_for_offset(dx, dy) == expected


def test_each_counter_collects_eight_neighbors() -> None:
    # Every adjacent position has 8 neighbors: the center plus 7 table entries
    for index in range(8):
        hits = [key for key, value in COUNTER_TABLE.items() if index in value]
        assert len(hits) == 7


def test_offsets_outside_box_contribute_nothing() -> None:
    assert counters_for_offset(3, 0) == ()
    assert counters_for_offset(0, -3) == ()


def test_accumulate_full_box() -> None:
    counters = new_counters()
    assert counters == [1] * 8
    for dx, dy in OFFSETS:
        accumulate(counters, dx, dy)
    assert counters == [8] * 8


def test_accumulate_blinker_end() -> None:
    # Left end of a horizontal blinker sees its two partners to the east
    counters = new_counters()
    accumulate(counters, 1, 0)
    accumulate(counters, 2, 0)
    assert counters == [1, 2, 3, 1, 2, 1, 2, 3]
