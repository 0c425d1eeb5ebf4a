from __future__ import annotations
import logging
import pytest
from sparselife.core.cell import COORD_MAX
from sparselife.simulation.engine import SimulationEngine, TickResult
from life_helpers import BLINKER_H, BLINKER_V, BLOCK, GLIDER, make_engine


def test_block_is_stable() -> None:
    engine = make_engine(BLOCK)
    for _ in range(5):
        engine.tick()
        assert engine.enumerate_live_cells() == sorted(BLOCK)


def test_blinker_oscillates() -> None:
    engine = make_engine(BLINKER_H)
    result = engine.tick()
    assert engine.enumerate_live_cells() == BLINKER_V
    assert result == TickResult(generation=1, births=2, deaths=2, population=3)
    engine.tick()
    assert engine.enumerate_live_cells() == BLINKER_H


@pytest.mark.parametrize(
    "cells",
    [
        [(0, 0)],
        [(0, 0), (1, 0)],
        [(4, 4), (4, 5)],
        [(-3, 7), (10, 10)],
    ],
)
def test_sparse_patterns_die_out(cells: list[tuple[int, int]]) -> None:
    engine = make_engine(cells)
    engine.tick()
    assert engine.enumerate_live_cells() == []
    assert engine.population == 0


def test_overpopulation_kills_center() -> None:
    engine = make_engine([(0, 0), (1, 0), (-1, 0), (0, 1), (0, -1)])
    engine.tick()
    assert not engine.grid.contains(0, 0)


def test_birth_with_three_neighbors() -> None:
    engine = make_engine([(0, 0), (1, 0), (0, 1)])
    assert engine.age_of(1, 1) is None
    engine.tick()
    assert engine.enumerate_live_cells() == sorted(BLOCK)
    # Newborns are aged with everyone else at the end of the tick
    assert engine.age_of(1, 1) == 1
    assert engine.age_of(0, 0) == 2
    engine.tick()
    assert engine.age_of(1, 1) == 2
    assert engine.age_of(0, 0) == 3


def test_newborn_is_not_counted_as_neighbor() -> None:
    engine = make_engine([(0, 0), (1, 0)])
    # Added after initialization, so still a newborn during the next tick
    engine.add_life(0, 1)
    assert engine.age_of(0, 1) == 0
    engine.tick()
    # Counting (0, 1) would have completed a block; without it the pair dies
    assert engine.enumerate_live_cells() == [(0, 1)]
    assert engine.age_of(0, 1) == 1


def test_newborn_is_not_surveyed() -> None:
    engine = make_engine(BLOCK)
    engine.add_life(20, 20)
    engine.tick()
    assert engine.grid.contains(20, 20)
    engine.tick()
    assert not engine.grid.contains(20, 20)
    assert engine.enumerate_live_cells() == sorted(BLOCK)


def test_newborn_does_not_cause_overpopulation() -> None:
    engine = make_engine([(0, 0), (1, 0), (-1, 0), (0, 1)])
    engine.add_life(0, -1)
    engine.tick()
    assert engine.grid.contains(0, 0)


def test_uninitialized_world_does_nothing() -> None:
    engine = make_engine(BLINKER_H, initialize=False)
    engine.tick()
    assert engine.enumerate_live_cells() == BLINKER_H
    assert [engine.age_of(x, y) for x, y in BLINKER_H] == [1, 1, 1]


def test_initialize_ages_seed_cells() -> None:
    engine = make_engine(BLOCK, initialize=False)
    assert [engine.age_of(x, y) for x, y in BLOCK] == [0, 0, 0, 0]
    engine.initialize()
    assert [engine.age_of(x, y) for x, y in BLOCK] == [1, 1, 1, 1]


def test_add_life_is_idempotent() -> None:
    engine = SimulationEngine()
    assert engine.add_life(3, 3) is True
    engine.initialize()
    assert engine.add_life(3, 3) is False
    assert engine.population == 1
    assert engine.age_of(3, 3) == 1


def test_remove_life() -> None:
    engine = make_engine(BLOCK)
    assert engine.remove_life(0, 0) is True
    assert engine.remove_life(0, 0) is False
    assert engine.population == 3


def test_empty_world_stays_empty() -> None:
    engine = make_engine([])
    for _ in range(10):
        result = engine.tick()
    assert engine.enumerate_live_cells() == []
    assert engine.generation == 10
    assert result == TickResult(generation=10, births=0, deaths=0, population=0)


def test_glider_translates() -> None:
    engine = make_engine(GLIDER)
    for _ in range(4):
        engine.tick()
    assert engine.enumerate_live_cells() == sorted((x + 1, y - 1) for x, y in GLIDER)
    for _ in range(4):
        engine.tick()
    assert engine.enumerate_live_cells() == sorted((x + 2, y - 2) for x, y in GLIDER)


def test_enumerate_order() -> None:
    engine = make_engine([(2, 0), (-5, 3), (2, -1), (-5, -3)])
    assert engine.enumerate_live_cells() == [(-5, -3), (-5, 3), (2, -1), (2, 0)]


def test_block_at_coordinate_limit() -> None:
    corner = [(COORD_MAX - 1, COORD_MAX - 1), (COORD_MAX - 1, COORD_MAX),
              (COORD_MAX, COORD_MAX - 1), (COORD_MAX, COORD_MAX)]
    engine = make_engine(corner)
    engine.tick()
    assert engine.enumerate_live_cells() == corner


def test_query_around() -> None:
    engine = make_engine([(0, 0), (2, 2), (3, 0), (-2, -2), (0, -3)])
    found = [c.position for c in engine.query_around(0, 0)]
    assert found == [(-2, -2), (0, 0), (2, 2)]


def test_tick_logs_summary(caplog: pytest.LogCaptureFixture) -> None:
    engine = make_engine(BLINKER_H)
    engine.tick()
    assert (
        "sparselife.simulation.engine",
        logging.DEBUG,
        "Generation 1: 2 born, 2 died, 3 alive",
    ) in caplog.record_tuples
