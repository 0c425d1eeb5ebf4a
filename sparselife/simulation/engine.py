"""
Generation-by-generation Life engine on top of the sparse grid.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Set, Tuple

from ..core.cell import Cell, saturating_add, saturating_sub
from ..core.sparse_grid import SparseGrid
from .neighborhood import (
    BIRTH_COUNT,
    SURVEY_RADIUS,
    SURVIVAL_COUNTS,
    accumulate,
    new_counters,
)

log = logging.getLogger(__name__)


@dataclass
class TickResult:
    """Summary of one generation transition."""

    generation: int
    births: int
    deaths: int
    population: int


class SimulationEngine:
    """
    Owns a sparse grid and advances it one generation at a time.

    Cells of age 0 are newborns: they are neither surveyed nor counted as
    live neighbors until they have been aged once. ``initialize`` ages
    the seed cells so that the first ``tick`` treats them as established.
    """

    def __init__(self, grid: Optional[SparseGrid] = None):
        self.grid = grid if grid is not None else SparseGrid()
        self.generation = 0

    def add_life(self, x: int, y: int) -> bool:
        """
        Seed a live cell with age 0.

        Returns:
            True if a cell was created, False if one already lived there
        """
        return self.grid.add(Cell(x, y))

    def remove_life(self, x: int, y: int) -> bool:
        return self.grid.remove(x, y) is not None

    def initialize(self) -> None:
        """Age every loaded cell once before the first generation."""
        self.grid.for_each_mut(Cell.tick)
        log.debug("Initialized %d seed cells", len(self.grid))

    def query_around(self, x: int, y: int) -> List[Cell]:
        """Get all cells in the 5x5 box centered on (x, y)."""
        return self.grid.range_query(
            saturating_sub(x, SURVEY_RADIUS),
            saturating_add(x, SURVEY_RADIUS),
            saturating_sub(y, SURVEY_RADIUS),
            saturating_add(y, SURVEY_RADIUS),
        )

    def survey(self, cell: Cell) -> Tuple[bool, List[Tuple[int, int]]]:
        """
        Inspect the neighborhood of one established cell.

        Counts the cell's own live neighbors and, in the same pass, the
        live neighbors of each of its eight adjacent positions.

        Args:
            cell: Center cell (age >= 1)

        Returns:
            Tuple of (survives, birth positions nominated by this cell)
        """
        close_count = 0
        counters = new_counters()

        for neighbor in self.query_around(cell.x, cell.y):
            if neighbor.position == cell.position:
                continue
            if neighbor.age == 0:
                continue
            if cell.is_close_neighbor(neighbor):
                close_count += 1
            accumulate(counters, neighbor.x - cell.x, neighbor.y - cell.y)

        births = [
            cell.neighbor_coordinates(direction)
            for direction, count in enumerate(counters)
            if count == BIRTH_COUNT
        ]
        return close_count in SURVIVAL_COUNTS, births

    def tick(self) -> TickResult:
        """
        Advance the world by exactly one generation.

        Deaths and births are decided against the grid as it stood when
        the call began and applied only once every cell has been surveyed.
        """
        doomed: List[Cell] = []
        nursery: Set[Tuple[int, int]] = set()

        for cell in self.grid:
            if cell.age == 0:
                continue
            survives, births = self.survey(cell)
            nursery.update(births)
            if not survives:
                doomed.append(cell)

        deaths = 0
        for cell in doomed:
            if self.remove_life(cell.x, cell.y):
                deaths += 1

        born = 0
        for x, y in sorted(nursery):
            if self.add_life(x, y):
                born += 1

        self.grid.for_each_mut(Cell.tick)
        self.generation += 1

        log.debug(
            "Generation %d: %d born, %d died, %d alive",
            self.generation, born, deaths, len(self.grid),
        )
        return TickResult(
            generation=self.generation,
            births=born,
            deaths=deaths,
            population=len(self.grid),
        )

    def enumerate_live_cells(self) -> List[Tuple[int, int]]:
        """Positions of all live cells, ordered by ascending x then y."""
        return [cell.position for cell in self.grid]

    def age_of(self, x: int, y: int) -> Optional[int]:
        cell = self.grid.get(x, y)
        return cell.age if cell is not None else None

    def bounding_box(self) -> Optional[Tuple[int, int, int, int]]:
        return self.grid.bounding_box()

    @property
    def population(self) -> int:
        return len(self.grid)
