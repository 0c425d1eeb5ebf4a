"""
Headless runner that drives the engine for a fixed number of generations.
"""

import logging
import time
from typing import Any, Dict, Iterable, List, Optional, Tuple

from ..core.config import DEFAULT_CONFIG, SimulationConfig
from .engine import SimulationEngine, TickResult

log = logging.getLogger(__name__)


class GenerationRunner:
    """
    Runs a seeded world for the configured number of generations.

    Collects a per-generation history for later export and analysis.
    """

    def __init__(self, config: Optional[SimulationConfig] = None,
                 engine: Optional[SimulationEngine] = None):
        """
        Initialize the runner.

        Args:
            config: Simulation configuration (uses defaults if None)
            engine: Engine to drive (a fresh one if None)
        """
        self.config = config if config else DEFAULT_CONFIG
        self.engine = engine if engine is not None else SimulationEngine()
        self.history: List[Dict[str, Any]] = []
        self.initial_population = 0
        self.peak_population = 0
        self.total_births = 0
        self.total_deaths = 0
        self.start_time: Optional[float] = None
        self.elapsed = 0.0
        self.initialized = False

    def seed(self, cells: Iterable[Tuple[int, int]]) -> int:
        """
        Load seed cells into the engine.

        Returns:
            Number of distinct cells added
        """
        added = 0
        for x, y in cells:
            if self.engine.add_life(x, y):
                added += 1
        log.debug("Seeded %d cells", added)
        return added

    def _record(self, result: TickResult) -> None:
        self.total_births += result.births
        self.total_deaths += result.deaths
        self.peak_population = max(self.peak_population, result.population)

        if result.generation % self.config.historyInterval != 0:
            return
        bbox = self.engine.bounding_box()
        if bbox is None:
            width = height = 0
        else:
            width = bbox[1] - bbox[0] + 1
            height = bbox[3] - bbox[2] + 1
        self.history.append({
            "generation": result.generation,
            "population": result.population,
            "births": result.births,
            "deaths": result.deaths,
            "width": width,
            "height": height,
        })

    def run(self, generations: Optional[int] = None) -> Dict[str, Any]:
        """
        Initialize the seeded world and advance it.

        The world is initialized on the first call only; later calls
        continue from the current generation.

        Args:
            generations: Number of generations (config value if None)

        Returns:
            Results dictionary, see ``get_results``
        """
        if generations is None:
            generations = self.config.generations

        self.start_time = time.time()
        if not self.initialized:
            self.initial_population = self.engine.population
            self.peak_population = self.initial_population
            self.engine.initialize()
            self.initialized = True
        log.info("Running %d generations from %d cells", generations, self.engine.population)

        for _ in range(generations):
            result = self.engine.tick()
            self._record(result)

            if result.generation % self.config.progressInterval == 0:
                log.info(
                    "Progress: %d/%d generations, %d alive, %.1fs elapsed",
                    result.generation, generations, result.population,
                    time.time() - self.start_time,
                )

        self.elapsed += time.time() - self.start_time
        log.info(
            "Finished after %d generations with %d live cells",
            self.engine.generation, self.engine.population,
        )
        return self.get_results()

    def get_results(self) -> Dict[str, Any]:
        """
        Get run results.

        Returns:
            JSON-serialisable dictionary with summary numbers, the
            per-generation history and the final live cells
        """
        return {
            "generations": self.engine.generation,
            "initial_population": self.initial_population,
            "final_population": self.engine.population,
            "peak_population": self.peak_population,
            "total_births": self.total_births,
            "total_deaths": self.total_deaths,
            "elapsed_time_seconds": self.elapsed,
            "history": list(self.history),
            "live_cells": [list(pos) for pos in self.engine.enumerate_live_cells()],
        }
