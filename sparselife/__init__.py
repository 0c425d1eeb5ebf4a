"""
Conway's Game of Life on an unbounded plane, using a sparse grid so that
only live cells cost memory and time.
"""

from .core.cell import Cell
from .core.sparse_grid import SparseGrid
from .simulation.engine import SimulationEngine

__version__ = "0.1.0"

__all__ = ['Cell', 'SparseGrid', 'SimulationEngine']
