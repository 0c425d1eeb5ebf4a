"""
Core module containing the cell type, sparse grid, and configuration.
"""

from .cell import Cell
from .sparse_grid import SparseGrid
from .config import SimulationConfig, DEFAULT_CONFIG, load_config

__all__ = ['Cell', 'SparseGrid', 'SimulationConfig', 'DEFAULT_CONFIG', 'load_config']
