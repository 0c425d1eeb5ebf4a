"""
Simulation module containing the Life engine and the generation runner.
"""

from .engine import SimulationEngine, TickResult
from .runner import GenerationRunner

__all__ = ['SimulationEngine', 'TickResult', 'GenerationRunner']
