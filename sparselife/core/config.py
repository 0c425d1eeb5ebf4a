"""
Configuration classes and defaults for the Life simulation.
"""

import json
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Optional, Union


LIFE_106_HEADER = "#Life 1.06"


class ConfigError(ValueError):
    """Raised when a configuration file cannot be used."""


@dataclass
class SimulationConfig:
    """Configuration for a simulation run."""

    # Run length
    generations: int = 10

    # Pattern format
    header: str = LIFE_106_HEADER

    # Reporting
    progressInterval: int = 1000
    historyInterval: int = 1

    # Output
    statsOutputFile: Optional[str] = None
    reportOutputFile: Optional[str] = None

    def __post_init__(self):
        for name in ("generations", "progressInterval", "historyInterval"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise ConfigError(f"{name} must be an integer, got {value!r}")
        if not isinstance(self.header, str):
            raise ConfigError(f"header must be a string, got {self.header!r}")
        for name in ("statsOutputFile", "reportOutputFile"):
            value = getattr(self, name)
            if value is not None and not isinstance(value, str):
                raise ConfigError(f"{name} must be a path or null, got {value!r}")
        if self.generations < 0:
            raise ConfigError(f"generations must be non-negative, got {self.generations}")
        if self.progressInterval < 1:
            raise ConfigError(f"progressInterval must be positive, got {self.progressInterval}")
        if self.historyInterval < 1:
            raise ConfigError(f"historyInterval must be positive, got {self.historyInterval}")

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "SimulationConfig":
        """Create config from dictionary, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})


def load_config(path: Union[str, Path]) -> SimulationConfig:
    """
    Load a configuration from a JSON file.

    Args:
        path: Path to a JSON object whose keys are ``SimulationConfig`` fields

    Returns:
        The loaded configuration

    Raises:
        ConfigError: If the file cannot be read or does not hold a JSON object
    """
    try:
        with open(path) as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"Could not read config file {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a JSON object")
    try:
        return SimulationConfig.from_dict(data)
    except TypeError as e:
        raise ConfigError(f"Invalid value in config file {path}: {e}") from e


# Default configuration instance
DEFAULT_CONFIG = SimulationConfig()
