"""
Main entry point for the sparse Life simulation.

Run with:
    python -m sparselife.main < pattern.lif             # 10 generations to stdout
    python -m sparselife.main pattern.lif -g 100        # custom generation count
    python -m sparselife.main pattern.lif --report r.json --stats-csv h.csv
"""

import argparse
import logging
import sys
from typing import List, Optional

import colorlog

from .analysis.export import calculate_aggregate_stats, export_history_to_csv, export_report
from .core.config import ConfigError, SimulationConfig, load_config
from .patterns.life106 import Life106FormatError, format_life106, read_life106
from .simulation.runner import GenerationRunner

log = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def setup_logging(level: str) -> None:
    """Send coloured log records to stderr."""
    colorlog.basicConfig(
        format="%(log_color)s[%(levelname)-8s] %(message)s",
        log_colors={
            "DEBUG": "cyan",
            "INFO": "bold",
            "WARNING": "yellow",
            "ERROR": "red",
            "CRITICAL": "bold_red",
        },
        level=getattr(logging, level),
        stream=sys.stderr,
    )


def build_config(args: argparse.Namespace) -> SimulationConfig:
    """Load the config file, if any, and apply command line overrides."""
    config = load_config(args.config) if args.config else SimulationConfig()
    overrides = config.to_dict()
    if args.generations is not None:
        overrides["generations"] = args.generations
    if args.stats_csv is not None:
        overrides["statsOutputFile"] = args.stats_csv
    if args.report is not None:
        overrides["reportOutputFile"] = args.report
    return SimulationConfig.from_dict(overrides)


def run(args: argparse.Namespace) -> int:
    """
    Read a pattern, evolve it, and write the result to stdout.

    Returns:
        Process exit status
    """
    try:
        config = build_config(args)
        if args.pattern == "-":
            cells = read_life106(sys.stdin, config.header)
        else:
            with open(args.pattern, encoding="utf-8") as fp:
                cells = read_life106(fp, config.header)
    except (ConfigError, Life106FormatError, OSError) as e:
        log.error("%s", e)
        return 1

    runner = GenerationRunner(config)
    runner.seed(cells)
    results = runner.run()

    try:
        if config.statsOutputFile:
            export_history_to_csv(results["history"], config.statsOutputFile)
        if config.reportOutputFile:
            results["aggregates"] = calculate_aggregate_stats(results["history"])
            export_report(results, config.reportOutputFile)
    except OSError as e:
        log.error("Could not write results: %s", e)
        return 1

    sys.stdout.write(format_life106(runner.engine.enumerate_live_cells(), config.header))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Conway's Game of Life on an unbounded sparse grid")
    parser.add_argument("pattern", nargs="?", default="-",
                        help="Life 1.06 pattern file (default: stdin)")
    parser.add_argument("-g", "--generations", type=int, default=None,
                        help="Number of generations to simulate [default: 10]")
    parser.add_argument("-c", "--config", default=None, help="JSON configuration file")
    parser.add_argument("--stats-csv", default=None, help="Write per-generation statistics to CSV")
    parser.add_argument("--report", default=None, help="Write a JSON run report")
    parser.add_argument("-l", "--log-level", choices=LOG_LEVELS, default="WARNING",
                        type=str.upper, help="Set logging level [default: WARNING]")

    args = parser.parse_args(argv)
    setup_logging(args.log_level)
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
