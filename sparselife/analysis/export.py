"""
Export functions for saving run results to CSV and JSON.
"""

import csv
import json
import logging
from typing import Any, Dict, List

import numpy as np

log = logging.getLogger(__name__)

HISTORY_FIELDS = ['generation', 'population', 'births', 'deaths', 'width', 'height']

AGGREGATE_METRICS = ['population', 'births', 'deaths']


def export_history_to_csv(history: List[Dict[str, Any]],
                          filename: str = "life_history.csv") -> str:
    """
    Export the per-generation history to CSV format.

    Args:
        history: History entries as recorded by ``GenerationRunner``
        filename: Output filename

    Returns:
        Path to saved CSV file
    """
    with open(filename, 'w', newline='') as csvfile:
        writer = csv.DictWriter(csvfile, fieldnames=HISTORY_FIELDS, extrasaction='ignore')
        writer.writeheader()
        for entry in history:
            writer.writerow(entry)

    log.info("History saved to: %s", filename)
    return filename


def export_report(results: Dict[str, Any], filename: str = "life_report.json") -> str:
    """
    Export a full run report to JSON.

    Args:
        results: Results dictionary from ``GenerationRunner.get_results``
        filename: Output filename

    Returns:
        Path to saved JSON file
    """
    with open(filename, 'w') as f:
        json.dump(results, f, indent=2)

    log.info("Report saved to: %s", filename)
    return filename


def calculate_aggregate_stats(history: List[Dict[str, Any]]) -> Dict[str, float]:
    """
    Calculate mean, standard deviation, minimum and maximum across generations.

    Args:
        history: History entries as recorded by ``GenerationRunner``

    Returns:
        Dictionary with ``<metric>_mean``, ``_std``, ``_min`` and ``_max``
        for each metric; empty if there is no history
    """
    if not history:
        return {}

    aggregates = {}

    for metric in AGGREGATE_METRICS:
        values = np.array([entry[metric] for entry in history if metric in entry], dtype=float)
        if values.size == 0:
            continue
        aggregates[f"{metric}_mean"] = float(values.mean())
        aggregates[f"{metric}_std"] = float(values.std(ddof=1)) if values.size > 1 else 0.0
        aggregates[f"{metric}_min"] = float(values.min())
        aggregates[f"{metric}_max"] = float(values.max())

    return aggregates
