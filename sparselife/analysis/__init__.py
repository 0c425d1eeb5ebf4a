"""
Analysis module for exporting and summarising run results.
"""

from .export import export_history_to_csv, export_report, calculate_aggregate_stats

__all__ = [
    'export_history_to_csv',
    'export_report',
    'calculate_aggregate_stats',
]
