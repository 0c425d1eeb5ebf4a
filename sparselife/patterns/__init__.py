"""
Pattern file readers and writers.
"""

from .life106 import Life106FormatError, format_life106, parse_life106, read_life106

__all__ = ['Life106FormatError', 'format_life106', 'parse_life106', 'read_life106']
