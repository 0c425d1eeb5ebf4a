"""
Reader and writer for the Life 1.06 pattern format.

A Life 1.06 file starts with the line ``#Life 1.06`` and lists one live
cell per line as two space-separated integers, ``x`` then ``y``.
"""

import logging
import re
from typing import Iterable, Iterator, List, TextIO, Tuple

from ..core.cell import COORD_MAX, COORD_MIN
from ..core.config import LIFE_106_HEADER

log = logging.getLogger(__name__)

INTEGER_RE = re.compile(r"[+-]?[0-9]+")


class Life106FormatError(ValueError):
    """Raised when input is not a valid Life 1.06 pattern."""

    def __init__(self, message: str, lineno: int = 0):
        if lineno:
            message = f"line {lineno}: {message}"
        super().__init__(message)
        self.lineno = lineno


def _parse_coordinate(token: str, lineno: int) -> int:
    if not INTEGER_RE.fullmatch(token):
        raise Life106FormatError(f"invalid coordinate {token!r}", lineno)
    value = int(token)
    if not COORD_MIN <= value <= COORD_MAX:
        raise Life106FormatError(f"coordinate {token} out of range", lineno)
    return value


def parse_life106(lines: Iterable[str], header: str = LIFE_106_HEADER) -> List[Tuple[int, int]]:
    """
    Parse a Life 1.06 pattern.

    Args:
        lines: Lines of the pattern, with or without trailing newlines
        header: Required first line

    Returns:
        Cell positions in file order (duplicates preserved)

    Raises:
        Life106FormatError: If the header is missing or wrong, or a line
            does not end in two integers, or the input cannot be decoded
    """
    try:
        return _parse_lines(lines, header)
    except UnicodeDecodeError as e:
        raise Life106FormatError(f"input is not valid text: {e}") from e


def _parse_lines(lines: Iterable[str], header: str) -> List[Tuple[int, int]]:
    cells = []
    it = iter(lines)
    try:
        first = next(it)
    except StopIteration:
        raise Life106FormatError("empty input, expected header line") from None
    if first.strip() != header:
        raise Life106FormatError(f"file does not begin with {header!r} header", 1)

    for lineno, line in enumerate(it, start=2):
        clean = line.strip()
        if not clean:
            continue
        parts = clean.split(" ")
        if len(parts) < 2:
            raise Life106FormatError(f"expected '<x> <y>', got {clean!r}", lineno)
        x = _parse_coordinate(parts[-2], lineno)
        y = _parse_coordinate(parts[-1], lineno)
        cells.append((x, y))

    log.debug("Parsed %d cells", len(cells))
    return cells


def read_life106(fp: TextIO, header: str = LIFE_106_HEADER) -> List[Tuple[int, int]]:
    """Parse a Life 1.06 pattern from an open text file."""
    return parse_life106(fp, header)


def iter_life106(cells: Iterable[Tuple[int, int]], header: str = LIFE_106_HEADER) -> Iterator[str]:
    yield header
    for x, y in cells:
        yield f"{x} {y}"


def format_life106(cells: Iterable[Tuple[int, int]], header: str = LIFE_106_HEADER) -> str:
    """Render cell positions as Life 1.06 text, ending with a newline."""
    return "\n".join(iter_life106(cells, header)) + "\n"
