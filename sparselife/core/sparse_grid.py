"""
Sparse, coordinate-ordered grid for storing live cells on an unbounded plane.
"""

from bisect import bisect_left, bisect_right, insort
from typing import Callable, Dict, Iterator, List, Optional, Tuple

from .cell import Cell


class _Column:
    """Cells sharing one x coordinate, kept in ascending y order."""

    __slots__ = ("cells", "ys")

    def __init__(self):
        self.cells: Dict[int, Cell] = {}
        self.ys: List[int] = []

    def add(self, cell: Cell) -> bool:
        if cell.y in self.cells:
            return False
        self.cells[cell.y] = cell
        insort(self.ys, cell.y)
        return True

    def remove(self, y: int) -> Optional[Cell]:
        cell = self.cells.pop(y, None)
        if cell is not None:
            del self.ys[bisect_left(self.ys, y)]
        return cell

    def range(self, y_min: int, y_max: int) -> List[Cell]:
        lo = bisect_left(self.ys, y_min)
        hi = bisect_right(self.ys, y_max)
        return [self.cells[y] for y in self.ys[lo:hi]]


class SparseGrid:
    """
    Coordinate-indexed container of live cells.

    Cells are keyed first by x, then by y, and both levels are kept sorted
    so a rectangular query only visits the columns and rows it overlaps.
    Memory and query cost scale with the number of live cells, never with
    the extent of the plane.
    """

    def __init__(self):
        self._columns: Dict[int, _Column] = {}
        self._xs: List[int] = []
        self._count = 0

    def add(self, cell: Cell) -> bool:
        """
        Insert a cell unless its position is already occupied.

        Args:
            cell: Cell to insert

        Returns:
            True if the cell was stored, False if the position was taken
        """
        column = self._columns.get(cell.x)
        if column is None:
            column = _Column()
            self._columns[cell.x] = column
            insort(self._xs, cell.x)
        if not column.add(cell):
            return False
        self._count += 1
        return True

    def remove(self, x: int, y: int) -> Optional[Cell]:
        """
        Remove the cell at (x, y) if there is one.

        Returns:
            The removed cell, or None if the position was empty
        """
        column = self._columns.get(x)
        if column is None:
            return None
        cell = column.remove(y)
        if cell is None:
            return None
        self._count -= 1
        if not column.ys:
            del self._columns[x]
            del self._xs[bisect_left(self._xs, x)]
        return cell

    def get(self, x: int, y: int) -> Optional[Cell]:
        column = self._columns.get(x)
        if column is None:
            return None
        return column.cells.get(y)

    def contains(self, x: int, y: int) -> bool:
        return self.get(x, y) is not None

    def range_query(self, x_min: int, x_max: int, y_min: int, y_max: int) -> List[Cell]:
        """
        Get every cell inside a closed rectangle.

        All four bounds are inclusive. An inverted range yields no cells.

        Args:
            x_min: Smallest x to include
            x_max: Largest x to include
            y_min: Smallest y to include
            y_max: Largest y to include

        Returns:
            Cells ordered by ascending x, then ascending y
        """
        if x_min > x_max or y_min > y_max:
            return []
        results = []
        lo = bisect_left(self._xs, x_min)
        hi = bisect_right(self._xs, x_max)
        for x in self._xs[lo:hi]:
            results.extend(self._columns[x].range(y_min, y_max))
        return results

    def for_each_mut(self, fn: Callable[[Cell], None]) -> None:
        """Apply ``fn`` to every stored cell in place."""
        for cell in self:
            fn(cell)

    def bounding_box(self) -> Optional[Tuple[int, int, int, int]]:
        """
        Smallest rectangle covering all live cells.

        Returns:
            (x_min, x_max, y_min, y_max), or None if the grid is empty
        """
        if not self._xs:
            return None
        y_min = min(self._columns[x].ys[0] for x in self._xs)
        y_max = max(self._columns[x].ys[-1] for x in self._xs)
        return (self._xs[0], self._xs[-1], y_min, y_max)

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Cell]:
        for x in self._xs:
            column = self._columns[x]
            for y in column.ys:
                yield column.cells[y]

    def __contains__(self, position: object) -> bool:
        if not isinstance(position, tuple) or len(position) != 2:
            return False
        return self.contains(*position)
