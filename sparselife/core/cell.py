"""
Cell value type and saturating coordinate arithmetic.
"""

from typing import Tuple


# Coordinates are kept within the signed 64-bit range
COORD_MIN = -(2 ** 63)
COORD_MAX = 2 ** 63 - 1


def saturating_add(value: int, delta: int) -> int:
    """Add ``delta`` to ``value``, clamping the result to the coordinate range."""
    return max(COORD_MIN, min(COORD_MAX, value + delta))


def saturating_sub(value: int, delta: int) -> int:
    """Subtract ``delta`` from ``value``, clamping the result to the coordinate range."""
    return max(COORD_MIN, min(COORD_MAX, value - delta))


# Direction index -> (dx, dy) of the adjacent position, with +y pointing north
DIRECTION_OFFSETS: Tuple[Tuple[int, int], ...] = (
    (-1, 1),   # 0 NW
    (0, 1),    # 1 N
    (1, 1),    # 2 NE
    (-1, 0),   # 3 W
    (1, 0),    # 4 E
    (-1, -1),  # 5 SW
    (0, -1),   # 6 S
    (1, -1),   # 7 SE
)


class Cell:
    """
    A single live cell.

    The position is fixed for the lifetime of the cell; only the age
    changes. Two cells are equal when they occupy the same position.
    """

    __slots__ = ("_x", "_y", "age")

    def __init__(self, x: int, y: int, age: int = 0):
        """
        Initialize a cell.

        Args:
            x: Column coordinate
            y: Row coordinate
            age: Generations survived since creation (0 = just born)
        """
        self._x = x
        self._y = y
        self.age = age

    @property
    def x(self) -> int:
        return self._x

    @property
    def y(self) -> int:
        return self._y

    @property
    def position(self) -> Tuple[int, int]:
        return (self._x, self._y)

    def tick(self) -> None:
        """Age the cell by one generation."""
        self.age += 1

    def is_close_neighbor(self, other: "Cell") -> bool:
        """
        Check whether another cell lies within Chebyshev distance 1.

        The cell itself counts as its own close neighbor; callers that
        need to exclude it compare positions first.
        """
        dx = other.x - self._x
        dy = other.y - self._y
        return -1 <= dx <= 1 and -1 <= dy <= 1

    def neighbor_coordinates(self, direction: int) -> Tuple[int, int]:
        """
        Absolute coordinates of one of the eight adjacent positions.

        Args:
            direction: Direction index 0..7 (NW, N, NE, W, E, SW, S, SE)

        Returns:
            (x, y) of the adjacent position, clamped to the coordinate range

        Raises:
            IndexError: If ``direction`` is outside 0..7
        """
        if not 0 <= direction < len(DIRECTION_OFFSETS):
            raise IndexError(f"Invalid direction index: {direction}")
        dx, dy = DIRECTION_OFFSETS[direction]
        return (saturating_add(self._x, dx), saturating_add(self._y, dy))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cell):
            return NotImplemented
        return self.position == other.position

    def __hash__(self) -> int:
        return hash(self.position)

    def __repr__(self) -> str:
        return f"Cell(x={self._x}, y={self._y}, age={self.age})"
