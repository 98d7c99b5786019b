"""Common type aliases and enumerations."""

from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Tuple

# Raster coordinate alias (x, y)
Coord = Tuple[int, int]


class Direction(StrEnum):
    """Cardinal directions, in the order neighbours are enumerated."""

    NORTH = auto()
    SOUTH = auto()
    WEST = auto()
    EAST = auto()

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITE[self]

    @property
    def delta(self) -> Coord:
        """Unit step ``(dx, dy)``; y grows downwards."""
        return _DELTA[self]


_OPPOSITE = {
    Direction.NORTH: Direction.SOUTH,
    Direction.SOUTH: Direction.NORTH,
    Direction.WEST: Direction.EAST,
    Direction.EAST: Direction.WEST,
}

_DELTA = {
    Direction.NORTH: (0, -1),
    Direction.SOUTH: (0, 1),
    Direction.WEST: (-1, 0),
    Direction.EAST: (1, 0),
}


@dataclass(frozen=True, order=True)
class Point:
    """Raster coordinate.

    Attributes:
        x: Column index (0 at left).
        y: Row index (0 at top).
    """

    x: int
    y: int

    def to_dict(self) -> dict[str, int]:
        return {"x": self.x, "y": self.y}
