"""Cell grid model.

A :class:`Grid` is a ``width x height`` block of :class:`Cell` values stored
row-major in a persistent vector (``index = y * width + x``). Each cell carries
an in-tree flag and one flag per wall; ``True`` means the wall is present.

Grids are immutable value objects. The generator builds one through a
``pvector`` evolver and hands back the frozen result.
"""

from dataclasses import dataclass, replace
from typing import Dict, List, Optional, Tuple

from pyrsistent import pvector
from pyrsistent.typing import PVector

from .errors import InvalidDimensionError
from .types import Coord, Direction


@dataclass(frozen=True)
class Cell:
    """Single maze cell.

    Attributes:
        in_tree: True once the cell belongs to the spanning tree.
        north: Wall towards ``y - 1``.
        south: Wall towards ``y + 1``.
        west: Wall towards ``x - 1``.
        east: Wall towards ``x + 1``.
    """

    in_tree: bool = False
    north: bool = True
    south: bool = True
    west: bool = True
    east: bool = True

    def has_wall(self, direction: Direction) -> bool:
        return getattr(self, direction.value)

    def without_wall(self, direction: Direction) -> "Cell":
        return replace(self, **{direction.value: False})

    def mark_in_tree(self) -> "Cell":
        return replace(self, in_tree=True)


def validate_dimensions(width: object, height: object) -> None:
    """Raise :class:`InvalidDimensionError` unless both are integers >= 1."""
    for value in (width, height):
        if isinstance(value, bool) or not isinstance(value, int) or value < 1:
            raise InvalidDimensionError(width, height)


@dataclass(frozen=True)
class Grid:
    width: int
    height: int
    cells: PVector[Cell]

    @staticmethod
    def blank(width: int, height: int) -> "Grid":
        """All walls present, no cell in the tree."""
        validate_dimensions(width, height)
        return Grid(width, height, pvector([Cell()] * (width * height)))

    @property
    def count(self) -> int:
        return self.width * self.height

    def index(self, x: int, y: int) -> int:
        return y * self.width + x

    def coords(self, index: int) -> Coord:
        return index % self.width, index // self.width

    def cell(self, x: int, y: int) -> Cell:
        return self.cells[self.index(x, y)]

    def neighbors(self, index: int) -> Dict[Direction, int]:
        """In-bounds neighbour indices keyed by direction, in N/S/W/E order."""
        x, y = self.coords(index)
        result: Dict[Direction, int] = {}
        for direction in Direction:
            dx, dy = direction.delta
            nx, ny = x + dx, y + dy
            if 0 <= nx < self.width and 0 <= ny < self.height:
                result[direction] = self.index(nx, ny)
        return result

    def direction_between(self, a: int, b: int) -> Optional[Direction]:
        """Direction from cell ``a`` to adjacent cell ``b``; ``None`` if not adjacent."""
        for direction, index in self.neighbors(a).items():
            if index == b:
                return direction
        return None

    def open_edges(self) -> List[Tuple[int, int]]:
        """Adjacent pairs ``(a, b)`` with ``a < b`` whose shared wall is cleared on both sides."""
        edges: List[Tuple[int, int]] = []
        for a, cell in enumerate(self.cells):
            for direction in (Direction.SOUTH, Direction.EAST):
                b = self.neighbors(a).get(direction)
                if b is None:
                    continue
                if not cell.has_wall(direction) and not self.cells[b].has_wall(
                    direction.opposite
                ):
                    edges.append((a, b))
        return edges

    def is_complete(self) -> bool:
        return all(cell.in_tree for cell in self.cells)
