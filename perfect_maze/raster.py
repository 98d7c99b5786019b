"""Rasterization of a cell grid into a wall/passage matrix.

Cell ``(x, y)`` maps onto raster positions::

    (2x+1, 2y)      north edge
    (2x+2, 2y)      north-east corner junction
    (2x+1, 2y+1)    interior
    (2x+2, 2y+1)    east edge

Column 0 and the last row are the west and south borders. Interiors are
always passage, edges are passage exactly when the wall between the two cells
is cleared, and corner junctions stay wall. A corner only touches edges, so
opening one can add a shortcut or a cycle but never joins cells the tree does
not already join.

After rasterizing, :func:`open_gates` carves the entrance on the west border
next to the top-left cell and the exit on the east border next to the
bottom-right cell. No other border cell is ever opened.
"""

from dataclasses import dataclass
from typing import Any, Iterable, List, Sequence

import numpy as np
import numpy.typing as npt
from pyrsistent import pvector
from pyrsistent.typing import PVector

from .errors import InvalidRasterError
from .grid import Grid
from .types import Point

WALL = "1"
PASSAGE = "0"

UInt8Array = npt.NDArray[np.uint8]


@dataclass(frozen=True)
class RasterGrid:
    """Immutable double-resolution grid; ``rows[y][x]`` is True for passage."""

    rows: PVector[PVector[bool]]

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    @property
    def height(self) -> int:
        return len(self.rows)

    def in_bounds(self, point: Point) -> bool:
        return 0 <= point.x < self.width and 0 <= point.y < self.height

    def is_passage(self, point: Point) -> bool:
        """True if ``point`` is inside the raster and open."""
        return self.in_bounds(point) and self.rows[point.y][point.x]

    def with_passage(self, point: Point, passage: bool = True) -> "RasterGrid":
        """Return a copy with one cell forced open (or closed)."""
        if not self.in_bounds(point):
            raise IndexError(f"{point} outside {self.width}x{self.height} raster")
        row = self.rows[point.y].set(point.x, passage)
        return RasterGrid(self.rows.set(point.y, row))

    def border(self) -> List[Point]:
        """Every border coordinate, each listed once."""
        points: List[Point] = []
        for y in range(self.height):
            for x in range(self.width):
                if x in (0, self.width - 1) or y in (0, self.height - 1):
                    points.append(Point(x, y))
        return points

    def passages(self) -> List[Point]:
        return [
            Point(x, y)
            for y, row in enumerate(self.rows)
            for x, open_ in enumerate(row)
            if open_
        ]

    def to_matrix(self) -> List[str]:
        """Rows as strings of ``'0'`` (passage) / ``'1'`` (wall)."""
        return [
            "".join(PASSAGE if open_ else WALL for open_ in row) for row in self.rows
        ]

    def to_array(self) -> UInt8Array:
        """``(height, width)`` uint8 array, 1 for wall and 0 for passage."""
        return np.array(
            [[0 if open_ else 1 for open_ in row] for row in self.rows], dtype=np.uint8
        ).reshape(self.height, self.width)

    @staticmethod
    def from_matrix(matrix: Sequence[str]) -> "RasterGrid":
        if not matrix or not matrix[0]:
            raise InvalidRasterError("Matrix must have at least one non-empty row")
        width = len(matrix[0])
        rows: List[PVector[bool]] = []
        for y, line in enumerate(matrix):
            if len(line) != width:
                raise InvalidRasterError(
                    f"Row {y} has length {len(line)}, expected {width}"
                )
            if set(line) - {WALL, PASSAGE}:
                raise InvalidRasterError(f"Row {y} contains characters other than 0/1")
            rows.append(pvector(char == PASSAGE for char in line))
        return RasterGrid(pvector(rows))

    @staticmethod
    def from_array(array: Any) -> "RasterGrid":
        """Build from any 2-D array-like of 0 (passage) / 1 (wall)."""
        data = np.asarray(array)
        if data.ndim != 2 or data.size == 0:
            raise InvalidRasterError(f"Expected a non-empty 2-D array, got shape {data.shape}")
        if not np.isin(data, (0, 1)).all():
            raise InvalidRasterError("Array values must be 0 or 1")
        return RasterGrid(pvector(pvector(bool(v == 0) for v in row) for row in data.tolist()))


@dataclass(frozen=True)
class Entry:
    """Interior raster cell next to a gate, plus the gate on the border."""

    x: int
    y: int
    gate: Point

    def to_dict(self) -> dict[str, Any]:
        return {"x": self.x, "y": self.y, "gate": self.gate.to_dict()}


@dataclass(frozen=True)
class EntryPoints:
    start: Entry
    end: Entry

    def to_dict(self) -> dict[str, Any]:
        return {"start": self.start.to_dict(), "end": self.end.to_dict()}

    @staticmethod
    def from_dict(data: Any) -> "EntryPoints":
        def entry(item: Any) -> Entry:
            gate = item["gate"]
            return Entry(int(item["x"]), int(item["y"]), Point(int(gate["x"]), int(gate["y"])))

        return EntryPoints(start=entry(data["start"]), end=entry(data["end"]))


def entry_points(width: int, height: int) -> EntryPoints:
    """Fixed gate policy for a ``width x height`` cell maze.

    Start: top-left interior cell, gate on the west border.
    End: bottom-right interior cell, gate on the east border.
    """
    end_x = 2 * width - 1
    end_y = 2 * height - 1
    return EntryPoints(
        start=Entry(1, 1, Point(0, 1)),
        end=Entry(end_x, end_y, Point(end_x + 1, end_y)),
    )


def _north_row(grid: Grid, y: int) -> Iterable[bool]:
    yield False
    for x in range(grid.width):
        yield not grid.cell(x, y).north
        yield False


def _cell_row(grid: Grid, y: int) -> Iterable[bool]:
    yield False
    for x in range(grid.width):
        yield True
        yield not grid.cell(x, y).east


def rasterize(grid: Grid) -> RasterGrid:
    """Convert ``grid`` into a ``(2*height+1) x (2*width+1)`` raster, gates closed."""
    rows: List[PVector[bool]] = []
    for y in range(grid.height):
        rows.append(pvector(_north_row(grid, y)))
        rows.append(pvector(_cell_row(grid, y)))
    rows.append(pvector([False] * (2 * grid.width + 1)))
    return RasterGrid(pvector(rows))


def open_gates(raster: RasterGrid, entries: EntryPoints) -> RasterGrid:
    """Carve the start and end gates; every other cell is left untouched."""
    for gate in (entries.start.gate, entries.end.gate):
        raster = raster.with_passage(gate)
    return raster
