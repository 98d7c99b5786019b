"""Perfect maze generation and shortest-path search.

The package builds a uniform random spanning tree over a rectangular cell
grid (loop-erased random walks), rasterizes it into a double-resolution
wall/passage grid with an entrance and exit gate, and answers shortest-path
queries over that raster with A*.

Typical use::

    from perfect_maze import MazeConfig, generate_maze

    result = generate_maze(MazeConfig(width=10, height=8, seed=7))
    path = result.find_path()
"""

from .errors import (
    InvalidDimensionError,
    InvalidRasterError,
    MazeError,
    RandomSourceExhaustedError,
)
from .generator import generate
from .grid import Cell, Grid
from .maze import MazeConfig, MazeResult, find_maze_path, generate_maze
from .pathfinding import bfs_path, find_path, path_length
from .random_source import RandomSource, RandomSourceAdapter, SequenceRandomSource
from .raster import Entry, EntryPoints, RasterGrid, entry_points, open_gates, rasterize
from .types import Coord, Direction, Point

__all__ = [
    "Cell",
    "Coord",
    "Direction",
    "Entry",
    "EntryPoints",
    "Grid",
    "InvalidDimensionError",
    "InvalidRasterError",
    "MazeConfig",
    "MazeError",
    "MazeResult",
    "Point",
    "RandomSource",
    "RandomSourceAdapter",
    "RandomSourceExhaustedError",
    "RasterGrid",
    "SequenceRandomSource",
    "bfs_path",
    "entry_points",
    "find_maze_path",
    "find_path",
    "generate",
    "generate_maze",
    "open_gates",
    "path_length",
    "rasterize",
]
