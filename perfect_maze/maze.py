"""Maze configuration, result contract and the one-call pipeline.

``generate_maze`` chains the stages: cell generation, rasterization and gate
carving. The returned :class:`MazeResult` owns everything one call produced
and serializes to the plain output contract with :meth:`MazeResult.to_dict`::

    {
        "matrix": ["111", "000", "111"],
        "width": 3,
        "height": 3,
        "wallSize": 10,
        "entryNodes": {
            "start": {"x": 1, "y": 1, "gate": {"x": 0, "y": 1}},
            "end": {"x": 1, "y": 1, "gate": {"x": 2, "y": 1}},
        },
    }
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from .generator import generate
from .grid import Grid, validate_dimensions
from .pathfinding import find_path
from .random_source import RandomSource, RandomSourceAdapter
from .raster import EntryPoints, RasterGrid, entry_points, open_gates, rasterize
from .types import Point

logger = logging.getLogger(__name__)

DEFAULT_WALL_SIZE = 10


@dataclass(frozen=True)
class MazeConfig:
    """Generation parameters.

    Attributes:
        width: Number of cell columns (>= 1).
        height: Number of cell rows (>= 1).
        wall_size: Pixel size consumers draw one raster cell with. Carried
            through to the result, never used by the core.
        seed: Seed for the default random source. ``None`` draws fresh entropy.
    """

    width: int
    height: int
    wall_size: int = DEFAULT_WALL_SIZE
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        validate_dimensions(self.width, self.height)
        if (
            isinstance(self.wall_size, bool)
            or not isinstance(self.wall_size, int)
            or self.wall_size < 1
        ):
            raise ValueError(f"wall_size must be >= 1, got {self.wall_size}")


@dataclass(frozen=True)
class MazeResult:
    """Output of one generation call.

    ``width`` and ``height`` are raster dimensions, i.e. ``2 * cells + 1``.
    """

    grid: Grid
    raster: RasterGrid
    entry_nodes: EntryPoints
    wall_size: int = DEFAULT_WALL_SIZE

    @property
    def matrix(self) -> List[str]:
        return self.raster.to_matrix()

    @property
    def width(self) -> int:
        return self.raster.width

    @property
    def height(self) -> int:
        return self.raster.height

    def find_path(self) -> List[Point]:
        """Shortest path from the start gate to the end gate."""
        path = find_path(
            self.raster, self.entry_nodes.start.gate, self.entry_nodes.end.gate
        )
        if not path:
            logger.warning(
                "Generated %dx%d maze has no path between its gates",
                self.grid.width,
                self.grid.height,
            )
        return path

    def to_dict(self) -> Dict[str, Any]:
        return {
            "matrix": self.matrix,
            "width": self.width,
            "height": self.height,
            "wallSize": self.wall_size,
            "entryNodes": self.entry_nodes.to_dict(),
        }


def generate_maze(
    config: MazeConfig, rng: Optional[RandomSource] = None
) -> MazeResult:
    """Generate, rasterize and open a maze described by ``config``.

    Arguments:
        config: Dimensions, draw size and optional seed.
        rng: Random source to draw from. Defaults to a fresh
            :class:`RandomSourceAdapter` seeded with ``config.seed``.
    """
    if rng is None:
        rng = RandomSourceAdapter(config.seed)
    grid = generate(config.width, config.height, rng)
    entries = entry_points(config.width, config.height)
    raster = open_gates(rasterize(grid), entries)
    logger.debug("Rasterized maze to %dx%d", raster.width, raster.height)
    return MazeResult(grid=grid, raster=raster, entry_nodes=entries, wall_size=config.wall_size)


def find_maze_path(
    matrix: Sequence[str], entry_nodes: Union[EntryPoints, Mapping[str, Any]]
) -> List[Point]:
    """Shortest path between the gates of a maze given in matrix form.

    ``entry_nodes`` may be an :class:`EntryPoints` or its dict form.
    """
    if not isinstance(entry_nodes, EntryPoints):
        entry_nodes = EntryPoints.from_dict(entry_nodes)
    raster = RasterGrid.from_matrix(matrix)
    return find_path(raster, entry_nodes.start.gate, entry_nodes.end.gate)
