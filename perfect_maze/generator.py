"""Random spanning-tree maze generation (Wilson's algorithm).

The tree starts from one random seed cell. Each further branch is a random
walk from a random cell outside the tree that runs until it touches the tree.
Whenever the walk crosses itself the loop is erased, so the branch that gets
carved is always a simple path. Grafting loop-erased walks this way yields a
spanning tree drawn uniformly from all spanning trees of the grid graph.

All randomness is drawn from the :class:`RandomSource` passed in.
"""

import logging
from typing import Dict, List

from .grid import Grid, validate_dimensions
from .random_source import RandomSource

logger = logging.getLogger(__name__)


def loop_erased_walk(grid: Grid, in_tree: List[bool], start: int, rng: RandomSource) -> List[int]:
    """Walk from ``start`` until a tree cell is reached, erasing loops as they form.

    Returns the simple path of cell indices; the last entry is the tree cell
    that ended the walk.
    """
    path: List[int] = [start]
    position: Dict[int, int] = {start: 0}
    current = start
    while not in_tree[current]:
        options = list(grid.neighbors(current).values())
        step = options[rng.random_index(len(options))]
        if step in position:
            keep = position[step]
            for dropped in path[keep + 1 :]:
                del position[dropped]
            del path[keep + 1 :]
        else:
            position[step] = len(path)
            path.append(step)
        current = step
    return path


def generate(width: int, height: int, rng: RandomSource) -> Grid:
    """Build a perfect maze over a ``width x height`` cell grid.

    Raises:
        InvalidDimensionError: ``width`` or ``height`` is not an integer >= 1.
            Nothing is drawn from ``rng`` in that case.
    """
    validate_dimensions(width, height)
    grid = Grid.blank(width, height)
    cells = grid.cells.evolver()
    in_tree: List[bool] = [False] * grid.count

    # Pool of cells outside the tree, removed by swapping with the last entry
    unvisited: List[int] = list(range(grid.count))
    slot: Dict[int, int] = {index: index for index in unvisited}

    def add_to_tree(index: int) -> None:
        in_tree[index] = True
        cells[index] = cells[index].mark_in_tree()
        hole = slot.pop(index)
        last = unvisited.pop()
        if last != index:
            unvisited[hole] = last
            slot[last] = hole

    add_to_tree(rng.random_index(grid.count))

    walks = 0
    while unvisited:
        start = unvisited[rng.random_index(len(unvisited))]
        path = loop_erased_walk(grid, in_tree, start, rng)
        walks += 1
        for a, b in zip(path, path[1:]):
            direction = grid.direction_between(a, b)
            if direction is None:
                continue
            cells[a] = cells[a].without_wall(direction)
            cells[b] = cells[b].without_wall(direction.opposite)
            if not in_tree[a]:
                add_to_tree(a)
            if not in_tree[b]:
                add_to_tree(b)

    logger.debug("Generated %dx%d maze from %d walks", width, height, walks)
    return Grid(width, height, cells.persistent())
