"""Shortest paths over a raster grid.

:func:`find_path` is A* with a Manhattan heuristic over 4-connected unit-cost
moves; :func:`bfs_path` is a plain breadth-first search with the same contract,
handy as an independent reference. Both return the path as a list of
:class:`Point` including both endpoints, or ``[]`` if the goal is unreachable.
Neither mutates the raster.
"""

import heapq
import itertools
import logging
from collections import deque
from typing import Dict, List, Optional, Set, Tuple, Union

from .raster import RasterGrid
from .types import Coord, Direction, Point

logger = logging.getLogger(__name__)

PointLike = Union[Point, Coord]

# Heap entry: (f, h, insertion order, point)
_HeapEntry = Tuple[int, int, int, Point]


def _as_point(value: PointLike) -> Point:
    if isinstance(value, Point):
        return value
    x, y = value
    return Point(x, y)


def manhattan(a: Point, b: Point) -> int:
    return abs(a.x - b.x) + abs(a.y - b.y)


def open_neighbors(raster: RasterGrid, point: Point) -> List[Point]:
    """Passage cells one step away, in N/S/W/E order."""
    result: List[Point] = []
    for direction in Direction:
        dx, dy = direction.delta
        candidate = Point(point.x + dx, point.y + dy)
        if raster.is_passage(candidate):
            result.append(candidate)
    return result


def _reconstruct(parent: Dict[Point, Optional[Point]], goal: Point) -> List[Point]:
    path: List[Point] = []
    current: Optional[Point] = goal
    while current is not None:
        path.append(current)
        current = parent[current]
    path.reverse()
    return path


def find_path(raster: RasterGrid, start: PointLike, goal: PointLike) -> List[Point]:
    """A* shortest path from ``start`` to ``goal``.

    The frontier is a binary heap keyed by ``f = g + h``. When a cheaper ``g``
    is found for a queued point the new entry supersedes the old one, which is
    skipped when popped. Ties on ``f`` go to the lower ``h`` and then to the
    earlier insertion, so the result is stable for a given raster.

    Arguments:
        raster: Grid to search; only passage cells are walkable.
        start: First point of the path.
        goal: Last point of the path.

    Returns:
        The path including both endpoints, or ``[]`` when no path exists
        (including when either endpoint is a wall or out of bounds).
    """
    start_p = _as_point(start)
    goal_p = _as_point(goal)
    if not raster.is_passage(start_p) or not raster.is_passage(goal_p):
        logger.debug("Endpoint blocked: start=%s goal=%s", start_p, goal_p)
        return []

    counter = itertools.count()
    h0 = manhattan(start_p, goal_p)
    frontier: List[_HeapEntry] = [(h0, h0, next(counter), start_p)]
    best_g: Dict[Point, int] = {start_p: 0}
    parent: Dict[Point, Optional[Point]] = {start_p: None}
    closed: Set[Point] = set()

    while frontier:
        f, h, _, current = heapq.heappop(frontier)
        if current in closed or f - h != best_g[current]:
            # Superseded by a cheaper entry
            continue
        if current == goal_p:
            path = _reconstruct(parent, current)
            logger.debug(
                "Path found: %d steps, %d nodes expanded", len(path) - 1, len(closed) + 1
            )
            return path
        closed.add(current)

        tentative = best_g[current] + 1
        for neighbor in open_neighbors(raster, current):
            if neighbor in closed:
                continue
            if tentative < best_g.get(neighbor, tentative + 1):
                best_g[neighbor] = tentative
                parent[neighbor] = current
                nh = manhattan(neighbor, goal_p)
                heapq.heappush(frontier, (tentative + nh, nh, next(counter), neighbor))

    logger.debug("No path from %s to %s, %d nodes expanded", start_p, goal_p, len(closed))
    return []


def bfs_path(raster: RasterGrid, start: PointLike, goal: PointLike) -> List[Point]:
    """Finds the shortest path from start to goal using BFS.
    Only traverses passage cells.
    Returns the path as a list of points (including both start and goal), or [] if unreachable.
    """
    start_p = _as_point(start)
    goal_p = _as_point(goal)
    if not raster.is_passage(start_p) or not raster.is_passage(goal_p):
        return []
    if start_p == goal_p:
        return [start_p]
    queue: deque[Point] = deque([start_p])
    parent: Dict[Point, Optional[Point]] = {start_p: None}

    while queue:
        pos = queue.popleft()
        for np_ in open_neighbors(raster, pos):
            if np_ not in parent:
                parent[np_] = pos
                if np_ == goal_p:
                    return _reconstruct(parent, np_)
                queue.append(np_)
    return []


def path_length(path: List[Point]) -> int:
    """Number of moves (edges) in ``path``; 0 for empty or single-point paths."""
    return max(len(path) - 1, 0)
