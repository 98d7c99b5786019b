import logging
import random

import pytest

from perfect_maze import (
    InvalidDimensionError,
    MazeConfig,
    MazeResult,
    Point,
    RandomSourceAdapter,
    SequenceRandomSource,
    bfs_path,
    find_maze_path,
    generate_maze,
    path_length,
)
from tests.test_utils import (
    assert_valid_path,
    border_passages,
    cleared_wall_count,
    make_maze,
    open_raster_pairs,
    points,
    reachable_cells,
)

SIZES = [(1, 1), (1, 7), (7, 1), (2, 2), (3, 5), (10, 10), (25, 14)]


def test_worked_example() -> None:
    result = make_maze(1, 1)
    assert result.matrix == ["111", "000", "111"]
    assert result.width == 3
    assert result.height == 3
    assert result.find_path() == points([(0, 1), (1, 1), (2, 1)])


def test_two_by_one_exact_layout() -> None:
    result = generate_maze(MazeConfig(2, 1), SequenceRandomSource([0, 0, 0]))
    assert result.matrix == ["11111", "00000", "11111"]
    assert path_length(result.find_path()) == 4


@pytest.mark.parametrize("width, height", SIZES)
@pytest.mark.parametrize("seed", [0, 7, 1234])
def test_maze_properties(width: int, height: int, seed: int) -> None:
    result = make_maze(width, height, seed)
    count = width * height

    # spanning tree over the cells
    assert cleared_wall_count(result.grid) == count - 1
    assert len(result.grid.open_edges()) == count - 1
    assert len(reachable_cells(result.grid)) == count

    # raster shape
    matrix = result.matrix
    assert len(matrix) == 2 * height + 1
    assert all(len(row) == 2 * width + 1 for row in matrix)
    assert result.width == 2 * width + 1
    assert result.height == 2 * height + 1

    # border closed except the two gates
    start_gate = result.entry_nodes.start.gate
    end_gate = result.entry_nodes.end.gate
    assert sorted(border_passages(result.raster)) == sorted([start_gate, end_gate])

    # raster passages form a tree: cells + tree edges + two gates
    passages = result.raster.passages()
    assert len(passages) == count + (count - 1) + 2
    assert open_raster_pairs(result.raster) == len(passages) - 1

    # shortest path
    path = result.find_path()
    assert_valid_path(result.raster, path, start_gate, end_gate)
    assert path_length(path) == path_length(bfs_path(result.raster, start_gate, end_gate))


@pytest.mark.parametrize("width, height", [(3, 3), (12, 8)])
def test_every_cell_reachable_in_raster(width: int, height: int) -> None:
    result = make_maze(width, height, seed=3)
    gate = result.entry_nodes.start.gate
    for y in range(height):
        for x in range(width):
            assert bfs_path(result.raster, gate, Point(2 * x + 1, 2 * y + 1))


def test_seed_reproducible() -> None:
    a = make_maze(15, 9, seed=99)
    b = make_maze(15, 9, seed=99)
    assert a.matrix == b.matrix
    assert a == b


def test_random_sequence_reproducible() -> None:
    rng = random.Random(4)
    values = [rng.randrange(1 << 16) for _ in range(100_000)]
    a = generate_maze(MazeConfig(8, 6), SequenceRandomSource(values))
    b = generate_maze(MazeConfig(8, 6), SequenceRandomSource(values))
    assert a.matrix == b.matrix


def test_explicit_rng_overrides_seed() -> None:
    a = generate_maze(MazeConfig(10, 10, seed=1), RandomSourceAdapter(seed=2))
    b = generate_maze(MazeConfig(10, 10, seed=2))
    assert a.matrix == b.matrix


def test_unseeded_generation_is_valid() -> None:
    result = make_maze(6, 6, seed=None)
    assert len(result.grid.open_edges()) == 35
    assert result.find_path()


@pytest.mark.parametrize("width, height", [(0, 5), (5, 0), (-3, 2)])
def test_invalid_config(width: int, height: int) -> None:
    with pytest.raises(InvalidDimensionError):
        MazeConfig(width, height)


@pytest.mark.parametrize("wall_size", [0, -4, "big", 2.5, True, None])
def test_invalid_wall_size(wall_size: object) -> None:
    with pytest.raises(ValueError):
        MazeConfig(3, 3, wall_size=wall_size)  # type: ignore[arg-type]


def test_to_dict_contract() -> None:
    result = generate_maze(MazeConfig(2, 3, wall_size=12, seed=5))
    data = result.to_dict()
    assert set(data) == {"matrix", "width", "height", "wallSize", "entryNodes"}
    assert data["matrix"] == result.matrix
    assert data["width"] == 5
    assert data["height"] == 7
    assert data["wallSize"] == 12
    assert data["entryNodes"] == {
        "start": {"x": 1, "y": 1, "gate": {"x": 0, "y": 1}},
        "end": {"x": 3, "y": 5, "gate": {"x": 4, "y": 5}},
    }


def test_find_maze_path_on_serialized_form() -> None:
    result = make_maze(9, 7, seed=21)
    data = result.to_dict()
    from_dict = find_maze_path(data["matrix"], data["entryNodes"])
    from_entries = find_maze_path(result.matrix, result.entry_nodes)
    assert from_dict == from_entries == result.find_path()


def test_find_maze_path_unreachable() -> None:
    entry_nodes = {
        "start": {"x": 1, "y": 1, "gate": {"x": 0, "y": 1}},
        "end": {"x": 1, "y": 1, "gate": {"x": 2, "y": 1}},
    }
    assert find_maze_path(["111", "010", "111"], entry_nodes) == []


def test_broken_maze_logs_warning(caplog: pytest.LogCaptureFixture) -> None:
    result = make_maze(1, 1)
    broken = MazeResult(
        grid=result.grid,
        raster=result.raster.with_passage(Point(1, 1), False),
        entry_nodes=result.entry_nodes,
    )
    with caplog.at_level(logging.WARNING, logger="perfect_maze.maze"):
        assert broken.find_path() == []
    assert "no path between its gates" in caplog.text
