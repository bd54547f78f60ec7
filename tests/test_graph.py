import os, sys
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import logging

import numpy as np
import pytest

from maze_solver.graph import (
    MazeGraph, Position, build_adjacency, build_graph, find_boundary_vertices,
    reduce_vertices, sample_vertices,
)
from maze_solver.mazes.generator import generate_maze
from maze_solver.planners import PLANNERS, path_cost
from tests.grid_utils import grid_from_ascii, snapshot


def _connected(grid):
    vertices = sample_vertices(grid)
    build_adjacency(vertices)
    return vertices


def test_position_neighbors_drop_negative_coordinates():
    assert Position(0, 0).neighbors() == [Position(1, 0), Position(0, 1)]
    assert Position(2, 3).neighbors() == [
        Position(1, 3), Position(3, 3), Position(2, 2), Position(2, 4)
    ]
    assert Position(1, 1) == Position(1, 1)
    assert len({Position(1, 1), Position(1, 1)}) == 1


def test_sampler_emits_open_cells_in_row_major_order():
    grid = grid_from_ascii([
        ".#.",
        "..#",
    ])
    vertices = sample_vertices(grid)
    assert [v.pos.as_tuple() for v in vertices] == [(0, 0), (0, 2), (1, 0), (1, 1)]
    assert all(v.neighbors == [] for v in vertices)


def test_sampler_rejects_non_2d_input():
    with pytest.raises(ValueError):
        sample_vertices(np.ones((2, 2, 3)))


def test_all_wall_raster_gives_empty_graph():
    grid = np.zeros((4, 5), dtype=np.uint8)
    assert sample_vertices(grid) == []
    graph = build_graph(grid)
    assert len(graph) == 0
    assert graph.start is None and graph.end is None
    for cls in PLANNERS.values():
        assert cls().plan(graph)["success"] is False


def test_adjacency_is_symmetric_with_equal_weights():
    maze = generate_maze(8, 8, braid=0.2, rng=np.random.default_rng(3))
    vertices = _connected(maze.grid)
    for i, v in enumerate(vertices):
        assert 1 <= len(v.neighbors) <= 4
        for j, w in v.neighbors:
            back = vertices[j].edge_to(i)
            assert back is not None and back[1] == w == 1.0


def test_straight_corridor_collapses_to_one_edge():
    grid = grid_from_ascii([
        "#####",
        "#####",
        ".....",
        "#####",
        "#####",
    ])
    vertices = _connected(grid)
    assert reduce_vertices(vertices) == 3
    assert vertices[0].neighbors == [(4, 4.0)]
    assert vertices[4].neighbors == [(0, 4.0)]
    assert all(v.neighbors == [] for v in vertices[1:4])


def test_bent_corridor_weight_is_cell_count_minus_one():
    grid = grid_from_ascii([
        "#####",
        "#...#",
        "###.#",
        "###.#",
        "#####",
    ])
    vertices = _connected(grid)
    reduce_vertices(vertices)
    assert vertices[0].neighbors == [(4, 4.0)]
    assert vertices[4].neighbors == [(0, 4.0)]


def test_reducer_respects_keep():
    grid = grid_from_ascii(["....."])
    vertices = _connected(grid)
    reduce_vertices(vertices, keep=[2])
    assert vertices[0].neighbors == [(2, 2.0)]
    assert sorted(vertices[2].neighbors) == [(0, 2.0), (4, 2.0)]
    assert vertices[4].neighbors == [(2, 2.0)]


def test_reducer_is_idempotent():
    maze = generate_maze(12, 12, braid=0.1, rng=np.random.default_rng(11))
    vertices = _connected(maze.grid)
    assert reduce_vertices(vertices) > 0
    before = snapshot(vertices)
    assert reduce_vertices(vertices) == 0
    assert snapshot(vertices) == before


def test_reduced_edges_stay_symmetric():
    maze = generate_maze(10, 10, braid=0.15, rng=np.random.default_rng(5))
    graph = build_graph(maze.grid)
    for i, v in enumerate(graph.vertices):
        for j, w in v.neighbors:
            assert j != i
            back = graph.vertices[j].edge_to(i)
            assert back is not None and back[1] == w


def test_isolated_2x2_block_is_not_folded():
    grid = grid_from_ascii([
        "..",
        "..",
    ])
    vertices = _connected(grid)
    assert reduce_vertices(vertices) == 1
    for i, v in enumerate(vertices):
        targets = [j for j, _ in v.neighbors]
        assert i not in targets
        assert len(targets) == len(set(targets))
    # 1 and 2 were diagonal; the collapsed corner joins them with weight 2
    assert vertices[1].edge_to(2) == (2, 2.0)
    assert vertices[2].edge_to(1) == (1, 2.0)


def test_2x2_room_inside_maze_keeps_shortest_cost():
    grid = grid_from_ascii([
        "#.##",
        "#..#",
        "#..#",
        "##.#",
    ])
    graph = build_graph(grid)
    assert graph.position(graph.start) == Position(0, 1)
    assert graph.position(graph.end) == Position(3, 2)
    for cls in PLANNERS.values():
        res = cls().plan(graph)
        assert res["success"]
        assert path_cost(graph, res["path"]) == 4.0


def test_boundary_scan_order_on_open_square():
    grid = np.full((3, 3), 255, dtype=np.uint8)
    vertices = sample_vertices(grid)
    assert find_boundary_vertices(vertices, 3, 3) == [0, 6, 1, 7, 2, 8, 3, 5]


def test_boundary_single_row_is_not_scanned_twice():
    vertices = sample_vertices(np.ones((1, 3), dtype=np.uint8))
    assert find_boundary_vertices(vertices, 3, 1) == [0, 1, 2]
    assert find_boundary_vertices([], 0, 0) == []


def test_boundary_finds_entrance_and_exit():
    grid = grid_from_ascii([
        "#.###",
        "#...#",
        "#...#",
        "#...#",
        "###.#",
    ])
    graph = build_graph(grid)
    assert graph.position(graph.start) == Position(0, 1)
    assert graph.position(graph.end) == Position(4, 3)


def test_ambiguous_boundary_is_advisory(caplog):
    grid = np.full((3, 3), 255, dtype=np.uint8)
    with caplog.at_level(logging.WARNING):
        graph = build_graph(grid)
    assert "Could not find definitive start/end" in caplog.text
    assert (graph.start, graph.end) == (0, 6)


def test_single_boundary_cell_leaves_end_unset(caplog):
    grid = grid_from_ascii([
        "#.#",
        "#.#",
        "###",
    ])
    graph = build_graph(grid)
    assert graph.start == 0
    assert graph.end is None
    assert "Could not find definitive" in caplog.text


def test_explicit_endpoints_on_open_square():
    grid = np.full((3, 3), 255, dtype=np.uint8)
    raw = build_graph(grid, reduce=False, start=(0, 0), end=(2, 2))
    costs = {}
    for name, cls in PLANNERS.items():
        res = cls().plan(raw)
        assert res["path"][0] == raw.start and res["path"][-1] == raw.end
        costs[name] = path_cost(raw, res["path"])
    assert costs["bfs"] == costs["dijkstra"] == 4.0
    assert costs["dfs"] >= 4.0

    reduced = MazeGraph.from_grid(grid, start=(0, 0), end=(2, 2))
    best = PLANNERS["dijkstra"]().plan(reduced)
    assert path_cost(reduced, best["path"]) == 4.0
    assert reduced.active_vertices() < len(reduced)


def test_explicit_endpoint_on_wall_raises():
    grid = grid_from_ascii([".#", ".."])
    with pytest.raises(ValueError):
        build_graph(grid, start=(0, 1), end=(1, 1))


def test_graph_queries_and_text_dump():
    grid = grid_from_ascii([".", "."])
    graph = build_graph(grid, reduce=False)
    assert graph.shape == (2, 1)
    assert graph.index_of((1, 0)) == 1
    assert graph.index_of(Position(0, 1)) is None
    assert graph.edge_count() == 1
    assert str(graph).splitlines() == ["[ 0]: (0, 0), [(1, 1.0)]", "[ 1]: (1, 0), [(0, 1.0)]"]


def test_one_explicit_endpoint_takes_the_other_from_the_boundary(caplog):
    grid = np.full((3, 3), 255, dtype=np.uint8)
    with caplog.at_level(logging.WARNING):
        graph = build_graph(grid, reduce=False, start=(1, 1))
    assert graph.position(graph.start) == Position(1, 1)
    assert graph.position(graph.end) == Position(2, 0)
    with caplog.at_level(logging.WARNING):
        graph = build_graph(grid, reduce=False, end=(1, 1))
    assert graph.position(graph.start) == Position(0, 0)
    assert caplog.text == ""


def test_one_explicit_endpoint_warns_only_when_boundary_runs_short(caplog):
    grid = grid_from_ascii([
        "#.#",
        "#.#",
        "###",
    ])
    with caplog.at_level(logging.WARNING):
        graph = build_graph(grid, end=(1, 1))
    assert (graph.start, graph.end) == (0, 1)
    assert caplog.text == ""

    with caplog.at_level(logging.WARNING):
        graph = build_graph(grid, start=(1, 1))
    assert graph.start == 1 and graph.end is None
    assert "No boundary cell for the end point" in caplog.text
