"""
Tests for A* search and path costing.

Covers:
1. Minimum cost on weighted grids, cross-checked with a reference Dijkstra
2. Equal-cost alternatives (only cost asserted)
3. Reopening a node when a cheaper path appears after expansion
4. Zero heuristic against reference Dijkstra on random graphs
5. path_cost error on disconnected paths
"""

import heapq
import random
import sys
from datetime import timedelta
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from aoc_path.grid import (Grid, GridContext, GridPos, is_end,
                           manhattan_heuristic, weighted_neighbours)
from aoc_path.search import SearchMetrics, a_star, path_cost


CHITON_EXAMPLE = """\
1163751742
1381373672
2136511328
3694931569
7463417111
1319128137
1359912421
3125421639
1293138521
2311944581
""".splitlines()


def graph_neighbours(graph, node):
    return graph.get(node, [])


def zero(ctx, node):
    return 0


def reaches(target):
    return lambda ctx, node: node == target


def reference_dijkstra(neighbours, ctx, start, goal):
    """Plain Dijkstra with a closed set, returning the cost to goal or None."""
    best = {start: 0}
    done = set()
    heap = [(0, 0, start)]
    tie = 0
    while heap:
        cost, _, node = heapq.heappop(heap)
        if node in done:
            continue
        if node == goal:
            return cost
        done.add(node)
        for link, edge in neighbours(ctx, node):
            if cost + edge < best.get(link, float("inf")):
                best[link] = cost + edge
                tie += 1
                heapq.heappush(heap, (cost + edge, tie, link))
    return None


def tile_grid(grid, times):
    """Repeat grid times x times, each tile step adding one, wrapping 9 to 1."""
    tiled = Grid.filled(0, grid.width * times, grid.height * times)
    for y in range(tiled.height):
        for x in range(tiled.width):
            step = x // grid.width + y // grid.height
            value = grid.get(x % grid.width, y % grid.height)
            tiled.set(x, y, (value + step - 1) % 9 + 1)
    return tiled


def test_chiton_example():
    grid = Grid.from_digits(CHITON_EXAMPLE)
    ctx = GridContext.corners(grid)
    path = a_star(ctx, ctx.start, weighted_neighbours, manhattan_heuristic, is_end)

    assert path[0] == GridPos(0, 0)
    assert path[-1] == GridPos(9, 9)
    assert path_cost(ctx, path, weighted_neighbours) == 40
    # Entering a cell costs its value, so the start cell is never counted
    assert sum(grid[p] for p in path[1:]) == 40


def test_chiton_example_tiled():
    grid = tile_grid(Grid.from_digits(CHITON_EXAMPLE), 5)
    ctx = GridContext.corners(grid)
    path = a_star(ctx, ctx.start, weighted_neighbours, manhattan_heuristic, is_end)

    assert path[-1] == GridPos(49, 49)
    assert path_cost(ctx, path, weighted_neighbours) == 315


def test_small_grid_matches_dijkstra():
    grid = Grid.from_digits([
        "19111",
        "11191",
        "99991",
        "11111",
        "19999",
    ])
    ctx = GridContext.corners(grid)
    path = a_star(ctx, ctx.start, weighted_neighbours, manhattan_heuristic, is_end)

    expected = reference_dijkstra(weighted_neighbours, ctx, ctx.start, ctx.end)
    assert path_cost(ctx, path, weighted_neighbours) == expected
    for a, b in zip(path, path[1:]):
        assert (b - a).manhattan() == 1


def test_equal_cost_paths():
    graph = {
        "S": [("A", 1), ("B", 1)],
        "A": [("G", 2)],
        "B": [("G", 2)],
    }
    path = a_star(graph, "S", graph_neighbours, zero, reaches("G"))

    assert path in (["S", "A", "G"], ["S", "B", "G"])
    assert path_cost(graph, path, graph_neighbours) == 3


def test_cheaper_indirect_route():
    graph = {
        "S": [("A", 1), ("G", 10)],
        "A": [("B", 1)],
        "B": [("G", 1)],
    }
    assert a_star(graph, "S", graph_neighbours, zero, reaches("G")) == ["S", "A", "B", "G"]


def test_unreachable_returns_none():
    graph = {"S": [("A", 1)], "A": [("S", 1)], "G": []}
    assert a_star(graph, "S", graph_neighbours, zero, reaches("G")) is None


def test_start_is_goal():
    graph = {"S": [("A", 1)]}
    assert a_star(graph, "S", graph_neighbours, zero, reaches("S")) == ["S"]


def test_reopens_expanded_node():
    # h(A) is admissible but inconsistent, so B is expanded through the
    # expensive direct edge before the cheaper route through A is known.
    graph = {
        "S": [("A", 1), ("B", 3)],
        "A": [("B", 1)],
        "B": [("G", 10)],
    }
    h = {"S": 0, "A": 4, "B": 0, "G": 0}
    metrics = SearchMetrics()

    path = a_star(graph, "S", graph_neighbours, lambda g, n: h[n], reaches("G"), metrics=metrics)

    assert path == ["S", "A", "B", "G"]
    assert path_cost(graph, path, graph_neighbours) == 12
    assert metrics.nodes_reopened == 1


def test_metrics_updated():
    graph = {"S": [("A", 1)], "A": [("G", 1)]}
    metrics = SearchMetrics()
    a_star(graph, "S", graph_neighbours, zero, reaches("G"), metrics=metrics)
    assert metrics.nodes_expanded == 2
    assert metrics.nodes_discovered == 3
    assert metrics.nodes_reopened == 0


def test_float_costs():
    graph = {"S": [("A", 0.5), ("B", 0.25)], "A": [("G", 0.5)], "B": [("G", 1.0)]}
    path = a_star(graph, "S", graph_neighbours, zero, reaches("G"), zero=0.0)
    assert path == ["S", "A", "G"]
    assert path_cost(graph, path, graph_neighbours, zero=0.0) == pytest.approx(1.0)


def test_repeatable():
    grid = Grid.from_digits(CHITON_EXAMPLE)
    ctx = GridContext.corners(grid)
    first = a_star(ctx, ctx.start, weighted_neighbours, manhattan_heuristic, is_end)
    second = a_star(ctx, ctx.start, weighted_neighbours, manhattan_heuristic, is_end)
    assert path_cost(ctx, first, weighted_neighbours) == path_cost(ctx, second, weighted_neighbours)


def test_path_cost_uses_cheapest_parallel_edge():
    graph = {"S": [("G", 5), ("G", 2)]}
    assert path_cost(graph, ["S", "G"], graph_neighbours) == 2
    assert path_cost(graph, ["S"], graph_neighbours) == 0


def test_path_cost_rejects_disconnected_path():
    graph = {"S": [("A", 1)], "A": []}
    with pytest.raises(ValueError):
        path_cost(graph, ["S", "G"], graph_neighbours)


def random_weighted_graph(rng, size, degree):
    return {
        n: [(rng.randrange(size), rng.randint(0, 9)) for _ in range(rng.randint(0, degree))]
        for n in range(size)
    }


def test_zero_heuristic_matches_dijkstra():
    rng = random.Random(2022)
    for _ in range(200):
        size = rng.randint(2, 40)
        graph = random_weighted_graph(rng, size, 4)
        goal = size - 1

        expected = reference_dijkstra(graph_neighbours, graph, 0, goal)
        path = a_star(graph, 0, graph_neighbours, zero, reaches(goal))

        if expected is None:
            assert path is None
        else:
            assert path[0] == 0 and path[-1] == goal
            assert path_cost(graph, path, graph_neighbours) == expected


def test_random_grids_with_heuristic_match_dijkstra():
    rng = random.Random(15)
    for _ in range(30):
        width, height = rng.randint(2, 12), rng.randint(2, 12)
        grid = Grid.from_2d([[rng.randint(1, 9) for _ in range(width)] for _ in range(height)])
        ctx = GridContext.corners(grid)

        path = a_star(ctx, ctx.start, weighted_neighbours, manhattan_heuristic, is_end)
        expected = reference_dijkstra(weighted_neighbours, ctx, ctx.start, ctx.end)

        assert path_cost(ctx, path, weighted_neighbours) == expected


def test_cost_type_without_float_comparison():
    # timedelta adds and orders but cannot be compared with float('inf')
    graph = {
        "S": [("A", timedelta(minutes=5)), ("B", timedelta(minutes=2))],
        "A": [("G", timedelta(minutes=1))],
        "B": [("G", timedelta(minutes=7))],
    }
    none = timedelta(0)

    path = a_star(graph, "S", graph_neighbours, lambda g, n: none, reaches("G"), zero=none)

    assert path == ["S", "A", "G"]
    assert path_cost(graph, path, graph_neighbours, zero=none) == timedelta(minutes=6)
