"""
aoc-path - Generic breadth-first and A* search with grid helpers.

Usage:
    from aoc_path.grid import Grid, GridContext, weighted_neighbours, manhattan_heuristic, is_end
    from aoc_path.search import a_star, path_cost

    grid = Grid.from_digits(lines)
    ctx = GridContext.corners(grid)
    path = a_star(ctx, ctx.start, weighted_neighbours, manhattan_heuristic, is_end)
    total = path_cost(ctx, path, weighted_neighbours)
"""

__version__ = "0.1.0"
