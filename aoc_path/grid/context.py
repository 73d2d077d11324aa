"""
Grid Context Module - Search callbacks for paths across a Grid.

The functions here match the callback signatures of bfs() and a_star(),
taking a GridContext as the context argument:

    ctx = GridContext(grid, start, end)
    path = a_star(ctx, ctx.start, weighted_neighbours, manhattan_heuristic, is_end)
    path = bfs(ctx, ctx.start, open_neighbours, is_end)
"""

from dataclasses import dataclass
from typing import FrozenSet, Iterator, List, Tuple

from .grid import Grid
from .point import GridPos


@dataclass(frozen=True)
class GridContext:
    """
    Grid plus the endpoints of a search across it.

    Attributes:
        grid: Cells being searched; only read, never modified
        start: Position the search begins at
        end: Goal position
        walls: Cell values that cannot be entered
    """
    grid: Grid
    start: GridPos
    end: GridPos
    walls: FrozenSet[str] = frozenset("#")

    @classmethod
    def corners(cls, grid: Grid) -> 'GridContext':
        """Context from the top-left to the bottom-right corner."""
        return cls(grid=grid, start=GridPos(0, 0), end=grid.dim() - GridPos(1, 1))

    @classmethod
    def from_markers(cls, grid: Grid, start: str = "S", end: str = "E") -> 'GridContext':
        """
        Context between the cells holding the start and end marker characters.

        Raises:
            ValueError: If either marker is missing from the grid
        """
        found_start = grid.find(lambda v: v == start)
        found_end = grid.find(lambda v: v == end)
        if found_start is None or found_end is None:
            raise ValueError(f"Grid is missing marker {start!r} or {end!r}")
        return cls(grid=grid, start=found_start[0], end=found_end[0])


def weighted_neighbours(ctx: GridContext, pos: GridPos) -> List[Tuple[GridPos, int]]:
    """In-bounds orthogonal neighbours, costing the value of the cell entered."""
    grid = ctx.grid
    return [
        (n, grid.get(n.x, n.y))
        for n in pos.neighbours()
        if grid.is_in_bounds(n.x, n.y)
    ]


def open_neighbours(ctx: GridContext, pos: GridPos) -> Iterator[GridPos]:
    """In-bounds orthogonal neighbours that are not walls."""
    grid = ctx.grid
    for n in pos.neighbours():
        if grid.is_in_bounds(n.x, n.y) and grid.get(n.x, n.y) not in ctx.walls:
            yield n


def open_neighbours_unit_cost(ctx: GridContext, pos: GridPos) -> Iterator[Tuple[GridPos, int]]:
    """open_neighbours with every step costing 1, for the weighted routines."""
    for n in open_neighbours(ctx, pos):
        yield n, 1


def manhattan_heuristic(ctx: GridContext, pos: GridPos) -> int:
    """Steps to the goal ignoring walls; admissible while every step costs at least 1."""
    return (ctx.end - pos).manhattan()


def is_end(ctx: GridContext, pos: GridPos) -> bool:
    return pos == ctx.end
