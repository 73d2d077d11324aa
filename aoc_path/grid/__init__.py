"""
Grid Package - Positions and grids used as search graphs.
"""

from .point import GridPos
from .grid import Grid
from .context import (
    GridContext,
    weighted_neighbours,
    open_neighbours,
    open_neighbours_unit_cost,
    manhattan_heuristic,
    is_end,
)

__all__ = [
    "GridPos",
    "Grid",
    "GridContext",
    "weighted_neighbours",
    "open_neighbours",
    "open_neighbours_unit_cost",
    "manhattan_heuristic",
    "is_end",
]
