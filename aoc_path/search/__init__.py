"""
Search Package - Generic graph search over caller-defined nodes.

Two layers are provided. The routines bfs() and a_star() take a context
object and plain callback functions, and return the path as a list or None.
On top of them sits a pluggable strategy framework working on a
SearchProblem and returning a SearchResult with cost and metrics.

Public API:
    - bfs(), bfs_length(): Breadth-first search
    - a_star(), path_cost(): A* search and path costing
    - SearchProblem, FunctionProblem: Capability interface for strategies
    - SearchResult, SearchMetrics: Strategy output
    - SearchStrategy: Abstract base for strategies
    - create_strategy(): Factory function
    - get_strategy_names(): List available strategies

Usage:
    from aoc_path.search import a_star, FunctionProblem, create_strategy

    path = a_star(ctx, start, neighbours, heuristic, is_end)

    problem = FunctionProblem(ctx, start, neighbours, is_end, heuristic)
    result = create_strategy("astar").search(problem)
    if result.found:
        print(f"Cost {result.cost} over {result.length} steps")
"""

# Search routines
from .bfs import bfs, bfs_length
from .astar import a_star, path_cost
from .problem import SearchProblem, FunctionProblem
from .result import SearchResult, SearchMetrics

# Strategy framework
from .base import SearchStrategy
from .factory import (
    create_strategy,
    create_default_strategy,
    get_strategy_names,
    get_strategy_info,
    get_default_strategy_name,
    register_strategy,
)

# Import strategies to register them
from . import strategies

__all__ = [
    "bfs",
    "bfs_length",
    "a_star",
    "path_cost",
    "SearchProblem",
    "FunctionProblem",
    "SearchResult",
    "SearchMetrics",
    "SearchStrategy",
    "create_strategy",
    "create_default_strategy",
    "get_strategy_names",
    "get_strategy_info",
    "get_default_strategy_name",
    "register_strategy",
]
