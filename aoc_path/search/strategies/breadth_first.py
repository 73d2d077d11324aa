"""
Breadth-First Strategy - Fewest edges, edge costs ignored.
"""

import time

from ..base import (SearchStrategy, _problem_is_end,
                    _problem_neighbour_nodes)
from ..bfs import bfs
from ..factory import register_strategy
from ..problem import SearchProblem
from ..result import SearchMetrics, SearchResult


@register_strategy
class BreadthFirstStrategy(SearchStrategy):
    """
    Breadth first search over the problem graph.

    Finds a path with the fewest edges. Edge costs are ignored while
    searching but still summed into the reported cost. The start node is
    never goal-tested, so the path always has at least one edge.
    """
    name = "bfs"
    description = "Breadth-first (unweighted) - Fewest edges to a goal"

    def search(self, problem: SearchProblem) -> SearchResult:
        start_time = time.perf_counter()
        metrics = SearchMetrics()

        path = bfs(
            problem, problem.start,
            _problem_neighbour_nodes, _problem_is_end,
            metrics=metrics
        )

        return self._build_result(problem, path, metrics, start_time)
