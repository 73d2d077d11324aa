"""
A* Strategy - Minimum cost path guided by the problem heuristic.
"""

import time

from ..astar import a_star
from ..base import (SearchStrategy, _problem_heuristic, _problem_is_end,
                    _problem_neighbours)
from ..factory import register_strategy
from ..problem import SearchProblem
from ..result import SearchMetrics, SearchResult


@register_strategy
class AStarStrategy(SearchStrategy):
    """
    A* search using the heuristic supplied by the problem.

    The result is optimal when edge costs are non-negative and the
    heuristic never overestimates the remaining cost.
    """
    name = "astar"
    description = "A* (weighted) - Minimum cost path with heuristic guidance"

    def search(self, problem: SearchProblem) -> SearchResult:
        start_time = time.perf_counter()
        metrics = SearchMetrics()

        path = a_star(
            problem, problem.start,
            _problem_neighbours, _problem_heuristic, _problem_is_end,
            metrics=metrics, zero=problem.zero
        )

        return self._build_result(problem, path, metrics, start_time)
