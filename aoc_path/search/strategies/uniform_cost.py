"""
Uniform-Cost Strategy - A* with the heuristic switched off (Dijkstra).
"""

import time

from ..astar import a_star
from ..base import (SearchStrategy, _problem_is_end, _problem_neighbours,
                    _zero_heuristic)
from ..factory import register_strategy
from ..problem import SearchProblem
from ..result import SearchMetrics, SearchResult


@register_strategy
class UniformCostStrategy(SearchStrategy):
    """Dijkstra: expands nodes in order of cost from start, ignoring any heuristic."""
    name = "dijkstra"
    description = "Dijkstra (weighted) - Uniform-cost search, no heuristic"

    def search(self, problem: SearchProblem) -> SearchResult:
        start_time = time.perf_counter()
        metrics = SearchMetrics()

        path = a_star(
            problem, problem.start,
            _problem_neighbours, _zero_heuristic, _problem_is_end,
            metrics=metrics, zero=problem.zero
        )

        return self._build_result(problem, path, metrics, start_time)
