"""
Base Strategy Module - Abstract base class for search strategies.
"""

import logging
import time
from abc import ABC, abstractmethod
from typing import Any, Hashable, Iterator, List, Optional

from .astar import path_cost
from .problem import SearchProblem
from .result import SearchMetrics, SearchResult

logger = logging.getLogger(__name__)


class SearchStrategy(ABC):
    """
    Abstract base class for all search strategies.

    Subclasses must implement the search() method and define
    name and description class attributes.

    Attributes:
        name: Short identifier for the strategy
        description: Human-readable description
        log_metrics: Log metrics at info level after each search
    """
    name: str = "base"
    description: str = "Base strategy"

    def __init__(self, log_metrics: bool = False):
        self.log_metrics = log_metrics

    @abstractmethod
    def search(self, problem: SearchProblem) -> SearchResult:
        """
        Search for a path from problem.start to a goal.

        Args:
            problem: Start node, neighbours, goal test and heuristic

        Returns:
            SearchResult with path (None when unreachable), cost and metrics
        """
        pass

    def _build_result(
        self,
        problem: SearchProblem,
        path: Optional[List[Hashable]],
        metrics: SearchMetrics,
        start_time: float
    ) -> SearchResult:
        """Build SearchResult from computation results."""
        cost: Any = None
        if path is not None:
            cost = path_cost(problem, path, _problem_neighbours, zero=problem.zero)

        metrics.computation_time_ms = (time.perf_counter() - start_time) * 1000
        metrics.strategy_name = self.name

        if self.log_metrics:
            logger.info(
                f"[{self.name}] found={path is not None} cost={cost} "
                f"expanded={metrics.nodes_expanded} discovered={metrics.nodes_discovered} "
                f"reopened={metrics.nodes_reopened} ({metrics.computation_time_ms:.1f}ms)"
            )

        return SearchResult(path=path, cost=cost, metrics=metrics)


# Adapters so a SearchProblem can be passed as the context of the
# function-style search routines.

def _problem_neighbours(problem: SearchProblem, node: Hashable):
    return problem.neighbours(node)


def _problem_neighbour_nodes(problem: SearchProblem, node: Hashable) -> Iterator[Hashable]:
    for link, _ in problem.neighbours(node):
        yield link


def _problem_heuristic(problem: SearchProblem, node: Hashable) -> Any:
    return problem.heuristic(node)


def _zero_heuristic(problem: SearchProblem, node: Hashable) -> Any:
    return problem.zero


def _problem_is_end(problem: SearchProblem, node: Hashable) -> bool:
    return problem.is_end(node)
