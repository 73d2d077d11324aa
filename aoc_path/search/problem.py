"""
Search Problem Module - Capability interface handed to search strategies.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Hashable, Iterable, Optional, Tuple


class SearchProblem(ABC):
    """
    Domain knowledge a strategy needs to search a graph.

    Subclasses provide the start node, weighted neighbour enumeration and
    the goal test. The heuristic defaults to zero, which turns A* into
    uniform-cost search.

    Attributes:
        zero: Zero value of the edge cost type, override for non-int costs
    """
    zero: Any = 0

    @property
    @abstractmethod
    def start(self) -> Hashable:
        """Node the search begins at."""

    @abstractmethod
    def neighbours(self, node: Hashable) -> Iterable[Tuple[Hashable, Any]]:
        """Adjacent nodes with the cost of the connecting edge."""

    @abstractmethod
    def is_end(self, node: Hashable) -> bool:
        """True if node is a goal."""

    def heuristic(self, node: Hashable) -> Any:
        """Admissible estimate of the remaining cost from node."""
        return self.zero


@dataclass
class FunctionProblem(SearchProblem):
    """
    Search problem built from a context object and plain callback functions.

    Attributes:
        context: Caller-owned data passed to every callback
        start_node: Node the search begins at
        neighbours_fn: (context, node) -> iterable of (node, edge_cost)
        is_end_fn: (context, node) -> bool
        heuristic_fn: (context, node) -> cost, zero everywhere if omitted
        zero: Zero value of the edge cost type
    """
    context: Any
    start_node: Hashable
    neighbours_fn: Callable[[Any, Hashable], Iterable[Tuple[Hashable, Any]]]
    is_end_fn: Callable[[Any, Hashable], bool]
    heuristic_fn: Optional[Callable[[Any, Hashable], Any]] = None
    zero: Any = 0

    @property
    def start(self) -> Hashable:
        return self.start_node

    def neighbours(self, node: Hashable) -> Iterable[Tuple[Hashable, Any]]:
        return self.neighbours_fn(self.context, node)

    def is_end(self, node: Hashable) -> bool:
        return self.is_end_fn(self.context, node)

    def heuristic(self, node: Hashable) -> Any:
        if self.heuristic_fn is None:
            return self.zero
        return self.heuristic_fn(self.context, node)
