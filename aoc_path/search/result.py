"""
Search Result Module - Outcome and statistics of a single search call.
"""

from dataclasses import dataclass, field
from typing import Any, Generic, List, Optional, TypeVar

Node = TypeVar("Node")


@dataclass
class SearchMetrics:
    """
    Performance metrics for a search call.

    Attributes:
        computation_time_ms: Time taken in milliseconds
        nodes_expanded: Nodes taken off the frontier and expanded
        nodes_discovered: Nodes recorded for the first time
        nodes_reopened: Nodes put back on the frontier after a cheaper path was found
        strategy_name: Name of strategy that ran the search
    """
    computation_time_ms: float = 0.0
    nodes_expanded: int = 0
    nodes_discovered: int = 0
    nodes_reopened: int = 0
    strategy_name: str = ""


@dataclass
class SearchResult(Generic[Node]):
    """
    Result of a strategy search.

    Attributes:
        path: Nodes from start to goal (both inclusive), or None if unreachable
        cost: Summed edge cost of path, or None if unreachable
        metrics: Performance statistics
    """
    path: Optional[List[Node]] = None
    cost: Optional[Any] = None
    metrics: SearchMetrics = field(default_factory=SearchMetrics)

    @property
    def found(self) -> bool:
        """True if a path to a goal was found."""
        return self.path is not None

    @property
    def length(self) -> Optional[int]:
        """Number of edges in path, or None if no path."""
        if self.path is None:
            return None
        return len(self.path) - 1

    @property
    def goal(self) -> Optional[Node]:
        """Last node of path (the goal reached)."""
        return self.path[-1] if self.path else None
