"""
A* Search Module - Minimum cost path over a weighted caller-defined graph.

With a heuristic that always returns zero this is uniform-cost (Dijkstra)
search.
"""

import heapq
import itertools
import logging
from dataclasses import dataclass
from typing import (Any, Callable, Dict, Generic, Hashable, Iterable, List,
                    Optional, Sequence, Set, Tuple, TypeVar)

from .result import SearchMetrics

logger = logging.getLogger(__name__)

Ctx = TypeVar("Ctx")
Node = TypeVar("Node", bound=Hashable)
Cost = Any

NeighboursFn = Callable[[Ctx, Node], Iterable[Tuple[Node, Cost]]]


@dataclass
class NodeRecord(Generic[Node]):
    """
    Best known route to a node.

    Attributes:
        g: Cost from start along the best known path
        f: g plus heuristic estimate to goal
        came_from: Predecessor on the best known path (start points to itself)
    """
    g: Cost
    f: Cost
    came_from: Node


def a_star(
    context: Ctx,
    start: Node,
    neighbours: NeighboursFn,
    heuristic: Callable[[Ctx, Node], Cost],
    is_end: Callable[[Ctx, Node], bool],
    metrics: Optional[SearchMetrics] = None,
    zero: Cost = 0,
) -> Optional[List[Node]]:
    """
    Find the minimum cost path using A*.

    The heuristic must never overestimate the remaining cost and edge costs
    must be non-negative, otherwise the path returned may not be optimal.
    Any recorded cost beats a node with no record, so the cost type needs
    no maximum sentinel. There is no closed set: a node already expanded
    goes back on the frontier if a cheaper path to it turns up later.

    The frontier is a binary heap keyed by (f, insertion order). Entries made
    stale by a later improvement are skipped when popped. Which of several
    nodes sharing the minimum f is expanded first is not defined.

    Args:
        context: Caller-owned data handed to every callback
        start: Node to search from
        neighbours: Function (context, node) -> iterable of (node, edge_cost)
        heuristic: Function (context, node) -> estimated cost to a goal
        is_end: Goal predicate (context, node) -> bool
        metrics: Optional metrics updated in place
        zero: Zero value of the cost type

    Returns:
        List of nodes from start to goal (both inclusive), or None if no goal
        is reachable
    """
    records: Dict[Node, NodeRecord] = {
        start: NodeRecord(g=zero, f=heuristic(context, start), came_from=start)
    }
    open_set: Set[Node] = {start}
    counter = itertools.count()
    heap = [(records[start].f, next(counter), start)]
    expanded = 0
    reopened = 0

    try:
        while heap:
            f, _, current = heapq.heappop(heap)
            record = records[current]
            if current not in open_set or f > record.f:
                continue

            if is_end(context, current):
                path = _reconstruct(records, current)
                logger.debug(f"A*: goal reached, cost {record.g}, {expanded} nodes expanded")
                return path

            open_set.remove(current)
            expanded += 1
            for link, edge_cost in neighbours(context, current):
                tentative_g = record.g + edge_cost
                known = records.get(link)
                if known is None or tentative_g < known.g:
                    if known is not None and link not in open_set:
                        reopened += 1
                    f_link = tentative_g + heuristic(context, link)
                    records[link] = NodeRecord(g=tentative_g, f=f_link, came_from=current)
                    open_set.add(link)
                    heapq.heappush(heap, (f_link, next(counter), link))

        logger.debug(f"A*: no path, {expanded} nodes expanded")
        return None
    finally:
        if metrics is not None:
            metrics.nodes_expanded += expanded
            metrics.nodes_discovered += len(records)
            metrics.nodes_reopened += reopened


def path_cost(
    context: Ctx,
    path: Sequence[Node],
    neighbours: NeighboursFn,
    zero: Cost = 0,
) -> Cost:
    """
    Sum the edge costs along a path.

    Where several edges join two consecutive nodes the cheapest is used.

    Args:
        context: Context passed to neighbours
        path: Nodes in traversal order
        neighbours: Same neighbour function used for the search
        zero: Zero value of the cost type

    Returns:
        Total cost of path (zero for a single-node path)

    Raises:
        ValueError: If two consecutive nodes are not connected
    """
    total = zero
    for a, b in zip(path, path[1:]):
        costs = [c for n, c in neighbours(context, a) if n == b]
        if not costs:
            raise ValueError(f"No edge from {a!r} to {b!r}")
        total = total + min(costs)
    return total


def _reconstruct(records: Dict[Node, NodeRecord], end: Node) -> List[Node]:
    """Follow came_from from end to the self-linked start, in start->end order."""
    at = end
    path = [at]
    while True:
        before = records[at].came_from
        if before == at:
            break
        path.append(before)
        at = before
    path.reverse()
    return path
