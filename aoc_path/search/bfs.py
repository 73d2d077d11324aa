"""
Breadth-First Search Module - Unweighted shortest path over a caller-defined graph.
"""

import logging
from collections import deque
from typing import Callable, Dict, Hashable, Iterable, List, Optional, TypeVar

from .result import SearchMetrics

logger = logging.getLogger(__name__)

Ctx = TypeVar("Ctx")
Node = TypeVar("Node", bound=Hashable)


def bfs(
    context: Ctx,
    start: Node,
    neighbours: Callable[[Ctx, Node], Iterable[Node]],
    is_end: Callable[[Ctx, Node], bool],
    metrics: Optional[SearchMetrics] = None,
) -> Optional[List[Node]]:
    """
    Find a path with the fewest edges using breadth first search.

    The goal test is applied to each neighbour as it is discovered, never to
    the start node, so the returned path always has at least one edge. A
    caller that needs a zero-length path when start is already a goal must
    check for that itself.

    Args:
        context: Caller-owned data handed to every callback
        start: Node to search from
        neighbours: Function (context, node) -> iterable of adjacent nodes
        is_end: Goal predicate (context, node) -> bool
        metrics: Optional metrics updated in place

    Returns:
        List of nodes from start to the first goal found (both inclusive),
        or None if no goal is reachable
    """
    open_nodes = deque([start])
    # Start maps to itself, marking the root for path reconstruction
    prev: Dict[Node, Node] = {start: start}
    expanded = 0

    try:
        while open_nodes:
            current = open_nodes.popleft()
            expanded += 1
            for link in neighbours(context, current):
                if is_end(context, link):
                    # link is not recorded in prev: it may be start itself
                    path = _unwind(prev, current)
                    path.append(link)
                    logger.debug(f"BFS: goal reached, {len(path) - 1} edges, {expanded} nodes expanded")
                    return path
                if link not in prev:
                    prev[link] = current
                    open_nodes.append(link)

        logger.debug(f"BFS: no path, {expanded} nodes expanded")
        return None
    finally:
        if metrics is not None:
            metrics.nodes_expanded += expanded
            metrics.nodes_discovered += len(prev)


def bfs_length(
    context: Ctx,
    start: Node,
    neighbours: Callable[[Ctx, Node], Iterable[Node]],
    is_end: Callable[[Ctx, Node], bool],
) -> Optional[int]:
    """
    Number of edges on the BFS path, or None if unreachable.
    """
    path = bfs(context, start, neighbours, is_end)
    if path is None:
        return None
    return len(path) - 1


def _unwind(prev: Dict[Node, Node], end: Node) -> List[Node]:
    """Walk predecessors from end back to the self-linked start, in start->end order."""
    at = end
    path = [at]
    while True:
        before = prev[at]
        if before == at:
            break
        path.append(before)
        at = before
    path.reverse()
    return path
