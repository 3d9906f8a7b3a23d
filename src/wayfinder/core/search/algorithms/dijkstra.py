"""
Dijkstra's shortest path search over a lazily expanded node space.

The search never materializes the node space: it calls the successor function
on demand, one node at a time, and stops as soon as the node chosen for
expansion satisfies the goal predicate. Node values are used as dictionary
keys, so they must be hashable.

Example:
    >>> def successors(n):
    ...     return [(n + 1, 1.0), (n * 2, 1.5)]
    >>> result = dijkstra(1, successors, lambda n: n == 10)
    >>> result.path, result.total_cost
    ([1, 2, 4, 5, 10], 5.0)
"""

import logging
import math
from contextlib import contextmanager
from time import time
from typing import Dict, Hashable, Optional, Set

from ...types import EndPredicate, SuccessorFunc
from ..base import PathFinder, T
from ..models import PathResult, SearchMetrics
from ..utils import MemoryManager, PathRecord, PriorityQueue, reconstruct_path

logger = logging.getLogger(__name__)


class DijkstraFinder(PathFinder[T]):
    """Lowest-cost path search with an early-exit goal predicate."""

    def __init__(self, successors: SuccessorFunc, max_memory_mb: Optional[float] = None):
        """Initialize finder with optional memory limit."""
        super().__init__(successors)
        self.memory_manager = MemoryManager(max_memory_mb)

    @contextmanager
    def _search_context(self):
        """Context manager for search state."""
        self.memory_manager.reset_peak_memory()
        yield

    def find_path(
        self,
        start: T,
        is_end: EndPredicate,
        metrics: Optional[SearchMetrics] = None,
        **kwargs,
    ) -> Optional[PathResult[T]]:
        """
        Find the lowest-cost path from start to any node satisfying is_end.

        Args:
            start: Node to search from
            is_end: Goal predicate, checked on each node as it is expanded
            metrics: Optional metrics object to fill in. Its timings and
                counters are reset, so one object may be reused across searches.

        Returns:
            PathResult from start to the goal node, or None if no reachable
            node satisfies is_end
        """
        if metrics is None:
            metrics = SearchMetrics(operation="dijkstra", start_time=time())
        else:
            metrics.start_time = time()

        with self._search_context():
            try:
                result = self._dijkstra(start, is_end, metrics)
            finally:
                metrics.end_time = time()
                metrics.max_memory_used = self.memory_manager.peak_memory

        if result is not None:
            result.metrics = metrics
        return result

    def _dijkstra(
        self, start: T, is_end: EndPredicate, metrics: SearchMetrics
    ) -> Optional[PathResult[T]]:
        """Dijkstra's algorithm implementation."""
        logger.debug(f"Starting Dijkstra's algorithm from {start!r}")

        visited: Set[Hashable] = set()
        records: Dict[Hashable, PathRecord] = {start: PathRecord(0.0, None, False)}
        frontier = PriorityQueue()
        metrics.nodes_explored = 0
        metrics.successor_calls = 0
        metrics.nodes_discovered = 1

        current = start
        while True:
            self.memory_manager.check_memory()
            metrics.nodes_explored += 1
            current_record = records[current]

            logger.debug(f"Visiting node {current!r} with cost {current_record.cost}")

            if is_end(current):
                path = reconstruct_path(records, current)
                logger.debug(f"Found path of {len(path)} nodes, cost {current_record.cost}")
                return PathResult(path=path, total_cost=current_record.cost)

            metrics.successor_calls += 1
            for successor, step_cost in self.successors(current):
                if successor in visited:
                    continue

                record = records.get(successor)
                if record is None:
                    # Known but unreached until a finite candidate relaxes it
                    record = PathRecord(math.inf, None, False)
                    records[successor] = record
                    frontier.add_or_update(successor, math.inf)
                    metrics.nodes_discovered += 1

                candidate = current_record.cost + step_cost
                if candidate < record.cost:
                    logger.debug(f"  Relaxing {successor!r}: {record.cost} -> {candidate}")
                    records[successor] = PathRecord(candidate, current, True)
                    frontier.add_or_update(successor, candidate)

            visited.add(current)

            following = frontier.pop()
            if following is None:
                logger.debug("Frontier exhausted, no path")
                return None
            cost, current = following
            if cost == math.inf:
                logger.debug("Remaining frontier is unreachable, no path")
                return None


def dijkstra(
    start: T,
    successors: SuccessorFunc,
    is_end: EndPredicate,
    *,
    max_memory_mb: Optional[float] = None,
    metrics: Optional[SearchMetrics] = None,
) -> Optional[PathResult[T]]:
    """
    Find the lowest-cost path from start to a node satisfying is_end.

    Args:
        start: Node to search from
        successors: Function giving the (node, cost) pairs reachable in one
            step. Costs must be non-negative. It may be called more than once
            for the same node and must return the same pairs each time.
        is_end: Goal predicate
        max_memory_mb: Optional limit on memory growth during the search
        metrics: Optional metrics object to fill in

    Returns:
        PathResult, or None if no reachable node satisfies is_end. Among
        equal-cost frontier nodes the earliest discovered is expanded first.

    Raises:
        MemoryError: If max_memory_mb is exceeded
    """
    finder = DijkstraFinder(successors, max_memory_mb=max_memory_mb)
    return finder.find_path(start, is_end, metrics=metrics)
