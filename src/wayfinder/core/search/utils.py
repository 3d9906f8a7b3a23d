"""
Utility functions for path search operations.
"""

import gc
import logging
import math
import os
import time
from dataclasses import dataclass
from heapq import heappop, heappush
from typing import Callable, Dict, Hashable, List, Optional, Tuple

import psutil

from ..graph import Graph, NodeIndex
from ..types import SuccessorFunc, WeightFunc

logger = logging.getLogger(__name__)

# Constants
MEMORY_CHECK_INTERVAL = 0.1  # Seconds between RSS samples


@dataclass
class PathRecord:
    """Best known way of reaching a node: its cost and the node it was reached from."""

    __slots__ = ("cost", "parent", "has_parent")

    cost: float
    parent: Optional[Hashable]
    has_parent: bool


def reconstruct_path(records: Dict[Hashable, PathRecord], end: Hashable) -> List[Hashable]:
    """Walk parent links from ``end`` back to the parentless start and reverse."""
    path = [end]
    record = records[end]
    while record.has_parent:
        path.append(record.parent)
        record = records[record.parent]
    path.reverse()
    return path


def calculate_path_cost(path: List[Hashable], successors: SuccessorFunc) -> float:
    """Sum the cheapest offered step cost between consecutive nodes of a path."""
    total = 0.0
    for current, following in zip(path, path[1:]):
        costs = [cost for node, cost in successors(current) if node == following]
        if not costs:
            raise ValueError(f"{following!r} is not a successor of {current!r}")
        total += min(costs)
    return total


class PriorityQueue:
    """
    Frontier of discovered, unexpanded nodes with decrease-key.

    Entries are ordered by (priority, discovery order). The discovery order of
    an item is fixed the first time it is added, so among equal priorities the
    earliest-discovered item is popped first regardless of later updates.
    """

    def __init__(self):
        self._queue: List[Tuple[float, int, Hashable]] = []
        self._entry_finder: Dict[Hashable, Tuple[float, int]] = {}
        self._order: Dict[Hashable, int] = {}

    def add_or_update(self, item: Hashable, priority: float) -> None:
        if item in self._entry_finder:
            old_priority, _ = self._entry_finder[item]
            # Only update if new priority is strictly lower
            if not priority < old_priority:
                return

        order = self._order.setdefault(item, len(self._order))
        self._entry_finder[item] = (priority, order)
        heappush(self._queue, (priority, order, item))

    def pop(self) -> Optional[Tuple[float, Hashable]]:
        """Remove and return the (priority, item) pair with the lowest priority."""
        while self._queue:
            priority, order, item = heappop(self._queue)
            if self._entry_finder.get(item) == (priority, order):
                del self._entry_finder[item]
                return (priority, item)
        return None

    def empty(self) -> bool:
        """Return True if the queue is empty."""
        return len(self._entry_finder) == 0

    def __len__(self) -> int:
        """Return the number of valid items in the queue."""
        return len(self._entry_finder)


class MemoryManager:
    """
    Optional ceiling on memory growth during a search.

    Without a limit the manager is inert and never collects garbage or reads
    the process RSS. With a limit, growth is measured against the RSS sampled
    when the search starts.

    Attributes:
        limit_bytes (Optional[float]): Allowed growth, None when disabled
        baseline (int): RSS at the start of the current search (bytes)
    """

    def __init__(self, max_memory_mb: Optional[float] = None):
        """Initialize memory manager."""
        if max_memory_mb is not None and max_memory_mb <= 0:
            raise ValueError("max_memory_mb must be positive")

        self.limit_bytes = max_memory_mb * 1024 * 1024 if max_memory_mb is not None else None
        self.baseline = 0
        self._peak: Optional[int] = None
        self._last_check = 0.0
        self._check_interval = MEMORY_CHECK_INTERVAL
        if self.enabled:
            gc.collect()
            self.reset_peak_memory()

    @property
    def enabled(self) -> bool:
        return self.limit_bytes is not None

    def check_memory(self) -> None:
        """Sample RSS at most once per check interval and enforce the limit."""
        if not self.enabled:
            return

        now = time.time()
        if now - self._last_check < self._check_interval:
            return
        self._last_check = now

        current = self._sample()
        if current - self.baseline <= self.limit_bytes:
            return

        gc.collect()
        current = self._sample()
        if current - self.baseline > self.limit_bytes:
            logger.warning(f"Search memory limit exceeded: {current/1024/1024:.1f}MB")
            raise MemoryError(
                f"Memory usage {current/1024/1024:.1f}MB exceeds "
                f"limit of {self.limit_bytes/1024/1024:.1f}MB"
            )

    def _sample(self) -> int:
        current = get_memory_usage()
        self._peak = current if self._peak is None else max(self._peak, current)
        return current

    @property
    def peak_memory(self) -> Optional[int]:
        """Peak RSS sampled since the last reset (bytes), None when disabled."""
        return self._peak

    @property
    def peak_memory_mb(self) -> Optional[float]:
        """Peak RSS sampled since the last reset (MB), None when disabled."""
        return None if self._peak is None else self._peak / 1024 / 1024

    def reset_peak_memory(self) -> None:
        """Start a new measurement window at the current RSS."""
        if not self.enabled:
            return
        self._peak = None
        self.baseline = self._sample()
        self._last_check = time.time()


def get_memory_usage() -> int:
    """Get current memory usage in bytes."""
    process = psutil.Process(os.getpid())
    return process.memory_info().rss


def edge_payload_weight(from_payload, to_payload, edge_payload) -> float:
    """Default graph weight: the edge payload itself, as a float."""
    try:
        weight = float(edge_payload)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Edge payload {edge_payload!r} is not a numeric weight") from e
    if math.isnan(weight):
        raise ValueError("Edge weight must not be NaN")
    return weight


def graph_successors(
    graph: Graph, weight_func: Optional[WeightFunc] = None
) -> Callable[[NodeIndex], List[Tuple[NodeIndex, float]]]:
    """
    Build a successor function over a graph's node handles.

    Undirected graphs are traversed in both directions of every edge.

    Args:
        graph: Graph supplying adjacency
        weight_func: Cost of a step from (from payload, to payload, edge payload).
            Defaults to the edge payload converted to float.

    Returns:
        Function mapping a NodeIndex to its (neighbor, cost) pairs
    """
    weight = weight_func or edge_payload_weight

    def successors(node: NodeIndex) -> List[Tuple[NodeIndex, float]]:
        from_payload = graph[node]
        return [
            (n.node, weight(from_payload, graph[n.node], graph[n.edge]))
            for n in graph.incident_indices(node)
        ]

    return successors
