"""
Data models for path search.

This module provides the core data structures used throughout the search package:
- PathResult: Container for a found path and its total cost
- SearchMetrics: Container for search performance metrics
- PathValidationError: Exception for path validation failures

Example:
    >>> result = PathResult(path=["a", "b", "c"], total_cost=3.0)
    >>> len(result)  # Number of steps
    2
    >>> result.validate(successors)  # Ensures steps and cost are consistent
"""

import math
from dataclasses import dataclass
from typing import Dict, Generic, Hashable, Iterator, List, Optional, Tuple, TypeVar, Union

from ..types import SuccessorFunc
from .utils import calculate_path_cost

T = TypeVar("T", bound=Hashable)


class PathValidationError(Exception):
    """
    Raised when a path fails validation checks.

    This exception indicates issues such as:
    - A step between nodes that the successor function does not offer
    - A total cost that differs from the sum of the step costs
    - An empty path with a non-zero cost
    """

    pass


@dataclass
class SearchMetrics:
    """
    Container for path search performance metrics.

    Attributes:
        operation: Name of the search operation
        start_time: Operation start timestamp
        end_time: Operation end timestamp (0.0 if not completed)
        nodes_explored: Number of nodes expanded (marked visited or matched)
        nodes_discovered: Number of distinct nodes recorded
        successor_calls: Number of calls to the successor function
        max_memory_used: Peak process RSS sampled during the search (bytes),
            None unless the search ran with a memory limit

    A search overwrites the timings and counters of the metrics object it is
    given, so the counts always describe the most recent search only.

    Example:
        >>> metrics = SearchMetrics(operation="dijkstra", start_time=time())
        >>> result = dijkstra(start, successors, is_end, metrics=metrics)
        >>> print(f"Search took {metrics.duration:.2f}ms")
    """

    operation: str
    start_time: float
    end_time: float = 0.0
    nodes_explored: int = 0
    nodes_discovered: int = 0
    successor_calls: int = 0
    max_memory_used: Optional[int] = None

    def __post_init__(self):
        """Validate metrics after initialization."""
        if not isinstance(self.operation, str) or not self.operation.strip():
            raise ValueError("operation must be a non-empty string")

        if not isinstance(self.start_time, (int, float)):
            raise TypeError("start_time must be a numeric value")

        if self.end_time and self.end_time < self.start_time:
            raise ValueError("end_time cannot be before start_time")

    @property
    def duration(self) -> float:
        """Operation duration in milliseconds, 0.0 until the search finishes."""
        return (self.end_time - self.start_time) * 1000 if self.end_time else 0.0

    def to_dict(self) -> Dict[str, Union[str, float, int, None]]:
        """
        Convert metrics to dictionary format.

        Returns:
            Dictionary containing all metrics
        """
        return {
            "operation": self.operation,
            "duration_ms": self.duration,
            "nodes_explored": self.nodes_explored,
            "nodes_discovered": self.nodes_discovered,
            "successor_calls": self.successor_calls,
            "max_memory_used": self.max_memory_used,
        }


@dataclass
class PathResult(Generic[T]):
    """
    Container for path search results.

    Attributes:
        path: Nodes from the start to the node that satisfied the goal, inclusive
        total_cost: Sum of the step costs along the path
        metrics: Metrics of the search that produced the path, if collected

    Example:
        >>> path, cost = result.to_tuple()
    """

    path: List[T]
    total_cost: float
    metrics: Optional[SearchMetrics] = None

    def __post_init__(self):
        """Validate initialization parameters."""
        if not isinstance(self.path, list):
            raise TypeError("path must be a list")

        if not isinstance(self.total_cost, (int, float)):
            raise TypeError("total_cost must be a numeric value")

    def __len__(self) -> int:
        """Return the number of steps in the path."""
        return max(len(self.path) - 1, 0)

    def __getitem__(self, index: int) -> T:
        """Get a node from the path by position."""
        return self.path[index]

    def __iter__(self) -> Iterator[T]:
        """Return an iterator over the path nodes."""
        return iter(self.path)

    def to_tuple(self) -> Tuple[List[T], float]:
        """Get the result as a (path, total_cost) pair."""
        return self.path, self.total_cost

    @property
    def start(self) -> Optional[T]:
        return self.path[0] if self.path else None

    @property
    def end(self) -> Optional[T]:
        return self.path[-1] if self.path else None

    def validate(self, successors: SuccessorFunc, epsilon: float = 1e-9) -> None:
        """
        Validate the path against the successor function that produced it.

        Every consecutive pair must be a step offered by ``successors`` and the
        step costs must add up to ``total_cost``. When a successor is offered
        more than once the cheapest offer is used.

        Args:
            successors: Successor function the path was searched over
            epsilon: Precision for cost comparison

        Raises:
            PathValidationError: If any validation check fails
        """
        if epsilon <= 0:
            raise ValueError("epsilon must be positive")

        if not self.path:
            if self.total_cost != 0:
                raise PathValidationError("Empty path must have zero cost")
            return

        try:
            total = calculate_path_cost(self.path, successors)
        except ValueError as e:
            raise PathValidationError(f"Path discontinuity: {e}") from e

        if math.isnan(total) or abs(total - self.total_cost) > epsilon:
            raise PathValidationError(
                f"Cost mismatch: calculated {total} != stored {self.total_cost}"
            )
