"""Path search functionality."""

from typing import Iterator, Optional

from ..exceptions import InvalidHandleError, NoPathFoundError
from ..graph import Graph, NodeIndex
from ..types import EndPredicate, SearchProblem, SuccessorFunc, WeightFunc
from .algorithms.all_paths import DEFAULT_MAX_PATH_LENGTH, AllPathsFinder
from .algorithms.dijkstra import DijkstraFinder, dijkstra
from .base import PathFinder
from .models import PathResult, PathValidationError, SearchMetrics
from .utils import graph_successors

__all__ = [
    "DEFAULT_MAX_PATH_LENGTH",
    "AllPathsFinder",
    "DijkstraFinder",
    "PathFinder",
    "PathFinding",
    "PathResult",
    "PathValidationError",
    "SearchMetrics",
    "dijkstra",
    "graph_successors",
]


class PathFinding:
    """Static interface for path search operations."""

    @staticmethod
    def _validate_length(max_length: Optional[int]) -> None:
        """Validate max_length parameter."""
        if max_length is not None:
            if not isinstance(max_length, int):
                raise TypeError("max_length must be an integer")
            if max_length <= 0:
                raise ValueError("max_length must be positive")

    @staticmethod
    def shortest_path(
        start, successors: SuccessorFunc, is_end: EndPredicate, **kwargs
    ) -> Optional[PathResult]:
        """Find the lowest-cost path to a node satisfying is_end, or None."""
        return dijkstra(start, successors, is_end, **kwargs)

    @staticmethod
    def solve(problem: SearchProblem, start, **kwargs) -> Optional[PathResult]:
        """Find the lowest-cost path for a problem object bundling successors and goal."""
        return dijkstra(start, problem.successors, problem.is_end, **kwargs)

    @classmethod
    def require_path(
        cls, start, successors: SuccessorFunc, is_end: EndPredicate, **kwargs
    ) -> PathResult:
        """Find the lowest-cost path, raising NoPathFoundError if there is none."""
        result = cls.shortest_path(start, successors, is_end, **kwargs)
        if result is None:
            raise NoPathFoundError(f"No path exists from {start!r} to a node satisfying the goal")
        return result

    @staticmethod
    def graph_path(
        graph: Graph,
        start: NodeIndex,
        end: NodeIndex,
        weight_func: Optional[WeightFunc] = None,
        **kwargs,
    ) -> Optional[PathResult]:
        """
        Find the lowest-cost path between two nodes of a graph.

        Args:
            graph: Graph to search
            start: Start node handle
            end: Target node handle
            weight_func: Step cost from (from payload, to payload, edge payload);
                defaults to the edge payload

        Returns:
            PathResult over node handles, or None if end is unreachable

        Raises:
            InvalidHandleError: If start or end is not a node of graph
        """
        for node in (start, end):
            if not graph.has_node(node):
                raise InvalidHandleError(f"{node!r} is not a node of this graph")
        return dijkstra(start, graph_successors(graph, weight_func), lambda n: n == end, **kwargs)

    @classmethod
    def all_paths(
        cls,
        start,
        successors: SuccessorFunc,
        is_end: EndPredicate,
        max_length: Optional[int] = None,
        max_paths: Optional[int] = None,
    ) -> Iterator[PathResult]:
        """Enumerate simple paths to nodes satisfying is_end."""
        cls._validate_length(max_length)
        finder = AllPathsFinder(successors)
        return finder.find_paths(start, is_end, max_length=max_length, max_paths=max_paths)
