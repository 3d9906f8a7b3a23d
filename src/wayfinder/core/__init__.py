"""Core graph and path search functionality."""

from .exceptions import GraphOperationError, InvalidHandleError, NoPathFoundError
from .graph import EdgeIndex, Graph, Neighbor, NodeIndex
from .types import EndPredicate, SearchProblem, SuccessorFunc, WeightFunc
from .search import PathFinding, PathResult, SearchMetrics, dijkstra, graph_successors

__all__ = [
    "EdgeIndex",
    "EndPredicate",
    "Graph",
    "GraphOperationError",
    "InvalidHandleError",
    "Neighbor",
    "NoPathFoundError",
    "NodeIndex",
    "PathFinding",
    "PathResult",
    "SearchMetrics",
    "SearchProblem",
    "SuccessorFunc",
    "WeightFunc",
    "dijkstra",
    "graph_successors",
]
