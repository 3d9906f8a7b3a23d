"""
Wayfinder - generic shortest path search and a compact indexed graph.

This package provides:

- Dijkstra's algorithm over any hashable node type, driven by a lazily
  evaluated successor function and a goal predicate
- An append-only graph container addressed by integer node and edge handles
- An adapter that turns a graph into a successor function
"""

__version__ = "0.1.0"

# Version compatibility check
import sys

if sys.version_info < (3, 12):
    raise RuntimeError("Wayfinder requires Python 3.12 or higher")

# Import commonly used components for easier access
from .core.graph import EdgeIndex, Graph, NodeIndex
from .core.search import PathFinding, PathResult, dijkstra, graph_successors

__all__ = [
    "EdgeIndex",
    "Graph",
    "NodeIndex",
    "PathFinding",
    "PathResult",
    "dijkstra",
    "graph_successors",
]
