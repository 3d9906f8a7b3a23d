"""Path search algorithm implementations."""

from .all_paths import DEFAULT_MAX_PATH_LENGTH, AllPathsFinder
from .dijkstra import DijkstraFinder, dijkstra

__all__ = [
    "DEFAULT_MAX_PATH_LENGTH",
    "AllPathsFinder",
    "DijkstraFinder",
    "dijkstra",
]
