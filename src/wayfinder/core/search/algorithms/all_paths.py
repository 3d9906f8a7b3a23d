"""All simple paths enumeration over a successor function."""

from typing import Hashable, Iterator, List, Optional, Set

from ...types import EndPredicate, SuccessorFunc
from ..base import PathFinder, T
from ..models import PathResult
from ..utils import MemoryManager

# Constants
DEFAULT_MAX_PATH_LENGTH = 100


class AllPathsFinder(PathFinder[T]):
    """All paths finding implementation."""

    def __init__(self, successors: SuccessorFunc, max_memory_mb: Optional[float] = None):
        """Initialize finder with optional memory limit."""
        super().__init__(successors)
        self.memory_manager = MemoryManager(max_memory_mb)

    def find_path(self, start: T, is_end: EndPredicate, **kwargs) -> Optional[PathResult[T]]:
        """Find a single path.

        For AllPathsFinder, this returns the first path found, which is not
        necessarily the cheapest.
        """
        kwargs["max_paths"] = 1
        try:
            return next(self.find_paths(start, is_end, **kwargs))
        except StopIteration:
            return None

    def find_paths(
        self,
        start: T,
        is_end: EndPredicate,
        max_length: Optional[int] = None,
        max_paths: Optional[int] = None,
        **kwargs,
    ) -> Iterator[PathResult[T]]:
        """
        Enumerate simple paths from start to nodes satisfying is_end using DFS.

        A path ends at the first node satisfying is_end; it is not extended
        past it. Paths are produced in successor order.

        Args:
            start: Node to search from
            is_end: Goal predicate
            max_length: Maximum number of steps per path
                (default DEFAULT_MAX_PATH_LENGTH)
            max_paths: Maximum number of paths to yield

        Raises:
            ValueError: If max_length or max_paths is not positive
        """
        if max_length is None:
            max_length = DEFAULT_MAX_PATH_LENGTH
        if max_length <= 0:
            raise ValueError("max_length must be positive")
        if max_paths is not None and max_paths <= 0:
            raise ValueError("max_paths must be positive")

        # Initialize search state
        current_path: List[Hashable] = [start]
        path_nodes: Set[Hashable] = {start}
        paths_found = 0

        def dfs(node: Hashable, cost: float) -> Iterator[PathResult[T]]:
            """Depth-first search implementation."""
            nonlocal paths_found

            self.memory_manager.check_memory()

            # Base case: reached max paths
            if max_paths is not None and paths_found >= max_paths:
                return

            # Base case: found end node
            if is_end(node):
                paths_found += 1
                yield PathResult(path=current_path.copy(), total_cost=cost)
                return

            if len(current_path) - 1 >= max_length:
                return

            for neighbor, step_cost in self.successors(node):
                # Skip if neighbor is already in current path (avoid cycles)
                if neighbor in path_nodes:
                    continue

                current_path.append(neighbor)
                path_nodes.add(neighbor)

                yield from dfs(neighbor, cost + step_cost)

                # Backtrack
                current_path.pop()
                path_nodes.remove(neighbor)

                if max_paths is not None and paths_found >= max_paths:
                    return

        yield from dfs(start, 0.0)
