from abc import ABC, abstractmethod
from typing import Hashable, Iterator, Optional, TypeVar

from ..types import EndPredicate, SuccessorFunc
from .models import PathResult

# Type variable for searched node values
T = TypeVar("T", bound=Hashable)


class PathFinder[T: Hashable](ABC):
    """Abstract base class for path search algorithms over a successor function."""

    def __init__(self, successors: SuccessorFunc):
        """Initialize finder with the function that expands nodes."""
        if not callable(successors):
            raise TypeError("successors must be callable")
        self.successors = successors

    @abstractmethod
    def find_path(self, start: T, is_end: EndPredicate, **kwargs) -> Optional[PathResult[T]]:
        """Find a path from start to a node satisfying is_end, or None."""
        pass

    def find_paths(self, start: T, is_end: EndPredicate, **kwargs) -> Iterator[PathResult[T]]:
        """Find multiple paths.

        Default implementation yields single path from find_path.
        Subclasses may override this to enumerate more than one path.
        """
        path = self.find_path(start, is_end, **kwargs)
        if path is not None:
            yield path
