"""
Core type definitions and protocols.

This module provides type definitions and protocols used by the path search so
that it can run over any node universe, not only over ``Graph``.
"""

from typing import Callable, Hashable, Iterable, Protocol, Tuple, TypeVar

T = TypeVar("T", bound=Hashable)

# Lazily evaluated neighbors of a node, with the cost of each step
SuccessorFunc = Callable[[T], Iterable[Tuple[T, float]]]

# Goal test that ends the search
EndPredicate = Callable[[T], bool]

# Cost of traversing a graph edge: (from payload, to payload, edge payload) -> cost
WeightFunc = Callable[[object, object, object], float]


class SearchProblem(Protocol[T]):
    """Protocol bundling a successor function with a goal test."""

    def successors(self, node: T) -> Iterable[Tuple[T, float]]:
        """Get neighbors of a node and the cost of reaching each."""
        ...

    def is_end(self, node: T) -> bool:
        """Check if a node satisfies the goal."""
        ...
