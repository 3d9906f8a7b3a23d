"""Shared test fixtures."""

import math
from typing import Callable, Dict, Iterable, List, Tuple

import pytest

from wayfinder.core.graph import Graph, NodeIndex

Cell = Tuple[int, int]


def euclidean(from_payload, to_payload, edge_payload) -> float:
    """Step cost equal to the distance between two (x, y) node payloads."""
    return math.dist(from_payload, to_payload)


def build_sample_graph(directed: bool) -> Tuple[Graph, Dict[str, NodeIndex]]:
    """
    Five points joined by zero-payload edges:

    a -> b -> c -> d
         |         |
         +--> e <--+
    """
    graph: Graph[Tuple[float, float], int] = Graph(directed=directed)
    nodes = {
        "a": graph.add_node((2, 1)),
        "b": graph.add_node((3, 4)),
        "c": graph.add_node((5, 5)),
        "d": graph.add_node((5, 2)),
        "e": graph.add_node((7, 2)),
    }
    graph.add_edge(nodes["a"], nodes["b"], 0)
    graph.add_edge(nodes["b"], nodes["c"], 0)
    graph.add_edge(nodes["b"], nodes["e"], 0)
    graph.add_edge(nodes["c"], nodes["d"], 0)
    graph.add_edge(nodes["d"], nodes["e"], 0)
    return graph, nodes


@pytest.fixture
def sample_graph() -> Tuple[Graph, Dict[str, NodeIndex]]:
    """Fixture providing the undirected five point graph and its node handles."""
    return build_sample_graph(directed=False)


@pytest.fixture
def directed_sample_graph() -> Tuple[Graph, Dict[str, NodeIndex]]:
    """Fixture providing the directed five point graph and its node handles."""
    return build_sample_graph(directed=True)


def make_grid_successors(width: int, height: int) -> Callable[[Cell], List[Tuple[Cell, float]]]:
    """4-neighbor moves of cost 1 inside a width x height grid."""

    def successors(cell: Cell) -> List[Tuple[Cell, float]]:
        x, y = cell
        result = []
        for dx, dy in ((1, 0), (0, 1), (-1, 0), (0, -1)):
            nx, ny = x + dx, y + dy
            if 0 <= nx < width and 0 <= ny < height:
                result.append(((nx, ny), 1.0))
        return result

    return successors


@pytest.fixture
def grid_successors() -> Callable[[Cell], List[Tuple[Cell, float]]]:
    """Fixture providing the successor function of a 4x4 grid."""
    return make_grid_successors(4, 4)


@pytest.fixture
def weighted_successors() -> Callable[[str], Iterable[Tuple[str, float]]]:
    """
    Fixture providing a small cyclic weighted digraph:

    A -1-> B -1-> C -1-> A
    |             |
    4             1
    v             v
    D ----1-----> E
    """
    adjacency = {
        "A": [("B", 1.0), ("D", 4.0)],
        "B": [("C", 1.0)],
        "C": [("A", 1.0), ("E", 1.0)],
        "D": [("E", 1.0)],
        "E": [],
        "F": [("A", 1.0)],
    }
    return lambda node: adjacency[node]


@pytest.fixture
def euclidean_weight():
    """Fixture providing the euclidean step cost between point payloads."""
    return euclidean


@pytest.fixture
def grid_factory():
    """Fixture providing a builder of bounded grid successor functions."""
    return make_grid_successors
