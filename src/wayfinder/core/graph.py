"""
Core graph container with append-only indexed storage.

This module provides the Graph class, an arena of node and edge payloads
addressed by small integer handles. Nodes and edges are never removed, so
every handle stays valid for the lifetime of the graph that issued it.

Adjacency is stored as an outgoing list per node (in insertion order) plus
an incoming list used to traverse undirected edges in reverse. The graph
itself does not search; see ``wayfinder.core.search.utils.graph_successors``
for the adapter that feeds it to a path finder.

Example:
    >>> graph = Graph[str, float]()
    >>> a = graph.add_node("a")
    >>> b = graph.add_node("b")
    >>> edge = graph.add_edge(a, b, 2.5)
    >>> graph[edge]
    2.5
"""

import logging
from dataclasses import dataclass, field
from typing import Generic, Iterator, List, Optional, Tuple, TypeVar, Union, overload

from .exceptions import InvalidHandleError

logger = logging.getLogger(__name__)

N = TypeVar("N")
E = TypeVar("E")
NT = TypeVar("NT")
ET = TypeVar("ET")


@dataclass(frozen=True)
class NodeIndex:
    """Opaque handle identifying a stored node. Equal iff the index is equal."""

    index: int

    def __repr__(self) -> str:
        return f"NodeIndex({self.index})"


@dataclass(frozen=True)
class EdgeIndex:
    """Opaque handle identifying a stored edge payload."""

    index: int

    def __repr__(self) -> str:
        return f"EdgeIndex({self.index})"


@dataclass(frozen=True)
class Neighbor(Generic[NT, ET]):
    """An adjacency entry: the node on the other end and the edge leading to it."""

    node: NT
    edge: ET


@dataclass
class NodeEntry(Generic[N]):
    """Storage slot for a node payload and its adjacency lists."""

    payload: N
    neighbors: List[Neighbor[NodeIndex, EdgeIndex]] = field(default_factory=list)
    incoming: List[Neighbor[NodeIndex, EdgeIndex]] = field(default_factory=list)


class Graph(Generic[N, E]):
    """
    Directed or undirected graph over arbitrary node and edge payloads.

    Attributes:
        _nodes (List[NodeEntry]): Node slots, addressed by NodeIndex
        _edges (List[E]): Edge payloads, addressed by EdgeIndex
        _edge_ends (List[Tuple[NodeIndex, NodeIndex]]): Endpoints of each edge
        _directed (bool): Whether edges are one-way
    """

    def __init__(self, *, directed: bool = False):
        """
        Initialize an empty graph.

        Args:
            directed (bool): If False (the default) each edge may also be
                traversed and looked up from its target back to its source.
        """
        self._nodes: List[NodeEntry[N]] = []
        self._edges: List[E] = []
        self._edge_ends: List[Tuple[NodeIndex, NodeIndex]] = []
        self._directed = directed

    @property
    def directed(self) -> bool:
        """Whether edges are one-way. Fixed at construction."""
        return self._directed

    @property
    def node_count(self) -> int:
        return len(self._nodes)

    @property
    def edge_count(self) -> int:
        return len(self._edges)

    def __len__(self) -> int:
        return len(self._nodes)

    def _entry(self, node: NodeIndex) -> NodeEntry[N]:
        """Resolve a node handle, failing fast on handles this graph never issued."""
        if not isinstance(node, NodeIndex):
            raise InvalidHandleError(f"Expected a NodeIndex, got {type(node).__name__}")
        if not 0 <= node.index < len(self._nodes):
            raise InvalidHandleError(
                f"{node!r} is out of range for a graph with {len(self._nodes)} nodes"
            )
        return self._nodes[node.index]

    def _check_edge(self, edge: EdgeIndex) -> int:
        if not isinstance(edge, EdgeIndex):
            raise InvalidHandleError(f"Expected an EdgeIndex, got {type(edge).__name__}")
        if not 0 <= edge.index < len(self._edges):
            raise InvalidHandleError(
                f"{edge!r} is out of range for a graph with {len(self._edges)} edges"
            )
        return edge.index

    @overload
    def __getitem__(self, handle: NodeIndex) -> N: ...

    @overload
    def __getitem__(self, handle: EdgeIndex) -> E: ...

    def __getitem__(self, handle: Union[NodeIndex, EdgeIndex]) -> Union[N, E]:
        """Read a node payload or an edge payload by handle."""
        if isinstance(handle, EdgeIndex):
            return self._edges[self._check_edge(handle)]
        return self._entry(handle).payload

    def __setitem__(self, handle: Union[NodeIndex, EdgeIndex], value) -> None:
        """Overwrite a node payload or an edge payload by handle."""
        if isinstance(handle, EdgeIndex):
            self._edges[self._check_edge(handle)] = value
        else:
            self._entry(handle).payload = value

    def has_node(self, node: NodeIndex) -> bool:
        """Check if a handle addresses a node of this graph."""
        return isinstance(node, NodeIndex) and 0 <= node.index < len(self._nodes)

    def has_edge_index(self, edge: EdgeIndex) -> bool:
        """Check if a handle addresses an edge of this graph."""
        return isinstance(edge, EdgeIndex) and 0 <= edge.index < len(self._edges)

    def add_node(self, payload: N) -> NodeIndex:
        """Append a node with no neighbors and return its handle."""
        index = NodeIndex(len(self._nodes))
        self._nodes.append(NodeEntry(payload))
        logger.debug(f"Added node {index}")
        return index

    def add_edge(self, from_node: NodeIndex, to_node: NodeIndex, payload: E) -> EdgeIndex:
        """
        Connect two nodes, or update the payload of the edge already connecting them.

        An existing connection is found with ``get_edge_connecting``, so on an
        undirected graph ``add_edge(b, a, ...)`` updates an edge stored as a -> b.

        Args:
            from_node (NodeIndex): Source node
            to_node (NodeIndex): Target node
            payload (E): Edge payload

        Returns:
            EdgeIndex: The existing edge's handle, or the new one

        Raises:
            InvalidHandleError: If either node handle is not part of this graph
        """
        source = self._entry(from_node)
        target = self._entry(to_node)

        existing = self.get_edge_connecting(from_node, to_node)
        if existing is not None:
            self._edges[existing.index] = payload
            logger.debug(f"Updated edge {existing} between {from_node} and {to_node}")
            return existing

        edge = EdgeIndex(len(self._edges))
        self._edges.append(payload)
        self._edge_ends.append((from_node, to_node))
        source.neighbors.append(Neighbor(to_node, edge))
        target.incoming.append(Neighbor(from_node, edge))
        logger.debug(f"Added edge {edge} from {from_node} to {to_node}")
        return edge

    def get_edge_connecting(self, a: NodeIndex, b: NodeIndex) -> Optional[EdgeIndex]:
        """
        Find the edge leading from ``a`` to ``b``.

        On an undirected graph an edge stored as b -> a also connects a to b,
        so ``b``'s outgoing list is consulted when ``a``'s has no match.
        """
        source = self._entry(a)
        target = self._entry(b)
        for neighbor in source.neighbors:
            if neighbor.node == b:
                return neighbor.edge
        if self._directed:
            return None
        for neighbor in target.neighbors:
            if neighbor.node == a:
                return neighbor.edge
        return None

    def neighbor_indices(self, node: NodeIndex) -> List[Neighbor[NodeIndex, EdgeIndex]]:
        """Get the outgoing adjacency list of a node, in insertion order."""
        return list(self._entry(node).neighbors)

    def neighbor_weights(self, node: NodeIndex) -> List[Neighbor[N, E]]:
        """Get the outgoing adjacency list of a node with payloads in place of handles."""
        return [
            Neighbor(self._nodes[n.node.index].payload, self._edges[n.edge.index])
            for n in self._entry(node).neighbors
        ]

    def incident_indices(self, node: NodeIndex) -> List[Neighbor[NodeIndex, EdgeIndex]]:
        """
        Get every neighbor reachable from a node in one step.

        For a directed graph this is the outgoing list. For an undirected graph
        the outgoing entries come first, followed by the sources of incoming
        edges that are not already listed.
        """
        entry = self._entry(node)
        if self._directed:
            return list(entry.neighbors)

        result = list(entry.neighbors)
        seen = {n.node for n in result}
        for n in entry.incoming:
            if n.node not in seen:
                seen.add(n.node)
                result.append(n)
        return result

    def nodes(self) -> Iterator[NodeIndex]:
        """Iterate over all node handles in insertion order."""
        for i in range(len(self._nodes)):
            yield NodeIndex(i)

    def edges(self) -> Iterator[Tuple[NodeIndex, NodeIndex, EdgeIndex]]:
        """Iterate over (from, to, edge) triples in insertion order."""
        for i, (from_node, to_node) in enumerate(self._edge_ends):
            yield from_node, to_node, EdgeIndex(i)
