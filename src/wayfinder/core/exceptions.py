"""
Custom exceptions for the graph and path search system.

This module defines the hierarchy of custom exceptions used throughout the package
to handle error conditions in a structured and meaningful way. Each exception
type corresponds to a specific category of errors that may occur while building
a graph or searching it.

Note that an unreachable goal is not an error for the core search: it returns
``None``. ``NoPathFoundError`` exists for callers that treat absence as fatal.
"""


class GraphOperationError(Exception):
    """
    Raised when graph operations fail.

    This exception is raised when operations on the graph container or on a
    search over it encounter errors, such as invalid handles or a required
    path that does not exist.

    Examples:
        * Handle from another graph
        * Edge creation between unknown nodes
        * Required path missing
    """

    def __str__(self) -> str:
        """Format graph operation error message."""
        return f"Graph Operation Error: {super().__str__()}"


class InvalidHandleError(GraphOperationError):
    """
    Raised when a node or edge handle does not address a slot of the graph.

    Handles are plain indices, so a handle issued by another graph, a negative
    index, or a handle of the wrong kind would otherwise read an unrelated slot.

    Examples:
        * NodeIndex past the end of the node list
        * EdgeIndex passed where a NodeIndex is expected
        * Handle issued by a different, larger graph
    """


class NoPathFoundError(GraphOperationError):
    """
    Raised when a path is required but no reachable node satisfies the goal.

    Examples:
        * Target node in a disconnected component
        * Goal predicate never satisfied by any reachable node
    """
