"""
Exceptions raised by graph containers and path engines.

An unreachable target is a normal result, not an error; see PathResult.
"""

from graph import NodeId


class PathfindingError(Exception):
    """Base class for caller-facing path engine errors."""


class UnknownNodeError(PathfindingError, KeyError):
    """Source or target key is not a node of the graph."""

    def __init__(self, node: NodeId) -> None:
        super().__init__(node)
        self.node = node

    def __str__(self) -> str:
        return f"Unknown node: {self.node!r}"


class NegativeWeightError(PathfindingError, ValueError):
    """An edge carries a negative weight, which Dijkstra cannot handle."""

    def __init__(self, source: NodeId, target: NodeId, weight: float) -> None:
        super().__init__(source, target, weight)
        self.source = source
        self.target = target
        self.weight = weight

    def __str__(self) -> str:
        return (
            f"Negative weight {self.weight!r} on edge "
            f"{self.source!r} -> {self.target!r}"
        )
