"""
Directed, weighted graph abstraction for the path engine.

Nodes are identified by hashable keys owned by a graph container.
Edges are directed: u -> v with a non-negative weight, and refer to their
target by key only.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Hashable, Iterable, Sequence

NodeId = Hashable


@dataclass(frozen=True)
class Edge:
    """Outgoing edge: weight plus the key of the node it points to."""

    weight: float
    target: NodeId


class Graph(ABC):
    """Directed, weighted graph over node keys."""

    @abstractmethod
    def nodes(self) -> Iterable[NodeId]:
        """Return all node keys in the graph."""
        raise NotImplementedError

    @abstractmethod
    def has_node(self, node: NodeId) -> bool:
        """True if node is a key of this graph."""
        raise NotImplementedError

    @abstractmethod
    def outgoing(self, node: NodeId) -> Sequence[Edge]:
        """
        Outgoing edges of a node, in insertion order.

        Parallel edges and self-loops are returned as stored.
        """
        raise NotImplementedError

    def __contains__(self, node: object) -> bool:
        return self.has_node(node)


def path_weight(graph: Graph, path: Sequence[NodeId]) -> float:
    """
    Total weight of a node sequence, taking the cheapest edge for each hop.

    Raises ValueError if two consecutive nodes are not joined by an edge.
    """
    total = 0.0
    for u, v in zip(path, path[1:]):
        weights = [e.weight for e in graph.outgoing(u) if e.target == v]
        if not weights:
            raise ValueError(f"No edge {u!r} -> {v!r} in graph.")
        total += min(weights)
    return total
