"""
Concrete directed, weighted graph implementation.

Implements the Graph interface using a simple adjacency-list representation:
the container owns every node key and each edge list refers to targets by
key.
"""

from typing import Dict, Iterable, Iterator, List, Sequence, Tuple
import math

from errors import NegativeWeightError
from graph import Edge, Graph, NodeId


class AdjacencyListGraph(Graph):
    """
    Directed, weighted graph backed by a node -> [Edge, ...] mapping.

    Edge order is insertion order. Parallel edges between the same pair and
    self-loops are kept as given.
    """

    def __init__(self) -> None:
        self._adj: Dict[NodeId, List[Edge]] = {}

    @classmethod
    def from_edges(
        cls,
        edges: Iterable[Tuple[NodeId, NodeId, float]],
        nodes: Iterable[NodeId] = (),
    ) -> "AdjacencyListGraph":
        """Build a graph from (src, dst, weight) triples plus optional isolated nodes."""
        graph = cls()
        for node in nodes:
            graph.add_node(node)
        for src, dst, weight in edges:
            graph.add_edge(src, dst, weight)
        return graph

    # --- Mutation API (not part of Graph interface) --------------------------

    def add_node(self, node: NodeId) -> None:
        """Ensure node exists in the graph."""
        self._adj.setdefault(node, [])

    def add_edge(self, src: NodeId, dst: NodeId, weight: float) -> None:
        """
        Append a directed edge src -> dst with weight.
        Auto-adds nodes if they don't exist.
        """
        if not math.isfinite(weight):
            raise ValueError(f"Edge weight must be finite, got {weight!r}.")
        if weight < 0:
            raise NegativeWeightError(src, dst, weight)
        self.add_node(src)
        self.add_node(dst)
        self._adj[src].append(Edge(weight, dst))

    # --- Graph interface -----------------------------------------------------

    def nodes(self) -> Iterable[NodeId]:
        return self._adj.keys()

    def has_node(self, node: NodeId) -> bool:
        try:
            return node in self._adj
        except TypeError:  # unhashable key
            return False

    def outgoing(self, node: NodeId) -> Sequence[Edge]:
        return tuple(self._adj.get(node, ()))  # defensive copy

    # --- Convenience ---------------------------------------------------------

    def edges(self) -> Iterator[Tuple[NodeId, Edge]]:
        """Yield (src, edge) for every stored edge."""
        for src, out in self._adj.items():
            for edge in out:
                yield src, edge

    def __len__(self) -> int:
        return len(self._adj)
