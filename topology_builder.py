"""
Utilities to build graphs for the path engine: the fixed six-node sample
and reproducible random digraphs.
"""

from typing import List, Tuple

import numpy as np

from adjacency_list_graph import AdjacencyListGraph


# (src, dst, weight) in the order edges are attached to each node.
SAMPLE_EDGES: List[Tuple[int, int, int]] = [
    (1, 2, 1),
    (1, 3, 4),
    (2, 4, 1),
    (2, 5, 2),
    (4, 3, 1),
    (4, 5, 2),
    (5, 6, 1),
    (6, 2, 1),
]


def build_sample_graph() -> AdjacencyListGraph:
    """Six nodes 1..6; the shortest 1 -> 3 path is 1, 2, 4, 3 with cost 3."""
    return AdjacencyListGraph.from_edges(SAMPLE_EDGES, nodes=range(1, 7))


def build_random_graph(
    num_nodes: int,
    edge_prob: float,
    max_weight: int = 10,
    seed: int | None = None,
    self_loops: bool = False,
) -> AdjacencyListGraph:
    """
    Random directed graph over nodes 0..num_nodes-1.

    Args:
        num_nodes: number of nodes; every node is present even if isolated.
        edge_prob: independent probability of each ordered pair u -> v.
        max_weight: integer weights are drawn uniformly from [0, max_weight].
        seed: RNG seed for reproducibility.
        self_loops: whether u -> u pairs may be drawn as well.
    """
    if num_nodes < 0:
        raise ValueError("num_nodes must be non-negative")
    if not 0.0 <= edge_prob <= 1.0:
        raise ValueError("edge_prob must lie in [0, 1]")
    if max_weight < 0:
        raise ValueError("max_weight must be non-negative")

    rng = np.random.default_rng(seed)
    mask = rng.random((num_nodes, num_nodes)) < edge_prob
    if not self_loops:
        np.fill_diagonal(mask, False)
    weights = rng.integers(0, max_weight, size=(num_nodes, num_nodes), endpoint=True)

    graph = AdjacencyListGraph()
    for node in range(num_nodes):
        graph.add_node(node)
    for u, v in zip(*np.nonzero(mask)):
        graph.add_edge(int(u), int(v), int(weights[u, v]))
    return graph

