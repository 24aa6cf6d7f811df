"""
Property checks for SimpleDijkstraEngine against brute-force enumeration on
small random graphs.
"""

import math

import pytest

from adjacency_list_graph import AdjacencyListGraph
from dijkstra_engine import EngineConfig, SimpleDijkstraEngine, TieBreak
from graph import path_weight
from topology_builder import build_random_graph


def brute_force_distance(graph: AdjacencyListGraph, source, target) -> float:
    """Minimum weight over all simple paths, inf if there are none."""
    best = math.inf
    stack = [(source, 0, {source})]
    while stack:
        node, cost, seen = stack.pop()
        if node == target:
            best = min(best, cost)
            continue
        for edge in graph.outgoing(node):
            if edge.target not in seen:
                stack.append((edge.target, cost + edge.weight, seen | {edge.target}))
    return best


@pytest.mark.parametrize("seed", range(12))
@pytest.mark.parametrize("tie_break", list(TieBreak))
def test_matches_brute_force(seed, tie_break):
    g = build_random_graph(7, edge_prob=0.35, max_weight=6, seed=seed, self_loops=True)
    engine = SimpleDijkstraEngine(EngineConfig(tie_break=tie_break))

    for source in g.nodes():
        for target in g.nodes():
            expected = brute_force_distance(g, source, target)
            result = engine.find_path(g, source, target)

            if math.isinf(expected):
                assert not result.found
                continue

            assert result.found
            assert result.distance == expected
            assert result.path[0] == source
            assert result.path[-1] == target
            # the reported distance is what the path actually costs
            assert path_weight(g, result.path) == expected
            # parent links form a tree
            assert len(set(result.path)) == len(result.path)


@pytest.mark.parametrize("seed", [3, 17, 42])
def test_repeated_calls_agree(seed):
    g = build_random_graph(10, edge_prob=0.3, seed=seed)
    engine = SimpleDijkstraEngine()

    for target in g.nodes():
        first = engine.find_path(g, 0, target)
        second = engine.find_path(g, 0, target)
        assert first.distance == second.distance
        assert first.path == second.path


def test_self_to_self_on_random_graph():
    g = build_random_graph(8, edge_prob=0.5, seed=5, self_loops=True)
    engine = SimpleDijkstraEngine()

    for node in g.nodes():
        result = engine.find_path(g, node, node)
        assert result.path == (node,)
        assert result.distance == 0
