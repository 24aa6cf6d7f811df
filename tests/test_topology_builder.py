import pytest

from topology_builder import SAMPLE_EDGES, build_random_graph, build_sample_graph


def test_sample_graph_shape():
    g = build_sample_graph()

    assert set(g.nodes()) == {1, 2, 3, 4, 5, 6}
    assert len(list(g.edges())) == len(SAMPLE_EDGES)
    assert [(e.target, e.weight) for e in g.outgoing(1)] == [(2, 1), (3, 4)]
    assert g.outgoing(3) == ()


def test_random_graph_reproducible_with_seed():
    g1 = build_random_graph(15, edge_prob=0.2, seed=123)
    g2 = build_random_graph(15, edge_prob=0.2, seed=123)

    assert list(g1.nodes()) == list(g2.nodes())
    for node in g1.nodes():
        assert g1.outgoing(node) == g2.outgoing(node)


def test_random_graph_bounds():
    g = build_random_graph(12, edge_prob=0.5, max_weight=3, seed=7)

    assert len(g) == 12
    for src, edge in g.edges():
        assert edge.target != src  # self-loops off by default
        assert 0 <= edge.weight <= 3
        assert isinstance(edge.weight, int)


def test_random_graph_extremes():
    empty = build_random_graph(5, edge_prob=0.0, seed=1)
    assert len(empty) == 5
    assert list(empty.edges()) == []

    full = build_random_graph(4, edge_prob=1.0, seed=1, self_loops=True)
    assert len(list(full.edges())) == 16


@pytest.mark.parametrize(
    "kwargs",
    [
        {"num_nodes": -1, "edge_prob": 0.5},
        {"num_nodes": 3, "edge_prob": 1.5},
        {"num_nodes": 3, "edge_prob": 0.5, "max_weight": -2},
    ],
)
def test_random_graph_rejects_bad_arguments(kwargs):
    with pytest.raises(ValueError):
        build_random_graph(**kwargs)
