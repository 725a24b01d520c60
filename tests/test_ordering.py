from hypothesis import given, settings
from hypothesis import strategies as st

from dsalgo.ordering import has_cycle, kahn_topological_sort, topological_sort

SAMPLE_GRAPH = [[], [], [3], [1], [0, 1], [0, 2]]

CYCLE_SAMPLE = [
    (1, 2), (8, 2), (8, 9), (9, 10), (10, 8), (2, 3),
    (3, 7), (3, 4), (4, 5), (7, 5), (5, 6),
]


@st.composite
def dags(draw):
    n = draw(st.integers(min_value=1, max_value=9))
    labels = draw(st.permutations(list(range(n))))
    pairs = draw(
        st.sets(
            st.tuples(
                st.integers(min_value=0, max_value=n - 1),
                st.integers(min_value=0, max_value=n - 1),
            ).filter(lambda pair: pair[0] < pair[1]),
            max_size=20,
        )
    )
    edges = [(labels[u], labels[v]) for u, v in sorted(pairs)]
    return n, edges


def _adjacency(n, edges):
    graph = [[] for _ in range(n)]
    for u, v in edges:
        graph[u].append(v)
    return graph


def _respects_edges(order, edges):
    position = {node: index for index, node in enumerate(order)}
    return all(position[u] < position[v] for u, v in edges)


def test_has_cycle_sample_graph():
    assert has_cycle(10, CYCLE_SAMPLE) is True


def test_has_cycle_without_back_edge():
    edges = [edge for edge in CYCLE_SAMPLE if edge != (10, 8)]
    assert has_cycle(10, edges) is False


def test_has_cycle_self_loop():
    assert has_cycle(3, [(1, 2), (2, 2)]) is True


@settings(max_examples=150)
@given(dags())
def test_has_cycle_false_for_dag_and_true_with_reversed_edge(graph):
    n, edges = graph
    shifted = [(u + 1, v + 1) for u, v in edges]
    assert has_cycle(n, shifted) is False
    if shifted:
        u, v = shifted[0]
        assert has_cycle(n, shifted + [(v, u)]) is True


def test_kahn_sample_graph():
    assert kahn_topological_sort(6, SAMPLE_GRAPH) == [4, 5, 0, 2, 3, 1]


def test_dfs_sample_graph():
    assert topological_sort(6, SAMPLE_GRAPH) == [5, 4, 2, 3, 1, 0]


@settings(max_examples=150)
@given(dags())
def test_orders_are_permutations_respecting_edges(graph):
    n, edges = graph
    adjacency = _adjacency(n, edges)
    for order in (kahn_topological_sort(n, adjacency), topological_sort(n, adjacency)):
        assert sorted(order) == list(range(n))
        assert _respects_edges(order, edges)


def test_kahn_leaves_out_cycle():
    graph = [[1], [2], [1], []]
    order = kahn_topological_sort(4, graph)
    assert sorted(order) == [0, 3]