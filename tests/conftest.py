from itertools import combinations

import numpy as np
import pytest

from mincut.convert import graph_from_adjacency_matrix
from mincut.graph import WeightedGraph

PUZZLE_SAMPLE = {
    "jqt": ["rhn", "xhk", "nvd"],
    "rsh": ["frs", "pzl", "lsr"],
    "xhk": ["hfx"],
    "cmg": ["qnr", "nvd", "lhk", "bvb"],
    "rhn": ["xhk", "bvb", "hfx"],
    "bvb": ["xhk", "hfx"],
    "pzl": ["lsr", "hfx", "nvd"],
    "qnr": ["nvd"],
    "ntq": ["jqt", "hfx", "bvb", "xhk"],
    "nvd": ["lhk"],
    "lsr": ["lhk"],
    "rzs": ["qnr", "cmg", "lsr", "rsh"],
    "frs": ["qnr", "lhk", "lsr"],
}


@pytest.fixture
def puzzle_graph() -> WeightedGraph:
    return WeightedGraph.from_edges(
        (lhs, rhs) for lhs, targets in PUZZLE_SAMPLE.items() for rhs in targets
    )


@pytest.fixture
def weighted_example() -> WeightedGraph:
    # the example from the networkx stoer_wagner docs, minimum cut 4
    return WeightedGraph.from_edges(
        [
            ("x", "a", 3),
            ("x", "b", 1),
            ("a", "c", 3),
            ("b", "c", 5),
            ("b", "d", 4),
            ("d", "e", 2),
            ("c", "y", 2),
            ("e", "y", 3),
        ]
    )


@pytest.fixture
def two_clusters() -> WeightedGraph:
    graph = WeightedGraph()
    for cluster, weight in (("abc", 5), ("def", 7)):
        for u, v in combinations(cluster, 2):
            graph.add_labelled_edge(u, v, weight)
    graph.add_labelled_edge("a", "d", 1)
    return graph


def random_connected_matrix(n: int, p: float, seed: int, max_weight: int = 10) -> np.ndarray:
    """Erdos-Renyi style random weights on the upper triangle, plus a random spanning path so the graph is
    connected."""
    rng = np.random.default_rng(seed)
    matrix = np.zeros((n, n), dtype=int)

    rows, cols = np.triu_indices(n, k=1)
    edges = rng.random(rows.size) < p
    weights = rng.integers(1, max_weight + 1, size=rows.size)
    matrix[rows[edges], cols[edges]] = weights[edges]

    path = rng.permutation(n)
    for a, b in zip(path[:-1], path[1:]):
        if matrix[a, b] == 0 and matrix[b, a] == 0:
            matrix[a, b] = rng.integers(1, max_weight + 1)

    return np.maximum(matrix, matrix.T)


def random_connected_graph(n: int, p: float, seed: int, max_weight: int = 10) -> WeightedGraph:
    return graph_from_adjacency_matrix(random_connected_matrix(n, p, seed, max_weight))


def brute_force_minimum_cut(graph: WeightedGraph):
    """Try every bipartition. The first label is kept on one side so each cut is only counted once."""
    labels = sorted(graph.labels(), key=str)
    first, rest = labels[0], labels[1:]
    best = float("inf")
    for size in range(len(rest)):
        for others in combinations(rest, size):
            best = min(best, graph.cut_weight((first,) + others))
    return best
