from typing import Optional, Sequence

import networkx as nx
import numpy as np

from mincut.graph import WeightedGraph, edge_idx
from mincut.types import Label, Partition


def graph_from_adjacency_matrix(costs, labels: Optional[Sequence[Label]] = None) -> WeightedGraph:
    """Create a graph from a symmetric adjacency matrix (numpy array or list of lists). Zero entries are not edges.
    Vertex i gets labels[i], or i itself when no labels are given."""
    matrix = np.asarray(costs)
    if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1]:
        raise ValueError(f"Adjacency matrix must be square, got shape {matrix.shape}")
    if not np.array_equal(matrix, matrix.T):
        raise ValueError("Adjacency matrix is not symmetric")
    if np.any(matrix < 0):
        raise ValueError("Adjacency matrix has negative weights")

    n = matrix.shape[0]
    if labels is None:
        labels = range(n)
    elif len(labels) != n:
        raise ValueError(f"Got {len(labels)} labels for {n} vertices")

    graph = WeightedGraph()
    ids = [graph.add_vertex(label) for label in labels]

    # indices for the upper triangle (k=1 excludes the diagonal)
    rows, cols = np.triu_indices(n, k=1)
    present = matrix[rows, cols] != 0
    for i, j in zip(rows[present], cols[present]):
        graph.add_edge(ids[i], ids[j], matrix[i, j].item())

    return graph


def adjacency_matrix_from_vector(x_values, n: int) -> np.ndarray:
    """Create an adjacency matrix from x_values"""
    if len(x_values) != (n * (n - 1)) // 2:
        raise ValueError("x_values does not have the correct length")

    adjacency_matrix = np.zeros((n, n), dtype=np.asarray(x_values).dtype)

    for i in range(n):
        for j in range(i + 1, n):
            idx = edge_idx(i, j, n)
            adjacency_matrix[i][j] = x_values[idx]
            adjacency_matrix[j][i] = adjacency_matrix[i][j]

    return adjacency_matrix


def graph_from_vector(x_values, n: int) -> WeightedGraph:
    """x_values should be 1D array with our edge index convention. Vertices are labelled 0 to n-1."""
    return graph_from_adjacency_matrix(adjacency_matrix_from_vector(x_values, n))


def graph_from_networkx(G: nx.Graph, weight: str = "weight") -> WeightedGraph:
    """Edges without the weight attribute have unit weight. Parallel edges of a multigraph are summed."""
    if G.is_directed():
        raise ValueError("Directed graphs have no undirected minimum cut")

    graph = WeightedGraph()
    for v in G.nodes:
        graph.add_vertex(v)
    for u, v, e in G.edges(data=True):
        graph.add_edge(graph.vertex(u), graph.vertex(v), e.get(weight, 1))

    return graph


def graph_to_networkx(graph: WeightedGraph, weight: str = "weight") -> nx.Graph:
    G = nx.Graph()
    G.add_nodes_from(graph.label(v) for v in graph.vertices())
    for v, w, wght in graph.edges():
        G.add_edge(graph.label(v), graph.label(w), **{weight: wght})

    return G


def cut_edge_indices(partition: Partition, n: int) -> np.ndarray:
    """Indices of all vertex pairs crossing the partition of 0..n-1, using our edge index convention."""
    vertices_one = np.array(sorted(partition[0]), dtype=int)
    vertices_two = np.array(sorted(partition[1]), dtype=int)
    # every pairing of a vertex from one side with a vertex from the other, one row per pair
    edges = np.dstack(np.meshgrid(vertices_one, vertices_two)).reshape(-1, 2)
    # we sort the edges so that the lowest index is first
    edges = np.sort(edges, axis=1)
    return np.sort(edge_idx(edges[:, 0], edges[:, 1], n))
