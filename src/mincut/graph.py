from typing import Iterable

from mincut.error import UnknownVertex
from mincut.types import Adjacency, Label, VertexId, Weight


def edge_idx(lower_i: int, higher_j: int, n: int):
    """Returns the index of the edge using our edge-index convention."""
    return lower_i * (2 * n - lower_i - 1) // 2 + (higher_j - lower_i - 1)


class WeightedGraph:
    """Undirected graph with at most one weighted edge per vertex pair. Adding a parallel edge sums its weight into
    the existing one, so the graph behaves like a multigraph whose parallel edges are always merged.

    Vertices are addressed by integer ids, edges live in a dict-of-dicts keyed by those ids.
    """

    def __init__(self):
        self._adj: Adjacency = {}
        self._labels: dict[VertexId, Label] = {}
        self._ids: dict[Label, VertexId] = {}
        self._next_id: VertexId = 0

    @classmethod
    def from_edges(cls, edges: Iterable[tuple]) -> "WeightedGraph":
        """Edges are (a, b) or (a, b, weight) tuples of labels. A missing weight counts as 1."""
        graph = cls()
        for edge in edges:
            a, b, *rest = edge
            if len(rest) > 1:
                raise ValueError(f"Edge {edge!r} has more than a weight after its endpoints.")
            graph.add_labelled_edge(a, b, *rest)
        return graph

    def __len__(self):
        return len(self._adj)

    def __contains__(self, v):
        return v in self._adj

    def __repr__(self):
        return f"WeightedGraph(vertices={self.vertex_count}, edges={self.edge_count})"

    @property
    def vertex_count(self) -> int:
        return len(self._adj)

    @property
    def edge_count(self) -> int:
        return sum(len(nbs) for nbs in self._adj.values()) // 2

    def _check(self, v: VertexId):
        if v not in self._adj:
            raise UnknownVertex(f"Vertex {v} is not in the graph.")

    def add_vertex(self, label: Label) -> VertexId:
        if label in self._ids:
            raise ValueError(f"Label {label!r} already belongs to vertex {self._ids[label]}.")

        v = self._next_id
        self._next_id += 1
        self._adj[v] = {}
        self._labels[v] = label
        self._ids[label] = v

        return v

    def ensure_vertex(self, label: Label) -> VertexId:
        v = self._ids.get(label)
        if v is None:
            v = self.add_vertex(label)
        return v

    def vertex(self, label: Label) -> VertexId:
        v = self._ids.get(label)
        if v is None:
            raise UnknownVertex(f"No vertex with label {label!r}.")
        return v

    def label(self, v: VertexId) -> Label:
        self._check(v)
        return self._labels[v]

    def labels(self) -> frozenset:
        return frozenset(self._labels[v] for v in self._adj)

    def vertices(self) -> list[VertexId]:
        # dicts keep insertion order and ids only ever grow, so this is ascending
        return list(self._adj)

    def first_vertex(self) -> VertexId:
        if not self._adj:
            raise UnknownVertex("Graph has no vertices.")
        return next(iter(self._adj))

    def add_edge(self, a: VertexId, b: VertexId, weight: Weight = 1):
        """Adds weight onto the a-b edge, creating it if needed. Self-loops never cross a cut, so they are dropped."""
        self._check(a)
        self._check(b)
        if not weight >= 0:
            raise ValueError(f"Edge ({a}, {b}) needs a nonnegative weight, got {weight}.")
        if a == b:
            return

        new_weight = self._adj[a].get(b, 0) + weight
        self._adj[a][b] = new_weight
        self._adj[b][a] = new_weight

    def add_labelled_edge(self, a_label: Label, b_label: Label, weight: Weight = 1):
        a = self.ensure_vertex(a_label)
        b = self.ensure_vertex(b_label)
        self.add_edge(a, b, weight)

    def weight(self, a: VertexId, b: VertexId) -> Weight:
        self._check(a)
        self._check(b)
        return self._adj[a].get(b, 0)

    def set_weight(self, a: VertexId, b: VertexId, weight: Weight):
        self._check(a)
        self._check(b)
        if not weight >= 0:
            raise ValueError(f"Edge ({a}, {b}) needs a nonnegative weight, got {weight}.")
        if a == b:
            return

        self._adj[a][b] = weight
        self._adj[b][a] = weight

    def neighbors(self, v: VertexId) -> list[tuple[VertexId, Weight]]:
        self._check(v)
        return list(self._adj[v].items())

    def remove_vertex(self, v: VertexId):
        self._check(v)
        for w in self._adj.pop(v):
            del self._adj[w][v]
        del self._ids[self._labels.pop(v)]

    def contract(self, survivor: VertexId, absorbed: VertexId):
        """Merge absorbed into survivor. Edges of absorbed are moved onto survivor, adding to any edge survivor
        already has to the same neighbor. The edge between the two disappears, as does absorbed itself."""
        self._check(survivor)
        self._check(absorbed)
        if survivor == absorbed:
            raise ValueError(f"Cannot contract vertex {survivor} into itself.")

        survivor_nbs = self._adj[survivor]
        for x, w in self._adj[absorbed].items():
            if x == survivor:
                continue
            new_weight = survivor_nbs.get(x, 0) + w
            survivor_nbs[x] = new_weight
            self._adj[x][survivor] = new_weight

        self.remove_vertex(absorbed)

    def copy(self) -> "WeightedGraph":
        copied = WeightedGraph()
        copied._adj = {v: nbs.copy() for v, nbs in self._adj.items()}
        copied._labels = self._labels.copy()
        copied._ids = self._ids.copy()
        copied._next_id = self._next_id
        return copied

    def is_connected(self) -> bool:
        """Depth-first search from the first vertex.
        Complexity: O(|V|+|E|)"""
        if not self._adj:
            return False

        start = self.first_vertex()
        visited = {start}
        stack = [start]

        while stack:
            node = stack.pop()
            for neighbor in self._adj[node]:
                if neighbor not in visited:
                    visited.add(neighbor)
                    stack.append(neighbor)

        return len(visited) == len(self._adj)

    def crossing_edges(self, side: Iterable[Label]) -> list[tuple[Label, Label, Weight]]:
        """All edges with exactly one endpoint labelled in side. Each edge is listed once, as (inside, outside, w)."""
        side_ids = {self.vertex(label) for label in side}
        crossing = []
        for v in side_ids:
            for w, weight in self._adj[v].items():
                if w not in side_ids:
                    crossing.append((self._labels[v], self._labels[w], weight))
        return crossing

    def cut_weight(self, side: Iterable[Label]) -> Weight:
        return sum(weight for _, _, weight in self.crossing_edges(side))

    def edges(self) -> list[tuple[VertexId, VertexId, Weight]]:
        """Every edge once, as (lower id, higher id, weight)."""
        return [(v, w, weight) for v, nbs in self._adj.items() for w, weight in nbs.items() if v < w]
