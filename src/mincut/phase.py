from mincut.error import DisconnectedGraph, GraphTooSmall
from mincut.graph import WeightedGraph
from mincut.heap import LazyMaxHeap
from mincut.types import PhaseCut


def minimum_cut_phase(graph: WeightedGraph, heap=LazyMaxHeap) -> PhaseCut:
    """One maximum adjacency search. Starting from the first vertex, keep adding the vertex most tightly connected to
    the set A built so far, where tightness is the summed weight of its edges into A. The last vertex t is cut off by
    its priority at the moment it is extracted; that is the cut of the phase. s is the vertex added just before t.

    RAISES DisconnectedGraph when A can no longer grow before all vertices are reached.
    """
    n = graph.vertex_count
    if n < 2:
        raise GraphTooSmall(f"A phase needs at least 2 vertices, graph has {n}.")

    u = graph.first_vertex()
    A = {u}
    h = heap()
    for v, w in graph.neighbors(u):
        h.insert_or_add(v, w)

    # Repeat until all but one vertex has been added to A.
    while len(A) < n - 1:
        if not h:
            raise DisconnectedGraph(f"No vertex outside a set of {len(A)} is connected to it.")
        u, _ = h.extract_max()
        A.add(u)
        for v, w in graph.neighbors(u):
            if v not in A:
                h.insert_or_add(v, w)

    if not h:
        raise DisconnectedGraph(f"Last vertex has no edges into the other {len(A)}.")
    t, cut_value = h.extract_max()

    return PhaseCut(cut_value, u, t)
