import logging
from time import perf_counter_ns
from typing import Optional

from mincut.error import DisconnectedGraph, GraphTooSmall
from mincut.graph import WeightedGraph
from mincut.heap import LazyMaxHeap
from mincut.partition import reconstruct_partition
from mincut.phase import minimum_cut_phase
from mincut.types import MergeHistory, MinimumCut, PhaseResult

logger = logging.getLogger(__name__)


def run_phases(working: WeightedGraph, heap=LazyMaxHeap) -> tuple[MergeHistory, PhaseResult]:
    """Run phases until one vertex is left, contracting the last two vertices of each phase. Contracts working in
    place. Returns the merges in phase order and the first phase with the smallest cut value."""
    n = working.vertex_count
    history: MergeHistory = []
    best: Optional[PhaseResult] = None

    for i in range(n - 1):
        phase = minimum_cut_phase(working, heap)
        s_label = working.label(phase.s)
        t_label = working.label(phase.t)

        working.contract(phase.s, phase.t)
        history.append((s_label, t_label))

        logger.debug("Phase %d: cut of the phase %s, merging %r into %r", i, phase.cut_value, t_label, s_label)

        if best is None or phase.cut_value < best.cut_value:
            best = PhaseResult(i, phase.cut_value, t_label)

    # no phase ran, so there were fewer than 2 vertices
    if best is None:
        raise GraphTooSmall(f"Graph has {n} vertices, need at least 2.")
    return history, best


def minimum_cut(graph: WeightedGraph, heap=LazyMaxHeap) -> MinimumCut:
    """Compute the global minimum cut using the Stoer-Wagner algorithm. All weights must be nonnegative and the graph
    must be connected. The graph itself is left untouched, the phases contract a copy.

    Returns the cut value and a partition (rest, side) of the vertex labels. When several minimum cuts exist, the one
    found in the earliest phase is returned.

    RAISES GraphTooSmall, DisconnectedGraph
    """
    n = graph.vertex_count
    if n < 2:
        raise GraphTooSmall(f"Graph has {n} vertices, need at least 2.")

    if n == 2:
        a, b = graph.vertices()
        if not graph.neighbors(a):
            raise DisconnectedGraph("The two vertices are not joined by an edge.")
        return graph.weight(a, b), (frozenset([graph.label(a)]), frozenset([graph.label(b)]))

    start = perf_counter_ns()

    working = graph.copy()
    history, best = run_phases(working, heap)
    partition = reconstruct_partition(graph.labels(), history, best)

    run_time = (perf_counter_ns() - start) / 1e6
    logger.debug(
        "Minimum cut %s found in phase %d of %d, sides of %d and %d vertices. Took %s ms.",
        best.cut_value,
        best.phase,
        n - 1,
        len(partition[0]),
        len(partition[1]),
        run_time,
    )

    return best.cut_value, partition
