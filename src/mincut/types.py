from dataclasses import dataclass
from typing import Hashable, Union

# VERTEX CONVENTION:
# A WeightedGraph hands out integer vertex ids in the order vertices are added, starting at 0. Ids are never reused,
# so after a contraction the absorbed id simply disappears. Every vertex also carries a label (the original vertex
# name), which is what the final partition is expressed in.
VertexId = int
Label = Hashable

Weight = Union[int, float]

# adjacency[v][w] gives the weight of the (single, merged) edge between v and w
Adjacency = dict[VertexId, dict[VertexId, Weight]]

######### Phases

# (survivor label, absorbed label), one per phase in phase order
MergeRecord = tuple[Label, Label]
MergeHistory = list[MergeRecord]


@dataclass(frozen=True)
class PhaseCut:
    """Outcome of a single maximum adjacency search. t is the last vertex added, s the one before it."""

    cut_value: Weight
    s: VertexId
    t: VertexId


@dataclass(frozen=True)
class PhaseResult:
    phase: int
    cut_value: Weight
    absorbed: Label


######### Result

Partition = tuple[frozenset, frozenset]

# cut_value, partition
MinimumCut = tuple[Weight, Partition]
