from itertools import islice

import networkx as nx

from mincut.error import UnknownVertex
from mincut.types import Label, MergeHistory, Partition, PhaseResult


def reconstruct_partition(labels: frozenset, history: MergeHistory, best: PhaseResult) -> Partition:
    """Recover the optimal partitioning from the contractions. The contractions made before the best phase form a
    forest over the original labels; the tree containing the vertex cut off in the best phase is exactly the set of
    original vertices it stood for at that point.

    Returns (rest, absorbed side).
    """
    if best.absorbed not in labels:
        raise UnknownVertex(f"Best phase absorbed {best.absorbed!r}, which is not an original vertex.")

    contracted = nx.Graph(islice(history, best.phase))
    # v might not have been merged with anything yet
    contracted.add_node(best.absorbed)
    reachable = frozenset(nx.node_connected_component(contracted, best.absorbed))

    return labels - reachable, reachable


def side_of(partition: Partition, label: Label) -> frozenset:
    return partition[0] if label in partition[0] else partition[1]
