"""
Weighted Closeness Engine — Dijkstra distance sums.

Runs single-source shortest paths from every requested vertex over a lazily
built incidence list, using an indexed min-heap with decrease-key. Path
lengths that differ by less than the configured epsilon are treated as
equal, so floating-point noise never triggers a heap update.

Time Complexity: O(k × E log V) for k source vertices
Memory: O(V + E), allocated once per call
"""

import logging
from typing import List, Optional

import networkx as nx
import numpy as np

from app.config import SHORTEST_PATH_EPSILON
from core.common.errors import InvalidArgumentError
from core.common.interruption import (
    ProgressSink,
    StopCheck,
    check_cancelled,
    report_progress,
)
from core.common.warnings_latch import (
    DISCONNECTED_GRAPH_WARNING,
    SMALL_WEIGHTS_WARNING,
    WarningLatch,
)
from core.graph.adjacency import (
    LazyIncidenceList,
    NeighborMode,
    ecount,
    require_edge_ids,
    vcount,
)
from core.structures.indexed_heap import IndexedMinHeap

logger = logging.getLogger(__name__)


def cmp_epsilon(a: float, b: float, eps: float = SHORTEST_PATH_EPSILON) -> int:
    """Three-way compare; values closer than ``eps`` compare equal."""
    diff = a - b
    if abs(diff) < eps:
        return 0
    return -1 if diff < 0 else 1


def validate_weights(
    weights: np.ndarray,
    no_of_edges: int,
    latch: WarningLatch,
    eps: float = SHORTEST_PATH_EPSILON,
) -> None:
    """Reject malformed weight vectors; warn once about tiny weights."""
    if weights.ndim != 1 or weights.shape[0] != no_of_edges:
        raise InvalidArgumentError("Invalid weight vector length")
    if no_of_edges == 0:
        return
    if np.isnan(weights).any():
        raise InvalidArgumentError("Weight vector must not contain NaN")

    minweight = float(weights.min())
    if minweight <= 0:
        raise InvalidArgumentError("Weight vector must be positive")
    if minweight <= eps:
        latch.emit(SMALL_WEIGHTS_WARNING)


def weighted_distance_sums(
    G: nx.MultiGraph,
    vertices: List[int],
    mode: NeighborMode,
    cutoff: float,
    weights: np.ndarray,
    latch: WarningLatch,
    should_stop: Optional[StopCheck] = None,
    progress: Optional[ProgressSink] = None,
    eps: float = SHORTEST_PATH_EPSILON,
) -> np.ndarray:
    """
    Return one penalised weighted-distance sum per vertex in ``vertices``.

    Only vertices whose shortest distance is ``<= cutoff`` (within ``eps``)
    count as reached; a negative cutoff means unbounded.
    """
    require_edge_ids(G)
    validate_weights(weights, ecount(G), latch, eps)

    no_of_nodes = vcount(G)
    nodes_to_calc = len(vertices)
    bounded = cutoff >= 0
    w = weights.tolist()

    sums = np.zeros(nodes_to_calc, dtype=float)
    heap = IndexedMinHeap(no_of_nodes)
    inclist = LazyIncidenceList(G, mode)
    dist = [0.0] * no_of_nodes
    which = [0] * no_of_nodes
    # Vertices that had a candidate path rejected by the cutoff
    discarded: List[int] = []

    for i, source in enumerate(vertices):
        check_cancelled(should_stop)

        stamp = i + 1
        heap.clear()
        discarded.clear()
        heap.push(source, 0.0)
        which[source] = stamp
        dist[source] = 0.0
        nodes_reached = 0
        total = 0.0

        while heap:
            minnei, mindist = heap.pop_min()
            total += mindist
            nodes_reached += 1

            for edge, to in inclist.get(minnei):
                altdist = mindist + w[edge]
                if bounded and cmp_epsilon(altdist, cutoff, eps) > 0:
                    if which[to] != stamp:
                        discarded.append(to)
                    continue

                if which[to] != stamp:
                    which[to] = stamp
                    dist[to] = altdist
                    heap.push(to, altdist)
                elif to in heap and cmp_epsilon(altdist, dist[to], eps) < 0:
                    dist[to] = altdist
                    heap.decrease(to, altdist)

        total += float(no_of_nodes) * (no_of_nodes - nodes_reached)
        sums[i] = total

        truncated = any(which[v] != stamp for v in discarded)
        if nodes_reached < no_of_nodes and not truncated:
            latch.emit(DISCONNECTED_GRAPH_WARNING)

        report_progress(progress, i + 1, nodes_to_calc)

    logger.debug("Dijkstra distance sums computed for %d source vertices", nodes_to_calc)
    return sums
