"""
Unweighted Closeness Engine — breadth-first distance sums.

For each source, hop distances to every reachable vertex are summed with a
FIFO queue of ``(vertex, distance)`` pairs. Vertices that are not reached,
either because they are disconnected or because they lie beyond the
cutoff, each add ``n`` to the sum.

Time Complexity: O(k × (V + E)) for k source vertices
Memory: O(V + E), allocated once per call
"""

import logging
from collections import deque
from typing import Deque, List, Optional, Tuple

import networkx as nx
import numpy as np

from core.common.interruption import (
    ProgressSink,
    StopCheck,
    check_cancelled,
    report_progress,
)
from core.common.warnings_latch import DISCONNECTED_GRAPH_WARNING, WarningLatch
from core.graph.adjacency import NeighborMode, build_adjlist, vcount

logger = logging.getLogger(__name__)


def unweighted_distance_sums(
    G: nx.MultiGraph,
    vertices: List[int],
    mode: NeighborMode,
    cutoff: float,
    latch: WarningLatch,
    should_stop: Optional[StopCheck] = None,
    progress: Optional[ProgressSink] = None,
) -> np.ndarray:
    """
    Return one penalised hop-distance sum per vertex in ``vertices``.

    Only vertices at distance ``<= cutoff`` count as reached; a negative
    cutoff means unbounded.
    """
    no_of_nodes = vcount(G)
    nodes_to_calc = len(vertices)
    bounded = cutoff >= 0

    sums = np.zeros(nodes_to_calc, dtype=float)
    # Index of the last source (plus one) that reached each vertex
    already_counted = [0] * no_of_nodes
    adjlist = build_adjlist(G, mode)
    queue: Deque[Tuple[int, int]] = deque()

    for i, source in enumerate(vertices):
        check_cancelled(should_stop)

        stamp = i + 1
        queue.clear()
        queue.append((source, 0))
        already_counted[source] = stamp
        nodes_reached = 1
        total = 0.0
        truncated = False

        while queue:
            act, actdist = queue.popleft()
            total += actdist

            if bounded and actdist + 1 > cutoff:
                # Keep draining: the rest of the queue is still within reach
                if not truncated:
                    truncated = any(already_counted[nei] != stamp for nei in adjlist[act])
                continue

            for neighbor in adjlist[act]:
                if already_counted[neighbor] == stamp:
                    continue
                already_counted[neighbor] = stamp
                nodes_reached += 1
                queue.append((neighbor, actdist + 1))

        total += float(no_of_nodes) * (no_of_nodes - nodes_reached)
        sums[i] = total

        if nodes_reached < no_of_nodes and not truncated:
            latch.emit(DISCONNECTED_GRAPH_WARNING)

        report_progress(progress, i + 1, nodes_to_calc)

    logger.debug("BFS distance sums computed for %d source vertices", nodes_to_calc)
    return sums
