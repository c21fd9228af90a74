"""
Closeness Centrality — dispatcher and score finisher.

The closeness of a vertex is the number of vertices minus one divided by the
sum of shortest-path lengths from (or to) it. A vertex that cannot be
reached contributes the vertex count ``n`` instead of a path length.

Routes to the weighted (Dijkstra) engine when a weight vector is given and
to the unweighted (BFS) engine otherwise. Both iterate the vertex subset in
the same order, so results line up regardless of engine.

A graph with a single vertex yields NaN (0 / 0). This is a valid result,
not an error.

Time Complexity: O(k × (V + E)) unweighted, O(k × E log V) weighted
Memory: O(V + E)
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Union

import networkx as nx
import numpy as np

from app.config import DEFAULT_MODE, SHORTEST_PATH_EPSILON
from core.centrality.unweighted import unweighted_distance_sums
from core.centrality.weighted import weighted_distance_sums
from core.common.errors import InvalidArgumentError, OutOfMemoryError
from core.common.interruption import ProgressSink, StopCheck
from core.common.warnings_latch import WarningLatch
from core.graph.adjacency import NeighborMode, edge_weight_vector, normalize_mode, vcount
from core.graph.vertex_selector import VertexSubset, resolve_vertices

logger = logging.getLogger(__name__)

Weights = Union[str, Sequence[float], np.ndarray]


@dataclass
class ClosenessResult:
    """Scores in vertex-subset order plus the warnings raised while computing them."""

    vertices: List[int]
    scores: np.ndarray
    warnings: List[str] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.vertices)

    def as_dict(self) -> Dict[int, float]:
        """Map vertex id to score. Later duplicates overwrite earlier ones."""
        return {v: float(s) for v, s in zip(self.vertices, self.scores)}


def finalize_scores(
    distance_sums: Union[Sequence[float], np.ndarray],
    no_of_nodes: int,
    normalized: bool,
) -> np.ndarray:
    """Convert penalised distance sums into closeness scores."""
    sums = np.asarray(distance_sums, dtype=float)
    with np.errstate(divide="ignore", invalid="ignore"):
        scores = (no_of_nodes - 1) / sums
        if not normalized:
            scores = scores / (no_of_nodes - 1)
    return scores


def _weight_vector(G: nx.MultiGraph, weights: Weights) -> np.ndarray:
    if isinstance(weights, str):
        return edge_weight_vector(G, weights)
    try:
        return np.asarray(weights, dtype=float)
    except (TypeError, ValueError) as exc:
        raise InvalidArgumentError(f"Weight vector must be numeric: {exc}") from exc


def closeness_estimate(
    G: nx.MultiGraph,
    vids: VertexSubset = None,
    mode: Union[NeighborMode, str] = DEFAULT_MODE,
    cutoff: Optional[float] = -1,
    weights: Optional[Weights] = None,
    normalized: bool = False,
    *,
    should_stop: Optional[StopCheck] = None,
    progress: Optional[ProgressSink] = None,
    eps: float = SHORTEST_PATH_EPSILON,
) -> ClosenessResult:
    """
    Compute closeness centrality considering only paths up to ``cutoff``.

    Args:
        G: Indexed graph (see core.graph.graph_builder).
        vids: Vertex subset; None for all vertices.
        mode: "out", "in" or "all". Ignored for undirected graphs.
        cutoff: Maximum path length considered; negative or None for exact closeness.
        weights: Positive edge weights indexed by edge id, or an edge attribute name.
        normalized: If False, scores are divided once more by ``n - 1``.
        should_stop: Polled before each source vertex; True aborts the call.
        progress: Called with the completed fraction after each source vertex.

    Returns:
        ClosenessResult with one score per requested vertex.

    Raises:
        InvalidModeError, InvalidArgumentError, InvalidVertexError,
        OutOfMemoryError, ComputationCancelledError
    """
    mode = normalize_mode(mode)
    vertices = resolve_vertices(G, vids)
    if cutoff is None:
        cutoff = -1

    latch = WarningLatch(logger)
    try:
        if weights is not None:
            sums = weighted_distance_sums(
                G,
                vertices,
                mode,
                cutoff,
                _weight_vector(G, weights),
                latch,
                should_stop=should_stop,
                progress=progress,
                eps=eps,
            )
        else:
            sums = unweighted_distance_sums(
                G,
                vertices,
                mode,
                cutoff,
                latch,
                should_stop=should_stop,
                progress=progress,
            )
    except MemoryError as exc:
        raise OutOfMemoryError("Not enough memory for closeness computation") from exc

    scores = finalize_scores(sums, vcount(G), normalized)
    return ClosenessResult(vertices=vertices, scores=scores, warnings=list(latch.messages))


def closeness(
    G: nx.MultiGraph,
    vids: VertexSubset = None,
    mode: Union[NeighborMode, str] = DEFAULT_MODE,
    weights: Optional[Weights] = None,
    normalized: bool = False,
    *,
    should_stop: Optional[StopCheck] = None,
    progress: Optional[ProgressSink] = None,
) -> ClosenessResult:
    """Exact closeness centrality; ``closeness_estimate`` without a cutoff."""
    return closeness_estimate(
        G,
        vids,
        mode,
        -1,
        weights,
        normalized,
        should_stop=should_stop,
        progress=progress,
    )
