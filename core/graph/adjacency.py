"""
Adjacency queries — the read-only graph surface used by the closeness engines.

Provides vertex/edge counts, mode-filtered neighbor lists for breadth-first
search and a lazily populated incidence list for Dijkstra.

Time Complexity: O(V + E) for build_adjlist, O(deg(v)) per first incidence lookup
Memory: O(V + E)
"""

from enum import Enum
from typing import Iterator, List, Optional, Tuple, Union

import networkx as nx
import numpy as np

from core.common.errors import InvalidArgumentError, InvalidModeError


class NeighborMode(str, Enum):
    """Which edges to follow from a vertex."""

    OUT = "out"
    IN = "in"
    ALL = "all"


def normalize_mode(mode: Union[NeighborMode, str]) -> NeighborMode:
    """Coerce ``mode`` into a NeighborMode or raise InvalidModeError."""
    if isinstance(mode, NeighborMode):
        return mode
    if isinstance(mode, str):
        try:
            return NeighborMode(mode.strip().lower())
        except ValueError:
            pass
    raise InvalidModeError(f"Invalid mode {mode!r}, expected one of 'out', 'in', 'all'")


def vcount(G: nx.MultiGraph) -> int:
    return G.number_of_nodes()


def ecount(G: nx.MultiGraph) -> int:
    return G.number_of_edges()


def require_edge_ids(G: nx.MultiGraph) -> None:
    """Raise InvalidArgumentError unless every edge carries an integer ``eid``."""
    if any(eid is None for _, _, eid in G.edges(data="eid")):
        raise InvalidArgumentError(
            "Weighted closeness needs edge ids; build the graph with "
            "graph_builder.from_networkx, from_edges or build_graph"
        )


def incident_edges(G: nx.MultiGraph, v: int, mode: NeighborMode) -> Iterator[Tuple[int, int]]:
    """Yield ``(edge_id, other_endpoint)`` for every edge incident on ``v`` under ``mode``."""
    if not G.is_directed():
        for _, other, eid in G.edges(v, data="eid"):
            yield eid, other
        return

    if mode in (NeighborMode.OUT, NeighborMode.ALL):
        for _, other, eid in G.out_edges(v, data="eid"):
            yield eid, other
    if mode in (NeighborMode.IN, NeighborMode.ALL):
        for other, _, eid in G.in_edges(v, data="eid"):
            yield eid, other


def build_adjlist(G: nx.MultiGraph, mode: NeighborMode) -> List[List[int]]:
    """Neighbor list per vertex. Multi-edges produce repeated neighbors."""
    return [[other for _, other in incident_edges(G, v, mode)] for v in range(vcount(G))]


class LazyIncidenceList:
    """Per-vertex incident ``(edge_id, other)`` pairs, built on first access."""

    def __init__(self, G: nx.MultiGraph, mode: NeighborMode):
        self._graph = G
        self._mode = mode
        self._cache: List[Optional[List[Tuple[int, int]]]] = [None] * vcount(G)

    def get(self, v: int) -> List[Tuple[int, int]]:
        incs = self._cache[v]
        if incs is None:
            incs = list(incident_edges(self._graph, v, self._mode))
            self._cache[v] = incs
        return incs


def edge_weight_vector(G: nx.MultiGraph, attribute: str) -> np.ndarray:
    """Gather an edge attribute into a float vector indexed by edge id."""
    require_edge_ids(G)
    weights = np.empty(ecount(G), dtype=float)
    for _, _, data in G.edges(data=True):
        if attribute not in data:
            raise InvalidArgumentError(f"Edge attribute {attribute!r} is missing on some edges")
        weights[data["eid"]] = float(data[attribute])
    return weights
