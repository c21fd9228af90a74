"""
Vertex Selector — resolves the caller's vertex subset into concrete ids.

Time Complexity: O(k) for k selected vertices
Memory: O(k)
"""

from numbers import Integral
from typing import Iterable, List, Optional, Union

import networkx as nx

from core.common.errors import InvalidVertexError

VertexSubset = Optional[Union[int, Iterable[int]]]


def resolve_vertices(G: nx.MultiGraph, vids: VertexSubset = None) -> List[int]:
    """
    Return vertex ids in iteration order.

    ``None`` selects every vertex in id order, an int selects one vertex and
    any other iterable is taken as-is (duplicates allowed).
    """
    n = G.number_of_nodes()
    if vids is None:
        return list(range(n))
    if isinstance(vids, Integral):
        selected = [int(vids)]
    else:
        selected = [int(v) for v in vids]

    for v in selected:
        if not 0 <= v < n:
            raise InvalidVertexError(f"Invalid vertex id {v} for a graph with {n} vertices")
    return selected
