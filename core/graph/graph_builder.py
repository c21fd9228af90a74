"""
Graph Builder — constructs an indexed multigraph from edge-list data.

Vertices are dense integers 0..n-1 carrying their original label in the
``name`` attribute. Every edge carries a stable integer ``eid`` (its row
order) so weight vectors can be indexed by edge id.

Time Complexity: O(V + E)
Memory: O(V + E)
"""

from typing import Any, Dict, Hashable, Iterable, List, Optional, Tuple

import networkx as nx
import pandas as pd

from core.common.errors import InvalidArgumentError


def _empty_graph(directed: bool) -> nx.MultiGraph:
    return nx.MultiDiGraph() if directed else nx.MultiGraph()


def build_graph(df: pd.DataFrame, directed: bool = True, weighted: bool = False) -> nx.MultiGraph:
    """
    Build an indexed NetworkX multigraph from a ``source``/``target`` DataFrame.

    The ``weight`` column is only read when ``weighted`` is set.
    """
    G = _empty_graph(directed)

    labels = pd.unique(df[["source", "target"]].astype(str).to_numpy().ravel())
    index: Dict[str, int] = {label: i for i, label in enumerate(labels)}
    G.add_nodes_from((i, {"name": label}) for i, label in enumerate(labels))

    sources = [index[s] for s in df["source"].astype(str)]
    targets = [index[t] for t in df["target"].astype(str)]
    if weighted:
        try:
            weights = [float(w) for w in df["weight"]]
        except (KeyError, TypeError, ValueError) as exc:
            raise InvalidArgumentError(f"Column 'weight' must contain numeric values: {exc}") from exc
        attrs = [{"eid": i, "weight": w} for i, w in enumerate(weights)]
    else:
        attrs = [{"eid": i} for i in range(len(df))]

    G.add_edges_from(zip(sources, targets, attrs))
    return G


def from_edges(
    edges: Iterable[Tuple[int, int]],
    vertex_count: Optional[int] = None,
    directed: bool = False,
    weights: Optional[Iterable[float]] = None,
) -> nx.MultiGraph:
    """Build an indexed graph from integer vertex pairs."""
    edge_list = [(int(u), int(v)) for u, v in edges]
    n = vertex_count
    if n is None:
        n = 1 + max((max(u, v) for u, v in edge_list), default=-1)

    G = _empty_graph(directed)
    G.add_nodes_from((i, {"name": str(i)}) for i in range(n))

    weight_list = list(weights) if weights is not None else None
    if weight_list is not None and len(weight_list) != len(edge_list):
        raise InvalidArgumentError("Invalid weight vector length")

    for eid, (u, v) in enumerate(edge_list):
        if not (0 <= u < n and 0 <= v < n):
            raise InvalidArgumentError(f"edge ({u}, {v}) references a vertex outside 0..{n - 1}")
        attrs: Dict[str, Any] = {"eid": eid}
        if weight_list is not None:
            attrs["weight"] = float(weight_list[eid])
        G.add_edge(u, v, **attrs)
    return G


def from_networkx(graph: nx.Graph) -> nx.MultiGraph:
    """Re-index an arbitrary NetworkX graph, keeping node labels and edge data."""
    G = _empty_graph(graph.is_directed())
    nodes: List[Hashable] = list(graph.nodes())
    index = {node: i for i, node in enumerate(nodes)}
    G.add_nodes_from((i, {"name": str(node)}) for i, node in enumerate(nodes))

    for eid, (u, v, data) in enumerate(graph.edges(data=True)):
        attrs = dict(data)
        attrs["eid"] = eid
        G.add_edge(index[u], index[v], **attrs)
    return G


def vertex_labels(G: nx.MultiGraph) -> List[str]:
    """Original labels in vertex-id order."""
    return [G.nodes[v].get("name", str(v)) for v in range(G.number_of_nodes())]
