"""
Graph Metrics — summary statistics for an indexed graph.

Time Complexity: O(V + E)
Memory: O(V)
"""

from typing import Any, Dict

import networkx as nx


def compute_graph_summary(G: nx.MultiGraph) -> Dict[str, Any]:
    """Return basic graph-level metrics."""
    n = G.number_of_nodes()
    simple = nx.DiGraph(G) if G.is_directed() else nx.Graph(G)
    if n == 0:
        components = 0
    elif G.is_directed():
        components = nx.number_weakly_connected_components(simple)
    else:
        components = nx.number_connected_components(simple)

    return {
        "total_vertices": n,
        "total_edges": G.number_of_edges(),
        "directed": G.is_directed(),
        "density": round(nx.density(simple), 4) if n > 1 else 0.0,
        "connected_components": components,
        "is_connected": components == 1,
    }
