"""
JSON Output Formatter.

Produces the output structure:
{
    "vertices": [...],
    "warnings": [...],
    "summary": {...}
}

NaN scores are emitted as null so the payload stays valid JSON.

Time Complexity: O(V log V) for sorting
Memory: O(V)
"""

import math
from typing import Any, Dict, List, Optional, Set


def _json_score(score: float, digits: int = 6) -> Optional[float]:
    if math.isnan(score):
        return None
    return round(score, digits)


def format_output(
    vertices: List[int],
    scores: List[float],
    labels: List[str],
    warnings: List[str],
    high_closeness: Set[int],
    graph_summary: Dict[str, Any],
    parameters: Dict[str, Any],
) -> Dict[str, Any]:
    """Build the final JSON-compatible output dict."""
    rows: List[Dict[str, Any]] = []
    for vertex, score in zip(vertices, scores):
        rows.append(
            {
                "vertex_id": vertex,
                "label": labels[vertex],
                "closeness": _json_score(float(score)),
                "high_closeness": vertex in high_closeness,
            }
        )

    # Highest closeness first, NaN last
    rows.sort(
        key=lambda x: (x["closeness"] is None, -(x["closeness"] or 0.0))
    )

    summary = {
        **graph_summary,
        "vertices_scored": len(rows),
        "high_closeness_flagged": sum(1 for r in rows if r["high_closeness"]),
        "parameters": parameters,
        "processing_time_seconds": 0.0,
    }

    return {
        "vertices": rows,
        "warnings": list(warnings),
        "summary": summary,
    }
