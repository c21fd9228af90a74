"""
Closeness Ranking — flags the most central vertices.

Flags vertices whose closeness is above the configured percentile of all
finite scores.

Time Complexity: O(V log V)
Memory: O(V)
"""

from typing import Dict, Hashable, Optional, Set, Tuple

import numpy as np

from app.config import CENTRALITY_PERCENTILE


def flag_high_closeness(
    scores: Dict[Hashable, float],
    percentile: Optional[float] = None,
) -> Tuple[Set[Hashable], Dict[Hashable, float]]:
    """
    Flag high-closeness vertices.

    NaN scores (single-vertex graphs) are never flagged and are left out of
    the percentile.

    Returns:
        (high_closeness_vertices, rounded_scores)
    """
    if percentile is None:
        percentile = CENTRALITY_PERCENTILE

    finite = [s for s in scores.values() if np.isfinite(s)]
    if not finite:
        return set(), {k: round(v, 4) for k, v in scores.items()}

    threshold = float(np.percentile(finite, percentile))

    high_closeness: Set[Hashable] = {
        vertex for vertex, score in scores.items()
        if np.isfinite(score) and score > threshold and score > 0
    }

    return high_closeness, {k: round(v, 4) for k, v in scores.items()}
