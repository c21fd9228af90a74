"""
Processing Pipeline — closeness centrality over an uploaded edge list.

Coordinates:
   1. Validate the edge list
   2. Build the indexed multigraph
   3. Graph summary (vertex/edge counts, components)
   4. Closeness centrality (weighted or unweighted, optional cutoff)
   5. Percentile ranking of the most central vertices
   6. Format JSON output

Memory: O(V + E) for the graph, released after the response.
"""

import contextlib
import logging
import time
from typing import Any, Dict, Optional

import pandas as pd

from app.config import (
    CENTRALITY_PERCENTILE,
    DEFAULT_CUTOFF,
    DEFAULT_MODE,
    DEFAULT_NORMALIZED,
)
from core.centrality.closeness import closeness_estimate
from core.centrality.ranking import flag_high_closeness
from core.common.errors import InvalidArgumentError
from core.common.interruption import StopCheck
from core.graph.graph_builder import build_graph, vertex_labels
from core.graph.graph_metrics import compute_graph_summary
from core.output.json_formatter import format_output
from utils.validators import validate_edge_list

logger = logging.getLogger(__name__)


@contextlib.contextmanager
def log_timer(label: str):
    start = time.time()
    yield
    elapsed = time.time() - start
    logger.info("Module [%s] took %.4f seconds", label, elapsed)


class ClosenessService:
    """Runs the complete edge-list to closeness-report pipeline."""

    def __init__(self, should_stop: Optional[StopCheck] = None):
        self.should_stop = should_stop

    def process(
        self,
        df: pd.DataFrame,
        mode: str = DEFAULT_MODE,
        cutoff: float = DEFAULT_CUTOFF,
        normalized: bool = DEFAULT_NORMALIZED,
        weighted: bool = False,
        directed: bool = True,
        percentile: float = CENTRALITY_PERCENTILE,
    ) -> Dict[str, Any]:
        """
        Run the pipeline on an edge-list DataFrame.

        Returns:
            JSON-compatible dict with vertices, warnings and summary.

        Raises:
            ClosenessError subclasses for invalid input or cancellation.
        """
        validation_error = validate_edge_list(df, weighted=weighted)
        if validation_error:
            raise InvalidArgumentError(validation_error)

        with log_timer("graph_build"):
            G = build_graph(df, directed=directed, weighted=weighted)
            graph_summary = compute_graph_summary(G)
        logger.info(
            "Graph built: %d vertices, %d edges",
            graph_summary["total_vertices"],
            graph_summary["total_edges"],
        )

        with log_timer("closeness_centrality"):
            result = closeness_estimate(
                G,
                mode=mode,
                cutoff=cutoff,
                weights="weight" if weighted else None,
                normalized=normalized,
                should_stop=self.should_stop,
            )

        with log_timer("closeness_ranking"):
            high_closeness, _ = flag_high_closeness(result.as_dict(), percentile)

        parameters = {
            "mode": str(mode).lower(),
            "cutoff": cutoff,
            "normalized": normalized,
            "weighted": weighted,
            "directed": directed,
            "percentile": percentile,
        }
        return format_output(
            vertices=result.vertices,
            scores=result.scores.tolist(),
            labels=vertex_labels(G),
            warnings=result.warnings,
            high_closeness=high_closeness,
            graph_summary=graph_summary,
            parameters=parameters,
        )
