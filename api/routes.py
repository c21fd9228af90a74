"""
API Routes — closeness, health, and metrics endpoints.
"""

import io
import logging
import time

import pandas as pd
from fastapi import APIRouter, File, HTTPException, Query, UploadFile
from fastapi.responses import JSONResponse

from app.config import CENTRALITY_PERCENTILE, DEFAULT_CUTOFF, DEFAULT_MODE, DEFAULT_NORMALIZED
from core.common.errors import (
    ComputationCancelledError,
    InvalidArgumentError,
    InvalidModeError,
    OutOfMemoryError,
)
from services.processing_pipeline import ClosenessService
from utils.metrics import MetricsTracker

logger = logging.getLogger(__name__)

router = APIRouter()
metrics_tracker = MetricsTracker()


@router.get("/health")
async def health():
    """Return system health status."""
    return {"status": "healthy", "version": "1.0.0"}


@router.get("/metrics")
async def metrics():
    """Return processing statistics from the most recent run."""
    return metrics_tracker.get_metrics()


@router.post("/closeness")
async def upload_edge_list(
    file: UploadFile = File(...),
    mode: str = Query(DEFAULT_MODE),
    cutoff: float = Query(DEFAULT_CUTOFF),
    normalized: bool = Query(DEFAULT_NORMALIZED),
    weighted: bool = Query(False),
    directed: bool = Query(True),
    percentile: float = Query(CENTRALITY_PERCENTILE, ge=0, le=100),
):
    """
    Accept an edge-list CSV (source, target[, weight]), compute closeness
    centrality for every vertex and return a structured JSON report.
    """
    if not file.filename or not file.filename.endswith(".csv"):
        raise HTTPException(status_code=400, detail="Only CSV files are accepted.")

    try:
        contents = await file.read()
        df = pd.read_csv(io.BytesIO(contents))
    except Exception as e:
        raise HTTPException(status_code=400, detail=f"Failed to parse CSV: {str(e)}")

    start_time = time.time()
    try:
        result = ClosenessService().process(
            df,
            mode=mode,
            cutoff=cutoff,
            normalized=normalized,
            weighted=weighted,
            directed=directed,
            percentile=percentile,
        )
    except (InvalidModeError, InvalidArgumentError) as e:
        metrics_tracker.record_failure(str(e))
        raise HTTPException(status_code=400, detail=str(e))
    except (ComputationCancelledError, OutOfMemoryError) as e:
        metrics_tracker.record_failure(str(e))
        logger.error("Closeness computation aborted: %s", e)
        raise HTTPException(status_code=503, detail=str(e))
    processing_time = round(time.time() - start_time, 2)

    result["summary"]["processing_time_seconds"] = processing_time
    metrics_tracker.record(result["summary"])

    return JSONResponse(content=result)
