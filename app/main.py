"""
FastAPI application for the Closeness Centrality Engine.

Endpoints:
    POST /closeness — Accept edge-list CSV, return closeness scores as JSON
    GET  /health    — System health check
    GET  /metrics   — Processing statistics
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.gzip import GZipMiddleware

from api.routes import router
from app.config import LOG_LEVEL

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Closeness Centrality Engine",
    description="Computes closeness centrality scores for the vertices of a graph.",
    version="1.0.0",
)

# Compress large JSON responses (score lists for big graphs).
app.add_middleware(GZipMiddleware, minimum_size=1024)

app.include_router(router)
