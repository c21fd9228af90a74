"""
Runtime configuration.

Module-level constants, each overridable through an environment variable.
"""

import os

# Absolute tolerance for comparing weighted path lengths
SHORTEST_PATH_EPSILON = float(os.getenv("SHORTEST_PATH_EPSILON", "1e-10"))

# Vertices above this closeness percentile are flagged as highly central
CENTRALITY_PERCENTILE = float(os.getenv("CENTRALITY_PERCENTILE", "95"))

DEFAULT_MODE = os.getenv("DEFAULT_MODE", "all")
DEFAULT_CUTOFF = float(os.getenv("DEFAULT_CUTOFF", "-1"))
DEFAULT_NORMALIZED = os.getenv("DEFAULT_NORMALIZED", "true").lower() in {"1", "true", "yes"}

# Upload limit for the HTTP surface
MAX_EDGES = int(os.getenv("MAX_EDGES", "200000"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
