"""
Per-call warning latch.

Each message is logged and recorded at most once per computation, no matter
how many sources trigger it.
"""

import logging
from typing import List, Set

DISCONNECTED_GRAPH_WARNING = (
    "closeness centrality is not well-defined for disconnected graphs"
)
SMALL_WEIGHTS_WARNING = (
    "some weights are smaller than epsilon, "
    "calculations may suffer from numerical precision"
)


class WarningLatch:
    """Collects deduplicated warnings for a single computation."""

    def __init__(self, logger: logging.Logger):
        self._logger = logger
        self._seen: Set[str] = set()
        self.messages: List[str] = []

    def emit(self, message: str) -> bool:
        """Log and record ``message`` unless it was already emitted. Returns True if emitted."""
        if message in self._seen:
            return False
        self._seen.add(message)
        self.messages.append(message)
        self._logger.warning(message)
        return True
