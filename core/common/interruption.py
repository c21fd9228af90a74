"""
Cooperative cancellation and progress reporting.

Engines poll ``should_stop`` once per source vertex and notify ``progress``
after each source completes. Both are optional plain callables.
"""

import threading
from typing import Callable, Optional

from core.common.errors import ComputationCancelledError

StopCheck = Callable[[], bool]
ProgressSink = Callable[[float], None]


class CancellationToken:
    """Thread-safe cancellation flag usable directly as ``should_stop``."""

    def __init__(self):
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    def is_cancelled(self) -> bool:
        return self._event.is_set()

    def __call__(self) -> bool:
        return self._event.is_set()


def check_cancelled(should_stop: Optional[StopCheck]) -> None:
    """Raise ComputationCancelledError if the caller asked to stop."""
    if should_stop is not None and should_stop():
        raise ComputationCancelledError("closeness computation was cancelled")


def report_progress(progress: Optional[ProgressSink], done: int, total: int) -> None:
    if progress is not None and total > 0:
        progress(done / total)
