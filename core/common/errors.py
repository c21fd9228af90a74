"""
Exception hierarchy for closeness computations.

Usage errors (bad mode, bad weights, bad vertex ids) are raised before any
traversal starts. Degenerate numeric outcomes are never errors.
"""


class ClosenessError(Exception):
    """Base class for all closeness computation failures."""


class InvalidModeError(ClosenessError, ValueError):
    """Traversal mode is not one of OUT, IN or ALL."""


class InvalidArgumentError(ClosenessError, ValueError):
    """Malformed argument, e.g. a weight vector of the wrong length."""


class InvalidVertexError(InvalidArgumentError):
    """Vertex id outside 0..n-1."""


class OutOfMemoryError(ClosenessError, MemoryError):
    """Working storage for the computation could not be allocated."""


class ComputationCancelledError(ClosenessError):
    """The caller requested cancellation while the computation was running."""
