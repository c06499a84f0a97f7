"""Errors raised while building log formats."""

from typing import Optional


class LogPatternError(Exception):
    """Base exception for logpattern errors."""
    pass


class InvalidInputError(LogPatternError, ValueError):
    """Raised when a format cannot be built from the given input, e.g. an empty cluster."""
    pass


class StructuralMismatchError(LogPatternError, ValueError):
    """Raised when a log's chunk count differs from the format's segment count.

    This means the upstream clustering put logs of different lengths in the
    same cluster. ``format`` holds the format as it was when the mismatch was
    found, so callers can decide whether to keep the partial result.
    """
    def __init__(self, expected: int, actual: int, format=None):
        self.expected = expected
        self.actual = actual
        self.format = format
        super().__init__(f"chunk count mismatch: format has {expected} segments, log has {actual} chunks")
