"""Custom exceptions for records module."""

from __future__ import annotations


class RecordError(Exception):
    """Base exception for record-related errors."""

    pass


class MalformedRecordError(RecordError):
    """
    Raised when a record's price vector cannot be graded.

    This can happen when:
    - Price vector length doesn't match the asset registry
    - Price vector is not one-dimensional
    - Prices contain NaN or Inf (these break average and grade calculations)
    """

    def __init__(self, message: str, expected_length: int | None = None):
        super().__init__(message)
        self.expected_length = expected_length
