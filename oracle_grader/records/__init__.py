"""
Records module for price-report submissions.

This module provides:
- Record: one participant's submission for a block height
- AssetRegistry: the ordered asset list that price vectors align to
- Price vector validation (length, NaN/Inf, magnitude) so malformed records are
  excluded instead of breaking grading

Usage:
    from oracle_grader.records import AssetRegistry, Record, filter_malformed

    registry = AssetRegistry(assets=("PEG", "USD", "EUR"))
    record = Record(
        nonce=b"...",
        record_hash=b"...",
        claimed_difficulty=123456,
        prices=(0.0021, 1.0, 1.09),
        entry_id=b"...",
    )
    well_formed, malformed = filter_malformed([record], registry)
"""

from .errors import MalformedRecordError, RecordError
from .models import MAX_UINT64, AssetRegistry, Record, short_hash
from .validation import (
    MAX_PRICE,
    MAX_PRICE_ROWS,
    filter_malformed,
    is_well_formed,
    validate_prices,
)

__all__ = [
    # Models
    "Record",
    "AssetRegistry",
    "short_hash",
    "MAX_UINT64",
    # Validation
    "validate_prices",
    "is_well_formed",
    "filter_malformed",
    "MAX_PRICE",
    "MAX_PRICE_ROWS",
    # Errors
    "RecordError",
    "MalformedRecordError",
]
