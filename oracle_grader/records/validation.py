"""Price vector validation against the asset registry."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

import numpy as np

from .errors import MalformedRecordError
from .models import AssetRegistry, Record

logger = logging.getLogger(__name__)

# Largest number of price rows whose magnitudes are guaranteed to sum finitely
MAX_PRICE_ROWS = 2**20

# Per-price magnitude cap; MAX_PRICE_ROWS prices at this cap still sum below float64 max
MAX_PRICE = float(np.finfo(np.float64).max) / MAX_PRICE_ROWS


def validate_prices(prices: Sequence[float], registry: AssetRegistry) -> np.ndarray:
    """
    Validate and normalize a record's price vector.

    Checks for:
    - One-dimensional shape
    - Length matching the asset registry
    - No NaN or Inf values (these break average and grade calculations)
    - No magnitude above MAX_PRICE (slot totals must stay finite)

    Args:
        prices: Raw price vector from the record
        registry: Asset registry defining the expected length

    Returns:
        Validated 1D float64 numpy array

    Raises:
        MalformedRecordError: If prices are invalid
    """
    try:
        values = np.asarray(prices, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise MalformedRecordError(f"Prices are not numeric: {e}") from e

    if values.ndim != 1:
        raise MalformedRecordError(
            f"Invalid price shape: {values.shape}. Expected 1D.",
            expected_length=len(registry),
        )

    if len(values) != len(registry):
        raise MalformedRecordError(
            f"Price count mismatch: got {len(values)}, expected {len(registry)}",
            expected_length=len(registry),
        )

    if np.any(np.isnan(values)):
        nan_count = np.sum(np.isnan(values))
        raise MalformedRecordError(f"Prices contain {nan_count} NaN values")

    if np.any(np.isinf(values)):
        inf_count = np.sum(np.isinf(values))
        raise MalformedRecordError(f"Prices contain {inf_count} Inf values")

    too_large = np.abs(values) > MAX_PRICE
    if np.any(too_large):
        raise MalformedRecordError(
            f"Prices contain {int(np.sum(too_large))} values above {MAX_PRICE:.3e} in magnitude"
        )

    # Negative prices are allowed; averaging treats them by magnitude

    return values


def is_well_formed(record: Record, registry: AssetRegistry) -> bool:
    """Check a record's price vector without raising."""
    try:
        validate_prices(record.prices, registry)
    except MalformedRecordError:
        return False
    return True


def filter_malformed(
    records: Iterable[Record], registry: AssetRegistry
) -> tuple[list[Record], list[Record]]:
    """
    Split records into well-formed and malformed, preserving order.

    Returns:
        Tuple of (well_formed, malformed)
    """
    well_formed: list[Record] = []
    malformed: list[Record] = []
    for record in records:
        if is_well_formed(record, registry):
            well_formed.append(record)
        else:
            malformed.append(record)

    if malformed:
        logger.warning(
            f"Excluded {len(malformed)} records with malformed price vectors "
            f"(expected {len(registry)} prices)"
        )

    return well_formed, malformed
