"""
Iterative outlier-eliminating grading.

Each iteration averages every asset over the surviving records, grades each
record by its quartic relative deviation from those averages, re-ranks, and
drops the worst record. Outliers inflate both the averages and their own
penalty, so removing one per round and recomputing sharpens the grades of
the rest.

Every node must reach bit-identical grades, so floating point accumulation
follows a fixed order: averages add records in survivor order and grades
add asset slots in registry order. Never replace these loops with np.sum,
which uses pairwise summation.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

import numpy as np

from ..records.validation import MAX_PRICE_ROWS, is_well_formed, validate_prices
from .models import GradedRecord, GradingResult, GradingSnapshot

if TYPE_CHECKING:
    from ..difficulty.models import VerifiedRecord
    from ..records.models import AssetRegistry, Record

logger = logging.getLogger(__name__)

DEFAULT_MINIMUM = 10


def calculate_averages(prices: np.ndarray) -> np.ndarray:
    """
    Average each asset slot over the given price rows.

    Prices are summed by magnitude, so a negative price contributes its
    absolute value.

    Args:
        prices: 2D array, one row per surviving record, in survivor order

    Returns:
        1D array of per-slot averages
    """
    totals = np.zeros(prices.shape[1], dtype=np.float64)
    for row in prices:
        totals += np.abs(row)
    return totals / float(len(prices))


def calculate_grades(
    prices: np.ndarray, averages: np.ndarray, band: float = 0.0
) -> np.ndarray:
    """
    Grade each price row against the averages.

    For every slot with a strictly positive average, the relative deviation
    d = (price - average) / average contributes d^4. Slots with a zero or
    negative average are skipped.

    Args:
        prices: 2D array, one row per record
        averages: Per-slot averages from calculate_averages()
        band: Relative tolerance. Deviations within the band contribute
            nothing and larger ones contribute (|d| - band)^4.

    Returns:
        1D array of grades, one per row
    """
    grades = np.zeros(len(prices), dtype=np.float64)
    for slot, average in enumerate(averages):
        if not average > 0:
            continue
        d = (prices[:, slot] - average) / average
        if band > 0:
            d = np.maximum(np.abs(d) - band, 0.0)
        grades += d * d * d * d
    return grades


def calculate_grade(
    prices: Sequence[float], averages: np.ndarray, band: float = 0.0
) -> float:
    """Grade a single price vector. See calculate_grades()."""
    row = np.asarray(prices, dtype=np.float64).reshape(1, -1)
    return float(calculate_grades(row, averages, band)[0])


def rank_graded(graded: Sequence[GradedRecord]) -> list[GradedRecord]:
    """
    Order graded records: grade ascending, verified difficulty descending on ties.

    Two stable sorts, difficulty first, then grade. Equal grade and
    difficulty keep their incoming order.
    """
    by_difficulty = sorted(graded, key=lambda g: g.verified_difficulty, reverse=True)
    return sorted(by_difficulty, key=lambda g: g.grade)


class GradingEngine:
    """
    Narrows an honest record set down to `minimum` by repeated grading.

    Usage:
        engine = GradingEngine(registry, minimum=10)
        result = engine.grade(verification_result.honest)
        if not result.is_empty:
            top = result.ranked[:10]
    """

    def __init__(
        self,
        registry: AssetRegistry,
        minimum: int = DEFAULT_MINIMUM,
        band: float = 0.0,
    ):
        """
        Initialize engine.

        Args:
            registry: Asset registry that price vectors must match
            minimum: Smallest set size graded; fewer records means no result
            band: Relative deviation tolerance (0.0 = plain quartic grade)
        """
        if minimum < 1:
            raise ValueError(f"minimum must be positive, got {minimum}")
        if band < 0:
            raise ValueError(f"band must be non-negative, got {band}")
        self._registry = registry
        self._minimum = minimum
        self._band = band

    @property
    def minimum(self) -> int:
        """Smallest set size graded."""
        return self._minimum

    @property
    def band(self) -> float:
        """Relative deviation tolerance."""
        return self._band

    def grade(self, verified: Sequence[VerifiedRecord]) -> GradingResult:
        """
        Grade and rank honest records.

        Args:
            verified: Honest, deduplicated records in scan order

        Returns:
            GradingResult. Empty if fewer than `minimum` well-formed
            records remain.

        Raises:
            ValueError: If more than MAX_PRICE_ROWS records are given
        """
        candidates: list[VerifiedRecord] = []
        malformed: list[Record] = []
        for v in verified:
            if is_well_formed(v.record, self._registry):
                candidates.append(v)
            else:
                malformed.append(v.record)

        if malformed:
            logger.warning(
                f"Excluded {len(malformed)} records with malformed price vectors"
            )

        if len(candidates) > MAX_PRICE_ROWS:
            raise ValueError(
                f"Cannot grade {len(candidates)} records, at most {MAX_PRICE_ROWS} supported"
            )

        if len(candidates) < self._minimum:
            logger.info(
                f"Not enough records to grade: {len(candidates)} < {self._minimum}"
            )
            return GradingResult(excluded=tuple(malformed))

        matrix = np.vstack(
            [validate_prices(v.record.prices, self._registry) for v in candidates]
        )

        # Indices into `candidates` and `matrix`, kept in current rank order
        order = list(range(len(candidates)))
        snapshots: list[GradingSnapshot] = []
        dropped: list[GradedRecord] = []

        for size in range(len(candidates), self._minimum - 1, -1):
            if snapshots:
                dropped.append(snapshots[-1].worst)
                order = order[:size]

            rows = matrix[order]
            averages = calculate_averages(rows)
            grades = calculate_grades(rows, averages, self._band)

            graded = [
                (
                    index,
                    GradedRecord(
                        record=candidates[index].record,
                        verified_difficulty=candidates[index].verified_difficulty,
                        grade=float(grade),
                    ),
                )
                for index, grade in zip(order, grades)
            ]
            position = {id(g): index for index, g in graded}
            ranking = rank_graded([g for _, g in graded])
            order = [position[id(g)] for g in ranking]

            snapshots.append(
                GradingSnapshot(
                    size=size,
                    averages=tuple(float(a) for a in averages),
                    ranking=tuple(ranking),
                )
            )

        ranked = snapshots[-1].ranking + tuple(reversed(dropped))

        logger.info(
            f"Graded {len(candidates)} records down to {self._minimum} "
            f"in {len(snapshots)} iterations"
        )

        return GradingResult(
            ranked=ranked,
            snapshots=tuple(snapshots),
            excluded=tuple(malformed),
        )
