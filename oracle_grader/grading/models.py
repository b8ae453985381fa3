"""Data models for grading module."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ..records.models import Record


@dataclass(frozen=True)
class GradedRecord:
    """
    A record with its grade from one narrowing iteration.

    Lower grade means closer to consensus.
    """

    record: Record
    verified_difficulty: int
    grade: float

    @property
    def short_hash(self) -> str:
        """Short hash of the underlying record."""
        return self.record.short_hash

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "short_hash": self.short_hash,
            "record_hash": self.record.record_hash.hex(),
            "verified_difficulty": self.verified_difficulty,
            "grade": self.grade,
        }


@dataclass(frozen=True)
class GradingSnapshot:
    """
    State of one narrowing iteration.

    Averages and grades are computed fresh over the `size` survivors;
    nothing is carried over from the previous iteration.
    """

    size: int
    averages: tuple[float, ...]
    ranking: tuple[GradedRecord, ...]
    """Survivors ordered by grade ascending, then verified difficulty descending."""

    @property
    def worst(self) -> GradedRecord:
        """Lowest-ranked record, dropped before the next iteration."""
        return self.ranking[-1]


@dataclass(frozen=True)
class GradingResult:
    """
    Result of iterative grading.

    `ranked` holds the final survivors in rank order followed by the
    dropped records, most recently dropped first. Each dropped record keeps
    the grade from the last iteration it took part in.
    """

    ranked: tuple[GradedRecord, ...] = ()
    snapshots: tuple[GradingSnapshot, ...] = ()
    excluded: tuple[Record, ...] = ()
    """Records excluded for malformed price vectors."""

    @property
    def is_empty(self) -> bool:
        """True if too few records were available to grade."""
        return not self.ranked

    @property
    def final(self) -> GradingSnapshot | None:
        """Last narrowing iteration, or None if nothing was graded."""
        if not self.snapshots:
            return None
        return self.snapshots[-1]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "is_empty": self.is_empty,
            "iterations": len(self.snapshots),
            "excluded_count": len(self.excluded),
            "ranked": [g.to_dict() for g in self.ranked],
        }
