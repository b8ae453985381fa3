"""Data models for difficulty verification module."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ..records.models import Record


@dataclass(frozen=True)
class VerifiedRecord:
    """A record paired with its recomputed difficulty."""

    record: Record
    verified_difficulty: int

    @property
    def is_honest(self) -> bool:
        """True if the recomputed difficulty matches the claim."""
        return self.verified_difficulty == self.record.claimed_difficulty


@dataclass(frozen=True)
class VerificationResult:
    """Result of scanning records for honest difficulty claims."""

    honest: tuple[VerifiedRecord, ...]
    """Honest records in scan order (claimed difficulty descending)."""

    limit: int
    """Maximum number of honest records collected."""

    hashes_computed: int
    """Number of hash primitive calls made."""

    dishonest_count: int
    """Records skipped because the claim did not match."""

    @property
    def honest_count(self) -> int:
        """Number of honest records collected."""
        return len(self.honest)

    @property
    def reached_limit(self) -> bool:
        """True if the scan stopped early after collecting `limit` records."""
        return len(self.honest) >= self.limit

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "honest_count": self.honest_count,
            "dishonest_count": self.dishonest_count,
            "hashes_computed": self.hashes_computed,
            "limit": self.limit,
            "reached_limit": self.reached_limit,
        }
