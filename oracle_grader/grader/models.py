"""Data models for grader module."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ..difficulty.models import VerificationResult
    from ..grading.models import GradedRecord, GradingResult
    from ..incentives.models import RewardPayout
    from ..records.models import Record
    from .versions import GraderVersion


@dataclass(frozen=True)
class BlockGradingResult:
    """
    Graded submission set for one block height.

    Consumed by block assembly to build the persisted block summary and pay
    rewards. An empty result (is_empty) is a valid "no winners this round"
    outcome, not a failure.
    """

    height: int
    version: GraderVersion

    records: tuple[Record, ...]
    """Unique, well-formed submissions in claimed-difficulty order."""

    graded: tuple[GradedRecord, ...]
    """Full graded ranking: final survivors, then dropped records."""

    winners: tuple[GradedRecord, ...]
    """Winners in rank order, best first."""

    payouts: tuple[RewardPayout, ...]
    """Reward for each winner, aligned with `winners`."""

    verification: VerificationResult | None = None
    grading: GradingResult | None = None

    @property
    def is_empty(self) -> bool:
        """True if fewer than the minimum honest unique records existed."""
        return not self.winners

    @property
    def winner_short_hashes(self) -> list[str]:
        """Short hashes for the next height's prior-winner references."""
        return [w.short_hash for w in self.winners]

    @property
    def total_reward(self) -> int:
        """Sum of all payouts."""
        return sum(p.amount for p in self.payouts)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "height": self.height,
            "version": int(self.version),
            "is_empty": self.is_empty,
            "record_count": len(self.records),
            "graded": [g.to_dict() for g in self.graded],
            "winners": self.winner_short_hashes,
            "payouts": [p.to_dict() for p in self.payouts],
            "total_reward": self.total_reward,
            "verification": (
                self.verification.to_dict() if self.verification else None
            ),
        }
