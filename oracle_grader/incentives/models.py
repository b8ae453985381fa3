"""Data models for incentives module."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ..grading.models import GradedRecord

REWARD_DECIMALS = 8
"""Rewards are fixed-point integers with 8 implied decimal digits."""


@dataclass(frozen=True)
class WinnerSelectionConfig:
    """Configuration for winner selection."""

    winner_count: int = 10
    """Number of top-ranked records that win."""

    def __post_init__(self) -> None:
        if self.winner_count < 1:
            raise ValueError(f"winner_count must be positive, got {self.winner_count}")


@dataclass(frozen=True)
class RewardScheduleConfig:
    """Reward per place, in fixed-point units (value * 10^8)."""

    first_place: int = 800 * 10**REWARD_DECIMALS
    second_place: int = 600 * 10**REWARD_DECIMALS
    other_place: int = 450 * 10**REWARD_DECIMALS
    """Reward for every remaining place below `paid_places`."""

    paid_places: int = 10
    """Places at or beyond this index get nothing."""


@dataclass(frozen=True)
class RewardPayout:
    """Reward owed to one winner."""

    place: int
    short_hash: str
    amount: int

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "place": self.place,
            "short_hash": self.short_hash,
            "amount": self.amount,
        }


@dataclass(frozen=True)
class WinnerSelectionResult:
    """Winners for a height, best first. Empty when there are no winners."""

    winners: tuple[GradedRecord, ...] = ()

    @property
    def has_winners(self) -> bool:
        """False for a valid 'no winners this round' outcome."""
        return bool(self.winners)

    @property
    def short_hashes(self) -> list[str]:
        """Short hashes of the winners, in rank order."""
        return [w.short_hash for w in self.winners]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "has_winners": self.has_winners,
            "winners": [
                {"place": place, **winner.to_dict()}
                for place, winner in enumerate(self.winners)
            ],
        }
