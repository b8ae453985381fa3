"""Reward schedule by finishing place."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from .models import RewardPayout, RewardScheduleConfig

if TYPE_CHECKING:
    from ..grading.models import GradedRecord

logger = logging.getLogger(__name__)


class RewardSchedule:
    """
    Fixed reward per place for a height's winners.

    Place 0 gets 800, place 1 gets 600, places 2-9 get 450 (all times 10^8).
    There's no participation trophy: place 10 and beyond get 0.

    Usage:
        schedule = RewardSchedule()
        payouts = schedule.payouts(selection.winners)
    """

    def __init__(self, config: RewardScheduleConfig | None = None):
        """
        Initialize schedule.

        Args:
            config: Reward amounts per place. Uses defaults if None.
        """
        self._config = config or RewardScheduleConfig()

    def reward_for_place(self, place: int) -> int:
        """Reward for a 0-indexed place."""
        if place < 0 or place >= self._config.paid_places:
            return 0
        if place == 0:
            return self._config.first_place
        if place == 1:
            return self._config.second_place
        return self._config.other_place

    def payouts(self, winners: Sequence[GradedRecord]) -> tuple[RewardPayout, ...]:
        """
        Compute the payout for each winner in rank order.

        Args:
            winners: Winners, best first

        Returns:
            One RewardPayout per winner
        """
        payouts = tuple(
            RewardPayout(
                place=place,
                short_hash=winner.short_hash,
                amount=self.reward_for_place(place),
            )
            for place, winner in enumerate(winners)
        )

        if payouts:
            logger.debug(
                f"Reward payouts: {len(payouts)} places, total {sum(p.amount for p in payouts)}"
            )

        return payouts

    def total(self, winners: Sequence[GradedRecord]) -> int:
        """Sum of all payouts for the given winners."""
        return sum(self.reward_for_place(place) for place in range(len(winners)))


_DEFAULT_SCHEDULE = RewardSchedule()


def get_reward_from_place(place: int) -> int:
    """Reward for a place under the default schedule."""
    return _DEFAULT_SCHEDULE.reward_for_place(place)
