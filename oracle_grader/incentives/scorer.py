"""Winner selection from the graded ranking."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from .models import WinnerSelectionConfig, WinnerSelectionResult

if TYPE_CHECKING:
    from ..grading.models import GradedRecord

logger = logging.getLogger(__name__)


class WinnerSelector:
    """
    Takes the top of the graded ranking as the height's winners.

    The ranking is already ordered best first (grade ascending, verified
    difficulty descending on ties), so place 0 is the best record.

    Usage:
        selector = WinnerSelector()
        result = selector.select_winners(grading_result.ranked)
        print(f"Winners: {result.short_hashes}")
    """

    def __init__(self, config: WinnerSelectionConfig | None = None):
        """
        Initialize winner selector.

        Args:
            config: Configuration for winner selection. Uses defaults if None.
        """
        self._config = config or WinnerSelectionConfig()

    @property
    def winner_count(self) -> int:
        """Number of winners per height."""
        return self._config.winner_count

    def select_winners(self, ranked: Sequence[GradedRecord]) -> WinnerSelectionResult:
        """
        Select winners from a ranked list.

        Args:
            ranked: Graded records in rank order

        Returns:
            WinnerSelectionResult. Empty if the ranking has fewer than
            `winner_count` records, which means no winners this round.
        """
        if len(ranked) < self._config.winner_count:
            logger.info(
                f"No winners: {len(ranked)} ranked records, "
                f"need {self._config.winner_count}"
            )
            return WinnerSelectionResult()

        winners = tuple(ranked[: self._config.winner_count])

        best = winners[0]
        logger.info(
            f"Selected {len(winners)} winners, best {best.short_hash} "
            f"(grade={best.grade:.6g}, difficulty={best.verified_difficulty})"
        )

        return WinnerSelectionResult(winners=winners)
