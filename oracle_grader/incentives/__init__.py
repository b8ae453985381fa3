"""
Incentives module for selecting winners and computing rewards.

This module handles:
- Winner selection: the top 10 graded records, best first
- Reward schedule: 800 / 600 / 450 (x 10^8) by place, 0 beyond place 9

Main components:
- WinnerSelector: Extracts winners from the graded ranking
- RewardSchedule: Maps places to fixed-point rewards

Usage:
    from oracle_grader.incentives import RewardSchedule, WinnerSelector

    selection = WinnerSelector().select_winners(grading_result.ranked)
    payouts = RewardSchedule().payouts(selection.winners)
"""

from .distributor import RewardSchedule, get_reward_from_place
from .models import (
    REWARD_DECIMALS,
    RewardPayout,
    RewardScheduleConfig,
    WinnerSelectionConfig,
    WinnerSelectionResult,
)
from .scorer import WinnerSelector

__all__ = [
    # Main components
    "WinnerSelector",
    "RewardSchedule",
    "get_reward_from_place",
    # Configuration
    "WinnerSelectionConfig",
    "RewardScheduleConfig",
    "REWARD_DECIMALS",
    # Result models
    "WinnerSelectionResult",
    "RewardPayout",
]
