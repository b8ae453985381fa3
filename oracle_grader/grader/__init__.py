"""
Versioned block grading.

This module ties the record, duplicate, difficulty, grading and incentive
components into one pipeline per block height. Each protocol version maps
to a fixed rule set (quorum limit, minimum, winner count, grade band).

Usage:
    from oracle_grader.grader import create_grader

    grader = create_grader(
        version=1,
        height=210_000,
        previous_winners=previous_result.winner_short_hashes,
        registry=registry,
        hash_fn=network_hash,
    )
    grader.add_records(records)
    result = grader.grade()

    if result.is_empty:
        print("No winners this round")
    for payout in result.payouts:
        print(payout.place, payout.short_hash, payout.amount)
"""

from .base import BlockGrader
from .errors import GraderError, GraderStateError, UnsupportedVersionError
from .factory import create_grader
from .models import BlockGradingResult
from .versions import (
    VERSION_PARAMS,
    GraderVersion,
    GradingParams,
    get_params,
    resolve_version,
)

__all__ = [
    # Factory (main entry point)
    "create_grader",
    # Components
    "BlockGrader",
    # Versions
    "GraderVersion",
    "GradingParams",
    "VERSION_PARAMS",
    "get_params",
    "resolve_version",
    # Result models
    "BlockGradingResult",
    # Errors
    "GraderError",
    "UnsupportedVersionError",
    "GraderStateError",
]
