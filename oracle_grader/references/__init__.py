"""
Winner reference verification across heights.

Every record names the previous height's winners by short hash. A record
whose references don't match the actual winners position by position fails.

Usage:
    from oracle_grader.references import WinnerReferenceVerifier, short_hashes

    previous = short_hashes(previous_result.winners)
    verifier = WinnerReferenceVerifier(previous, winner_count=10)
    verifier.verify(record)
"""

from .verifier import (
    DEFAULT_REFERENCE_COUNT,
    WinnerReferenceVerifier,
    short_hashes,
    verify_winner_references,
)

__all__ = [
    "WinnerReferenceVerifier",
    "verify_winner_references",
    "short_hashes",
    "DEFAULT_REFERENCE_COUNT",
]
