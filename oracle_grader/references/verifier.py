"""Verification of a record's references to the previous height's winners."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..records.models import Record

logger = logging.getLogger(__name__)

DEFAULT_REFERENCE_COUNT = 10


def short_hashes(records: Iterable[Record]) -> list[str]:
    """Short hashes of a prior height's winners, in rank order."""
    return [record.short_hash for record in records]


def verify_winner_references(
    refs: Sequence[str],
    previous_winners: Sequence[str],
    expected_count: int | None = None,
) -> bool:
    """
    Check a record's prior-winner references against the actual winners.

    Args:
        refs: The record's prior_winner_refs
        previous_winners: Short hashes of the previous height's winners,
            in rank order. Empty if that height had no winners.
        expected_count: Required number of references. When None, the
            length of previous_winners is used, or DEFAULT_REFERENCE_COUNT
            if previous_winners is empty.

    Returns:
        True if every position matches. With no previous winners, every
        reference must be the empty string.
    """
    if expected_count is not None and len(refs) != expected_count:
        return False

    if not previous_winners:
        if expected_count is None and len(refs) != DEFAULT_REFERENCE_COUNT:
            return False
        return all(ref == "" for ref in refs)

    if len(refs) != len(previous_winners):
        return False

    return all(ref == winner for ref, winner in zip(refs, previous_winners))


class WinnerReferenceVerifier:
    """
    Verifies records of one height against a fixed previous-winner list.

    Usage:
        verifier = WinnerReferenceVerifier(previous_winners, winner_count=10)
        if not verifier.verify(record):
            ...
    """

    def __init__(self, previous_winners: Sequence[str], winner_count: int = DEFAULT_REFERENCE_COUNT):
        """
        Initialize verifier.

        Args:
            previous_winners: Short hashes of the previous height's winners
            winner_count: Number of references every record must carry
        """
        self._previous_winners = tuple(previous_winners)
        self._winner_count = winner_count

    @property
    def previous_winners(self) -> tuple[str, ...]:
        """Short hashes of the previous height's winners."""
        return self._previous_winners

    def verify(self, record: Record) -> bool:
        """Check a record's prior_winner_refs."""
        valid = verify_winner_references(
            record.prior_winner_refs,
            self._previous_winners,
            expected_count=self._winner_count,
        )
        if not valid:
            logger.debug(
                f"Record {record.short_hash or record.record_hash.hex()[:16]} "
                f"has mismatched prior-winner references"
            )
        return valid
