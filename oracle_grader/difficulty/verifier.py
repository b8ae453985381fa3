"""Self-reported difficulty verification with bounded hashing cost."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from .hashing import HashFunction, compute_difficulty, sha256_hash
from .models import VerificationResult, VerifiedRecord

if TYPE_CHECKING:
    from ..records.models import Record

logger = logging.getLogger(__name__)


def sort_by_claimed_difficulty(records: Iterable[Record]) -> list[Record]:
    """
    Order records by claimed difficulty, highest first.

    Equal claims are ordered by identity key so the result does not
    depend on intake order.
    """
    by_key = sorted(records, key=lambda r: r.identity_key)
    return sorted(by_key, key=lambda r: r.claimed_difficulty, reverse=True)


class DifficultyVerifier:
    """
    Recomputes self-reported difficulty and keeps honest records.

    Scans records in claimed-difficulty order and stops once `limit` honest
    records are found, so at most `limit + misreported records encountered`
    hashes are computed instead of hashing the entire submission set.

    Usage:
        verifier = DifficultyVerifier(hash_fn=lxr_hash, limit=50)
        result = verifier.verify(sort_by_claimed_difficulty(records))
        for verified in result.honest:
            print(verified.verified_difficulty)
    """

    def __init__(self, hash_fn: HashFunction = sha256_hash, limit: int = 50):
        """
        Initialize verifier.

        Args:
            hash_fn: Hash primitive used to recompute difficulty
            limit: Number of honest records to collect before stopping
        """
        if limit < 1:
            raise ValueError(f"limit must be positive, got {limit}")
        self._hash_fn = hash_fn
        self._limit = limit

    @property
    def limit(self) -> int:
        """Number of honest records collected before stopping."""
        return self._limit

    def verify(self, sorted_records: Iterable[Record]) -> VerificationResult:
        """
        Collect up to `limit` honest records.

        Args:
            sorted_records: Records sorted by claimed difficulty descending.
                     See sort_by_claimed_difficulty().

        Returns:
            VerificationResult with honest records in scan order
        """
        honest: list[VerifiedRecord] = []
        hashes = 0
        dishonest = 0

        for record in sorted_records:
            verified = VerifiedRecord(
                record=record,
                verified_difficulty=compute_difficulty(record, self._hash_fn),
            )
            hashes += 1

            if not verified.is_honest:
                dishonest += 1
                logger.debug(
                    f"Skipping record {record.identity_key.hex()[:16]}: claimed "
                    f"{record.claimed_difficulty}, computed {verified.verified_difficulty}"
                )
                continue

            honest.append(verified)
            if len(honest) >= self._limit:
                break

        logger.debug(
            f"Verified {len(honest)} honest records with {hashes} hashes "
            f"({dishonest} misreported)"
        )

        return VerificationResult(
            honest=tuple(honest),
            limit=self._limit,
            hashes_computed=hashes,
            dishonest_count=dishonest,
        )
