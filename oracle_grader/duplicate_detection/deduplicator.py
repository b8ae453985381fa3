"""Duplicate submission filtering by identity key."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from .models import DuplicateGroup

if TYPE_CHECKING:
    from ..records.models import Record

logger = logging.getLogger(__name__)


def remove_duplicate_submissions(records: Iterable[Record]) -> list[Record]:
    """
    Keep only the first occurrence of each identity key.

    Two records are duplicates when nonce + record_hash are byte-identical.
    Relative order is preserved, and running this on its own output returns
    the same sequence.

    Args:
        records: Submissions in intake order

    Returns:
        New list with duplicates removed
    """
    seen: set[bytes] = set()
    unique: list[Record] = []
    total = 0

    for record in records:
        total += 1
        key = record.identity_key
        if key in seen:
            continue
        seen.add(key)
        unique.append(record)

    if total != len(unique):
        logger.debug(f"Removed {total - len(unique)} duplicate submissions")

    return unique


def find_duplicate_groups(records: Iterable[Record]) -> list[DuplicateGroup]:
    """
    List identity keys submitted more than once.

    Args:
        records: Submissions in intake order

    Returns:
        DuplicateGroup per repeated key, ordered by first occurrence.
        Empty list if no duplicates found.

    Example:
        records = [rec_a, rec_b, rec_a_copy]
        groups = find_duplicate_groups(records)
        # Returns [DuplicateGroup(identity_key=rec_a.identity_key, first_index=0, occurrences=2)]
    """
    first_seen: dict[bytes, int] = {}
    counts: dict[bytes, int] = {}

    for index, record in enumerate(records):
        key = record.identity_key
        if key not in first_seen:
            first_seen[key] = index
            counts[key] = 0
        counts[key] += 1

    return [
        DuplicateGroup(identity_key=key, first_index=first_seen[key], occurrences=n)
        for key, n in counts.items()
        if n >= 2
    ]
