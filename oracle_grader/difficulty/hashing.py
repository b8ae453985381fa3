"""Hash primitive and difficulty computation."""

from __future__ import annotations

import hashlib
from collections.abc import Callable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..records.models import Record

HashFunction = Callable[[bytes], bytes]
"""Deterministic, pure hash primitive. Output must be at least 8 bytes."""

DIFFICULTY_BYTES = 8


def sha256_hash(data: bytes) -> bytes:
    """Default hash primitive. Hosts inject the network's primitive in production."""
    return hashlib.sha256(data).digest()


def compute_difficulty(record: Record, hash_fn: HashFunction = sha256_hash) -> int:
    """
    Recompute a record's proof-of-work difficulty.

    Hashes record_hash followed by nonce and reads the first 8 bytes
    of the digest as a big-endian unsigned 64-bit integer.

    Raises:
        ValueError: If the hash primitive returns fewer than 8 bytes
    """
    digest = hash_fn(record.record_hash + record.nonce)
    if len(digest) < DIFFICULTY_BYTES:
        raise ValueError(
            f"Hash primitive returned {len(digest)} bytes, need at least {DIFFICULTY_BYTES}"
        )
    return int.from_bytes(digest[:DIFFICULTY_BYTES], "big")
